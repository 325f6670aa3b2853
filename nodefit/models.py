from dataclasses import dataclass, field
from typing import List


class CapacityExceeded(Exception):
    """Raised when a node is asked to store a file larger than its free space."""

    def __init__(self, node: "Node", file: "File"):
        self.node = node
        self.file = file
        super().__init__(
            f"Node '{node.name}' cannot accept file '{file.name}' "
            f"(size {file.size}, free {node.free})"
        )


@dataclass(frozen=True)
class File:
    name: str
    size: int

    def describe(self) -> str:
        return f"File '{self.name}' ({self.size})"


@dataclass(eq=False)
class Node:
    """
    A storage node with a fixed capacity.

    occupied only ever grows, by the size of each accepted file. The list of
    accepted files is kept for reporting and is never reordered.
    """
    name: str
    capacity: int
    occupied: int = 0
    files: List[File] = field(default_factory=list, repr=False)

    @property
    def free(self) -> int:
        return self.capacity - self.occupied

    @property
    def utilization(self) -> float:
        if self.capacity == 0:
            return 0.0
        return self.occupied / self.capacity

    def can_accept(self, file: File) -> bool:
        return file.size <= self.free

    def add(self, file: File) -> bool:
        """Store a file on this node; raises CapacityExceeded if it does not fit."""
        if not self.can_accept(file):
            raise CapacityExceeded(self, file)
        self.occupied += file.size
        self.files.append(file)
        return True

    def fresh(self) -> "Node":
        """Empty copy with the same name and capacity."""
        return Node(self.name, self.capacity)

    def describe(self) -> str:
        return (
            f"Node '{self.name}' ({self.free}/{self.capacity}) [used: {self.occupied}]\n"
            f"  Stored Files: {len(self.files)}"
        )
