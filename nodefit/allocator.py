"""Greedy file-to-node placement with incremental node ordering."""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from nodefit.models import File, Node
from nodefit.ordering import file_sort_key, node_precedes, sorted_node_indices

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, Optional[int], Tuple[int, ...]], None]


class Placement:
    """
    Result of an allocation pass: one entry per input file.

    Files and nodes are referred to by their index in the caller's sequences,
    so files sharing a name stay distinct. An entry is None while the file is
    unassigned.
    """

    def __init__(self, files: Sequence[File], nodes: Sequence[Node]):
        self.files = files
        self.nodes = nodes
        self._assignment: List[Optional[int]] = [None] * len(files)
        self._decided: List[bool] = [False] * len(files)
        self.decision_order: List[int] = []

    def __len__(self) -> int:
        return len(self._assignment)

    def decide(self, file_index: int, node_index: Optional[int]) -> None:
        """Record the final decision for a file. Each file is decided once."""
        if self._decided[file_index]:
            raise ValueError(f"File #{file_index} ('{self.files[file_index].name}') already decided")
        self._decided[file_index] = True
        self._assignment[file_index] = node_index
        self.decision_order.append(file_index)

    def is_decided(self, file_index: int) -> bool:
        return self._decided[file_index]

    def node_index(self, file_index: int) -> Optional[int]:
        return self._assignment[file_index]

    def node_for(self, file_index: int) -> Optional[Node]:
        index = self._assignment[file_index]
        return None if index is None else self.nodes[index]

    def items(self) -> Iterator[Tuple[File, Optional[Node]]]:
        """(file, node or None) pairs in input order."""
        for i, file in enumerate(self.files):
            yield file, self.node_for(i)

    def assigned(self) -> List[int]:
        return [i for i, j in enumerate(self._assignment) if j is not None]

    def unassigned(self) -> List[int]:
        return [i for i, j in enumerate(self._assignment) if j is None]

    def files_on(self, node_index: int) -> List[int]:
        return [i for i, j in enumerate(self._assignment) if j == node_index]

    def as_dict(self) -> Dict[str, Optional[str]]:
        """
        File name -> node name (None when unassigned).

        Only meaningful when file names are unique; a repeated name keeps the
        entry of its last occurrence.
        """
        return {file.name: (node.name if node is not None else None) for file, node in self.items()}


class LoadBalancingAllocator:
    """
    Best-fit-decreasing style allocator.

    Files are taken largest first. Each one goes to the first node, in
    ascending load order, that has room for it. After a placement only the
    chosen node's key has changed, and it can only have moved later, so it is
    bubbled rightwards into place instead of re-sorting every node.
    """

    name = "load-balance"

    def allocate(
        self,
        files: Sequence[File],
        nodes: Sequence[Node],
        on_step: Optional[StepCallback] = None,
    ) -> Placement:
        placement = Placement(files, nodes)
        file_order = sorted(range(len(files)), key=lambda i: file_sort_key(files[i]))
        node_order = sorted_node_indices(nodes)

        for i in file_order:
            file = files[i]
            position = self._first_fit(file, nodes, node_order)
            if position is None:
                placement.decide(i, None)
                logger.debug(f"File '{file.name}' ({file.size}) left unassigned")
            else:
                j = node_order[position]
                nodes[j].add(file)
                placement.decide(i, j)
                self._reposition(nodes, node_order, position)
                logger.debug(f"File '{file.name}' ({file.size}) -> node '{nodes[j].name}'")

            if on_step is not None:
                on_step(i, placement.node_index(i), tuple(node_order))

        logger.info(
            f"Placed {len(placement.assigned())}/{len(files)} files on {len(nodes)} nodes"
        )
        return placement

    @staticmethod
    def _first_fit(file: File, nodes: Sequence[Node], node_order: List[int]) -> Optional[int]:
        for position, j in enumerate(node_order):
            if nodes[j].can_accept(file):
                return position
        return None

    @staticmethod
    def _reposition(nodes: Sequence[Node], node_order: List[int], position: int) -> int:
        """Move the node at position rightwards until the order holds again."""
        moved = node_order[position]
        last = len(node_order) - 1
        while position < last and node_precedes(nodes, node_order[position + 1], moved):
            node_order[position] = node_order[position + 1]
            position += 1
        node_order[position] = moved
        return position


def allocate(
    files: Sequence[File],
    nodes: Sequence[Node],
    on_step: Optional[StepCallback] = None,
) -> Placement:
    """Place files on nodes with the default strategy. Nodes are updated in place."""
    return LoadBalancingAllocator().allocate(files, nodes, on_step=on_step)
