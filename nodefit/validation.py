import logging
from collections import Counter
from typing import List, Sequence, Tuple

from nodefit.allocator import Placement
from nodefit.models import File, Node

logger = logging.getLogger(__name__)


class InputValidator:
    def __init__(self):
        self.rejection_log = []

    def validate(self, files: Sequence[File], nodes: Sequence[Node]) -> Tuple[bool, str]:
        """Run the hard checks on a file/node set before allocation."""
        checks = [
            self.check_bounds,
        ]

        for check in checks:
            is_valid, reason = check(files, nodes)
            if not is_valid:
                self._reject(check.__name__, reason)
                return False, reason

        return True, "Valid"

    def check_bounds(self, files, nodes):
        """Sizes and capacities must be non-negative integers, nodes must start empty."""
        for f in files:
            if not isinstance(f.size, int) or f.size < 0:
                return False, f"File '{f.name}' has invalid size {f.size!r}"

        for n in nodes:
            if not isinstance(n.capacity, int) or n.capacity < 0:
                return False, f"Node '{n.name}' has invalid capacity {n.capacity!r}"
            if n.occupied != 0:
                return False, f"Node '{n.name}' is not empty (occupied {n.occupied})"

        return True, "Bounds OK"

    def diagnose(self, files: Sequence[File], nodes: Sequence[Node]) -> List[str]:
        """
        Soft checks. None of these stop an allocation, they only explain why
        some files may end up unassigned or why the plan is ambiguous.
        """
        warnings = []

        for label, names in (("file", [f.name for f in files]), ("node", [n.name for n in nodes])):
            repeated = sorted(name for name, count in Counter(names).items() if count > 1)
            if repeated:
                warnings.append(f"Duplicate {label} names: {', '.join(repeated)}")

        total_size = sum(f.size for f in files)
        total_capacity = sum(n.capacity for n in nodes)
        if total_size > total_capacity:
            warnings.append(f"Total file size {total_size} exceeds total node capacity {total_capacity}")

        largest_node = max((n.capacity for n in nodes), default=None)
        if largest_node is None:
            if files:
                warnings.append("No nodes available, every file will be unassigned")
        else:
            too_big = [f.name for f in files if f.size > largest_node]
            if too_big:
                warnings.append(f"{len(too_big)} file(s) larger than any node: {', '.join(too_big)}")

        for message in warnings:
            logger.warning(message)
        return warnings

    def check_placement(self, placement: Placement) -> Tuple[bool, str]:
        """Verify a finished plan against its nodes."""
        files, nodes = placement.files, placement.nodes

        if len(placement) != len(files):
            return self._reject("check_placement", f"Plan has {len(placement)} entries for {len(files)} files")

        for i in range(len(files)):
            if not placement.is_decided(i):
                return self._reject("check_placement", f"File '{files[i].name}' was never decided")

        mapped = [0] * len(nodes)
        for i, file in enumerate(files):
            j = placement.node_index(i)
            if j is None:
                continue
            if not 0 <= j < len(nodes):
                return self._reject("check_placement", f"File '{file.name}' mapped to unknown node #{j}")
            mapped[j] += file.size

        for node, total in zip(nodes, mapped):
            if total > node.capacity:
                return self._reject("check_placement", f"Node '{node.name}' overallocated: {total} > {node.capacity}")
            if total != node.occupied:
                return self._reject(
                    "check_placement",
                    f"Node '{node.name}' reports {node.occupied} occupied but {total} is mapped to it",
                )

        return True, "Placement OK"

    def _reject(self, check_name: str, reason: str) -> Tuple[bool, str]:
        self.rejection_log.append({'reason': reason, 'check': check_name})
        logger.error(reason)
        return False, reason
