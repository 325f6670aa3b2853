"""Sort policies for files and nodes."""

from typing import List, Sequence, Tuple

from nodefit.models import File, Node


def file_sort_key(file: File) -> int:
    """Largest files first. Use with a stable sort so equal sizes keep input order."""
    return -file.size


def node_sort_key(node: Node, position: int) -> Tuple[int, int, int]:
    """
    Least loaded nodes first.

    Ties on occupied space go to the node with more free space (the larger
    node), then to the node that came first in the input.
    """
    return (node.occupied, -node.free, position)


def node_precedes(nodes: Sequence[Node], a: int, b: int) -> bool:
    """True if node index a sorts strictly before node index b."""
    return node_sort_key(nodes[a], a) < node_sort_key(nodes[b], b)


def sorted_node_indices(nodes: Sequence[Node]) -> List[int]:
    return sorted(range(len(nodes)), key=lambda j: node_sort_key(nodes[j], j))


def is_node_order_valid(order: Sequence[int], nodes: Sequence[Node]) -> bool:
    """Check that every adjacent pair of the permutation is in node order."""
    return all(node_precedes(nodes, order[k], order[k + 1]) for k in range(len(order) - 1))
