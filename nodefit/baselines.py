from typing import Dict, Optional, Sequence

from nodefit.allocator import LoadBalancingAllocator, Placement
from nodefit.models import File, Node
from nodefit.ordering import file_sort_key, sorted_node_indices


def _files_largest_first(files: Sequence[File]):
    return sorted(range(len(files)), key=lambda i: file_sort_key(files[i]))


class ResortingAllocator:
    """Baseline 1: same policy as LoadBalancingAllocator, full node re-sort before every file"""
    name = "resort"

    def allocate(self, files: Sequence[File], nodes: Sequence[Node]) -> Placement:
        placement = Placement(files, nodes)

        for i in _files_largest_first(files):
            chosen = None
            for j in sorted_node_indices(nodes):
                if nodes[j].can_accept(files[i]):
                    chosen = j
                    break
            if chosen is not None:
                nodes[chosen].add(files[i])
            placement.decide(i, chosen)
        return placement


class GreedyFirstFit:
    """Baseline 2: first node in input order with room"""
    name = "first-fit"

    def allocate(self, files: Sequence[File], nodes: Sequence[Node]) -> Placement:
        placement = Placement(files, nodes)

        for i in _files_largest_first(files):
            chosen = None
            for j, node in enumerate(nodes):
                if node.can_accept(files[i]):
                    chosen = j
                    break
            if chosen is not None:
                nodes[chosen].add(files[i])
            placement.decide(i, chosen)
        return placement


class BestFit:
    """Baseline 3: Best-fit bin packing (Minimizes leftover space)"""
    name = "best-fit"

    def allocate(self, files: Sequence[File], nodes: Sequence[Node]) -> Placement:
        placement = Placement(files, nodes)

        for i in _files_largest_first(files):
            file = files[i]
            best_node: Optional[int] = None
            min_waste = float('inf')

            for j, node in enumerate(nodes):
                if not node.can_accept(file):
                    continue
                # Free space left behind if the file goes here
                waste = node.free - file.size
                if waste < min_waste:
                    min_waste = waste
                    best_node = j

            if best_node is not None:
                nodes[best_node].add(file)
            placement.decide(i, best_node)
        return placement


STRATEGIES: Dict[str, type] = {
    LoadBalancingAllocator.name: LoadBalancingAllocator,
    ResortingAllocator.name: ResortingAllocator,
    GreedyFirstFit.name: GreedyFirstFit,
    BestFit.name: BestFit,
}


def get_strategy(name: str):
    """Instantiate a strategy by its command line name."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        raise KeyError(f"Unknown strategy '{name}'. Options are: {', '.join(STRATEGIES)}") from None
