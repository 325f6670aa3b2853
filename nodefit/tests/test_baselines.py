import pytest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from nodefit.allocator import LoadBalancingAllocator
from nodefit.baselines import STRATEGIES, BestFit, GreedyFirstFit, ResortingAllocator, get_strategy
from nodefit.models import File, Node


def _scenario():
    files = [File("a", 4), File("b", 3), File("c", 2)]
    nodes = [Node("small", 5), Node("large", 10)]
    return files, nodes


def test_first_fit_uses_input_order():
    files, nodes = _scenario()
    placement = GreedyFirstFit().allocate(files, nodes)
    # a -> small, b -> large (small has 1 left), c -> large
    assert placement.as_dict() == {"a": "small", "b": "large", "c": "large"}


def test_best_fit_minimizes_leftover():
    files, nodes = _scenario()
    placement = BestFit().allocate(files, nodes)
    # a leaves 1 on small, b leaves 7 on large, c leaves 5 on large
    assert placement.as_dict() == {"a": "small", "b": "large", "c": "large"}
    assert [n.occupied for n in nodes] == [4, 5]


def test_best_fit_picks_tightest_node():
    nodes = [Node("roomy", 20), Node("snug", 6)]
    placement = BestFit().allocate([File("f", 5)], nodes)
    assert placement.as_dict() == {"f": "snug"}


def test_resort_matches_load_balance_on_small_case():
    files, nodes = _scenario()
    other = [n.fresh() for n in nodes]
    a = ResortingAllocator().allocate(files, nodes)
    b = LoadBalancingAllocator().allocate(files, other)
    assert a.as_dict() == b.as_dict() == {"a": "large", "b": "small", "c": "small"}


def test_unplaceable_files_stay_unassigned():
    nodes = [Node("n", 3)]
    for strategy_cls in STRATEGIES.values():
        fresh = [n.fresh() for n in nodes]
        placement = strategy_cls().allocate([File("huge", 4)], fresh)
        assert placement.unassigned() == [0]


def test_get_strategy():
    assert isinstance(get_strategy("load-balance"), LoadBalancingAllocator)
    assert isinstance(get_strategy("best-fit"), BestFit)
    with pytest.raises(KeyError, match="Options are"):
        get_strategy("nope")
