import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from nodefit.allocator import Placement, allocate
from nodefit.models import File, Node
from nodefit.validation import InputValidator


def test_valid_input():
    validator = InputValidator()
    assert validator.validate([File("a", 1)], [Node("n", 1)]) == (True, "Valid")
    assert validator.rejection_log == []


def test_negative_size_rejected():
    validator = InputValidator()
    is_valid, reason = validator.validate([File("a", -1)], [Node("n", 1)])
    assert not is_valid
    assert "'a'" in reason
    assert validator.rejection_log[0]['check'] == 'check_bounds'


def test_non_integer_capacity_rejected():
    is_valid, reason = InputValidator().validate([], [Node("n", 2.5)])
    assert not is_valid
    assert "capacity" in reason


def test_used_node_rejected():
    is_valid, _ = InputValidator().validate([], [Node("n", 5, occupied=1)])
    assert not is_valid


def test_diagnose_warnings():
    files = [File("a", 8), File("a", 1), File("b", 20)]
    nodes = [Node("n1", 10), Node("n2", 5)]
    warnings = InputValidator().diagnose(files, nodes)

    assert any("Duplicate file names: a" in w for w in warnings)
    assert any("exceeds total node capacity" in w for w in warnings)
    assert any("larger than any node: b" in w for w in warnings)


def test_diagnose_no_nodes():
    warnings = InputValidator().diagnose([File("a", 1)], [])
    assert any("No nodes" in w for w in warnings)


def test_diagnose_clean_input():
    assert InputValidator().diagnose([File("a", 1)], [Node("n", 5)]) == []


def test_check_placement_ok():
    files = [File("a", 6), File("b", 6), File("c", 20)]
    nodes = [Node("n1", 10), Node("n2", 10)]
    placement = allocate(files, nodes)
    assert InputValidator().check_placement(placement) == (True, "Placement OK")


def test_check_placement_undecided_file():
    placement = Placement([File("a", 1)], [Node("n", 1)])
    validator = InputValidator()
    is_valid, reason = validator.check_placement(placement)
    assert not is_valid
    assert "never decided" in reason


def test_check_placement_overallocated():
    nodes = [Node("n", 5)]
    placement = Placement([File("a", 4), File("b", 4)], nodes)
    # Bypass Node.add to fake a broken plan
    placement.decide(0, 0)
    placement.decide(1, 0)
    nodes[0].occupied = 8

    is_valid, reason = InputValidator().check_placement(placement)
    assert not is_valid
    assert "overallocated" in reason


def test_check_placement_occupied_mismatch():
    nodes = [Node("n", 5)]
    placement = Placement([File("a", 4)], nodes)
    placement.decide(0, None)
    nodes[0].occupied = 4

    is_valid, reason = InputValidator().check_placement(placement)
    assert not is_valid
    assert "reports 4 occupied" in reason
