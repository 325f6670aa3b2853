import io
import pytest
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from nodefit.allocator import allocate
from nodefit.models import File, Node
from nodefit.report import format_summary, node_frame, placement_frame, plan_lines, summarize, write_plan


def _placement():
    files = [File("f1", 6), File("f2", 6), File("huge", 50)]
    nodes = [Node("n1", 10), Node("n2", 10)]
    return allocate(files, nodes), nodes


def test_plan_lines_use_null_label():
    placement, _ = _placement()
    assert plan_lines(placement) == ["f1 n1", "f2 n2", "huge NULL"]


def test_write_plan():
    placement, _ = _placement()
    out = io.StringIO()
    write_plan(placement, out)
    assert out.getvalue() == "f1 n1\nf2 n2\nhuge NULL\n"


def test_frames():
    placement, nodes = _placement()

    files_df = placement_frame(placement)
    assert list(files_df['file']) == ["f1", "f2", "huge"]
    assert files_df['node'].isna().tolist() == [False, False, True]

    nodes_df = node_frame(nodes)
    assert list(nodes_df.columns) == ['node', 'capacity', 'occupied', 'free', 'utilization', 'n_files']
    assert nodes_df['occupied'].tolist() == [6, 6]
    assert nodes_df['n_files'].tolist() == [1, 1]


def test_summarize():
    placement, _ = _placement()
    stats = summarize(placement)

    assert stats['assigned'] == 2
    assert stats['unassigned'] == 1
    assert stats['unassigned_size'] == 50
    assert stats['placed_fraction'] == pytest.approx(12 / 62)
    assert stats['utilization_mean'] == pytest.approx(0.6)
    assert stats['utilization_std'] == pytest.approx(0.0)


def test_summarize_empty():
    stats = summarize(allocate([], []))
    assert stats['files'] == 0
    assert stats['placed_fraction'] == 1.0
    assert stats['utilization_max'] == 0.0


def test_format_summary():
    placement, _ = _placement()
    text = format_summary(placement)
    assert "  File 'huge' (50)" in text
    assert "  Node 'n1' (4/10) [used: 6]" in text
    assert "Assigned 2/3 files" in text
