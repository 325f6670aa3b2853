"""Plan output and summaries."""

from typing import IO, List, Sequence

import numpy as np
import pandas as pd

from nodefit import config
from nodefit.allocator import Placement
from nodefit.models import Node


def plan_lines(placement: Placement) -> List[str]:
    """'<file> <node>' per file in input order, the unassigned label when there is no node."""
    return [
        f"{file.name} {node.name if node is not None else config.UNASSIGNED_LABEL}"
        for file, node in placement.items()
    ]


def write_plan(placement: Placement, stream: IO[str]) -> None:
    for line in plan_lines(placement):
        stream.write(line + "\n")


def placement_frame(placement: Placement) -> pd.DataFrame:
    rows = []
    for file, node in placement.items():
        rows.append({
            'file': file.name,
            'size': file.size,
            'node': node.name if node is not None else None,
        })
    return pd.DataFrame(rows, columns=['file', 'size', 'node'])


def node_frame(nodes: Sequence[Node]) -> pd.DataFrame:
    rows = []
    for node in nodes:
        rows.append({
            'node': node.name,
            'capacity': node.capacity,
            'occupied': node.occupied,
            'free': node.free,
            'utilization': node.utilization,
            'n_files': len(node.files),
        })
    return pd.DataFrame(rows, columns=['node', 'capacity', 'occupied', 'free', 'utilization', 'n_files'])


def summarize(placement: Placement) -> dict:
    """Aggregate metrics of a finished plan."""
    sizes = np.array([f.size for f in placement.files], dtype=float)
    assigned = placement.assigned()
    unassigned = placement.unassigned()
    utilization = np.array([n.utilization for n in placement.nodes], dtype=float)

    total_size = float(sizes.sum()) if len(sizes) else 0.0
    placed_size = float(sizes[assigned].sum()) if assigned else 0.0

    return {
        'files': len(placement.files),
        'nodes': len(placement.nodes),
        'assigned': len(assigned),
        'unassigned': len(unassigned),
        'placed_size': placed_size,
        'unassigned_size': total_size - placed_size,
        'placed_fraction': placed_size / total_size if total_size > 0 else 1.0,
        'utilization_mean': float(np.mean(utilization)) if len(utilization) else 0.0,
        'utilization_std': float(np.std(utilization)) if len(utilization) else 0.0,
        'utilization_max': float(np.max(utilization)) if len(utilization) else 0.0,
    }


def format_summary(placement: Placement) -> str:
    lines = ["", "List of Files:"]
    for file in placement.files:
        lines.append("  " + file.describe())

    lines.append("")
    lines.append("List of Nodes:")
    for node in placement.nodes:
        for part in node.describe().splitlines():
            lines.append("  " + part)

    stats = summarize(placement)
    lines.append("")
    lines.append(
        f"Assigned {stats['assigned']}/{stats['files']} files "
        f"({stats['placed_fraction'] * 100:.1f}% of total size), "
        f"{stats['unassigned']} unassigned"
    )
    lines.append(
        f"Node utilization: mean {stats['utilization_mean']:.3f}, "
        f"std {stats['utilization_std']:.3f}, max {stats['utilization_max']:.3f}"
    )
    return "\n".join(lines)
