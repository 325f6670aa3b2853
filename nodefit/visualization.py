import os
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from nodefit import config
from nodefit.models import Node


class Visualizer:
    def __init__(self, output_dir=None):
        self.output_dir = output_dir or config.PLOT_DIR
        os.makedirs(self.output_dir, exist_ok=True)

    def plot_node_utilization(self, nodes: Sequence[Node], filename: str = "node_utilization.png") -> str:
        """Stacked bar per node: occupied vs free space."""
        names = [n.name for n in nodes]
        occupied = np.array([n.occupied for n in nodes])
        free = np.array([n.free for n in nodes])

        fig, ax = plt.subplots(figsize=(max(6, len(nodes) * 0.6), 5))
        ax.bar(names, occupied, label='Occupied', color='tab:blue')
        ax.bar(names, free, bottom=occupied, label='Free', color='lightgray')
        ax.set_title('Node Utilization')
        ax.set_xlabel('Node')
        ax.set_ylabel('Size')
        ax.tick_params(axis='x', rotation=45)
        ax.legend()

        path = os.path.join(self.output_dir, filename)
        plt.tight_layout()
        plt.savefig(path)
        plt.close(fig)
        return path

    def plot_strategy_comparison(self, results: pd.DataFrame, filename: str = "strategy_comparison.png") -> str:
        """Plot mean placed fraction, utilization spread and runtime per strategy."""
        metrics = ['placed_fraction', 'utilization_std', 'runtime']
        means = results.groupby('strategy', sort=False)[metrics].mean()

        fig, axes = plt.subplots(1, len(metrics), figsize=(18, 5))
        for ax, m in zip(axes, metrics):
            ax.bar(means.index, means[m], color='tab:blue')
            ax.set_title(f'Mean {m}')
            ax.tick_params(axis='x', rotation=45)

        path = os.path.join(self.output_dir, filename)
        plt.tight_layout()
        plt.savefig(path)
        plt.close(fig)
        return path
