"""Run every placement strategy on the same inputs and compare the plans"""

import logging
import time
from typing import Dict, List, Optional, Sequence

import pandas as pd
from tqdm import tqdm

from nodefit.baselines import STRATEGIES
from nodefit.models import File, Node
from nodefit.report import summarize

logger = logging.getLogger(__name__)

METRICS = [
    'assigned',
    'unassigned',
    'unassigned_size',
    'placed_fraction',
    'utilization_std',
    'utilization_max',
    'runtime',
]


class StrategyEvaluator:
    def __init__(self, strategies: Optional[Dict[str, type]] = None):
        self.strategies = strategies or STRATEGIES

    def evaluate(self, files: Sequence[File], nodes: Sequence[Node], scenario_id: str = "input") -> pd.DataFrame:
        """
        One row per strategy. Every strategy gets empty copies of the nodes,
        the caller's nodes are left untouched.
        """
        rows = []
        for name, strategy_cls in self.strategies.items():
            rows.append(self._evaluate_strategy(name, strategy_cls(), files, nodes, scenario_id))
        return pd.DataFrame(rows, columns=['scenario_id', 'strategy'] + METRICS)

    def _evaluate_strategy(self, name, strategy, files, nodes, scenario_id) -> dict:
        fresh_nodes = [node.fresh() for node in nodes]

        start_time = time.perf_counter()
        placement = strategy.allocate(files, fresh_nodes)
        runtime = time.perf_counter() - start_time

        stats = summarize(placement)
        row = {'scenario_id': scenario_id, 'strategy': name, 'runtime': runtime}
        for metric in METRICS:
            if metric in stats:
                row[metric] = stats[metric]
        logger.debug(f"{scenario_id} / {name}: {stats['assigned']}/{stats['files']} assigned in {runtime:.4f}s")
        return row

    def run_benchmark(self, scenarios: List[dict]) -> pd.DataFrame:
        """Evaluate all strategies on a list of {'scenario_id', 'files', 'nodes'} scenarios."""
        frames = []
        for scenario in tqdm(scenarios, desc="Evaluating"):
            frames.append(self.evaluate(scenario['files'], scenario['nodes'], scenario.get('scenario_id', 'unknown')))
        if not frames:
            return pd.DataFrame(columns=['scenario_id', 'strategy'] + METRICS)
        return pd.concat(frames, ignore_index=True)


def summarize_benchmark(results: pd.DataFrame) -> pd.DataFrame:
    """Mean of every metric per strategy."""
    return results.groupby('strategy', sort=False)[METRICS].mean()
