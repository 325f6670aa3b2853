"""Generate reproducible file and node lists"""

import argparse
import os
from typing import List, Tuple

import numpy as np

from nodefit import config
from nodefit.models import File, Node


class SyntheticInputGenerator:
    def __init__(self, seed: int = config.DEFAULT_SEED):
        self.rng = np.random.RandomState(seed)

    def generate(
        self,
        num_files: int,
        num_nodes: int,
        load_factor: float = config.DEFAULT_LOAD_FACTOR,
        mean_size: float = 100.0,
        prefix: str = "",
    ) -> Tuple[List[File], List[Node]]:
        """
        Random files and nodes.

        File sizes are log-normal around mean_size. Total node capacity is the
        total file size divided by load_factor, so a load factor above 1 can
        never place everything. Capacity is split unevenly across nodes.
        """
        sigma = 1.0
        mu = np.log(mean_size) - sigma ** 2 / 2
        sizes = np.maximum(self.rng.lognormal(mu, sigma, size=num_files).round(), 0).astype(int)
        files = [File(f"{prefix}file_{i}", int(s)) for i, s in enumerate(sizes)]

        nodes = []
        if num_nodes > 0:
            total_capacity = int(sizes.sum() / load_factor) if load_factor > 0 else 0
            shares = self.rng.dirichlet(np.full(num_nodes, 2.0))
            capacities = np.floor(shares * total_capacity).astype(int)
            nodes = [Node(f"{prefix}node_{j}", int(c)) for j, c in enumerate(capacities)]

        return files, nodes

    def generate_suite(self) -> dict:
        """
        Scenarios stratified by difficulty:
        - easy: ample capacity, few files
        - medium: tight capacity
        - hard: more demand than capacity, many files
        """
        suite = {'easy': [], 'medium': [], 'hard': []}

        for i in range(10):
            suite['easy'].append(self._scenario(
                f"easy_{i}", self.rng.randint(5, 30), self.rng.randint(2, 6), 0.5))
        for i in range(10):
            suite['medium'].append(self._scenario(
                f"medium_{i}", self.rng.randint(30, 150), self.rng.randint(4, 12), 0.9))
        for i in range(10):
            suite['hard'].append(self._scenario(
                f"hard_{i}", self.rng.randint(150, 500), self.rng.randint(8, 32), 1.3))

        return suite

    def _scenario(self, scenario_id: str, num_files: int, num_nodes: int, load_factor: float) -> dict:
        files, nodes = self.generate(int(num_files), int(num_nodes), load_factor)
        return {'scenario_id': scenario_id, 'files': files, 'nodes': nodes}


def write_inputs(files: List[File], nodes: List[Node], directory: str) -> Tuple[str, str]:
    """Write files.txt and nodes.txt in the '<name> <size>' input format."""
    os.makedirs(directory, exist_ok=True)
    files_path = os.path.join(directory, "files.txt")
    nodes_path = os.path.join(directory, "nodes.txt")

    with open(files_path, "w") as f:
        f.write(f"{config.COMMENT_PREFIX} name size\n")
        for file in files:
            f.write(f"{file.name} {file.size}\n")

    with open(nodes_path, "w") as f:
        f.write(f"{config.COMMENT_PREFIX} name capacity\n")
        for node in nodes:
            f.write(f"{node.name} {node.capacity}\n")

    return files_path, nodes_path


def main(argv=None):
    parser = argparse.ArgumentParser(description="Write a synthetic file list and node list")
    parser.add_argument("--out", type=str, required=True, help="Output directory")
    parser.add_argument("--files", type=int, default=100, help="Number of files")
    parser.add_argument("--nodes", type=int, default=10, help="Number of nodes")
    parser.add_argument("--load_factor", type=float, default=config.DEFAULT_LOAD_FACTOR, help="Total file size / total capacity")
    parser.add_argument("--seed", type=int, default=config.DEFAULT_SEED, help="Random seed")
    args = parser.parse_args(argv)

    generator = SyntheticInputGenerator(seed=args.seed)
    files, nodes = generator.generate(args.files, args.nodes, args.load_factor)
    files_path, nodes_path = write_inputs(files, nodes, args.out)
    print(f"✅ Wrote {len(files)} files to {files_path}")
    print(f"✅ Wrote {len(nodes)} nodes to {nodes_path}")


if __name__ == "__main__":
    main()
