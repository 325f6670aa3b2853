import argparse
import logging
import sys

from nodefit import config
from nodefit.baselines import STRATEGIES, get_strategy
from nodefit.data_loader import InputFormatError, load_files, load_nodes
from nodefit.report import format_summary, node_frame, write_plan
from nodefit.validation import InputValidator

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Distribute a list of sized files over a list of nodes with limited capacity."
    )
    parser.add_argument("-f", "--files", dest="files", required=True, help="Input file with '<name> <size>' per file")
    parser.add_argument("-n", "--nodes", dest="nodes", required=True, help="Input file with '<name> <capacity>' per node")
    parser.add_argument("-o", "--output", dest="output", default=None, help="Output file for the plan (default: stdout)")
    parser.add_argument("--strategy", type=str, default=config.DEFAULT_STRATEGY, choices=list(STRATEGIES), help="Placement strategy")
    parser.add_argument("--summary", action="store_true", help="Print the list of files and nodes after allocation")
    parser.add_argument("--report", type=str, default=None, help="Write the per-node table to this CSV file")
    parser.add_argument("--plot", action="store_true", help="Save a node utilization chart")
    parser.add_argument("--compare", action="store_true", help="Compare all strategies on the same input")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    logger.info(f"INPUT : file with file names: {args.files}")
    logger.info(f"INPUT : file with nodes     : {args.nodes}")
    logger.info(f"OUTPUT: output file         : {args.output or '<stdout>'}")

    # 1. Load inputs
    try:
        nodes = load_nodes(args.nodes)
        files = load_files(args.files)
    except InputFormatError as e:
        logger.error(f"Malformed input: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    logger.info(f"Found a total of {len(nodes)} Nodes")
    logger.info(f"Found a total of {len(files)} Files")

    validator = InputValidator()
    is_valid, reason = validator.validate(files, nodes)
    if not is_valid:
        return 1
    validator.diagnose(files, nodes)

    # 2. Allocate
    logger.info(f"Distributing with strategy '{args.strategy}'...")
    placement = get_strategy(args.strategy).allocate(files, nodes)

    is_valid, reason = validator.check_placement(placement)
    if not is_valid:
        return 1

    # 3. Write the plan
    try:
        if args.output:
            with open(args.output, "w") as out:
                write_plan(placement, out)
            logger.info(f"Plan written to {args.output}")
        else:
            write_plan(placement, sys.stdout)
    except OSError as e:
        logger.error(f"Cannot write output file: {e}")
        return 1

    if args.summary:
        print(format_summary(placement))

    if args.report:
        try:
            node_frame(nodes).to_csv(args.report, index=False)
        except OSError as e:
            logger.error(f"Cannot write report: {e}")
            return 1
        logger.info(f"Node report written to {args.report}")

    if args.plot:
        # Lazy import, matplotlib is only needed here
        from nodefit.visualization import Visualizer
        path = Visualizer().plot_node_utilization(nodes)
        logger.info(f"📊 Node utilization chart saved to {path}")

    if args.compare:
        from nodefit.evaluation.core import StrategyEvaluator
        results = StrategyEvaluator().evaluate(files, nodes)

        print("\n" + "=" * 60)
        print("STRATEGY COMPARISON")
        print("=" * 60)
        header = f"{'Strategy':<14} | {'Assigned':<8} | {'Unassigned':<10} | {'Placed%':<8} | {'Util std':<8}"
        print(header)
        print("-" * len(header))
        for row in results.itertuples(index=False):
            print(
                f"{row.strategy:<14} | {row.assigned:<8} | {row.unassigned:<10} | "
                f"{row.placed_fraction * 100:<8.1f} | {row.utilization_std:<8.3f}"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
