import argparse
import logging

from lookupbench.config import load_config, output_from_config, plan_from_config
from lookupbench.experiments.aggregate import (
    find_crossovers,
    log_crossovers,
    write_crossover_csv,
    write_summary_csv,
)
from lookupbench.experiments.runner import BenchmarkRunner
from lookupbench.visualization import build_timing_plots

logger = logging.getLogger("lookupbench")


def configure_logging(log_level="INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(config: dict):
    """Run the benchmark grid described by ``config`` and write artefacts.

    Returns the list of timing results in measurement order.
    """
    plan = plan_from_config(config)
    output = output_from_config(config)

    runner = BenchmarkRunner(output.results_dir if output.enabled else None)
    results = runner.run(plan)

    crossovers = find_crossovers(results)
    log_crossovers(crossovers)
    if runner.timestamp_dir is None:
        return results
    try:
        write_summary_csv(runner.timestamp_dir)
        write_crossover_csv(runner.timestamp_dir, crossovers)
        if output.plots:
            build_timing_plots(results, runner.timestamp_dir)
    except Exception as e:  # pragma: no cover
        logger.warning("Failed to write benchmark artefacts: %s", e)
    logger.info("Benchmark artefacts in %s", runner.timestamp_dir)
    return results


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Linear scan vs set lookup timing benchmark")
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML config file (default: built-in grid)",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.get("log_level", "INFO"))
    run(config)
