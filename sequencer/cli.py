"""Command-line entry point: step order and total completion time.

Usage:
    sequencer input.txt --workers 5 --delay 60
    sequencer --random 12 --seed 7 --report
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from sequencer.config import SchedulerConfig, DEFAULT_BASE_DELAY, DEFAULT_WORKER_COUNT
from sequencer.errors import SequencerError
from sequencer.metrics.collector import MetricsCollector
from sequencer.models.requirement import PrecedenceSet
from sequencer.schedulers.sequential import SequentialScheduler
from sequencer.schedulers.workforce import WorkforceScheduler
from sequencer.simulator.generator import ScenarioGenerator

logger = logging.getLogger(__name__)

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequencer",
        description="Sequencer — dependency-ordered step scheduling",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("input", nargs="?", type=Path, help="File of 'Step X must be finished before step Y can begin.' lines")
    source.add_argument("--random", type=int, metavar="N", help="Use a generated scenario with N steps instead of a file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for --random (default: 42)")
    parser.add_argument("--density", type=float, default=0.3, help="Requirement probability for --random (default: 0.3)")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKER_COUNT, help=f"Worker pool size (default: {DEFAULT_WORKER_COUNT})")
    parser.add_argument("--delay", type=int, default=DEFAULT_BASE_DELAY, help=f"Base delay per step (default: {DEFAULT_BASE_DELAY})")
    parser.add_argument("--report", action="store_true", help="Print the metrics report")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def load_precedence(args: argparse.Namespace) -> PrecedenceSet:
    """Read requirements from the input file or generate them."""
    if args.random is not None:
        return ScenarioGenerator(seed=args.seed).generate(num_steps=args.random, density=args.density)
    lines = args.input.read_text(encoding="utf-8").splitlines()
    return PrecedenceSet.from_lines(lines)


def run(precedence: PrecedenceSet, config: SchedulerConfig, report: bool = False) -> tuple[str, int]:
    """Compute both answers on independent trackers and print them."""
    order = SequentialScheduler().order(precedence.tracker())
    console.print(f"Part 1: [bold]{order}[/bold]")

    team = WorkforceScheduler.from_config(config)
    total_time = team.complete_steps(precedence.tracker())
    console.print(f"Part 2: [bold]{total_time}[/bold]")

    if report:
        metrics = MetricsCollector(console=console)
        metrics.calculate(
            event_log=team.event_log,
            workers=team.workers,
            total_time=total_time,
            total_steps=len(precedence.universe),
            scheduler_name=team.name,
            order=order,
        )
        metrics.print_report()

    return order, total_time


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = SchedulerConfig(worker_count=args.workers, base_delay=args.delay)
        precedence = load_precedence(args)
        logger.info("Loaded %r", precedence)
        run(precedence, config, report=args.report)
    except (SequencerError, ValueError, OSError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
