"""Metrics Collector — summarizes a scheduling run."""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from sequencer.models.worker import Worker
from sequencer.simulator.events import Event, EventType


@dataclass
class MetricsReport:
    """Container for all computed metrics."""
    scheduler_name: str = ""
    order: str = ""
    total_steps: int = 0
    steps_completed: int = 0
    total_time: int = 0
    avg_worker_utilization: float = 0.0
    per_worker_utilization: dict[str, float] = field(default_factory=dict)
    per_worker_steps: dict[str, str] = field(default_factory=dict)


class MetricsCollector:
    """Computes and reports scheduling metrics."""

    def __init__(self, console: Optional[Console] = None):
        self.report: Optional[MetricsReport] = None
        self.console = console or Console()

    def calculate(
        self,
        event_log: list[Event],
        workers: list[Worker],
        total_time: int,
        total_steps: int,
        scheduler_name: str,
        order: str = "",
    ) -> MetricsReport:
        """Compute metrics from a finished run's events and worker states."""
        report = MetricsReport(
            scheduler_name=scheduler_name,
            order=order,
            total_steps=total_steps,
            total_time=total_time,
        )

        finished = [e for e in sorted(event_log) if e.event_type == EventType.STEP_FINISHED]
        report.steps_completed = len(finished)

        for worker in workers:
            report.per_worker_steps[worker.id] = "".join(
                e.step for e in finished if e.worker_id == worker.id
            )

        # Utilization = busy ticks / total ticks
        if total_time > 0 and workers:
            for worker in workers:
                report.per_worker_utilization[worker.id] = min(1.0, worker.busy_ticks / total_time)
            report.avg_worker_utilization = (
                sum(report.per_worker_utilization.values()) / len(workers)
            )

        self.report = report
        return report

    def print_report(self) -> None:
        """Print the metrics tables."""
        if self.report is None:
            self.console.print("[yellow]No metrics calculated yet. Run calculate() first.[/yellow]")
            return

        r = self.report
        self.console.print(Panel(
            f"[bold cyan]Sequencer — Schedule Report[/bold cyan]\n"
            f"Scheduler: [bold yellow]{r.scheduler_name}[/bold yellow]",
            border_style="cyan",
        ))

        summary = Table(title="Summary", border_style="blue")
        summary.add_column("Metric", style="bold")
        summary.add_column("Value", justify="right")
        summary.add_row("Step Order", r.order or "-")
        summary.add_row("Total Steps", str(r.total_steps))
        summary.add_row("Completed", f"[green]{r.steps_completed}[/green]")
        summary.add_row("Total Time (ticks)", str(r.total_time))
        self.console.print(summary)

        if r.per_worker_utilization:
            worker_table = Table(title="Worker Utilization", border_style="magenta")
            worker_table.add_column("Worker", style="bold")
            worker_table.add_column("Steps")
            worker_table.add_column("Utilization", justify="right")
            for worker_id, util in sorted(r.per_worker_utilization.items()):
                bar_len = int(util * 20)
                bar = "█" * bar_len + "░" * (20 - bar_len)
                worker_table.add_row(worker_id, r.per_worker_steps.get(worker_id, ""), f"{bar} {util:.1%}")
            worker_table.add_row(
                "[bold]Average[/bold]",
                "",
                f"[bold]{r.avg_worker_utilization:.1%}[/bold]",
            )
            self.console.print(worker_table)
