"""Aggregation and rendering of probe results."""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

from rich.console import Console

from model_probe.core.state import (
    AvailableModel,
    ProbeReport,
    ProbeResult,
    ProbeSummary,
    UnavailableModel,
)
from model_probe.prober import ProbeListener

RULE = "=" * 80


def partition(results: Sequence[ProbeResult]) -> Tuple[List[ProbeResult], List[ProbeResult]]:
    """Split results into (available, unavailable), keeping candidate order."""
    available = [r for r in results if r.available]
    unavailable = [r for r in results if not r.available]
    return available, unavailable


def summarize(results: Sequence[ProbeResult]) -> ProbeSummary:
    available, unavailable = partition(results)
    return ProbeSummary(
        total=len(results),
        available=len(available),
        unavailable=len(unavailable),
    )


def build_report(results: Sequence[ProbeResult]) -> ProbeReport:
    """Build the structured payload for a finished run."""
    available, unavailable = partition(results)
    return ProbeReport(
        summary=summarize(results),
        available_models=[
            AvailableModel(model_id=r.model_id, response_time=r.response_time)
            for r in available
        ],
        unavailable_models=[
            UnavailableModel(model_id=r.model_id, error_type=r.error_type, error_message=r.error_message)
            for r in unavailable
        ],
        all_results=list(results),
    )


def exit_status(results: Sequence[ProbeResult]) -> int:
    """0 when at least one model answered, 1 otherwise."""
    return 0 if any(r.available for r in results) else 1


class ConsoleReporter(ProbeListener):
    """Streams per-model progress to the terminal and prints the final summary."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_start(self, model_id: str) -> None:
        self.console.print(f"\n[bold]Testing:[/bold] {model_id}")

    def on_success(self, result: ProbeResult, response_id: Optional[str], usage: Optional[Dict[str, Any]]) -> None:
        self.console.print("  [green]✅ AVAILABLE[/green]")
        self.console.print(f"  Response time: {result.response_time}ms")
        self.console.print(f"  Response ID: {response_id}")
        self.console.print(f"  Usage: {json.dumps(usage, default=str)}", markup=False)

    def on_failure(self, result: ProbeResult, status_code: Optional[int]) -> None:
        self.console.print("  [red]❌ NOT AVAILABLE[/red]")
        self.console.print(f"  Error type: {result.error_type}", markup=False)
        self.console.print(f"  Error message: {result.error_message}", markup=False)
        self.console.print(f"  Status: {status_code or 'N/A'}")

    def render_header(self) -> None:
        self.console.print("Testing model availability...\n")
        self.console.print(RULE)

    def render_summary(self, results: Sequence[ProbeResult]) -> None:
        available, unavailable = partition(results)

        self.console.print("\n" + RULE)
        self.console.print("\n[bold]Summary:[/bold]")
        self.console.print(RULE)

        self.console.print(f"\n[green]✅ Available models ({len(available)}):[/green]")
        for r in available:
            self.console.print(f"  - {r.model_id} ({r.response_time}ms)")

        self.console.print(f"\n[red]❌ Unavailable models ({len(unavailable)}):[/red]")
        for r in unavailable:
            self.console.print(f"  - {r.model_id}")
            self.console.print(f"    Error: {r.error_type} - {r.error_message}", markup=False)

        self.console.print("\n" + RULE)
