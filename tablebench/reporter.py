"""Plain-text benchmark report and the optional rich details table."""

from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tablebench.runner import BenchmarkResult

MICROS_SUFFIX = " (micros)"


def format_report(result: BenchmarkResult, micros_suffix: bool = True) -> List[str]:
    """
    Build the four plain-text report lines.

    The header always names the item and run counts; ``micros_suffix`` controls
    whether the statistic lines end with `` (micros)``.
    """
    suffix = MICROS_SUFFIX if micros_suffix else ""
    return [
        f"Table with {result.item_count} items, {result.run_count} runs:",
        f"Min: {result.min}{suffix}",
        f"Max: {result.max}{suffix}",
        f"Average: {result.average}{suffix}",
    ]


def _format_bytes(value: Optional[int]) -> str:
    if not value:
        return "N/A"
    return f"{value / (1024 * 1024):.2f} MB"


def print_details(result: BenchmarkResult, console: Optional[Console] = None) -> None:
    """
    Render a detailed summary of ``result`` as a rich table.

    Includes the spread of the samples and the session profile (wall time,
    memory, CPU) next to the min/max/average figures.
    """
    console = console or Console(stderr=True)

    table = Table(
        title=f"tablebench: {result.label}",
        box=box.ROUNDED,
        caption=f"{result.item_count:,} items, {result.run_count:,} runs",
    )
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="green")

    table.add_row("Min (µs)", f"{result.min:,}")
    table.add_row("Max (µs)", f"{result.max:,}")
    table.add_row("Average (µs)", f"{result.average:,}")
    table.add_row("Median (µs)", f"{result.median:,.1f}")
    table.add_row("StdDev (µs)", f"{result.stddev:,.1f}")

    errors_style = "bold red" if result.render_errors else "green"
    table.add_row("Render errors", f"[{errors_style}]{result.render_errors}[/{errors_style}]")
    table.add_row("Warmup runs", str(result.warmup_runs))

    profile = result.profile
    if profile is not None:
        table.add_row("Session wall time (s)", f"{profile.duration_seconds:.3f}")
        table.add_row("Peak memory", _format_bytes(profile.peak_rss_bytes))
        if profile.peak_traced_bytes is not None:
            table.add_row("Peak traced allocations", _format_bytes(profile.peak_traced_bytes))
        cpu = f"{profile.cpu_percent:.1f}" if profile.cpu_percent is not None else "N/A"
        table.add_row("CPU %", cpu)

    console.print(table)


__all__ = ["MICROS_SUFFIX", "format_report", "print_details"]
