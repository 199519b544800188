"""
Command-line entry point (`tablebench`).

`run` executes one session and prints the report; `info` shows the effective
settings; `generate` dumps the synthetic items as JSON lines.
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import typer

from tablebench.config import get_settings
from tablebench.domain.generator import ITEM_SHAPES, generate_range
from tablebench.errors import TemplateLoadError
from tablebench.reporter import format_report, print_details
from tablebench.runner import RunConfig, persist_result, run_benchmark
from tablebench.utils.logging import configure_logging
from tablebench.variants import available_variants, resolve_variant

app = typer.Typer(help="Template render micro-benchmark.")


def _check_shape(shape: Optional[str]) -> Optional[str]:
    if shape is not None and shape not in ITEM_SHAPES:
        raise typer.BadParameter(f"must be one of: {', '.join(ITEM_SHAPES)}")
    return shape


def _or_default(value: Optional[int]) -> str:
    return "default" if value is None else str(value)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"template={settings.template_path} sub_template={settings.sub_template} | "
        f"variant={settings.benchmark_variant} items={_or_default(settings.benchmark_items)} "
        f"runs={_or_default(settings.benchmark_runs)} warmup={settings.benchmark_warmup_runs}"
    )
    typer.echo("Available variants: " + ", ".join(available_variants()))


@app.command()
def run(
    variant: Optional[str] = typer.Option(
        None,
        "--variant",
        "-v",
        help="Variant to run (table, table-flat) or 'list'. Defaults to BENCHMARK_VARIANT.",
    ),
    template: Optional[str] = typer.Option(
        None, "--template", "-t", help="Template file defining the rendered block."
    ),
    items: Optional[int] = typer.Option(
        None, "--items", "-n", min=0, help="Override number of generated items."
    ),
    runs: Optional[int] = typer.Option(
        None, "--runs", "-r", min=1, help="Override number of timed renders."
    ),
    warmup: Optional[int] = typer.Option(
        None, "--warmup", min=0, help="Untimed renders before measuring."
    ),
    shape: Optional[str] = typer.Option(
        None, "--shape", callback=_check_shape, help="Item shape: flat or customer."
    ),
    micros: Optional[bool] = typer.Option(
        None, "--micros/--no-micros", help="Append '(micros)' to statistic lines."
    ),
    details: bool = typer.Option(False, "--details", help="Print a detailed summary table."),
    save: bool = typer.Option(False, "--save", help="Persist results as JSON."),
) -> None:
    """
    Run one benchmark session and print min/max/average render latency.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    variant_name = variant or settings.benchmark_variant
    if variant_name == "list":
        typer.echo("Available variants: " + ", ".join(available_variants()))
        return

    try:
        selected = resolve_variant(variant_name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--variant") from exc

    config = RunConfig.from_variant(
        selected,
        template_path=template or settings.template_path,
        sub_template=settings.sub_template,
        item_count=items if items is not None else settings.benchmark_items,
        run_count=runs if runs is not None else settings.benchmark_runs,
        shape=shape,
        warmup_runs=warmup if warmup is not None else settings.benchmark_warmup_runs,
    )

    try:
        result = run_benchmark(config)
    except TemplateLoadError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    suffix = selected.micros_suffix if micros is None else micros
    for line in format_report(result, micros_suffix=suffix):
        typer.echo(line)

    if details:
        print_details(result)
    if save:
        persist_result(result, settings.results_dir)


@app.command()
def generate(
    items: int = typer.Option(10, "--items", "-n", min=0, help="Number of items to emit."),
    shape: str = typer.Option("customer", "--shape", callback=_check_shape, help="Item shape."),
) -> None:
    """
    Print generated items as JSON lines.
    """
    for item in generate_range(items, shape):  # type: ignore[arg-type]
        typer.echo(json.dumps(item.model_dump()))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
