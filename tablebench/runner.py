"""
Benchmark runner: load a template, generate items once, time N renders, aggregate.

Usage (example from CLI):
    from tablebench.runner import RunConfig, run_benchmark

    result = run_benchmark(RunConfig(template_path="templates/List.html", run_count=100))
    print(result.min, result.max, result.average)

Each iteration renders the whole item sequence into a fresh, discarded sink and
stores its elapsed time in whole microseconds. Render failures do not abort the
loop and are timed exactly like successful renders; they are only counted.
Optional JSON artifacts are written by `persist_result`:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import contextlib
import io
import json
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, NamedTuple, Optional, Sequence, Tuple

from tablebench.domain.generator import ItemShape, generate_range
from tablebench.domain.models import TableItem
from tablebench.errors import RenderError, TemplateLoadError
from tablebench.infrastructure.template_factory import TableTemplate, load_template
from tablebench.utils.logging import get_logger
from tablebench.utils.profiler import ProfileStats, profile_block
from tablebench.variants import DEFAULT_ITEM_COUNT, DEFAULT_RUN_COUNT, Variant

log = get_logger(__name__)

NANOS_PER_MICRO = 1_000

Clock = Callable[[], int]


@dataclass(frozen=True)
class RunConfig:
    """
    Parameters of one benchmark session.

    ``run_count`` is the length of the measurement sequence; ``warmup_runs``
    untimed renders happen before it is allocated and never show up in it.
    """

    template_path: str = "templates/List.html"
    sub_template: str = "table"
    item_count: int = DEFAULT_ITEM_COUNT
    run_count: int = DEFAULT_RUN_COUNT
    shape: ItemShape = "customer"
    warmup_runs: int = 0
    sample_memory: bool = False
    trace_allocations: bool = False
    label: str = "table"

    @classmethod
    def from_variant(cls, variant: Variant, **overrides: Any) -> "RunConfig":
        """
        Build a config from a variant's defaults; ``None`` overrides are ignored.

        A variant without an item count generates one item per run, after any
        run-count override has been applied.
        """
        values: Dict[str, Any] = {
            "item_count": variant.item_count,
            "run_count": variant.run_count,
            "shape": variant.shape,
            "label": variant.name,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        if values["item_count"] is None:
            values["item_count"] = values["run_count"]
        return cls(**values)


class Summary(NamedTuple):
    min: int
    max: int
    average: int


@dataclass
class BenchmarkResult:
    """Outcome of a completed session."""

    label: str
    item_count: int
    run_count: int
    samples: List[int]
    min: int
    max: int
    average: int
    render_errors: int = 0
    warmup_runs: int = 0
    profile: Optional[ProfileStats] = field(default=None)

    @property
    def median(self) -> float:
        return statistics.median(self.samples)

    @property
    def stddev(self) -> float:
        return statistics.stdev(self.samples) if len(self.samples) > 1 else 0.0

    def to_dict(self, include_samples: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "label": self.label,
            "items": self.item_count,
            "runs": self.run_count,
            "min_micros": self.min,
            "max_micros": self.max,
            "average_micros": self.average,
            "median_micros": self.median,
            "stddev_micros": round(self.stddev, 2),
            "render_errors": self.render_errors,
            "warmup_runs": self.warmup_runs,
            "profile": self.profile.to_dict() if self.profile else None,
        }
        if include_samples:
            payload["samples"] = list(self.samples)
        return payload


def aggregate(samples: Sequence[int], run_count: int) -> Summary:
    """
    Reduce a measurement sequence to min, max and integer-truncated mean.

    The minimum is seeded with the first sample and the maximum with 0, which is
    only valid because elapsed durations are never negative.

    Raises
    ------
    ValueError
        If ``samples`` is empty or ``run_count`` is not positive.
    """
    if run_count < 1:
        raise ValueError(f"run count must be at least 1, got {run_count}")
    if not samples:
        raise ValueError("cannot aggregate an empty measurement sequence")

    lowest = samples[0]
    highest = 0
    total = 0
    for sample in samples:
        if sample < lowest:
            lowest = sample
        if sample > highest:
            highest = sample
        total += sample

    return Summary(min=lowest, max=highest, average=total // run_count)


def measure_renders(
    template: TableTemplate,
    items: Sequence[TableItem],
    sub_template: str,
    run_count: int,
    clock: Clock = time.perf_counter_ns,
) -> Tuple[List[int], int]:
    """
    Time ``run_count`` sequential renders of ``sub_template``.

    Returns
    -------
    (samples, render_errors)
        ``samples[i]`` is iteration ``i``'s elapsed time in whole microseconds.
    """
    if run_count < 1:
        raise ValueError(f"run count must be at least 1, got {run_count}")

    samples = [0] * run_count
    render_errors = 0
    for i in range(run_count):
        sink = io.StringIO()
        error: Optional[RenderError] = None

        start = clock()
        try:
            template.render_into(sink, sub_template, items)
        except RenderError as exc:
            error = exc
        elapsed = clock() - start

        samples[i] = elapsed // NANOS_PER_MICRO
        if error is not None:
            render_errors += 1
            if render_errors == 1:
                log.warning(
                    f"Render failed, timing kept: {error}",
                    extra={"iteration": i, "sub_template": sub_template},
                )

    return samples, render_errors


def run_benchmark(config: RunConfig, clock: Clock = time.perf_counter_ns) -> BenchmarkResult:
    """
    Run one benchmark session.

    Raises
    ------
    TemplateLoadError
        If the template cannot be loaded. Nothing is generated or measured.
    ValueError
        On invalid counts or item shape.
    """
    if config.run_count < 1:
        raise ValueError(f"run count must be at least 1, got {config.run_count}")
    if config.warmup_runs < 0:
        raise ValueError(f"warmup runs must be non-negative, got {config.warmup_runs}")

    log.info(
        f"[SESSION START] {config.label}",
        extra={
            "label": config.label,
            "template": config.template_path,
            "items": config.item_count,
            "runs": config.run_count,
            "shape": config.shape,
        },
    )

    try:
        template = load_template(config.template_path)
    except TemplateLoadError as exc:
        log.error(f"[SESSION ABORTED] {exc}", extra={"template": config.template_path})
        raise

    items = generate_range(config.item_count, config.shape)

    for _ in range(config.warmup_runs):
        with contextlib.suppress(RenderError):
            template.render_into(io.StringIO(), config.sub_template, items)

    with profile_block(
        config.label,
        sample_memory=config.sample_memory,
        trace_allocations=config.trace_allocations,
    ) as stats:
        samples, render_errors = measure_renders(
            template, items, config.sub_template, config.run_count, clock=clock
        )

    summary = aggregate(samples, config.run_count)
    if render_errors:
        log.warning(
            f"[RENDER ERRORS] {render_errors}/{config.run_count} renders failed",
            extra={"render_errors": render_errors, "runs": config.run_count},
        )

    result = BenchmarkResult(
        label=config.label,
        item_count=config.item_count,
        run_count=config.run_count,
        samples=samples,
        min=summary.min,
        max=summary.max,
        average=summary.average,
        render_errors=render_errors,
        warmup_runs=config.warmup_runs,
        profile=stats,
    )
    log.info(
        f"[SESSION COMPLETE] {config.label}",
        extra={
            "label": config.label,
            "min": result.min,
            "max": result.max,
            "average": result.average,
            "duration_seconds": round(stats.duration_seconds, 3),
        },
    )
    return result


def persist_result(result: BenchmarkResult, results_dir: Path | str = "results") -> Path:
    """Write ``result`` to ``latest.json`` and a timestamped archive; return the archive path."""
    directory = Path(results_dir)
    directory.mkdir(parents=True, exist_ok=True)
    latest_path = directory / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = directory / f"run-{timestamp}.json"

    payload = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "result": result.to_dict(include_samples=True),
    }
    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})
    return archive_path


__all__ = [
    "BenchmarkResult",
    "RunConfig",
    "Summary",
    "aggregate",
    "measure_renders",
    "persist_result",
    "run_benchmark",
]
