"""
tablebench - micro-benchmark for HTML template rendering.

Generates a deterministic table of records, renders a named block of a Jinja2
template against it a fixed number of times, and reports the minimum, maximum
and average render latency in microseconds.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from tablebench.config import Settings, get_settings
from tablebench.domain import Customer, TableItem, generate_range
from tablebench.errors import RenderError, TablebenchError, TemplateLoadError
from tablebench.infrastructure import TableTemplate, load_template, parse_template
from tablebench.reporter import format_report, print_details
from tablebench.runner import (
    BenchmarkResult,
    RunConfig,
    Summary,
    aggregate,
    measure_renders,
    persist_result,
    run_benchmark,
)
from tablebench.utils.logging import configure_logging, get_logger
from tablebench.utils.profiler import ProfileStats, profile_block
from tablebench.variants import Variant, available_variants, resolve_variant

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Customer",
    "TableItem",
    "generate_range",
    # Errors
    "TablebenchError",
    "TemplateLoadError",
    "RenderError",
    # Templates
    "TableTemplate",
    "load_template",
    "parse_template",
    # Benchmark
    "BenchmarkResult",
    "RunConfig",
    "Summary",
    "aggregate",
    "measure_renders",
    "persist_result",
    "run_benchmark",
    # Variants
    "Variant",
    "available_variants",
    "resolve_variant",
    # Reporting
    "format_report",
    "print_details",
    # Logging
    "configure_logging",
    "get_logger",
    # Profiling
    "ProfileStats",
    "profile_block",
]
