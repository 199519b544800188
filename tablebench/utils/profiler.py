"""
Session profiling for tablebench.

`profile_block` wraps a whole benchmark session (never a single timed
iteration) and records:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- RSS before and after the block (psutil), or a polled peak from a
  background thread when `sample_memory` is set
- Peak Python allocations (tracemalloc, opt-in: it slows every allocation)

Usage:
    from tablebench.utils.profiler import profile_block

    with profile_block("table") as stats:
        run_loop()

    print(stats.duration_seconds, stats.peak_rss_bytes)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for session-level measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    peak_rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@contextlib.contextmanager
def profile_block(
    label: str,
    sample_interval_ms: int = 50,
    sample_memory: bool = False,
    trace_allocations: bool = False,
) -> Generator[ProfileStats, None, None]:
    """
    Context manager profiling the enclosed block.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling.
    sample_memory : bool
        Whether to poll RSS from a background thread. When off, the block runs
        on the calling thread alone and the peak is taken from the readings
        before and after it.
    trace_allocations : bool
        Whether to run tracemalloc for the duration of the block.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    peak_rss = process.memory_info().rss
    stop_sampling = threading.Event()
    sampler: Optional[threading.Thread] = None

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except psutil.Error:
                return
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    tracing_started_here = False
    if trace_allocations and not tracemalloc.is_tracing():
        tracemalloc.start()
        tracing_started_here = True

    # cpu_percent needs a priming call
    process.cpu_percent(interval=None)

    if sample_memory:
        sampler = threading.Thread(
            target=_sample_memory, name=f"rss-sampler-{label}", daemon=True
        )
        sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        if sampler is not None:
            stop_sampling.set()
            sampler.join(timeout=1.0)
        peak_rss = max(peak_rss, process.memory_info().rss)

        stats.peak_rss_bytes = peak_rss if peak_rss > 0 else None
        stats.cpu_percent = process.cpu_percent(interval=None)

        if trace_allocations and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            if tracing_started_here:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
