"""
Named benchmark variants.

A variant fixes the item shape, the default item and run counts, and whether the
report lines carry the ``(micros)`` suffix. Both presets render the same
``table`` sub-template; they differ only in data volume/shape and output format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from tablebench.domain.generator import ItemShape

DEFAULT_RUN_COUNT = 1000
DEFAULT_ITEM_COUNT = 1000


@dataclass(frozen=True)
class Variant:
    name: str
    description: str
    shape: ItemShape
    run_count: int
    # None: one item per run
    item_count: Optional[int] = None
    micros_suffix: bool = True


def _variant_registry() -> Dict[str, Variant]:
    """Registry of available variants."""
    return {
        "table": Variant(
            name="table",
            description="Items with a nested customer record; (micros) suffix.",
            shape="customer",
            item_count=DEFAULT_ITEM_COUNT,
            run_count=DEFAULT_RUN_COUNT,
        ),
        "table-flat": Variant(
            name="table-flat",
            description="Flat items, one item per run; plain numbers in the report.",
            shape="flat",
            run_count=DEFAULT_RUN_COUNT,
            micros_suffix=False,
        ),
    }


def available_variants() -> List[str]:
    """List available variant names."""
    return sorted(_variant_registry().keys())


def resolve_variant(name: str) -> Variant:
    variants = _variant_registry()
    if name not in variants:
        raise ValueError(f"Unknown variant '{name}'. Available: {', '.join(sorted(variants))}")
    return variants[name]


__all__ = [
    "DEFAULT_ITEM_COUNT",
    "DEFAULT_RUN_COUNT",
    "Variant",
    "available_variants",
    "resolve_variant",
]
