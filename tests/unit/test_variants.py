from __future__ import annotations

import pytest

from tablebench.variants import DEFAULT_RUN_COUNT, available_variants, resolve_variant


def test_available_variants_sorted_and_known() -> None:
    names = available_variants()
    assert names == sorted(names)
    assert {"table", "table-flat"} <= set(names)


def test_table_variant_defaults() -> None:
    variant = resolve_variant("table")
    assert variant.shape == "customer"
    assert variant.item_count == 1000
    assert variant.run_count == DEFAULT_RUN_COUNT
    assert variant.micros_suffix is True


def test_flat_variant_uses_run_count_items_and_plain_numbers() -> None:
    variant = resolve_variant("table-flat")
    assert variant.shape == "flat"
    assert variant.item_count is None
    assert variant.run_count == DEFAULT_RUN_COUNT
    assert variant.micros_suffix is False


def test_unknown_variant_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown variant"):
        resolve_variant("chart")
