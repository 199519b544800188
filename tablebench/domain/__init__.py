"""
Domain package for tablebench.

Exports the record models rendered by the benchmark and the deterministic
generator that builds them.
"""

from tablebench.domain.generator import ITEM_SHAPES, PRICE, generate_range, make_item
from tablebench.domain.models import Customer, TableItem

__all__ = [
    "Customer",
    "TableItem",
    "ITEM_SHAPES",
    "PRICE",
    "generate_range",
    "make_item",
]
