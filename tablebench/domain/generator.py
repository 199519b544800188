"""
Deterministic data generation for the benchmark table.

Every field is a pure function of the positional index, so two calls with the
same arguments produce equal sequences and timings only vary with volume.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from tablebench.domain.models import Customer, TableItem

ItemShape = Literal["flat", "customer"]

ITEM_SHAPES: tuple[str, ...] = ("flat", "customer")
PRICE = 100.01
COUNT_MODULUS = 100


def _customer(i: int) -> Customer:
    return Customer(
        name=f"Customer {i}",
        address=f"Customer Street {i}",
        city=f"City {i}",
        zip=f"{i}",
        email=f"Cust.omer{i}@email.com",
        phone=f"{i}",
    )


def make_item(i: int, shape: ItemShape = "customer") -> TableItem:
    """Build the record found at index ``i``."""
    customer: Optional[Customer] = _customer(i) if shape == "customer" else None
    return TableItem(
        id=i,
        name=f"item {i}",
        valid=True,
        description=f"Description {i}",
        count=i % COUNT_MODULUS,
        price=PRICE,
        customer=customer,
    )


def generate_range(n: int, shape: ItemShape = "customer") -> List[TableItem]:
    """
    Generate ``n`` table items with ids ``0..n-1`` in order.

    Parameters
    ----------
    n : int
        Number of items. Must be non-negative.
    shape : {"flat", "customer"}
        ``customer`` embeds a `Customer` sub-record in every item; ``flat``
        leaves it unset.

    Raises
    ------
    ValueError
        If ``n`` is negative or ``shape`` is unknown.
    """
    if n < 0:
        raise ValueError(f"item count must be non-negative, got {n}")
    if shape not in ITEM_SHAPES:
        raise ValueError(f"Unknown item shape '{shape}'. Available: {', '.join(ITEM_SHAPES)}")
    return [make_item(i, shape) for i in range(n)]


__all__ = ["ITEM_SHAPES", "ItemShape", "PRICE", "generate_range", "make_item"]
