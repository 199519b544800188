"""
Domain models for tablebench.

Defines the synthetic record rendered by the benchmark template. Field names are
what the template sees (``item.name``, ``item.customer.city`` ...), so renaming a
field here means updating `templates/List.html` as well.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """
    Customer sub-record embedded by the ``customer`` item shape.
    """

    name: str = Field(..., description="Display name, e.g. 'Customer 7'.")
    address: str = Field(..., description="Street address.")
    city: str = Field(..., description="City name.")
    zip: str = Field(..., description="Postal code.")
    email: str = Field(..., description="Contact e-mail address.")
    phone: str = Field(..., description="Contact phone number.")

    model_config = {
        "frozen": True,
    }


class TableItem(BaseModel):
    """
    A single row of the rendered table.
    """

    id: int = Field(..., ge=0, description="Sequential 0-based index.")
    name: str = Field(..., description="Item label.")
    valid: bool = Field(True, description="Always true for generated items.")
    description: str = Field(..., description="Free-text description.")
    count: int = Field(..., ge=0, lt=100, description="Cyclic counter (index mod 100).")
    price: float = Field(..., description="Unit price.")
    customer: Optional[Customer] = Field(None, description="Owning customer, if any.")

    model_config = {
        "frozen": True,
    }


__all__ = ["Customer", "TableItem"]
