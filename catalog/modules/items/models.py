"""Item domain model."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from catalog.shared.schemas import TimestampSchema


class Item(TimestampSchema):
    """Catalog entry owned by the store.

    ``id`` stays ``None`` until the first save; the timestamps are always set
    by the store and ignored when supplied by callers.
    """

    id: int | None = Field(default=None, description="Store-assigned identifier")
    name: str = Field(default="", description="Unique (case-insensitive) item name")
    description: str | None = Field(default=None, description="Free text description")
    price: Decimal = Field(default=Decimal("0"), description="Unit price")
    category: str = Field(default="", description="Category, matched case-insensitively")
    stock: int = Field(default=0, description="Quantity in stock")
