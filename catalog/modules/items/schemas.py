"""Pydantic schemas for item operations."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from catalog.shared.schemas import BaseSchema, TimestampSchema

from .models import Item


class ItemCreate(BaseSchema):
    """Schema for creating a new item.

    Price and stock signs are left to the store, which rejects negative
    values with an InvalidDataError.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Item name",
        examples=["Hylian Shield"],
    )
    description: str | None = Field(
        default=None,
        max_length=500,
        description="Item description (optional)",
        examples=["An indestructible shield blessed by the goddess"],
    )
    price: Decimal = Field(
        ...,
        decimal_places=2,
        description="Unit price",
        examples=["750.00"],
    )
    category: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Item category",
        examples=["Shields"],
    )
    stock: int = Field(
        ...,
        description="Quantity in stock",
        examples=[3],
    )

    def to_item(self, item_id: int | None = None) -> Item:
        """Build the domain item; ``item_id`` is set for updates."""
        return Item(id=item_id, **self.model_dump())


class ItemUpdate(ItemCreate):
    """Schema for replacing an existing item.

    Updates are full replacements; the id comes from the path.
    """


class ItemResponse(TimestampSchema):
    """Item data returned to clients."""

    id: int = Field(..., description="Item identifier")
    name: str
    description: str | None = None
    price: Decimal
    category: str
    stock: int
