"""API routers package."""

from catalog.api import items, system

__all__ = [
    "items",
    "system",
]
