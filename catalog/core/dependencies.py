"""
FastAPI dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from catalog.modules.items.repository import CatalogStore


def get_store(request: Request) -> CatalogStore:
    """Return the catalog store created by the application lifespan."""
    return request.app.state.store


Store = Annotated[CatalogStore, Depends(get_store)]
