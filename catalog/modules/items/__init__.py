"""Items module: the in-memory catalog and its policies."""

from .models import Item
from .policy import AlwaysFail, FaultPolicy, NeverFail, RandomFaultPolicy
from .repository import CatalogStore
from .schemas import ItemCreate, ItemResponse, ItemUpdate
from .seed import default_catalog

__all__ = [
    "AlwaysFail",
    "CatalogStore",
    "FaultPolicy",
    "Item",
    "ItemCreate",
    "ItemResponse",
    "ItemUpdate",
    "NeverFail",
    "RandomFaultPolicy",
    "default_catalog",
]
