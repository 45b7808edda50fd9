"""FastAPI router for catalog item endpoints.

Each endpoint maps onto one CatalogStore operation. Failures are not caught
here; the application exception handlers translate them.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Path, Query, Response, status

from catalog.core.dependencies import Store
from catalog.modules.items.schemas import ItemCreate, ItemResponse, ItemUpdate
from catalog.shared.errors import (
    AlreadyExistsError,
    InvalidDataError,
    NotFoundError,
    TransientAccessError,
    ValidationError,
)
from catalog.shared.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/items", tags=["Items"])

ItemId = Annotated[int, Path(description="Item identifier")]


@router.get(
    "",
    response_model=list[ItemResponse],
    summary="List every item",
    responses={500: TransientAccessError.openapi_response()},
)
async def list_items(store: Store) -> list[ItemResponse]:
    """List the whole catalog.

    The backing store fails now and then; clients should retry on 500.
    """
    return [ItemResponse.model_validate(item) for item in store.list_all()]


@router.get(
    "/price",
    response_model=list[ItemResponse],
    summary="Filter items by price range",
    responses={
        400: InvalidDataError.openapi_response(),
        500: TransientAccessError.openapi_response(),
    },
)
async def items_by_price_range(
    store: Store,
    min_price: Annotated[Decimal | None, Query(description="Inclusive lower bound")] = None,
    max_price: Annotated[Decimal | None, Query(description="Inclusive upper bound")] = None,
) -> list[ItemResponse]:
    """Items priced within ``[min_price, max_price]``."""
    items = store.find_by_price_range(min_price, max_price)
    return [ItemResponse.model_validate(item) for item in items]


@router.get(
    "/search",
    response_model=list[ItemResponse],
    summary="Search items by name fragment",
    responses={
        400: InvalidDataError.openapi_response(),
        500: TransientAccessError.openapi_response(),
    },
)
async def search_items(
    store: Store,
    name: Annotated[str | None, Query(description="Case-insensitive name fragment")] = None,
) -> list[ItemResponse]:
    items = store.find_by_name_containing(name)
    return [ItemResponse.model_validate(item) for item in items]


@router.get(
    "/category/{category}",
    response_model=list[ItemResponse],
    summary="Filter items by category",
    responses={
        400: InvalidDataError.openapi_response(),
        500: TransientAccessError.openapi_response(),
    },
)
async def items_by_category(
    store: Store,
    category: Annotated[str, Path(description="Category, case-insensitive")],
) -> list[ItemResponse]:
    items = store.find_by_category(category)
    return [ItemResponse.model_validate(item) for item in items]


@router.get(
    "/{item_id}",
    response_model=ItemResponse,
    summary="Get an item by ID",
    responses={
        404: NotFoundError.openapi_response(),
        500: TransientAccessError.openapi_response(),
    },
)
async def get_item(item_id: ItemId, store: Store) -> ItemResponse:
    item = store.get_by_id(item_id)
    if item is None:
        raise NotFoundError("Item does not exist")
    return ItemResponse.model_validate(item)


@router.post(
    "",
    response_model=ItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new item",
    responses={
        400: ValidationError.openapi_response(),
        409: AlreadyExistsError.openapi_response(),
    },
)
async def create_item(data: ItemCreate, store: Store) -> ItemResponse:
    """Create an item; the store assigns its id and creation time."""
    item = store.save(data.to_item())
    logger.info("Item created", item_id=item.id, item_name=item.name)
    return ItemResponse.model_validate(item)


@router.put(
    "/{item_id}",
    response_model=ItemResponse,
    summary="Replace an existing item",
    responses={
        400: InvalidDataError.openapi_response(),
        404: NotFoundError.openapi_response(),
        409: AlreadyExistsError.openapi_response(),
    },
)
async def update_item(item_id: ItemId, data: ItemUpdate, store: Store) -> ItemResponse:
    item = store.save(data.to_item(item_id))
    logger.info("Item updated", item_id=item.id)
    return ItemResponse.model_validate(item)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an item",
    responses={
        400: InvalidDataError.openapi_response(),
        404: NotFoundError.openapi_response(),
    },
)
async def delete_item(item_id: ItemId, store: Store) -> Response:
    store.delete_by_id(item_id)
    logger.info("Item deleted", item_id=item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
