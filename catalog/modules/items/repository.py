"""
In-memory catalog store.

Owns the identifier -> item mapping and the identifier counter. Every
operation runs under a single re-entrant lock, and every failure is raised
to the caller untouched; the store neither logs nor swallows errors.

Check order inside each operation is part of the contract: policy checks
(forbidden names, protected items, reserved tokens) come before existence
checks, and identity/uniqueness checks come before numeric-range checks.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from decimal import Decimal

from catalog.shared.errors import (
    AlreadyExistsError,
    InvalidDataError,
    NotFoundError,
    TransientAccessError,
)

from .models import Item
from .policy import (
    FORBIDDEN_CATEGORY,
    FORBIDDEN_NAME_TOKENS,
    POISON_ITEM_ID,
    PRICE_RANGE_CEILING,
    PROTECTED_NAME_TOKENS,
    RESTRICTED_KEYWORDS,
    FaultPolicy,
    RandomFaultPolicy,
    contains_any,
)


def utcnow() -> datetime:
    return datetime.now(UTC)


class CatalogStore:
    """Thread-safe in-memory store of catalog items.

    Callers always get copies; nothing returned aliases the internal map.
    A failed save or delete leaves the store exactly as it was, including
    the identifier counter.

    Example:
        store = CatalogStore(fault_policy=NeverFail())
        sword = store.save(Item(name="Master Sword", price=Decimal("999.99")))
        store.get_by_id(sword.id)
    """

    def __init__(
        self,
        fault_policy: FaultPolicy | None = None,
        clock: Callable[[], datetime] = utcnow,
        items: Iterable[Item] = (),
    ) -> None:
        """
        Initialize the store.

        Args:
            fault_policy: Decides when list_all() fails; defaults to a 30 % random policy
            clock: Source of creation/update timestamps
            items: Items to load through save() right away
        """
        self._items: dict[int, Item] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        self._fault_policy = fault_policy or RandomFaultPolicy()
        self._clock = clock
        self.seed(items)

    @property
    def fault_policy(self) -> FaultPolicy:
        return self._fault_policy

    # ==================== Reads ====================

    def list_all(self) -> list[Item]:
        """Return every stored item, in no particular order.

        Raises:
            TransientAccessError: when the fault policy decides to fail
        """
        with self._lock:
            if self._fault_policy.should_fail():
                raise TransientAccessError("Connection to Hyrule Database failed")
            return [item.model_copy(deep=True) for item in self._items.values()]

    def get_by_id(self, item_id: int | None) -> Item | None:
        """Return the item with ``item_id`` or ``None``.

        Raises:
            TransientAccessError: for the reserved poison id
        """
        if item_id == POISON_ITEM_ID:
            raise TransientAccessError("Cursed item ID caused database corruption")
        with self._lock:
            item = self._items.get(item_id)
            return item.model_copy(deep=True) if item is not None else None

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    # ==================== Writes ====================

    def save(self, item: Item) -> Item:
        """Create (``item.id is None``) or update an item.

        Args:
            item: Item to store; it is copied, never aliased

        Returns:
            Copy of the stored item with id and timestamps resolved

        Raises:
            InvalidDataError: blank or forbidden name, negative stock or price
            AlreadyExistsError: another item already uses the name
            NotFoundError: update of an unknown id
        """
        if not item.name or not item.name.strip():
            raise InvalidDataError("Item name cannot be blank")
        if contains_any(item.name, FORBIDDEN_NAME_TOKENS):
            raise InvalidDataError("Items containing 'Ganondorf' are forbidden in Hyrule")

        with self._lock:
            if item.id is None:
                if self._find_by_name(item.name) is not None:
                    raise AlreadyExistsError(f"Item with name '{item.name}' already exists")
            else:
                current = self._items.get(item.id)
                if current is None:
                    raise NotFoundError(f"Item with ID {item.id} not found for update")
                clash = self._find_by_name(item.name)
                if clash is not None and clash.id != item.id:
                    raise AlreadyExistsError(f"Item with name '{item.name}' already exists")

            if item.stock < 0:
                raise InvalidDataError("Stock cannot be negative")
            if item.price < 0:
                raise InvalidDataError("Price cannot be negative")

            now = self._clock()
            if item.id is None:
                stored = item.model_copy(
                    deep=True,
                    update={"id": self._next_id, "created_at": now, "updated_at": None},
                )
                self._next_id += 1
            else:
                stored = item.model_copy(
                    deep=True,
                    update={"created_at": current.created_at, "updated_at": now},
                )

            self._items[stored.id] = stored
            return stored.model_copy(deep=True)

    def delete_by_id(self, item_id: int | None) -> None:
        """Remove an item.

        Raises:
            InvalidDataError: missing id, or the item is protected
            NotFoundError: no item with that id
        """
        if item_id is None:
            raise InvalidDataError("Item ID cannot be null")

        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                raise NotFoundError(f"Item with ID {item_id} not found for deletion")
            if contains_any(item.name, PROTECTED_NAME_TOKENS):
                raise InvalidDataError("Legendary items cannot be deleted from Hyrule's inventory")
            del self._items[item_id]

    def seed(self, items: Iterable[Item]) -> list[Item]:
        """Save each item in order; used to load the demo catalog."""
        return [self.save(item) for item in items]

    # ==================== Searches ====================

    def find_by_category(self, category: str | None) -> list[Item]:
        """Items whose category equals ``category``, ignoring case.

        Raises:
            InvalidDataError: blank category
            TransientAccessError: the forbidden category
        """
        if category is None or not category.strip():
            raise InvalidDataError("Category cannot be null or empty")
        if category.lower() == FORBIDDEN_CATEGORY:
            raise TransientAccessError("Access to cursed items category is forbidden")

        wanted = category.lower()
        return self._select(lambda item: item.category.lower() == wanted)

    def find_by_price_range(
        self,
        min_price: Decimal | None,
        max_price: Decimal | None,
    ) -> list[Item]:
        """Items with ``min_price <= price <= max_price``.

        Raises:
            InvalidDataError: a missing bound, or min_price > max_price
            TransientAccessError: max_price above the ceiling
        """
        if min_price is None or max_price is None:
            raise InvalidDataError("Price range cannot contain null values")
        if min_price > max_price:
            raise InvalidDataError("Minimum price cannot be greater than maximum price")
        if max_price > PRICE_RANGE_CEILING:
            raise TransientAccessError("Price range too large, query timed out")

        return self._select(lambda item: min_price <= item.price <= max_price)

    def find_by_name_containing(self, fragment: str | None) -> list[Item]:
        """Items whose name contains ``fragment``, ignoring case.

        Raises:
            InvalidDataError: blank fragment
            TransientAccessError: fragment mentions a restricted keyword
        """
        if fragment is None or not fragment.strip():
            raise InvalidDataError("Search name cannot be null or empty")
        if contains_any(fragment, RESTRICTED_KEYWORDS):
            raise TransientAccessError("Search for Triforce items requires special authorization")

        wanted = fragment.lower()
        return self._select(lambda item: wanted in item.name.lower())

    # ==================== Internals ====================

    def _select(self, predicate: Callable[[Item], bool]) -> list[Item]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values() if predicate(item)]

    def _find_by_name(self, name: str) -> Item | None:
        wanted = name.lower()
        for item in self._items.values():
            if item.name.lower() == wanted:
                return item
        return None
