"""In-Memory Store: ordered, append-only record collections with id generation.

Invariants:
    - Records keep insertion order; nothing is ever removed or replaced
    - Generated ids continue after the highest seed id and are never reused
    - Lookup is a linear scan with exact id equality
    - Seed ids must be unique (ValueError otherwise)

Design Decisions:
    - One Store instance per collection, built by create_app() and owned by the app state
      (no module-level lists)
    - add() takes a factory receiving the fresh id, so records are constructed complete
"""

import itertools
from typing import Callable, Generic, Iterable, Protocol, TypeVar

from cardlist.models.card import Card
from cardlist.models.card_list import CardList


class _Identified(Protocol):
    id: int


T = TypeVar("T", bound=_Identified)


class Store(Generic[T]):
    """Ordered collection of records plus a next-identifier generator."""

    def __init__(self, seed: Iterable[T] = ()):
        self._items: list[T] = []
        for item in seed:
            if self.contains(item.id):
                raise ValueError(f"duplicate seed id {item.id}")
            self._items.append(item)
        start = max((item.id for item in self._items), default=0) + 1
        self._ids = itertools.count(start)

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> list[T]:
        """Snapshot of every record in insertion order."""
        return list(self._items)

    def get(self, item_id: int) -> T | None:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def contains(self, item_id: int) -> bool:
        return self.get(item_id) is not None

    def add(self, build: Callable[[int], T]) -> T:
        """Allocate the next id, build the record with it and append it."""
        item = build(next(self._ids))
        self._items.append(item)
        return item


# ─── Seed data ───────────────────────────────────────────────────

SEED_CARDS = (
    Card(id=1, title="Task One", content="This is card one"),
    Card(id=2, title="Task Two", content="This is card two"),
    Card(id=3, title="Task Three", content="This is card three"),
)

SEED_LISTS = (
    CardList(id=1, header="List One", card_ids=[1]),
)


def build_card_store(seed: Iterable[Card] = SEED_CARDS) -> Store[Card]:
    return Store(seed)


def build_list_store(seed: Iterable[CardList] = SEED_LISTS) -> Store[CardList]:
    return Store(seed)
