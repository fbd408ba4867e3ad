from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class OrderedList(Generic[T]):
    """Index-addressable sequence with explicit insertion positions.

    Lookups never raise for out-of-range indices; they return ``None`` the
    same way an empty slot does. Membership and search compare by identity.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T | None] = ()) -> None:
        self._items: list[T | None] = list(items)

    @classmethod
    def filled(cls, size: int) -> "OrderedList[T]":
        return cls([None] * size)

    def get(self, index: int) -> T | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def count(self) -> int:
        return len(self._items)

    def insert_at(self, index: int, item: T) -> int:
        if index < 0:
            raise IndexError(f"negative insertion index: {index}")
        if index >= len(self._items):
            # Out-of-range insertion extends the list; the gap holds None.
            self._items.extend([None] * (index - len(self._items)))
            self._items.append(item)
        else:
            self._items.insert(index, item)
        return len(self._items)

    def push(self, item: T) -> int:
        self._items.append(item)
        return len(self._items)

    def remove_at(self, index: int) -> T | None:
        if not 0 <= index < len(self._items):
            return None
        return self._items.pop(index)

    def set_at(self, index: int, item: T | None) -> None:
        if 0 <= index < len(self._items):
            self._items[index] = item

    def find_first(self, item: T) -> int | None:
        for i, candidate in enumerate(self._items):
            if candidate is item:
                return i
        return None

    def __contains__(self, item: object) -> bool:
        return any(candidate is item for candidate in self._items)

    def __iter__(self) -> Iterator[T | None]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedList({self._items!r})"
