"""A vector whose capacity is fixed when it is created."""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class CapacityAssertionError(AssertionError):
    """Raised when an operation would break the vector's capacity or bounds."""


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise CapacityAssertionError(message)


class NoResizableVec(Generic[T]):
    """A sequence that never grows beyond the capacity it was created with."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity overflow")
        self._capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        """The fixed number of elements the vector can hold."""
        return self._capacity

    def push(self, value: T) -> None:
        """Append a value; the vector must not be full."""
        _require(self._capacity > len(self._items), "vector is full")
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the last value, or None if the vector is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def insert(self, index: int, value: T) -> None:
        """Insert a value at index, shifting later values to the right."""
        index = operator.index(index)
        _require(self._capacity > len(self._items), "vector is full")
        _require(0 <= index <= len(self._items), "insertion index out of bounds")
        self._items.insert(index, value)

    def remove(self, index: int) -> T:
        """Remove and return the value at index, shifting later values left."""
        index = operator.index(index)
        _require(0 <= index < len(self._items), "removal index out of bounds")
        return self._items.pop(index)

    def find(self, value: T) -> int | None:
        """Return the index of the first element equal to value, or None."""
        return next(
            (position for position, item in enumerate(self._items) if item == value),
            None,
        )

    def _checked_index(self, index: Any) -> int:
        index = operator.index(index)
        _require(0 <= index < len(self._items), "index out of bounds")
        return index

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        return self._items[self._checked_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._checked_index(index)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def as_list(self) -> list[T]:
        """Return the stored elements as a new list."""
        return list(self._items)

    def copy(self) -> NoResizableVec[T]:
        """Return a vector with the same capacity and elements."""
        duplicate: NoResizableVec[T] = NoResizableVec(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    def serialize(self, writer: Any) -> None:
        """Serialization is not supported for this vector."""
        raise CapacityAssertionError("NoResizableVec cannot be serialized")

    @classmethod
    def deserialize(cls, data: Any) -> NoResizableVec[Any]:
        """Deserialization is not supported for this vector."""
        raise CapacityAssertionError("NoResizableVec cannot be deserialized")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoResizableVec):
            return NotImplemented
        return self._capacity == other._capacity and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NoResizableVec(capacity={self._capacity}, items={self._items!r})"


def no_resizable_vec(*args: T) -> NoResizableVec[T]:
    """Build a vector holding args with room for twice as many elements."""
    vec: NoResizableVec[T] = NoResizableVec(len(args) * 2)
    for value in args:
        vec.push(value)
    return vec


def no_resizable_vec_with_capacity(values: Iterable[T], capacity: int) -> NoResizableVec[T]:
    """Build a vector of the given capacity holding values."""
    items = list(values)
    _require(len(items) <= capacity, "more values than capacity")
    vec: NoResizableVec[T] = NoResizableVec(capacity)
    for value in items:
        vec.push(value)
    return vec