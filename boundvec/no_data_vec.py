"""A vector that tracks only its length and capacity, not its elements."""

from __future__ import annotations

import io
import operator
import random
import struct
from typing import Any, BinaryIO, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_USIZE_MAX = 2**64 - 1
_HEADER = struct.Struct("<QQ")


class NoDataVec(Generic[T]):
    """A vector whose elements are produced on demand by a factory.

    Values handed to it are discarded; reading an element returns a fresh
    value from the factory.
    """

    __slots__ = ("_factory", "_len", "_capacity")

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._len = 0
        self._capacity = 0

    @classmethod
    def with_len(cls, factory: Callable[[], T], length: int) -> NoDataVec[T]:
        """Create a vector of the given length and equal capacity."""
        length = operator.index(length)
        if length < 0:
            raise ValueError("length must be non-negative")
        vec = cls(factory)
        vec._len = length
        vec._capacity = length
        return vec

    @classmethod
    def arbitrary(cls, factory: Callable[[], T], rng: random.Random) -> NoDataVec[T]:
        """Create a vector of arbitrary length below the largest usize."""
        return cls.with_len(factory, rng.randrange(_USIZE_MAX))

    def __len__(self) -> int:
        return self._len

    @property
    def capacity(self) -> int:
        """The number of elements the vector can hold before growing."""
        return self._capacity

    def copy(self) -> NoDataVec[T]:
        """Return a vector with the same length, capacity and factory."""
        duplicate: NoDataVec[T] = NoDataVec(self._factory)
        duplicate._len = self._len
        duplicate._capacity = self._capacity
        return duplicate

    def _grow(self, additional: int) -> None:
        self._capacity = max(self._capacity * 2, self._len + additional)

    def push(self, value: T) -> None:
        """Account for one more element, growing the capacity if needed."""
        if self._len == self._capacity:
            self._grow(1)
        self._len += 1

    def pop(self) -> T | None:
        """Drop the last element, returning a fresh value, or None if empty."""
        if self._len == 0:
            return None
        self._len -= 1
        return self._factory()

    def insert(self, index: int, value: T) -> None:
        """Account for one more element; the position is not tracked."""
        self.push(value)

    def remove(self, index: int) -> T:
        """Drop one element and return a fresh value."""
        if self._len == 0:
            raise IndexError("remove from empty vector")
        self._len -= 1
        return self._factory()

    def get(self, index: int) -> T:
        """Return a fresh value standing for the element at index."""
        return self._factory()

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def binary_search_by_key(
        self, b: K, f: Callable[[T], K], rng: random.Random
    ) -> tuple[bool, int]:
        """Return an arbitrary (found, index) pair with index below the length."""
        if self._len == 0:
            raise ValueError("cannot search an empty vector")
        index = rng.randrange(self._len)
        found = rng.randint(-128, 127) > 0
        return found, index

    def sort_by_key(self, f: Callable[[T], Any]) -> None:
        """Check the key function; the order is untouched as no elements are stored."""
        if not callable(f):
            raise TypeError("sort key must be callable")

    def __iter__(self) -> Iterator[T]:
        for _ in range(self._len):
            yield self._factory()

    def serialize(self) -> bytes:
        """Encode length and capacity as two little-endian 64-bit integers."""
        if self._len > _USIZE_MAX or self._capacity > _USIZE_MAX:
            raise ValueError("length or capacity does not fit in 64 bits")
        return _HEADER.pack(self._len, self._capacity)

    @classmethod
    def deserialize(cls, factory: Callable[[], T], data: bytes) -> NoDataVec[T]:
        """Decode a vector from the leading bytes of data."""
        return cls.from_reader(factory, io.BytesIO(data))

    @classmethod
    def from_reader(cls, factory: Callable[[], T], reader: BinaryIO) -> NoDataVec[T]:
        """Decode a vector from a binary stream."""
        header = reader.read(_HEADER.size)
        if len(header) < _HEADER.size:
            raise EOFError("unexpected end of input")
        length, capacity = _HEADER.unpack(header)
        vec = cls.with_len(factory, length)
        vec._capacity = capacity
        return vec

    def __repr__(self) -> str:
        return f"NoDataVec(len={self._len}, capacity={self._capacity})"


def no_data_vec(factory: Callable[[], T], *args: T) -> NoDataVec[T]:
    """Build a vector by pushing each of args."""
    vec: NoDataVec[T] = NoDataVec(factory)
    for value in args:
        vec.push(value)
    return vec


def no_data_vec_repeat(factory: Callable[[], T], elem: T, n: int) -> NoDataVec[T]:
    """Build a vector by pushing elem n times."""
    vec: NoDataVec[T] = NoDataVec(factory)
    for _ in range(n):
        vec.push(elem)
    return vec