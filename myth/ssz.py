"""Bounded and fixed-length SSZ collections: bit lists, bit vectors, vectors and lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _bound(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _pack(bits: Sequence[bool], size: int) -> bytearray:
    out = bytearray(size)
    for position, bit in enumerate(bits):
        if bit:
            out[position // 8] |= 1 << (position % 8)
    return out


def _unpack(data: bytes, count: int) -> list[bool]:
    return [bool(data[position // 8] >> (position % 8) & 1) for position in range(count)]


class _Items(Sequence[T], Generic[T]):
    _items: list[T]

    @staticmethod
    def _item(value: Any) -> Any:
        return value

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._items[index] = self._item(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class LimitedList(_Items[T]):
    """A sequence holding at most ``limit`` items."""

    def __init__(self, limit: int, items: Iterable[T] = ()) -> None:
        self.limit = _bound("limit", limit)
        self._items = [self._item(item) for item in items]
        if len(self._items) > limit:
            raise ValueError(f"{len(self._items)} items exceed the limit of {limit}")

    def append(self, item: T) -> None:
        """Add one item at the end; raise ValueError when the list is full."""
        if len(self._items) >= self.limit:
            raise ValueError(f"list is full at its limit of {self.limit}")
        self._items.append(self._item(item))


class FixedVector(_Items[T]):
    """A sequence holding exactly ``length`` items."""

    def __init__(self, length: int, items: Iterable[T]) -> None:
        self.length = _bound("length", length)
        self._items = [self._item(item) for item in items]
        if len(self._items) != length:
            raise ValueError(f"expected {length} items, got {len(self._items)}")


class BitList(LimitedList[bool]):
    """A variable number of bits, at most ``limit`` of them."""

    _item = staticmethod(bool)

    def append(self, bit: bool) -> None:
        """Add one bit at the end; raise ValueError when the list is full."""
        super().append(bit)

    def to_bytes(self) -> bytes:
        """Serialize with the trailing delimiter bit that marks the length."""
        count = len(self._items)
        out = _pack(self._items, count // 8 + 1)
        out[count // 8] |= 1 << (count % 8)
        return bytes(out)

    @classmethod
    def from_bytes(cls, limit: int, data: bytes) -> BitList:
        """Parse a serialized bit list, checking its delimiter and limit."""
        data = bytes(data)
        if not data:
            raise ValueError("a serialized bit list cannot be empty")
        if data[-1] == 0:
            raise ValueError("serialized bit list has no delimiter bit")
        count = (len(data) - 1) * 8 + data[-1].bit_length() - 1
        if count > limit:
            raise ValueError(f"{count} bits exceed the limit of {limit}")
        return cls(limit, _unpack(data, count))


class BitVector(FixedVector[bool]):
    """Exactly ``length`` bits."""

    _item = staticmethod(bool)

    def __init__(self, length: int, bits: Iterable[bool] | None = None) -> None:
        super().__init__(length, [False] * max(length, 0) if bits is None else bits)

    def to_bytes(self) -> bytes:
        """Serialize into ``ceil(length / 8)`` bytes, low bit first."""
        return bytes(_pack(self._items, (self.length + 7) // 8))

    @classmethod
    def from_bytes(cls, length: int, data: bytes) -> BitVector:
        """Parse a serialized bit vector of the given length."""
        _bound("length", length)
        data = bytes(data)
        expected = (length + 7) // 8
        if len(data) != expected:
            raise ValueError(f"expected {expected} bytes, got {len(data)}")
        if length % 8 and data[-1] >> (length % 8):
            raise ValueError("bits beyond the vector length are set")
        return cls(length, _unpack(data, length))