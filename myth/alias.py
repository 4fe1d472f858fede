"""Fixed-size byte strings and the custom type aliases of the beacon chain."""

from __future__ import annotations

from typing import ClassVar, TypeVar

try:
    from typing import TypeAlias
except ImportError:  # pragma: no cover
    TypeAlias = object  # type: ignore[assignment,misc]

_FB = TypeVar("_FB", bound="FixedBytes")


class FixedBytes(bytes):
    """An immutable byte string whose length is fixed by the subclass."""

    LENGTH: ClassVar[int | None] = None

    def __new__(cls: type[_FB], value: bytes | bytearray | memoryview) -> _FB:
        if cls.LENGTH is None:
            raise TypeError(f"{cls.__name__} has no fixed length; use a sized subclass")
        if isinstance(value, int):
            raise TypeError(f"{cls.__name__} must be built from bytes, not an int")
        data = bytes(value)
        if len(data) != cls.LENGTH:
            raise ValueError(
                f"{cls.__name__} needs exactly {cls.LENGTH} bytes, got {len(data)}"
            )
        return super().__new__(cls, data)

    @classmethod
    def zero(cls: type[_FB]) -> _FB:
        """Return the value made of zero bytes only."""
        if cls.LENGTH is None:
            raise TypeError(f"{cls.__name__} has no fixed length; use a sized subclass")
        return cls(bytes(cls.LENGTH))

    @classmethod
    def from_hex(cls: type[_FB], text: str) -> _FB:
        """Parse a hex string, with or without a leading ``0x``."""
        cleaned = text.strip()
        if cleaned[:2] in ("0x", "0X"):
            cleaned = cleaned[2:]
        return cls(bytes.fromhex(cleaned))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.hex()})"

    def __str__(self) -> str:
        return f"0x{self.hex()}"


class Bytes4(FixedBytes):
    """Four bytes."""

    LENGTH = 4


class Bytes32(FixedBytes):
    """Thirty-two bytes."""

    LENGTH = 32


class Bytes48(FixedBytes):
    """Forty-eight bytes."""

    LENGTH = 48


class Bytes96(FixedBytes):
    """Ninety-six bytes."""

    LENGTH = 96


Slot: TypeAlias = int
Epoch: TypeAlias = int
CommitteeIndex: TypeAlias = int
ValidatorIndex: TypeAlias = int
Gwei: TypeAlias = int
Root: TypeAlias = Bytes32
Hash32: TypeAlias = Bytes32
Version: TypeAlias = Bytes4
DomainType: TypeAlias = Bytes4
ForkDigest: TypeAlias = Bytes4
Domain: TypeAlias = Bytes32
BLSPubkey: TypeAlias = Bytes48
BLSSignature: TypeAlias = Bytes96