"""Canonical MessagePack encoding and transaction identifiers."""

from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from typing import Any, ClassVar, TypeVar

import msgpack

from .errors import DecodingError, EncodingError, InputError
from .utils import sha512_256, sort_msgpack_value

_T = TypeVar("_T", bound="AlgorandMsgpack")


class AlgorandMsgpack(ABC):
    """Objects with a canonical MessagePack form and a domain prefix."""

    PREFIX: ClassVar[bytes] = b"TX"

    @abstractmethod
    def to_msgpack_value(self) -> Any:
        """Return the plain value (dicts, lists, scalars) that is encoded."""

    @classmethod
    @abstractmethod
    def from_msgpack_value(cls: type[_T], value: Any) -> _T:
        """Build an instance from a decoded plain value."""

    def encode_raw(self) -> bytes:
        """Encode with sorted map keys and no prefix."""
        value = sort_msgpack_value(self.to_msgpack_value())
        try:
            return msgpack.packb(value, use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as exc:
            raise EncodingError(exc) from exc

    def encode(self) -> bytes:
        """Encode canonically and prepend the domain prefix."""
        return self.PREFIX + self.encode_raw()

    @classmethod
    def decode(cls: type[_T], data: bytes) -> _T:
        """Decode bytes, dropping the domain prefix when it is present."""
        data = bytes(data)
        if not data:
            raise InputError("attempted to decode 0 bytes")
        prefix = cls.PREFIX
        if prefix and len(data) > len(prefix) and data.startswith(prefix):
            data = data[len(prefix):]
        return cls.from_msgpack_value(_unpack(data))


def _unpack(data: bytes) -> Any:
    try:
        return msgpack.unpackb(data, raw=False, strict_map_key=False)
    except (ValueError, TypeError, msgpack.UnpackException) as exc:
        raise DecodingError(exc) from exc


class TransactionId(AlgorandMsgpack):
    """Objects identified by the SHA-512/256 hash of their encoding."""

    def id_raw(self) -> bytes:
        """Return the 32-byte hash of the prefixed encoding."""
        return sha512_256(self.encode())

    def id(self) -> str:
        """Return the identifier as unpadded base32 text."""
        return base64.b32encode(self.id_raw()).decode("ascii").rstrip("=")