"""Header fields shared by every transaction type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .address import Address
from .errors import DecodingError, InputError
from .utils import ALGORAND_PUBLIC_KEY_BYTE_LENGTH, HASH_BYTES_LENGTH

_U64_MAX = 2**64 - 1


def _read_uint(fields: Mapping[str, Any], key: str) -> int:
    value = fields.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise DecodingError(f"field {key!r} must be an unsigned 64-bit integer, got {value!r}")
    return value


def _read_optional_uint(fields: Mapping[str, Any], key: str) -> int | None:
    if fields.get(key) is None:
        return None
    return _read_uint(fields, key)


def _read_bytes(fields: Mapping[str, Any], key: str, length: int | None = None) -> bytes | None:
    value = fields.get(key)
    if value is None:
        return None
    if not isinstance(value, (bytes, bytearray)):
        raise DecodingError(f"field {key!r} must be bytes, got {type(value).__name__}")
    if length is not None and len(value) != length:
        raise DecodingError(f"field {key!r} must be {length} bytes, got {len(value)}")
    return bytes(value)


def _read_string(fields: Mapping[str, Any], key: str) -> str | None:
    value = fields.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodingError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _read_address(fields: Mapping[str, Any], key: str) -> Address | None:
    pub_key = _read_bytes(fields, key, ALGORAND_PUBLIC_KEY_BYTE_LENGTH)
    return None if pub_key is None else Address(pub_key)


def _is_zero_address(address: Address | None) -> bool:
    return address is None or address.is_zero()


def _is_empty_bytes32(value: bytes | None) -> bool:
    return value is None or not any(value)


def _check_bytes32(name: str, value: bytes | None) -> bytes | None:
    if value is None:
        return None
    value = bytes(value)
    if len(value) != HASH_BYTES_LENGTH:
        raise InputError(f"{name} must be {HASH_BYTES_LENGTH} bytes, got {len(value)}")
    return value


@dataclass(frozen=True, kw_only=True)
class TransactionHeader:
    """Fields present in every transaction, whatever its type."""

    sender: Address = Address()
    first_valid: int = 0
    last_valid: int = 0
    fee: int | None = None
    genesis_hash: bytes | None = None
    genesis_id: str | None = None
    note: bytes | None = None
    rekey_to: Address | None = None
    lease: bytes | None = None
    group: bytes | None = None

    def __post_init__(self) -> None:
        for name in ("genesis_hash", "lease", "group"):
            object.__setattr__(self, name, _check_bytes32(name, getattr(self, name)))
        if self.note is not None:
            object.__setattr__(self, "note", bytes(self.note))

    def to_msgpack_fields(self) -> dict[str, Any]:
        """Return the header's wire fields, leaving out empty and zero values."""
        fields: dict[str, Any] = {}
        if not self.sender.is_zero():
            fields["snd"] = self.sender.pub_key
        if self.fee:
            fields["fee"] = self.fee
        if self.first_valid:
            fields["fv"] = self.first_valid
        if self.last_valid:
            fields["lv"] = self.last_valid
        if not _is_empty_bytes32(self.genesis_hash):
            fields["gh"] = self.genesis_hash
        if self.genesis_id:
            fields["gen"] = self.genesis_id
        if self.note:
            fields["note"] = self.note
        if not _is_zero_address(self.rekey_to):
            fields["rekey"] = self.rekey_to.pub_key
        if not _is_empty_bytes32(self.lease):
            fields["lx"] = self.lease
        if not _is_empty_bytes32(self.group):
            fields["grp"] = self.group
        return fields

    @classmethod
    def from_msgpack_fields(cls, fields: Mapping[str, Any]) -> TransactionHeader:
        """Build a header from decoded wire fields; unknown keys are ignored."""
        sender = _read_address(fields, "snd")
        return cls(
            sender=sender if sender is not None else Address(),
            fee=_read_optional_uint(fields, "fee"),
            first_valid=_read_uint(fields, "fv"),
            last_valid=_read_uint(fields, "lv"),
            genesis_hash=_read_bytes(fields, "gh", HASH_BYTES_LENGTH),
            genesis_id=_read_string(fields, "gen"),
            note=_read_bytes(fields, "note"),
            rekey_to=_read_address(fields, "rekey"),
            lease=_read_bytes(fields, "lx", HASH_BYTES_LENGTH),
            group=_read_bytes(fields, "grp", HASH_BYTES_LENGTH),
        )