"""Algorand addresses: a public key shown as base32 with a checksum."""

from __future__ import annotations

import base64
from dataclasses import dataclass

from .errors import InvalidAddressError
from .utils import (
    ALGORAND_ADDRESS_LENGTH,
    ALGORAND_CHECKSUM_BYTE_LENGTH,
    ALGORAND_PUBLIC_KEY_BYTE_LENGTH,
    pub_key_to_checksum,
)

_ZERO_KEY = bytes(ALGORAND_PUBLIC_KEY_BYTE_LENGTH)


@dataclass(frozen=True)
class Address:
    """A 32-byte Ed25519 public key identifying an account."""

    pub_key: bytes = _ZERO_KEY

    def __post_init__(self) -> None:
        key = bytes(self.pub_key)
        if len(key) != ALGORAND_PUBLIC_KEY_BYTE_LENGTH:
            raise InvalidAddressError(
                f"public key must be {ALGORAND_PUBLIC_KEY_BYTE_LENGTH} bytes, got {len(key)}"
            )
        object.__setattr__(self, "pub_key", key)

    @classmethod
    def from_pubkey(cls, pub_key: bytes) -> Address:
        """Create an address from a 32-byte public key."""
        return cls(pub_key=bytes(pub_key))

    @classmethod
    def from_string(cls, s: str) -> Address:
        """Parse a 58-character base32 address, checking its checksum."""
        if len(s) != ALGORAND_ADDRESS_LENGTH:
            raise InvalidAddressError("address length is not 58")
        padding = "=" * (-len(s) % 8)
        try:
            decoded = base64.b32decode(s + padding)
        except ValueError as exc:
            raise InvalidAddressError("address is not valid base32") from exc

        pub_key = decoded[:ALGORAND_PUBLIC_KEY_BYTE_LENGTH]
        if len(pub_key) != ALGORAND_PUBLIC_KEY_BYTE_LENGTH:
            raise InvalidAddressError("could not decode address into 32-byte public key")
        checksum = decoded[ALGORAND_PUBLIC_KEY_BYTE_LENGTH:]
        if len(checksum) != ALGORAND_CHECKSUM_BYTE_LENGTH:
            raise InvalidAddressError("could not get 4-byte checksum from decoded address")
        if pub_key_to_checksum(pub_key) != checksum:
            raise InvalidAddressError("checksum is invalid")
        return cls(pub_key=pub_key)

    def checksum(self) -> bytes:
        """Return the 4-byte checksum of this address's public key."""
        return pub_key_to_checksum(self.pub_key)

    def is_zero(self) -> bool:
        """Tell whether the public key is all zero bytes."""
        return self.pub_key == _ZERO_KEY

    def __str__(self) -> str:
        encoded = base64.b32encode(self.pub_key + self.checksum())
        return encoded.decode("ascii").rstrip("=")