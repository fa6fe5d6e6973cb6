"""Protocol constants and hashing and MessagePack helpers."""

from __future__ import annotations

from typing import Any

from cryptography.hazmat.primitives import hashes

HASH_BYTES_LENGTH = 32
ALGORAND_CHECKSUM_BYTE_LENGTH = 4
ALGORAND_ADDRESS_LENGTH = 58
ALGORAND_PUBLIC_KEY_BYTE_LENGTH = 32
ALGORAND_SECRET_KEY_BYTE_LENGTH = 32
ALGORAND_SIGNATURE_BYTE_LENGTH = 64
ALGORAND_SIGNATURE_ENCODING_INCR = 75


def sha512_256(data: bytes) -> bytes:
    """Return the SHA-512/256 digest of ``data``."""
    digest = hashes.Hash(hashes.SHA512_256())
    digest.update(bytes(data))
    return digest.finalize()


def sort_msgpack_value(value: Any) -> Any:
    """Return ``value`` with every map's string keys sorted, recursively.

    Map entries whose key is not a string are dropped, as the canonical
    encoding only has string keys.
    """
    if isinstance(value, dict):
        return {
            key: sort_msgpack_value(item)
            for key, item in sorted(
                ((k, v) for k, v in value.items() if isinstance(k, str)),
                key=lambda pair: pair[0],
            )
        }
    if isinstance(value, (list, tuple)):
        return [sort_msgpack_value(item) for item in value]
    return value


def pub_key_to_checksum(pub_key: bytes) -> bytes:
    """Return the 4-byte address checksum of a public key."""
    return sha512_256(pub_key)[HASH_BYTES_LENGTH - ALGORAND_CHECKSUM_BYTE_LENGTH:]