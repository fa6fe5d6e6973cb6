"""Transactions of every supported type, fees, and signed transactions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Union

from .asset_transfer import AssetTransferTransactionFields
from .encoding import TransactionId, _unpack
from .errors import DecodingError, InputError, UnknownTransactionTypeError
from .header import TransactionHeader
from .payment import PaymentTransactionFields
from .utils import ALGORAND_SIGNATURE_BYTE_LENGTH, ALGORAND_SIGNATURE_ENCODING_INCR

_Fields = Union[PaymentTransactionFields, AssetTransferTransactionFields]

_TYPE_TAGS: dict[type, str] = {
    PaymentTransactionFields: "pay",
    AssetTransferTransactionFields: "axfer",
}
_FIELD_TYPES: dict[str, type] = {tag: kind for kind, tag in _TYPE_TAGS.items()}


@dataclass(frozen=True)
class FeeParams:
    """How to work out a transaction's fee."""

    fee_per_byte: int
    min_fee: int
    extra_fee: int | None = None
    max_fee: int | None = None


@dataclass(frozen=True)
class Transaction(TransactionId):
    """A transaction, tagged on the wire by its type."""

    fields: _Fields

    def __post_init__(self) -> None:
        if type(self.fields) not in _TYPE_TAGS:
            raise InputError(f"unsupported transaction fields: {type(self.fields).__name__}")

    def header(self) -> TransactionHeader:
        """Return the common header of this transaction."""
        return self.fields.header

    def transaction_type(self) -> str:
        """Return the wire tag of this transaction's type."""
        return _TYPE_TAGS[type(self.fields)]

    def to_msgpack_value(self) -> dict[str, Any]:
        value = self.fields.to_msgpack_fields()
        value["type"] = self.transaction_type()
        return value

    @classmethod
    def from_msgpack_value(cls, value: Any) -> Transaction:
        if not isinstance(value, dict):
            raise DecodingError(f"expected a transaction map, got {type(value).__name__}")
        tag = value.get("type")
        if tag is None:
            raise DecodingError("missing field `type`")
        fields_type = _FIELD_TYPES.get(tag)
        if fields_type is None:
            raise UnknownTransactionTypeError(tag)
        return cls(fields_type.from_msgpack_fields(value))

    def estimate_size(self) -> int:
        """Return the size this transaction will have once signed."""
        return len(self.encode_raw()) + ALGORAND_SIGNATURE_ENCODING_INCR

    def assign_fee(self, params: FeeParams) -> Transaction:
        """Return a copy whose header fee is worked out from ``params``."""
        calculated_fee = 0
        if params.fee_per_byte > 0:
            calculated_fee = params.fee_per_byte * self.estimate_size()
        calculated_fee = max(calculated_fee, params.min_fee)
        if params.extra_fee is not None:
            calculated_fee += params.extra_fee
        if params.max_fee is not None and calculated_fee > params.max_fee:
            raise InputError(
                f"Calculated transaction fee {calculated_fee} µALGO "
                f"is greater than max fee {params.max_fee} µALGO"
            )
        header = replace(self.header(), fee=calculated_fee)
        return type(self)(replace(self.fields, header=header))


@dataclass(frozen=True)
class SignedTransaction(TransactionId):
    """A transaction together with the Ed25519 signature that authorizes it."""

    PREFIX: ClassVar[bytes] = b""

    transaction: Transaction
    signature: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.transaction, Transaction):
            raise InputError("transaction must be a Transaction")
        signature = bytes(self.signature)
        if len(signature) != ALGORAND_SIGNATURE_BYTE_LENGTH:
            raise InputError(
                f"signature must be {ALGORAND_SIGNATURE_BYTE_LENGTH} bytes, got {len(signature)}"
            )
        object.__setattr__(self, "signature", signature)

    def to_msgpack_value(self) -> dict[str, Any]:
        return {"txn": self.transaction.to_msgpack_value(), "sig": self.signature}

    @classmethod
    def from_msgpack_value(cls, value: Any) -> SignedTransaction:
        if not isinstance(value, dict):
            raise InputError(
                f"expected signed transaction to be a map, but got a: {type(value).__name__}"
            )
        if "txn" not in value:
            raise DecodingError("missing field `txn`")
        signature = value.get("sig")
        if signature is None:
            raise DecodingError("missing field `sig`")
        if not isinstance(signature, (bytes, bytearray)) or len(signature) != ALGORAND_SIGNATURE_BYTE_LENGTH:
            raise DecodingError(f"field 'sig' must be {ALGORAND_SIGNATURE_BYTE_LENGTH} bytes")
        return cls(Transaction.from_msgpack_value(value["txn"]), bytes(signature))

    @classmethod
    def decode(cls, data: bytes) -> SignedTransaction:
        """Decode a signed transaction, which carries no domain prefix."""
        return cls.from_msgpack_value(_unpack(bytes(data)))

    def id_raw(self) -> bytes:
        """Return the raw identifier of the transaction that was signed."""
        return self.transaction.id_raw()

    def estimate_size(self) -> int:
        """Return the size of the encoded signed transaction."""
        return len(self.encode())