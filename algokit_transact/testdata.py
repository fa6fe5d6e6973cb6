"""Sample transactions and reference data for tests and fixture export."""

from __future__ import annotations

import base64
import dataclasses
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from .address import Address
from .asset_transfer import AssetTransferTransactionFields
from .encoding import AlgorandMsgpack
from .errors import InputError
from .header import TransactionHeader
from .payment import PaymentTransactionFields
from .transaction import SignedTransaction, Transaction
from .utils import ALGORAND_PUBLIC_KEY_BYTE_LENGTH, ALGORAND_SECRET_KEY_BYTE_LENGTH

_TESTNET_GENESIS_HASH = base64.b64decode("SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI=")
_MAINNET_GENESIS_HASH = base64.b64decode("wGHE2Pwdvd7S12BL5FaOP20EGYesN73ktiC1qzkkit8=")
_SAMPLE_ADDRESS = "RIMARGKZU46OZ77OLPDHHPUJ7YBSHRTCYMQUC64KZCCMESQAFQMYU6SL2Q"
_PAYMENT_RECEIVER = "VXH5UP6JLU2CGIYPUFZ4Z5OTLJCLMA5EXD3YHTMVNDE5P7ILZ324FSYSPQ"
_ASSET_ACCOUNT = "JB3K6HTAXODO4THESLNYTSG6GQUFNEVIQG7A6ZYVDACR6WA3ZF52TKU5NA"
_PAYMENT_NOTE = base64.b64decode("MGFhNTBkMjctYjhmNy00ZDc3LWExZmItNTUxZmQ1NWRmMmJj")

TEST_SIGNING_KEY = bytes(
    [
        2, 205, 103, 33, 67, 14, 82, 196, 115, 196, 206, 254, 50, 110, 63, 182,
        149, 229, 184, 216, 93, 11, 13, 99, 69, 213, 218, 165, 134, 118, 47, 44,
    ]
)


def testnet_header(**kwargs: Any) -> TransactionHeader:
    """Return a header for the test network; keyword arguments override fields."""
    fields: dict[str, Any] = {
        "genesis_id": "testnet-v1.0",
        "genesis_hash": _TESTNET_GENESIS_HASH,
        "fee": 1000,
    }
    fields.update(kwargs)
    return TransactionHeader(**fields)


def mainnet_header(**kwargs: Any) -> TransactionHeader:
    """Return a header for the main network; keyword arguments override fields."""
    fields: dict[str, Any] = {
        "genesis_id": "mainnet-v1.0",
        "genesis_hash": _MAINNET_GENESIS_HASH,
        "fee": 1000,
    }
    fields.update(kwargs)
    return TransactionHeader(**fields)


def simple_testnet_header(**kwargs: Any) -> TransactionHeader:
    """Return a test network header with a sender and validity window."""
    fields: dict[str, Any] = {
        "sender": sample_address(),
        "first_valid": 50659540,
        "last_valid": 50660540,
    }
    fields.update(kwargs)
    return testnet_header(**fields)


def zero_address() -> Address:
    """Return the address whose public key is all zero bytes."""
    return Address.from_pubkey(bytes(ALGORAND_PUBLIC_KEY_BYTE_LENGTH))


def sample_address() -> Address:
    """Return a fixed, valid sample address."""
    return Address.from_string(_SAMPLE_ADDRESS)


def simple_payment() -> Transaction:
    """Return a plain payment on the test network."""
    return Transaction(
        PaymentTransactionFields(
            header=simple_testnet_header(),
            amount=101000,
            receiver=Address.from_string(_PAYMENT_RECEIVER),
        )
    )


def payment_with_note() -> Transaction:
    """Return the simple payment with a note attached."""
    payment = simple_payment()
    header = simple_testnet_header(note=_PAYMENT_NOTE)
    return Transaction(dataclasses.replace(payment.fields, header=header))


def opt_in_asset_transfer() -> Transaction:
    """Return an asset opt-in: a zero transfer from an account to itself."""
    account = Address.from_string(_ASSET_ACCOUNT)
    return Transaction(
        AssetTransferTransactionFields(
            header=simple_testnet_header(
                sender=account,
                first_valid=51183672,
                last_valid=51183872,
            ),
            asset_id=107686045,
            amount=0,
            receiver=account,
        )
    )


def _to_json(value: Any) -> Any:
    if isinstance(value, AlgorandMsgpack):
        return _to_json(value.to_msgpack_value())
    if isinstance(value, Address):
        return list(value.pub_key)
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    if isinstance(value, dict):
        return {str(key): _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _to_json(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    return value


@dataclass(frozen=True)
class TransactionTestData:
    """A transaction with its identifier, encodings and signature."""

    transaction: Transaction
    id: str
    id_raw: bytes
    unsigned_bytes: bytes
    signing_private_key: bytes
    signed_bytes: bytes

    @classmethod
    def from_transaction(
        cls, transaction: Transaction, signing_private_key: bytes
    ) -> TransactionTestData:
        """Work out the identifier and encodings and sign with the given seed."""
        seed = bytes(signing_private_key)
        if len(seed) != ALGORAND_SECRET_KEY_BYTE_LENGTH:
            raise InputError(
                f"signing key must be {ALGORAND_SECRET_KEY_BYTE_LENGTH} bytes, got {len(seed)}"
            )
        signing_key = Ed25519PrivateKey.from_private_bytes(seed)
        unsigned_bytes = transaction.encode()
        signed = SignedTransaction(transaction, signing_key.sign(unsigned_bytes))
        return cls(
            transaction=transaction,
            id=transaction.id(),
            id_raw=transaction.id_raw(),
            unsigned_bytes=unsigned_bytes,
            signing_private_key=seed,
            signed_bytes=signed.encode(),
        )

    def as_json(self, transform: Callable[[TransactionTestData], Any] | None = None) -> Any:
        """Return a JSON-ready value of this data, or of ``transform(self)``."""
        if transform is None:
            return _to_json(self)
        return _to_json(transform(self))


def simple_payment_test_data() -> TransactionTestData:
    """Return reference data for the simple payment."""
    return TransactionTestData.from_transaction(simple_payment(), TEST_SIGNING_KEY)


def opt_in_asset_transfer_test_data() -> TransactionTestData:
    """Return reference data for the asset opt-in."""
    return TransactionTestData.from_transaction(opt_in_asset_transfer(), TEST_SIGNING_KEY)


_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def _camel_case(text: str) -> str:
    words = [
        word
        for part in re.split(r"[_\-\s]+", text)
        for word in _WORD.findall(part)
    ]
    if not words:
        return ""
    head, *rest = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def normalise_json(value: Any) -> Any:
    """Drop null entries from objects and turn their keys into camelCase, recursively."""
    if isinstance(value, dict):
        return {
            _camel_case(key): normalise_json(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, list):
        return [normalise_json(item) for item in value]
    return value


def export_test_data(
    path: str | Path, transform: Callable[[TransactionTestData], Any] | None = None
) -> None:
    """Write the reference data for every sample transaction to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = normalise_json(
        {
            "simple_payment": simple_payment_test_data().as_json(transform),
            "opt_in_asset_transfer": opt_in_asset_transfer_test_data().as_json(transform),
        }
    )
    path.write_text(
        json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8"
    )