import base64

import msgpack
import pytest

from algokit_transact.address import Address
from algokit_transact.asset_transfer import AssetTransferTransactionFields
from algokit_transact.errors import DecodingError, InputError, UnknownTransactionTypeError
from algokit_transact.header import TransactionHeader
from algokit_transact.payment import PaymentTransactionFields
from algokit_transact.transaction import FeeParams, SignedTransaction, Transaction
from algokit_transact.utils import (
    ALGORAND_SIGNATURE_BYTE_LENGTH,
    ALGORAND_SIGNATURE_ENCODING_INCR,
)

TESTNET_GENESIS_HASH = base64.b64decode("SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI=")
SENDER = Address.from_string("RIMARGKZU46OZ77OLPDHHPUJ7YBSHRTCYMQUC64KZCCMESQAFQMYU6SL2Q")
RECEIVER = Address.from_string("VXH5UP6JLU2CGIYPUFZ4Z5OTLJCLMA5EXD3YHTMVNDE5P7ILZ324FSYSPQ")
OPT_IN_ACCOUNT = Address.from_string("JB3K6HTAXODO4THESLNYTSG6GQUFNEVIQG7A6ZYVDACR6WA3ZF52TKU5NA")
ZERO_SIGNATURE = bytes(ALGORAND_SIGNATURE_BYTE_LENGTH)


def simple_testnet_header(**kwargs):
    values = {
        "genesis_id": "testnet-v1.0",
        "genesis_hash": TESTNET_GENESIS_HASH,
        "fee": 1000,
        "sender": SENDER,
        "first_valid": 50659540,
        "last_valid": 50660540,
    }
    values.update(kwargs)
    return TransactionHeader(**values)


def simple_payment_fields(header=None):
    return PaymentTransactionFields(
        header=header or simple_testnet_header(),
        amount=101000,
        receiver=RECEIVER,
    )


def payment_with_note_fields():
    note = base64.b64decode("MGFhNTBkMjctYjhmNy00ZDc3LWExZmItNTUxZmQ1NWRmMmJj")
    return simple_payment_fields(simple_testnet_header(note=note))


def opt_in_asset_transfer_fields():
    return AssetTransferTransactionFields(
        header=simple_testnet_header(
            sender=OPT_IN_ACCOUNT, first_valid=51183672, last_valid=51183872
        ),
        asset_id=107686045,
        amount=0,
        receiver=OPT_IN_ACCOUNT,
    )


SIMPLE_PAYMENT_UNSIGNED_BYTES = bytes([
    84, 88, 137, 163, 97, 109, 116, 206, 0, 1, 138, 136, 163, 102, 101, 101, 205, 3,
    232, 162, 102, 118, 206, 3, 5, 0, 212, 163, 103, 101, 110, 172, 116, 101, 115, 116,
    110, 101, 116, 45, 118, 49, 46, 48, 162, 103, 104, 196, 32, 72, 99, 181, 24, 164,
    179, 200, 78, 200, 16, 242, 45, 79, 16, 129, 203, 15, 113, 240, 89, 167, 172, 32,
    222, 198, 47, 127, 112, 229, 9, 58, 34, 162, 108, 118, 206, 3, 5, 4, 188, 163, 114,
    99, 118, 196, 32, 173, 207, 218, 63, 201, 93, 52, 35, 35, 15, 161, 115, 204, 245,
    211, 90, 68, 182, 3, 164, 184, 247, 131, 205, 149, 104, 201, 215, 253, 11, 206,
    245, 163, 115, 110, 100, 196, 32, 138, 24, 8, 153, 89, 167, 60, 236, 255, 238, 91,
    198, 115, 190, 137, 254, 3, 35, 198, 98, 195, 33, 65, 123, 138, 200, 132, 194, 74,
    0, 44, 25, 164, 116, 121, 112, 101, 163, 112, 97, 121,
])


def test_payment_transaction_encoding():
    fields = simple_payment_fields()
    payment_tx = Transaction(fields)

    encoded = payment_tx.encode()
    decoded = Transaction.decode(encoded)
    assert decoded == payment_tx
    assert decoded == Transaction(fields)

    signed_tx = SignedTransaction(payment_tx, ZERO_SIGNATURE)
    encoded_stx = signed_tx.encode()
    decoded_stx = SignedTransaction.decode(encoded_stx)
    assert decoded_stx == signed_tx
    assert decoded_stx.transaction == payment_tx

    raw_encoded = payment_tx.encode_raw()
    assert encoded[0] == ord("T")
    assert encoded[1] == ord("X")
    assert len(encoded) == len(raw_encoded) + 2
    assert encoded[2:] == raw_encoded
    assert len(encoded) == 174


def test_asset_transfer_transaction_encoding():
    fields = opt_in_asset_transfer_fields()
    asset_transfer_tx = Transaction(fields)

    encoded = asset_transfer_tx.encode()
    decoded = Transaction.decode(encoded)
    assert decoded == asset_transfer_tx
    assert decoded == Transaction(fields)

    signed_tx = SignedTransaction(asset_transfer_tx, ZERO_SIGNATURE)
    encoded_stx = signed_tx.encode()
    decoded_stx = SignedTransaction.decode(encoded_stx)
    assert decoded_stx == signed_tx
    assert decoded_stx.transaction == asset_transfer_tx

    raw_encoded = asset_transfer_tx.encode_raw()
    assert encoded[:2] == b"TX"
    assert len(encoded) == len(raw_encoded) + 2
    assert encoded[2:] == raw_encoded
    assert len(encoded) == 178


def test_simple_payment_wire_bytes():
    assert Transaction(simple_payment_fields()).encode() == SIMPLE_PAYMENT_UNSIGNED_BYTES


def test_simple_payment_id():
    tx = Transaction(simple_payment_fields())
    assert tx.id() == "TZM3P4ZL4DLIEZ3WOEP67MQ6JITTO4D3NJN3RCA5YDBC3V4LA5LA"


def test_opt_in_asset_transfer_id():
    tx = Transaction(opt_in_asset_transfer_fields())
    assert tx.id() == "JIDBHDPLBASULQZFI4EY5FJWR6VQRMPPFSGYBKE2XKW65N3UQJXA"
    assert tx.id_raw() == bytes([
        74, 6, 19, 141, 235, 8, 37, 69, 195, 37, 71, 9, 142, 149, 54, 143, 171, 8, 177,
        239, 44, 141, 128, 168, 154, 186, 173, 238, 183, 116, 130, 110,
    ])


def test_pay_transaction_id():
    expected_tx_id_raw = bytes([
        35, 93, 0, 170, 96, 221, 1, 74, 119, 147, 131, 116, 7, 31, 225, 40, 215, 47, 44, 120, 128,
        245, 41, 65, 116, 255, 147, 64, 90, 80, 147, 223,
    ])
    expected_tx_id = "ENOQBKTA3UAUU54TQN2AOH7BFDLS6LDYQD2SSQLU76JUAWSQSPPQ"

    payment_tx = Transaction(payment_with_note_fields())
    signed_tx = SignedTransaction(payment_tx, ZERO_SIGNATURE)

    assert payment_tx.id() == expected_tx_id
    assert payment_tx.id_raw() == expected_tx_id_raw
    assert signed_tx.id() == expected_tx_id
    assert signed_tx.id_raw() == expected_tx_id_raw


def test_estimate_transaction_size():
    payment_tx = Transaction(simple_payment_fields())
    encoding_length = len(payment_tx.encode_raw())
    estimation = payment_tx.estimate_size()

    signed_tx = SignedTransaction(payment_tx, ZERO_SIGNATURE)
    actual_size = len(signed_tx.encode())

    assert estimation == encoding_length + ALGORAND_SIGNATURE_ENCODING_INCR
    assert estimation == actual_size
    assert signed_tx.estimate_size() == actual_size


def test_min_fee():
    txn = Transaction(simple_payment_fields())
    updated = txn.assign_fee(FeeParams(fee_per_byte=0, min_fee=1000))
    assert updated.header().fee == 1000


def test_extra_fee():
    txn = Transaction(simple_payment_fields())
    updated = txn.assign_fee(FeeParams(fee_per_byte=1, min_fee=1000, extra_fee=500))
    assert updated.header().fee == 1500


def test_max_fee():
    txn = Transaction(simple_payment_fields())
    with pytest.raises(InputError) as excinfo:
        txn.assign_fee(FeeParams(fee_per_byte=10, min_fee=500, max_fee=1000))
    assert (
        str(excinfo.value)
        == "Calculated transaction fee 2470 µALGO is greater than max fee 1000 µALGO"
    )


def test_calculate_fee():
    txn = Transaction(simple_payment_fields())
    updated = txn.assign_fee(FeeParams(fee_per_byte=5, min_fee=1000))
    assert updated.header().fee == 1235


def test_assign_fee_leaves_original_unchanged():
    txn = Transaction(simple_payment_fields(simple_testnet_header(fee=None)))
    updated = txn.assign_fee(FeeParams(fee_per_byte=5, min_fee=1000))
    assert txn.header().fee is None
    assert updated.fields.amount == txn.fields.amount
    assert updated.transaction_type() == "pay"


def test_transaction_types():
    assert Transaction(simple_payment_fields()).transaction_type() == "pay"
    assert Transaction(opt_in_asset_transfer_fields()).transaction_type() == "axfer"
    assert Transaction(simple_payment_fields()).to_msgpack_value()["type"] == "pay"


def test_unknown_transaction_type():
    with pytest.raises(UnknownTransactionTypeError):
        Transaction.from_msgpack_value({"type": "acfg"})


def test_missing_transaction_type():
    with pytest.raises(DecodingError):
        Transaction.from_msgpack_value({"amt": 5})


def test_decode_empty_bytes():
    with pytest.raises(InputError):
        Transaction.decode(b"")


def test_decode_garbage_bytes():
    with pytest.raises(DecodingError):
        Transaction.decode(b"\xc1")


def test_signed_transaction_must_be_a_map():
    with pytest.raises(InputError):
        SignedTransaction.decode(msgpack.packb([1, 2]))


def test_signed_transaction_requires_txn():
    with pytest.raises(DecodingError):
        SignedTransaction.decode(msgpack.packb({"sig": ZERO_SIGNATURE}))


def test_signed_transaction_signature_length():
    with pytest.raises(InputError):
        SignedTransaction(Transaction(simple_payment_fields()), bytes(10))


def test_signed_transaction_has_no_prefix():
    signed_tx = SignedTransaction(Transaction(simple_payment_fields()), ZERO_SIGNATURE)
    assert signed_tx.encode() == signed_tx.encode_raw()
    assert signed_tx.encode()[0] == 0x82