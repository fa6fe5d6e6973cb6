# algokit_transact

A small library for building, encoding, decoding and identifying Algorand
transactions.

It covers:

- **Addresses** (`algokit_transact.address`): `Address` holds a 32-byte
  Ed25519 public key. `str(address)` gives the 58-character base32 form with
  its 4-byte checksum. `Address.from_string` parses that form and checks the
  length, the base32 and the checksum. `Address.from_pubkey`,
  `Address.checksum()` and `Address.is_zero()` round it out.
- **Transactions** (`algokit_transact.transaction`): `Transaction` wraps
  either `PaymentTransactionFields` (`algokit_transact.payment`) or
  `AssetTransferTransactionFields` (`algokit_transact.asset_transfer`). Both
  carry a shared `TransactionHeader` (`algokit_transact.header`). On the wire
  they are tagged `pay` and `axfer`.
- **Canonical MessagePack encoding** (`algokit_transact.encoding`): map keys
  are sorted and zero or empty fields are left out. `encode()` adds the `TX`
  domain prefix and `encode_raw()` leaves it off. `decode()` accepts either
  form.
- **Transaction IDs**: `id_raw()` is the SHA-512/256 hash of the prefixed
  encoding. `id()` is that hash as base32 without padding.
- **Signed transactions**: `SignedTransaction` pairs a transaction with a
  64-byte signature. It is encoded without a prefix, and its ID is the ID of
  the transaction inside it.
- **Fees**: `Transaction.assign_fee(FeeParams(...))` works out the fee from
  the estimated signed size, a minimum fee, an optional extra fee and an
  optional maximum fee.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from algokit_transact.address import Address
from algokit_transact.header import TransactionHeader
from algokit_transact.payment import PaymentTransactionFields
from algokit_transact.transaction import FeeParams, SignedTransaction, Transaction

sender = Address.from_string(
    "RIMARGKZU46OZ77OLPDHHPUJ7YBSHRTCYMQUC64KZCCMESQAFQMYU6SL2Q"
)
receiver = Address.from_string(
    "VXH5UP6JLU2CGIYPUFZ4Z5OTLJCLMA5EXD3YHTMVNDE5P7ILZ324FSYSPQ"
)

header = TransactionHeader(
    sender=sender,
    first_valid=50659540,
    last_valid=50660540,
    genesis_id="testnet-v1.0",
)
txn = Transaction(
    PaymentTransactionFields(header=header, receiver=receiver, amount=101000)
)

txn = txn.assign_fee(FeeParams(fee_per_byte=0, min_fee=1000))
print(txn.header().fee)  # 1000

encoded = txn.encode()  # b"TX" + canonical msgpack
assert Transaction.decode(encoded) == txn
print(txn.id())

signed = SignedTransaction(transaction=txn, signature=bytes(64))
assert SignedTransaction.decode(signed.encode()) == signed
assert signed.id() == txn.id()
```

### Fees

`assign_fee` starts from `fee_per_byte * estimate_size()`, or from 0 if
`fee_per_byte` is 0. It raises that to `min_fee` if it is lower, then adds
`extra_fee`. If the result is above `max_fee`, it raises `InputError`. It
returns a new transaction and leaves the original unchanged.

`Transaction.estimate_size()` is the length of the raw encoding plus 75
bytes for the signature that will be added. `SignedTransaction.estimate_size()`
is the length of its actual encoding.

### Errors

Every error derives from `algokit_transact.errors.AlgoKitTransactError`:

- `EncodingError`: a value could not be packed.
- `DecodingError`: bytes could not be unpacked, or a field has the wrong
  type or length.
- `UnknownTransactionTypeError`: the `type` tag is neither `pay` nor `axfer`.
- `InputError`: an argument is not acceptable, for example empty input to
  `decode`, a wrong-length signature, or a fee above `max_fee`.
- `InvalidAddressError`: an address string or public key is not valid.

`InputError` and `InvalidAddressError` are also `ValueError`s.

### Helpers

`algokit_transact.utils` holds the protocol constants together with
`sha512_256`, `sort_msgpack_value` and `pub_key_to_checksum`.

### Sample data

`algokit_transact.testdata` provides ready-made values:

- headers: `testnet_header`, `mainnet_header` and `simple_testnet_header`.
  Keyword arguments override their fields.
- addresses: `zero_address` and `sample_address`.
- transactions: `simple_payment`, `payment_with_note` and
  `opt_in_asset_transfer`.

`TransactionTestData.from_transaction(transaction, seed)` records a
transaction's ID, its unsigned bytes, and its bytes signed with an Ed25519
key made from a 32-byte seed. `simple_payment_test_data()` and
`opt_in_asset_transfer_test_data()` build these with a fixed sample seed.
`export_test_data(path, transform=None)` writes both to a JSON file. Keys are
in camelCase and null entries are dropped.

## What it does not do

The package supports only payment and asset transfer transactions. It does
not talk to a network: it neither submits transactions nor fetches
parameters such as the genesis hash or current round. Apart from the sample
data in `algokit_transact.testdata`, it does not sign: `SignedTransaction`
takes a signature you have made elsewhere.