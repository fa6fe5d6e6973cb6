"""Exception types raised while building, encoding and decoding transactions."""


class AlgoKitTransactError(Exception):
    """Base class of every error raised by this package."""


class EncodingError(AlgoKitTransactError):
    """A value could not be encoded to MessagePack."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Error ocurred during encoding: {detail}")


class DecodingError(AlgoKitTransactError):
    """Bytes could not be decoded from MessagePack."""

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"Error ocurred during decoding: {detail}")


class UnknownTransactionTypeError(AlgoKitTransactError):
    """A transaction carried a type tag that is not supported."""

    def __init__(self, transaction_type: object) -> None:
        self.transaction_type = transaction_type
        super().__init__(f"Unknown transaction type: {transaction_type}")


class InputError(AlgoKitTransactError, ValueError):
    """An argument handed to the package is not acceptable."""


class InvalidAddressError(AlgoKitTransactError, ValueError):
    """A string or key does not form a valid address."""