"""Payment transactions, which move ALGO between accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .address import Address
from .header import TransactionHeader, _is_zero_address, _read_address, _read_uint


@dataclass(frozen=True, kw_only=True)
class PaymentTransactionFields:
    """The fields of a payment transaction."""

    header: TransactionHeader
    receiver: Address
    amount: int
    close_remainder_to: Address | None = None

    def to_msgpack_fields(self) -> dict[str, Any]:
        """Return the header and payment wire fields, leaving out empty values."""
        fields = self.header.to_msgpack_fields()
        if not self.receiver.is_zero():
            fields["rcv"] = self.receiver.pub_key
        if self.amount:
            fields["amt"] = self.amount
        if not _is_zero_address(self.close_remainder_to):
            fields["close"] = self.close_remainder_to.pub_key
        return fields

    @classmethod
    def from_msgpack_fields(cls, fields: Mapping[str, Any]) -> PaymentTransactionFields:
        """Build payment fields from decoded wire fields."""
        receiver = _read_address(fields, "rcv")
        return cls(
            header=TransactionHeader.from_msgpack_fields(fields),
            receiver=receiver if receiver is not None else Address(),
            amount=_read_uint(fields, "amt"),
            close_remainder_to=_read_address(fields, "close"),
        )