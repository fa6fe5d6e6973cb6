"""Asset transfer transactions, which move assets between accounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .address import Address
from .header import TransactionHeader, _is_zero_address, _read_address, _read_uint


@dataclass(frozen=True, kw_only=True)
class AssetTransferTransactionFields:
    """The fields of an asset transfer transaction.

    ``amount`` counts the asset's smallest units; decimals play no part.
    ``asset_sender`` marks a clawback, ``close_remainder_to`` an opt-out.
    """

    header: TransactionHeader
    asset_id: int
    amount: int
    receiver: Address
    asset_sender: Address | None = None
    close_remainder_to: Address | None = None

    def to_msgpack_fields(self) -> dict[str, Any]:
        """Return the header and transfer wire fields, leaving out empty values."""
        fields = self.header.to_msgpack_fields()
        if self.asset_id:
            fields["xaid"] = self.asset_id
        if self.amount:
            fields["aamt"] = self.amount
        if not self.receiver.is_zero():
            fields["arcv"] = self.receiver.pub_key
        if not _is_zero_address(self.asset_sender):
            fields["asnd"] = self.asset_sender.pub_key
        if not _is_zero_address(self.close_remainder_to):
            fields["aclose"] = self.close_remainder_to.pub_key
        return fields

    @classmethod
    def from_msgpack_fields(cls, fields: Mapping[str, Any]) -> AssetTransferTransactionFields:
        """Build asset transfer fields from decoded wire fields."""
        receiver = _read_address(fields, "arcv")
        return cls(
            header=TransactionHeader.from_msgpack_fields(fields),
            asset_id=_read_uint(fields, "xaid"),
            amount=_read_uint(fields, "aamt"),
            receiver=receiver if receiver is not None else Address(),
            asset_sender=_read_address(fields, "asnd"),
            close_remainder_to=_read_address(fields, "aclose"),
        )