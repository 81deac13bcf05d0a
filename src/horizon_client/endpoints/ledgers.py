"""
Ledger requests.

- ``LedgersRequest``: page through all ledgers
- ``SingleLedgerRequest``: one ledger by sequence number
"""

from __future__ import annotations
from typing import Generic

from ..models.request import PaginatedRequest, Request
from .identifiers import LedgerSequence, LedgerSequenceT, NoLedgerSequence
from .resources import LEDGERS_PATH


class LedgersRequest(PaginatedRequest):
    """List all ledgers, ``/ledgers``."""

    def _resource_path(self) -> str:
        return LEDGERS_PATH


class SingleLedgerRequest(Request, Generic[LedgerSequenceT]):
    """
    Details of one ledger, ``/ledgers/{sequence}``.

    Usable once ``set_sequence`` has been called.
    """

    sequence: LedgerSequenceT = NoLedgerSequence()  # type: ignore[assignment]

    def set_sequence(self, sequence: int) -> SingleLedgerRequest[LedgerSequence]:
        """
        Set the ledger sequence.

        Raises:
            ValidationError: If sequence is less than 1
        """
        return self._advance(sequence=LedgerSequence.validated(sequence))

    def _resource_path(self) -> str:
        return f"{LEDGERS_PATH}/{self.sequence.value}"

    def get_query_parameters(self: SingleLedgerRequest[LedgerSequence]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleLedgerRequest[LedgerSequence], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = ["LedgersRequest", "SingleLedgerRequest"]
