"""
Effect requests.

Effects are the changes an operation made to the ledger. They can be listed
globally or filtered by account, liquidity pool, operation or transaction,
or scoped to one ledger.
"""

from __future__ import annotations
from typing import Generic, List, Optional, Union

from ..models.request import PaginatedRequest
from ..runtime.query import Fragment, fragment
from ..runtime.validation import (
    validate_liquidity_pool_id,
    validate_operation_id,
    validate_transaction_hash,
)
from .identifiers import LedgerSequence, LedgerSequenceT, NoLedgerSequence
from .resources import EFFECTS_PATH, LEDGERS_PATH


class AllEffectsRequest(PaginatedRequest):
    """List all effects, ``/effects``."""

    def _resource_path(self) -> str:
        return EFFECTS_PATH


class EffectsForAccountRequest(PaginatedRequest):
    """Effects that changed one account, ``/effects?account=...``."""

    account_id: Optional[str] = None

    def set_account_id(self, account_id: str) -> EffectsForAccountRequest:
        return self._replace(account_id=account_id)

    def _resource_path(self) -> str:
        return EFFECTS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [fragment("account", self.account_id), *self.pagination.fragments()]


class EffectsForLedgerRequest(PaginatedRequest, Generic[LedgerSequenceT]):
    """
    Effects that occurred in one ledger, ``/ledgers/{sequence}/effects``.

    The sequence is part of the path and must be set before the URL can be built.
    """

    sequence: LedgerSequenceT = NoLedgerSequence()  # type: ignore[assignment]

    def set_sequence(self, sequence: int) -> EffectsForLedgerRequest[LedgerSequence]:
        """
        Set the ledger sequence.

        Raises:
            ValidationError: If sequence is less than 1
        """
        return self._advance(sequence=LedgerSequence.validated(sequence))

    def _resource_path(self) -> str:
        return f"{LEDGERS_PATH}/{self.sequence.value}/{EFFECTS_PATH}"

    def get_query_parameters(self: EffectsForLedgerRequest[LedgerSequence]) -> str:
        return super().get_query_parameters()

    def build_url(self: EffectsForLedgerRequest[LedgerSequence], base_url: str) -> str:
        return super().build_url(base_url)


class EffectsForLiquidityPoolRequest(PaginatedRequest):
    """Effects on one liquidity pool, ``/effects?liquidity_pool_id=...``."""

    liquidity_pool_id: Optional[str] = None

    def set_liquidity_pool_id(self, liquidity_pool_id: str) -> EffectsForLiquidityPoolRequest:
        """
        Raises:
            ValidationError: If the id is not 64 hexadecimal characters
        """
        return self._replace(liquidity_pool_id=validate_liquidity_pool_id(liquidity_pool_id))

    def _resource_path(self) -> str:
        return EFFECTS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [fragment("liquidity_pool_id", self.liquidity_pool_id), *self.pagination.fragments()]


class EffectsForOperationRequest(PaginatedRequest):
    """Effects of one operation, ``/effects?operation_id=...``."""

    operation_id: Optional[str] = None

    def set_operation_id(self, operation_id: Union[int, str]) -> EffectsForOperationRequest:
        return self._replace(operation_id=validate_operation_id(operation_id))

    def _resource_path(self) -> str:
        return EFFECTS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [fragment("operation_id", self.operation_id), *self.pagination.fragments()]


class EffectsForTransactionRequest(PaginatedRequest):
    """Effects of one transaction, ``/effects?transaction_hash=...``."""

    transaction_hash: Optional[str] = None

    def set_transaction_hash(self, transaction_hash: str) -> EffectsForTransactionRequest:
        return self._replace(transaction_hash=validate_transaction_hash(transaction_hash))

    def _resource_path(self) -> str:
        return EFFECTS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [fragment("transaction_hash", self.transaction_hash), *self.pagination.fragments()]


__all__ = [
    "AllEffectsRequest",
    "EffectsForAccountRequest",
    "EffectsForLedgerRequest",
    "EffectsForLiquidityPoolRequest",
    "EffectsForOperationRequest",
    "EffectsForTransactionRequest",
]
