"""
Operation requests.

Operations can be listed globally, scoped to an account, ledger, liquidity
pool or transaction (the identifier is a path segment), or fetched by id.
"""

from __future__ import annotations
from typing import Generic, Union

from ..models.request import IncludeFailedRequest, PaginatedRequest, Request
from .identifiers import (
    AccountId,
    AccountIdT,
    LedgerSequence,
    LedgerSequenceT,
    LiquidityPoolId,
    LiquidityPoolIdT,
    NoAccountId,
    NoLedgerSequence,
    NoLiquidityPoolId,
    NoOperationId,
    NoTransactionHash,
    OperationId,
    OperationIdT,
    TransactionHash,
    TransactionHashT,
)
from .resources import ACCOUNTS_PATH, LEDGERS_PATH, LIQUIDITY_POOLS_PATH, OPERATIONS_PATH, TRANSACTIONS_PATH


class AllOperationsRequest(IncludeFailedRequest):
    """List all operations, ``/operations``."""

    def _resource_path(self) -> str:
        return OPERATIONS_PATH


class SingleOperationRequest(Request, Generic[OperationIdT]):
    """Details of one operation, ``/operations/{operation_id}``."""

    operation_id: OperationIdT = NoOperationId()  # type: ignore[assignment]

    def set_operation_id(self, operation_id: Union[int, str]) -> SingleOperationRequest[OperationId]:
        return self._advance(operation_id=OperationId.validated(operation_id))

    def _resource_path(self) -> str:
        return f"{OPERATIONS_PATH}/{self.operation_id.value}"

    def get_query_parameters(self: SingleOperationRequest[OperationId]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleOperationRequest[OperationId], base_url: str) -> str:
        return super().build_url(base_url)


class OperationsForAccountRequest(IncludeFailedRequest, Generic[AccountIdT]):
    """Operations of one account, ``/accounts/{account_id}/operations``."""

    account_id: AccountIdT = NoAccountId()  # type: ignore[assignment]

    def set_account_id(self, account_id: str) -> OperationsForAccountRequest[AccountId]:
        return self._advance(account_id=AccountId.validated(account_id))

    def _resource_path(self) -> str:
        return f"{ACCOUNTS_PATH}/{self.account_id.value}/{OPERATIONS_PATH}"

    def get_query_parameters(self: OperationsForAccountRequest[AccountId]) -> str:
        return super().get_query_parameters()

    def build_url(self: OperationsForAccountRequest[AccountId], base_url: str) -> str:
        return super().build_url(base_url)


class OperationsForLedgerRequest(IncludeFailedRequest, Generic[LedgerSequenceT]):
    """Operations in one ledger, ``/ledgers/{sequence}/operations``."""

    sequence: LedgerSequenceT = NoLedgerSequence()  # type: ignore[assignment]

    def set_sequence(self, sequence: int) -> OperationsForLedgerRequest[LedgerSequence]:
        return self._advance(sequence=LedgerSequence.validated(sequence))

    def _resource_path(self) -> str:
        return f"{LEDGERS_PATH}/{self.sequence.value}/{OPERATIONS_PATH}"

    def get_query_parameters(self: OperationsForLedgerRequest[LedgerSequence]) -> str:
        return super().get_query_parameters()

    def build_url(self: OperationsForLedgerRequest[LedgerSequence], base_url: str) -> str:
        return super().build_url(base_url)


class OperationsForLiquidityPoolRequest(IncludeFailedRequest, Generic[LiquidityPoolIdT]):
    """Operations on one liquidity pool, ``/liquidity_pools/{id}/operations``."""

    liquidity_pool_id: LiquidityPoolIdT = NoLiquidityPoolId()  # type: ignore[assignment]

    def set_liquidity_pool_id(self, liquidity_pool_id: str) -> OperationsForLiquidityPoolRequest[LiquidityPoolId]:
        return self._advance(liquidity_pool_id=LiquidityPoolId.validated(liquidity_pool_id))

    def _resource_path(self) -> str:
        return f"{LIQUIDITY_POOLS_PATH}/{self.liquidity_pool_id.value}/{OPERATIONS_PATH}"

    def get_query_parameters(self: OperationsForLiquidityPoolRequest[LiquidityPoolId]) -> str:
        return super().get_query_parameters()

    def build_url(self: OperationsForLiquidityPoolRequest[LiquidityPoolId], base_url: str) -> str:
        return super().build_url(base_url)


class OperationsForTransactionRequest(PaginatedRequest, Generic[TransactionHashT]):
    """
    Operations of one transaction, ``/transactions/{hash}/operations``.

    Takes pagination only, no ``include_failed`` flag.
    """

    transaction_hash: TransactionHashT = NoTransactionHash()  # type: ignore[assignment]

    def set_transaction_hash(self, transaction_hash: str) -> OperationsForTransactionRequest[TransactionHash]:
        return self._advance(transaction_hash=TransactionHash.validated(transaction_hash))

    def _resource_path(self) -> str:
        return f"{TRANSACTIONS_PATH}/{self.transaction_hash.value}/{OPERATIONS_PATH}"

    def get_query_parameters(self: OperationsForTransactionRequest[TransactionHash]) -> str:
        return super().get_query_parameters()

    def build_url(self: OperationsForTransactionRequest[TransactionHash], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = [
    "AllOperationsRequest",
    "SingleOperationRequest",
    "OperationsForAccountRequest",
    "OperationsForLedgerRequest",
    "OperationsForLiquidityPoolRequest",
    "OperationsForTransactionRequest",
]
