"""
Transaction requests.

Read side: list transactions globally or per account, ledger or liquidity
pool, or fetch one by hash. Write side: ``PostTransactionRequest`` submits a
signed transaction envelope.
"""

from __future__ import annotations
from typing import ClassVar, Dict, Generic, TypeVar

from ..models.request import IdentifierSlot, IncludeFailedRequest, PostRequest, Request, Unset
from ..runtime.errors import ErrorCode, ValidationError
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
    NoTransactionHash,
    TransactionHash,
    TransactionHashT,
)
from .resources import ACCOUNTS_PATH, LEDGERS_PATH, LIQUIDITY_POOLS_PATH, TRANSACTIONS_PATH


class AllTransactionsRequest(IncludeFailedRequest):
    """List all transactions, ``/transactions``."""

    def _resource_path(self) -> str:
        return TRANSACTIONS_PATH


class SingleTransactionRequest(Request, Generic[TransactionHashT]):
    """Details of one transaction, ``/transactions/{hash}``."""

    transaction_hash: TransactionHashT = NoTransactionHash()  # type: ignore[assignment]

    def set_transaction_hash(self, transaction_hash: str) -> SingleTransactionRequest[TransactionHash]:
        """
        Raises:
            ValidationError: If the hash is not 64 hexadecimal characters
        """
        return self._advance(transaction_hash=TransactionHash.validated(transaction_hash))

    def _resource_path(self) -> str:
        return f"{TRANSACTIONS_PATH}/{self.transaction_hash.value}"

    def get_query_parameters(self: SingleTransactionRequest[TransactionHash]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleTransactionRequest[TransactionHash], base_url: str) -> str:
        return super().build_url(base_url)


class TransactionsForAccountRequest(IncludeFailedRequest, Generic[AccountIdT]):
    """Transactions of one account, ``/accounts/{account_id}/transactions``."""

    account_id: AccountIdT = NoAccountId()  # type: ignore[assignment]

    def set_account_id(self, account_id: str) -> TransactionsForAccountRequest[AccountId]:
        return self._advance(account_id=AccountId.validated(account_id))

    def _resource_path(self) -> str:
        return f"{ACCOUNTS_PATH}/{self.account_id.value}/{TRANSACTIONS_PATH}"

    def get_query_parameters(self: TransactionsForAccountRequest[AccountId]) -> str:
        return super().get_query_parameters()

    def build_url(self: TransactionsForAccountRequest[AccountId], base_url: str) -> str:
        return super().build_url(base_url)


class TransactionsForLedgerRequest(IncludeFailedRequest, Generic[LedgerSequenceT]):
    """Transactions in one ledger, ``/ledgers/{sequence}/transactions``."""

    sequence: LedgerSequenceT = NoLedgerSequence()  # type: ignore[assignment]

    def set_sequence(self, sequence: int) -> TransactionsForLedgerRequest[LedgerSequence]:
        return self._advance(sequence=LedgerSequence.validated(sequence))

    def _resource_path(self) -> str:
        return f"{LEDGERS_PATH}/{self.sequence.value}/{TRANSACTIONS_PATH}"

    def get_query_parameters(self: TransactionsForLedgerRequest[LedgerSequence]) -> str:
        return super().get_query_parameters()

    def build_url(self: TransactionsForLedgerRequest[LedgerSequence], base_url: str) -> str:
        return super().build_url(base_url)


class TransactionsForLiquidityPoolRequest(IncludeFailedRequest, Generic[LiquidityPoolIdT]):
    """Transactions touching one liquidity pool, ``/liquidity_pools/{id}/transactions``."""

    liquidity_pool_id: LiquidityPoolIdT = NoLiquidityPoolId()  # type: ignore[assignment]

    def set_liquidity_pool_id(self, liquidity_pool_id: str) -> TransactionsForLiquidityPoolRequest[LiquidityPoolId]:
        return self._advance(liquidity_pool_id=LiquidityPoolId.validated(liquidity_pool_id))

    def _resource_path(self) -> str:
        return f"{LIQUIDITY_POOLS_PATH}/{self.liquidity_pool_id.value}/{TRANSACTIONS_PATH}"

    def get_query_parameters(self: TransactionsForLiquidityPoolRequest[LiquidityPoolId]) -> str:
        return super().get_query_parameters()

    def build_url(self: TransactionsForLiquidityPoolRequest[LiquidityPoolId], base_url: str) -> str:
        return super().build_url(base_url)


class NoTransactionEnvelope(Unset):
    slot_name: ClassVar[str] = "transaction envelope"


class TransactionEnvelope(IdentifierSlot):
    """Base64 encoded ``TransactionEnvelope`` XDR."""

    value: str

    @classmethod
    def validated(cls, envelope_xdr: str) -> TransactionEnvelope:
        if not isinstance(envelope_xdr, str) or not envelope_xdr.strip():
            raise ValidationError("transaction envelope must not be empty", ErrorCode.INVALID_PARAMETER)
        return cls(value=envelope_xdr.strip())


TransactionEnvelopeT = TypeVar("TransactionEnvelopeT", NoTransactionEnvelope, TransactionEnvelope)


class PostTransactionRequest(PostRequest, Generic[TransactionEnvelopeT]):
    """
    Submit a signed transaction, ``POST /transactions`` with form field ``tx``.

    Example:
        >>> request = PostTransactionRequest().set_transaction_envelope_xdr(envelope)
        >>> request.get_body()
        {'tx': 'AAAAAgAAAAA...'}
    """

    transaction_envelope_xdr: TransactionEnvelopeT = NoTransactionEnvelope()  # type: ignore[assignment]

    def set_transaction_envelope_xdr(self, envelope_xdr: str) -> PostTransactionRequest[TransactionEnvelope]:
        """
        Raises:
            ValidationError: If the envelope is empty
        """
        return self.model_copy(update={"transaction_envelope_xdr": TransactionEnvelope.validated(envelope_xdr)})

    def _resource_path(self) -> str:
        return TRANSACTIONS_PATH

    def get_body(self: PostTransactionRequest[TransactionEnvelope]) -> Dict[str, str]:
        return {"tx": self.transaction_envelope_xdr.value}


__all__ = [
    "AllTransactionsRequest",
    "SingleTransactionRequest",
    "TransactionsForAccountRequest",
    "TransactionsForLedgerRequest",
    "TransactionsForLiquidityPoolRequest",
    "NoTransactionEnvelope",
    "TransactionEnvelope",
    "PostTransactionRequest",
]
