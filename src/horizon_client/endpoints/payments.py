"""
Payment requests.

Payments are the payment-like operations (create account, payment, path
payments, account merge), listed globally or per account, ledger or
transaction.
"""

from __future__ import annotations
from typing import Generic

from ..models.request import IncludeFailedRequest
from .identifiers import (
    AccountId,
    AccountIdT,
    LedgerSequence,
    LedgerSequenceT,
    NoAccountId,
    NoLedgerSequence,
    NoTransactionHash,
    TransactionHash,
    TransactionHashT,
)
from .resources import ACCOUNTS_PATH, LEDGERS_PATH, PAYMENTS_PATH, TRANSACTIONS_PATH


class AllPaymentsRequest(IncludeFailedRequest):
    """List all payments, ``/payments``."""

    def _resource_path(self) -> str:
        return PAYMENTS_PATH


class PaymentsForAccountRequest(IncludeFailedRequest, Generic[AccountIdT]):
    """Payments of one account, ``/accounts/{account_id}/payments``."""

    account_id: AccountIdT = NoAccountId()  # type: ignore[assignment]

    def set_account_id(self, account_id: str) -> PaymentsForAccountRequest[AccountId]:
        return self._advance(account_id=AccountId.validated(account_id))

    def _resource_path(self) -> str:
        return f"{ACCOUNTS_PATH}/{self.account_id.value}/{PAYMENTS_PATH}"

    def get_query_parameters(self: PaymentsForAccountRequest[AccountId]) -> str:
        return super().get_query_parameters()

    def build_url(self: PaymentsForAccountRequest[AccountId], base_url: str) -> str:
        return super().build_url(base_url)


class PaymentsForLedgerRequest(IncludeFailedRequest, Generic[LedgerSequenceT]):
    """Payments in one ledger, ``/ledgers/{sequence}/payments``."""

    sequence: LedgerSequenceT = NoLedgerSequence()  # type: ignore[assignment]

    def set_sequence(self, sequence: int) -> PaymentsForLedgerRequest[LedgerSequence]:
        return self._advance(sequence=LedgerSequence.validated(sequence))

    def _resource_path(self) -> str:
        return f"{LEDGERS_PATH}/{self.sequence.value}/{PAYMENTS_PATH}"

    def get_query_parameters(self: PaymentsForLedgerRequest[LedgerSequence]) -> str:
        return super().get_query_parameters()

    def build_url(self: PaymentsForLedgerRequest[LedgerSequence], base_url: str) -> str:
        return super().build_url(base_url)


class PaymentsForTransactionRequest(IncludeFailedRequest, Generic[TransactionHashT]):
    """Payments of one transaction, ``/transactions/{hash}/payments``."""

    transaction_hash: TransactionHashT = NoTransactionHash()  # type: ignore[assignment]

    def set_transaction_hash(self, transaction_hash: str) -> PaymentsForTransactionRequest[TransactionHash]:
        return self._advance(transaction_hash=TransactionHash.validated(transaction_hash))

    def _resource_path(self) -> str:
        return f"{TRANSACTIONS_PATH}/{self.transaction_hash.value}/{PAYMENTS_PATH}"

    def get_query_parameters(self: PaymentsForTransactionRequest[TransactionHash]) -> str:
        return super().get_query_parameters()

    def build_url(self: PaymentsForTransactionRequest[TransactionHash], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = [
    "AllPaymentsRequest",
    "PaymentsForAccountRequest",
    "PaymentsForLedgerRequest",
    "PaymentsForTransactionRequest",
]
