from .factories import (
    BASE_URL,
    ACCOUNT_ID,
    OTHER_ACCOUNT_ID,
    TRANSACTION_HASH,
    LIQUIDITY_POOL_ID,
    CLAIMABLE_BALANCE_ID,
    mk_alphanum4,
    mk_alphanum12,
    mk_ledger,
    mk_page,
    mk_transaction,
    dumps,
)
from .mocks import MockResponse

__all__ = [
    "BASE_URL",
    "ACCOUNT_ID",
    "OTHER_ACCOUNT_ID",
    "TRANSACTION_HASH",
    "LIQUIDITY_POOL_ID",
    "CLAIMABLE_BALANCE_ID",
    "mk_alphanum4",
    "mk_alphanum12",
    "mk_ledger",
    "mk_page",
    "mk_transaction",
    "dumps",
    "MockResponse",
]
