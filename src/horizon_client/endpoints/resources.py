"""Horizon resource path segments."""

ACCOUNTS_PATH = "accounts"
ASSETS_PATH = "assets"
CLAIMABLE_BALANCES_PATH = "claimable_balances"
EFFECTS_PATH = "effects"
FEE_STATS_PATH = "fee_stats"
LEDGERS_PATH = "ledgers"
LIQUIDITY_POOLS_PATH = "liquidity_pools"
OFFERS_PATH = "offers"
OPERATIONS_PATH = "operations"
ORDER_BOOK_PATH = "order_book"
PATHS_PATH = "paths"
PATHS_STRICT_RECEIVE_PATH = "strict-receive"
PATHS_STRICT_SEND_PATH = "strict-send"
PAYMENTS_PATH = "payments"
TRADE_AGGREGATIONS_PATH = "trade_aggregations"
TRADES_PATH = "trades"
TRANSACTIONS_PATH = "transactions"
