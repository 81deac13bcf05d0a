"""
Typed Horizon records.

Field names follow Horizon's JSON. Amounts and balances stay strings, as
Horizon sends them, to keep their exact decimal representation.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .response import HorizonModel, Record


class Ledger(Record):
    id: str
    paging_token: str
    hash: str
    prev_hash: Optional[str] = None
    sequence: int
    successful_transaction_count: int = 0
    failed_transaction_count: int = 0
    operation_count: int = 0
    tx_set_operation_count: Optional[int] = None
    closed_at: str
    total_coins: str
    fee_pool: str
    base_fee_in_stroops: int
    base_reserve_in_stroops: int
    max_tx_set_size: int
    protocol_version: int
    header_xdr: Optional[str] = None


class Thresholds(BaseModel):
    low_threshold: int
    med_threshold: int
    high_threshold: int


class AccountFlags(BaseModel):
    auth_required: bool = False
    auth_revocable: bool = False
    auth_immutable: bool = False
    auth_clawback_enabled: bool = False


class Balance(BaseModel):
    balance: str
    asset_type: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    liquidity_pool_id: Optional[str] = None
    limit: Optional[str] = None
    buying_liabilities: Optional[str] = None
    selling_liabilities: Optional[str] = None


class Signer(BaseModel):
    weight: int
    key: str
    signer_type: str = Field(alias="type")

    model_config = {"populate_by_name": True}


class Account(Record):
    id: str
    account_id: str
    sequence: str
    subentry_count: int
    last_modified_ledger: int
    last_modified_time: Optional[str] = None
    thresholds: Thresholds
    flags: AccountFlags
    balances: List[Balance] = Field(default_factory=list)
    signers: List[Signer] = Field(default_factory=list)
    data: Dict[str, str] = Field(default_factory=dict)
    num_sponsoring: int = 0
    num_sponsored: int = 0
    sponsor: Optional[str] = None
    paging_token: str


class AssetAccounts(BaseModel):
    authorized: int = 0
    authorized_to_maintain_liabilities: int = 0
    unauthorized: int = 0


class AssetStat(Record):
    """Statistics of one issued asset, as listed by ``/assets``."""

    asset_type: str
    asset_code: str
    asset_issuer: str
    paging_token: str
    num_claimable_balances: int = 0
    num_liquidity_pools: int = 0
    num_contracts: int = 0
    accounts: Optional[AssetAccounts] = None
    claimable_balances_amount: Optional[str] = None
    liquidity_pools_amount: Optional[str] = None
    flags: Optional[AccountFlags] = None


class Claimant(BaseModel):
    destination: str
    predicate: Dict[str, Any] = Field(default_factory=dict)


class ClaimableBalance(Record):
    id: str
    asset: str
    amount: str
    sponsor: Optional[str] = None
    last_modified_ledger: int
    last_modified_time: Optional[str] = None
    claimants: List[Claimant] = Field(default_factory=list)
    paging_token: str


class Effect(Record):
    """
    One effect. Effect specific attributes (amount, asset, ...) are kept as
    extra fields.
    """

    id: str
    paging_token: str
    account: Optional[str] = None
    effect_type: str = Field(alias="type")
    type_i: int
    created_at: str


class FeeDistribution(BaseModel):
    max: str
    min: str
    mode: str
    p10: str
    p20: str
    p30: str
    p40: str
    p50: str
    p60: str
    p70: str
    p80: str
    p90: str
    p95: str
    p99: str


class FeeStats(Record):
    last_ledger: str
    last_ledger_base_fee: str
    ledger_capacity_usage: str
    fee_charged: FeeDistribution
    max_fee: FeeDistribution


class Reserve(BaseModel):
    asset: str
    amount: str


class LiquidityPool(Record):
    id: str
    paging_token: str
    fee_bp: int
    pool_type: str = Field(alias="type")
    total_trustlines: str
    total_shares: str
    reserves: List[Reserve] = Field(default_factory=list)
    last_modified_ledger: int
    last_modified_time: Optional[str] = None


class Price(BaseModel):
    n: int
    d: int


class Offer(Record):
    id: str
    paging_token: str
    seller: str
    selling: Dict[str, str]
    buying: Dict[str, str]
    amount: str
    price_r: Price
    price: str
    last_modified_ledger: int
    last_modified_time: Optional[str] = None
    sponsor: Optional[str] = None


class Operation(Record):
    """
    One operation. Operation specific attributes are kept as extra fields.
    """

    id: str
    paging_token: str
    transaction_successful: bool
    source_account: str
    operation_type: str = Field(alias="type")
    type_i: int
    created_at: str
    transaction_hash: str


class Payment(Operation):
    """A payment-like operation as listed by the payment endpoints."""

    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    from_account: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    amount: Optional[str] = None


class PriceLevel(BaseModel):
    price_r: Price
    price: str
    amount: str


class OrderBook(HorizonModel):
    bids: List[PriceLevel] = Field(default_factory=list)
    asks: List[PriceLevel] = Field(default_factory=list)
    base: Dict[str, str]
    counter: Dict[str, str]


class PathAsset(BaseModel):
    asset_type: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None


class PaymentPath(HorizonModel):
    """One payment path found by the path finding endpoints."""

    source_asset_type: str
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    source_amount: str
    destination_asset_type: str
    destination_asset_code: Optional[str] = None
    destination_asset_issuer: Optional[str] = None
    destination_amount: str
    path: List[PathAsset] = Field(default_factory=list)


class TradeAggregation(HorizonModel):
    timestamp: str
    trade_count: str
    base_volume: str
    counter_volume: str
    avg: str
    high: str
    high_r: Price
    low: str
    low_r: Price
    open: str
    open_r: Price
    close: str
    close_r: Price


class Trade(Record):
    id: str
    paging_token: str
    ledger_close_time: str
    trade_type: str
    base_offer_id: Optional[str] = None
    base_liquidity_pool_id: Optional[str] = None
    base_account: Optional[str] = None
    base_amount: str
    base_asset_type: str
    base_asset_code: Optional[str] = None
    base_asset_issuer: Optional[str] = None
    counter_offer_id: Optional[str] = None
    counter_liquidity_pool_id: Optional[str] = None
    counter_account: Optional[str] = None
    counter_amount: str
    counter_asset_type: str
    counter_asset_code: Optional[str] = None
    counter_asset_issuer: Optional[str] = None
    base_is_seller: bool
    price: Optional[Price] = None


class Transaction(Record):
    id: str
    paging_token: str
    successful: bool
    hash: str
    ledger: int
    created_at: str
    source_account: str
    source_account_sequence: str
    fee_account: Optional[str] = None
    fee_charged: str
    max_fee: str
    operation_count: int
    envelope_xdr: str
    result_xdr: str
    result_meta_xdr: Optional[str] = None
    fee_meta_xdr: Optional[str] = None
    memo_type: str
    memo: Optional[str] = None
    signatures: List[str] = Field(default_factory=list)


__all__ = [
    "Ledger",
    "Thresholds",
    "AccountFlags",
    "Balance",
    "Signer",
    "Account",
    "AssetAccounts",
    "AssetStat",
    "Claimant",
    "ClaimableBalance",
    "Effect",
    "FeeDistribution",
    "FeeStats",
    "Reserve",
    "LiquidityPool",
    "Price",
    "Offer",
    "Operation",
    "Payment",
    "PriceLevel",
    "OrderBook",
    "PathAsset",
    "PaymentPath",
    "TradeAggregation",
    "Trade",
    "Transaction",
]
