"""
Typestate markers for required request parameters.

Most are identifiers embedded in request paths; the asset, amount, account
and resolution slots are required query parameters of the order book, path
finding and trade aggregation requests.

Each identifier has an unset marker (a subclass of ``Unset``) and a set marker
holding the validated value. A request generic over one of the TypeVars below
starts in the unset state and moves to the set state through its validating
setter; there is no way back. The guard is checked at runtime: building a
request whose slot is still unset raises UnsetIdentifierError.
"""

from __future__ import annotations
from decimal import Decimal
from typing import ClassVar, TypeVar, Union

from ..models.assets import Asset
from ..models.request import IdentifierSlot, Unset
from ..runtime.validation import (
    validate_claimable_balance_id,
    validate_ledger_sequence,
    validate_liquidity_pool_id,
    validate_offer_id,
    validate_amount,
    validate_operation_id,
    validate_public_key,
    validate_resolution,
    validate_transaction_hash,
)


class NoAccountId(Unset):
    slot_name: ClassVar[str] = "account id"


class AccountId(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, account_id: str) -> AccountId:
        return cls(value=validate_public_key(account_id, "account id"))


class NoLedgerSequence(Unset):
    slot_name: ClassVar[str] = "ledger sequence"


class LedgerSequence(IdentifierSlot):
    value: int

    @classmethod
    def validated(cls, sequence: int) -> LedgerSequence:
        return cls(value=validate_ledger_sequence(sequence))


class NoLiquidityPoolId(Unset):
    slot_name: ClassVar[str] = "liquidity pool id"


class LiquidityPoolId(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, liquidity_pool_id: str) -> LiquidityPoolId:
        return cls(value=validate_liquidity_pool_id(liquidity_pool_id))


class NoTransactionHash(Unset):
    slot_name: ClassVar[str] = "transaction hash"


class TransactionHash(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, transaction_hash: str) -> TransactionHash:
        return cls(value=validate_transaction_hash(transaction_hash))


class NoOfferId(Unset):
    slot_name: ClassVar[str] = "offer id"


class OfferId(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, offer_id: Union[int, str]) -> OfferId:
        return cls(value=validate_offer_id(offer_id))


class NoOperationId(Unset):
    slot_name: ClassVar[str] = "operation id"


class OperationId(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, operation_id: Union[int, str]) -> OperationId:
        return cls(value=validate_operation_id(operation_id))


class NoClaimableBalanceId(Unset):
    slot_name: ClassVar[str] = "claimable balance id"


class ClaimableBalanceId(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, claimable_balance_id: str) -> ClaimableBalanceId:
        return cls(value=validate_claimable_balance_id(claimable_balance_id))


class AssetSlot(IdentifierSlot):
    """A required asset parameter."""

    value: Asset


class NoSellingAsset(Unset):
    slot_name: ClassVar[str] = "selling asset"


class SellingAsset(AssetSlot):
    pass


class NoBuyingAsset(Unset):
    slot_name: ClassVar[str] = "buying asset"


class BuyingAsset(AssetSlot):
    pass


class NoBaseAsset(Unset):
    slot_name: ClassVar[str] = "base asset"


class BaseAsset(AssetSlot):
    pass


class NoCounterAsset(Unset):
    slot_name: ClassVar[str] = "counter asset"


class CounterAsset(AssetSlot):
    pass


class NoDestinationAsset(Unset):
    slot_name: ClassVar[str] = "destination asset"


class DestinationAsset(AssetSlot):
    pass


class NoSourceAsset(Unset):
    slot_name: ClassVar[str] = "source asset"


class SourceAsset(AssetSlot):
    pass


class NoDestinationAmount(Unset):
    slot_name: ClassVar[str] = "destination amount"


class DestinationAmount(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, amount: Union[str, int, Decimal]) -> DestinationAmount:
        return cls(value=validate_amount(amount, "destination amount"))


class NoSourceAmount(Unset):
    slot_name: ClassVar[str] = "source amount"


class SourceAmount(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, amount: Union[str, int, Decimal]) -> SourceAmount:
        return cls(value=validate_amount(amount, "source amount"))


class NoSourceAccount(Unset):
    slot_name: ClassVar[str] = "source account"


class SourceAccount(IdentifierSlot):
    value: str

    @classmethod
    def validated(cls, account_id: str) -> SourceAccount:
        return cls(value=validate_public_key(account_id, "source account"))


class NoResolution(Unset):
    slot_name: ClassVar[str] = "resolution"


class Resolution(IdentifierSlot):
    """Trade aggregation bucket size in milliseconds."""

    value: int

    @classmethod
    def validated(cls, resolution: int) -> Resolution:
        return cls(value=validate_resolution(resolution))


AccountIdT = TypeVar("AccountIdT", NoAccountId, AccountId)
LedgerSequenceT = TypeVar("LedgerSequenceT", NoLedgerSequence, LedgerSequence)
LiquidityPoolIdT = TypeVar("LiquidityPoolIdT", NoLiquidityPoolId, LiquidityPoolId)
TransactionHashT = TypeVar("TransactionHashT", NoTransactionHash, TransactionHash)
OfferIdT = TypeVar("OfferIdT", NoOfferId, OfferId)
OperationIdT = TypeVar("OperationIdT", NoOperationId, OperationId)
ClaimableBalanceIdT = TypeVar("ClaimableBalanceIdT", NoClaimableBalanceId, ClaimableBalanceId)
SellingAssetT = TypeVar("SellingAssetT", NoSellingAsset, SellingAsset)
BuyingAssetT = TypeVar("BuyingAssetT", NoBuyingAsset, BuyingAsset)
BaseAssetT = TypeVar("BaseAssetT", NoBaseAsset, BaseAsset)
CounterAssetT = TypeVar("CounterAssetT", NoCounterAsset, CounterAsset)
DestinationAssetT = TypeVar("DestinationAssetT", NoDestinationAsset, DestinationAsset)
SourceAssetT = TypeVar("SourceAssetT", NoSourceAsset, SourceAsset)
DestinationAmountT = TypeVar("DestinationAmountT", NoDestinationAmount, DestinationAmount)
SourceAmountT = TypeVar("SourceAmountT", NoSourceAmount, SourceAmount)
SourceAccountT = TypeVar("SourceAccountT", NoSourceAccount, SourceAccount)
ResolutionT = TypeVar("ResolutionT", NoResolution, Resolution)


__all__ = [
    "NoAccountId", "AccountId", "AccountIdT",
    "NoLedgerSequence", "LedgerSequence", "LedgerSequenceT",
    "NoLiquidityPoolId", "LiquidityPoolId", "LiquidityPoolIdT",
    "NoTransactionHash", "TransactionHash", "TransactionHashT",
    "NoOfferId", "OfferId", "OfferIdT",
    "NoOperationId", "OperationId", "OperationIdT",
    "NoClaimableBalanceId", "ClaimableBalanceId", "ClaimableBalanceIdT",
    "AssetSlot",
    "NoSellingAsset", "SellingAsset", "SellingAssetT",
    "NoBuyingAsset", "BuyingAsset", "BuyingAssetT",
    "NoBaseAsset", "BaseAsset", "BaseAssetT",
    "NoCounterAsset", "CounterAsset", "CounterAssetT",
    "NoDestinationAsset", "DestinationAsset", "DestinationAssetT",
    "NoSourceAsset", "SourceAsset", "SourceAssetT",
    "NoDestinationAmount", "DestinationAmount", "DestinationAmountT",
    "NoSourceAmount", "SourceAmount", "SourceAmountT",
    "NoSourceAccount", "SourceAccount", "SourceAccountT",
    "NoResolution", "Resolution", "ResolutionT",
]
