"""
Payment path requests.

Path finding asks Horizon which assets can be converted into a destination
asset (strict receive) or what a source asset can be converted into (strict
send). Required parameters are typestate slots that can be set in any order.
"""

from __future__ import annotations
from decimal import Decimal
from typing import Generic, List, Optional, Sequence, Tuple, Union

from ..models.assets import Asset
from ..models.request import Request
from ..runtime.query import Fragment, asset_type_fragments, encode_asset_list, fragment
from ..runtime.validation import validate_public_key
from .identifiers import (
    DestinationAmount,
    DestinationAmountT,
    DestinationAsset,
    DestinationAssetT,
    NoDestinationAmount,
    NoDestinationAsset,
    NoSourceAccount,
    NoSourceAmount,
    NoSourceAsset,
    SourceAccount,
    SourceAccountT,
    SourceAmount,
    SourceAmountT,
    SourceAsset,
    SourceAssetT,
)
from .resources import PATHS_PATH, PATHS_STRICT_RECEIVE_PATH, PATHS_STRICT_SEND_PATH


class FindPaymentPathsRequest(Request, Generic[DestinationAssetT, DestinationAmountT, SourceAccountT]):
    """
    Find payment paths from an account's assets, ``/paths``.

    Requires destination asset, destination amount and source account; the
    destination account is optional.
    """

    destination_asset: DestinationAssetT = NoDestinationAsset()  # type: ignore[assignment]
    destination_amount: DestinationAmountT = NoDestinationAmount()  # type: ignore[assignment]
    source_account: SourceAccountT = NoSourceAccount()  # type: ignore[assignment]
    destination_account: Optional[str] = None

    def set_destination_asset(
        self, destination_asset: Asset
    ) -> FindPaymentPathsRequest[DestinationAsset, DestinationAmountT, SourceAccountT]:
        return self._advance(destination_asset=DestinationAsset(value=destination_asset))

    def set_destination_amount(
        self, destination_amount: Union[str, int, Decimal]
    ) -> FindPaymentPathsRequest[DestinationAssetT, DestinationAmount, SourceAccountT]:
        """
        Raises:
            ValidationError: If the amount is not a positive decimal
        """
        return self._advance(destination_amount=DestinationAmount.validated(destination_amount))

    def set_source_account(
        self, source_account: str
    ) -> FindPaymentPathsRequest[DestinationAssetT, DestinationAmountT, SourceAccount]:
        """
        Raises:
            ValidationError: If source_account is not a public key
        """
        return self._advance(source_account=SourceAccount.validated(source_account))

    def set_destination_account(
        self, destination_account: str
    ) -> FindPaymentPathsRequest[DestinationAssetT, DestinationAmountT, SourceAccountT]:
        return self._replace(destination_account=validate_public_key(destination_account, "destination account"))

    def _resource_path(self) -> str:
        return PATHS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            *asset_type_fragments("destination", self.destination_asset.value),
            fragment("destination_amount", self.destination_amount.value),
            fragment("destination_account", self.destination_account),
            fragment("source_account", self.source_account.value),
        ]

    def get_query_parameters(
        self: FindPaymentPathsRequest[DestinationAsset, DestinationAmount, SourceAccount]
    ) -> str:
        return super().get_query_parameters()

    def build_url(
        self: FindPaymentPathsRequest[DestinationAsset, DestinationAmount, SourceAccount], base_url: str
    ) -> str:
        return super().build_url(base_url)


class ListStrictReceivePaymentPathsRequest(
    Request, Generic[DestinationAssetT, DestinationAmountT, SourceAccountT]
):
    """
    Paths that deliver an exact destination amount, ``/paths/strict-receive``.

    Requires destination asset, destination amount and source account.
    ``source_assets`` narrows the candidate source assets.
    """

    destination_asset: DestinationAssetT = NoDestinationAsset()  # type: ignore[assignment]
    destination_amount: DestinationAmountT = NoDestinationAmount()  # type: ignore[assignment]
    source_account: SourceAccountT = NoSourceAccount()  # type: ignore[assignment]
    destination_account: Optional[str] = None
    source_assets: Tuple[Asset, ...] = ()

    def set_destination_asset(
        self, destination_asset: Asset
    ) -> ListStrictReceivePaymentPathsRequest[DestinationAsset, DestinationAmountT, SourceAccountT]:
        return self._advance(destination_asset=DestinationAsset(value=destination_asset))

    def set_destination_amount(
        self, destination_amount: Union[str, int, Decimal]
    ) -> ListStrictReceivePaymentPathsRequest[DestinationAssetT, DestinationAmount, SourceAccountT]:
        return self._advance(destination_amount=DestinationAmount.validated(destination_amount))

    def set_source_account(
        self, source_account: str
    ) -> ListStrictReceivePaymentPathsRequest[DestinationAssetT, DestinationAmountT, SourceAccount]:
        return self._advance(source_account=SourceAccount.validated(source_account))

    def set_destination_account(
        self, destination_account: str
    ) -> ListStrictReceivePaymentPathsRequest[DestinationAssetT, DestinationAmountT, SourceAccountT]:
        return self._replace(destination_account=validate_public_key(destination_account, "destination account"))

    def set_source_assets(
        self, source_assets: Sequence[Asset]
    ) -> ListStrictReceivePaymentPathsRequest[DestinationAssetT, DestinationAmountT, SourceAccountT]:
        return self._replace(source_assets=tuple(source_assets))

    def _resource_path(self) -> str:
        return f"{PATHS_PATH}/{PATHS_STRICT_RECEIVE_PATH}"

    def _query_fragments(self) -> List[Fragment]:
        return [
            *asset_type_fragments("destination", self.destination_asset.value),
            fragment("destination_amount", self.destination_amount.value),
            fragment("destination_account", self.destination_account),
            fragment("source_account", self.source_account.value),
            encode_asset_list("source_assets", self.source_assets),
        ]

    def get_query_parameters(
        self: ListStrictReceivePaymentPathsRequest[DestinationAsset, DestinationAmount, SourceAccount]
    ) -> str:
        return super().get_query_parameters()

    def build_url(
        self: ListStrictReceivePaymentPathsRequest[DestinationAsset, DestinationAmount, SourceAccount],
        base_url: str,
    ) -> str:
        return super().build_url(base_url)


class ListStrictSendPaymentPathsRequest(Request, Generic[SourceAssetT, SourceAmountT]):
    """
    Paths that spend an exact source amount, ``/paths/strict-send``.

    Requires source asset and source amount. The destination is either an
    account (``destination_account``) or a list of candidate assets
    (``destination_assets``).
    """

    source_asset: SourceAssetT = NoSourceAsset()  # type: ignore[assignment]
    source_amount: SourceAmountT = NoSourceAmount()  # type: ignore[assignment]
    destination_account: Optional[str] = None
    destination_assets: Tuple[Asset, ...] = ()

    def set_source_asset(self, source_asset: Asset) -> ListStrictSendPaymentPathsRequest[SourceAsset, SourceAmountT]:
        return self._advance(source_asset=SourceAsset(value=source_asset))

    def set_source_amount(
        self, source_amount: Union[str, int, Decimal]
    ) -> ListStrictSendPaymentPathsRequest[SourceAssetT, SourceAmount]:
        """
        Raises:
            ValidationError: If the amount is not a positive decimal
        """
        return self._advance(source_amount=SourceAmount.validated(source_amount))

    def set_destination_account(
        self, destination_account: str
    ) -> ListStrictSendPaymentPathsRequest[SourceAssetT, SourceAmountT]:
        return self._replace(destination_account=validate_public_key(destination_account, "destination account"))

    def set_destination_assets(
        self, destination_assets: Sequence[Asset]
    ) -> ListStrictSendPaymentPathsRequest[SourceAssetT, SourceAmountT]:
        return self._replace(destination_assets=tuple(destination_assets))

    def _resource_path(self) -> str:
        return f"{PATHS_PATH}/{PATHS_STRICT_SEND_PATH}"

    def _query_fragments(self) -> List[Fragment]:
        return [
            *asset_type_fragments("source", self.source_asset.value),
            fragment("source_amount", self.source_amount.value),
            fragment("destination_account", self.destination_account),
            encode_asset_list("destination_assets", self.destination_assets),
        ]

    def get_query_parameters(self: ListStrictSendPaymentPathsRequest[SourceAsset, SourceAmount]) -> str:
        return super().get_query_parameters()

    def build_url(self: ListStrictSendPaymentPathsRequest[SourceAsset, SourceAmount], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = [
    "FindPaymentPathsRequest",
    "ListStrictReceivePaymentPathsRequest",
    "ListStrictSendPaymentPathsRequest",
]
