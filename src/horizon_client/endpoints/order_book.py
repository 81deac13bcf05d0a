"""Order book request."""

from __future__ import annotations
from typing import Generic, List

from ..models.assets import Asset
from ..models.request import Request
from ..runtime.query import Fragment, asset_type_fragments
from .identifiers import (
    BuyingAsset,
    BuyingAssetT,
    NoBuyingAsset,
    NoSellingAsset,
    SellingAsset,
    SellingAssetT,
)
from .resources import ORDER_BOOK_PATH


class DetailsRequest(Request, Generic[SellingAssetT, BuyingAssetT]):
    """
    Order book of one trading pair, ``/order_book``.

    Both sides are required and can be set in any order; the URL can be built
    once both are set. Parameters are ``selling_asset_*`` followed by
    ``buying_asset_*``.
    """

    selling_asset: SellingAssetT = NoSellingAsset()  # type: ignore[assignment]
    buying_asset: BuyingAssetT = NoBuyingAsset()  # type: ignore[assignment]

    def set_selling_asset(self, selling_asset: Asset) -> DetailsRequest[SellingAsset, BuyingAssetT]:
        return self._advance(selling_asset=SellingAsset(value=selling_asset))

    def set_buying_asset(self, buying_asset: Asset) -> DetailsRequest[SellingAssetT, BuyingAsset]:
        return self._advance(buying_asset=BuyingAsset(value=buying_asset))

    def _resource_path(self) -> str:
        return ORDER_BOOK_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            *asset_type_fragments("selling", self.selling_asset.value),
            *asset_type_fragments("buying", self.buying_asset.value),
        ]

    def get_query_parameters(self: DetailsRequest[SellingAsset, BuyingAsset]) -> str:
        return super().get_query_parameters()

    def build_url(self: DetailsRequest[SellingAsset, BuyingAsset], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = ["DetailsRequest"]
