"""
Trade aggregation request.

Horizon buckets trades of one pair into fixed time windows (the resolution)
and returns OHLC statistics per bucket.
"""

from __future__ import annotations
from typing import Generic, List, Optional

from ..models.assets import Asset, Order
from ..models.request import Pagination, Request
from ..runtime.errors import ErrorCode, ValidationError
from ..runtime.query import Fragment, asset_type_fragments, fragment
from ..runtime.validation import validate_offset, validate_timestamp
from .identifiers import (
    BaseAsset,
    BaseAssetT,
    CounterAsset,
    CounterAssetT,
    NoBaseAsset,
    NoCounterAsset,
    NoResolution,
    Resolution,
    ResolutionT,
)
from .resources import TRADE_AGGREGATIONS_PATH


class TradeAggregationsRequest(Request, Generic[BaseAssetT, CounterAssetT, ResolutionT]):
    """
    Aggregated trades of one pair, ``/trade_aggregations``.

    Base asset, counter asset and resolution are required. Times are Unix
    timestamps in milliseconds. Limit and order come from the shared
    ``Pagination``; Horizon takes no cursor here.
    """

    base_asset: BaseAssetT = NoBaseAsset()  # type: ignore[assignment]
    counter_asset: CounterAssetT = NoCounterAsset()  # type: ignore[assignment]
    resolution: ResolutionT = NoResolution()  # type: ignore[assignment]
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    offset: Optional[int] = None
    pagination: Pagination = Pagination()

    @property
    def limit(self) -> Optional[int]:
        return self.pagination.limit

    @property
    def order(self) -> Optional[Order]:
        return self.pagination.order

    def set_base_asset(self, base_asset: Asset) -> TradeAggregationsRequest[BaseAsset, CounterAssetT, ResolutionT]:
        return self._advance(base_asset=BaseAsset(value=base_asset))

    def set_counter_asset(
        self, counter_asset: Asset
    ) -> TradeAggregationsRequest[BaseAssetT, CounterAsset, ResolutionT]:
        return self._advance(counter_asset=CounterAsset(value=counter_asset))

    def set_resolution(self, resolution: int) -> TradeAggregationsRequest[BaseAssetT, CounterAssetT, Resolution]:
        """
        Set the bucket size.

        Args:
            resolution: One of 60000, 300000, 900000, 3600000, 86400000, 604800000

        Raises:
            ValidationError: If the resolution is not supported
        """
        return self._advance(resolution=Resolution.validated(resolution))

    def set_start_time(self, start_time: int) -> TradeAggregationsRequest[BaseAssetT, CounterAssetT, ResolutionT]:
        validate_timestamp(start_time, "start_time")
        if self.end_time is not None and start_time > self.end_time:
            raise ValidationError("start_time must not be after end_time", ErrorCode.INVALID_PARAMETER,
                                  {"start_time": start_time, "end_time": self.end_time})
        return self._replace(start_time=start_time)

    def set_end_time(self, end_time: int) -> TradeAggregationsRequest[BaseAssetT, CounterAssetT, ResolutionT]:
        validate_timestamp(end_time, "end_time")
        if self.start_time is not None and end_time < self.start_time:
            raise ValidationError("end_time must not be before start_time", ErrorCode.INVALID_PARAMETER,
                                  {"start_time": self.start_time, "end_time": end_time})
        return self._replace(end_time=end_time)

    def set_offset(self, offset: int) -> TradeAggregationsRequest[BaseAssetT, CounterAssetT, ResolutionT]:
        """
        Shift bucket boundaries, in milliseconds.

        Raises:
            ValidationError: If the offset is not a whole number of hours below 24 hours
        """
        return self._replace(offset=validate_offset(offset))

    def set_limit(self, limit: int) -> TradeAggregationsRequest[BaseAssetT, CounterAssetT, ResolutionT]:
        return self._replace(pagination=self.pagination.with_limit(limit))

    def set_order(self, order: Order) -> TradeAggregationsRequest[BaseAssetT, CounterAssetT, ResolutionT]:
        return self._replace(pagination=self.pagination.with_order(order))

    def _resource_path(self) -> str:
        return TRADE_AGGREGATIONS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            *asset_type_fragments("base", self.base_asset.value),
            *asset_type_fragments("counter", self.counter_asset.value),
            fragment("start_time", self.start_time),
            fragment("end_time", self.end_time),
            fragment("resolution", self.resolution.value),
            fragment("offset", self.offset),
            *self.pagination.fragments(),
        ]

    def get_query_parameters(self: TradeAggregationsRequest[BaseAsset, CounterAsset, Resolution]) -> str:
        return super().get_query_parameters()

    def build_url(self: TradeAggregationsRequest[BaseAsset, CounterAsset, Resolution], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = ["TradeAggregationsRequest"]
