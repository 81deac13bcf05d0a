"""Request base classes, asset filters and response records."""

from .assets import (
    AssetType,
    Asset,
    IssuedAsset,
    NativeAsset,
    AlphaNum4Asset,
    AlphaNum12Asset,
    native_asset,
    issued_asset,
    parse_asset,
    Order,
)
from .request import Request, Pagination, PaginatedRequest, IncludeFailedRequest, PostRequest
from .response import HorizonModel, Link, Record, Page
from .records import *

from .records import __all__ as _records_all

__all__ = [
    "AssetType",
    "Asset",
    "IssuedAsset",
    "NativeAsset",
    "AlphaNum4Asset",
    "AlphaNum12Asset",
    "native_asset",
    "issued_asset",
    "parse_asset",
    "Order",
    "Request",
    "Pagination",
    "PaginatedRequest",
    "IncludeFailedRequest",
    "PostRequest",
    "HorizonModel",
    "Link",
    "Record",
    "Page",
] + _records_all
