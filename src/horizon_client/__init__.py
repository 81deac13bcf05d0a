"""
Stellar Horizon Python Client

Typed request builders for the Horizon ledger-query API, plus an HTTP client
that sends them and parses the responses into pydantic records.
"""

__version__ = "0.1.0"

# Request building
from .endpoints import *
from .models.assets import (
    AssetType,
    Asset,
    NativeAsset,
    AlphaNum4Asset,
    AlphaNum12Asset,
    native_asset,
    issued_asset,
    parse_asset,
    Order,
)

# Errors
from .runtime.errors import (
    ErrorCode,
    HorizonError,
    ValidationError,
    UnsetIdentifierError,
    HorizonNetworkError,
    HorizonResponseError,
    ResponseParseError,
)

# Responses
from .models.response import Page, Record
from .models import records

# HTTP client
from .client import ClientConfig, HorizonClient, public_client, testnet_client, futurenet_client

from .endpoints import __all__ as _endpoints_all

__all__ = _endpoints_all + [
    # Assets
    "AssetType",
    "Asset",
    "NativeAsset",
    "AlphaNum4Asset",
    "AlphaNum12Asset",
    "native_asset",
    "issued_asset",
    "parse_asset",
    "Order",

    # Errors
    "ErrorCode",
    "HorizonError",
    "ValidationError",
    "UnsetIdentifierError",
    "HorizonNetworkError",
    "HorizonResponseError",
    "ResponseParseError",

    # Responses
    "Page",
    "Record",
    "records",

    # Client
    "ClientConfig",
    "HorizonClient",
    "public_client",
    "testnet_client",
    "futurenet_client",
]
