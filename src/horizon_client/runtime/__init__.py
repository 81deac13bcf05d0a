"""Runtime helpers: errors, parameter validation and query string assembly."""

from .errors import (
    ErrorCode,
    HorizonError,
    ValidationError,
    UnsetIdentifierError,
    HorizonNetworkError,
    HorizonResponseError,
    ResponseParseError,
)
from .query import build_query_parameters, fragment, format_flag, encode_asset, encode_asset_list
from .validation import (
    validate_cursor,
    validate_limit,
    validate_asset_code,
    is_public_key,
    validate_public_key,
)

__all__ = [
    "ErrorCode",
    "HorizonError",
    "ValidationError",
    "UnsetIdentifierError",
    "HorizonNetworkError",
    "HorizonResponseError",
    "ResponseParseError",
    "build_query_parameters",
    "fragment",
    "format_flag",
    "encode_asset",
    "encode_asset_list",
    "validate_cursor",
    "validate_limit",
    "validate_asset_code",
    "is_public_key",
    "validate_public_key",
]
