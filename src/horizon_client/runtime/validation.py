"""
Parameter validation for Horizon requests.

Every validator takes the raw value, returns it unchanged when it satisfies
the documented constraint and raises ValidationError otherwise. Validators
have no side effects, so request setters call them before building the new
request value.
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Union
from urllib.parse import urlparse
import re

from .errors import ErrorCode, ValidationError


MAX_LIMIT = 200
MAX_ASSET_CODE_LENGTH = 12
PUBLIC_KEY_LENGTH = 56
TRANSACTION_HASH_LENGTH = 64
LIQUIDITY_POOL_ID_LENGTH = 64
CLAIMABLE_BALANCE_ID_LENGTH = 72

# Trade aggregation buckets accepted by Horizon, in milliseconds
RESOLUTIONS = (60_000, 300_000, 900_000, 3_600_000, 86_400_000, 604_800_000)
HOUR_MS = 3_600_000

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_cursor(cursor: int) -> int:
    if not _is_int(cursor):
        raise ValidationError("cursor must be an integer", ErrorCode.INVALID_CURSOR, {"cursor": cursor})
    if cursor < 1:
        raise ValidationError("cursor must be greater than or equal to 1", ErrorCode.INVALID_CURSOR,
                              {"cursor": cursor})
    return cursor


def validate_limit(limit: int) -> int:
    if not _is_int(limit):
        raise ValidationError("limit must be an integer", ErrorCode.INVALID_LIMIT, {"limit": limit})
    if limit < 1 or limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}", ErrorCode.INVALID_LIMIT,
                              {"limit": limit})
    return limit


def validate_asset_code(asset_code: str, max_length: int = MAX_ASSET_CODE_LENGTH) -> str:
    """
    Validate an asset code.

    Args:
        asset_code: Asset code, e.g. ``USDC``
        max_length: 12 in general, 4 where only alphanumeric-4 assets are allowed

    Returns:
        The asset code

    Raises:
        ValidationError: If the code is empty or longer than ``max_length``
    """
    if not asset_code:
        raise ValidationError("asset_code must not be empty", ErrorCode.INVALID_ASSET_CODE)
    if len(asset_code) > max_length:
        raise ValidationError(f"asset_code must be {max_length} characters or less",
                              ErrorCode.INVALID_ASSET_CODE, {"asset_code": asset_code})
    return asset_code


def is_public_key(public_key: str) -> bool:
    """Check the Stellar account address format: 56 characters starting with ``G``."""
    return (
        isinstance(public_key, str)
        and len(public_key) == PUBLIC_KEY_LENGTH
        and public_key.startswith("G")
    )


def validate_public_key(public_key: str, field: str = "public key") -> str:
    """
    Validate a public-key shaped identifier (account, sponsor, seller, claimant).

    Raises:
        ValidationError: If the key is not 56 characters or does not start with ``G``
    """
    if not isinstance(public_key, str) or len(public_key) != PUBLIC_KEY_LENGTH:
        raise ValidationError(f"{field} must be {PUBLIC_KEY_LENGTH} characters long",
                              ErrorCode.INVALID_PUBLIC_KEY, {field: public_key})
    if not is_public_key(public_key):
        raise ValidationError(f"{field} must start with G", ErrorCode.INVALID_PUBLIC_KEY,
                              {field: public_key})
    return public_key


def validate_ledger_sequence(sequence: int) -> int:
    if not _is_int(sequence) or sequence < 1:
        raise ValidationError("sequence must be greater than or equal to 1", ErrorCode.INVALID_IDENTIFIER,
                              {"sequence": sequence})
    return sequence


def _validate_hex(value: str, length: int, field: str) -> str:
    if not isinstance(value, str) or len(value) != length:
        raise ValidationError(f"{field} must be {length} characters long", ErrorCode.INVALID_IDENTIFIER,
                              {field: value})
    if not _HEX_RE.fullmatch(value):
        raise ValidationError(f"{field} must be hexadecimal", ErrorCode.INVALID_IDENTIFIER, {field: value})
    return value


def validate_transaction_hash(transaction_hash: str) -> str:
    return _validate_hex(transaction_hash, TRANSACTION_HASH_LENGTH, "transaction hash")


def validate_liquidity_pool_id(liquidity_pool_id: str) -> str:
    return _validate_hex(liquidity_pool_id, LIQUIDITY_POOL_ID_LENGTH, "liquidity pool id")


def validate_claimable_balance_id(claimable_balance_id: str) -> str:
    return _validate_hex(claimable_balance_id, CLAIMABLE_BALANCE_ID_LENGTH, "claimable balance id")


def _validate_positive_id(value: Union[int, str], field: str) -> str:
    if isinstance(value, bool):
        raise ValidationError(f"invalid {field}", ErrorCode.INVALID_IDENTIFIER, {field: value})
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.isdigit():
        number = int(value)
    else:
        raise ValidationError(f"invalid {field}", ErrorCode.INVALID_IDENTIFIER, {field: value})
    if number < 1:
        raise ValidationError(f"{field} must be greater than or equal to 1", ErrorCode.INVALID_IDENTIFIER,
                              {field: value})
    return str(number)


def validate_offer_id(offer_id: Union[int, str]) -> str:
    """Validate an offer id and return its canonical decimal string."""
    return _validate_positive_id(offer_id, "offer id")


def validate_operation_id(operation_id: Union[int, str]) -> str:
    """Validate an operation id and return its canonical decimal string."""
    return _validate_positive_id(operation_id, "operation id")


def validate_amount(amount: Union[str, int, Decimal], field: str = "amount") -> str:
    """
    Validate a positive decimal amount.

    Returns:
        The amount as a plain decimal string
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation as e:
        raise ValidationError(f"{field} must be a decimal number", ErrorCode.INVALID_PARAMETER,
                              {field: amount}, e)
    if not value.is_finite() or value <= 0:
        raise ValidationError(f"{field} must be greater than 0", ErrorCode.INVALID_PARAMETER, {field: amount})
    return str(amount)


def validate_resolution(resolution: int) -> int:
    if not _is_int(resolution) or resolution not in RESOLUTIONS:
        allowed = ", ".join(str(r) for r in RESOLUTIONS)
        raise ValidationError(f"resolution must be one of {allowed}", ErrorCode.INVALID_PARAMETER,
                              {"resolution": resolution})
    return resolution


def validate_offset(offset: int) -> int:
    """Trade aggregation offsets are whole hours below 24 hours."""
    if not _is_int(offset) or offset < 0 or offset % HOUR_MS != 0 or offset >= 24 * HOUR_MS:
        raise ValidationError("offset must be a whole number of hours less than 24 hours",
                              ErrorCode.INVALID_PARAMETER, {"offset": offset})
    return offset


def validate_timestamp(timestamp: int, field: str) -> int:
    if not _is_int(timestamp):
        raise ValidationError(f"{field} must be an integer", ErrorCode.INVALID_PARAMETER, {field: timestamp})
    if timestamp < 0:
        raise ValidationError(f"{field} must not be negative", ErrorCode.INVALID_PARAMETER, {field: timestamp})
    return timestamp


def validate_base_url(url: str) -> str:
    if not isinstance(url, str) or not url:
        raise ValidationError("base url must be a non-empty string", ErrorCode.INVALID_URL)
    if not (url.startswith("http://") or url.startswith("https://")):
        raise ValidationError(f"base url must start with http:// or https://: {url}", ErrorCode.INVALID_URL)
    if not urlparse(url).netloc:
        raise ValidationError(f"base url has no host: {url}", ErrorCode.INVALID_URL)
    return url


__all__ = [
    "MAX_LIMIT",
    "MAX_ASSET_CODE_LENGTH",
    "RESOLUTIONS",
    "validate_cursor",
    "validate_limit",
    "validate_asset_code",
    "is_public_key",
    "validate_public_key",
    "validate_ledger_sequence",
    "validate_transaction_hash",
    "validate_liquidity_pool_id",
    "validate_claimable_balance_id",
    "validate_offer_id",
    "validate_operation_id",
    "validate_amount",
    "validate_resolution",
    "validate_offset",
    "validate_timestamp",
    "validate_base_url",
]
