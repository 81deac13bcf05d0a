"""
Asset filter types shared by trades, offers, order books, paths,
liquidity pools and claimable balances.

Each endpoint serializes these into its own query vocabulary, see
``horizon_client.runtime.query``.
"""

from __future__ import annotations
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..runtime.validation import validate_asset_code, validate_public_key


class AssetType(str, Enum):
    """Horizon ``asset_type`` values."""

    NATIVE = "native"
    CREDIT_ALPHANUM4 = "credit_alphanum4"
    CREDIT_ALPHANUM12 = "credit_alphanum12"

    def __str__(self) -> str:
        return self.value


class NativeAsset(BaseModel):
    """The network's native asset (lumens)."""

    model_config = ConfigDict(frozen=True)

    @property
    def asset_type(self) -> AssetType:
        return AssetType.NATIVE

    def canonical(self) -> str:
        return "native"


class _IssuedAsset(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    issuer: str

    def canonical(self) -> str:
        """``CODE:ISSUER`` form used by Horizon in record bodies."""
        return f"{self.code}:{self.issuer}"


class AlphaNum4Asset(_IssuedAsset):
    """Issued asset with a code of 1 to 4 characters."""

    @field_validator("code")
    @classmethod
    def check_code(cls, code: str) -> str:
        return validate_asset_code(code, 4)

    @property
    def asset_type(self) -> AssetType:
        return AssetType.CREDIT_ALPHANUM4


class AlphaNum12Asset(_IssuedAsset):
    """Issued asset with a code of 5 to 12 characters."""

    @field_validator("code")
    @classmethod
    def check_code(cls, code: str) -> str:
        return validate_asset_code(code)

    @property
    def asset_type(self) -> AssetType:
        return AssetType.CREDIT_ALPHANUM12


Asset = Union[NativeAsset, AlphaNum4Asset, AlphaNum12Asset]
IssuedAsset = Union[AlphaNum4Asset, AlphaNum12Asset]


def native_asset() -> NativeAsset:
    return NativeAsset()


def issued_asset(code: str, issuer: str) -> IssuedAsset:
    """
    Create a validated issued asset.

    The alphanumeric-4 or alphanumeric-12 variant is picked from the code length.

    Args:
        code: Asset code, at most 12 characters
        issuer: Issuing account address

    Returns:
        AlphaNum4Asset or AlphaNum12Asset

    Raises:
        ValidationError: If the code is too long or the issuer is not a public key
    """
    validate_asset_code(code)
    validate_public_key(issuer, "asset issuer")
    if len(code) <= 4:
        return AlphaNum4Asset(code=code, issuer=issuer)
    return AlphaNum12Asset(code=code, issuer=issuer)


def parse_asset(value: str) -> Asset:
    """Parse Horizon's ``native`` / ``CODE:ISSUER`` notation."""
    if value == "native":
        return NativeAsset()
    code, sep, issuer = value.partition(":")
    if not sep:
        raise ValueError(f"asset must be 'native' or 'CODE:ISSUER': {value}")
    return issued_asset(code, issuer)


class Order(str, Enum):
    """Ordering of records in list responses."""

    ASC = "asc"
    DESC = "desc"

    def __str__(self) -> str:
        return self.value


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
]
