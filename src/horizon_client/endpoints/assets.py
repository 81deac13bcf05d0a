"""Asset list request."""

from __future__ import annotations
from typing import List, Optional

from ..models.request import PaginatedRequest
from ..runtime.query import Fragment, fragment
from ..runtime.validation import validate_asset_code, validate_public_key
from .resources import ASSETS_PATH


class AllAssetsRequest(PaginatedRequest):
    """
    List assets, ``/assets``, optionally filtered by code and issuer.

    Example:
        >>> AllAssetsRequest().set_asset_code("USDC").build_url("https://horizon.stellar.org")
        'https://horizon.stellar.org/assets?asset_code=USDC'
    """

    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None

    def set_asset_code(self, asset_code: str) -> AllAssetsRequest:
        """
        Raises:
            ValidationError: If the code is empty or longer than 12 characters
        """
        return self._replace(asset_code=validate_asset_code(asset_code))

    def set_asset_issuer(self, asset_issuer: str) -> AllAssetsRequest:
        """
        Raises:
            ValidationError: If the issuer is not a public key
        """
        return self._replace(asset_issuer=validate_public_key(asset_issuer, "asset_issuer"))

    def _resource_path(self) -> str:
        return ASSETS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            *self.pagination.fragments(),
            fragment("asset_code", self.asset_code),
            fragment("asset_issuer", self.asset_issuer),
        ]


__all__ = ["AllAssetsRequest"]
