"""
Claimable balance requests.

- ``AllClaimableBalancesRequest``: filter by sponsor, asset or claimant
- ``SingleClaimableBalanceRequest``: one balance by id
"""

from __future__ import annotations
from typing import Generic, List, Optional

from ..models.assets import Asset
from ..models.request import PaginatedRequest, Request
from ..runtime.query import Fragment, encode_asset, fragment
from ..runtime.validation import validate_public_key
from .identifiers import ClaimableBalanceId, ClaimableBalanceIdT, NoClaimableBalanceId
from .resources import CLAIMABLE_BALANCES_PATH


class AllClaimableBalancesRequest(PaginatedRequest):
    """List claimable balances, ``/claimable_balances``."""

    sponsor: Optional[str] = None
    asset: Optional[Asset] = None
    claimant: Optional[str] = None

    def set_sponsor(self, sponsor: str) -> AllClaimableBalancesRequest:
        """
        Raises:
            ValidationError: If sponsor is not a public key
        """
        return self._replace(sponsor=validate_public_key(sponsor, "sponsor"))

    def set_asset(self, asset: Asset) -> AllClaimableBalancesRequest:
        """Filter by balance asset, rendered as ``asset=CODE%3AISSUER`` or ``asset=native``."""
        return self._replace(asset=asset)

    def set_claimant(self, claimant: str) -> AllClaimableBalancesRequest:
        """
        Raises:
            ValidationError: If claimant is not a public key
        """
        return self._replace(claimant=validate_public_key(claimant, "claimant"))

    def _resource_path(self) -> str:
        return CLAIMABLE_BALANCES_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            fragment("sponsor", self.sponsor),
            fragment("asset", encode_asset(self.asset) if self.asset is not None else None),
            fragment("claimant", self.claimant),
            *self.pagination.fragments(),
        ]


class SingleClaimableBalanceRequest(Request, Generic[ClaimableBalanceIdT]):
    """Details of one claimable balance, ``/claimable_balances/{id}``."""

    claimable_balance_id: ClaimableBalanceIdT = NoClaimableBalanceId()  # type: ignore[assignment]

    def set_claimable_balance_id(self, claimable_balance_id: str) -> SingleClaimableBalanceRequest[ClaimableBalanceId]:
        """
        Args:
            claimable_balance_id: 72 hexadecimal characters, the 8 character type prefix included

        Raises:
            ValidationError: If the id is malformed
        """
        return self._advance(claimable_balance_id=ClaimableBalanceId.validated(claimable_balance_id))

    def _resource_path(self) -> str:
        return f"{CLAIMABLE_BALANCES_PATH}/{self.claimable_balance_id.value}"

    def get_query_parameters(self: SingleClaimableBalanceRequest[ClaimableBalanceId]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleClaimableBalanceRequest[ClaimableBalanceId], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = ["AllClaimableBalancesRequest", "SingleClaimableBalanceRequest"]
