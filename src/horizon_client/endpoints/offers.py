"""
Offer requests.

- ``AllOffersRequest``: offers filtered by sponsor, seller or traded assets
- ``OffersForAccountRequest``: offers created by one account
- ``SingleOfferRequest``: one offer by id
"""

from __future__ import annotations
from typing import Generic, List, Optional, Union

from ..models.assets import Asset
from ..models.request import PaginatedRequest, Request
from ..runtime.query import Fragment, encode_asset, fragment
from ..runtime.validation import validate_public_key
from .identifiers import AccountId, AccountIdT, NoAccountId, NoOfferId, OfferId, OfferIdT
from .resources import ACCOUNTS_PATH, OFFERS_PATH


class AllOffersRequest(PaginatedRequest):
    """List offers, ``/offers``."""

    sponsor: Optional[str] = None
    seller: Optional[str] = None
    selling: Optional[Asset] = None
    buying: Optional[Asset] = None

    def set_sponsor(self, sponsor: str) -> AllOffersRequest:
        """
        Raises:
            ValidationError: If sponsor is not a public key
        """
        return self._replace(sponsor=validate_public_key(sponsor, "sponsor"))

    def set_seller(self, seller: str) -> AllOffersRequest:
        """
        Raises:
            ValidationError: If seller is not a public key
        """
        return self._replace(seller=validate_public_key(seller, "seller"))

    def set_selling(self, selling: Asset) -> AllOffersRequest:
        return self._replace(selling=selling)

    def set_buying(self, buying: Asset) -> AllOffersRequest:
        return self._replace(buying=buying)

    def _resource_path(self) -> str:
        return OFFERS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [
            fragment("sponsor", self.sponsor),
            fragment("seller", self.seller),
            fragment("selling", encode_asset(self.selling) if self.selling is not None else None),
            fragment("buying", encode_asset(self.buying) if self.buying is not None else None),
            *self.pagination.fragments(),
        ]


class OffersForAccountRequest(PaginatedRequest, Generic[AccountIdT]):
    """Offers created by one account, ``/accounts/{account_id}/offers``."""

    account_id: AccountIdT = NoAccountId()  # type: ignore[assignment]

    def set_account_id(self, account_id: str) -> OffersForAccountRequest[AccountId]:
        """
        Raises:
            ValidationError: If account_id is not a public key
        """
        return self._advance(account_id=AccountId.validated(account_id))

    def _resource_path(self) -> str:
        return f"{ACCOUNTS_PATH}/{self.account_id.value}/{OFFERS_PATH}"

    def get_query_parameters(self: OffersForAccountRequest[AccountId]) -> str:
        return super().get_query_parameters()

    def build_url(self: OffersForAccountRequest[AccountId], base_url: str) -> str:
        return super().build_url(base_url)


class SingleOfferRequest(Request, Generic[OfferIdT]):
    """Details of one offer, ``/offers/{offer_id}``."""

    offer_id: OfferIdT = NoOfferId()  # type: ignore[assignment]

    def set_offer_id(self, offer_id: Union[int, str]) -> SingleOfferRequest[OfferId]:
        """
        Args:
            offer_id: Positive integer, or its decimal string

        Raises:
            ValidationError: If the id is not a number or is less than 1
        """
        return self._advance(offer_id=OfferId.validated(offer_id))

    def _resource_path(self) -> str:
        return f"{OFFERS_PATH}/{self.offer_id.value}"

    def get_query_parameters(self: SingleOfferRequest[OfferId]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleOfferRequest[OfferId], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = ["AllOffersRequest", "OffersForAccountRequest", "SingleOfferRequest"]
