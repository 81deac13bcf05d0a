"""
Account requests.

``AccountsRequest`` lists accounts and requires exactly one filter: sponsor,
signer, asset or liquidity pool. Setting a filter replaces any filter set
before, so the request can never carry two.
"""

from __future__ import annotations
from typing import ClassVar, Generic, List, NoReturn, TypeVar

from ..models.assets import Asset
from ..models.request import IdentifierSlot, PaginatedRequest, Request, Unset
from ..runtime.query import Fragment, encode_asset
from ..runtime.validation import validate_liquidity_pool_id, validate_public_key
from .identifiers import AccountId, AccountIdT, NoAccountId
from .resources import ACCOUNTS_PATH


class NoAccountFilter(Unset):
    slot_name: ClassVar[str] = "account filter"

    def fragment(self) -> NoReturn:
        return self.value


class AccountFilter(IdentifierSlot):
    """One ``key=value`` account filter."""

    key: str
    value: str

    def fragment(self) -> str:
        return f"{self.key}={self.value}"


AccountFilterT = TypeVar("AccountFilterT", NoAccountFilter, AccountFilter)


class AccountsRequest(PaginatedRequest, Generic[AccountFilterT]):
    """
    List accounts, ``/accounts?{filter}``.

    Horizon rejects an unfiltered account listing, so the URL can only be
    built once one of the ``set_*_filter`` methods has been called.
    """

    filter: AccountFilterT = NoAccountFilter()  # type: ignore[assignment]

    def set_sponsor_filter(self, sponsor: str) -> AccountsRequest[AccountFilter]:
        """
        Only list accounts sponsored by ``sponsor``.

        Raises:
            ValidationError: If sponsor is not a public key
        """
        return self._advance(filter=AccountFilter(key="sponsor", value=validate_public_key(sponsor, "sponsor")))

    def set_signer_filter(self, signer: str) -> AccountsRequest[AccountFilter]:
        """
        Only list accounts that have ``signer`` as a signer.

        Raises:
            ValidationError: If signer is not a public key
        """
        return self._advance(filter=AccountFilter(key="signer", value=validate_public_key(signer, "signer")))

    def set_asset_filter(self, asset: Asset) -> AccountsRequest[AccountFilter]:
        """Only list accounts holding a trustline to ``asset``."""
        return self._advance(filter=AccountFilter(key="asset", value=encode_asset(asset)))

    def set_liquidity_pool_filter(self, liquidity_pool_id: str) -> AccountsRequest[AccountFilter]:
        """
        Only list accounts participating in the liquidity pool.

        Raises:
            ValidationError: If the id is not 64 hexadecimal characters
        """
        return self._advance(
            filter=AccountFilter(key="liquidity_pool", value=validate_liquidity_pool_id(liquidity_pool_id))
        )

    def _resource_path(self) -> str:
        return ACCOUNTS_PATH

    def _query_fragments(self) -> List[Fragment]:
        return [*self.pagination.fragments(), self.filter.fragment()]

    def get_query_parameters(self: AccountsRequest[AccountFilter]) -> str:
        return super().get_query_parameters()

    def build_url(self: AccountsRequest[AccountFilter], base_url: str) -> str:
        return super().build_url(base_url)


class SingleAccountRequest(Request, Generic[AccountIdT]):
    """Details of one account, ``/accounts/{account_id}``."""

    account_id: AccountIdT = NoAccountId()  # type: ignore[assignment]

    def set_account_id(self, account_id: str) -> SingleAccountRequest[AccountId]:
        """
        Raises:
            ValidationError: If account_id is not a public key
        """
        return self._advance(account_id=AccountId.validated(account_id))

    def _resource_path(self) -> str:
        return f"{ACCOUNTS_PATH}/{self.account_id.value}"

    def get_query_parameters(self: SingleAccountRequest[AccountId]) -> str:
        return super().get_query_parameters()

    def build_url(self: SingleAccountRequest[AccountId], base_url: str) -> str:
        return super().build_url(base_url)


__all__ = [
    "NoAccountFilter",
    "AccountFilter",
    "AccountsRequest",
    "SingleAccountRequest",
]
