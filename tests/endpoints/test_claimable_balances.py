"""Tests for claimable balance requests."""

import pytest

from horizon_client.endpoints.claimable_balances import (
    AllClaimableBalancesRequest,
    SingleClaimableBalanceRequest,
)
from horizon_client.models.assets import NativeAsset
from horizon_client.runtime.errors import UnsetIdentifierError, ValidationError

from helpers import ACCOUNT_ID, BASE_URL, CLAIMABLE_BALANCE_ID, OTHER_ACCOUNT_ID, mk_alphanum4


class TestAllClaimableBalancesRequest:
    """Filters come before pagination."""

    def test_no_filter(self):
        url = AllClaimableBalancesRequest().build_url(BASE_URL)
        assert url == f"{BASE_URL}/claimable_balances"

    def test_all_filters(self):
        request = (
            AllClaimableBalancesRequest()
            .set_limit(5)
            .set_claimant(OTHER_ACCOUNT_ID)
            .set_asset(mk_alphanum4("USD"))
            .set_sponsor(ACCOUNT_ID)
        )
        assert request.get_query_parameters() == (
            f"?sponsor={ACCOUNT_ID}&asset=USD%3A{ACCOUNT_ID}&claimant={OTHER_ACCOUNT_ID}&limit=5"
        )

    def test_native_asset(self):
        request = AllClaimableBalancesRequest().set_asset(NativeAsset())
        assert request.get_query_parameters() == "?asset=native"

    def test_invalid_claimant(self):
        with pytest.raises(ValidationError, match="claimant"):
            AllClaimableBalancesRequest().set_claimant("GABC")


class TestSingleClaimableBalanceRequest:
    """The balance id is a path segment."""

    def test_build_url(self):
        request = SingleClaimableBalanceRequest().set_claimable_balance_id(CLAIMABLE_BALANCE_ID)
        assert request.build_url(BASE_URL) == f"{BASE_URL}/claimable_balances/{CLAIMABLE_BALANCE_ID}"

    def test_id_without_type_prefix(self):
        with pytest.raises(ValidationError, match="claimable balance id must be 72 characters long"):
            SingleClaimableBalanceRequest().set_claimable_balance_id(CLAIMABLE_BALANCE_ID[8:])

    def test_unset_id(self):
        with pytest.raises(UnsetIdentifierError, match="claimable balance id"):
            SingleClaimableBalanceRequest().build_url(BASE_URL)
