"""Tests for the asset list request."""

import pytest

from horizon_client.endpoints.assets import AllAssetsRequest
from horizon_client.models.assets import Order
from horizon_client.runtime.errors import ErrorCode, ValidationError

from helpers import ACCOUNT_ID, BASE_URL


class TestAllAssetsRequest:
    """Pagination first, then ``asset_code`` and ``asset_issuer``."""

    def test_no_filter(self):
        assert AllAssetsRequest().build_url(BASE_URL) == f"{BASE_URL}/assets"

    def test_full_query(self):
        request = (
            AllAssetsRequest()
            .set_asset_issuer(ACCOUNT_ID)
            .set_asset_code("USDC")
            .set_order(Order.DESC)
            .set_limit(20)
        )
        assert request.get_query_parameters() == f"?limit=20&order=desc&asset_code=USDC&asset_issuer={ACCOUNT_ID}"

    def test_twelve_character_code(self):
        request = AllAssetsRequest().set_asset_code("X" * 12)
        assert request.get_query_parameters() == f"?asset_code={'X' * 12}"

    def test_code_too_long(self):
        with pytest.raises(ValidationError, match="asset_code must be 12 characters or less") as exc_info:
            AllAssetsRequest().set_asset_code("X" * 13)
        assert exc_info.value.code == ErrorCode.INVALID_ASSET_CODE

    def test_invalid_issuer(self):
        with pytest.raises(ValidationError, match="asset_issuer must be 56 characters long"):
            AllAssetsRequest().set_asset_issuer("issuer")
