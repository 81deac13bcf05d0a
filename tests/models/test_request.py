"""
Unit tests for the request base classes.

Covers the shared pagination contract, immutability of request values and
the unset identifier slots.
"""

import pytest

from horizon_client.endpoints.identifiers import NoLedgerSequence
from horizon_client.endpoints.ledgers import LedgersRequest
from horizon_client.endpoints.operations import AllOperationsRequest
from horizon_client.models.assets import Order
from horizon_client.models.request import Pagination
from horizon_client.runtime.errors import ErrorCode, UnsetIdentifierError, ValidationError

from helpers import BASE_URL


class TestPagination:
    """Tests for the Pagination component."""

    def test_defaults(self):
        pagination = Pagination()
        assert pagination.cursor is None
        assert pagination.limit is None
        assert pagination.order is None
        assert pagination.fragments() == [None, None, None]

    def test_fragments(self):
        pagination = Pagination().with_cursor(5).with_limit(20).with_order(Order.ASC)
        assert pagination.fragments() == ["cursor=5", "limit=20", "order=asc"]

    def test_order_from_string(self):
        assert Pagination().with_order("desc").order is Order.DESC


class TestPaginatedRequest:
    """Tests for the setters every list request shares."""

    def test_setters_return_new_request(self):
        request = LedgersRequest()
        updated = request.set_cursor(1)

        assert updated is not request
        assert request.cursor is None
        assert updated.cursor == 1

    def test_failed_setter_leaves_request_unchanged(self):
        request = LedgersRequest().set_limit(10)
        with pytest.raises(ValidationError):
            request.set_limit(0)
        assert request.limit == 10

    def test_setters_commute(self):
        a = LedgersRequest().set_cursor(3).set_limit(7).set_order(Order.DESC)
        b = LedgersRequest().set_order(Order.DESC).set_limit(7).set_cursor(3)
        assert a == b
        assert a.build_url(BASE_URL) == b.build_url(BASE_URL)

    def test_setters_idempotent(self):
        once = LedgersRequest().set_limit(7)
        assert once.set_limit(7) == once

    def test_set_order_idempotent(self):
        once = LedgersRequest().set_order(Order.DESC)
        twice = once.set_order(Order.DESC)
        assert twice == once
        assert twice.get_query_parameters() == "?order=desc"

    @pytest.mark.parametrize("limit", [True, 5.5])
    def test_set_limit_rejects_non_integer(self, limit):
        request = LedgersRequest().set_limit(10)
        with pytest.raises(ValidationError):
            request.set_limit(limit)
        assert request.get_query_parameters() == "?limit=10"

    @pytest.mark.parametrize("cursor", ["5", 1.5])
    def test_set_cursor_rejects_non_integer(self, cursor):
        with pytest.raises(ValidationError, match="cursor must be an integer"):
            LedgersRequest().set_cursor(cursor)

    def test_last_value_wins(self):
        request = LedgersRequest().set_limit(7).set_limit(9)
        assert request.get_query_parameters() == "?limit=9"

    def test_requests_are_frozen(self):
        request = LedgersRequest()
        with pytest.raises(Exception):
            request.pagination = Pagination().with_limit(1)

    def test_setters_keep_subclass(self):
        request = AllOperationsRequest().set_include_failed(True).set_limit(5)
        assert isinstance(request, AllOperationsRequest)
        assert request.get_query_parameters() == "?limit=5&include_failed=true"


class TestUnsetSlot:
    """Tests for unset identifier markers."""

    def test_reading_unset_value_raises(self):
        with pytest.raises(UnsetIdentifierError) as exc_info:
            NoLedgerSequence().value
        assert exc_info.value.code == ErrorCode.UNSET_IDENTIFIER
        assert "ledger sequence" in exc_info.value.message
