"""Unit tests for response envelopes and records."""

import json

import pytest

from horizon_client.models.records import Account, Effect, FeeStats, Ledger, Transaction
from horizon_client.models.response import Page
from horizon_client.runtime.errors import ErrorCode, ResponseParseError

from helpers import ACCOUNT_ID, TRANSACTION_HASH, dumps, mk_ledger, mk_page


class TestRecords:
    """Tests for single record parsing."""

    def test_ledger_from_json(self):
        ledger = Ledger.from_json(dumps(mk_ledger(125)))

        assert ledger.sequence == 125
        assert ledger.base_fee_in_stroops == 100
        assert ledger.links["self"].href.endswith("/ledgers/125")
        assert ledger.links["transactions"].templated is True

    def test_unknown_fields_kept(self):
        body = mk_ledger(7)
        body["soroban_fee_write_1kb"] = 1000
        ledger = Ledger.from_json(dumps(body))
        assert ledger.model_extra["soroban_fee_write_1kb"] == 1000

    def test_account_from_json(self):
        body = {
            "id": ACCOUNT_ID,
            "account_id": ACCOUNT_ID,
            "sequence": "4294967296",
            "subentry_count": 1,
            "last_modified_ledger": 10,
            "thresholds": {"low_threshold": 0, "med_threshold": 0, "high_threshold": 0},
            "flags": {"auth_required": False, "auth_revocable": False, "auth_immutable": False},
            "balances": [{"balance": "9999.9999900", "asset_type": "native",
                          "buying_liabilities": "0.0000000", "selling_liabilities": "0.0000000"}],
            "signers": [{"weight": 1, "key": ACCOUNT_ID, "type": "ed25519_public_key"}],
            "data": {},
            "paging_token": ACCOUNT_ID,
        }
        account = Account.from_json(dumps(body))

        assert account.account_id == ACCOUNT_ID
        assert account.balances[0].balance == "9999.9999900"
        assert account.signers[0].signer_type == "ed25519_public_key"
        assert account.links == {}

    def test_effect_type_alias(self):
        body = {"id": "1-1", "paging_token": "1-1", "account": ACCOUNT_ID, "type": "account_created",
                "type_i": 0, "created_at": "2024-01-01T00:00:00Z", "starting_balance": "10000.0000000"}
        effect = Effect.from_json(dumps(body))
        assert effect.effect_type == "account_created"
        assert effect.model_extra["starting_balance"] == "10000.0000000"

    def test_transaction_from_json(self):
        body = {
            "id": TRANSACTION_HASH, "paging_token": "1", "successful": True, "hash": TRANSACTION_HASH,
            "ledger": 125, "created_at": "2024-01-01T00:00:00Z", "source_account": ACCOUNT_ID,
            "source_account_sequence": "1", "fee_charged": "100", "max_fee": "100", "operation_count": 1,
            "envelope_xdr": "AAAA", "result_xdr": "AAAA", "memo_type": "none", "signatures": ["sig"],
        }
        transaction = Transaction.from_json(dumps(body))
        assert transaction.successful
        assert transaction.memo is None

    def test_fee_stats_from_json(self):
        distribution = {key: "100" for key in
                        ["max", "min", "mode", "p10", "p20", "p30", "p40", "p50",
                         "p60", "p70", "p80", "p90", "p95", "p99"]}
        body = {"last_ledger": "125", "last_ledger_base_fee": "100", "ledger_capacity_usage": "0.5",
                "fee_charged": distribution, "max_fee": distribution}
        stats = FeeStats.from_json(dumps(body))
        assert stats.fee_charged.p99 == "100"


class TestPage:
    """Tests for the page envelope."""

    def test_page_records(self):
        body = mk_page([mk_ledger(1), mk_ledger(2)], next_cursor="8589934592")
        page = Page[Ledger].from_json(dumps(body))

        assert [ledger.sequence for ledger in page.records] == [1, 2]
        assert all(isinstance(ledger, Ledger) for ledger in page.records)
        assert page.next_cursor() == "8589934592"

    def test_empty_page(self):
        page = Page[Ledger].from_json(json.dumps({"_links": {}, "_embedded": {"records": []}}))
        assert page.records == []
        assert page.next_cursor() is None


class TestParseErrors:
    """Malformed bodies raise ResponseParseError."""

    def test_invalid_json(self):
        with pytest.raises(ResponseParseError) as exc_info:
            Ledger.from_json("not json")
        assert exc_info.value.code == ErrorCode.INVALID_JSON

    def test_missing_field(self):
        body = mk_ledger(1)
        del body["sequence"]
        with pytest.raises(ResponseParseError, match="Ledger"):
            Ledger.from_json(dumps(body))
