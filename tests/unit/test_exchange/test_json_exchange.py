#!/usr/bin/env python3
"""Tests for JSON snapshot export and import."""

import json
from datetime import date

import pytest

from finledger.core.currency import USD
from finledger.core.dates import YearMonth
from finledger.core.ids import CategoryId
from finledger.core.models import Category
from finledger.core.result import err
from finledger.exchange.json_export import build_snapshot, export_from_store, export_snapshot
from finledger.exchange.json_import import parse_snapshot
from finledger.storage.memory import InMemoryLedgerStore
from tests.fixtures.ledger_data import make_transaction

FIXED_TIME = "2024-02-01T00:00:00Z"


def _snapshot_json(**overrides) -> str:
    data = {
        "exportedAt": FIXED_TIME,
        "currency": "USD",
        "categories": [{"id": "food", "name": "Food"}],
        "budgets": [],
        "transactions": [make_transaction().to_dict()],
    }
    data.update(overrides)
    return json.dumps(data)


@pytest.mark.exchange
class TestBuildSnapshot:
    """Test snapshot assembly."""

    def test_sorted_deterministically(self, sample_categories, sample_budget, sample_transactions):
        """Test collections are sorted regardless of input order."""
        snapshot = build_snapshot(
            list(reversed(sample_categories)), [sample_budget], list(reversed(sample_transactions)),
            exported_at=FIXED_TIME,
        )
        assert [c.name for c in snapshot.categories] == ["Food", "Groceries", "Transport"]
        assert [t.id.value for t in snapshot.transactions] == ["t1", "t2", "t3", "t4"]
        assert snapshot.currency == USD
        assert snapshot.exported_at == FIXED_TIME

    def test_empty_snapshot_has_no_currency(self):
        """Test currency is None without transactions."""
        snapshot = build_snapshot([], [], [], exported_at=FIXED_TIME)
        assert snapshot.currency is None
        assert snapshot.to_dict()["currency"] is None

    def test_month_filter_keeps_parent_closure(self):
        """Test referenced categories and all their ancestors are kept."""
        categories = [
            Category(CategoryId("root"), "Root"),
            Category(CategoryId("food"), "Food", parent_id=CategoryId("root")),
            Category(CategoryId("groceries"), "Groceries", parent_id=CategoryId("food")),
            Category(CategoryId("unused"), "Unused"),
        ]
        txs = [make_transaction(category="groceries")]
        snapshot = build_snapshot(categories, [], txs, month=YearMonth(2024, 1), exported_at=FIXED_TIME)
        assert {c.id.value for c in snapshot.categories} == {"root", "food", "groceries"}

    def test_month_filter_tolerates_missing_parent_and_cycles(self):
        """Test dangling parents and parent cycles do not break the closure."""
        categories = [
            Category(CategoryId("a"), "A", parent_id=CategoryId("b")),
            Category(CategoryId("b"), "B", parent_id=CategoryId("a")),
            Category(CategoryId("c"), "C", parent_id=CategoryId("gone")),
        ]
        txs = [make_transaction("t1", category="a"), make_transaction("t2", category="c")]
        snapshot = build_snapshot(categories, [], txs, month=YearMonth(2024, 1), exported_at=FIXED_TIME)
        assert [c.id.value for c in snapshot.categories] == ["a", "b", "c"]

    def test_month_filter_includes_budget_categories(self, sample_categories, sample_budget):
        """Test budget category references are part of the closure."""
        snapshot = build_snapshot(sample_categories, [sample_budget], [], month=YearMonth(2024, 1))
        assert {c.id.value for c in snapshot.categories} == {"food", "groceries"}


@pytest.mark.exchange
class TestExportSnapshot:
    """Test JSON rendering."""

    def test_export_is_byte_stable(self, sample_categories, sample_budget, sample_transactions):
        """Test identical input gives identical bytes."""
        first = export_snapshot(build_snapshot(sample_categories, [sample_budget], sample_transactions, exported_at=FIXED_TIME))
        second = export_snapshot(
            build_snapshot(list(reversed(sample_categories)), [sample_budget], list(reversed(sample_transactions)),
                           exported_at=FIXED_TIME)
        )
        assert first.content == second.content
        assert first.mime_type == "application/json"
        assert first.file_name == "ledger-snapshot.json"

    def test_json_layout(self, sample_transactions):
        """Test top-level keys and money format."""
        export = export_snapshot(build_snapshot([], [], sample_transactions, exported_at=FIXED_TIME))
        data = json.loads(export.content)
        assert list(data) == ["exportedAt", "currency", "categories", "budgets", "transactions"]
        assert data["transactions"][0]["amount"] == {"amount": "1000.00", "currency": "USD"}
        assert data["transactions"][0]["recurrence"] == {"type": "MONTHLY", "day": 1}

    def test_compact_output(self):
        """Test non-pretty output has no indentation."""
        export = export_snapshot(build_snapshot([], [], [], exported_at=FIXED_TIME), pretty=False)
        assert b"\n" not in export.content

    def test_indent_from_config(self, monkeypatch):
        """Test LEDGER_JSON_INDENT controls pretty-printing."""
        monkeypatch.setenv("LEDGER_JSON_INDENT", "4")
        export = export_snapshot(build_snapshot([], [], [], exported_at=FIXED_TIME))
        assert b'\n    "exportedAt"' in export.content


@pytest.mark.exchange
class TestExportFromStore:
    """Test exporting store contents."""

    def test_full_round_trip(self, populated_store, sample_categories, sample_budget, sample_transactions):
        """Test an unfiltered export re-imports with identical entities."""
        export = export_from_store(populated_store).unwrap()
        imported = parse_snapshot(export.content).unwrap()
        assert set(imported.categories) == set(sample_categories)
        assert imported.budgets == (sample_budget,)
        assert set(imported.transactions) == set(sample_transactions)
        assert any("missing category salary" in w for w in imported.warnings)

    def test_month_filter(self, populated_store):
        """Test month export limits transactions, budgets and categories."""
        imported = parse_snapshot(export_from_store(populated_store, YearMonth(2024, 2)).unwrap().content).unwrap()
        assert [tx.id.value for tx in imported.transactions] == ["t4"]
        assert imported.budgets == ()
        assert [c.id.value for c in imported.categories] == ["food"]

    def test_store_error_propagates(self):
        """Test the first store failure is returned."""

        class BrokenStore(InMemoryLedgerStore):
            def list_budgets(self, month=None):
                return err("disk on fire")

        result = export_from_store(BrokenStore())
        assert result.is_err
        assert result.message == "disk on fire"


@pytest.mark.exchange
class TestParseSnapshot:
    """Test JSON import."""

    def test_unknown_fields_ignored(self):
        """Test forward-compatible parsing."""
        payload = json.loads(_snapshot_json())
        payload["schemaVersion"] = 9
        payload["transactions"][0]["merchant"] = {"name": "Shop"}
        result = parse_snapshot(json.dumps(payload)).unwrap()
        assert len(result.transactions) == 1
        assert result.warnings == ()

    def test_bom_stripped(self):
        """Test a leading BOM is ignored."""
        result = parse_snapshot(b"\xef\xbb\xbf" + _snapshot_json().encode("utf-8"))
        assert result.is_ok

    def test_duplicates_dropped_first_wins(self):
        """Test duplicate ids keep the first entity and warn."""
        first = make_transaction(description="First").to_dict()
        second = make_transaction(description="Second").to_dict()
        payload = _snapshot_json(
            categories=[{"id": "food", "name": "Food"}, {"id": "food", "name": "Other"}],
            transactions=[first, second],
        )
        result = parse_snapshot(payload).unwrap()
        assert [c.name for c in result.categories] == ["Food"]
        assert [t.description for t in result.transactions] == ["First"]
        assert result.warnings == (
            "Duplicate category id 'food' ignored",
            "Duplicate transaction id 't1' ignored",
        )

    def test_missing_category_warns(self):
        """Test dangling category references become warnings."""
        result = parse_snapshot(_snapshot_json(categories=[])).unwrap()
        assert len(result.transactions) == 1
        assert result.warnings == ("Transaction t1 references missing category food",)

    def test_uncategorized_transactions_do_not_warn(self):
        """Test transactions without a category are not dangling."""
        tx = make_transaction(category=None).to_dict()
        assert parse_snapshot(_snapshot_json(categories=[], transactions=[tx])).unwrap().warnings == ()

    @pytest.mark.parametrize(
        "payload",
        [
            "{not json",
            "[]",
            '"just a string"',
            _snapshot_json(transactions=[{"id": "t1"}]),
            _snapshot_json(categories="food"),
            _snapshot_json(transactions=[{**make_transaction().to_dict(), "amount": {"amount": "x", "currency": "USD"}}]),
            _snapshot_json(budgets=[{"id": "b1", "name": "B", "month": "2024-1x", "limit": {"amount": "1", "currency": "USD"}, "categoryIds": ["food"]}]),
            _snapshot_json(transactions=[{**make_transaction().to_dict(), "tags": "coffee"}]),
            _snapshot_json(budgets=[{"id": "b1", "name": "B", "month": "2024-01", "limit": {"amount": "1", "currency": "USD"}, "categoryIds": "food"}]),
        ],
        ids=["syntax", "array", "string", "missing-fields", "categories-not-list", "bad-amount", "bad-month", "tags-string",
             "category-ids-string"],
    )
    def test_malformed_is_hard_failure(self, payload):
        """Test malformed JSON fails the whole import."""
        result = parse_snapshot(payload)
        assert result.is_err
        assert result.message.startswith("Invalid JSON:")
        assert result.cause is not None

    def test_empty_collections(self):
        """Test a minimal snapshot imports cleanly."""
        result = parse_snapshot('{"exportedAt": "x"}').unwrap()
        assert result.transactions == () and result.categories == () and result.budgets == ()

    def test_dates_and_recurrence_restored(self):
        """Test field values survive the JSON form exactly."""
        result = parse_snapshot(_snapshot_json()).unwrap()
        assert result.transactions[0].date == date(2024, 1, 15)
