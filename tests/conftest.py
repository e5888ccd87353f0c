"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import date

import pytest

from finledger.core import config as config_module
from finledger.core.currency import USD
from finledger.core.dates import YearMonth
from finledger.core.ids import BudgetId, CategoryId
from finledger.core.models import Budget, Category, Transaction, TransactionType
from finledger.core.money import Money
from finledger.core.recurrence import Recurrence
from finledger.storage.memory import InMemoryLedgerStore
from tests.fixtures.ledger_data import make_transaction


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for test files."""
    return tmp_path


@pytest.fixture
def sample_categories() -> list[Category]:
    """Small category tree: food > groceries, plus transport."""
    return [
        Category(CategoryId("food"), "Food", color_hex="#FF8800"),
        Category(CategoryId("groceries"), "Groceries", parent_id=CategoryId("food")),
        Category(CategoryId("transport"), "Transport"),
    ]


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """January and February transactions in USD."""
    return [
        make_transaction("t1", date(2024, 1, 1), TransactionType.INCOME, "1000.00", "Salary", "salary",
                         tags=["work"], recurrence=Recurrence.monthly(1)),
        make_transaction("t2", date(2024, 1, 5), amount="12.00", description="Groceries", category="groceries"),
        make_transaction("t3", date(2024, 1, 9), amount="30.00", description="Uber trip", category="transport"),
        make_transaction("t4", date(2024, 2, 3), amount="8.50", description="Cafe", category="food"),
    ]


@pytest.fixture
def sample_budget() -> Budget:
    """January food budget of 100.00 USD."""
    return Budget(
        id=BudgetId("b1"),
        name="Jan Food",
        month=YearMonth(2024, 1),
        limit=Money.of("100.00", USD),
        category_ids=frozenset({CategoryId("groceries"), CategoryId("food")}),
    )


@pytest.fixture
def populated_store(sample_categories, sample_transactions, sample_budget) -> InMemoryLedgerStore:
    """In-memory store preloaded with the sample data."""
    store = InMemoryLedgerStore()
    for category in sample_categories:
        store.upsert_category(category)
    store.upsert_budget(sample_budget)
    for tx in sample_transactions:
        store.upsert_transaction(tx)
    return store


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    # Ensure tests don't use real data
    monkeypatch.setenv("LEDGER_ENV", "test")
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path / "ledger_data"))
    monkeypatch.delenv("LEDGER_RULES_FILE", raising=False)
    monkeypatch.delenv("LEDGER_DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("LEDGER_JSON_INDENT", raising=False)

    # Force configuration to be rebuilt from the patched environment
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for money handling and precision")
    config.addinivalue_line("markers", "rules: Tests for the rule engine")
    config.addinivalue_line("markers", "storage: Tests for stores and queries")
    config.addinivalue_line("markers", "analysis: Tests for analytics and reporting")
    config.addinivalue_line("markers", "exchange: Tests for JSON/CSV import and export")
