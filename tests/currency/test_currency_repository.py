"""
Tests for the currency repository and seed loader.
"""

import pytest

from database.seed import DEFAULT_CURRENCIES, seed_currencies
from price_feed.reference import ReferenceStore
from storage.repositories.currency import CurrencyRepository, normalize_code
from storage.repositories.exceptions import DuplicateRecordError, RecordNotFoundError


@pytest.fixture
def repository(db_session):
    return CurrencyRepository(db_session)


class TestNormalizeCode:

    def test_strips_and_uppercases(self):
        assert normalize_code("  usd ") == "USD"


class TestCurrencyRepositoryCrud:
    """Create, read, update, delete."""

    def test_create_and_get(self, repository):
        created = repository.create("usd", "US Dollar")
        repository.commit()

        assert created.id is not None
        assert created.code == "USD"
        assert repository.get_by_id(created.id).name == "US Dollar"
        assert created.created_at is not None

    def test_get_by_code_case_insensitive(self, repository):
        repository.create("EUR", "Euro")
        assert repository.get_by_code("eur").name == "Euro"

    def test_get_by_code_missing(self, repository):
        assert repository.get_by_code("XYZ") is None

    def test_get_all_ordered_by_id(self, repository):
        repository.create("JPY", "Japanese Yen")
        repository.create("AUD", "Australian Dollar")

        assert [c.code for c in repository.get_all()] == ["JPY", "AUD"]
        assert repository.count() == 2

    def test_create_duplicate_raises(self, repository):
        repository.create("USD", "US Dollar")

        with pytest.raises(DuplicateRecordError) as exc_info:
            repository.create("usd", "Another Dollar")

        assert exc_info.value.constraint_field == "code"
        assert exc_info.value.details == {"field": "code", "value": "USD"}

    def test_update(self, repository):
        currency = repository.create("CHF", "Swiss Franc")
        repository.commit()

        updated = repository.update(currency.id, "chf", "Franc")
        repository.commit()

        assert updated.name == "Franc"
        assert repository.get_by_code("CHF").name == "Franc"

    def test_update_can_change_code(self, repository):
        currency = repository.create("CHF", "Swiss Franc")
        repository.update(currency.id, "SEK", "Swedish Krona")

        assert repository.get_by_code("CHF") is None
        assert repository.get_by_code("SEK").id == currency.id

    def test_update_to_taken_code_raises(self, repository):
        repository.create("USD", "US Dollar")
        euro = repository.create("EUR", "Euro")

        with pytest.raises(DuplicateRecordError):
            repository.update(euro.id, "USD", "Euro")

    def test_update_missing_raises(self, repository):
        with pytest.raises(RecordNotFoundError):
            repository.update(999, "USD", "US Dollar")

    def test_delete(self, repository):
        currency = repository.create("HKD", "Hong Kong Dollar")
        repository.delete(currency.id)
        repository.commit()

        assert repository.get_by_id(currency.id) is None

    def test_delete_missing_raises(self, repository):
        with pytest.raises(RecordNotFoundError):
            repository.delete(12345)


class TestCurrencyRepositoryAsReferenceStore:
    """lookup()/list_all() consumed by the price feed pipeline."""

    def test_satisfies_protocol(self, repository):
        assert isinstance(repository, ReferenceStore)

    def test_lookup(self, repository):
        repository.create("JPY", "Japanese Yen")

        assert repository.lookup("jpy") == "Japanese Yen"
        assert repository.lookup("XYZ") is None

    def test_list_all_pairs(self, repository):
        repository.create("USD", "US Dollar")
        repository.create("CNY", "Chinese Yuan")

        assert repository.list_all() == [("USD", "US Dollar"), ("CNY", "Chinese Yuan")]


class TestSeedCurrencies:

    def test_seeds_defaults(self, db_session):
        inserted = seed_currencies(db_session)

        assert inserted == len(DEFAULT_CURRENCIES)
        assert CurrencyRepository(db_session).count() == len(DEFAULT_CURRENCIES)

    def test_idempotent(self, db_session):
        seed_currencies(db_session)
        assert seed_currencies(db_session) == 0

    def test_existing_rows_untouched(self, db_session):
        repository = CurrencyRepository(db_session)
        repository.create("USD", "Greenback")
        repository.commit()

        seed_currencies(db_session, [("USD", "US Dollar"), ("EUR", "Euro")])

        assert repository.lookup("USD") == "Greenback"
        assert repository.lookup("EUR") == "Euro"
