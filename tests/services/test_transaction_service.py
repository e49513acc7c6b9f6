from datetime import date

import pytest

from finance_ledger.domain.entities import TransactionStatus
from finance_ledger.domain.errors import InvalidParameterError, NotFoundError, ValidationError
from finance_ledger.domain.monetary import BRL, USD, Money
from finance_ledger.services.transaction_service import today_utc
from tests.helpers import make_account, make_category, make_transaction


@pytest.fixture
def ledger(services):
    """An account with one income and one expense category."""
    return {
        "account": make_account(services),
        "income": make_category(services, "Salary", "income"),
        "expense": make_category(services, "Groceries", "expense"),
    }


class TestTransactionCreate:
    """Tests for TransactionService.create."""

    def test_defaults_status_and_date(self, services, ledger):
        transaction = make_transaction(services, ledger["account"], ledger["income"], "25.00")

        assert transaction.status == TransactionStatus.CLEARED
        assert transaction.date == today_utc()
        assert transaction.account.id == ledger["account"].id
        assert transaction.category.id == ledger["income"].id

    def test_keeps_explicit_date_and_status(self, services, ledger):
        transaction = make_transaction(
            services, ledger["account"], ledger["income"], "25.00",
            transaction_date=date(2024, 1, 15), status="pending",
        )

        assert transaction.date == date(2024, 1, 15)
        assert transaction.status == TransactionStatus.PENDING

    def test_relabels_amount_to_account_asset(self, services, ledger):
        """Test that the amount keeps its minor units but takes the account's asset."""
        transaction = make_transaction(services, ledger["account"], ledger["income"], "12.34")

        assert transaction.amount == Money(BRL, 1234)

    def test_expense_is_stored_negative(self, services, ledger):
        transaction = make_transaction(services, ledger["account"], ledger["expense"], "40.00")

        assert transaction.amount.amount == -4000

    def test_income_is_stored_positive(self, services, ledger):
        transaction = make_transaction(services, ledger["account"], ledger["income"], "-40.00")

        assert transaction.amount.amount == 4000

    def test_zero_amount_rejected(self, services, ledger):
        with pytest.raises(ValidationError) as exc_info:
            make_transaction(services, ledger["account"], ledger["income"], "0")

        assert str(exc_info.value) == "transaction amount cannot be zero"

    def test_description_required(self, services, ledger):
        with pytest.raises(ValidationError) as exc_info:
            make_transaction(services, ledger["account"], ledger["income"], description="  ")

        assert str(exc_info.value) == "transaction description cannot be empty"

    def test_account_id_required(self, services, ledger):
        with pytest.raises(ValidationError):
            services.transactions.create("", ledger["income"].id, Money(USD, 100), "x")

    def test_unknown_status_rejected(self, services, ledger):
        with pytest.raises(InvalidParameterError):
            make_transaction(services, ledger["account"], ledger["income"], status="reconciled")

    def test_unknown_account(self, services, ledger):
        with pytest.raises(NotFoundError) as exc_info:
            services.transactions.create(
                "00000000-0000-0000-0000-000000000000",
                ledger["income"].id,
                Money(USD, 100),
                "x",
            )

        assert str(exc_info.value) == "account not found"

    def test_unknown_category(self, services, ledger):
        with pytest.raises(NotFoundError) as exc_info:
            services.transactions.create(
                ledger["account"].id,
                "00000000-0000-0000-0000-000000000000",
                Money(USD, 100),
                "x",
            )

        assert str(exc_info.value) == "category not found"

    def test_refreshes_balance(self, services, ledger):
        make_transaction(services, ledger["account"], ledger["income"], "100.00")
        make_transaction(services, ledger["account"], ledger["expense"], "30.00")

        balance = services.balances.get(ledger["account"].id)

        assert balance.current.amount == 7000


class TestTransactionUpdate:
    """Tests for TransactionService.update."""

    def test_sign_correction_applies_on_update(self, services, ledger):
        transaction = make_transaction(services, ledger["account"], ledger["income"], "50.00")

        updated = services.transactions.update(
            transaction.id,
            account_id=ledger["account"].id,
            category_id=ledger["expense"].id,
            amount=Money(USD, 5000),
            description="Now an expense",
        )

        assert updated.amount.amount == -5000
        assert services.balances.get(ledger["account"].id).current.amount == -5000

    def test_unset_date_and_status_keep_stored_values(self, services, ledger):
        transaction = make_transaction(
            services, ledger["account"], ledger["income"], "50.00",
            transaction_date=date(2023, 6, 1), status="pending",
        )

        updated = services.transactions.update(
            transaction.id,
            account_id=ledger["account"].id,
            category_id=ledger["income"].id,
            amount=Money(USD, 6000),
            description="Edited",
        )

        assert updated.date == date(2023, 6, 1)
        assert updated.status == TransactionStatus.PENDING
        assert updated.description == "Edited"

    def test_moving_refreshes_both_accounts(self, services, ledger):
        """Test that moving a transaction refreshes the old and new account."""
        other = make_account(services, name="Wallet", account_type="cash", asset="USD")
        transaction = make_transaction(services, ledger["account"], ledger["income"], "80.00")

        updated = services.transactions.update(
            transaction.id,
            account_id=other.id,
            category_id=ledger["income"].id,
            amount=Money(USD, 8000),
            description="Moved",
        )

        assert updated.amount == Money(USD, 8000)
        assert services.balances.get(ledger["account"].id).current.amount == 0
        assert services.balances.get(other.id).current.amount == 8000

    def test_update_not_found(self, services, ledger):
        with pytest.raises(NotFoundError):
            services.transactions.update(
                "00000000-0000-0000-0000-000000000000",
                account_id=ledger["account"].id,
                category_id=ledger["income"].id,
                amount=Money(USD, 100),
                description="x",
            )


class TestTransactionQueries:
    """Tests for deleting and listing transactions."""

    def test_delete_refreshes_balance(self, services, ledger):
        transaction = make_transaction(services, ledger["account"], ledger["income"], "10.00")

        services.transactions.delete(transaction.id)

        with pytest.raises(NotFoundError):
            services.transactions.get(transaction.id)
        assert services.balances.get(ledger["account"].id).current.amount == 0

    def test_delete_not_found(self, services):
        with pytest.raises(NotFoundError):
            services.transactions.delete("00000000-0000-0000-0000-000000000000")

    def test_list_empty(self, services):
        assert services.transactions.list() == []

    def test_list_ordered_by_date_desc_with_paging(self, services, ledger):
        for day in (3, 1, 2):
            make_transaction(
                services, ledger["account"], ledger["income"], "1.00",
                description=f"day {day}", transaction_date=date(2024, 5, day),
            )

        first_page = services.transactions.list(limit=2, offset=0)
        second_page = services.transactions.list(limit=2, offset=2)

        assert [t.description for t in first_page] == ["day 3", "day 2"]
        assert [t.description for t in second_page] == ["day 1"]

    def test_list_by_account(self, services, ledger):
        other = make_account(services, name="Wallet", account_type="cash")
        make_transaction(services, ledger["account"], ledger["income"], "1.00")
        make_transaction(services, other, ledger["income"], "2.00")

        listed = services.transactions.list_by_account(other.id)

        assert len(listed) == 1
        assert listed[0].account_id == other.id

    def test_list_by_date_range_is_inclusive(self, services, ledger):
        for day in (1, 10, 20):
            make_transaction(
                services, ledger["account"], ledger["income"], "1.00",
                description=f"day {day}", transaction_date=date(2024, 3, day),
            )

        listed = services.transactions.list_by_date_range(date(2024, 3, 1), date(2024, 3, 10))

        assert [t.description for t in listed] == ["day 10", "day 1"]

    def test_list_by_date_range_requires_ordered_bounds(self, services):
        with pytest.raises(ValidationError):
            services.transactions.list_by_date_range(date(2024, 3, 10), date(2024, 3, 1))
        with pytest.raises(ValidationError):
            services.transactions.list_by_date_range(date(2024, 3, 10), None)
