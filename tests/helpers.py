"""Helpers for building ledger fixtures in tests."""

from finance_ledger.domain.monetary import Money, USD


def make_account(services, name="Checking", account_type="checking", asset="BRL"):
    return services.accounts.create(name, account_type, asset, "")


def make_category(services, name="Groceries", category_type="expense"):
    return services.categories.create(name, category_type)


def make_transaction(services, account, category, amount="10.00", description="Test",
                     transaction_date=None, status=None):
    """Create a transaction; ``amount`` is a major-unit string read as USD."""
    return services.transactions.create(
        account_id=account.id,
        category_id=category.id,
        amount=Money.parse(amount, USD),
        description=description,
        transaction_date=transaction_date,
        status=status,
    )
