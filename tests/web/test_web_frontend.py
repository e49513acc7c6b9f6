import httpx
from fastapi.testclient import TestClient

from finance_ledger.web.api_client import ApiClient
from finance_ledger.web.app import create_web_app, format_date


def create_account(web_client, name="Nubank"):
    return web_client.post(
        "/accounts/create",
        data={"name": name, "type": "checking", "asset": "BRL", "description": ""},
    )


class TestPages:
    """Tests for the full-page routes."""

    def test_dashboard(self, web_client):
        response = web_client.get("/")

        assert response.status_code == 200
        assert "Net worth" in response.text
        assert "$0.00" in response.text

    def test_accounts_page(self, web_client):
        create_account(web_client)

        response = web_client.get("/accounts")

        assert response.status_code == 200
        assert "Nubank" in response.text

    def test_categories_page(self, web_client):
        response = web_client.get("/categories")

        assert response.status_code == 200
        assert "No categories yet." in response.text

    def test_transactions_page(self, web_client):
        response = web_client.get("/transactions")

        assert response.status_code == 200
        assert "No transactions yet." in response.text


class TestForms:
    """Tests for the HTMX form endpoints."""

    def test_create_account_returns_table_and_trigger(self, web_client):
        response = create_account(web_client)

        assert response.status_code == 200
        assert response.headers["HX-Trigger"].startswith("account-created-")
        assert "Nubank" in response.text
        assert "R$0.00" in response.text

    def test_create_account_error_is_400(self, web_client):
        response = web_client.post("/accounts/create", data={"name": "", "type": "checking", "asset": "BRL"})

        assert response.status_code == 400
        assert response.text == "account name cannot be empty"

    def test_update_and_delete_category(self, web_client, api_client):
        created = web_client.post("/categories/create", data={"name": "Food", "type": "expense"})
        category_id = created.headers["HX-Trigger"].removeprefix("category-created-")

        updated = web_client.put(
            f"/categories/{category_id}", data={"name": "Dining", "type": "expense", "color": "#EF4444"}
        )
        deleted = web_client.delete(f"/categories/{category_id}")

        assert updated.status_code == 200
        assert updated.headers["HX-Trigger"] == f"category-updated-{category_id}"
        assert "Dining" in updated.text
        assert deleted.headers["HX-Trigger"] == f"category-deleted-{category_id}"
        assert api_client.get("/api/v1/categories").json() == []

    def test_create_transaction(self, web_client, api_client):
        account = api_client.post(
            "/api/v1/accounts", json={"name": "Wallet", "type": "cash", "asset": "USD"}
        ).json()
        category = api_client.post(
            "/api/v1/categories", json={"name": "Coffee", "type": "expense"}
        ).json()

        response = web_client.post("/transactions/create", data={
            "account_id": account["id"],
            "category_id": category["id"],
            "amount": "4.50",
            "description": "Espresso",
            "date": "2024-03-05",
            "status": "cleared",
        })

        assert response.status_code == 200
        assert response.headers["HX-Trigger"].startswith("transaction-created-")
        assert "-$4.50" in response.text
        assert "Mar 05, 2024" in response.text

    def test_update_account(self, web_client, api_client):
        created = create_account(web_client)
        account_id = created.headers["HX-Trigger"].removeprefix("account-created-")

        response = web_client.put(
            f"/accounts/{account_id}",
            data={"name": "Nubank Gold", "type": "savings", "asset": "BRL", "description": "joint"},
        )

        assert response.status_code == 200
        assert response.headers["HX-Trigger"] == f"account-updated-{account_id}"
        account = api_client.get(f"/api/v1/accounts/{account_id}").json()
        assert account["name"] == "Nubank Gold"
        assert account["type"] == "savings"

    def test_update_transaction_keeps_sign(self, web_client, api_client):
        account = api_client.post(
            "/api/v1/accounts", json={"name": "Wallet", "type": "cash", "asset": "USD"}
        ).json()
        category = api_client.post(
            "/api/v1/categories", json={"name": "Coffee", "type": "expense"}
        ).json()
        created = api_client.post("/api/v1/transactions", json={
            "account_id": account["id"],
            "category_id": category["id"],
            "amount": "4.50",
            "description": "Espresso",
            "date": "2024-03-05",
        }).json()

        response = web_client.put(f"/transactions/{created['id']}", data={
            "account_id": account["id"],
            "category_id": category["id"],
            "amount": "5.25",
            "description": "Double espresso",
            "date": "2024-03-05",
            "status": "pending",
        })

        assert response.status_code == 200
        assert response.headers["HX-Trigger"] == f"transaction-updated-{created['id']}"
        assert "-$5.25" in response.text
        assert "Double espresso" in response.text

    def test_create_transaction_bad_amount(self, web_client):
        response = web_client.post("/transactions/create", data={"amount": "ten", "description": "x"})

        assert response.status_code == 400
        assert "amount" in response.text

    def test_delete_missing_transaction(self, web_client):
        response = web_client.delete("/transactions/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 400
        assert response.text == "transaction not found"


class TestFragments:
    def test_balance_summary_fragment(self, web_client):
        response = web_client.get("/htmx/balance-summary")

        assert response.status_code == 200
        assert "Total assets" in response.text

    def test_accounts_fragment(self, web_client):
        create_account(web_client, name="Savings box")

        response = web_client.get("/htmx/accounts")

        assert "Savings box" in response.text
        assert "<html" not in response.text

    def test_rows_have_edit_forms(self, web_client, api_client):
        account = api_client.post(
            "/api/v1/accounts", json={"name": "Wallet", "type": "cash", "asset": "USD"}
        ).json()
        category = api_client.post(
            "/api/v1/categories", json={"name": "Coffee", "type": "expense"}
        ).json()
        transaction = api_client.post("/api/v1/transactions", json={
            "account_id": account["id"],
            "category_id": category["id"],
            "amount": "4.50",
            "description": "Espresso",
        }).json()

        accounts = web_client.get("/htmx/accounts").text
        categories = web_client.get("/htmx/categories").text
        transactions = web_client.get("/htmx/transactions").text

        assert f'hx-put="/accounts/{account["id"]}"' in accounts
        assert '<option value="cash" selected>' in accounts
        assert f'hx-put="/categories/{category["id"]}"' in categories
        assert f'hx-put="/transactions/{transaction["id"]}"' in transactions
        assert 'name="amount" value="4.50"' in transactions
        assert '<option value="cleared" selected>' in transactions

    def test_dashboard_tables_are_swap_targets(self, web_client):
        response = web_client.get("/")

        assert 'id="accounts-table"' in response.text
        assert 'id="transactions-table"' in response.text


class TestApiUnavailable:
    def test_unreachable_api_is_502(self, test_settings):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.Client(base_url="http://api", transport=httpx.MockTransport(refuse))
        web_client = TestClient(create_web_app(test_settings, api=ApiClient(client=client)))

        response = web_client.get("/htmx/accounts")

        assert response.status_code == 502
        assert "Failed to reach API" in response.text


def test_format_date():
    assert format_date("2024-03-05") == "Mar 05, 2024"
    assert format_date("") == ""
    assert format_date("soon") == "soon"
