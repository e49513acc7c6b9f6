MISSING_ID = "00000000-0000-0000-0000-000000000000"


def setup_ledger(api_client):
    """Checking account with +1000.00 and -250.00, credit card with -200.00."""
    checking = api_client.post(
        "/api/v1/accounts", json={"name": "Checking", "type": "checking", "asset": "USD"}
    ).json()
    card = api_client.post(
        "/api/v1/accounts", json={"name": "Card", "type": "credit", "asset": "USD"}
    ).json()
    salary = api_client.post("/api/v1/categories", json={"name": "Salary", "type": "income"}).json()
    food = api_client.post("/api/v1/categories", json={"name": "Food", "type": "expense"}).json()

    for account, category, amount in (
        (checking, salary, "1000"),
        (checking, food, "250"),
        (card, food, "200"),
    ):
        api_client.post("/api/v1/transactions", json={
            "account_id": account["id"],
            "category_id": category["id"],
            "amount": amount,
            "description": "seed",
        })
    return checking, card


class TestBalancesApi:
    """Tests for /api/v1/balances."""

    def test_get_balance(self, api_client):
        checking, _ = setup_ledger(api_client)

        response = api_client.get(f"/api/v1/balances/{checking['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["current_balance"]["amount"] == "750.00"
        assert body["available_balance"]["formatted"] == "$750.00"
        assert body["account"]["name"] == "Checking"

    def test_get_balance_unknown_account(self, api_client):
        assert api_client.get(f"/api/v1/balances/{MISSING_ID}").status_code == 404

    def test_list_balances(self, api_client):
        setup_ledger(api_client)

        response = api_client.get("/api/v1/balances")

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_summary(self, api_client):
        setup_ledger(api_client)

        response = api_client.get("/api/v1/balances/summary")

        assert response.status_code == 200
        body = response.json()
        assert body["total_assets"]["amount"] == "750.00"
        assert body["total_liabilities"]["amount"] == "200.00"
        assert body["net_worth"] == {"amount": "550.00", "asset": "USD", "formatted": "$550.00"}

    def test_refresh_one(self, api_client):
        checking, _ = setup_ledger(api_client)

        response = api_client.post(f"/api/v1/balances/{checking['id']}/refresh")

        assert response.status_code == 204

    def test_refresh_unknown_account(self, api_client):
        assert api_client.post(f"/api/v1/balances/{MISSING_ID}/refresh").status_code == 404

    def test_refresh_all(self, api_client):
        setup_ledger(api_client)

        assert api_client.post("/api/v1/balances/refresh").status_code == 204
