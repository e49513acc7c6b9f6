"""HTMX web frontend. Every read and write goes through the ledger API."""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from finance_ledger.config import Settings, get_settings
from finance_ledger.domain.entities import AccountType, CategoryType, TransactionStatus
from finance_ledger.logging_config import setup_logging
from finance_ledger.web.api_client import ApiClient, ApiError, ApiUnavailableError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def format_date(value: Optional[str]) -> str:
    """'2024-03-05' -> 'Mar 05, 2024'."""
    if not value:
        return ""
    try:
        return datetime.strptime(value[:10], "%Y-%m-%d").strftime("%b %d, %Y")
    except ValueError:
        return value


def capitalize_first(value: Optional[str]) -> str:
    return value[:1].upper() + value[1:] if value else ""


templates.env.filters["format_date"] = format_date
templates.env.filters["capitalize_first"] = capitalize_first
templates.env.globals["account_types"] = [t.value for t in AccountType]
templates.env.globals["category_types"] = [t.value for t in CategoryType]
templates.env.globals["statuses"] = [s.value for s in TransactionStatus]


def get_api(request: Request) -> ApiClient:
    return request.app.state.api


def load_accounts(api: ApiClient):
    return api.get("/accounts", params={"with_balances": "true"})


def load_categories(api: ApiClient):
    return api.get("/categories")


def load_transactions(api: ApiClient):
    return api.get("/transactions", params={"limit": 50})


def load_summary(api: ApiClient):
    return api.get("/balances/summary")


def render_fragment(request: Request, template: str, context: dict, trigger: str = "") -> HTMLResponse:
    response = templates.TemplateResponse(request, template, context)
    if trigger:
        response.headers["HX-Trigger"] = trigger
    return response


def accounts_fragment(request: Request, api: ApiClient, trigger: str = "") -> HTMLResponse:
    return render_fragment(
        request, "partials/accounts_table.html", {"accounts": load_accounts(api)}, trigger
    )


def categories_fragment(request: Request, api: ApiClient, trigger: str = "") -> HTMLResponse:
    return render_fragment(
        request, "partials/categories_table.html", {"categories": load_categories(api)}, trigger
    )


def transactions_fragment(request: Request, api: ApiClient, trigger: str = "") -> HTMLResponse:
    return render_fragment(
        request,
        "partials/transactions_table.html",
        {"transactions": load_transactions(api)},
        trigger,
    )


def create_web_app(settings: Optional[Settings] = None, api: Optional[ApiClient] = None) -> FastAPI:
    """Build the web frontend.

    Args:
        settings: Application settings; defaults to the process settings.
        api: Client for the ledger API; defaults to one built from API_BASE_URL.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        logger.info(f"Web frontend using API at {settings.api_base_url}")
        yield
        app.state.api.close()

    app = FastAPI(
        title="Finance Ledger", docs_url=None, redoc_url=None, openapi_url=None, lifespan=lifespan
    )
    app.state.api = api or ApiClient(settings.api_base_url)

    @app.exception_handler(ApiError)
    def api_error_handler(request: Request, exc: ApiError):
        status_code = 400 if exc.status_code < 500 else 502
        return PlainTextResponse(exc.message, status_code=status_code)

    @app.exception_handler(ApiUnavailableError)
    def api_unavailable_handler(request: Request, exc: ApiUnavailableError):
        return PlainTextResponse(str(exc), status_code=502)

    # Pages

    @app.get("/", response_class=HTMLResponse)
    def dashboard(request: Request, api: ApiClient = Depends(get_api)):
        return templates.TemplateResponse(request, "dashboard.html", {
            "accounts": load_accounts(api),
            "categories": load_categories(api),
            "transactions": load_transactions(api)[:10],
            "summary": load_summary(api),
        })

    @app.get("/accounts", response_class=HTMLResponse)
    def accounts_page(request: Request, api: ApiClient = Depends(get_api)):
        return templates.TemplateResponse(request, "accounts.html", {
            "accounts": load_accounts(api),
        })

    @app.get("/categories", response_class=HTMLResponse)
    def categories_page(request: Request, api: ApiClient = Depends(get_api)):
        return templates.TemplateResponse(request, "categories.html", {
            "categories": load_categories(api),
        })

    @app.get("/transactions", response_class=HTMLResponse)
    def transactions_page(request: Request, api: ApiClient = Depends(get_api)):
        return templates.TemplateResponse(request, "transactions.html", {
            "transactions": load_transactions(api),
            "accounts": load_accounts(api),
            "categories": load_categories(api),
            "today": datetime.now(timezone.utc).date().isoformat(),
        })

    # Accounts

    @app.post("/accounts/create", response_class=HTMLResponse)
    def create_account(
        request: Request,
        name: str = Form(""),
        type: str = Form(""),
        asset: str = Form(""),
        description: str = Form(""),
        api: ApiClient = Depends(get_api),
    ):
        created = api.post("/accounts", {
            "name": name, "type": type, "asset": asset, "description": description,
        })
        return accounts_fragment(request, api, f"account-created-{created['id']}")

    @app.put("/accounts/{account_id}", response_class=HTMLResponse)
    def update_account(
        request: Request,
        account_id: str,
        name: str = Form(""),
        type: str = Form(""),
        asset: str = Form(""),
        description: str = Form(""),
        api: ApiClient = Depends(get_api),
    ):
        updated = api.put(f"/accounts/{account_id}", {
            "name": name, "type": type, "asset": asset, "description": description,
        })
        return accounts_fragment(request, api, f"account-updated-{updated['id']}")

    @app.delete("/accounts/{account_id}", response_class=HTMLResponse)
    def delete_account(request: Request, account_id: str, api: ApiClient = Depends(get_api)):
        api.delete(f"/accounts/{account_id}")
        return accounts_fragment(request, api, f"account-deleted-{account_id}")

    # Categories

    @app.post("/categories/create", response_class=HTMLResponse)
    def create_category(
        request: Request,
        name: str = Form(""),
        type: str = Form(""),
        color: str = Form(""),
        description: str = Form(""),
        api: ApiClient = Depends(get_api),
    ):
        created = api.post("/categories", {
            "name": name, "type": type, "color": color, "description": description,
        })
        return categories_fragment(request, api, f"category-created-{created['id']}")

    @app.put("/categories/{category_id}", response_class=HTMLResponse)
    def update_category(
        request: Request,
        category_id: str,
        name: str = Form(""),
        type: str = Form(""),
        color: str = Form(""),
        description: str = Form(""),
        api: ApiClient = Depends(get_api),
    ):
        updated = api.put(f"/categories/{category_id}", {
            "name": name, "type": type, "color": color, "description": description,
        })
        return categories_fragment(request, api, f"category-updated-{updated['id']}")

    @app.delete("/categories/{category_id}", response_class=HTMLResponse)
    def delete_category(request: Request, category_id: str, api: ApiClient = Depends(get_api)):
        api.delete(f"/categories/{category_id}")
        return categories_fragment(request, api, f"category-deleted-{category_id}")

    # Transactions

    @app.post("/transactions/create", response_class=HTMLResponse)
    def create_transaction(
        request: Request,
        account_id: str = Form(""),
        category_id: str = Form(""),
        amount: str = Form(""),
        description: str = Form(""),
        date: str = Form(""),
        status: str = Form(""),
        api: ApiClient = Depends(get_api),
    ):
        created = api.post("/transactions", {
            "account_id": account_id,
            "category_id": category_id,
            "amount": amount,
            "description": description,
            "date": date,
            "status": status,
        })
        return transactions_fragment(request, api, f"transaction-created-{created['id']}")

    @app.put("/transactions/{transaction_id}", response_class=HTMLResponse)
    def update_transaction(
        request: Request,
        transaction_id: str,
        account_id: str = Form(""),
        category_id: str = Form(""),
        amount: str = Form(""),
        description: str = Form(""),
        date: str = Form(""),
        status: str = Form(""),
        api: ApiClient = Depends(get_api),
    ):
        updated = api.put(f"/transactions/{transaction_id}", {
            "account_id": account_id,
            "category_id": category_id,
            "amount": amount,
            "description": description,
            "date": date,
            "status": status,
        })
        return transactions_fragment(request, api, f"transaction-updated-{updated['id']}")

    @app.delete("/transactions/{transaction_id}", response_class=HTMLResponse)
    def delete_transaction(request: Request, transaction_id: str, api: ApiClient = Depends(get_api)):
        api.delete(f"/transactions/{transaction_id}")
        return transactions_fragment(request, api, f"transaction-deleted-{transaction_id}")

    # Fragments

    @app.get("/htmx/accounts", response_class=HTMLResponse)
    def accounts_table(request: Request, api: ApiClient = Depends(get_api)):
        return accounts_fragment(request, api)

    @app.get("/htmx/categories", response_class=HTMLResponse)
    def categories_table(request: Request, api: ApiClient = Depends(get_api)):
        return categories_fragment(request, api)

    @app.get("/htmx/transactions", response_class=HTMLResponse)
    def transactions_table(request: Request, api: ApiClient = Depends(get_api)):
        return transactions_fragment(request, api)

    @app.get("/htmx/balance-summary", response_class=HTMLResponse)
    def balance_summary(request: Request, api: ApiClient = Depends(get_api)):
        return render_fragment(request, "partials/balance_summary.html", {"summary": load_summary(api)})

    return app


def run():
    """Serve the web frontend on WEB_ADDRESS."""
    import uvicorn

    settings = get_settings()
    host, port = settings.web_bind
    uvicorn.run(create_web_app(settings), host=host, port=port)


if __name__ == "__main__":
    run()
