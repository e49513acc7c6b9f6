"""FastAPI application entry point for the ledger REST API."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from finance_ledger.api.accounts import router as accounts_router
from finance_ledger.api.balances import router as balances_router
from finance_ledger.api.categories import router as categories_router
from finance_ledger.api.errors import request_validation_handler, unhandled_error_handler
from finance_ledger.api.transactions import router as transactions_router
from finance_ledger.config import Settings, get_settings
from finance_ledger.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API application."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        if settings.auto_create_schema:
            from finance_ledger.init_db import init_db
            init_db()
        logger.info(f"Ledger API ready ({settings.environment})")
        yield

    app = FastAPI(
        title="Finance Ledger API",
        description="Accounts, categories, transactions and balances",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(accounts_router)
    app.include_router(categories_router)
    app.include_router(transactions_router)
    app.include_router(balances_router)

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return Response(status_code=200)

    return app


app = create_app()


def run():
    """Serve the API on SERVICE_ADDRESS."""
    import uvicorn

    host, port = get_settings().service_bind
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
