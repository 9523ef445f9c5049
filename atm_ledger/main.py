"""
ATM Ledger — FastAPI Application.

This is the entry point for the HTTP adapter.
All routers are registered here, and the single AtmService
instance for the process is created here.
"""

from fastapi import FastAPI

from atm_ledger.config import get_settings
from atm_ledger.logging_config import setup_logging
from atm_ledger.services.atm_service import AtmService
from atm_ledger.api.health import router as health_router
from atm_ledger.api.accounts import router as accounts_router
from atm_ledger.api.transactions import router as transactions_router
from atm_ledger.api.ledger import router as ledger_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="In-memory ATM accounts with per-account ledger export",
)
app.state.atm_service = AtmService(ledger_dir=settings.LEDGER_OUTPUT_DIR)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
app.include_router(ledger_router)
