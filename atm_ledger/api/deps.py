"""
Shared FastAPI dependencies.
"""

from fastapi import Request

from atm_ledger.services.atm_service import AtmService


def get_atm_service(request: Request) -> AtmService:
    """
    Provide the application's AtmService.

    The instance is created once in main.py and stored on
    app.state. Tests override this dependency with their own
    service.
    """
    return request.app.state.atm_service
