"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from atm_ledger.api.deps import get_atm_service
from atm_ledger.config import get_settings
from atm_ledger.services.atm_service import AtmService

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(service: AtmService = Depends(get_atm_service)):
    """Return application health status, environment and account count."""
    return {
        "status": "healthy",
        "service": "atm-ledger",
        "environment": get_settings().ENVIRONMENT,
        "accounts": len(service.get_accounts()),
    }
