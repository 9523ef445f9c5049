"""Business logic services."""

from atm_ledger.services.atm_service import AtmService

__all__ = ["AtmService"]
