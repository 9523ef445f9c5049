"""
Account API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from atm_ledger.api.deps import get_atm_service
from atm_ledger.errors import (
    AccountNotFound,
    AlreadyRegistered,
    InvalidAccountDetails,
    InvalidAmount,
)
from atm_ledger.services.atm_service import AtmService
from atm_ledger.schemas.account import (
    AccountCredentials,
    AccountRegister,
    AccountResponse,
    BalanceResponse,
)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def register_account(
    request: AccountRegister,
    service: AtmService = Depends(get_atm_service),
):
    """
    Register a new account.

    An existing card and PIN pair is never overwritten.
    """
    try:
        account = service.register_account(
            request.card,
            request.pin,
            request.owner_name,
            request.initial_balance,
        )
    except AlreadyRegistered as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (InvalidAccountDetails, InvalidAmount) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AccountResponse(
        card=request.card,
        owner_name=account.owner_name,
        balance=account.balance,
    )


@router.post("/balance", response_model=BalanceResponse)
def check_balance(
    request: AccountCredentials,
    service: AtmService = Depends(get_atm_service),
):
    """Get the current balance."""
    try:
        balance = service.check_balance(request.card, request.pin)
    except AccountNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))

    return BalanceResponse(card=request.card, balance=balance)
