"""
Cash transaction API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from atm_ledger.api.deps import get_atm_service
from atm_ledger.errors import AccountNotFound, AtmError
from atm_ledger.models.enums import TransactionType
from atm_ledger.services.atm_service import AtmService
from atm_ledger.schemas.transaction import CashRequest, TransactionResponse

router = APIRouter(prefix="/transactions", tags=["Transactions"])


def _latest_entry(service: AtmService, request: CashRequest) -> str:
    return service.get_transactions()[(request.card, request.pin)][-1]


@router.post("/withdraw", response_model=TransactionResponse, status_code=201)
def withdraw(
    request: CashRequest,
    service: AtmService = Depends(get_atm_service),
):
    """Withdraw cash from an account."""
    try:
        balance = service.withdraw_cash(request.card, request.pin, request.amount)
    except AccountNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AtmError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TransactionResponse(
        card=request.card,
        transaction_type=TransactionType.WITHDRAWAL,
        amount=request.amount,
        balance=balance,
        entry=_latest_entry(service, request),
    )


@router.post("/deposit", response_model=TransactionResponse, status_code=201)
def deposit(
    request: CashRequest,
    service: AtmService = Depends(get_atm_service),
):
    """Deposit cash into an account."""
    try:
        balance = service.deposit_cash(request.card, request.pin, request.amount)
    except AccountNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AtmError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TransactionResponse(
        card=request.card,
        transaction_type=TransactionType.DEPOSIT,
        amount=request.amount,
        balance=balance,
        entry=_latest_entry(service, request),
    )
