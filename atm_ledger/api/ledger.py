"""
Ledger API endpoints.

The API layer is thin: it handles HTTP concerns (status codes,
response formatting) and delegates path confinement and file
writing to AtmService.
"""

from fastapi import APIRouter, Depends, HTTPException

from atm_ledger.api.deps import get_atm_service
from atm_ledger.errors import AccountNotFound, LedgerIOError, UnsafeLedgerPath
from atm_ledger.services.atm_service import AtmService
from atm_ledger.schemas.ledger import PrintLedgerRequest, PrintLedgerResponse

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.post("/print", response_model=PrintLedgerResponse, status_code=201)
def print_ledger(
    request: PrintLedgerRequest,
    service: AtmService = Depends(get_atm_service),
):
    """
    Write an account's ledger to a file in the ledger directory.

    Paths that escape the directory are refused with 400.
    """
    try:
        target = service.print_ledger(request.path, request.card, request.pin)
    except AccountNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnsafeLedgerPath as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LedgerIOError:
        raise HTTPException(status_code=500, detail="Could not write ledger")

    entries = service.get_transactions()[(request.card, request.pin)]
    return PrintLedgerResponse(path=str(target), entries=len(entries))
