from fastapi import APIRouter, Depends, Response, status

from ..core.dependencies import get_ledger_service
from ..models import (
    Account,
    AccountCreate,
    AccountUpdate,
    ExistsResponse,
    TransferRequest,
    TransferResponse,
)
from ..services import LedgerService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=Account, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> Account:
    return service.create(payload.id, payload.owner, payload.balance)

@router.get("", response_model=list[Account])
def list_accounts(
    service: LedgerService = Depends(get_ledger_service),
) -> list[Account]:
    return service.list_all()

@router.get("/{account_id}", response_model=Account)
def get_account(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> Account:
    return service.read(account_id)

@router.put("/{account_id}", response_model=Account)
def update_account(
    account_id: str,
    payload: AccountUpdate,
    service: LedgerService = Depends(get_ledger_service),
) -> Account:
    return service.update(account_id, payload.owner, payload.balance)

@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    service.delete(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{account_id}/exists", response_model=ExistsResponse)
def account_exists(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists(account_id))

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResponse)
def create_transfer(
    payload: TransferRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> TransferResponse:
    source, dest = service.transfer(
        payload.source_account_id,
        payload.dest_account_id,
        payload.amount,
    )
    return TransferResponse(source=source, dest=dest)

ledger_router = APIRouter(prefix="/ledger", tags=["ledger"])

@ledger_router.post("/init", response_model=list[Account])
def init_ledger(
    service: LedgerService = Depends(get_ledger_service),
) -> list[Account]:
    return service.initialize()

__all__ = ["router", "transfer_router", "ledger_router"]
