from collections.abc import Generator

from fastapi import Depends
from sqlmodel import Session

from ..services import LedgerService, StateRepository
from .db import get_session

def get_ledger_service(
    session: Session = Depends(get_session),
) -> Generator[LedgerService, None, None]:
    # One request is one unit of work: a failed operation leaves no writes behind.
    try:
        yield LedgerService(StateRepository(session))
    except Exception:
        session.rollback()
        raise
    session.commit()
