from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    DecodingError,
    EncodingError,
    InsufficientFundsError,
    InvalidAccountIdError,
    InvalidAmountError,
    SameAccountTransferError,
    StoreError,
)


logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(AccountAlreadyExistsError)
    async def account_exists_handler(
        request: Request, exc: AccountAlreadyExistsError
    ) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(InsufficientFundsError)
    async def insufficient_funds_handler(
        request: Request, exc: InsufficientFundsError
    ) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.exception_handler(InvalidAmountError)
    @app.exception_handler(SameAccountTransferError)
    @app.exception_handler(InvalidAccountIdError)
    async def bad_request_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(EncodingError)
    @app.exception_handler(DecodingError)
    @app.exception_handler(StoreError)
    async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "ledger.storage_failure",
            exc_info=exc,
            extra={"path": request.url.path},
        )
        return JSONResponse(status_code=500, content={"detail": "Ledger storage failure"})
