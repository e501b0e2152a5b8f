from .db import StateEntry as StateEntryModel
from .schemas import (
    Account,
    AccountCreate,
    AccountUpdate,
    ExistsResponse,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "Account",
    "AccountCreate",
    "AccountUpdate",
    "ExistsResponse",
    "TransferRequest",
    "TransferResponse",
    "StateEntryModel",
]
