from .ledger import SEED_ACCOUNTS, LedgerService
from .repository import StateRepository
from .store import KeyValueStore, StateIterator

__all__ = [
    "KeyValueStore",
    "LedgerService",
    "SEED_ACCOUNTS",
    "StateIterator",
    "StateRepository",
]
