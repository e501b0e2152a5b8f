from __future__ import annotations

import logging
import math
from contextlib import closing
from typing import List, Tuple

from pydantic import ValidationError

from ..core.errors import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    DecodingError,
    EncodingError,
    InsufficientFundsError,
    InvalidAccountIdError,
    InvalidAmountError,
    SameAccountTransferError,
)
from ..models import Account
from .store import KeyValueStore


logger = logging.getLogger(__name__)

SEED_ACCOUNTS: Tuple[Tuple[str, str, float], ...] = (
    ("account1", "Tomoko", 1000.0),
    ("account2", "Brad", 2000.0),
    ("account3", "Jin Soo", 3000.0),
    ("account4", "Max", 4000.0),
    ("account5", "Adriana", 5000.0),
    ("account6", "Michel", 6000.0),
)


class LedgerService:
    """Account registry logic over an injected key-value store.

    The service keeps no state of its own: every call re-reads the store and
    its visible effects are exactly the reads and writes it issues. It does no
    locking, so concurrent callers touching the same keys must be serialized
    by whoever owns the store's transaction.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _build_account(self, account_id: str, owner: str, balance: float) -> Account:
        try:
            return Account(id=account_id, owner=owner, balance=balance)
        except ValidationError as exc:
            raise EncodingError(f"Account {account_id} cannot be encoded") from exc

    def _serialize(self, account: Account) -> bytes:
        return account.model_dump_json(by_alias=True).encode("utf-8")

    def _deserialize_account(self, payload: bytes) -> Account:
        try:
            return Account.model_validate_json(payload, strict=True)
        except ValueError as exc:
            raise DecodingError("Stored bytes are not a valid account record") from exc

    def _write(self, account: Account) -> None:
        self.store.put(account.id, self._serialize(account))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def initialize(self) -> List[Account]:
        accounts = [
            self._build_account(account_id, owner, balance)
            for account_id, owner, balance in SEED_ACCOUNTS
        ]
        for account in accounts:
            self._write(account)
        logger.info("ledger.initialized", extra={"accounts": len(accounts)})
        return accounts

    def create(self, account_id: str, owner: str, balance: float) -> Account:
        if not account_id:
            raise InvalidAccountIdError(account_id)
        if self.exists(account_id):
            raise AccountAlreadyExistsError(account_id)

        account = self._build_account(account_id, owner, balance)
        self._write(account)
        logger.info(
            "account.created",
            extra={"account_id": account_id, "owner": owner, "balance": balance},
        )
        return account

    def read(self, account_id: str) -> Account:
        payload = self.store.get(account_id)
        if payload is None:
            raise AccountNotFoundError(account_id)
        return self._deserialize_account(payload)

    def update(self, account_id: str, owner: str, balance: float) -> Account:
        if not self.exists(account_id):
            raise AccountNotFoundError(account_id)

        account = self._build_account(account_id, owner, balance)
        self._write(account)
        logger.info(
            "account.updated",
            extra={"account_id": account_id, "owner": owner, "balance": balance},
        )
        return account

    def delete(self, account_id: str) -> None:
        if not self.exists(account_id):
            raise AccountNotFoundError(account_id)

        self.store.delete(account_id)
        logger.info("account.deleted", extra={"account_id": account_id})

    def exists(self, account_id: str) -> bool:
        return self.store.get(account_id) is not None

    def list_all(self) -> List[Account]:
        accounts: List[Account] = []
        with closing(self.store.scan("", "")) as results:
            for _key, payload in results:
                accounts.append(self._deserialize_account(payload))
        return accounts

    def transfer(
        self,
        from_id: str,
        to_id: str,
        amount: float,
    ) -> Tuple[Account, Account]:
        if not math.isfinite(amount) or amount <= 0:
            raise InvalidAmountError(amount)
        if from_id == to_id:
            raise SameAccountTransferError(from_id)

        source = self.read(from_id)
        dest = self.read(to_id)

        if source.balance < amount:
            raise InsufficientFundsError(from_id, amount, source.balance)

        source = self._build_account(source.id, source.owner, source.balance - amount)
        dest = self._build_account(dest.id, dest.owner, dest.balance + amount)

        self._write(source)
        self._write(dest)
        logger.info(
            "account.transfer",
            extra={
                "source_account_id": from_id,
                "dest_account_id": to_id,
                "amount": amount,
            },
        )
        return source, dest
