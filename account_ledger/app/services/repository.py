from __future__ import annotations

from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.errors import StoreError
from ..models import StateEntryModel


class _ScanCursor:
    def __init__(self, result) -> None:
        self._result = result

    def __iter__(self) -> Iterator[tuple[str, bytes]]:
        try:
            for entry in self._result:
                yield entry.key, entry.value
        except SQLAlchemyError as exc:
            raise StoreError("failed to iterate world state") from exc

    def close(self) -> None:
        try:
            self._result.close()
        except SQLAlchemyError as exc:
            raise StoreError("failed to release world state range") from exc


class StateRepository:
    """Key-value world state stored in a single SQLModel table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> Optional[bytes]:
        try:
            entry = self.session.get(StateEntryModel, key)
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to read {key} from world state") from exc
        if entry is None:
            return None
        return entry.value

    def put(self, key: str, value: bytes) -> None:
        try:
            self.session.merge(StateEntryModel(key=key, value=value))
            self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to put {key} to world state") from exc

    def delete(self, key: str) -> None:
        try:
            entry = self.session.get(StateEntryModel, key)
            if entry is not None:
                self.session.delete(entry)
                self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to delete {key} from world state") from exc

    def scan(self, start_key: str, end_key: str) -> _ScanCursor:
        stmt = select(StateEntryModel).order_by(StateEntryModel.key)
        if start_key:
            stmt = stmt.where(StateEntryModel.key >= start_key)
        if end_key:
            stmt = stmt.where(StateEntryModel.key < end_key)
        try:
            return _ScanCursor(self.session.exec(stmt))
        except SQLAlchemyError as exc:
            raise StoreError("failed to open world state range") from exc
