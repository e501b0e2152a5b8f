from contextlib import closing

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel

from ..core.db import create_engine_for_url
from ..core.dependencies import get_ledger_service
from ..core.errors import StoreError
from ..services import LedgerService, StateRepository
from ..services.repository import _ScanCursor


@pytest.fixture
def engine(tmp_path):
    engine = create_engine_for_url(f"sqlite:///{tmp_path / 'state.db'}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine) -> StateRepository:
    with Session(engine) as session:
        yield StateRepository(session)


def _keys(repository: StateRepository, start: str = "", end: str = "") -> list[str]:
    with closing(repository.scan(start, end)) as results:
        return [key for key, _ in results]


def test_get_missing_key_returns_none(repository: StateRepository) -> None:
    assert repository.get("nothing") is None


def test_put_overwrites_and_keeps_empty_values(repository: StateRepository) -> None:
    repository.put("a", b"first")
    repository.put("a", b"second")
    repository.put("b", b"")

    assert repository.get("a") == b"second"
    assert repository.get("b") == b""


def test_delete_removes_key_and_ignores_missing(repository: StateRepository) -> None:
    repository.put("a", b"1")

    repository.delete("a")
    repository.delete("a")

    assert repository.get("a") is None


def test_scan_yields_keys_in_order_within_bounds(repository: StateRepository) -> None:
    for key in ("c", "a", "d", "b"):
        repository.put(key, key.encode())

    assert _keys(repository) == ["a", "b", "c", "d"]
    assert _keys(repository, "b", "d") == ["b", "c"]
    assert _keys(repository, "c") == ["c", "d"]
    assert _keys(repository, end="b") == ["a"]


def test_scan_pairs_carry_values(repository: StateRepository) -> None:
    repository.put("k", b"v")

    with closing(repository.scan("", "")) as results:
        assert list(results) == [("k", b"v")]


def test_sql_failures_are_wrapped(tmp_path) -> None:
    engine = create_engine_for_url(f"sqlite:///{tmp_path / 'empty.db'}")
    with Session(engine) as session:
        repository = StateRepository(session)
        with pytest.raises(StoreError) as excinfo:
            repository.get("a")

    assert excinfo.value.__cause__ is not None


def test_service_over_repository_lists_in_key_order(repository: StateRepository) -> None:
    service = LedgerService(repository)
    service.create("b", "Bea", 2)
    service.create("a", "Abe", 1)

    assert [account.id for account in service.list_all()] == ["a", "b"]


def test_request_unit_of_work_commits_on_success(engine) -> None:
    with Session(engine) as session:
        dependency = get_ledger_service(session)
        service = next(dependency)
        service.create("acc-1", "Alice", 5)
        with pytest.raises(StopIteration):
            next(dependency)

    with Session(engine) as session:
        assert LedgerService(StateRepository(session)).read("acc-1").balance == 5


def test_request_unit_of_work_rolls_back_on_failure(engine) -> None:
    with Session(engine) as session:
        dependency = get_ledger_service(session)
        service = next(dependency)
        service.create("acc-1", "Alice", 5)
        with pytest.raises(StoreError):
            dependency.throw(StoreError("second write failed"))

    with Session(engine) as session:
        assert LedgerService(StateRepository(session)).exists("acc-1") is False


class _UnclosableResult:
    def __iter__(self):
        return iter(())

    def close(self) -> None:
        raise SQLAlchemyError("connection dropped")


def test_cursor_close_failure_is_wrapped() -> None:
    cursor = _ScanCursor(_UnclosableResult())

    with pytest.raises(StoreError) as excinfo:
        cursor.close()

    assert isinstance(excinfo.value.__cause__, SQLAlchemyError)
