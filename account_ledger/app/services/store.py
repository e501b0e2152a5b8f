"""Key-value store contract consumed by the ledger service."""

from __future__ import annotations

from typing import Iterator, Optional, Protocol


class StateIterator(Protocol):
    """Range scan cursor yielding ``(key, value)`` pairs in store order."""

    def __iter__(self) -> Iterator[tuple[str, bytes]]:
        ...

    def close(self) -> None:
        """Release the cursor; safe to call more than once."""
        ...


class KeyValueStore(Protocol):
    """Interface for the durable world state.

    ``get`` returns ``None`` for a missing key, which is distinct from an
    empty byte value. Every method raises ``StoreError`` on a storage failure.
    """

    def get(self, key: str) -> Optional[bytes]:
        ...

    def put(self, key: str, value: bytes) -> None:
        ...

    def delete(self, key: str) -> None:
        ...

    def scan(self, start_key: str, end_key: str) -> StateIterator:
        """Iterate keys in ``[start_key, end_key)``; empty bounds are open."""
        ...
