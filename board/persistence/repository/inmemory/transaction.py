"""In-memory transaction for testing."""

from board.domain.repository import Transaction

from .store import InMemoryStore


class InMemoryTransaction(Transaction):
    """Writes are applied immediately; commits are only counted."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def commit(self) -> None:
        self._store.commits += 1
