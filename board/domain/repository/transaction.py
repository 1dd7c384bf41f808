"""Transaction interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The unit of work shared by every repository of one request scope.

    Write use cases commit before they return, so a caller is only told
    about a write once it is durable.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write of the current scope durable.

        Raises:
            Exception: Whatever the store raises when the commit fails; the
                scope then rolls back
        """
        pass
