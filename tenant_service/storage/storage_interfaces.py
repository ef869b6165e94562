# tenant_service/storage/storage_interfaces.py
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator


class AbstractSessionProvider(ABC):
    """
    Abstract base class for database session providers.

    A session is acquired for the duration of a single store operation and
    must be released afterwards, whatever the outcome of the operation.
    """

    @abstractmethod
    def create_session(self) -> Any:
        """
        Open a new database session.

        Raises:
            Exception: Driver errors are propagated unchanged.
        """
        pass

    @abstractmethod
    def close_session(self, session: Any) -> None:
        """Release a session previously returned by create_session."""
        pass

    def shutdown(self) -> None:
        """Release provider-wide resources (clusters, pools). No-op by default."""
        pass

    @contextmanager
    def session(self) -> Iterator[Any]:
        """Scoped session: closed on every exit path, including errors."""
        db_session = self.create_session()
        try:
            yield db_session
        finally:
            self.close_session(db_session)
