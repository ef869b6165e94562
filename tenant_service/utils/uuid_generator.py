# tenant_service/utils/uuid_generator.py
from abc import ABC, abstractmethod
from uuid import UUID, uuid4


class AbstractUUIDGenerator(ABC):
    """Source of new unique identifiers for tenants and applications."""

    @abstractmethod
    def generate_random_uuid(self) -> UUID:
        """
        Generate a new random identifier.

        Raises:
            Exception: Implementations propagate their own failures unchanged.
        """
        pass


class RandomUUIDGenerator(AbstractUUIDGenerator):
    """Generates version 4 (random) UUIDs."""

    def generate_random_uuid(self) -> UUID:
        return uuid4()
