# tenant_service/tenants/identifiers.py
"""
Conversion boundary between domain identifiers and storage identifiers.

The rest of the package works with `uuid.UUID`. Store implementations call
the functions below when binding statement parameters and when reading
identifiers back from result rows, so no storage-specific identifier type
leaks past the store.
"""
from typing import Union
from uuid import UUID

from .errors import InvalidIdentifierError

IdentifierLike = Union[UUID, str, bytes]


def to_uuid(value: IdentifierLike) -> UUID:
    """
    Interpret a canonical string, a raw 16-byte value or a UUID as a UUID.

    Raises:
        InvalidIdentifierError: If the value is not a valid identifier.
    """
    if isinstance(value, UUID):
        return value
    try:
        if isinstance(value, (bytes, bytearray)):
            return UUID(bytes=bytes(value))
        if isinstance(value, str):
            return UUID(value)
    except ValueError as e:
        raise InvalidIdentifierError(value) from e
    raise InvalidIdentifierError(value)


def to_cassandra_uuid(value: IdentifierLike) -> UUID:
    """Map an identifier to the value bound to a Cassandra `uuid` column."""
    return UUID(bytes=to_uuid(value).bytes)


def from_cassandra_uuid(value: UUID) -> UUID:
    """Map a Cassandra `uuid` column value back to a domain identifier."""
    return UUID(bytes=value.bytes)


def to_sqlite_text(value: IdentifierLike) -> str:
    """Map an identifier to its canonical textual form for TEXT key columns."""
    return str(to_uuid(value))


def from_sqlite_text(value: str) -> UUID:
    """Map a TEXT key column value back to a domain identifier."""
    return to_uuid(value)
