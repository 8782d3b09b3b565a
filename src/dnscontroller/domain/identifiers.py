from typing import Any
from uuid import UUID

from dnscontroller.domain.exceptions import MalformedIdentifier

NIL_UUID = UUID(int=0)


def is_nil(value: UUID) -> bool:
    return value == NIL_UUID


def parse_identifier(column: str, value: Any) -> UUID:
    """Parse a persisted string identifier, failing the whole hydration when malformed"""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError) as e:
        raise MalformedIdentifier(column, value) from e
