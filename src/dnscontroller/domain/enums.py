from enum import Enum

from dnscontroller.domain.exceptions import UnsupportedRecordType


class RecordType(str, Enum):
    """Record types the controller can store"""
    A = "A"
    SRV = "SRV"


SUPPORTED_RECORD_TYPES = frozenset(t.value for t in RecordType)


def is_supported_record_type(rtype: str) -> None:
    """
    Check a record type against the registry.

    The comparison is case-sensitive: callers pass the uppercased form.

    Raises:
        UnsupportedRecordType: if the type is not registered
    """
    if rtype not in SUPPORTED_RECORD_TYPES:
        raise UnsupportedRecordType(rtype)
