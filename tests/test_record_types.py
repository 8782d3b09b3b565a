import pytest

from dnscontroller.domain.enums import (SUPPORTED_RECORD_TYPES, RecordType,
                                        is_supported_record_type)
from dnscontroller.domain.exceptions import UnsupportedRecordType, ValidationError


@pytest.mark.parametrize("rtype", ["A", "SRV"])
def test_supported_types_pass(rtype):
    is_supported_record_type(rtype)


@pytest.mark.parametrize("rtype", ["TEAPOT", "MX", "CNAME", "", "a", "srv"])
def test_unsupported_types_fail(rtype):
    """Lookup is case-sensitive, callers uppercase first"""
    with pytest.raises(UnsupportedRecordType) as exc_info:
        is_supported_record_type(rtype)

    assert exc_info.value.code == "UNSUPPORTED_RECORD_TYPE"
    assert isinstance(exc_info.value, ValidationError)


def test_registry_matches_enum():
    assert SUPPORTED_RECORD_TYPES == {"A", "SRV"}
    assert RecordType.SRV.value == "SRV"


def test_error_message_names_type():
    with pytest.raises(UnsupportedRecordType, match="TEAPOT"):
        is_supported_record_type("TEAPOT")
