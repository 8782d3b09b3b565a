"""Domain layer - records, answers, details and their validation rules"""

from .enums import RecordType, is_supported_record_type
from .records import Record
from .answers import Answer
from .details import Detail

__all__ = [
    "RecordType",
    "is_supported_record_type",
    "Record",
    "Answer",
    "Detail",
]
