"""Domain errors for records, answers and details"""
from typing import Optional


class DNSControllerError(Exception):
    """Base class for all dnscontroller errors"""
    pass


# ==================== VALIDATION ====================

class ValidationError(DNSControllerError):
    """Raised before any store access when an entity is not well formed"""
    code = "INVALID"
    message = "invalid entity"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidRecord(ValidationError):
    code = "INVALID_RECORD"
    message = "invalid record format"


class NoRecordName(InvalidRecord):
    code = "NO_RECORD_NAME"
    message = "no record name"


class NoRecordType(InvalidRecord):
    code = "NO_RECORD_TYPE"
    message = "no record type"


class UnsupportedRecordType(ValidationError):
    code = "UNSUPPORTED_RECORD_TYPE"
    message = "unsupported record type"

    def __init__(self, rtype: Optional[str] = None):
        self.rtype = rtype
        if rtype:
            super().__init__(f"{self.message}: {rtype}")
        else:
            super().__init__()


class NoAnswerTarget(ValidationError):
    code = "NO_ANSWER_TARGET"
    message = "no answer target"


class NoAnswerType(ValidationError):
    code = "NO_ANSWER_TYPE"
    message = "no answer type"


class NoAnswerDetail(ValidationError):
    code = "NO_ANSWER_DETAIL"
    message = "no answer_details for answer provided"


class TooManyAnswerDetails(ValidationError):
    code = "TOO_MANY_ANSWER_DETAILS"
    message = "an answer has at most one answer_details"


class NoAnswerDetailID(ValidationError):
    code = "NO_ANSWER_DETAIL_ID"
    message = "no uuid set"


class NoAnswerDetailAnswerID(ValidationError):
    code = "NO_ANSWER_DETAIL_ANSWER_ID"
    message = "no answer_id set"


# ==================== PARSING ====================

class InvalidAnswers(DNSControllerError):
    """Raised when an answers payload cannot be decoded"""
    code = "INVALID_ANSWERS"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid answers format: {reason}")


# ==================== STORE ====================

class StoreError(DNSControllerError):
    """Failure reported by the persistence layer"""
    pass


class EntityNotFound(StoreError):
    """Raised when a lookup matches no row"""
    pass


class UniqueConstraintViolation(StoreError):
    """Raised when an insert collides with an existing natural key"""

    def __init__(self, table: str, values: dict):
        self.table = table
        self.values = values
        super().__init__(f"{table} already has a row for {values}")


class MalformedIdentifier(StoreError):
    """Raised when a persisted identifier is not a valid UUID"""

    def __init__(self, column: str, value: object):
        self.column = column
        self.value = value
        super().__init__(f"malformed identifier in {column}: {value!r}")
