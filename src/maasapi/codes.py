"""Error code constants for the maasapi error taxonomy.

Every exception raised by maasapi carries one of these codes so callers
can branch on the failure class without importing each exception type.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Failure classes surfaced to callers."""

    # Response could not be turned into typed objects
    DESERIALIZATION = "DESERIALIZATION"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"

    # Server refused or could not find what was asked for
    NO_MATCH = "NO_MATCH"
    PERMISSION = "PERMISSION"
    BAD_REQUEST = "BAD_REQUEST"
    CANNOT_COMPLETE = "CANNOT_COMPLETE"
    UNEXPECTED = "UNEXPECTED"

    # Local argument validation, raised before any request
    NOT_VALID = "NOT_VALID"
