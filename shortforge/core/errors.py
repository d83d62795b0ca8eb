"""
Error taxonomy for blueprint generation.

Every error carries the HTTP status it maps to and a short code, so the
API layer can turn it into {"error": message} without knowing which
stage failed.
"""

from typing import Any, Dict


class ShortForgeError(Exception):
    """Base exception class for ShortForge errors"""
    status_code: int = 500
    code: str = "UNEXPECTED"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidRequestBody(ShortForgeError):
    """Inbound body is not a JSON object"""
    status_code = 400
    code = "INVALID_REQUEST_BODY"


class MissingField(ShortForgeError):
    """A required brief field is absent or empty"""
    status_code = 400
    code = "MISSING_FIELD"


class UpstreamError(ShortForgeError):
    """Transport failure or non-2xx reply from the completion API"""
    status_code = 502
    code = "UPSTREAM_ERROR"


class EmptyCompletion(ShortForgeError):
    status_code = 500
    code = "EMPTY_COMPLETION"


class MalformedCompletion(ShortForgeError):
    status_code = 500
    code = "MALFORMED_COMPLETION"


class SchemaViolation(ShortForgeError):
    """Completion parsed but does not match the plan schema"""
    status_code = 500
    code = "SCHEMA_VIOLATION"


class Unexpected(ShortForgeError):
    status_code = 500
    code = "UNEXPECTED"
