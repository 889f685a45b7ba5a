"""Domain-specific exceptions tagged with the failure class the API reports"""

from enum import Enum


class ErrorKind(Enum):
    """Failure classification mapped to an HTTP status by the API layer"""

    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL = 500

    @property
    def status_code(self) -> int:
        return self.value


class ReceiptServiceError(Exception):
    """Base exception for the receipt service"""

    default_message = "Internal server error"
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidReceiptError(ReceiptServiceError):
    """Submitted receipt could not be decoded"""

    default_message = "The receipt is invalid"
    kind = ErrorKind.BAD_REQUEST


class ReceiptNotFoundError(ReceiptServiceError):
    """No score stored for the requested identifier"""

    default_message = "No receipt found for that id"
    kind = ErrorKind.NOT_FOUND


class InternalServiceError(ReceiptServiceError):
    """Unexpected failure; details stay in the server logs"""

    pass
