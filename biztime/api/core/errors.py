"""
Error type shared by all routes.

Services raise BizTimeError; a single exception handler in main.py turns it
into a response whose body is the bare message string.
"""

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"


STATUS_CODES = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
}


class BizTimeError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


def bad_request(message: str) -> BizTimeError:
    return BizTimeError(ErrorKind.BAD_REQUEST, message)


def not_found(message: str) -> BizTimeError:
    return BizTimeError(ErrorKind.NOT_FOUND, message)


def error_envelope(message: str, status_code: int) -> dict:
    """Body used for unmatched routes and unexpected failures."""
    return {
        "error": {"message": message, "status": status_code},
        "message": message,
    }
