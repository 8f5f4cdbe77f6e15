from typing import Any


class SutilError(Exception):
    """Base library error with consistent schema."""

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "code": self.code,
                "details": self.details,
            }
        }


class InvalidLimitError(SutilError, ValueError):
    def __init__(self, message: str = "invalid limit value", details: dict[str, Any] | None = None):
        super().__init__(message, code="INVALID_LIMIT", details=details)


class InvalidSequenceError(SutilError, ValueError):
    def __init__(self, message: str = "invalid slice"):
        super().__init__(message, code="INVALID_SEQUENCE")


class InvalidPageError(SutilError, ValueError):
    def __init__(self, message: str = "invalid page", details: dict[str, Any] | None = None):
        super().__init__(message, code="INVALID_PAGE", details=details)
