"""
API error taxonomy.

Every error raised out of a handler carries an HTTP status and a stable,
machine-readable `code`. `main.py` turns them into `{"error", "code"}` bodies.
"""

from __future__ import annotations

from typing import Any


class ApiError(Exception):
    status_code = 500
    code = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, "code": self.code}


class ValidationError(ApiError):
    status_code = 400
    code = "validation_error"


class NotFoundError(ApiError):
    status_code = 404
    code = "not_found"


class InternalError(ApiError):
    status_code = 500
    code = "internal_error"


# Raised at startup only; never mapped to an HTTP response.
class DatabaseConnectionError(RuntimeError):
    pass
