"""
Error taxonomy for the API. Each error knows the HTTP status it maps to.
"""
from typing import Optional


class ApiError(Exception):
    """Base class for errors rendered as {"error": ..., "details": ...} responses."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self, include_details: bool = True) -> dict:
        body = {"error": self.message}
        if include_details and self.details:
            body["details"] = self.details
        return body


class ValidationError(ApiError):
    """Required field missing or request body malformed."""

    status_code = 400


class NotFoundError(ApiError):
    """Zero rows affected by an update or delete."""

    status_code = 404


class StoreError(ApiError):
    """Connectivity or query failure in the database."""

    status_code = 500
