# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Payload rejected by the backend schema validation (HTTP 422)."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context

    @classmethod
    def from_response(cls, response_data: dict, context: str = None) -> "ValidationException":
        """Build from a FastAPI ``{"detail": [{"loc": [...], "msg": ...}]}`` body."""
        detail = (response_data or {}).get("detail")
        errors = []
        field = None
        if isinstance(detail, list):
            for item in detail:
                if not isinstance(item, dict):
                    errors.append(str(item))
                    continue
                loc = [str(part) for part in item.get("loc", []) if part != "body"]
                if field is None and loc:
                    field = loc[-1]
                errors.append(f"{'.'.join(loc)}: {item.get('msg', '')}")
        elif isinstance(detail, str):
            errors.append(detail)
        return cls("Validation failed", field=field, errors=errors, context=context)


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context
