# -*- coding: utf-8 -*-
"""
Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ApiClient",
    "InscriptionApiService",
    "ValidationFactory",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ApiClient":
        from .api_client import ApiClient
        return ApiClient
    elif name == "InscriptionApiService":
        from .inscription_api_service import InscriptionApiService
        return InscriptionApiService
    elif name == "ValidationFactory":
        from .validation import ValidationFactory
        return ValidationFactory
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
