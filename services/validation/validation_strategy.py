# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for record validation.

Provides a pluggable architecture for different validation rules without
modifying existing validation logic.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements specific validation rules for different record types.
    """

    @abstractmethod
    def missing_fields(self, record: Dict[str, Any]) -> List[str]:
        """
        Return the names of required fields that are absent or blank.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            List of field names (empty list if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """Check if record is valid."""
        return len(self.missing_fields(record)) == 0


class RequiredFieldsValidator(ValidationStrategy):
    """
    Validator for required fields.

    A field is missing when it is absent, None, or a whitespace-only string.
    """

    def __init__(self, required_fields: List[str]):
        """
        Initialize validator with required fields.

        Args:
            required_fields: Field names that must be present and non-empty
        """
        self.required_fields = list(required_fields)

    def missing_fields(self, record: Dict[str, Any]) -> List[str]:
        missing = []
        for field in self.required_fields:
            value = record.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(field)
        return missing

