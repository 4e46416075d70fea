# -*- coding: utf-8 -*-
"""
Validation Factory - Creates appropriate validators for enrollment records.

Provides a central point for creating and managing validation strategies.
"""

from typing import Dict, Optional, List

from models.person import REQUIRED_PERSON_FIELDS
from models.student import STUDENT_FIELDS
from .validation_strategy import ValidationStrategy, RequiredFieldsValidator


class ValidationFactory:
    """
    Registry of validation strategies keyed by record type.

    Built-in record types:
    - ``eleve``: every student field, class and school year included
    - ``personne``: required subset of a parent or guardian
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in validators."""
        self.register_validator('eleve', RequiredFieldsValidator(list(STUDENT_FIELDS)))
        self.register_validator('personne', RequiredFieldsValidator(list(REQUIRED_PERSON_FIELDS)))

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a specific record type.

        Args:
            record_type: Type identifier (e.g., 'eleve', 'personne')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        """Get a registered validator by record type."""
        return self._validators.get(record_type.lower())

    def missing_fields(self, record: Dict, record_type: str) -> List[str]:
        """
        Validate a record using the appropriate validator.

        Raises:
            KeyError: if no validator is registered for record_type
        """
        validator = self.get_validator(record_type)
        if not validator:
            raise KeyError(f"No validator registered for record type: {record_type}")
        return validator.missing_fields(record)

    def is_valid(self, record: Dict, record_type: str) -> bool:
        return len(self.missing_fields(record, record_type)) == 0

    def get_registered_types(self) -> List[str]:
        return list(self._validators.keys())


_default_factory: Optional[ValidationFactory] = None


def get_validation_factory() -> ValidationFactory:
    """Shared factory instance."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ValidationFactory()
    return _default_factory
