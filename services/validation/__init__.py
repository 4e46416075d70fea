# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import ValidationStrategy, RequiredFieldsValidator
from .validation_factory import ValidationFactory, get_validation_factory

__all__ = ['ValidationStrategy', 'RequiredFieldsValidator', 'ValidationFactory', 'get_validation_factory']
