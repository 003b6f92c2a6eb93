"""Validation warnings for structured data."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SchemaValidator(Protocol):
    """Structured data that can report missing recommended fields."""

    def validate(self) -> list[str]:
        """Return warning messages for missing recommended or required fields."""
        ...


def log_validation_warnings(validator: SchemaValidator) -> list[str]:
    """Log every validation warning of a structured data object.

    Args:
        validator: Object to validate

    Returns:
        The warnings that were logged
    """
    warnings = validator.validate()
    for warning in warnings:
        logger.warning(f"schema warning: {warning}")
    return warnings
