"""
Contract Validation Module

Валидация JSON контрактов библиотеки (wire-формат Optional).
"""

from .validators import (
    ContractValidator,
    OptionalEnvelopeValidator,
    SchemaLoader,
    get_optional_envelope_validator,
    validate_optional_envelope,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "OptionalEnvelopeValidator",
    # Functions
    "get_optional_envelope_validator",
    "validate_optional_envelope",
]
