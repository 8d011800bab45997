"""
Domain models and value objects.

Contains the identity base (JavaObject), the Optional container and its
wire envelope model.
"""

from javalike.core.domain.envelope import ENVELOPE_TYPE, OptionalEnvelope
from javalike.core.domain.identity import (
    SURROGATE_ID_BOUND,
    UNDEFINED,
    Identifiable,
    JavaObject,
    boilerplate_equality_check,
    next_surrogate_id,
)
from javalike.core.domain.optional import (
    NO_VALUE_MESSAGE,
    NULL_VALUE_MESSAGE,
    Optional,
)

__all__ = [
    # Identity
    "SURROGATE_ID_BOUND",
    "UNDEFINED",
    "Identifiable",
    "JavaObject",
    "boilerplate_equality_check",
    "next_surrogate_id",
    # Optional
    "Optional",
    "NULL_VALUE_MESSAGE",
    "NO_VALUE_MESSAGE",
    # Envelope
    "ENVELOPE_TYPE",
    "OptionalEnvelope",
]
