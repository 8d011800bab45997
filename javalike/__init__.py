"""
javalike — Java idioms for Python

JavaObject (identity / equality / hash surrogate), Optional (null-safety
container) and the exception taxonomy shared by both.
"""

import logging

from javalike.core.config import IdentityConfig, configure, get_config
from javalike.core.diagnostics import (
    get_diagnostics_logger,
    set_diagnostics_logger,
    use_diagnostics_logger,
)
from javalike.core.domain import UNDEFINED, JavaObject, Optional, boilerplate_equality_check
from javalike.core.exceptions import (
    DeserializationException,
    IllegalArgumentException,
    IllegalStateException,
    JavaLikeException,
    NoSuchElementException,
    NotImplementedException,
    RunTimeException,
    SubTypeMismatchException,
)
from javalike.core.serialization import Deserializable, Serializable

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Identity
    "JavaObject",
    "UNDEFINED",
    "boilerplate_equality_check",
    # Optional
    "Optional",
    # Serialization
    "Serializable",
    "Deserializable",
    # Config
    "IdentityConfig",
    "configure",
    "get_config",
    # Diagnostics
    "get_diagnostics_logger",
    "set_diagnostics_logger",
    "use_diagnostics_logger",
    # Exceptions
    "JavaLikeException",
    "IllegalArgumentException",
    "IllegalStateException",
    "RunTimeException",
    "DeserializationException",
    "SubTypeMismatchException",
    "NotImplementedException",
    "NoSuchElementException",
]
