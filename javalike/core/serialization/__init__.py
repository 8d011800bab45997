"""
Serialization capabilities.

Serializable / Deserializable: контракты, потребляемые Optional.to_json / from_json.
json_codec: текстовый формат (parse / stringify) поверх stdlib json.
"""

from javalike.core.serialization.capabilities import Deserializable, Serializable
from javalike.core.serialization.json_codec import (
    SUB_TYPE_BOOLEAN,
    SUB_TYPE_NUMBER,
    SUB_TYPE_OBJECT,
    SUB_TYPE_STRING,
    parse,
    stringify,
    to_structured,
    type_tag_of,
)

__all__ = [
    # Capabilities
    "Serializable",
    "Deserializable",
    # Codec
    "parse",
    "stringify",
    "to_structured",
    "type_tag_of",
    # Sub type tags
    "SUB_TYPE_BOOLEAN",
    "SUB_TYPE_NUMBER",
    "SUB_TYPE_OBJECT",
    "SUB_TYPE_STRING",
]
