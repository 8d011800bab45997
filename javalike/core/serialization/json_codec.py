"""
JSON codec — текстовый формат для сериализации

parse(text) → структурированное значение
stringify(value) → текст

Вложенные Serializable кодируются через их to_json().
"""

import json
from typing import Any, Final

from javalike.core.serialization.capabilities import Serializable


# =============================================================================
# SUB TYPE TAGS
# =============================================================================

SUB_TYPE_BOOLEAN: Final[str] = "boolean"
SUB_TYPE_NUMBER: Final[str] = "number"
SUB_TYPE_STRING: Final[str] = "string"
SUB_TYPE_OBJECT: Final[str] = "object"


def type_tag_of(value: Any) -> str:
    """
    Тег runtime-типа значения для поля subType.

    bool → "boolean", int/float → "number", str → "string",
    всё остальное (включая None) → "object".

    Args:
        value: Значение внутри Optional

    Returns:
        Тег типа
    """
    # bool раньше int: bool является подклассом int
    if isinstance(value, bool):
        return SUB_TYPE_BOOLEAN
    if isinstance(value, (int, float)):
        return SUB_TYPE_NUMBER
    if isinstance(value, str):
        return SUB_TYPE_STRING
    return SUB_TYPE_OBJECT


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def to_structured(value: Any) -> Any:
    """Раскрытие Serializable (рекурсивно) в структурированное значение."""
    if isinstance(value, Serializable):
        return to_structured(value.to_json())
    if isinstance(value, dict):
        return {key: to_structured(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_structured(item) for item in value]
    return value


def _default(value: Any) -> Any:
    if isinstance(value, Serializable):
        return value.to_json()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def stringify(value: Any) -> str:
    """
    Кодирование значения в JSON-текст.

    Raises:
        TypeError: Если значение не кодируется
    """
    return json.dumps(value, default=_default, ensure_ascii=False, allow_nan=False)


def parse(text: str) -> Any:
    """
    Декодирование JSON-текста.

    Raises:
        json.JSONDecodeError: Если текст не является валидным JSON
    """
    return json.loads(text)
