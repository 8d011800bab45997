"""
Exceptions — Иерархия исключений библиотеки javalike

Таксономия ошибок, видимая вызывающему коду:
- IllegalArgumentException: аргумент нарушает предусловие
- IllegalStateException: состояние объекта запрещает операцию
- RunTimeException: ошибки десериализации (malformed input / subtype mismatch)
- NotImplementedException: зарезервировано для нереализованных операций
- NoSuchElementException: значение отсутствует (Optional.get / or_else_throw)

Каждый класс дополнительно наследует соответствующий builtin, чтобы код,
ловящий ValueError / RuntimeError / LookupError, продолжал работать.
"""

from typing import Any


# =============================================================================
# BASE
# =============================================================================


class JavaLikeException(Exception):
    """
    Базовое исключение библиотеки.

    Все исключения javalike наследуют этот класс, что позволяет отличать
    ошибки библиотеки от ошибок вызывающего кода.
    """

    pass


# =============================================================================
# ARGUMENT / STATE
# =============================================================================


class IllegalArgumentException(JavaLikeException, ValueError):
    """Переданный аргумент нарушает предусловие операции."""

    pass


class IllegalStateException(JavaLikeException, RuntimeError):
    """Операция вызвана в состоянии объекта, которое её запрещает."""

    pass


class NotImplementedException(JavaLikeException, NotImplementedError):
    """Операция не реализована в этой библиотеке."""

    pass


class NoSuchElementException(JavaLikeException, LookupError):
    """Запрошено значение, которого нет (пустой Optional)."""

    pass


# =============================================================================
# RUNTIME (DESERIALIZATION)
# =============================================================================


class RunTimeException(JavaLikeException, RuntimeError):
    """
    Runtime-ошибка библиотеки.

    Используется для сбоев десериализации. Конкретный вид сбоя
    различается подклассами.
    """

    pass


class DeserializationException(RunTimeException):
    """
    Входные данные не являются валидным сериализованным представлением.

    Attributes:
        payload: Исходный текст или mapping, который не удалось разобрать
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class SubTypeMismatchException(RunTimeException):
    """
    subType сериализованных данных не совпадает с ожидаемым.

    Attributes:
        actual: subType из payload
        expected: subType, ожидаемый вызывающим кодом
    """

    def __init__(self, actual: str, expected: str):
        super().__init__(f"Cannot deserialize Optional of type {actual} to {expected}")
        self.actual = actual
        self.expected = expected
