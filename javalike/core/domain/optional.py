"""
Optional — Null-safety контейнер

Эмуляция java.util.Optional:
- два состояния: Present(value) и Empty (None), без переходов после создания
- создание только через фабрики of / of_nullable / require_non_null / empty
- map / flat_map / filter всегда возвращают новый экземпляр (filter может вернуть self)
- JSON round-trip: to_json() / from_json(data, expected_sub_type)

Неправильное использование (прямой вызов конструктора, UNDEFINED) сообщается
через diagnostics (WARNING) и не прерывает выполнение. Нарушение контракта
(None в non-nullable фабрике, битые данные при десериализации) приводит к исключению.
"""

import json
import logging
import typing
from dataclasses import dataclass
from typing import Any, Callable, Final, Generic, Mapping, NoReturn, TypeVar, Union

from pydantic import ValidationError as ModelValidationError

from javalike.core import diagnostics
from javalike.core.contracts import get_optional_envelope_validator
from javalike.core.domain.envelope import OptionalEnvelope
from javalike.core.domain.identity import (
    SURROGATE_ID_BOUND,
    UNDEFINED,
    JavaObject,
    boilerplate_equality_check,
)
from javalike.core.exceptions import (
    DeserializationException,
    IllegalArgumentException,
    NoSuchElementException,
    SubTypeMismatchException,
)
from javalike.core.serialization import (
    Deserializable,
    Serializable,
    parse,
    stringify,
    to_structured,
    type_tag_of,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# MESSAGES
# =============================================================================

NULL_VALUE_MESSAGE: Final[str] = "Value cannot be null."
NO_VALUE_MESSAGE: Final[str] = "No value present"
UNDEFINED_VALUE_WARNING: Final[str] = "undefined value passed to Optional, treating it as null"
DIRECT_CONSTRUCTION_WARNING: Final[str] = (
    "Optional constructed directly; use Optional.of(value) or "
    "Optional.of_nullable(value) instead"
)


# =============================================================================
# INTERNAL CONSTRUCTION ARGS
# =============================================================================


@dataclass(frozen=True)
class _InternalArgs:
    """Аргументы внутреннего пути создания (только для фабрик)."""

    nullable: bool
    message: typing.Optional[str] = None


_NULLABLE: Final[_InternalArgs] = _InternalArgs(nullable=True)
_NON_NULLABLE: Final[_InternalArgs] = _InternalArgs(nullable=False)


# =============================================================================
# OPTIONAL
# =============================================================================


class Optional(JavaObject, Serializable, Deserializable, Generic[T]):
    """
    Контейнер, содержащий не более одного значения.

    Immutable: после создания слот значения не меняется, любые попытки
    присвоить атрибут вызывают AttributeError.

    Equality: алгоритм JavaObject + сравнение содержимого (is, либо
    одинаковый type_tag_of и ==).
    Composite-значения, равные структурно, но разные по ссылке,
    равными не гарантируются.
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value: Any = UNDEFINED,
        *,
        _internal: typing.Optional[_InternalArgs] = None,
    ) -> None:
        """
        Прямой вызов допустим, но не рекомендуется (WARNING в diagnostics).

        Args:
            value: Значение (UNDEFINED нормализуется в None)
            _internal: Аргументы фабрики (nullable, message)

        Raises:
            IllegalArgumentException: value is None и nullable не запрошен
        """
        super().__init__()
        if value is UNDEFINED:
            diagnostics.warn(UNDEFINED_VALUE_WARNING)
            value = None
        if _internal is None:
            diagnostics.warn(DIRECT_CONSTRUCTION_WARNING)
            _internal = _NON_NULLABLE
        if value is None and not _internal.nullable:
            raise IllegalArgumentException(_internal.message or NULL_VALUE_MESSAGE)
        object.__setattr__(self, "_value", value)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """
        Optional с обязательным значением.

        Raises:
            IllegalArgumentException: Если value is None
        """
        return cls(value, _internal=_NON_NULLABLE)

    @classmethod
    def of_nullable(cls, value: typing.Optional[T]) -> "Optional[T]":
        """Optional, пустой если value is None. Никогда не падает."""
        return cls(value, _internal=_NULLABLE)

    @classmethod
    def require_non_null(
        cls, value: typing.Optional[T], message: typing.Optional[str] = None
    ) -> "Optional[T]":
        """
        То же, что of(), но с собственным сообщением об ошибке.

        Args:
            value: Значение
            message: Сообщение IllegalArgumentException (default NULL_VALUE_MESSAGE)

        Raises:
            IllegalArgumentException: Если value is None
        """
        return cls(value, _internal=_InternalArgs(nullable=False, message=message))

    @classmethod
    def empty(cls) -> "Optional[Any]":
        """Пустой Optional."""
        return cls(None, _internal=_NULLABLE)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        """
        Значение, если оно есть.

        Raises:
            NoSuchElementException: Если Optional пуст
        """
        if self._value is None:
            raise NoSuchElementException(NO_VALUE_MESSAGE)
        return self._value

    def or_else(self, other: T) -> T:
        return self._value if self._value is not None else other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """
        Значение или результат supplier().

        supplier вызывается только для пустого Optional.
        """
        if self._value is not None:
            return self._value
        return supplier()

    def or_else_throw(
        self, error_supplier: typing.Optional[Callable[[], BaseException]] = None
    ) -> T:
        """
        Значение или исключение.

        Args:
            error_supplier: Фабрика исключения; вызывается ровно один раз
                для пустого Optional, результат выбрасывается без обёртки

        Raises:
            BaseException: Результат error_supplier()
            NoSuchElementException: Если Optional пуст и error_supplier не передан
        """
        if self._value is not None:
            return self._value
        if error_supplier is not None:
            raise error_supplier()
        raise NoSuchElementException(NO_VALUE_MESSAGE)

    def if_present(self, consumer: Callable[[T], Any]) -> None:
        if self._value is not None:
            consumer(self._value)

    def if_present_or_else(
        self, consumer: Callable[[T], Any], other: Callable[[], Any]
    ) -> None:
        """Вызывается ровно одна ветка: consumer(value) или other()."""
        if self._value is not None:
            consumer(self._value)
        else:
            other()

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def map(self, mapper: Callable[[T], U]) -> "Optional[U]":
        """
        Преобразование значения.

        Для пустого Optional mapper не вызывается. Результат mapper
        не разворачивается, даже если это Optional (для этого есть flat_map).
        None из mapper даёт пустой Optional.
        """
        if self._value is None:
            return Optional.empty()
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[T], "Optional[Any]"]) -> "Optional[U]":
        """
        Преобразование значения в Optional.

        Если Optional, возвращённый mapper, сам содержит Optional,
        разворачивается ровно один дополнительный слой. Вложенность
        глубже двух уровней не поддерживается.

        Raises:
            IllegalArgumentException: Если mapper вернул не Optional
        """
        if self._value is None:
            return Optional.empty()
        first_layer = mapper(self._value)
        if not isinstance(first_layer, Optional):
            raise IllegalArgumentException(
                f"flat_map mapper must return Optional, got {type(first_layer).__name__}"
            )
        if isinstance(first_layer._value, Optional):
            return first_layer._value
        return first_layer

    def filter(self, predicate: Callable[[T], bool]) -> "Optional[T]":
        """
        Self, если значение есть и удовлетворяет predicate, иначе пустой Optional.

        Возвращается тот же экземпляр, а не копия.
        """
        if self._value is None or not predicate(self._value):
            return Optional.empty()
        return self

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def hash_code(self) -> int:
        """
        Hash surrogate, производный от содержимого.

        Равные значения дают равный hash_code, поэтому pre-filter
        в boilerplate_equality_check не отсекает Optional с равным содержимым.
        Для unhashable значений используется identity (id) значения.
        surrogate_id при этом остаётся случайным.
        """
        if self._value is None:
            return 0
        try:
            return hash(self._value) & SURROGATE_ID_BOUND
        except TypeError:
            return id(self._value) & SURROGATE_ID_BOUND

    def equals(self, other: Any) -> bool:
        return boilerplate_equality_check(self, other, _same_value)

    def to_string(self) -> str:
        shown = "null" if self._value is None else self._value
        return f"Optional[{shown}, type={type_tag_of(self._value)}, hashcode={self.hash_code()}]"

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"Optional is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Optional is immutable, cannot delete {name!r}")

    def __repr__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_json(self) -> typing.Dict[str, Any]:
        """
        Запись {"type": "Optional", "subType": ..., "value": ...}.

        Вложенные Serializable значения раскрываются через их to_json().
        """
        envelope = OptionalEnvelope(
            sub_type=type_tag_of(self._value),
            value=to_structured(self._value),
        )
        return envelope.to_record()

    def to_json_string(self) -> str:
        return stringify(self.to_json())

    @classmethod
    def from_json(
        cls, data: Union[str, bytes, Mapping[str, Any]], expected_sub_type: str
    ) -> "Optional[Any]":
        """
        Восстановление Optional из JSON-текста или записи to_json().

        Проверки (до создания экземпляра):
        1. Текст парсится, результат является объектом
        2. Контракт optional_envelope.json (type == "Optional", subType, value)
        3. Тег типа value (если не None) совпадает с subType записи
        4. subType совпадает с expected_sub_type

        Args:
            data: JSON-текст или уже разобранная запись
            expected_sub_type: Ожидаемый subType (например "number")

        Returns:
            Optional, созданный через of_nullable (пустой допустим)

        Raises:
            DeserializationException: Битые или неполные данные (шаги 1-3)
            SubTypeMismatchException: subType не совпадает (шаг 4)
        """
        envelope = _parse_envelope(data)
        if envelope.sub_type != expected_sub_type:
            raise SubTypeMismatchException(envelope.sub_type, expected_sub_type)
        return cls.of_nullable(envelope.value)


# =============================================================================
# HELPERS
# =============================================================================


def _same_value(o1: Optional[Any], o2: Optional[Any]) -> bool:
    if o1._value is o2._value:
        return True
    # 1 == True в Python, но number и boolean различаются по subType
    if type_tag_of(o1._value) != type_tag_of(o2._value):
        return False
    return bool(o1._value == o2._value)


def _malformed(data: Any, reason: str) -> DeserializationException:
    return DeserializationException(
        f"Cannot deserialize Optional from: `{data}` ({reason})", payload=data
    )


def _parse_envelope(data: Union[str, bytes, Mapping[str, Any]]) -> OptionalEnvelope:
    payload: Any = data
    if isinstance(data, (str, bytes, bytearray)):
        try:
            payload = parse(data)
        except json.JSONDecodeError as e:
            raise _malformed(data, f"invalid JSON: {e.msg}") from e
        except UnicodeDecodeError as e:
            raise _malformed(data, "invalid text encoding") from e

    if not isinstance(payload, Mapping):
        raise _malformed(data, "expected a JSON object")
    payload = dict(payload)

    violations = get_optional_envelope_validator().describe_errors(payload)
    if violations:
        raise _malformed(data, "; ".join(violations))

    try:
        envelope = OptionalEnvelope.model_validate(payload)
    except ModelValidationError as e:
        raise _malformed(data, str(e)) from e

    if envelope.value is not None and type_tag_of(envelope.value) != envelope.sub_type:
        raise _malformed(
            data,
            f"value of type {type_tag_of(envelope.value)} does not match subType {envelope.sub_type}",
        )
    logger.debug("parsed Optional envelope subType=%s", envelope.sub_type)
    return envelope
