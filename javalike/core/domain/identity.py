"""
JavaObject — Базовый identity-объект

Эмуляция java.lang.Object:
- surrogate id (случайный 31-битный int), назначается один раз при создании
- equality по алгоритму boilerplate_equality_check
- строковое представление "<type_tag>@<hex>"

Surrogate id НЕ является адресом в памяти и не гарантирует уникальность.
Это грубый pre-filter для equality, а не идентификатор.
"""

import random
import threading
from typing import Any, Callable, ClassVar, Dict, Final, Optional, Protocol, TypeVar, runtime_checkable

from javalike.core.config import config_generation, get_config


# =============================================================================
# SURROGATE ID SOURCE
# =============================================================================

# Верхняя граница (exclusive) для surrogate id: [0, 2^31 - 1)
SURROGATE_ID_BOUND: Final[int] = 0x7FFFFFFF

_rng_lock = threading.Lock()
_rng: Optional[random.Random] = None
_rng_generation = -1

# Отдельный генератор для legacy-суффикса to_string: не сдвигает
# последовательность surrogate id при заданном seed
_repr_rng_lock = threading.Lock()
_repr_rng = random.Random()


def _generator() -> random.Random:
    # Вызывается только под _rng_lock
    global _rng, _rng_generation
    generation = config_generation()
    if _rng is None or _rng_generation != generation:
        _rng = random.Random(get_config().seed)
        _rng_generation = generation
    return _rng


def next_surrogate_id() -> int:
    """
    Равномерная выборка surrogate id из [0, 2^31 - 1).

    Процессный генератор создаётся лениво и пересоздаётся после configure().
    Потокобезопасно.

    Returns:
        Случайный неотрицательный int < SURROGATE_ID_BOUND
    """
    with _rng_lock:
        return _generator().randrange(SURROGATE_ID_BOUND)


def _random_hex_fraction() -> str:
    with _repr_rng_lock:
        return f"0.{_repr_rng.getrandbits(52):x}"


# =============================================================================
# UNDEFINED SENTINEL
# =============================================================================


class _Undefined:
    """
    Sentinel "значение не задано".

    Отличается от None (empty marker). На границе Optional нормализуется в None.
    """

    _instance: ClassVar[Optional["_Undefined"]] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final[_Undefined] = _Undefined()


# =============================================================================
# CAPABILITY
# =============================================================================


@runtime_checkable
class Identifiable(Protocol):
    """Capability identity-объекта: hash_code() и type_name()."""

    def hash_code(self) -> int: ...

    def type_name(self) -> str: ...


# =============================================================================
# EQUALITY ALGORITHM
# =============================================================================

T = TypeVar("T", bound="JavaObject")


def boilerplate_equality_check(
    obj1: "JavaObject",
    obj2: Any,
    callback: Optional[Callable[[T, T], bool]] = None,
) -> bool:
    """
    Базовый алгоритм equality для JavaObject и подклассов.

    Порядок шагов фиксирован, каждый следующий шаг полагается на предыдущие:
    1. Один и тот же экземпляр → True
    2. obj2 отсутствует (None / UNDEFINED) → False
    3. obj2 не Identifiable или type_name() отличается → False
    4. hash_code() отличается → False
    5. callback(obj1, obj2) если передан, иначе True

    Args:
        obj1: Объект, для которого вызван equals
        obj2: Объект для сравнения
        callback: Сравнение payload (подклассы), вызывается после шагов 1-4

    Returns:
        True если объекты "равны"
    """
    if obj1 is obj2:
        return True
    if obj2 is None or obj2 is UNDEFINED:
        return False
    if not isinstance(obj2, Identifiable) or obj2.type_name() != obj1.type_name():
        return False
    if obj1.hash_code() != obj2.hash_code():
        return False
    return callback(obj1, obj2) if callback is not None else True


# =============================================================================
# JAVA OBJECT
# =============================================================================

_READ_ONLY_SLOTS: Final[frozenset] = frozenset({"_surrogate_id", "_repr_suffix"})


class JavaObject:
    """
    Базовый класс identity-объектов.

    Подклассы наследуют surrogate id и алгоритм equality; для сравнения
    содержимого подкласс переопределяет equals() и передаёт callback
    в boilerplate_equality_check.

    type_tag: явный тег типа, по умолчанию равен имени класса.
    Подкласс может задать его в теле класса.
    """

    type_tag: ClassVar[str] = "JavaObject"

    __slots__ = ("_surrogate_id", "_repr_suffix")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "type_tag" not in cls.__dict__:
            cls.type_tag = cls.__name__

    def __init__(self) -> None:
        surrogate_id = next_surrogate_id()
        object.__setattr__(self, "_surrogate_id", surrogate_id)
        object.__setattr__(self, "_repr_suffix", format(surrogate_id, "x"))

    @property
    def surrogate_id(self) -> int:
        """Surrogate id, назначенный при создании (immutable)."""
        return self._surrogate_id

    def type_name(self) -> str:
        return self.type_tag

    def hash_code(self) -> int:
        """
        Hash surrogate объекта.

        В Java hashCode связан с адресом объекта; здесь это случайное
        число, полезное только как быстрый pre-filter для equality.

        Returns:
            surrogate_id (стабилен весь lifetime экземпляра)
        """
        return self._surrogate_id

    def equals(self, other: Any) -> bool:
        """
        Equality по умолчанию (type_tag + surrogate id).

        Если этот метод не переопределён, два разных экземпляра почти
        никогда не равны. Подклассы с payload должны переопределять equals.
        """
        return boilerplate_equality_check(self, other)

    def to_string(self) -> str:
        """
        Строковое представление "<type_tag>@<hex>".

        Суффикс фиксируется при создании. В legacy-режиме
        (IdentityConfig.legacy_random_repr) суффикс случайный на каждый вызов.
        """
        if get_config().legacy_random_repr:
            return f"{self.type_tag}@{_random_hex_fraction()}"
        return f"{self.type_tag}@{self._repr_suffix}"

    def __getstate__(self) -> Dict[str, Any]:
        """
        Состояние для copy / pickle: __dict__ (если есть) и все слоты по MRO.

        surrogate_id сохраняется, поэтому восстановленный объект равен исходному.
        """
        state = dict(getattr(self, "__dict__", {}))
        for klass in type(self).__mro__:
            for name in klass.__dict__.get("__slots__", ()):
                if name in ("__dict__", "__weakref__") or not hasattr(self, name):
                    continue
                state[name] = getattr(self, name)
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        # Обход __setattr__: read-only слоты заполняются только здесь и в __init__
        for name, value in state.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY_SLOTS:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        return not self.equals(other)

    def __hash__(self) -> int:
        return self.hash_code()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{self.type_tag} id={self._surrogate_id} at {hex(id(self))}>"
