"""
Capability-контракты сериализации.
"""

from abc import ABC, abstractmethod
from typing import Any


class Serializable(ABC):
    """
    Объект, который умеет представить себя в структурированном виде.

    to_json() возвращает значение, кодируемое json_codec.stringify
    (dict / list / str / int / float / bool / None).
    """

    __slots__ = ()

    @abstractmethod
    def to_json(self) -> Any:
        """Структурированное представление объекта."""


class Deserializable(ABC):
    """
    Tagging-контракт: класс восстанавливается из структурированного вида.

    Реализация должна предоставить classmethod from_json(data, ...),
    сигнатура которого определяется самим классом и не проверяется.
    """

    __slots__ = ()
