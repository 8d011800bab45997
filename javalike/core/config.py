"""
Config — Конфигурация identity-слоя

Immutable конфигурация (frozen dataclass) для генератора surrogate id
и режима строкового представления JavaObject.

Значения по умолчанию можно задать через окружение (читается один раз
при первом обращении к get_config):
- JAVALIKE_IDENTITY_SEED: seed генератора surrogate id (int)
- JAVALIKE_LEGACY_RANDOM_REPR: "1" / "true" / "yes" включает legacy-режим to_string
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import Final, Optional

from javalike.core.exceptions import IllegalArgumentException

logger = logging.getLogger(__name__)


# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_IDENTITY_SEED: Final[str] = "JAVALIKE_IDENTITY_SEED"
ENV_LEGACY_RANDOM_REPR: Final[str] = "JAVALIKE_LEGACY_RANDOM_REPR"

_TRUTHY: Final[frozenset] = frozenset({"1", "true", "yes", "on"})


# =============================================================================
# IDENTITY CONFIG
# =============================================================================


@dataclass(frozen=True)
class IdentityConfig:
    """Конфигурация identity-слоя.

    - seed: seed процессного генератора surrogate id (None: системная энтропия)
    - legacy_random_repr: to_string() генерирует новый случайный суффикс
      при каждом вызове (режим совместимости, по умолчанию выключен)
    """

    seed: Optional[int] = None
    legacy_random_repr: bool = False

    @classmethod
    def from_env(cls) -> "IdentityConfig":
        """
        Построение конфигурации из переменных окружения.

        Returns:
            IdentityConfig с значениями из окружения (или default)

        Raises:
            IllegalArgumentException: Если JAVALIKE_IDENTITY_SEED не является int
        """
        raw_seed = os.environ.get(ENV_IDENTITY_SEED, "").strip()
        seed: Optional[int] = None
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError as e:
                raise IllegalArgumentException(
                    f"{ENV_IDENTITY_SEED} must be an integer, got {raw_seed!r}"
                ) from e

        raw_legacy = os.environ.get(ENV_LEGACY_RANDOM_REPR, "").strip().lower()
        return cls(seed=seed, legacy_random_repr=raw_legacy in _TRUTHY)


# =============================================================================
# PROCESS-WIDE STATE
# =============================================================================

_config_lock = threading.Lock()
_config: Optional[IdentityConfig] = None
_generation = 0


def get_config() -> IdentityConfig:
    """Текущая конфигурация (лениво читается из окружения)."""
    global _config
    with _config_lock:
        if _config is None:
            _config = IdentityConfig.from_env()
        return _config


def config_generation() -> int:
    """
    Номер поколения конфигурации.

    Увеличивается при каждом configure(); генератор surrogate id
    пересоздаётся, если видит новое поколение.
    """
    return _generation


def configure(config: Optional[IdentityConfig] = None) -> IdentityConfig:
    """
    Установка конфигурации identity-слоя.

    Args:
        config: Новая конфигурация (None: значения из окружения)

    Returns:
        Установленная конфигурация
    """
    global _config, _generation
    new_config = config if config is not None else IdentityConfig.from_env()
    with _config_lock:
        _config = new_config
        _generation += 1
    if new_config.legacy_random_repr:
        logger.debug("legacy random repr enabled: to_string() is not stable per instance")
    return new_config
