"""
Контракт wire-формата Optional

Optional.to_json() отдаёт запись {"type": "Optional", "subType": ..., "value": ...},
Optional.from_json() принимает её обратно. Структура записи зафиксирована
JSON Schema (Draft 2020-12), которая поставляется вместе с пакетом:

- schema/optional_envelope.json

Схема проверяет только форму записи (дискриминатор, непустой subType,
отсутствие лишних ключей). Согласование value с subType и ожидаемым
типом делает сам Optional.from_json.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# Каталог package data со схемами контрактов
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем контрактов из каталога.

    Каждая схема читается с диска и проходит meta-validation один раз,
    дальше отдаётся из кэша: from_json вызывается часто, а схема неизменна.

    Args:
        schema_dir: Каталог с *.json схемами (по умолчанию package data)

    Raises:
        RuntimeError: Каталог не существует (сломанная установка пакета)
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема контракта по имени файла без ".json".

        Raises:
            FileNotFoundError: Схемы с таким именем нет в каталоге
            json.JSONDecodeError: Файл схемы не является JSON
            ValueError: JSON не является корректной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_DEFAULT_LOADER: Optional[SchemaLoader] = None


def _default_loader() -> SchemaLoader:
    global _DEFAULT_LOADER
    if _DEFAULT_LOADER is None:
        _DEFAULT_LOADER = SchemaLoader()
    return _DEFAULT_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка записи против одной схемы контракта.

    Args:
        schema_name: Имя схемы в каталоге загрузчика
        loader: Свой SchemaLoader (тесты, альтернативный каталог)
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Any) -> List[str]:
        """
        Все нарушения контракта в виде строк "<путь>: <сообщение>".

        Порядок стабилен (по пути, затем по тексту), чтобы сообщения об
        ошибках десериализации не зависели от порядка обхода схемы.
        Для корня записи путь равен "$".

        Returns:
            Пустой список, если запись соответствует контракту
        """
        lines = []
        for error in self.validator.iter_errors(data):
            path = ".".join(str(part) for part in error.absolute_path) or "$"
            lines.append(f"{path}: {error.message}")
        return sorted(lines)


class OptionalEnvelopeValidator(ContractValidator):
    """Контракт записи Optional: дискриминатор "Optional", непустой subType, ключ value."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("optional_envelope", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_ENVELOPE_VALIDATOR: Optional[OptionalEnvelopeValidator] = None


def get_optional_envelope_validator() -> OptionalEnvelopeValidator:
    """Валидатор записи Optional, общий для всех вызовов from_json."""
    global _ENVELOPE_VALIDATOR
    if _ENVELOPE_VALIDATOR is None:
        _ENVELOPE_VALIDATOR = OptionalEnvelopeValidator()
    return _ENVELOPE_VALIDATOR


def validate_optional_envelope(data: Any) -> None:
    """
    Проверка записи до передачи её в Optional.from_json.

    Raises:
        ValidationError: Запись не соответствует контракту Optional
    """
    get_optional_envelope_validator().validate(data)
