"""
OptionalEnvelope — Модель wire-формата Optional

Immutable Pydantic модель записи {"type": "Optional", "subType": ..., "value": ...}.
Полная совместимость с JSON Schema (contracts/schema/optional_envelope.json).
"""

from typing import Any, Dict, Final, Literal

from pydantic import BaseModel, Field

ENVELOPE_TYPE: Final[str] = "Optional"


class OptionalEnvelope(BaseModel):
    """
    Сериализованное представление Optional.

    Immutable модель (frozen=True). Поле sub_type сериализуется как subType.
    """

    type: Literal["Optional"] = Field(ENVELOPE_TYPE, description="Дискриминатор записи")
    sub_type: str = Field(
        ..., alias="subType", min_length=1, description="Тег runtime-типа значения"
    )
    value: Any = Field(..., description="Значение или None для пустого Optional")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    def to_record(self) -> Dict[str, Any]:
        """Запись в wire-формате (ключи type / subType / value)."""
        return self.model_dump(by_alias=True)
