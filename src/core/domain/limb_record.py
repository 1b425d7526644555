"""
LimbRecord: сериализуемое представление BigInt

Immutable Pydantic модель, хранящая знак и limbs (radix 2^32,
least-significant first) в каноническом виде. Используется как wire-формат
(model_dump_json / model_validate_json) и соответствует JSON Schema
contracts/schema/limb_record.json.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.limbs import BASE


class LimbRecord(BaseModel):
    """
    Каноническая запись BigInt.

    Инварианты:
    1. limbs содержит хотя бы один элемент, каждый в [0, 2^32)
    2. Старший limb ненулевой (кроме нуля [0])
    3. Ноль не может быть отрицательным
    """

    negative: bool = Field(False, description="Знак: True для строго отрицательных")
    limbs: List[int] = Field(
        ..., min_length=1, description="Магнитуда radix 2^32, least-significant first"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_canonical_limbs(cls, v: List[int]) -> List[int]:
        """Диапазон каждого limb и отсутствие старших нулей"""
        for i, limb in enumerate(v):
            if not 0 <= limb < BASE:
                raise ValueError(f"limbs[{i}] = {limb} out of range [0, {BASE})")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("limbs has superfluous most-significant zero limb")
        return v

    @model_validator(mode="after")
    def validate_no_negative_zero(self) -> "LimbRecord":
        """Ноль всегда хранится с negative=False"""
        if self.negative and self.limbs == [0]:
            raise ValueError("negative zero is not a canonical value")
        return self
