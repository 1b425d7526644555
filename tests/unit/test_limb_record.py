"""
Тесты для LimbRecord (Pydantic V2)

Покрывает:
- Создание и валидация канонической формы
- Immutability (frozen=True)
- JSON сериализация/десериализация
- Конверсия BigInt <-> LimbRecord
- JSON Schema compliance
"""

import pytest
from pydantic import ValidationError

from src.core.contracts import validate_limb_record
from src.core.domain import BigInt, LimbRecord
from src.core.math.limbs import BASE, LIMB_MASK


class TestLimbRecordValidation:
    """Тесты валидации LimbRecord"""

    def test_valid_record(self) -> None:
        """Каноническая запись"""
        record = LimbRecord(negative=True, limbs=[1, 2])
        assert record.negative is True
        assert record.limbs == [1, 2]

    def test_default_sign(self) -> None:
        """negative по умолчанию False"""
        assert LimbRecord(limbs=[5]).negative is False

    def test_empty_limbs_rejected(self) -> None:
        """Пустой список limbs"""
        with pytest.raises(ValidationError):
            LimbRecord(limbs=[])

    def test_missing_limbs_rejected(self) -> None:
        """limbs обязателен"""
        with pytest.raises(ValidationError):
            LimbRecord(negative=False)  # type: ignore[call-arg]

    def test_limb_out_of_range(self) -> None:
        """Limb >= 2^32 или < 0"""
        with pytest.raises(ValidationError, match="out of range"):
            LimbRecord(limbs=[BASE])
        with pytest.raises(ValidationError, match="out of range"):
            LimbRecord(limbs=[-1])

    def test_leading_zero_rejected(self) -> None:
        """Старший нулевой limb"""
        with pytest.raises(ValidationError, match="most-significant zero"):
            LimbRecord(limbs=[1, 0])

    def test_negative_zero_rejected(self) -> None:
        """Negative zero не каноничен"""
        with pytest.raises(ValidationError, match="negative zero"):
            LimbRecord(negative=True, limbs=[0])

    def test_frozen(self) -> None:
        """Immutability"""
        record = LimbRecord(limbs=[1])
        with pytest.raises(ValidationError):
            record.negative = True  # type: ignore[misc]


class TestLimbRecordSerialization:
    """Тесты JSON сериализации"""

    def test_json_roundtrip(self) -> None:
        """model_dump_json -> model_validate_json"""
        record = LimbRecord(negative=True, limbs=[LIMB_MASK, 7])
        restored = LimbRecord.model_validate_json(record.model_dump_json())
        assert restored == record

    def test_dump_matches_schema(self) -> None:
        """model_dump проходит JSON Schema контракт"""
        for value in (0, -1, BASE, -(2**100)):
            validate_limb_record(BigInt(value).to_record().model_dump())

    def test_invalid_json_rejected(self) -> None:
        """Нарушение инвариантов в JSON"""
        with pytest.raises(ValidationError):
            LimbRecord.model_validate_json('{"negative": true, "limbs": [0]}')


class TestBigIntConversion:
    """Тесты BigInt.to_record / BigInt.from_record"""

    def test_to_record(self) -> None:
        """2^40 -> limbs [0, 256]"""
        record = BigInt(2**40).to_record()
        assert record.negative is False
        assert record.limbs == [0, 256]

    def test_negative_to_record(self) -> None:
        """Знак переносится в запись"""
        record = BigInt(-3).to_record()
        assert record.negative is True
        assert record.limbs == [3]

    def test_zero_to_record(self) -> None:
        """Ноль -> [0], negative=False"""
        record = (BigInt(5) - 5).to_record()
        assert record == LimbRecord(negative=False, limbs=[0])

    def test_from_record(self) -> None:
        """Восстановление BigInt"""
        value = BigInt.from_record(LimbRecord(negative=True, limbs=[0, 1]))
        assert value == -BASE

    def test_record_independent_of_value(self) -> None:
        """Запись не меняется при мутации BigInt"""
        value = BigInt(10)
        record = value.to_record()
        value.increment()
        assert record.limbs == [10]
