"""
BigInt: целое произвольной точности (sign-magnitude)

Представление:
- negative: bool, True только для строго отрицательных значений
- limbs: list[int] беззнаковых 32-битных digits, least-significant first

    value = (-1 if negative else 1) * Σ limbs[i] * BASE^i

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. limbs содержит хотя бы один элемент
2. Нет старших нулевых limbs, кроме канонического нуля [0]
3. Ноль всегда неотрицателен (negative zero нормализуется)

Compound-операции (add_assign, sub_assign, mul_assign, and_assign, ...)
изменяют левый операнд на месте и возвращают его. Немутирующие формы
(+, -, *, &, |, ^) копируют левый операнд и делегируют compound-операции.
Правый операнд всегда снимается копией до записи, поэтому x += x,
x *= x и т.п. корректны.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

from src.core.domain.limb_record import LimbRecord
from src.core.math.limbs import (
    add_magnitudes,
    and_magnitudes,
    compare_magnitudes,
    compose_magnitude,
    decrement_magnitude,
    increment_magnitude,
    is_zero_magnitude,
    or_magnitudes,
    split_magnitude,
    sub_magnitudes,
    trim_leading_zeros,
    validate_limb,
    xor_magnitudes,
)
from src.core.math.ntt import multiply_magnitudes
from src.core.math.radix import (
    BigIntParseError,
    Radix,
    decimal_to_limbs,
    is_decimal_digit,
    limbs_to_decimal,
    require_decimal,
)

logger = logging.getLogger(__name__)

Operand = Union["BigInt", int]


# =============================================================================
# BIGINT
# =============================================================================


class BigInt:
    """
    Целое произвольной точности.

    Mutable value type: compound-операции меняют объект на месте, поэтому
    BigInt не hashable.

    Examples:
        >>> BigInt.from_string("123") + BigInt(877)
        BigInt('1000')
        >>> BigInt(-5) * 5
        BigInt('-25')
    """

    __slots__ = ("_negative", "_limbs")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Operand = 0) -> None:
        """
        Args:
            value: Native int (любой величины) или BigInt (deep copy)

        Raises:
            TypeError: Для остальных типов
        """
        if isinstance(value, BigInt):
            self._negative = value._negative
            self._limbs: List[int] = list(value._limbs)
        elif isinstance(value, int):
            self._negative = value < 0
            self._limbs = split_magnitude(value)
        else:
            raise TypeError(f"cannot construct BigInt from {type(value).__name__}")

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], negative: bool = False) -> "BigInt":
        """
        Построение из limbs (least-significant first).

        Старшие нулевые limbs отбрасываются, negative zero нормализуется.

        Raises:
            TypeError: Если limb не int
            ValueError: Если limb вне [0, 2^32)
        """
        result = cls()
        result._limbs = [validate_limb(limb) for limb in limbs]
        result._negative = bool(negative)
        result._normalize()
        return result

    @classmethod
    def from_string(cls, text: str, radix: Union[Radix, int, str] = Radix.DEC) -> "BigInt":
        """
        Строгий разбор: вся строка (без окружающих пробелов) должна быть
        десятичной записью.

        Raises:
            BigIntParseError: Если строка не является числом целиком
            UnsupportedRadixError: Если radix не десятичный
        """
        stripped = text.strip()
        result = parse_big_int(stripped, radix)
        if not result.ok or result.consumed != len(stripped):
            raise BigIntParseError(f"Invalid decimal integer: {text!r}")
        return result.value

    @classmethod
    def from_record(cls, record: LimbRecord) -> "BigInt":
        """Построение из валидированной LimbRecord"""
        return cls.from_limbs(record.limbs, record.negative)

    def to_record(self) -> LimbRecord:
        """Каноническая LimbRecord для сериализации"""
        return LimbRecord(negative=self._negative, limbs=list(self._limbs))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def negative(self) -> bool:
        return self._negative

    @property
    def limbs(self) -> Tuple[int, ...]:
        """Снимок limbs (least-significant first)"""
        return tuple(self._limbs)

    def is_zero(self) -> bool:
        return is_zero_magnitude(self._limbs)

    def copy(self) -> "BigInt":
        return BigInt(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return BigInt(self)

    def _normalize(self) -> None:
        """Trim старших нулей и устранение negative zero"""
        trim_leading_zeros(self._limbs)
        if is_zero_magnitude(self._limbs):
            self._negative = False

    @staticmethod
    def _snapshot(other: Operand) -> Tuple[bool, List[int]]:
        """Копия (sign, limbs) правого операнда до модификации левого"""
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported operand type: {type(other).__name__}")
        return rhs._negative, list(rhs._limbs)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """
        Трёхзначное сравнение.

        Разные знаки решают сразу (отрицательное меньше). При равных знаках
        сравниваются магнитуды, результат инвертируется для отрицательных.

        Returns:
            -1, 0 или 1
        """
        rhs_negative, rhs_limbs = self._snapshot(other)
        if self._negative != rhs_negative:
            return -1 if self._negative else 1
        result = compare_magnitudes(self._limbs, rhs_limbs)
        return -result if self._negative else result

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

    def __ne__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self == rhs

    def __lt__(self, other: Operand) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Operand) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Operand) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Operand) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Инкремент / декремент
    # -------------------------------------------------------------------------

    def increment(self) -> "BigInt":
        """
        self += 1 (in place).

        Для отрицательных магнитуда уменьшается (ripple -1).
        """
        if self._negative:
            decrement_magnitude(self._limbs)
        else:
            increment_magnitude(self._limbs)
        self._normalize()
        return self

    def decrement(self) -> "BigInt":
        """
        self -= 1 (in place).

        Для отрицательных магнитуда растёт (ripple +1); 0 переходит в -1.
        """
        if self._negative:
            increment_magnitude(self._limbs)
        elif self.is_zero():
            self._negative = True
            self._limbs = [1]
        else:
            decrement_magnitude(self._limbs)
        self._normalize()
        return self

    def successor(self) -> "BigInt":
        """self + 1 без изменения self"""
        return self.copy().increment()

    def predecessor(self) -> "BigInt":
        """self - 1 без изменения self"""
        return self.copy().decrement()

    # -------------------------------------------------------------------------
    # Аддитивная арифметика
    # -------------------------------------------------------------------------

    def _subtract_magnitude(self, rhs_limbs: List[int]) -> None:
        """
        |self| - |rhs| при одинаковых знаках.

        Из большей магнитуды вычитается меньшая; если rhs оказался больше,
        знак self инвертируется.
        """
        if compare_magnitudes(self._limbs, rhs_limbs) >= 0:
            sub_magnitudes(self._limbs, rhs_limbs)
        else:
            sub_magnitudes(rhs_limbs, self._limbs)
            self._limbs = rhs_limbs
            self._negative = not self._negative

    def add_assign(self, other: Operand) -> "BigInt":
        """
        self += other (in place).

        Одинаковые знаки: сложение магнитуд с carry. Разные знаки: знак self
        временно инвертируется, выполняется вычитание магнитуд, знак
        возвращается обратно.
        """
        rhs_negative, rhs_limbs = self._snapshot(other)
        if self._negative == rhs_negative:
            add_magnitudes(self._limbs, rhs_limbs)
        else:
            self._negative = not self._negative
            self._subtract_magnitude(rhs_limbs)
            self._negative = not self._negative
        self._normalize()
        return self

    def sub_assign(self, other: Operand) -> "BigInt":
        """
        self -= other (in place).

        Одинаковые знаки: вычитание магнитуд с borrow. Разные знаки:
        знак self временно инвертируется и магнитуды складываются.
        """
        rhs_negative, rhs_limbs = self._snapshot(other)
        if self._negative == rhs_negative:
            self._subtract_magnitude(rhs_limbs)
        else:
            self._negative = not self._negative
            add_magnitudes(self._limbs, rhs_limbs)
            self._negative = not self._negative
        self._normalize()
        return self

    # -------------------------------------------------------------------------
    # Мультипликативная арифметика
    # -------------------------------------------------------------------------

    def mul_assign(self, other: Operand) -> "BigInt":
        """
        self *= other (in place) через NTT.

        Знак произведения: XOR знаков операндов.

        Raises:
            TransformSizeError: Если операнды превышают ёмкость transform
        """
        rhs_negative, rhs_limbs = self._snapshot(other)
        self._limbs = multiply_magnitudes(self._limbs, rhs_limbs)
        self._negative = self._negative != rhs_negative
        self._normalize()
        return self

    # -------------------------------------------------------------------------
    # Поразрядные операции (sign-magnitude, не two's complement)
    # -------------------------------------------------------------------------

    def and_assign(self, other: Operand) -> "BigInt":
        """self &= other: limbs AND, знак = AND знаков"""
        rhs_negative, rhs_limbs = self._snapshot(other)
        and_magnitudes(self._limbs, rhs_limbs)
        self._negative = self._negative and rhs_negative
        self._normalize()
        return self

    def or_assign(self, other: Operand) -> "BigInt":
        """self |= other: limbs OR, знак = OR знаков"""
        rhs_negative, rhs_limbs = self._snapshot(other)
        or_magnitudes(self._limbs, rhs_limbs)
        self._negative = self._negative or rhs_negative
        self._normalize()
        return self

    def xor_assign(self, other: Operand) -> "BigInt":
        """self ^= other: limbs XOR, знак = XOR знаков"""
        rhs_negative, rhs_limbs = self._snapshot(other)
        xor_magnitudes(self._limbs, rhs_limbs)
        self._negative = self._negative != rhs_negative
        self._normalize()
        return self

    def invert(self) -> "BigInt":
        """~self = -(self + 1), новый объект"""
        result = self.successor()
        result._negative = not result._negative
        result._normalize()
        return result

    # -------------------------------------------------------------------------
    # Python operator protocol
    # -------------------------------------------------------------------------

    def _binary(self, other: Any, method: str) -> "BigInt":
        if _coerce(other) is None:
            return NotImplemented
        return getattr(self.copy(), method)(other)

    def _reflected(self, other: Any, method: str) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return getattr(lhs.copy(), method)(self)

    def _inplace(self, other: Any, method: str) -> "BigInt":
        if _coerce(other) is None:
            return NotImplemented
        return getattr(self, method)(other)

    def __add__(self, other: Any) -> "BigInt":
        return self._binary(other, "add_assign")

    def __radd__(self, other: Any) -> "BigInt":
        return self._reflected(other, "add_assign")

    def __iadd__(self, other: Any) -> "BigInt":
        return self._inplace(other, "add_assign")

    def __sub__(self, other: Any) -> "BigInt":
        return self._binary(other, "sub_assign")

    def __rsub__(self, other: Any) -> "BigInt":
        return self._reflected(other, "sub_assign")

    def __isub__(self, other: Any) -> "BigInt":
        return self._inplace(other, "sub_assign")

    def __mul__(self, other: Any) -> "BigInt":
        return self._binary(other, "mul_assign")

    def __rmul__(self, other: Any) -> "BigInt":
        return self._reflected(other, "mul_assign")

    def __imul__(self, other: Any) -> "BigInt":
        return self._inplace(other, "mul_assign")

    def __and__(self, other: Any) -> "BigInt":
        return self._binary(other, "and_assign")

    def __rand__(self, other: Any) -> "BigInt":
        return self._reflected(other, "and_assign")

    def __iand__(self, other: Any) -> "BigInt":
        return self._inplace(other, "and_assign")

    def __or__(self, other: Any) -> "BigInt":
        return self._binary(other, "or_assign")

    def __ror__(self, other: Any) -> "BigInt":
        return self._reflected(other, "or_assign")

    def __ior__(self, other: Any) -> "BigInt":
        return self._inplace(other, "or_assign")

    def __xor__(self, other: Any) -> "BigInt":
        return self._binary(other, "xor_assign")

    def __rxor__(self, other: Any) -> "BigInt":
        return self._reflected(other, "xor_assign")

    def __ixor__(self, other: Any) -> "BigInt":
        return self._inplace(other, "xor_assign")

    def __invert__(self) -> "BigInt":
        return self.invert()

    def __neg__(self) -> "BigInt":
        result = self.copy()
        result._negative = not result._negative
        result._normalize()
        return result

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        result = self.copy()
        result._negative = False
        return result

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        magnitude = compose_magnitude(self._limbs)
        return -magnitude if self._negative else magnitude

    # -------------------------------------------------------------------------
    # Text I/O
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format_big_int(self)

    def __repr__(self) -> str:
        return f"BigInt('{format_big_int(self)}')"

    def __format__(self, format_spec: str) -> str:
        """
        Поддерживаются только "" и "d"; "x", "X", "o", "b" дают
        UnsupportedRadixError.
        """
        if format_spec in ("", "d"):
            return format_big_int(self)
        if format_spec in ("x", "X"):
            return format_big_int(self, Radix.HEX)
        if format_spec == "o":
            return format_big_int(self, Radix.OCT)
        if format_spec == "b":
            return format_big_int(self, Radix.BIN)
        raise ValueError(f"Unknown format code {format_spec!r} for BigInt")


def _coerce(value: Any) -> Optional[BigInt]:
    """BigInt как есть, int -> BigInt, остальное -> None"""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int):
        return BigInt(value)
    return None


# =============================================================================
# TEXT I/O
# =============================================================================


@dataclass(frozen=True)
class ParseResult:
    """
    Результат разбора десятичной записи.

    При ok=False value всегда канонический ноль, consumed = 0, а error
    содержит причину. Ошибка разбора не бросает исключение: вызывающий
    код обязан проверить ok.
    """

    value: BigInt
    ok: bool
    consumed: int  # Число прочитанных символов (включая пробелы и знак)
    error: Optional[str] = None


def parse_big_int(text: str, radix: Union[Radix, int, str] = Radix.DEC) -> ParseResult:
    """
    Разбор префикса строки как десятичного целого.

    Формат: [пробелы] [+|-] цифры. Чтение останавливается на первом
    не-цифровом символе, остаток строки не трогается.

    Args:
        text: Входная строка
        radix: Система счисления (поддерживается только Radix.DEC)

    Returns:
        ParseResult; при отсутствии цифр ok=False и value = 0

    Raises:
        UnsupportedRadixError: Если radix не десятичный

    Examples:
        >>> parse_big_int("-0042 rest").value
        BigInt('-42')
        >>> parse_big_int("+").ok
        False
    """
    require_decimal(radix)

    pos = 0
    length = len(text)
    while pos < length and text[pos].isspace():
        pos += 1

    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    digits_start = pos
    while pos < length and is_decimal_digit(text[pos]):
        pos += 1

    if pos == digits_start:
        logger.debug("No decimal digits found at position %d of %r", digits_start, text[:32])
        return ParseResult(value=BigInt(), ok=False, consumed=0, error="no digits found")

    value = BigInt.from_limbs(decimal_to_limbs(text[digits_start:pos]), negative)
    return ParseResult(value=value, ok=True, consumed=pos)


def format_big_int(value: BigInt, radix: Union[Radix, int, str] = Radix.DEC) -> str:
    """
    Десятичная запись: "-" для отрицательных, без ведущих нулей, "0" для нуля.

    Raises:
        UnsupportedRadixError: Если radix не десятичный
    """
    require_decimal(radix)
    digits = limbs_to_decimal(value._limbs)
    return "-" + digits if value._negative else digits
