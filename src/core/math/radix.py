"""
Radix Conversion: decimal text <-> limbs radix 2^32

Модуль конвертирует строку десятичных цифр в магнитуду (и обратно) через
промежуточный массив групп по 9 десятичных цифр (radix 10^9, каждая группа
помещается в 30 бит):

    digits -> groups 10^9 (most-significant first) -> limbs 2^32
    limbs 2^32 -> groups 10^9 (least-significant first) -> digits

Обе конверсии выполняются повторным long division и стоят O(log²n), где
n - битовая длина числа.

Поддерживается только десятичная система. Запрос HEX/OCT/BIN даёт явную
ошибку UnsupportedRadixError, а не неверный результат.
"""

from enum import Enum
from typing import Final, List, Sequence, Union

from src.core.math.limbs import BASE, is_zero_magnitude, trim_leading_zeros

# =============================================================================
# DECIMAL-ПАРАМЕТРЫ
# =============================================================================

# Число десятичных цифр в одной группе
DECIMAL_GROUP_DIGITS: Final[int] = 9

# Radix промежуточного массива групп
DECIMAL_GROUP_BASE: Final[int] = 10**DECIMAL_GROUP_DIGITS

DECIMAL_DIGITS: Final[str] = "0123456789"


# =============================================================================
# ENUMS / EXCEPTIONS
# =============================================================================


class Radix(str, Enum):
    """Система счисления для text I/O"""

    DEC = "dec"
    HEX = "hex"  # Не реализовано
    OCT = "oct"  # Не реализовано
    BIN = "bin"  # Не реализовано


_RADIX_BY_NUMBER: Final[dict] = {
    10: Radix.DEC,
    16: Radix.HEX,
    8: Radix.OCT,
    2: Radix.BIN,
}


class UnsupportedRadixError(ValueError):
    """Запрошена система счисления, отличная от десятичной"""

    pass


class BigIntParseError(ValueError):
    """Строка не является корректной десятичной записью целого числа"""

    pass


def require_decimal(radix: Union[Radix, int, str]) -> Radix:
    """
    Нормализация radix и проверка, что это десятичная система.

    Args:
        radix: Radix, число (10/16/8/2) или строковое значение enum

    Returns:
        Radix.DEC

    Raises:
        UnsupportedRadixError: Для любой другой системы счисления
    """
    if isinstance(radix, Radix):
        resolved = radix
    elif isinstance(radix, int) and not isinstance(radix, bool):
        if radix not in _RADIX_BY_NUMBER:
            raise UnsupportedRadixError(f"Unsupported radix: {radix}")
        resolved = _RADIX_BY_NUMBER[radix]
    else:
        try:
            resolved = Radix(radix)
        except ValueError:
            raise UnsupportedRadixError(f"Unsupported radix: {radix!r}") from None

    if resolved is not Radix.DEC:
        raise UnsupportedRadixError(
            f"Radix {resolved.value} is not implemented, only decimal I/O is supported"
        )
    return resolved


def is_decimal_digit(char: str) -> bool:
    """ASCII цифра 0-9 (str.isdigit принимает и другие unicode-цифры)"""
    return len(char) == 1 and char in DECIMAL_DIGITS


# =============================================================================
# DECIMAL -> LIMBS
# =============================================================================


def decimal_to_limbs(digits: str) -> List[int]:
    """
    Конверсия строки десятичных цифр в магнитуду.

    Ведущие нули пропускаются. Цифры упаковываются в группы по 9
    (most-significant first), затем каждый проход long division делит
    массив групп на BASE: остаток становится очередным limb, частное
    записывается на место групп.

    Args:
        digits: Непустая строка ASCII цифр без знака

    Returns:
        Каноническая магнитуда (least-significant first)

    Raises:
        ValueError: Если строка пуста или содержит не-цифры

    Examples:
        >>> decimal_to_limbs("0005")
        [5]
        >>> decimal_to_limbs("4294967296")
        [0, 1]
    """
    if not digits or not all(is_decimal_digit(c) for c in digits):
        raise ValueError(f"not a decimal digit string: {digits!r}")

    digits = digits.lstrip("0")
    if not digits:
        return [0]

    padded = "0" * (-len(digits) % DECIMAL_GROUP_DIGITS) + digits
    groups = [
        int(padded[i : i + DECIMAL_GROUP_DIGITS])
        for i in range(0, len(padded), DECIMAL_GROUP_DIGITS)
    ]

    limbs: List[int] = []
    last = len(groups) - 1
    head = 0
    while head < last:
        # groups[head] < 10^9 < BASE: старшая цифра частного всегда 0
        remainder = groups[head]
        head += 1
        for i in range(head, len(groups)):
            remainder = remainder * DECIMAL_GROUP_BASE + groups[i]
            groups[i], remainder = divmod(remainder, BASE)
        limbs.append(remainder)
    limbs.append(groups[last])

    return trim_leading_zeros(limbs)


# =============================================================================
# LIMBS -> DECIMAL
# =============================================================================


def limbs_to_decimal(limbs: Sequence[int]) -> str:
    """
    Конверсия магнитуды в строку десятичных цифр (без знака).

    Зеркальный long division: от старшего limb к младшему делим на 10^9,
    остаток даёт очередную группу. Старшая группа печатается без
    дополнения, остальные дополняются нулями до 9 цифр.

    Examples:
        >>> limbs_to_decimal([0])
        '0'
        >>> limbs_to_decimal([0, 1])
        '4294967296'
    """
    if is_zero_magnitude(limbs):
        return "0"

    work = list(limbs)
    groups: List[int] = []
    top = len(work) - 1
    while top > 0:
        remainder = 0
        for i in range(top, -1, -1):
            remainder = remainder * BASE + work[i]
            work[i], remainder = divmod(remainder, DECIMAL_GROUP_BASE)
        groups.append(remainder)
        if work[top] == 0:
            top -= 1

    # work[0] < BASE может быть >= 10^9: старшая группа печатается целиком
    if work[0] or not groups:
        groups.append(work[0])

    head = str(groups[-1])
    tail = "".join(f"{group:0{DECIMAL_GROUP_DIGITS}d}" for group in reversed(groups[:-1]))
    return head + tail
