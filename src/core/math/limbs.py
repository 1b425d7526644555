"""
Limbs: примитивы над магнитудой в radix 2^32

Магнитуда хранится как list[int] limbs (least-significant first), каждый limb
лежит в диапазоне [0, BASE). Функции модуля работают только с магнитудами,
знак обрабатывается на уровне BigInt.

Модуль обеспечивает:
- Нормализацию (удаление старших нулевых limbs)
- Сравнение магнитуд
- Сложение/вычитание с carry/borrow propagation
- Инкремент/декремент (ripple +1/-1)
- Поразрядные AND/OR/XOR по limbs

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После trim_leading_zeros список содержит хотя бы один limb
2. Старший limb ненулевой, кроме канонического нуля [0]
3. Carry никогда не теряется: переполнение расширяет список limbs
"""

from typing import Final, List, Sequence

# =============================================================================
# RADIX-ПАРАМЕТРЫ
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 32

# Вес соседних limbs (radix магнитуды)
BASE: Final[int] = 1 << LIMB_BITS

# Маска младших LIMB_BITS бит
LIMB_MASK: Final[int] = BASE - 1


# =============================================================================
# НОРМАЛИЗАЦИЯ И КОНВЕРСИЯ
# =============================================================================


def is_zero_magnitude(limbs: Sequence[int]) -> bool:
    """Каноническая магнитуда равна нулю ([0])"""
    return len(limbs) == 1 and limbs[0] == 0


def trim_leading_zeros(limbs: List[int]) -> List[int]:
    """
    Удаление старших нулевых limbs (in place).

    Оставляет минимум один limb, поэтому пустой список и [0, 0, ...]
    превращаются в канонический ноль [0].

    Args:
        limbs: Магнитуда (least-significant first), изменяется на месте

    Returns:
        Тот же список (для удобства chaining)
    """
    end = len(limbs)
    while end > 1 and limbs[end - 1] == 0:
        end -= 1
    del limbs[end:]
    if not limbs:
        limbs.append(0)
    return limbs


def split_magnitude(value: int) -> List[int]:
    """
    Разбиение abs(value) на limbs повторным делением на BASE.

    Examples:
        >>> split_magnitude(0)
        [0]
        >>> split_magnitude(-(1 << 32))
        [0, 1]
    """
    value = abs(value)
    limbs = [value % BASE]
    value //= BASE
    while value:
        limbs.append(value % BASE)
        value //= BASE
    return limbs


def compose_magnitude(limbs: Sequence[int]) -> int:
    """Сборка native int из limbs (обратная операция к split_magnitude)"""
    result = 0
    for limb in reversed(limbs):
        result = result * BASE + limb
    return result


def validate_limb(value: int) -> int:
    """
    Проверка, что значение является допустимым limb.

    Raises:
        TypeError: Если значение не int (bool тоже отклоняется)
        ValueError: Если значение вне [0, BASE)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"limb must be int, got {type(value).__name__}")
    if not 0 <= value < BASE:
        raise ValueError(f"limb {value} out of range [0, {BASE})")
    return value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> int:
    """
    Сравнение двух канонических магнитуд.

    Более длинная магнитуда больше; при равной длине limbs сравниваются
    от старшего к младшему.

    Returns:
        -1 если lhs < rhs, 0 если равны, 1 если lhs > rhs
    """
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1
    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return -1 if lhs[i] < rhs[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(target: List[int], addend: Sequence[int]) -> None:
    """
    target += addend (in place) с carry propagation в BASE.

    Если после исчерпания limbs остаётся carry, добавляется новый limb.
    addend не должен быть тем же объектом, что target.
    """
    if len(target) < len(addend):
        target.extend([0] * (len(addend) - len(target)))

    carry = 0
    i = 0
    for digit in addend:
        carry += target[i] + digit
        target[i] = carry & LIMB_MASK
        carry >>= LIMB_BITS
        i += 1

    while carry and i < len(target):
        carry += target[i]
        target[i] = carry & LIMB_MASK
        carry >>= LIMB_BITS
        i += 1

    if carry:
        target.append(carry)


def sub_magnitudes(minuend: List[int], subtrahend: Sequence[int]) -> None:
    """
    minuend -= subtrahend (in place) с borrow propagation.

    Требует |minuend| >= |subtrahend|; результат нормализуется.
    subtrahend не должен быть тем же объектом, что minuend.

    Raises:
        ValueError: Если subtrahend больше minuend (borrow остался после
            старшего limb)
    """
    if len(subtrahend) > len(minuend):
        raise ValueError("subtrahend is longer than minuend")

    borrow = 0
    i = 0
    for digit in subtrahend:
        value = minuend[i] - digit - borrow
        borrow = 1 if value < 0 else 0
        minuend[i] = value + BASE if borrow else value
        i += 1

    while borrow and i < len(minuend):
        value = minuend[i] - borrow
        borrow = 1 if value < 0 else 0
        minuend[i] = value + BASE if borrow else value
        i += 1

    if borrow:
        raise ValueError("subtrahend magnitude exceeds minuend magnitude")

    trim_leading_zeros(minuend)


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ
# =============================================================================


def increment_magnitude(limbs: List[int]) -> None:
    """
    Ripple +1 от младшего limb вверх (in place).

    Останавливается на первом limb, который не переполнился; если
    переполнились все, добавляется старший limb 1.
    """
    for i in range(len(limbs)):
        if limbs[i] != LIMB_MASK:
            limbs[i] += 1
            return
        limbs[i] = 0
    limbs.append(1)


def decrement_magnitude(limbs: List[int]) -> None:
    """
    Ripple -1 от младшего limb вверх (in place), затем нормализация.

    Raises:
        ValueError: Если магнитуда равна нулю (нечего уменьшать)
    """
    if is_zero_magnitude(limbs):
        raise ValueError("cannot decrement zero magnitude")

    for i in range(len(limbs)):
        if limbs[i]:
            limbs[i] -= 1
            break
        limbs[i] = LIMB_MASK

    trim_leading_zeros(limbs)


# =============================================================================
# ПОРАЗРЯДНЫЕ ОПЕРАЦИИ
# =============================================================================


def and_magnitudes(target: List[int], other: Sequence[int]) -> None:
    """
    target &= other (in place).

    Длина результата равна длине более короткого операнда: limbs за его
    пределами AND-ятся с отсутствующим (нулевым) limb.
    """
    if len(target) > len(other):
        del target[len(other):]
    for i in range(len(target)):
        target[i] &= other[i]
    trim_leading_zeros(target)


def or_magnitudes(target: List[int], other: Sequence[int]) -> None:
    """target |= other (in place); лишние limbs other копируются без изменений"""
    shared = min(len(target), len(other))
    if len(target) < len(other):
        target.extend(other[shared:])
    for i in range(shared):
        target[i] |= other[i]
    trim_leading_zeros(target)


def xor_magnitudes(target: List[int], other: Sequence[int]) -> None:
    """target ^= other (in place); лишние limbs other копируются без изменений"""
    shared = min(len(target), len(other))
    if len(target) < len(other):
        target.extend(other[shared:])
    for i in range(shared):
        target[i] ^= other[i]
    trim_leading_zeros(target)
