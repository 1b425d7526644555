"""
NTT: number-theoretic transform и быстрое умножение магнитуд

Умножение двух магнитуд (limbs в radix 2^32) через convolution над Z/MOD:
1. Каждая магнитуда режется на sub-radix digits шириной `bits`
2. Оба массива дополняются нулями до n = 2^k >= 2 * max(len_a, len_b)
3. Forward NTT (butterfly network как у FFT, корни из таблицы от ROOT)
4. Pointwise product по модулю MOD
5. Inverse NTT (корни в обратном порядке, масштаб modinv(n))
6. Carry resolution: коэффициенты собираются обратно в limbs radix 2^32

Выбор ширины digit:
    MOD (~3.2e9) меньше BASE (2^32), поэтому limbs нельзя подавать в
    transform напрямую. Ширина `bits` выбирается максимальной такой, что
    min(len_a, len_b) * (2^bits - 1)^2 < MOD. Тогда каждый коэффициент
    convolution точно представим в поле и aliasing по модулю исключён.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размер transform всегда степень двойки и не превышает 2^MAX_TRANSFORM_LOG2
2. Входные магнитуды только читаются (безопасно для a *= a)
3. Результат нормализован (trim_leading_zeros)
"""

import logging
from typing import Final, List, Sequence, Tuple

from src.core.math.limbs import (
    LIMB_BITS,
    LIMB_MASK,
    is_zero_magnitude,
    trim_leading_zeros,
)
from src.core.math.modular import MAX_TRANSFORM_LOG2, MOD, ROOT, modinv, modpow

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ SUB-RADIX
# =============================================================================

# Максимальная ширина sub-radix digit: (2^16 - 1)^2 уже больше MOD
MAX_DIGIT_BITS: Final[int] = 15

# Минимальная ширина sub-radix digit
MIN_DIGIT_BITS: Final[int] = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TransformSizeError(OverflowError):
    """
    Операнды слишком велики для transform над MOD.

    Возникает, когда даже при ширине digit MIN_DIGIT_BITS требуемый размер
    transform превышает 2^MAX_TRANSFORM_LOG2.
    """

    pass


# =============================================================================
# ROOT TABLE / TRANSFORM
# =============================================================================


def root_of_unity(log_n: int) -> int:
    """
    Первообразный корень степени 2^log_n из единицы в Z/MOD.

    Raises:
        TransformSizeError: Если log_n вне [0, MAX_TRANSFORM_LOG2]
    """
    if not 0 <= log_n <= MAX_TRANSFORM_LOG2:
        raise TransformSizeError(
            f"transform size 2^{log_n} exceeds maximum 2^{MAX_TRANSFORM_LOG2}"
        )
    return modpow(ROOT, (MOD - 1) >> log_n)


def root_table(n: int, inverse: bool = False) -> List[int]:
    """
    Таблица степеней w^0 .. w^(n-1) корня степени n.

    Для inverse transform элементы 1..n-1 разворачиваются, что даёт
    w^(-k) = w^(n-k).

    Raises:
        ValueError: Если n не является степенью двойки
    """
    if n < 1 or n & (n - 1):
        raise ValueError(f"transform size must be a power of two, got {n}")

    g = root_of_unity(n.bit_length() - 1)
    table = [1] * n
    for i in range(1, n):
        table[i] = table[i - 1] * g % MOD

    if inverse:
        table[1:] = table[:0:-1]
    return table


def transform(values: List[int], inverse: bool = False) -> None:
    """
    In-place NTT над Z/MOD (iterative radix-2, bit-reversal + butterflies).

    Args:
        values: Элементы поля, len(values) - степень двойки; изменяется на месте
        inverse: Обратное преобразование (включая масштаб 1/n)
    """
    n = len(values)
    w = root_table(n, inverse)

    if inverse:
        inv_n = modinv(n, MOD)
        for i in range(n):
            values[i] = values[i] * inv_n % MOD

    # Bit-reversal permutation
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            values[i], values[j] = values[j], values[i]

    # Butterflies: блоки длины 2 * half, корень w^(n / (2 * half))
    half = 1
    while half < n:
        stride = n // (half << 1)
        for start in range(0, n, half << 1):
            for k in range(half):
                u = values[start + k]
                z = values[start + half + k] * w[stride * k] % MOD
                values[start + k] = (u + z) % MOD
                values[start + half + k] = (u - z) % MOD
        half <<= 1


# =============================================================================
# SUB-RADIX SPLIT / CARRY RESOLUTION
# =============================================================================


def choose_digit_bits(lhs_len: int, rhs_len: int) -> Tuple[int, int]:
    """
    Выбор ширины sub-radix digit и размера transform.

    Args:
        lhs_len: Длина левой магнитуды в limbs
        rhs_len: Длина правой магнитуды в limbs

    Returns:
        (bits, log_n): ширина digit и log2 размера transform

    Raises:
        TransformSizeError: Если подходящей ширины нет
    """
    for bits in range(MAX_DIGIT_BITS, MIN_DIGIT_BITS - 1, -1):
        lhs_digits = -(-lhs_len * LIMB_BITS // bits)
        rhs_digits = -(-rhs_len * LIMB_BITS // bits)

        # Максимальный коэффициент convolution должен быть < MOD
        if min(lhs_digits, rhs_digits) * ((1 << bits) - 1) ** 2 >= MOD:
            continue

        log_n = (2 * max(lhs_digits, rhs_digits) - 1).bit_length()
        if log_n <= MAX_TRANSFORM_LOG2:
            return bits, log_n

    raise TransformSizeError(
        f"operands of {lhs_len} and {rhs_len} limbs exceed transform capacity"
    )


def split_digits(limbs: Sequence[int], bits: int, size: int) -> List[int]:
    """
    Разбиение магнитуды на digits шириной bits, дополненное нулями до size.

    Raises:
        ValueError: Если digits не помещаются в size
    """
    mask = (1 << bits) - 1
    needed = -(-len(limbs) * LIMB_BITS // bits)
    if needed > size:
        raise ValueError(f"{needed} digits do not fit into transform of size {size}")

    digits = [0] * size
    acc = 0
    acc_bits = 0
    pos = 0
    for limb in limbs:
        acc |= limb << acc_bits
        acc_bits += LIMB_BITS
        while acc_bits >= bits:
            digits[pos] = acc & mask
            acc >>= bits
            acc_bits -= bits
            pos += 1
    if acc_bits:
        digits[pos] = acc
    return digits


def compose_limbs(coefficients: Sequence[int], bits: int) -> List[int]:
    """
    Carry resolution: коэффициенты в radix 2^bits -> limbs radix 2^32.

    Коэффициенты могут превышать 2^bits (сумма convolution); избыток
    переносится в следующий разряд.
    """
    mask = (1 << bits) - 1
    limbs: List[int] = []
    acc = 0
    acc_bits = 0
    carry = 0

    def push(digit: int) -> None:
        nonlocal acc, acc_bits
        acc |= digit << acc_bits
        acc_bits += bits
        if acc_bits >= LIMB_BITS:
            limbs.append(acc & LIMB_MASK)
            acc >>= LIMB_BITS
            acc_bits -= LIMB_BITS

    for coefficient in coefficients:
        carry += coefficient
        push(carry & mask)
        carry >>= bits

    while carry:
        push(carry & mask)
        carry >>= bits

    if acc_bits:
        limbs.append(acc)
    return trim_leading_zeros(limbs)


# =============================================================================
# MULTIPLY
# =============================================================================


def multiply_magnitudes(lhs: Sequence[int], rhs: Sequence[int]) -> List[int]:
    """
    Произведение двух магнитуд через NTT.

    Args:
        lhs: Каноническая магнитуда (least-significant first)
        rhs: Каноническая магнитуда (может быть тем же объектом, что lhs)

    Returns:
        Новая каноническая магнитуда |lhs| * |rhs|

    Raises:
        TransformSizeError: Если операнды превышают ёмкость transform

    Examples:
        >>> multiply_magnitudes([5], [5])
        [25]
        >>> multiply_magnitudes([0, 1], [0, 1])
        [0, 0, 1]
    """
    if is_zero_magnitude(lhs) or is_zero_magnitude(rhs):
        return [0]

    bits, log_n = choose_digit_bits(len(lhs), len(rhs))
    n = 1 << log_n
    logger.debug(
        "NTT multiply: %d x %d limbs, digit_bits=%d, n=%d", len(lhs), len(rhs), bits, n
    )

    a = split_digits(lhs, bits, n)
    b = split_digits(rhs, bits, n)
    transform(a)
    transform(b)
    for i in range(n):
        a[i] = a[i] * b[i] % MOD
    transform(a, inverse=True)

    return compose_limbs(a, bits)
