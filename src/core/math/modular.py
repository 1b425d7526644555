"""
Modular Arithmetic: поле Z/MOD для number-theoretic transform

Модуль задаёт параметры поля и вспомогательные операции, из которых
строятся корни из единицы для NTT:
- MOD = 3 * 2^30 + 1 (простое), мультипликативная группа содержит
  подгруппу порядка 2^30
- ROOT = 5 (первообразный корень по модулю MOD)
- modpow: iterative square-and-multiply
- modinv: iterative extended Euclid

MOD < BASE (2^32), поэтому любое произведение двух элементов поля
помещается в 64 бита.
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПОЛЯ
# =============================================================================

# Простой модуль вида k * 2^m + 1
MOD: Final[int] = 3 * (1 << 30) + 1

# Первообразный корень по модулю MOD
ROOT: Final[int] = 5

# Максимальный log2 размера transform: 2^30 делит MOD - 1
MAX_TRANSFORM_LOG2: Final[int] = 30


# =============================================================================
# MODPOW / MODINV
# =============================================================================


def modpow(base: int, exponent: int, modulus: int = MOD) -> int:
    """
    Возведение в степень по модулю (square-and-multiply).

    Args:
        base: Основание (любой int, приводится по модулю)
        exponent: Неотрицательный показатель
        modulus: Модуль (default: MOD)

    Returns:
        base^exponent mod modulus

    Raises:
        ValueError: Если exponent < 0 или modulus < 1

    Examples:
        >>> modpow(5, 0)
        1
        >>> modpow(ROOT, MOD - 1)
        1
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")

    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        exponent >>= 1
        if exponent:
            base = base * base % modulus
    return result


def modinv(value: int, modulus: int = MOD) -> int:
    """
    Обратный элемент по модулю (iterative extended Euclid).

    Поддерживает инвариант r_i = x_i * value (mod modulus) для двух
    последних остатков алгоритма Евклида.

    Args:
        value: Элемент, обратный к которому ищется
        modulus: Модуль (default: MOD)

    Returns:
        x в [0, modulus) такой, что value * x = 1 (mod modulus)

    Raises:
        ValueError: Если modulus < 2 или gcd(value, modulus) != 1

    Examples:
        >>> modinv(3, 7)
        5
    """
    if modulus < 2:
        raise ValueError(f"modulus must be at least 2, got {modulus}")

    r_prev, r = value % modulus, modulus
    x_prev, x = 1, 0
    while r:
        q = r_prev // r
        r_prev, r = r, r_prev - q * r
        x_prev, x = x, x_prev - q * x

    if r_prev != 1:
        raise ValueError(f"{value} is not invertible modulo {modulus}")

    return x_prev % modulus
