"""
Тесты для модуля Modular Arithmetic

Проверяет:
1. Параметры поля (MOD простой вида 3 * 2^30 + 1, ROOT первообразный)
2. modpow (square-and-multiply)
3. modinv (extended Euclid)
"""

import pytest

from src.core.math.limbs import BASE
from src.core.math.modular import MAX_TRANSFORM_LOG2, MOD, ROOT, modinv, modpow


# =============================================================================
# ПАРАМЕТРЫ ПОЛЯ
# =============================================================================


class TestFieldParameters:
    """Тесты констант поля"""

    def test_mod_value(self) -> None:
        """MOD = 3 * 2^30 + 1 и меньше BASE"""
        assert MOD == 3221225473
        assert MOD < BASE
        assert (MOD - 1) % (1 << MAX_TRANSFORM_LOG2) == 0

    def test_root_is_primitive(self) -> None:
        """ROOT^((MOD-1)/p) != 1 для простых делителей MOD - 1 (2 и 3)"""
        assert ROOT == 5
        assert modpow(ROOT, MOD - 1) == 1
        assert modpow(ROOT, (MOD - 1) // 2) == MOD - 1
        assert modpow(ROOT, (MOD - 1) // 3) != 1

    def test_products_fit_64_bits(self) -> None:
        """Произведение двух элементов поля помещается в 64 бита"""
        assert (MOD - 1) * (MOD - 1) < 2**64


# =============================================================================
# MODPOW
# =============================================================================


class TestModpow:
    """Тесты для modpow"""

    def test_small_values(self) -> None:
        """Совпадает с известными значениями"""
        assert modpow(2, 10, 1000) == 24
        assert modpow(3, 0, 7) == 1
        assert modpow(0, 0, 7) == 1

    def test_modulus_one(self) -> None:
        """Любое значение по модулю 1 равно 0"""
        assert modpow(5, 3, 1) == 0

    def test_agrees_with_builtin_pow(self) -> None:
        """Совпадает с pow(b, e, m)"""
        for base in (0, 1, 2, ROOT, MOD - 1, MOD + 7, 123456789):
            for exponent in (0, 1, 2, 31, 1000, MOD - 2):
                assert modpow(base, exponent) == pow(base, exponent, MOD)

    def test_negative_exponent_raises(self) -> None:
        """Отрицательный показатель -> ValueError"""
        with pytest.raises(ValueError, match="non-negative"):
            modpow(2, -1)

    def test_invalid_modulus_raises(self) -> None:
        """Модуль < 1 -> ValueError"""
        with pytest.raises(ValueError, match="modulus"):
            modpow(2, 3, 0)


# =============================================================================
# MODINV
# =============================================================================


class TestModinv:
    """Тесты для modinv"""

    def test_small_inverse(self) -> None:
        """3 * 5 = 15 = 1 (mod 7)"""
        assert modinv(3, 7) == 5

    def test_powers_of_two(self) -> None:
        """Обратные к размерам transform существуют"""
        for log_n in range(MAX_TRANSFORM_LOG2 + 1):
            n = 1 << log_n
            inverse = modinv(n)
            assert 0 <= inverse < MOD
            assert n * inverse % MOD == 1

    def test_negative_value(self) -> None:
        """Отрицательный аргумент приводится по модулю"""
        assert (-3) * modinv(-3, 7) % 7 == 1

    def test_agrees_with_builtin_pow(self) -> None:
        """Совпадает с pow(x, -1, m)"""
        for value in (1, 2, ROOT, 12345, MOD - 1):
            assert modinv(value) == pow(value, -1, MOD)

    def test_not_invertible_raises(self) -> None:
        """gcd != 1 -> ValueError"""
        with pytest.raises(ValueError, match="not invertible"):
            modinv(6, 9)
        with pytest.raises(ValueError, match="not invertible"):
            modinv(0, MOD)

    def test_invalid_modulus_raises(self) -> None:
        """Модуль < 2 -> ValueError"""
        with pytest.raises(ValueError, match="modulus"):
            modinv(1, 1)
