"""
Тесты текстового ввода/вывода BigInt

Проверяет:
1. parse_big_int: префиксный разбор [пробелы][знак]цифры
2. Ошибки разбора (ok=False, value=0, consumed=0)
3. format_big_int / str / repr / format()
4. Строгий from_string
5. Явный отказ для HEX/OCT/BIN
"""

import logging
import random

import pytest

from src.core.domain import BigInt, ParseResult, format_big_int, parse_big_int
from src.core.math.radix import BigIntParseError, Radix, UnsupportedRadixError


# =============================================================================
# PARSE
# =============================================================================


class TestParse:
    """Тесты parse_big_int"""

    def test_simple(self) -> None:
        """Положительное число целиком"""
        result = parse_big_int("123")
        assert result.ok
        assert result.value == 123
        assert result.consumed == 3
        assert result.error is None

    def test_stops_at_first_non_digit(self) -> None:
        """'  -42xyz' -> -42, прочитано 5 символов"""
        result = parse_big_int("  -42xyz")
        assert result.ok
        assert result.value == -42
        assert result.consumed == 5

    def test_explicit_plus(self) -> None:
        """Знак '+' допускается"""
        result = parse_big_int("+7")
        assert result.value == 7
        assert result.value.negative is False
        assert result.consumed == 2

    def test_leading_zeros(self) -> None:
        """'0005' == 5"""
        result = parse_big_int("0005")
        assert result.value == 5
        assert result.consumed == 4

    def test_negative_zero_normalized(self) -> None:
        """'-0' даёт канонический ноль"""
        result = parse_big_int("-0")
        assert result.ok
        assert result.value.negative is False
        assert str(result.value) == "0"

    def test_whitespace_variants(self) -> None:
        """Пробелы, табуляции и переводы строк пропускаются"""
        result = parse_big_int("\t\n 99 ")
        assert result.value == 99
        assert result.consumed == 5

    def test_large_value(self) -> None:
        """Число за пределами машинного int"""
        text = "-" + "9" * 50
        result = parse_big_int(text)
        assert int(result.value) == -(10**50 - 1)
        assert result.consumed == len(text)

    @pytest.mark.parametrize("text", ["", "   ", "-", "+", "+-5", "--5", "abc", "- 5", "٣"])
    def test_no_digits(self, text: str) -> None:
        """Нет цифр: ok=False, value=0, consumed=0"""
        result = parse_big_int(text)
        assert result.ok is False
        assert result.value == 0
        assert result.value.negative is False
        assert result.consumed == 0
        assert result.error

    def test_failure_is_logged(self, caplog) -> None:
        """Неудачный разбор логируется на уровне DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.big_integer"):
            parse_big_int("x")
        assert any("No decimal digits" in record.getMessage() for record in caplog.records)

    def test_result_is_frozen(self) -> None:
        """ParseResult неизменяем"""
        result = parse_big_int("1")
        assert isinstance(result, ParseResult)
        with pytest.raises(AttributeError):
            result.ok = False  # type: ignore[misc]

    @pytest.mark.parametrize("radix", [Radix.HEX, Radix.OCT, Radix.BIN, 16])
    def test_non_decimal_radix_raises(self, radix) -> None:
        """HEX/OCT/BIN не реализованы"""
        with pytest.raises(UnsupportedRadixError):
            parse_big_int("ff", radix)


# =============================================================================
# FORMAT
# =============================================================================


class TestFormat:
    """Тесты format_big_int и dunder-методов"""

    def test_zero(self) -> None:
        """Ноль печатается как '0'"""
        assert format_big_int(BigInt(0)) == "0"

    def test_negative(self) -> None:
        """Отрицательные с '-'"""
        assert format_big_int(BigInt(-(10**20))) == "-100000000000000000000"

    def test_str_and_repr(self) -> None:
        """str() даёт запись, repr() её оборачивает"""
        value = BigInt(-42)
        assert str(value) == "-42"
        assert repr(value) == "BigInt('-42')"

    def test_format_spec(self) -> None:
        """format() поддерживает '' и 'd'"""
        value = BigInt(2**64)
        assert f"{value}" == "18446744073709551616"
        assert f"{value:d}" == "18446744073709551616"

    @pytest.mark.parametrize("spec", ["x", "X", "o", "b"])
    def test_non_decimal_format_raises(self, spec: str) -> None:
        """Недесятичные коды формата не реализованы"""
        with pytest.raises(UnsupportedRadixError):
            format(BigInt(255), spec)

    def test_unknown_format_spec(self) -> None:
        """Прочие коды формата -> ValueError"""
        with pytest.raises(ValueError, match="Unknown format code"):
            format(BigInt(1), ">10")

    def test_non_decimal_radix_raises(self) -> None:
        """format_big_int с HEX"""
        with pytest.raises(UnsupportedRadixError):
            format_big_int(BigInt(1), Radix.HEX)

    def test_agrees_with_int(self) -> None:
        """Совпадает с str(int)"""
        rng = random.Random(51)
        for _ in range(40):
            value = rng.getrandbits(rng.randint(1, 600)) * rng.choice((1, -1))
            assert str(BigInt(value)) == str(value)


# =============================================================================
# ROUND TRIP
# =============================================================================


class TestRoundTrip:
    """Тесты parse(format(x)) и format(parse(s))"""

    def test_canonical_numerals(self) -> None:
        """Каноническая запись восстанавливается без изменений"""
        for text in ("0", "1", "-1", "4294967296", "-18446744073709551616", "1" + "0" * 80):
            assert str(parse_big_int(text).value) == text

    def test_random_values(self) -> None:
        """parse(format(x)) == x"""
        rng = random.Random(52)
        for _ in range(30):
            value = BigInt(rng.getrandbits(rng.randint(1, 400)) * rng.choice((1, -1)))
            result = parse_big_int(format_big_int(value))
            assert result.ok
            assert result.value == value


# =============================================================================
# FROM_STRING
# =============================================================================


class TestFromString:
    """Тесты строгого BigInt.from_string"""

    def test_valid(self) -> None:
        """Окружающие пробелы допустимы"""
        assert BigInt.from_string("  -123  ") == -123
        assert BigInt.from_string("99999999999999999999") == 99999999999999999999

    @pytest.mark.parametrize("text", ["", "  ", "12a", "1 2", "-", "0x10"])
    def test_invalid_raises(self, text: str) -> None:
        """Строка должна быть числом целиком"""
        with pytest.raises(BigIntParseError, match="Invalid decimal integer"):
            BigInt.from_string(text)

    def test_parse_error_is_value_error(self) -> None:
        """BigIntParseError наследует ValueError"""
        with pytest.raises(ValueError):
            BigInt.from_string("nope")

    def test_non_decimal_radix_raises(self) -> None:
        """Radix проверяется до разбора"""
        with pytest.raises(UnsupportedRadixError):
            BigInt.from_string("10", radix="hex")
