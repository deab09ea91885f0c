"""
Тесты для BigInteger — знаковое целое произвольной точности

Проверяет:
1. Построение (from_int, parse, coerce, ноль по умолчанию)
2. Каноническую форму и immutability (frozen=True)
3. Сложение / вычитание / отрицание при всех сочетаниях знаков
4. Умножение и знак результата
5. Деление с усечением к нулю и DivisionByZero
6. Сравнение и хеширование
7. Конкретные сценарии через границы limbs
"""

import pytest
from pydantic import ValidationError

from shamir_bigint import BigInteger, DivisionByZero, InvalidFormat


def big(text: str) -> BigInteger:
    return BigInteger.parse(text)


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


class TestConstruction:
    """Тесты построения BigInteger"""

    def test_default_is_zero(self) -> None:
        zero = BigInteger()
        assert zero.is_zero()
        assert zero.negative is False
        assert zero.magnitude == (0,)

    def test_from_int(self) -> None:
        assert BigInteger.from_int(0).magnitude == (0,)
        assert BigInteger.from_int(-5) == big("-5")
        assert BigInteger.from_int(10**18).magnitude == (0, 0, 1)

    def test_from_int_wide(self) -> None:
        value = -(2**255 + 12345)
        assert BigInteger.from_int(value).to_int() == value

    def test_from_int_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            BigInteger.from_int(1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            BigInteger.from_int(True)

    def test_parse_and_from_int_agree(self) -> None:
        assert big("-123456789012345678901234567890") == BigInteger.from_int(
            -123456789012345678901234567890
        )

    @pytest.mark.parametrize("text", ["", "-", "12a3", "--5"])
    def test_malformed_text(self, text: str) -> None:
        with pytest.raises(InvalidFormat):
            BigInteger.parse(text)

    def test_negative_zero_text_is_canonical(self) -> None:
        zero = big("-0")
        assert zero.negative is False
        assert zero == BigInteger()

    def test_coerce(self) -> None:
        value = big("77")
        assert BigInteger.coerce(value) is value
        assert BigInteger.coerce(77) == value
        assert BigInteger.coerce("77") == value
        with pytest.raises(TypeError):
            BigInteger.coerce(7.7)  # type: ignore[arg-type]


class TestCanonicalForm:
    """Инварианты канонической формы проверяются при создании модели"""

    def test_valid_direct_construction(self) -> None:
        value = BigInteger(negative=True, magnitude=(0, 1))
        assert value == big("-1000000000")

    def test_empty_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError, match="at least one limb"):
            BigInteger(negative=False, magnitude=())

    def test_leading_zero_limb_rejected(self) -> None:
        with pytest.raises(ValidationError, match="most-significant zero limb"):
            BigInteger(negative=False, magnitude=(1, 0))

    def test_limb_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="outside"):
            BigInteger(negative=False, magnitude=(1_000_000_000,))
        with pytest.raises(ValidationError, match="outside"):
            BigInteger(negative=False, magnitude=(-1,))

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="zero must not be negative"):
            BigInteger(negative=True, magnitude=(0,))

    def test_strict_types(self) -> None:
        with pytest.raises(ValidationError):
            BigInteger(negative=False, magnitude=["1"])  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        value = big("5")
        with pytest.raises(ValidationError):
            value.negative = True  # type: ignore[misc]

    def test_operations_do_not_mutate_operands(self) -> None:
        a, b = big("-999999999999"), big("1")
        _ = a + b, a - b, a * b, a / b, -a
        assert a == big("-999999999999")
        assert b == big("1")


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ / ОТРИЦАНИЕ
# =============================================================================


class TestAdditionSubtraction:
    """Тесты сложения и вычитания при всех сочетаниях знаков"""

    def test_carry_across_limb_boundary(self) -> None:
        assert big("999999999") + big("1") == big("1000000000")

    def test_borrow_across_limb_boundary(self) -> None:
        assert big("1000000000") - big("1") == big("999999999")

    def test_mixed_signs(self) -> None:
        assert big("-5") + big("3") == big("-2")
        assert big("5") + big("-3") == big("2")
        assert big("-3") + big("5") == big("2")
        assert big("3") + big("-5") == big("-2")

    @pytest.mark.parametrize(
        "a,b",
        [
            (5, 3), (3, 5), (-5, 3), (-3, 5), (5, -3), (3, -5), (-5, -3), (-3, -5),
            (0, 0), (0, -7), (-7, 0), (7, 7), (-7, -7), (7, -7),
            (10**30, -(10**30) + 1), (-(10**27), 10**9),
        ],
    )
    def test_every_sign_combination(self, a: int, b: int) -> None:
        x, y = BigInteger.from_int(a), BigInteger.from_int(b)
        assert (x + y).to_int() == a + b
        assert (x - y).to_int() == a - b

    def test_subtract_zero(self) -> None:
        assert big("-42") - BigInteger() == big("-42")
        assert BigInteger() - big("-42") == big("42")

    def test_self_cancellation_is_unsigned_zero(self) -> None:
        a = big("-123456789123456789")
        assert (a - a).negative is False
        assert (a + (-a)) == BigInteger()

    def test_negation(self) -> None:
        assert -big("5") == big("-5")
        assert -big("-5") == big("5")
        assert -BigInteger() == BigInteger()
        assert (-BigInteger()).negative is False
        assert +big("-5") == big("-5")

    def test_absolute(self) -> None:
        assert abs(big("-1000000000")) == big("1000000000")
        assert big("7").absolute() == big("7")


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


class TestMultiplication:
    """Тесты умножения"""

    def test_known_product(self) -> None:
        assert big("123456789") * big("987654321") == big("121932631112635269")

    @pytest.mark.parametrize(
        "a,b,expected",
        [("-3", "4", "-12"), ("3", "-4", "-12"), ("-3", "-4", "12"), ("3", "4", "12")],
    )
    def test_sign_is_xor(self, a: str, b: str, expected: str) -> None:
        assert big(a) * big(b) == big(expected)

    def test_zero_product_is_unsigned(self) -> None:
        product = big("-123456789012") * BigInteger()
        assert product == BigInteger()
        assert product.negative is False

    def test_large(self) -> None:
        a = 2**521 - 1
        b = -(3**200)
        assert (BigInteger.from_int(a) * BigInteger.from_int(b)).to_int() == a * b


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


class TestDivision:
    """Тесты деления с усечением к нулю"""

    def test_exact_limb_boundary(self) -> None:
        assert big("1000000000000000000") / big("1000000000") == big("1000000000")

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("7", "2", "3"),
            ("-7", "2", "-3"),
            ("7", "-2", "-3"),
            ("-7", "-2", "3"),
            ("1", "2", "0"),
            ("-1", "2", "0"),
            ("0", "-5", "0"),
        ],
    )
    def test_truncates_toward_zero(self, a: str, b: str, expected: str) -> None:
        quotient = big(a) / big(b)
        assert quotient == big(expected)
        if quotient.is_zero():
            assert quotient.negative is False

    @pytest.mark.parametrize("dividend", ["0", "1", "-1", "123456789012345678901234567890"])
    def test_division_by_zero(self, dividend: str) -> None:
        with pytest.raises(DivisionByZero):
            big(dividend) / BigInteger()
        with pytest.raises(ZeroDivisionError):
            big(dividend).divide(BigInteger())

    def test_divmod_trunc_identity(self) -> None:
        for a, b in [(7, 2), (-7, 2), (7, -2), (-7, -2), (10**40 + 3, 10**20 - 7), (-(10**40), 999)]:
            x, y = BigInteger.from_int(a), BigInteger.from_int(b)
            q, r = x.divmod_trunc(y)
            assert q * y + r == x
            assert abs(r) < abs(y)
            assert r.is_zero() or r.negative == x.negative

    def test_divmod_trunc_remainder_sign(self) -> None:
        q, r = big("-7").divmod_trunc(big("2"))
        assert q == big("-3")
        assert r == big("-1")


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestComparison:
    """Тесты сравнения"""

    def test_negative_less_than_positive(self) -> None:
        assert big("-1000000000") < big("1")

    def test_more_negative_is_smaller(self) -> None:
        assert big("-1000000000") < big("-999999999")
        assert big("-2") < big("-1")
        assert not (big("-1") < big("-2"))

    def test_longer_magnitude_is_larger(self) -> None:
        assert big("1000000000") > big("999999999")

    def test_compare_returns_sign(self) -> None:
        assert big("5").compare(big("7")) == -1
        assert big("7").compare(big("7")) == 0
        assert big("-5").compare(big("-7")) == 1

    def test_all_operators(self) -> None:
        a, b = big("-3"), big("4")
        assert a < b and a <= b and b > a and b >= a
        assert a != b
        assert a >= big("-3") and a <= big("-3")

    def test_zero_equals_zero(self) -> None:
        assert big("0") == big("-0") == BigInteger.from_int(0) == BigInteger()

    def test_sorting(self) -> None:
        values = [5, -10**20, 0, 10**9, -1, 999_999_999]
        ordered = sorted(BigInteger.from_int(v) for v in values)
        assert [v.to_int() for v in ordered] == sorted(values)

    def test_not_equal_to_other_types(self) -> None:
        assert big("5") != "5"
        assert big("5") != 5.0
        with pytest.raises(TypeError):
            _ = big("5") < "6"

    def test_hash_consistent_with_equality(self) -> None:
        assert hash(big("-0")) == hash(BigInteger())
        assert hash(big("12345678901234567890")) == hash(12345678901234567890)
        assert len({big("1"), BigInteger.from_int(1), big("01")}) == 1


# =============================================================================
# ВЗАИМОДЕЙСТВИЕ С int И КОНВЕРСИИ
# =============================================================================


class TestNativeInterop:
    """Тесты операций с int-операндами и конверсий"""

    def test_int_operands(self) -> None:
        x = big("1000000000")
        assert x + 1 == big("1000000001")
        assert 1 + x == big("1000000001")
        assert x - 1 == big("999999999")
        assert 1 - x == big("-999999999")
        assert x * 2 == 2 * x == big("2000000000")
        assert x / 3 == big("333333333")
        assert 10**18 / x == x

    def test_comparison_with_int(self) -> None:
        assert big("5") == 5
        assert big("-5") < 0
        assert big("10000000000") > 9_999_999_999

    def test_bool_operand_not_coerced(self) -> None:
        with pytest.raises(TypeError):
            _ = big("1") + True

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            _ = big("1") + 1.0  # type: ignore[operator]

    def test_conversions(self) -> None:
        x = big("-1000000000000000000000")
        assert int(x) == -(10**21)
        assert str(x) == "-1000000000000000000000"
        assert repr(x) == "BigInteger('-1000000000000000000000')"
        assert bool(x)
        assert not bool(BigInteger())
