"""
BigInteger — знаковое целое произвольной точности

Immutable Pydantic модель (frozen=True): знак + magnitude из limbs
в основании 10^9, младший limb первым. Все операции возвращают новый
экземпляр, операнды не изменяются, поэтому значения можно свободно
разделять между потоками без блокировок.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (каноническая форма, проверяются валидаторами):
1. magnitude не пустая
2. нет старших нулевых limbs, ноль — ровно (0,)
3. ноль никогда не отрицательный
4. каждый limb в [0, 10^9)

Каноническая форма единственна для каждого значения, поэтому
структурное равенство полей совпадает с равенством значений.

Операции:
- сложение / вычитание / отрицание: знак и относительная величина
  разрешаются напрямую (без взаимной рекурсии через отрицание)
- умножение: школьная свёртка, знак = XOR знаков
- деление: усечение к нулю; divmod_trunc возвращает и остаток
- сравнение: <, <=, ==, >, >=, compare()
- текст: parse() / to_string(), parse(to_string(x)) == x
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shamir_bigint.core.config import ConversionConfig
from shamir_bigint.core.errors import DivisionByZero
from shamir_bigint.core.math.decimal_codec import format_decimal, parse_decimal
from shamir_bigint.core.math.limbs import (
    BASE,
    Magnitude,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    int_to_magnitude,
    is_zero_magnitude,
    magnitude_to_int,
    mul_magnitudes,
    normalize,
    sub_magnitudes,
)


# =============================================================================
# BIGINTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Создаётся через BigInteger.from_int(), BigInteger.parse(),
    BigInteger.coerce() или как результат арифметики.
    BigInteger() без аргументов — канонический ноль.

    Прямое создание с неканоническими полями отклоняется
    (pydantic.ValidationError).
    """

    negative: bool = Field(False, description="True iff значение строго отрицательное")
    magnitude: tuple[int, ...] = Field(
        (0,), description="Limbs в [0, 10^9), младший первым"
    )

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка limbs: непустая, в диапазоне, без старших нулей."""
        if not v:
            raise ValueError("magnitude must hold at least one limb")
        for limb in v:
            if not 0 <= limb < BASE:
                raise ValueError(f"limb {limb} outside [0, {BASE})")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("magnitude has a redundant most-significant zero limb")
        return v

    @model_validator(mode="after")
    def validate_unsigned_zero(self) -> "BigInteger":
        """Ноль не имеет знака."""
        if self.negative and is_zero_magnitude(self.magnitude):
            raise ValueError("zero must not be negative")
        return self

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Построение из нативного int.

        Raises:
            TypeError: Если value не int (bool тоже отклоняется)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls(negative=value < 0, magnitude=int_to_magnitude(abs(value)))

    @classmethod
    def parse(cls, text: str, config: Optional[ConversionConfig] = None) -> "BigInteger":
        """
        Построение из десятичного текста -?[0-9]+.

        Raises:
            InvalidFormat: Пустой текст, одиночный знак, нецифровые символы
                или превышение config.max_digits
        """
        negative, magnitude = parse_decimal(text, config)
        return cls(negative=negative, magnitude=magnitude)

    @classmethod
    def coerce(cls, value: Union["BigInteger", int, str]) -> "BigInteger":
        """Приведение BigInteger / int / str к BigInteger."""
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        return cls.from_int(value)

    # -------------------------------------------------------------------------
    # Predicates / conversions
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def to_string(self) -> str:
        """Каноническая десятичная запись."""
        return format_decimal(self.negative, self.magnitude)

    def to_int(self) -> int:
        value = magnitude_to_int(self.magnitude)
        return -value if self.negative else value

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Negation
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        """Смена знака; ноль остаётся нулём без знака."""
        return _from_parts(not self.negative, self.magnitude)

    def absolute(self) -> "BigInteger":
        return _from_parts(False, self.magnitude)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.absolute()

    # -------------------------------------------------------------------------
    # Addition / subtraction
    # -------------------------------------------------------------------------

    def add(self, other: "BigInteger") -> "BigInteger":
        return _signed_sum(self.negative, self.magnitude, other.negative, other.magnitude)

    def subtract(self, other: "BigInteger") -> "BigInteger":
        # a - b == a + (-b); ноль с перевёрнутым знаком обрабатывается _signed_sum
        return _signed_sum(self.negative, self.magnitude, not other.negative, other.magnitude)

    def __add__(self, other: Union["BigInteger", int]) -> "BigInteger":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    __radd__ = __add__

    def __sub__(self, other: Union["BigInteger", int]) -> "BigInteger":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: Union["BigInteger", int]) -> "BigInteger":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    # -------------------------------------------------------------------------
    # Multiplication
    # -------------------------------------------------------------------------

    def multiply(self, other: "BigInteger") -> "BigInteger":
        return _from_parts(
            self.negative != other.negative,
            mul_magnitudes(self.magnitude, other.magnitude),
        )

    def __mul__(self, other: Union["BigInteger", int]) -> "BigInteger":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Division (truncating toward zero)
    # -------------------------------------------------------------------------

    def divmod_trunc(self, other: "BigInteger") -> tuple["BigInteger", "BigInteger"]:
        """
        Деление с остатком, частное усечено к нулю.

        self == q * other + r, |r| < |other|, знак r совпадает со знаком self
        (или r == 0).

        Raises:
            DivisionByZero: Если other == 0 (для любого делимого)
        """
        if other.is_zero():
            raise DivisionByZero(f"division of {self} by zero")

        q, r = divmod_magnitudes(self.magnitude, other.magnitude)
        return (
            _from_parts(self.negative != other.negative, q),
            _from_parts(self.negative, r),
        )

    def divide(self, other: "BigInteger") -> "BigInteger":
        """
        Частное, усечённое к нулю.

        Raises:
            DivisionByZero: Если other == 0
        """
        quotient, _ = self.divmod_trunc(other)
        return quotient

    def __truediv__(self, other: Union["BigInteger", int]) -> "BigInteger":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: Union["BigInteger", int]) -> "BigInteger":
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "BigInteger") -> int:
        """
        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        if self.negative != other.negative:
            return -1 if self.negative else 1

        result = compare_magnitudes(self.magnitude, other.magnitude)
        return -result if self.negative else result

    def __eq__(self, other: object) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.negative == operand.negative and self.magnitude == operand.magnitude

    def __hash__(self) -> int:
        # Согласовано с hash(int), т.к. __eq__ принимает int-операнды
        return hash(self.to_int())

    def __lt__(self, other: Union["BigInteger", int]) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) < 0

    def __le__(self, other: Union["BigInteger", int]) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) <= 0

    def __gt__(self, other: Union["BigInteger", int]) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) > 0

    def __ge__(self, other: Union["BigInteger", int]) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) >= 0


# =============================================================================
# HELPERS
# =============================================================================


def _from_parts(negative: bool, limbs: Magnitude) -> BigInteger:
    negative, magnitude = normalize(negative, limbs)
    return BigInteger(negative=negative, magnitude=magnitude)


def _signed_sum(
    a_negative: bool,
    a: Magnitude,
    b_negative: bool,
    b: Magnitude,
) -> BigInteger:
    """
    Сумма двух знаковых magnitudes.

    Одинаковые знаки → сложение magnitudes с общим знаком.
    Разные знаки → из большей magnitude вычитается меньшая,
    результат получает знак большей; равные magnitudes дают ноль.
    """
    if a_negative == b_negative:
        return _from_parts(a_negative, add_magnitudes(a, b))

    order = compare_magnitudes(a, b)
    if order == 0:
        return BigInteger()
    if order > 0:
        return _from_parts(a_negative, sub_magnitudes(a, b))
    return _from_parts(b_negative, sub_magnitudes(b, a))


def _coerce_operand(value: object) -> Optional[BigInteger]:
    """BigInteger или int → BigInteger; иначе None (операторы вернут NotImplemented)."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None
