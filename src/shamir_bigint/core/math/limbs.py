"""
Limbs — арифметика над magnitude в основании 10^9

Magnitude — кортеж limbs, каждый в [0, BASE), младший limb первым.
Все функции чистые: принимают кортежи/последовательности и возвращают
новые нормализованные кортежи, аргументы не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не пустой: ноль — ровно (0,)
2. Нет старших нулевых limbs (кроме единственного limb нуля)
3. Каждый limb в [0, BASE); переносы/заёмы распространены полностью
4. Отрицательный ноль невозможен после normalize()

Деление:
- fast path: делитель из одного limb, делимое не длиннее двух limbs
  → нативное целочисленное деление
- short division: делитель из одного limb → деление limb за limb
- long division: по одному limb частного на каждый limb делимого,
  limb частного ищется бинарным поиском в [0, BASE)
"""

from typing import Final, Sequence

from shamir_bigint.core.errors import DivisionByZero
from shamir_bigint.core.log import get_logger

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одном limb
LIMB_DIGITS: Final[int] = 9

# Основание системы счисления limbs
BASE: Final[int] = 10**LIMB_DIGITS

Magnitude = tuple[int, ...]

ZERO_MAGNITUDE: Final[Magnitude] = (0,)
ONE_MAGNITUDE: Final[Magnitude] = (1,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_magnitude(limbs: Sequence[int]) -> Magnitude:
    """
    Удаление старших нулевых limbs.

    Args:
        limbs: Последовательность limbs (младший первым), может быть пустой

    Returns:
        Канонический кортеж; пустой вход и все нули дают (0,)

    Examples:
        >>> normalize_magnitude([5, 0, 0])
        (5,)
        >>> normalize_magnitude([])
        (0,)
    """
    end = len(limbs)
    while end > 1 and limbs[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO_MAGNITUDE
    return tuple(limbs[:end])


def normalize(negative: bool, limbs: Sequence[int]) -> tuple[bool, Magnitude]:
    """
    Приведение пары (negative, limbs) к канонической форме.

    Ноль всегда получает negative=False.

    Examples:
        >>> normalize(True, [0, 0])
        (False, (0,))
        >>> normalize(True, [7, 0])
        (True, (7,))
    """
    magnitude = normalize_magnitude(limbs)
    if is_zero_magnitude(magnitude):
        negative = False
    return negative, magnitude


def is_zero_magnitude(magnitude: Sequence[int]) -> bool:
    """True если нормализованная magnitude равна нулю."""
    return len(magnitude) == 1 and magnitude[0] == 0


# =============================================================================
# КОНВЕРСИЯ С НАТИВНЫМ int
# =============================================================================


def int_to_magnitude(value: int) -> Magnitude:
    """
    Разбиение неотрицательного int на limbs (младший первым).

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")
    if value == 0:
        return ZERO_MAGNITUDE

    limbs = []
    while value > 0:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
    return tuple(limbs)


def magnitude_to_int(magnitude: Sequence[int]) -> int:
    """Сборка неотрицательного int из limbs (схема Горнера)."""
    value = 0
    for limb in reversed(magnitude):
        value = value * BASE + limb
    return value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение нормализованных magnitudes.

    Сначала по длине, затем limb за limb начиная со старшего.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Школьное сложение с переносом.

    Examples:
        >>> add_magnitudes((999999999,), (1,))
        (0, 1)
    """
    result = []
    carry = 0
    for i in range(max(len(a), len(b))):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, limb = divmod(total, BASE)
        result.append(limb)

    if carry:
        result.append(carry)
    return normalize_magnitude(result)


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Школьное вычитание с заёмом: a - b при a >= b.

    Raises:
        ValueError: Если a < b (результат был бы отрицательным)

    Examples:
        >>> sub_magnitudes((0, 1), (1,))
        (999999999,)
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("sub_magnitudes requires a >= b")

    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]

        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    return normalize_magnitude(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_small(a: Sequence[int], factor: int) -> Magnitude:
    """
    Умножение magnitude на один limb factor в [0, BASE).

    Raises:
        ValueError: Если factor вне [0, BASE)
    """
    if not 0 <= factor < BASE:
        raise ValueError(f"factor must be in [0, {BASE}), got {factor}")
    if factor == 0 or is_zero_magnitude(a):
        return ZERO_MAGNITUDE

    result = []
    carry = 0
    for limb in a:
        carry, limb = divmod(limb * factor + carry, BASE)
        result.append(limb)
    if carry:
        result.append(carry)
    return normalize_magnitude(result)


def mul_magnitudes(a: Sequence[int], b: Sequence[int]) -> Magnitude:
    """
    Школьное умножение (свёртка) с распространением переноса.

    Сложность O(n·m) limb-операций для операндов из n и m limbs.
    Длина результата не превышает n + m.

    Examples:
        >>> mul_magnitudes((123456789,), (987654321,))
        (112635269, 121932631)
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return ZERO_MAGNITUDE

    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if x == 0:
            continue
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)

        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1

    return normalize_magnitude(result)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_small(a: Sequence[int], divisor: int) -> tuple[Magnitude, int]:
    """
    Short division: деление magnitude на один limb.

    Args:
        a: Делимое (magnitude)
        divisor: Делитель в [1, BASE)

    Returns:
        (частное, остаток); остаток — нативный int в [0, divisor)

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if divisor == 0:
        raise DivisionByZero("division by zero")
    if not 0 < divisor < BASE:
        raise ValueError(f"divisor must be in [1, {BASE}), got {divisor}")

    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        quotient[i], remainder = divmod(remainder * BASE + a[i], divisor)
    return normalize_magnitude(quotient), remainder


def _max_quotient_limb(divisor: Sequence[int], remainder: Magnitude) -> int:
    """Наибольший q в [0, BASE) такой, что divisor * q <= remainder."""
    lo, hi = 0, BASE - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if compare_magnitudes(mul_small(divisor, mid), remainder) <= 0:
            lo = mid
        else:
            hi = mid - 1
    return lo


def divmod_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[Magnitude, Magnitude]:
    """
    Деление magnitudes с остатком: a = q * b + r, 0 <= r < b.

    Args:
        a: Делимое (нормализованная magnitude)
        b: Делитель (нормализованная magnitude)

    Returns:
        (q, r) — нормализованные magnitudes

    Raises:
        DivisionByZero: Если b == 0
    """
    if is_zero_magnitude(b):
        raise DivisionByZero("division by zero")

    if compare_magnitudes(a, b) < 0:
        return ZERO_MAGNITUDE, normalize_magnitude(a)

    if len(b) == 1 and len(a) <= 2:
        logger.debug("divmod: fast path (%d-limb dividend)", len(a))
        q, r = divmod(magnitude_to_int(a), b[0])
        return int_to_magnitude(q), int_to_magnitude(r)

    if len(b) == 1:
        logger.debug("divmod: short division (%d-limb dividend)", len(a))
        q, r = divmod_small(a, b[0])
        return q, int_to_magnitude(r)

    logger.debug("divmod: long division (%d by %d limbs)", len(a), len(b))

    quotient = [0] * len(a)
    remainder: Magnitude = ZERO_MAGNITUDE
    for i in range(len(a) - 1, -1, -1):
        # remainder = remainder * BASE + a[i]
        remainder = normalize_magnitude((a[i],) + remainder)
        if compare_magnitudes(remainder, b) < 0:
            continue

        q_limb = _max_quotient_limb(b, remainder)
        remainder = sub_magnitudes(remainder, mul_small(b, q_limb))
        quotient[i] = q_limb

    return normalize_magnitude(quotient), remainder
