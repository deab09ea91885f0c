"""
Decimal Codec — десятичный текст ↔ (negative, magnitude)

Формат входа: -?[0-9]+ (только ASCII-цифры).
- Пустая строка, одиночный "-", "--5", "12a3" → InvalidFormat
- Ведущие нули допускаются и отбрасываются; "-0" → ноль без знака

Формат выхода (канонический):
- "-" только для ненулевого отрицательного значения
- старший limb без дополнения, остальные — ровно 9 цифр с ведущими нулями
- ноль → "0"

Инвариант: parse_decimal(format_decimal(x)) == x для любого канонического x.
"""

import re
from typing import Final, Optional, Pattern, Sequence

from shamir_bigint.core.config import DEFAULT_CONVERSION_CONFIG, ConversionConfig
from shamir_bigint.core.errors import InvalidFormat
from shamir_bigint.core.log import get_logger
from shamir_bigint.core.math.limbs import (
    LIMB_DIGITS,
    Magnitude,
    is_zero_magnitude,
    normalize,
)

logger = get_logger(__name__)

DECIMAL_PATTERN: Final[Pattern[str]] = re.compile(r"-?[0-9]+")


def parse_decimal(
    text: str,
    config: Optional[ConversionConfig] = None,
) -> tuple[bool, Magnitude]:
    """
    Разбор десятичного текста в каноническую пару (negative, magnitude).

    Текст режется справа налево на куски по LIMB_DIGITS цифр; последний
    (старший) кусок может быть короче.

    Args:
        text: Десятичный текст
        config: Ограничения разбора (default: DEFAULT_CONVERSION_CONFIG)

    Returns:
        (negative, magnitude) в канонической форме

    Raises:
        TypeError: Если text не str
        InvalidFormat: Если текст не соответствует -?[0-9]+ или длиннее
            config.max_digits цифр

    Examples:
        >>> parse_decimal("-1000000000")
        (True, (0, 1))
        >>> parse_decimal("-000")
        (False, (0,))
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal text must be str, got {type(text).__name__}")

    config = config or DEFAULT_CONVERSION_CONFIG

    if DECIMAL_PATTERN.fullmatch(text) is None:
        logger.debug("rejected decimal text of length %d", len(text))
        raise InvalidFormat(f"invalid decimal integer literal: {text!r}")

    negative = text[0] == "-"
    digits = text[1:] if negative else text

    if config.max_digits is not None and len(digits) > config.max_digits:
        logger.debug("rejected decimal text: %d digits > %d", len(digits), config.max_digits)
        raise InvalidFormat(
            f"decimal integer literal has {len(digits)} digits, "
            f"limit is {config.max_digits}"
        )

    limbs = [
        int(digits[max(0, end - LIMB_DIGITS):end])
        for end in range(len(digits), 0, -LIMB_DIGITS)
    ]
    return normalize(negative, limbs)


def format_decimal(negative: bool, magnitude: Sequence[int]) -> str:
    """
    Каноническая десятичная запись.

    Examples:
        >>> format_decimal(True, (5, 1))
        '-1000000005'
        >>> format_decimal(False, (0,))
        '0'
    """
    if is_zero_magnitude(magnitude):
        return "0"

    parts = ["-"] if negative else []
    parts.append(str(magnitude[-1]))
    parts.extend(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(magnitude[:-1]))
    return "".join(parts)
