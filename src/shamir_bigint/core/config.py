"""Конфигурация конверсий BigInteger (текст ↔ значение)."""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """Конфигурация разбора десятичного текста.

    max_digits: максимальное число цифр во входном тексте (без знака).
        None — без ограничения. Защищает от неограниченно длинного ввода
        из внешних источников.
    """

    max_digits: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_digits is not None and self.max_digits <= 0:
            raise ValueError(f"max_digits must be positive, got {self.max_digits}")


DEFAULT_CONVERSION_CONFIG = ConversionConfig()
