"""
Errors — Ошибки арифметики BigInteger

Два различимых вида ошибок, оба пробрасываются вызывающему коду напрямую:
- InvalidFormat: некорректный десятичный текст (или противоречивый контракт)
- DivisionByZero: делитель равен нулю

Sentinel-значения и "тихое" восстановление не используются.
"""


class BigIntegerError(Exception):
    """Базовая ошибка пакета shamir_bigint."""

    pass


class InvalidFormat(BigIntegerError, ValueError):
    """
    Некорректный десятичный текст при построении BigInteger.

    Возникает, если текст пустой, состоит только из знака,
    содержит нецифровые символы или превышает ConversionConfig.max_digits.
    Частично построенное значение никогда не возвращается.
    """

    pass


class DivisionByZero(BigIntegerError, ZeroDivisionError):
    """
    Деление на ноль.

    Возникает для любого делимого (включая ноль), если magnitude делителя
    равна нулю. Повторных попыток не делается.
    """

    pass
