"""
Logging — настройка логгеров пакета

Библиотека сама обработчики не устанавливает (в корне пакета висит
NullHandler). Приложение, использующее арифметику, может вызвать
setup_logger(), чтобы увидеть DEBUG-сообщения о выборе пути деления
и отклонённом вводе.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

LOGGER_NAME = "shamir_bigint"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logger(
    name: str = LOGGER_NAME,
    log_file: Optional[str] = None,
    log_level: Union[int, str] = logging.INFO,
    max_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    console: bool = True,
    format_str: Optional[str] = None,
) -> logging.Logger:
    """
    Настройка логгера.

    Существующие обработчики логгера заменяются новыми.

    Args:
        name: Имя логгера (default: корневой логгер пакета)
        log_file: Путь к лог-файлу; None — без записи в файл
        log_level: Уровень логирования (int или имя, например "DEBUG")
        max_size: Максимальный размер лог-файла (байты) до ротации
        backup_count: Количество файлов ротации
        console: Выводить ли в stderr
        format_str: Формат сообщений; None — DEFAULT_FORMAT

    Returns:
        Настроенный logging.Logger
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_str or DEFAULT_FORMAT)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_size,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Логгер модуля внутри иерархии пакета."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
