"""Логирование (JSON через structlog)."""

import logging
import sys

import structlog

from hmac_auth.settings import get_settings

SERVICE_NAME = "hmac-auth"


def _add_service(_logger: object, _method: str, event_dict: dict) -> dict:
    """Добавляет имя сервиса и окружение в каждую запись."""
    settings = get_settings()
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("env", settings.app_env)
    return event_dict


def configure_logging(level_name: str | None = None) -> None:
    """Настраивает stdlib logging + structlog.

    `level_name` перекрывает `LOG_LEVEL` (нужно CLI для `--log-level`).
    """
    settings = get_settings()
    raw = level_name or settings.log_level
    level = getattr(logging, raw.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_service,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
