"""Результат операции: `Success` или `ClientError` (без исключений на границе с HTTP)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Success:
    """Успешный результат: `value` уходит клиенту как JSON."""

    value: Any


@dataclass(frozen=True)
class ClientError:
    """Ошибка для клиента. Наружу — пустой 400, `reason` только для логов и метрик."""

    reason: str
    status_code: int = 400


Outcome = Union[Success, ClientError]
