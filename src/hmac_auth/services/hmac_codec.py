"""HMAC-кодек: HMAC-SHA256 от строки -> lowercase hex, и проверка дайджеста."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass

DEFAULT_ALGORITHM = "sha256"


class AlgorithmUnavailable(RuntimeError):
    """Хэш-примитив не удалось инициализировать (на практике недостижимо)."""


def compute(data: str, key: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Возвращает HMAC(`key`, `data`) в виде lowercase hex (для SHA-256 — 64 символа).

    Обе строки кодируются в UTF-8. Чистая функция, без побочных эффектов.
    """
    try:
        # hashlib.new бросает ValueError для неизвестного/отключённого алгоритма.
        hashlib.new(algorithm)
    except ValueError as e:
        raise AlgorithmUnavailable(f"Hash algorithm is not available: {algorithm}") from e

    return hmac.new(key.encode("utf-8"), data.encode("utf-8"), algorithm).hexdigest()


def verify(data: str, key: str, candidate_hex: str, algorithm: str = DEFAULT_ALGORITHM) -> bool:
    """Пересчитывает HMAC и сравнивает с `candidate_hex`.

    Сравнение регистрозависимое и за постоянное время. Несовпадение — просто `False`.
    """
    expected = compute(data, key, algorithm)
    return hmac.compare_digest(expected.encode("utf-8"), candidate_hex.encode("utf-8"))


@dataclass(frozen=True)
class HmacCodec:
    """Кодек с привязанным секретом (секрет задаётся один раз на процесс)."""

    key: str
    algorithm: str = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("HMAC key must not be empty")

    def compute(self, data: str) -> str:
        return compute(data, self.key, self.algorithm)

    def verify(self, data: str, candidate_hex: str) -> bool:
        return verify(data, self.key, candidate_hex, self.algorithm)

    def __repr__(self) -> str:
        # Секрет не должен попадать в логи/трейсбеки.
        return f"HmacCodec(key=<redacted>, algorithm={self.algorithm!r})"
