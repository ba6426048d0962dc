"""HMAC Auth: подпись и проверка зарплаты сотрудника (HMAC-SHA256)."""

__version__ = "0.1.0"
