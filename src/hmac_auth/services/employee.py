"""Операции над сотрудником: подпись зарплаты и проверка подписи."""

from __future__ import annotations

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from hmac_auth.services.hmac_codec import AlgorithmUnavailable, HmacCodec
from hmac_auth.services.result import ClientError, Outcome, Success

log = structlog.get_logger()


# Символы, которые срезает Java `String.trim()`: всё, что <= U+0020.
_TRIM_CHARS = "".join(map(chr, range(0x21)))


class Employee(BaseModel):
    """Сотрудник из тела запроса (живёт только в рамках запроса, не сохраняется)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    emp_name: str | None = Field(default=None, alias="empName")
    emp_salary: str | None = Field(default=None, alias="empSalary")

    @field_validator("emp_name", "emp_salary", mode="before")
    @classmethod
    def _normalize_text(cls, value: object) -> object:
        # Клиенты шлют зарплату и целым числом: `50000` -> "50000". bool — не число.
        # Дробные не принимаем: после json.loads исходная запись числа уже потеряна.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, float):
            raise ValueError("fractional numbers are not accepted, send the value as a string")
        if isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ValueError("text is not valid UTF-8") from e
        return value


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip(_TRIM_CHARS)


def create_employee(employee: Employee, codec: HmacCodec) -> Outcome:
    """Возвращает `{empName, empSalary: <hex>}` или `ClientError`."""
    salary = employee.emp_salary
    if is_blank(salary):
        return ClientError(reason="blank_salary")

    try:
        digest = codec.compute(salary)
    except AlgorithmUnavailable:
        log.error("hmac_unavailable", op="create_employee", algorithm=codec.algorithm, exc_info=True)
        return ClientError(reason="hmac_failed")
    except Exception:
        log.exception("hmac_failed", op="create_employee")
        return ClientError(reason="hmac_failed")

    return Success({"empName": employee.emp_name, "empSalary": digest})


def verify_salary(salary: str, candidate_hex: str, codec: HmacCodec) -> Outcome:
    """Возвращает `Success(True/False)`; несовпадение — не ошибка."""
    try:
        ok = codec.verify(salary, candidate_hex)
    except AlgorithmUnavailable:
        log.error("hmac_unavailable", op="verify_salary", algorithm=codec.algorithm, exc_info=True)
        return ClientError(reason="hmac_failed")
    except Exception:
        log.exception("hmac_failed", op="verify_salary")
        return ClientError(reason="hmac_failed")

    return Success(ok)
