"""Эндпоинты `/api/employee` (подпись зарплаты) и `/api/verify` (проверка)."""

import time

import structlog
from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import JSONResponse

from hmac_auth.metrics import hmac_verifications_total, request_latency_seconds, requests_total
from hmac_auth.services.employee import Employee, create_employee, verify_salary
from hmac_auth.services.hmac_codec import HmacCodec
from hmac_auth.services.result import ClientError, Outcome
from hmac_auth.settings import get_settings

router = APIRouter()
log = structlog.get_logger()

_codec: HmacCodec | None = None


def get_codec() -> HmacCodec:
    """Кодек с секретом из настроек (один на процесс)."""
    global _codec
    if _codec is None:
        _codec = HmacCodec(key=get_settings().hmac_secret)
    return _codec


def client_error_response(status_code: int = 400) -> Response:
    """Единый ответ на любую ошибку: 400 без тела (детали только в логах)."""
    return Response(status_code=status_code)


def _respond(endpoint: str, outcome: Outcome, t0: float) -> Response:
    if isinstance(outcome, ClientError):
        status = outcome.reason
        log.info("request_rejected", endpoint=endpoint, reason=outcome.reason)
        resp = client_error_response(outcome.status_code)
    else:
        status = "ok"
        resp = JSONResponse(content=outcome.value)

    requests_total.labels(endpoint=endpoint, status=status).inc()
    request_latency_seconds.labels(endpoint=endpoint).observe(time.time() - t0)
    return resp


@router.post("/employee")
def employee(payload: Employee, codec: HmacCodec = Depends(get_codec)) -> Response:
    t0 = time.time()
    outcome = create_employee(payload, codec)
    return _respond("employee", outcome, t0)


@router.get("/verify")
def verify(
    salary: str = Query(...),
    hmac: str = Query(...),
    codec: HmacCodec = Depends(get_codec),
) -> Response:
    t0 = time.time()
    outcome = verify_salary(salary, hmac, codec)
    if not isinstance(outcome, ClientError):
        result = "match" if outcome.value else "mismatch"
        hmac_verifications_total.labels(result=result).inc()
        log.info("hmac_verified", result=result)
    return _respond("verify", outcome, t0)
