"""FastAPI приложение (роутеры + логирование + единый 400 на ошибки запроса)."""

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from hmac_auth import __version__
from hmac_auth.api.employee import client_error_response
from hmac_auth.api.employee import router as employee_router
from hmac_auth.api.well_known import router as well_known_router
from hmac_auth.infrastructure.logging import configure_logging
from hmac_auth.metrics import requests_total

log = structlog.get_logger()


async def _on_validation_error(request: Request, exc: RequestValidationError) -> Response:
    """Невалидный JSON / нет обязательного параметра -> пустой 400 (а не 422)."""
    endpoint = request.url.path.rstrip("/").rsplit("/", 1)[-1] or "-"
    log.info(
        "request_rejected",
        endpoint=endpoint,
        reason="invalid_request",
        errors=len(exc.errors()),
    )
    requests_total.labels(endpoint=endpoint, status="invalid_request").inc()
    return client_error_response()


def create_app() -> FastAPI:
    """Собирает FastAPI приложение."""
    configure_logging()

    app = FastAPI(title="HMAC Auth", version=__version__)
    app.add_exception_handler(RequestValidationError, _on_validation_error)

    app.include_router(well_known_router)
    app.include_router(employee_router, prefix="/api")
    return app


app = create_app()
