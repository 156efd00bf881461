from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Failure rendered to clients as ``{"error": ..., "details": ...}``."""

    def __init__(
        self,
        status_code: int,
        error: str,
        details: Any = None,
    ) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_content(self) -> dict[str, Any]:
        content: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            content["details"] = jsonable_encoder(self.details)
        return content


async def _handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def _handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected malformed request to %s", request.url.path)
    error = ApiError(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request body",
        details=exc.errors(),
    )
    return JSONResponse(status_code=error.status_code, content=error.to_content())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _handle_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)  # type: ignore[arg-type]
