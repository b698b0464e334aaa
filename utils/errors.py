from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class InvalidPaginationParameter(ValueError):
    """Raised when ``page`` or ``per_page`` is not a positive integer."""

    code = "invalid_pagination_parameter"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, parameter: str, value: Any):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} must be a positive integer, got {value!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": str(self), "code": self.code, "hint": self.parameter}


def setup_error_handlers(app: FastAPI) -> None:
    log = logging.getLogger("api.error")

    @app.exception_handler(InvalidPaginationParameter)
    async def handle_invalid_pagination(request: Request, exc: InvalidPaginationParameter):
        log.warning("invalid pagination on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=exc.http_status, content=exc.to_dict())
