# app/api/errors.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse


class BizError(Exception):
    code = "BIZ_ERROR"
    status = 400

    def __init__(self, message: str, code: str | None = None, status: int | None = None):
        super().__init__(message)
        if code:
            self.code = code
        if status:
            self.status = status
        self.message = message


class ValidationError(BizError):
    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR", status=400)


class NotFoundError(BizError):
    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND", status=404)


class InternalError(BizError):
    def __init__(self, message: str):
        super().__init__(message, code="INTERNAL_ERROR", status=500)


def error_body(message: str) -> Dict[str, Any]:
    return {"success": False, "message": message}


def biz_error_handler(_: Request, exc: BizError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=error_body(exc.message))
