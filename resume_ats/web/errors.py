"""API error envelope and the exception handlers that render it.

Every failure leaves the API as ``{"error": {"code", "message", "details"}}``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..domain import EditError, InvalidDocumentError


class APIError(Exception):
    """Error raised by the web layer itself, e.g. an unknown resume id."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return _envelope(self.code, self.message, self.details)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


def _envelope(code: str, message: str, details: Dict[str, Any]) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message, "details": details}}


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    return exc.to_response()


async def invalid_document_handler(_: Request, exc: InvalidDocumentError) -> JSONResponse:
    """A document the scoring pipeline cannot coerce."""
    return APIError(422, "INVALID_DOCUMENT", str(exc)).to_response()


async def edit_error_handler(_: Request, exc: EditError) -> JSONResponse:
    """An edit addressed at an unknown section or an unresolvable field path."""
    return APIError(400, "INVALID_EDIT", str(exc)).to_response()


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Request bodies and query params FastAPI rejected, reported as BAD_REQUEST."""
    return APIError(
        400,
        "BAD_REQUEST",
        "Invalid request payload",
        {"errors": jsonable_encoder(exc.errors())},
    ).to_response()
