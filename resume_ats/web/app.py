"""FastAPI app entrypoint for Resume ATS web APIs."""

from __future__ import annotations

import logging
import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import DEFAULT_CONFIG_PATH, EngineConfig, load_config
from ..domain import EditError, InvalidDocumentError
from ..engine import ScoringEngine
from ..observability import ScoringObserver
from .api.v1.router import api_v1_router
from .errors import (
    APIError,
    api_error_handler,
    edit_error_handler,
    invalid_document_handler,
    validation_error_handler,
)
from .store import InMemoryResumeStore

logger = logging.getLogger("resume_ats.web.api")


def create_app(config: Optional[EngineConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = load_config(os.getenv("RESUME_ATS_CONFIG", DEFAULT_CONFIG_PATH))
    store = InMemoryResumeStore()
    engine = ScoringEngine(config=config, observer=ScoringObserver(source="web"))

    app = FastAPI(title="Resume ATS API", version="0.1.0")
    app.state.resume_store = store
    app.state.scoring_engine = engine
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _log_request(request, 500, start)
            raise
        _log_request(request, response.status_code, start)
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(InvalidDocumentError, invalid_document_handler)
    app.add_exception_handler(EditError, edit_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    uvicorn.run("resume_ats.web.app:create_app", factory=True, host="127.0.0.1", port=8000)


def _log_request(request: Request, status_code: int, start: float) -> None:
    path_params = request.scope.get("path_params", {})
    logger.info(
        "api_request method=%s path=%s status=%s duration_ms=%.2f resume_id=%s",
        request.method,
        request.url.path,
        status_code,
        (perf_counter() - start) * 1000,
        path_params.get("resume_id", "-"),
    )
