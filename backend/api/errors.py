"""Render pipeline errors as ``{"error": ...}`` with quota headers attached."""

import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse

from models.errors import AnalysisError, Throttled
from models.quota import QuotaDecision

logger = logging.getLogger(__name__)


def quota_headers(request: Request) -> dict[str, str]:
    decision: QuotaDecision | None = getattr(request.state, "quota", None)
    if decision is None:
        return {}
    return decision.headers()


async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    headers = quota_headers(request)
    decision = getattr(request.state, "quota", None)
    if isinstance(exc, Throttled) and decision is not None:
        headers["Retry-After"] = str(decision.retry_after(time.time()))
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything raised outside the analysis pipeline."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=AnalysisError.status_code,
        content={"error": AnalysisError.default_message},
        headers=quota_headers(request),
    )
