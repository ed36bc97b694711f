import json

import pytest
from starlette.requests import Request

from api.errors import analysis_error_handler, unhandled_error_handler
from models.errors import Throttled
from models.quota import QuotaDecision


def _request(quota: QuotaDecision | None = None) -> Request:
    state = {} if quota is None else {"quota": quota}
    return Request({"type": "http", "method": "POST", "path": "/api/analyze", "headers": [], "state": state})


DECISION = QuotaDecision(allowed=True, limit=5, remaining=2, reset_at=1_700_000_060.0)


@pytest.mark.asyncio
async def test_unhandled_error_keeps_quota_headers():
    response = await unhandled_error_handler(_request(DECISION), RuntimeError("boom"))
    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Internal server error"}
    assert response.headers["X-RateLimit-Limit"] == "5"
    assert response.headers["X-RateLimit-Remaining"] == "2"
    assert response.headers["X-RateLimit-Reset"] == "1700000060"


@pytest.mark.asyncio
async def test_unhandled_error_without_decision():
    response = await unhandled_error_handler(_request(), KeyError("secret detail"))
    assert response.status_code == 500
    assert b"secret detail" not in response.body
    assert "X-RateLimit-Limit" not in response.headers


@pytest.mark.asyncio
async def test_throttled_adds_retry_after():
    denied = QuotaDecision(allowed=False, limit=5, remaining=0, reset_at=4_000_000_000.0)
    response = await analysis_error_handler(_request(denied), Throttled())
    assert response.status_code == 429
    assert int(response.headers["Retry-After"]) >= 1
    assert response.headers["X-RateLimit-Remaining"] == "0"
