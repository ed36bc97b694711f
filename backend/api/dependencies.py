"""Shared dependencies for API routes."""

import logging

from fastapi import Depends, Request

from models.errors import Throttled
from models.quota import QuotaDecision
from services.client_key import get_client_key
from services.rate_limiter import QuotaStore

logger = logging.getLogger(__name__)


def get_quota_store(request: Request) -> QuotaStore:
    return request.app.state.quota_store


def admit(request: Request, store: QuotaStore = Depends(get_quota_store)) -> QuotaDecision:
    """Admission check. The decision is kept on request.state for the response headers."""
    key = get_client_key(request)
    decision = store.check(key)
    request.state.quota = decision
    if not decision.allowed:
        logger.info("Throttled client %s (window resets at %d)", key, decision.reset_at)
        raise Throttled()
    return decision
