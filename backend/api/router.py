import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from api.dependencies import admit
from config import settings
from models.errors import AnalysisError
from models.quota import QuotaDecision
from models.responses import AnalysisResult, ErrorResponse, HealthResponse
from services import input_normalizer, match_analyzer

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    status: {"model": ErrorResponse}
    for status in (400, 415, 429, 500, 504)
}


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", model=settings.gemini_model)


@router.post("/api/analyze", response_model=AnalysisResult, responses=_ERROR_RESPONSES)
async def analyze(request: Request, quota: QuotaDecision = Depends(admit)):
    """Accepts multipart (with optional PDF upload) or JSON; see input_normalizer."""
    try:
        analysis_request = await input_normalizer.normalize(request)
        result = await match_analyzer.analyze(analysis_request)
    except AnalysisError:
        raise
    except Exception as e:
        logger.exception("Unhandled error during analysis")
        raise AnalysisError() from e

    return JSONResponse(
        content=result.model_dump(mode="json"),
        headers=quota.headers(),
    )
