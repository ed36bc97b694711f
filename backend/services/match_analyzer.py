"""Match analysis pipeline.

Pipeline:
1. Prompt assembly (language-specific system instruction + JD/resume)
2. Gemini call (single attempt, timeout-bounded)
3. Result extraction (fallback parsing + score coercion)

Admission control and input normalization happen at the API boundary,
before this runs.
"""

import logging

from models.requests import AnalysisRequest
from models.responses import AnalysisResult
from services import gemini_client, prompt_builder, result_extractor

logger = logging.getLogger(__name__)


async def analyze(request: AnalysisRequest) -> AnalysisResult:
    payload = prompt_builder.assemble(request)
    envelope = await gemini_client.invoke(payload, request.api_key)
    result = result_extractor.extract(envelope)
    logger.info(
        "Analysis complete: score=%s language=%s jd_chars=%d resume_chars=%d",
        result.score,
        request.language.value,
        len(request.job_description),
        len(request.resume),
    )
    return result
