"""Build the Gemini request for a normalized analysis request."""

from pydantic import BaseModel, ConfigDict

from config import settings
from models.requests import AnalysisRequest
from services.system_prompt import get_system_prompt


class ModelPayload(BaseModel):
    """Everything sent to the model for one analysis. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    system_instruction: str
    user_content: str
    temperature: float
    top_k: int
    top_p: float
    max_output_tokens: int
    response_mime_type: str = "application/json"


def build_user_prompt(job_description: str, resume: str) -> str:
    return f"""
JOB DESCRIPTION:
{job_description}

RESUME:
{resume}
"""


def assemble(request: AnalysisRequest) -> ModelPayload:
    """Pure: the same request always yields the same payload."""
    return ModelPayload(
        system_instruction=get_system_prompt(request.language),
        user_content=build_user_prompt(request.job_description, request.resume),
        temperature=settings.temperature,
        top_k=settings.top_k,
        top_p=settings.top_p,
        max_output_tokens=settings.max_output_tokens,
    )
