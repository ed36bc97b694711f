import math

from pydantic import BaseModel, ConfigDict, field_validator


class AnalysisResult(BaseModel):
    """Structured evaluation returned by the model.

    Only ``score`` is guaranteed. Every other attribute the model produced
    (breakdown, gaps, recommendations, ...) is kept as-is in ``model_extra``
    and serialized back at the top level.
    """

    model_config = ConfigDict(extra="allow")

    score: int | float = 0

    @field_validator("score", mode="before")
    @classmethod
    def _coerce_score(cls, value):
        # bool is an int subclass but never a meaningful score
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return value

    @property
    def extensions(self) -> dict:
        return dict(self.model_extra or {})


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    model: str = ""
