from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """Language the analysis is written in. ``pt`` is the default."""

    PT = "pt"
    EN = "en"

    @classmethod
    def parse(cls, value: object) -> "Language":
        """Map a client-supplied selector to a Language, falling back to PT."""
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.PT


class UploadedDocument(BaseModel):
    """Resume file as received from a multipart upload, not yet converted."""

    filename: str = ""
    content_type: str = ""
    data: bytes = b""


class RawSubmission(BaseModel):
    """Fields pulled out of the request body, before any validation."""

    job_description: str = ""
    resume_text: str = ""
    document: UploadedDocument | None = None
    api_key: str = ""
    language: Language = Language.PT


class AnalysisRequest(BaseModel):
    """Normalized, sanitized input for one analysis run."""

    model_config = ConfigDict(frozen=True)

    job_description: str = Field(..., description="Sanitized job description text")
    resume: str = Field(..., description="Sanitized resume text")
    api_key: str = Field(..., repr=False)
    language: Language = Language.PT
