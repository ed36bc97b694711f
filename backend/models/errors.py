"""Error taxonomy for the analysis pipeline.

Every failure a request can hit is an ``AnalysisError`` subclass carrying the
HTTP status and a message that is safe to show to the end user. Diagnostic
detail (upstream payloads, parse errors) is logged where the error is raised,
never attached to the message.
"""


class AnalysisError(Exception):
    """Base class: terminal failure of the current request."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


# --- Admission ---


class Throttled(AnalysisError):
    status_code = 429
    default_message = "Too many requests"


# --- Input normalization ---


class ValidationError(AnalysisError):
    """Client input rejected before any upstream work."""

    status_code = 400


class UnsupportedFormat(ValidationError):
    status_code = 415
    default_message = "Unsupported Content-Type"


class MissingFields(ValidationError):
    default_message = "Description and Resume are required"


class UnsupportedDocumentType(ValidationError):
    default_message = "Only PDF files are supported"


class DocumentReadError(ValidationError):
    default_message = "Failed to read PDF file"


class LengthOutOfBounds(ValidationError):
    """A text field (or uploaded document) is outside its configured size range.

    ``field`` is the request field name and ``bound`` is ``"min"`` or ``"max"``.
    """

    def __init__(self, field: str, bound: str, message: str | None = None):
        self.field = field
        self.bound = bound
        super().__init__(message or f"{field} is {'too short' if bound == 'min' else 'too long'}")


class DocumentTooLarge(LengthOutOfBounds):
    def __init__(self, max_size_mb: int):
        super().__init__(
            "resumeFile",
            "max",
            f"File too large. Max size: {max_size_mb}MB",
        )


class InvalidCredential(ValidationError):
    default_message = "Invalid API key format"


# --- Upstream call ---


class Overloaded(AnalysisError):
    """The model service is congested (its own 429), retry later."""

    status_code = 429
    default_message = "High analysis load. Please try again in a minute."


class UpstreamError(AnalysisError):
    default_message = "Failed to process analysis"


class UpstreamTimeout(AnalysisError):
    status_code = 504
    default_message = "Analysis took too long. Please try again."


# --- Result extraction ---


class BlockedByPolicy(AnalysisError):
    status_code = 400
    default_message = "Analysis blocked by safety filters."


class MalformedEnvelope(AnalysisError):
    default_message = "Failed to interpret analysis results"


class UnparseableResult(AnalysisError):
    default_message = "Failed to interpret analysis results"
