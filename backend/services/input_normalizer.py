"""Request intake: turn an untrusted submission into an AnalysisRequest.

Two stages:
    read_submission()      content-type dispatch + field extraction (async, needs the Request)
    validate_submission()  PDF ingestion, presence, length bounds, sanitization, credential shape

Every check can short-circuit with a ValidationError subclass; nothing
expensive (PDF conversion, the model call) runs before the cheap checks
that precede it.
"""

import logging

from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from config import settings
from models.errors import (
    DocumentReadError,
    DocumentTooLarge,
    InvalidCredential,
    LengthOutOfBounds,
    MissingFields,
    UnsupportedDocumentType,
    UnsupportedFormat,
)
from models.requests import AnalysisRequest, Language, RawSubmission, UploadedDocument
from services import pdf_parser
from services.sanitizer import sanitize

logger = logging.getLogger(__name__)

MULTIPART = "multipart/form-data"
JSON = "application/json"


async def normalize(request: Request) -> AnalysisRequest:
    """Read, validate and sanitize the submission carried by ``request``."""
    raw = await read_submission(request)
    # PDF conversion is CPU-bound; keep it off the event loop
    return await run_in_threadpool(validate_submission, raw)


async def read_submission(request: Request) -> RawSubmission:
    content_type = request.headers.get("content-type", "").lower()

    if MULTIPART in content_type:
        return await _read_multipart(request)
    if JSON in content_type:
        return await _read_json(request)

    logger.info("Rejected submission with content-type %r", content_type)
    raise UnsupportedFormat()


async def _read_multipart(request: Request) -> RawSubmission:
    try:
        form = await request.form()
    except Exception as e:
        logger.info("Could not parse multipart body: %s", e)
        raise MissingFields() from e

    document = None
    resume_file = form.get("resumeFile")
    if isinstance(resume_file, UploadFile):
        # Reject on the declared size before buffering the whole upload
        if resume_file.size:
            check_document(resume_file.content_type or "", resume_file.size)
        data = await resume_file.read()
        if data:
            document = UploadedDocument(
                filename=resume_file.filename or "",
                content_type=resume_file.content_type or "",
                data=data,
            )

    return RawSubmission(
        job_description=_text(form.get("jobDescription")),
        resume_text=_text(form.get("resumeText")),
        document=document,
        api_key=_text(form.get("apiKey")),
        language=Language.parse(form.get("language")),
    )


async def _read_json(request: Request) -> RawSubmission:
    try:
        body = await request.json()
    except ValueError as e:
        logger.info("Could not parse JSON body: %s", e)
        raise MissingFields() from e

    if not isinstance(body, dict):
        raise MissingFields()

    return RawSubmission(
        job_description=_text(body.get("jobDescription")),
        resume_text=_text(body.get("resume")),
        api_key=_text(body.get("apiKey")),
        language=Language.parse(body.get("language")),
    )


def _text(value: object) -> str:
    return value if isinstance(value, str) else ""


def validate_submission(raw: RawSubmission) -> AnalysisRequest:
    """Apply ingestion, bounds, sanitization and credential checks, in that order."""
    if raw.document is not None:
        resume = ingest_document(raw.document)
    else:
        resume = raw.resume_text
    job_description = raw.job_description

    if not job_description or not resume:
        raise MissingFields()

    # Bounds are checked on the raw text, before sanitization shortens it
    _check_length(
        "jobDescription",
        job_description,
        settings.job_description_min_chars,
        settings.job_description_max_chars,
        label="Job description",
    )
    _check_length(
        "resume",
        resume,
        settings.resume_min_chars,
        settings.resume_max_chars,
        label="Resume content",
    )

    job_description = sanitize(job_description)
    resume = sanitize(resume)

    _check_api_key(raw.api_key)

    return AnalysisRequest(
        job_description=job_description,
        resume=resume,
        api_key=raw.api_key,
        language=raw.language,
    )


def check_document(content_type: str, size: int) -> None:
    """Reject anything that is not a PDF within the size ceiling."""
    if not pdf_parser.is_pdf(content_type):
        logger.info("Rejected resume upload of type %r", content_type)
        raise UnsupportedDocumentType()

    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if size > max_bytes:
        logger.info("Rejected resume upload of %d bytes", size)
        raise DocumentTooLarge(settings.max_upload_size_mb)


def ingest_document(document: UploadedDocument) -> str:
    """Convert an uploaded resume to text. Only PDFs within the size ceiling are read."""
    check_document(document.content_type, len(document.data))

    try:
        return pdf_parser.extract_text(document.data)
    except Exception as e:
        logger.warning("PDF extraction failed for %r: %s", document.filename, e)
        raise DocumentReadError() from e


def _check_length(field: str, text: str, min_chars: int, max_chars: int, label: str) -> None:
    length = len(text)
    if length < min_chars:
        raise LengthOutOfBounds(
            field, "min", f"{label} must be at least {min_chars} characters"
        )
    if length > max_chars:
        raise LengthOutOfBounds(
            field, "max", f"{label} must be at most {max_chars} characters"
        )


def _check_api_key(api_key: str) -> None:
    if not api_key:
        raise InvalidCredential("API key is required")
    if not api_key.startswith(settings.api_key_prefix) or len(api_key) < settings.api_key_min_length:
        raise InvalidCredential("Invalid API key format")
