import io

import pdfplumber

PDF_CONTENT_TYPE = "application/pdf"


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def is_pdf(content_type: str | None) -> bool:
    """True if the declared MIME type is PDF (parameters ignored)."""
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == PDF_CONTENT_TYPE
