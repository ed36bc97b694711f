"""Shared test configuration, fixtures and sample inputs."""

import pytest

from main import app
from services.rate_limiter import InMemoryQuotaStore

VALID_API_KEY = "AIza" + "S" * 35

SAMPLE_JD = """
Senior Python Developer

Requirements:
- 5+ years of experience with Python
- Strong knowledge of Django or FastAPI
- Experience with PostgreSQL and Redis
- Familiarity with Docker and Kubernetes
"""

SAMPLE_RESUME = """
John Doe
Senior Software Engineer, Google (2020 - Present)
- Built scalable microservices using Python and FastAPI
- Led team of 5 engineers on payment platform
Skills: Python, Docker, Kubernetes, PostgreSQL
"""


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def quota_store(monkeypatch):
    """Fresh 5-per-minute store installed on the app for one test."""
    store = InMemoryQuotaStore(limit=5, window_seconds=60)
    monkeypatch.setattr(app.state, "quota_store", store)
    return store


def _build_pdf(text: str) -> bytes:
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_at
    return bytes(out)


@pytest.fixture
def make_pdf():
    """Factory for a one-page PDF containing a single line of text."""
    return _build_pdf
