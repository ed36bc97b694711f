import pytest

from services.pdf_parser import extract_text, is_pdf


def test_extract_text(make_pdf):
    text = extract_text(make_pdf("Built REST APIs serving 1M requests per day"))
    assert "REST APIs" in text


def test_extract_text_rejects_garbage():
    with pytest.raises(Exception):
        extract_text(b"definitely not a pdf")


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("application/pdf", True),
        ("Application/PDF", True),
        ("application/pdf; name=cv.pdf", True),
        ("text/plain", False),
        ("application/msword", False),
        ("", False),
        (None, False),
    ],
)
def test_is_pdf(content_type, expected):
    assert is_pdf(content_type) is expected
