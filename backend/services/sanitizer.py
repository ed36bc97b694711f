"""Strip markup and script vectors from user-submitted text."""

import re

_TAG_RE = re.compile(r"<[^>]*>")
_JS_SCHEME_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+=", re.IGNORECASE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def sanitize(text: str) -> str:
    """Remove tags, ``javascript:`` and ``onxxx=`` patterns; collapse blank runs."""
    if not text:
        return ""

    text = text.replace("\r\n", "\n")
    text = _TAG_RE.sub("", text)
    text = _JS_SCHEME_RE.sub("", text)
    text = _EVENT_HANDLER_RE.sub("", text)
    # Three or more newlines leave at most one blank line
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
