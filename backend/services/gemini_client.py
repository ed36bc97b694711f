"""Google Gemini API wrapper with error classification.

One attempt per analysis, bounded by ``settings.gemini_timeout_seconds``.
The caller's own API key is used for every call; it is never logged.
"""

import asyncio
import logging

from google import genai
from google.genai import errors, types

from config import settings
from models.errors import Overloaded, UpstreamError, UpstreamTimeout
from services.prompt_builder import ModelPayload

logger = logging.getLogger(__name__)


def _make_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def _to_config(payload: ModelPayload) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        system_instruction=payload.system_instruction,
        temperature=payload.temperature,
        top_k=payload.top_k,
        top_p=payload.top_p,
        max_output_tokens=payload.max_output_tokens,
        response_mime_type=payload.response_mime_type,
    )


async def invoke(payload: ModelPayload, api_key: str) -> dict:
    """Send ``payload`` to Gemini and return the raw response envelope as a dict.

    Raises:
        UpstreamTimeout: no answer within the configured timeout.
        Overloaded: Gemini answered 429.
        UpstreamError: any other API or transport failure.
    """
    client = _make_client(api_key)
    contents = [types.Content(role="user", parts=[types.Part(text=payload.user_content)])]

    try:
        response = await asyncio.wait_for(
            client.aio.models.generate_content(
                model=settings.gemini_model,
                contents=contents,
                config=_to_config(payload),
            ),
            timeout=settings.gemini_timeout_seconds,
        )
    except asyncio.TimeoutError as e:
        logger.warning("Gemini call timed out after %.1fs", settings.gemini_timeout_seconds)
        raise UpstreamTimeout() from e
    except errors.APIError as e:
        logger.error("Gemini API error %s (%s): %s", e.code, e.status, e.message)
        if e.code == 429:
            raise Overloaded() from e
        raise UpstreamError() from e
    except Exception as e:
        logger.error("Gemini request failed: %s: %s", type(e).__name__, e)
        raise UpstreamError() from e
    finally:
        await _close(client)

    return _envelope(response)


async def _close(client) -> None:
    """Release both connection pools of the per-request client."""
    try:
        await client.aio.aclose()
        client.close()
    except Exception as e:
        logger.warning("Closing Gemini client failed: %s", e)


def _envelope(response) -> dict:
    """Plain-dict view of the SDK response, so extraction never trusts its types."""
    if isinstance(response, dict):
        return response
    if hasattr(response, "model_dump"):
        return response.model_dump(mode="json", exclude_none=True)
    logger.error("Unexpected Gemini response type: %s", type(response).__name__)
    return {}
