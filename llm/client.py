"""Thin wrapper around the Gemini text-generation API."""

import logging
import os
import time
from typing import Optional

import httpx
from dotenv import load_dotenv
from google import genai
from google.genai import errors, types

load_dotenv()

logger = logging.getLogger(__name__)


# --- Configuration ---

GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_RETRIES = 1
RETRY_DELAY_SECONDS = 1.0

# HTTP status codes worth one more attempt.
TRANSIENT_STATUS_CODES = {408, 429}


class LLMUnavailableError(RuntimeError):
    """No generative client is configured."""


def create_client(
    api_key: Optional[str] = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> genai.Client:
    """Build a Gemini client with an explicit request timeout."""
    key = api_key or os.environ.get("GOOGLE_API_KEY")
    if not key:
        raise LLMUnavailableError(
            "GOOGLE_API_KEY environment variable is not set. "
            "Get an API key at https://aistudio.google.com/apikey"
        )
    return genai.Client(
        api_key=key,
        http_options=types.HttpOptions(timeout=int(timeout_seconds * 1000)),
    )


def is_transient(exc: BaseException) -> bool:
    """True for failures a second attempt may fix (5xx, timeouts, rate limits)."""
    if isinstance(exc, errors.ServerError):
        return True
    if isinstance(exc, errors.APIError):
        return exc.code in TRANSIENT_STATUS_CODES
    return isinstance(exc, (httpx.TimeoutException, httpx.TransportError))


def generate_text(
    client,
    prompt: str,
    *,
    model: str = GEMINI_MODEL,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
) -> str:
    """
    Send ``prompt`` and return the response text.

    Transient failures are retried up to ``max_retries`` times; anything else,
    or the last transient failure, is raised to the caller.
    """
    if client is None:
        raise LLMUnavailableError("No generative client configured")

    attempt = 0
    while True:
        try:
            response = client.models.generate_content(model=model, contents=prompt)
            return response.text or ""
        except Exception as exc:
            if attempt >= max_retries or not is_transient(exc):
                raise
            attempt += 1
            logger.warning(
                "Gemini call failed (attempt %d), retrying: %s", attempt, exc
            )
            if retry_delay:
                time.sleep(retry_delay)
