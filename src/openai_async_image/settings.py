"""Environment-driven settings.

Secrets (the API key) come from the environment or a ``.env`` file, which the
command line entry point loads with python-dotenv. Everything else has a
default that points at the public OpenAI API.
"""

from __future__ import annotations

import logging
import os

from .endpoint import OPENAI_BASE_URL, OPENAI_IMAGES_PATH, EndpointConfig

_LOG = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 60.0


def endpoint_from_env() -> EndpointConfig:
    """Build an :class:`EndpointConfig` from ``OPENAI_*`` variables."""
    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise RuntimeError(
            "OPENAI_API_KEY is required. "
            "Set it in the environment or in a .env file."
        )
    return EndpointConfig(
        base_url=os.getenv("OPENAI_IMAGE_BASE_URL", OPENAI_BASE_URL),
        path=os.getenv("OPENAI_IMAGE_PATH", OPENAI_IMAGES_PATH),
        api_key=api_key,
    )


def http_timeout() -> float:
    """Total request timeout in seconds (``OPENAI_HTTP_TIMEOUT``)."""
    raw = os.getenv("OPENAI_HTTP_TIMEOUT", "")
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        _LOG.warning("Ignoring invalid OPENAI_HTTP_TIMEOUT=%r", raw)
        return DEFAULT_HTTP_TIMEOUT
    if value <= 0:
        _LOG.warning("Ignoring non-positive OPENAI_HTTP_TIMEOUT=%r", raw)
        return DEFAULT_HTTP_TIMEOUT
    return value
