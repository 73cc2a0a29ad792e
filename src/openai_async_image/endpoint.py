"""Endpoint descriptors for the image generation API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

OPENAI_BASE_URL = "https://api.openai.com"
OPENAI_IMAGES_PATH = "/v1/images/generations"


@runtime_checkable
class ImageEndpoint(Protocol):
    """Anything that can tell the loader where and how to call the API."""

    @property
    def base_url(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def api_key(self) -> str: ...


@dataclass(frozen=True)
class EndpointConfig:
    """Plain endpoint settings.

    Nothing is validated here; the loader checks ``base_url`` when it is
    constructed.
    """

    base_url: str
    path: str
    api_key: str

    @classmethod
    def for_openai(cls, api_key: str) -> "EndpointConfig":
        """Return the public OpenAI images endpoint for *api_key*."""
        return cls(base_url=OPENAI_BASE_URL, path=OPENAI_IMAGES_PATH, api_key=api_key)

    def __repr__(self) -> str:
        return (
            f"EndpointConfig(base_url={self.base_url!r}, path={self.path!r}, "
            "api_key='***')"
        )
