"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import base64
from io import BytesIO
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from openai_async_image import EndpointConfig, ImageResponse, Response, Transport


def png_bytes(width: int = 1, height: int = 1) -> bytes:
    buf = BytesIO()
    Image.new("RGB", (width, height), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_b64():
    """Base64 of a valid 1x1 PNG."""
    return base64.b64encode(png_bytes()).decode("ascii")


@pytest.fixture
def endpoint():
    return EndpointConfig(
        base_url="https://api.example.com",
        path="/v1/images/generations",
        api_key="sk-test",
    )


@pytest.fixture
def stub_transport():
    """Create a mock transport whose ``post`` returns a preset response.

    Set ``stub_transport.respond(*b64_strings)`` to choose the images.
    """
    transport = MagicMock(spec=Transport)
    transport.post = AsyncMock()
    transport.aclose = AsyncMock()

    def respond(*images: str) -> None:
        transport.post.return_value = Response(value=ImageResponse(images=tuple(images)))

    transport.respond = respond
    respond()
    return transport


@pytest.fixture
def transport_factory(stub_transport):
    """Factory that hands the stub transport to the loader."""
    return MagicMock(return_value=stub_transport)
