"""Loader facade: prompt in, image out."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from yarl import URL

from . import settings
from .decoder import image_from_response
from .endpoint import ImageEndpoint
from .errors import ClientNotConfigured
from .image_factory import ImageFactory, PillowImageFactory
from .models import ImageRequest, ImageResponse, ImageSize, ResponseFormat
from .transport import HttpTransport, Transport, parse_base_url

_LOG = logging.getLogger(__name__)

ImageT = TypeVar("ImageT")

TransportFactory = Callable[[URL], Transport]


class ImageLoader(ABC, Generic[ImageT]):
    """Async interface for anything that turns a prompt into an image."""

    @abstractmethod
    async def load(self, prompt: str, size: ImageSize | str) -> ImageT: ...

    async def aclose(self) -> None:
        """Release any open resources (optional)."""
        return None


@dataclass(frozen=True)
class _Ready:
    transport: Transport


@dataclass(frozen=True)
class _Unconfigured:
    base_url: str


_State = Union[_Ready, _Unconfigured]


def _default_transport(base_url: URL) -> Transport:
    return HttpTransport(base_url, timeout=settings.http_timeout())


class DefaultImageLoader(ImageLoader[ImageT]):
    """Generates one image per call through an OpenAI-compatible endpoint.

    The base URL is checked once, here. If it does not parse, the loader
    stays unconfigured for its whole lifetime and every :meth:`load` raises
    :class:`ClientNotConfigured` without touching the network::

        async with DefaultImageLoader(EndpointConfig.for_openai(key)) as loader:
            image = await loader.load("a red panda", ImageSize.MEDIUM)
    """

    def __init__(
        self,
        endpoint: ImageEndpoint,
        *,
        image_factory: Optional[ImageFactory[ImageT]] = None,
        transport_factory: Optional[TransportFactory] = None,
    ) -> None:
        self.endpoint = endpoint
        self.image_factory: ImageFactory[ImageT] = image_factory or PillowImageFactory()  # type: ignore[assignment]

        url = parse_base_url(endpoint.base_url)
        if url is None:
            _LOG.warning("Invalid image endpoint base URL %r; loader disabled", endpoint.base_url)
            self._state: _State = _Unconfigured(endpoint.base_url)
        else:
            make_transport = transport_factory or _default_transport
            self._state = _Ready(make_transport(url))

    async def __aenter__(self) -> "DefaultImageLoader[ImageT]":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def is_configured(self) -> bool:
        return isinstance(self._state, _Ready)

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.endpoint.api_key}"}

    async def load(self, prompt: str, size: ImageSize | str) -> ImageT:
        """Generate an image for *prompt* at *size*.

        Raises
        ------
        ClientNotConfigured
            The base URL was rejected at construction time.
        NoImagesReturned
            The endpoint returned an empty image list.
        ImageConstructionFailed
            The first payload was not base64 or not an image.

        Transport errors (``HttpStatusError``, ``MalformedResponseError``,
        ``aiohttp.ClientError``, timeouts) propagate unchanged.
        """
        request = ImageRequest(
            prompt=prompt,
            size=ImageSize(size),
            response_format=ResponseFormat.B64_JSON,
            n=1,
        )
        headers = self._headers()

        state = self._state
        if not isinstance(state, _Ready):
            raise ClientNotConfigured(
                f"Image client is not configured (invalid base URL {state.base_url!r})"
            )

        _LOG.debug("Requesting image size=%s prompt_len=%d", request.size.value, len(prompt))
        result = await state.transport.post(
            self.endpoint.path,
            request.to_json(),
            headers,
            reader=ImageResponse.from_json,
        )
        return image_from_response(result.value, self.image_factory)

    async def aclose(self) -> None:
        if isinstance(self._state, _Ready):
            await self._state.transport.aclose()
