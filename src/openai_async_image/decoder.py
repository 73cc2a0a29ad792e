"""Turns an :class:`ImageResponse` into an image object."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional, TypeVar

from .errors import ImageConstructionFailed, NoImagesReturned
from .image_factory import ImageFactory
from .models import ImageResponse

_LOG = logging.getLogger(__name__)

ImageT = TypeVar("ImageT")


def decode_base64(payload: str) -> Optional[bytes]:
    """Strictly decode *payload*; return ``None`` if it is not valid base64."""
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return None


def image_from_response(response: ImageResponse, factory: ImageFactory[ImageT]) -> ImageT:
    """Build an image from the first payload in *response*.

    Entries after the first are ignored. A payload that is not valid base64
    and bytes that are not an image both raise
    :class:`ImageConstructionFailed`.
    """
    b64 = response.first_image
    if b64 is None:
        raise NoImagesReturned("The endpoint returned no images")

    data = decode_base64(b64)
    if data is None:
        _LOG.debug("First image payload is not valid base64 (len=%d)", len(b64))
    else:
        image = factory.create(data)
        if image is not None:
            return image

    raise ImageConstructionFailed("Could not build an image from the returned data")
