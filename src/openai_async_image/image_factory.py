from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Final, Generic, Optional, TypeVar

from PIL import Image

__all__: Final = ["ImageFactory", "PillowImageFactory"]

_LOG = logging.getLogger(__name__)

ImageT = TypeVar("ImageT")


class ImageFactory(ABC, Generic[ImageT]):
    """Turns raw image bytes into an image object.

    Implementations return ``None`` when the bytes are not an image they can
    build; they should not raise for bad data.
    """

    @abstractmethod
    def create(self, data: bytes) -> Optional[ImageT]: ...


class PillowImageFactory(ImageFactory[Image.Image]):
    """Builds fully loaded :class:`PIL.Image.Image` objects."""

    def create(self, data: bytes) -> Optional[Image.Image]:
        try:
            img = Image.open(BytesIO(data))
            # Force a full decode so truncated payloads fail here, not later.
            img.load()
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            _LOG.debug("Pillow could not decode %d bytes: %s", len(data), exc)
            return None
        return img
