"""Wire models for the image generation endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import MalformedResponseError


class ImageSize(str, Enum):
    """Image sizes accepted by the endpoint."""

    SMALL = "256x256"
    MEDIUM = "512x512"
    LARGE = "1024x1024"


class ResponseFormat(str, Enum):
    B64_JSON = "b64_json"
    URL = "url"


@dataclass(frozen=True)
class ImageRequest:
    """JSON body for a single generation call."""

    prompt: str
    size: ImageSize
    response_format: ResponseFormat = ResponseFormat.B64_JSON
    n: int = 1

    def to_json(self) -> dict[str, Any]:
        return {
            "prompt": self.prompt,
            "size": self.size.value,
            "response_format": self.response_format.value,
            "n": self.n,
        }


@dataclass(frozen=True)
class ImageResponse:
    """Parsed endpoint response.

    Only the base64 payloads are kept, in the order the endpoint returned
    them. The endpoint's ``created`` timestamp is kept when present.
    """

    images: tuple[str, ...]
    created: Optional[int] = None

    @property
    def first_image(self) -> Optional[str]:
        return self.images[0] if self.images else None

    @classmethod
    def from_json(cls, payload: Any) -> "ImageResponse":
        """Build a response from decoded JSON.

        Expects ``{"created": int, "data": [{"b64_json": str}, ...]}``.

        Raises
        ------
        MalformedResponseError
            If ``data`` is missing or an entry carries no ``b64_json`` string.
        """
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        data = payload.get("data")
        if not isinstance(data, list):
            raise MalformedResponseError("Response has no 'data' list")

        images: list[str] = []
        for index, entry in enumerate(data):
            b64 = entry.get("b64_json") if isinstance(entry, dict) else None
            if not isinstance(b64, str):
                raise MalformedResponseError(f"Entry {index} has no 'b64_json' string")
            images.append(b64)

        created = payload.get("created")
        if not isinstance(created, int) or isinstance(created, bool):
            created = None

        return cls(images=tuple(images), created=created)
