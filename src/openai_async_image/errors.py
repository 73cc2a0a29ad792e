"""Exception types raised by the loader and by the HTTP transport."""

from __future__ import annotations


class AsyncImageError(Exception):
    """Base class for failures raised by the image loader itself."""


class ClientNotConfigured(AsyncImageError):
    """The endpoint's base URL could not be parsed, so no client exists."""


class NoImagesReturned(AsyncImageError):
    """The endpoint answered successfully but with an empty image list."""


class ImageConstructionFailed(AsyncImageError):
    """The payload was not valid base64 or did not decode to an image."""


# --------------------------------------------------------------------------- #
# Transport errors. The loader never wraps these; they reach the caller as-is.
# --------------------------------------------------------------------------- #


class TransportError(Exception):
    """Base class for errors defined by the HTTP transport."""


class HttpStatusError(TransportError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(self, status: int, message: str, body: str = "") -> None:
        super().__init__(f"HTTP {status}: {message}")
        self.status = status
        self.message = message
        self.body = body


class MalformedResponseError(TransportError):
    """The response body was not JSON or did not match the expected shape."""
