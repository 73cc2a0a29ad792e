from .decoder import decode_base64, image_from_response
from .endpoint import EndpointConfig, ImageEndpoint
from .errors import (
    AsyncImageError,
    ClientNotConfigured,
    HttpStatusError,
    ImageConstructionFailed,
    MalformedResponseError,
    NoImagesReturned,
    TransportError,
)
from .image_factory import ImageFactory, PillowImageFactory
from .loader import DefaultImageLoader, ImageLoader
from .models import ImageRequest, ImageResponse, ImageSize, ResponseFormat
from .transport import HttpTransport, Response, Transport

__all__ = [
    "AsyncImageError",
    "ClientNotConfigured",
    "DefaultImageLoader",
    "EndpointConfig",
    "HttpStatusError",
    "HttpTransport",
    "ImageConstructionFailed",
    "ImageEndpoint",
    "ImageFactory",
    "ImageLoader",
    "ImageRequest",
    "ImageResponse",
    "ImageSize",
    "MalformedResponseError",
    "NoImagesReturned",
    "PillowImageFactory",
    "ResponseFormat",
    "Response",
    "Transport",
    "TransportError",
    "decode_base64",
    "image_from_response",
]
