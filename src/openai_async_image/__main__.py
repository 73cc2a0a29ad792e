"""Generate one image from the command line.

    python -m openai_async_image "a lighthouse at dusk" --size 512x512 -o out.png

Reads ``OPENAI_API_KEY`` (and the other ``OPENAI_*`` settings) from the
environment or a ``.env`` file.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

import aiohttp
from dotenv import load_dotenv
from PIL import Image

from .errors import AsyncImageError, TransportError
from .loader import DefaultImageLoader
from .models import ImageSize
from .settings import endpoint_from_env

logger = logging.getLogger("openai_async_image")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openai_async_image",
        description="Generate an image from a text prompt",
    )
    parser.add_argument("prompt", help="Text prompt describing the image")
    parser.add_argument(
        "--size",
        choices=[s.value for s in ImageSize],
        default=ImageSize.LARGE.value,
        help="Image size (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("image.png"),
        help="Where to save the image (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _flatten_to_rgb(img: Image.Image) -> Image.Image:
    """Convert to RGB, flattening any alpha channel against white."""
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        rgba = img.convert("RGBA")
        bg = Image.new("RGB", img.size, (255, 255, 255))
        bg.paste(rgba, mask=rgba.split()[-1])
        return bg
    return img.convert("RGB")


def save_image(image: Image.Image, output: Path) -> None:
    """Save *image* in the format implied by the extension of *output*.

    JPEG has no alpha channel, so transparent images are flattened first.
    Unknown extensions raise ``ValueError``.
    """
    fmt = Image.registered_extensions().get(output.suffix.lower())
    if fmt is None:
        raise ValueError(f"Unknown image file extension: {output.suffix or output.name!r}")
    if fmt == "JPEG" and image.mode not in ("RGB", "L"):
        image = _flatten_to_rgb(image)
    image.save(output, format=fmt)


async def generate(prompt: str, size: ImageSize, output: Path) -> Path:
    endpoint = endpoint_from_env()
    async with DefaultImageLoader(endpoint) as loader:
        image = await loader.load(prompt, size)
    save_image(image, output)
    logger.info("Saved %dx%d image to %s", image.width, image.height, output)
    return output


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        path = asyncio.run(generate(args.prompt, ImageSize(args.size), args.output))
    except (
        AsyncImageError,
        TransportError,
        aiohttp.ClientError,
        asyncio.TimeoutError,
        RuntimeError,
        OSError,
        ValueError,
    ) as exc:
        logger.error("Image generation failed: %s", exc)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
