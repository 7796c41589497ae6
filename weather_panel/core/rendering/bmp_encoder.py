"""
BMP Encoder
===========

Pillow-based serialization of rendered pixel buffers into 32-bit BMP files
readable by embedded bitmap decoders.

Samples are written as the rasterizer produced them. Rasterizer output is
alpha-premultiplied and is NOT un-premultiplied by default, so only fully
opaque pixels keep exact colors; partially transparent pixels come out with
darkened color channels. Dashboard graphics are opaque, so this is accepted.
Set ``unpremultiply_alpha`` to convert to straight alpha before encoding.
"""

import io
from typing import Any, Optional

from PIL import Image  # type: ignore

from weather_panel.config.logging import get_logger
from weather_panel.config.settings import Settings, get_settings
from weather_panel.core.errors import EncodeError
from weather_panel.models.schemas import PixelBuffer

logger = get_logger(__name__)

BYTES_PER_PIXEL = 4


class BMPEncoder:
    """Encodes RGBA pixel buffers as BMP."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="bmp_encoder")  # structlog.BoundLoggerBase

    def encode(self, buffer: PixelBuffer) -> bytes:
        """
        Encode a pixel buffer as a 32 bpp BMP.

        Args:
            buffer: Rendered pixel buffer

        Returns:
            BMP file bytes

        Raises:
            EncodeError: If dimensions and sample data disagree or Pillow fails
        """
        if buffer.width <= 0 or buffer.height <= 0:
            raise EncodeError(f"Invalid image dimensions: {buffer.width}x{buffer.height}")

        expected = buffer.width * buffer.height * BYTES_PER_PIXEL
        if len(buffer.data) != expected:
            raise EncodeError(
                f"Pixel data size mismatch: expected {expected} bytes for "
                f"{buffer.width}x{buffer.height}, got {len(buffer.data)}"
            )

        # "RGBa" makes Pillow un-premultiply while unpacking
        unpremultiply = buffer.premultiplied and self.settings.unpremultiply_alpha
        rawmode = "RGBa" if unpremultiply else "RGBA"

        try:
            image = Image.frombuffer(
                "RGBA", (buffer.width, buffer.height), buffer.data, "raw", rawmode, 0, 1
            )
            output = io.BytesIO()
            image.save(output, format="BMP")
        except (ValueError, OSError) as e:
            raise EncodeError(f"BMP encoding failed: {e}") from e

        bmp_bytes = output.getvalue()

        self.logger.debug(
            "BMP encoded",
            width=buffer.width,
            height=buffer.height,
            file_size=len(bmp_bytes),
            unpremultiplied=unpremultiply,
        )

        return bmp_bytes


def encode_bmp(buffer: PixelBuffer, settings: Optional[Settings] = None) -> bytes:
    """Encode a pixel buffer as BMP bytes."""
    encoder = BMPEncoder(settings)
    return encoder.encode(buffer)
