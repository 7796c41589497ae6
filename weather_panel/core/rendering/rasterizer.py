"""
SVG Rasterizer
==============

CairoSVG-based rasterization of the composed dashboard document.
Parses the markup, sizes the output from the document's declared width and
height, and draws it onto a cairo ARGB32 image surface.
"""

import functools
import math
import sys
from typing import Any, Optional

from PIL import Image  # type: ignore

from weather_panel.config.logging import get_logger
from weather_panel.config.settings import Settings, get_settings
from weather_panel.core.errors import AllocationError, ParseError
from weather_panel.models.schemas import PixelBuffer

logger = get_logger(__name__)

# cairo ARGB32 pixels are native-endian 32-bit words
CAIRO_RAWMODE = "BGRA" if sys.byteorder == "little" else "ARGB"


def whole_pixels(length: float) -> int:
    """Convert a length in device pixels to a pixel count, dropping any fraction."""
    return max(0, math.floor(length))


@functools.lru_cache(maxsize=None)
def _surface_class() -> type:
    """CairoSVG PNG surface whose image size is truncated to whole pixels."""
    import cairocffi
    from cairosvg.surface import PNGSurface

    class TruncatingSurface(PNGSurface):
        def _create_surface(self, width, height):
            width = whole_pixels(width)
            height = whole_pixels(height)
            image_surface = cairocffi.ImageSurface(cairocffi.FORMAT_ARGB32, width, height)
            return image_surface, width, height

    return TruncatingSurface


class SVGRasterizer:
    """Renders SVG markup to an RGBA pixel buffer with CairoSVG."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="rasterizer")  # structlog.BoundLoggerBase

    def rasterize(self, document: str) -> PixelBuffer:
        """
        Parse and rasterize an SVG document.

        The output size is the document's intrinsic size at the configured
        DPI, truncated to whole pixels (a 400.6 wide document gives 400
        columns). No extra transform is applied.

        Args:
            document: Composed SVG markup

        Returns:
            PixelBuffer with premultiplied RGBA8 samples

        Raises:
            ParseError: If the markup is malformed or cannot be drawn
            AllocationError: If the size is zero/undefined or the surface cannot be created
        """
        import cairocffi
        from cairosvg.parser import Tree

        try:
            tree = Tree(bytestring=document.encode("utf-8"), unsafe=False)
        except Exception as e:
            raise ParseError(f"Failed to parse SVG document: {e}") from e

        # The surface is allocated and drawn in the constructor; it is never
        # finished, so nothing is written as PNG.
        try:
            surface = _surface_class()(tree, None, self.settings.raster_dpi)
        except (cairocffi.CairoError, MemoryError) as e:
            raise AllocationError(f"Failed to allocate raster surface: {e}") from e
        except ValueError as e:
            if "size" in str(e).lower():
                raise AllocationError(f"Invalid raster dimensions: {e}") from e
            raise ParseError(f"Failed to render SVG document: {e}") from e
        except Exception as e:
            raise ParseError(f"Failed to render SVG document: {e}") from e

        image_surface = surface.cairo
        width = image_surface.get_width()
        height = image_surface.get_height()
        if width <= 0 or height <= 0:
            raise AllocationError(f"Invalid raster dimensions: {width}x{height}")

        image_surface.flush()
        raw = bytes(image_surface.get_data())
        stride = image_surface.get_stride()
        image_surface.finish()

        # Channel reorder only: samples stay premultiplied
        image = Image.frombuffer("RGBA", (width, height), raw, "raw", CAIRO_RAWMODE, stride, 1)

        self.logger.debug(
            "SVG rasterized", width=width, height=height, dpi=self.settings.raster_dpi
        )

        return PixelBuffer(width=width, height=height, data=image.tobytes(), premultiplied=True)


def rasterize_document(document: str, settings: Optional[Settings] = None) -> PixelBuffer:
    """Rasterize SVG markup using the configured DPI."""
    rasterizer = SVGRasterizer(settings)
    return rasterizer.rasterize(document)
