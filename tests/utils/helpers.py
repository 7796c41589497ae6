"""
Test Helpers
============

Helper functions for common testing operations.
"""

import struct
from typing import Dict

import pytest


def cairo_available() -> bool:
    """Check whether CairoSVG and the native cairo library can be loaded."""
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(
    not cairo_available(), reason="cairo native library not available"
)


def read_bmp_header(data: bytes) -> Dict[str, int]:
    """Decode the BMP file header and BITMAPINFOHEADER fields used by tests."""
    file_size, _, pixel_offset = struct.unpack_from("<IIi", data, 2)
    header_size, width, height, planes, bits_per_pixel, compression = struct.unpack_from(
        "<IiiHHI", data, 14
    )
    return {
        "file_size": file_size,
        "pixel_offset": pixel_offset,
        "header_size": header_size,
        "width": width,
        "height": height,
        "planes": planes,
        "bits_per_pixel": bits_per_pixel,
        "compression": compression,
    }
