"""
Weather Panel
=============

HTTP service that renders a weather dashboard as a BMP image for low-power
e-paper displays.

This package provides:
- SVG template composition (placeholder substitution and icon splicing)
- Rasterization of the composed SVG with CairoSVG
- BMP encoding of the rendered pixel buffer
- A FastAPI endpoint serving the result
"""

__version__ = "1.0.0"
__author__ = "Weather Panel Team"
