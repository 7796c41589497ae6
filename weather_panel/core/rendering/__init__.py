"""
Rendering Module
===============

Rasterization and bitmap output for the composed dashboard document.

Components:
- rasterizer: CairoSVG rendering to an RGBA pixel buffer
- bmp_encoder: Pillow BMP serialization
- pipeline: render() entry point chaining composition, rasterization and encoding
"""
