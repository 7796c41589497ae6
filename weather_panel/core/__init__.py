"""
Core Business Logic
==================

Core modules for composing the dashboard SVG and turning it into a bitmap.

Modules:
- errors: Failure kinds raised by the render pipeline
- composition: Placeholder substitution and icon splicing on the SVG template
- rendering: Rasterization, BMP encoding and the render() entry point
"""
