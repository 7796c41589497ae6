"""
Composition Module
==================

Turns the static SVG template into the composed dashboard document.

Components:
- markup: lxml parsing, attribute extraction and slot lookup
- icons: Icon splicing into slot rectangles
- compositor: Placeholder substitution and slot registry orchestration
"""
