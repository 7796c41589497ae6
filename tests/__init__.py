"""
Test Suite
==========

Test suite matching the weather_panel/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Integration tests for the full render pipeline and API
"""
