"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Application settings, resource paths and rendering options
- logging: Structured logging configuration
"""
