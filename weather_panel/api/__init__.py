"""
API Layer
=========

FastAPI application serving the rendered dashboard.

Components:
- main: Application factory, middleware and exception handlers
- routes: Image and health endpoints
"""
