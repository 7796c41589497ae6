"""
API Routes
==========

- render: GET /path/refresh_image returning the dashboard BMP
- health: GET /health reporting resource availability
"""
