"""
FastAPI REST Endpoints
======================

REST API endpoints for HTTP access to skin rendering.

Endpoints:
- GET /render-skin: Render a tee skin to PNG
- GET /health: Health check endpoint
- GET /: Service information
"""
