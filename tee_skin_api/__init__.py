"""
Tee Skin Render API
===================

HTTP front end for an external tee skin rendering engine.

This package provides:
- Color input parsing (hex and comma-separated decimal) and TW color code packing
- Query validation for the render endpoint
- An HTTP client for the rendering engine service
- FastAPI REST endpoints streaming rendered PNG images
"""

__version__ = "1.0.0"
__author__ = "Tee Skin Render Team"
