"""
Rendering Module
===============

Boundary to the external skin rendering engine.

Components:
- gateway: Engine gateway interface and HTTP client implementation
"""
