"""
Core Business Logic
==================

Core business logic for turning render queries into engine calls.

Modules:
- color: Color input parsing and TW color code encoding
- validation: Render query validation and normalization
- rendering: Rendering engine gateway
"""
