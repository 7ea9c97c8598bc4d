"""
Data Models
===========

Pydantic data models for colors, render options and API responses.

Models:
- schemas: Canonical colors, render options, validation failures and API schemas
"""
