"""
Validation Module
=================

Cross-field validation of render queries.

Components:
- validator: Query to RenderOptions normalization
"""
