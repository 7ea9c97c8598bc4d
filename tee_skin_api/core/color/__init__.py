"""
Color Module
============

Parsing of user supplied color strings and packing into TW color codes.

Components:
- parser: Hex and decimal color string parsing
- encoder: AARRGGBB 32-bit color code packing
"""
