"""
Test Suite
==========

Test suite matching the tee_skin_api/ package structure.

Test Categories:
- unit: Unit tests for color parsing, encoding, validation and the engine client
- integration: HTTP API tests against a fake rendering engine
"""
