"""
Test suite for imgdash.

Unit tests for models, services, configuration and UI handlers live under
``tests/unit``.
"""
