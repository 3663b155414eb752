"""Test suite for envconfig.

Unit tests live in domain folders under tests/unit/ and use plain (non
``test_``-prefixed) filenames; tests/conftest.py collects them. Shared
records and helpers live in tests/helpers/.
"""
