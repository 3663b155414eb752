"""Shared records and utilities for the unit tests."""
