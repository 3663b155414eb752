"""Modules lint rules."""
