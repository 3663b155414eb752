"""Command-line entry points.

Modules:
    check: Bind a dataclass from the environment and print the result
"""
