"""Low-level coercion failure raised by the value coercers."""


class CoercionError(ValueError):
    """Raised when a single raw string cannot be converted to its kind.

    This never escapes apply(); the populator wraps it in ParseError along
    with the variable name.
    """


__all__ = ["CoercionError"]
