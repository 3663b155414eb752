"""Value coercers: one raw string in, one typed value out.

Each parser raises CoercionError with a short reason on bad input; coerce()
dispatches on the closed FieldKind variants.
"""

from .buffer import parse_base64
from .boolean import parse_bool
from .numeric import parse_float, parse_integer
from .dispatch import CoercedValue, coerce
from .duration import to_timedelta, parse_duration

__all__ = [
    "CoercedValue",
    "coerce",
    "parse_base64",
    "parse_bool",
    "parse_duration",
    "parse_float",
    "parse_integer",
    "to_timedelta",
]
