"""Input Coercion — lenient number parsing for form and query values.

Invariants:
    - Never raises: unparseable input yields None (parse_int) or 0 (parse_limit)
    - parse_int reads the leading integer prefix ("30min" -> 30, "12.9" -> 12)
    - parse_limit == 0 means "no limit"; negative limits count by magnitude
    - parse_limit never exceeds MAX_LIMIT (the widest LIMIT every backend binds)

Design Decisions:
    - Lenient over strict: malformed numbers are passed through to the store, which
      enforces required columns; there is no validation error kind at the boundary
"""

import math
import re

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

MAX_LIMIT = 2**63 - 1


def parse_int(value: object) -> int | None:
    """Integer prefix of value, or None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def parse_limit(value: object) -> int:
    """Record cap for log queries; 0 means unlimited."""
    if value is None or value == "":
        return 0
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return min(abs(int(number)), MAX_LIMIT)
