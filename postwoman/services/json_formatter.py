"""
JSON helpers used to display and tidy request and response bodies.

None of these raise on bad input: ``None``/``False`` means "not JSON", and
callers show the original text unchanged.
"""

import json
import math
from typing import Any


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name!r}")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_json(text: str) -> tuple[bool, Any]:
    """Parse strict JSON; ``(False, None)`` if ``text`` is not valid JSON."""
    try:
        return True, json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except (ValueError, TypeError, RecursionError):
        return False, None


def format_json(text: str) -> str | None:
    """
    Pretty-print JSON with two-space indentation and sorted keys.

    Example:
        >>> print(format_json('{"b":1,"a":[true,null]}'))
        {
          "a": [
            true,
            null
          ],
          "b": 1
        }
    """
    ok, value = parse_json(text)
    if not ok:
        return None
    return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)


def minify_json(text: str) -> str | None:
    """Remove all insignificant whitespace; key order is preserved."""
    ok, value = parse_json(text)
    if not ok:
        return None
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def is_valid_json(text: str) -> bool:
    """Return True if ``text`` parses as JSON."""
    ok, _ = parse_json(text)
    return ok
