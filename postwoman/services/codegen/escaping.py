"""
String escaping rules for each code generation target.

Every generator goes through these helpers so that a value is escaped the
same way wherever it appears in the output.
"""

from urllib.parse import quote

# Characters left as-is inside a query component. '&', '=', '+' and '#'
# are always encoded because they would change how the query is split.
_QUERY_SAFE = "-._~!$'()*,;:@/?"

_COMMON_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def percent_encode(component: str) -> str:
    """Percent-encode a query parameter key or value (UTF-8)."""
    return quote(component, safe=_QUERY_SAFE)


def shell_quote(text: str) -> str:
    """Wrap ``text`` in single quotes for a POSIX shell."""
    return "'" + text.replace("'", "'\\''") + "'"


def python_escape(text: str) -> str:
    """Escape ``text`` for use inside a double-quoted Python string."""
    out = []
    for char in text:
        if char in _COMMON_ESCAPES:
            out.append(_COMMON_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\x{ord(char):02x}")
        else:
            out.append(char)
    return "".join(out)


def python_string(text: str) -> str:
    """Return a double-quoted Python string literal."""
    return f'"{python_escape(text)}"'


def swift_escape(text: str) -> str:
    """Escape ``text`` for use inside a double-quoted Swift string."""
    out = []
    for char in text:
        if char in _COMMON_ESCAPES:
            out.append(_COMMON_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return "".join(out)


def swift_string(text: str) -> str:
    """Return a double-quoted Swift string literal."""
    return f'"{swift_escape(text)}"'
