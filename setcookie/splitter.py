"""
Splitting of comma-joined Set-Cookie header values.

HTTP allows repeated headers to be folded into one comma-separated line, and
some runtimes do that for Set-Cookie too. Commas also show up inside Expires
dates ("Tue, 18 Jul 2023 ..."), so a comma only separates two cookies when the
text after it reads like the start of a new ``name=`` pair.
"""

from __future__ import annotations

from typing import Any

_SPECIAL_CHARS = frozenset("=;,")

# ECMAScript whitespace and line terminators. Unlike str.isspace() this
# excludes U+001C..U+001F and includes U+FEFF.
_WHITESPACE = frozenset(
    "\t\n\v\f\r "
    "\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _scan_token(text: str, pos: int) -> int:
    """Advance past a would-be cookie or attribute name."""
    while pos < len(text) and text[pos] not in _SPECIAL_CHARS:
        pos += 1
    return pos


def split_cookies_string(cookies_string: Any) -> list[str]:
    """
    Split a possibly comma-joined Set-Cookie header into single cookie values.

    Each returned item still carries its own ``;`` attributes and its inner
    whitespace. Lists and tuples are assumed to be split already and are
    returned as a list; anything else that is not a string yields ``[]``.

    >>> split_cookies_string("a=1; Expires=Tue, 18 Jul 2023 10:32:54 GMT, b=2")
    ['a=1; Expires=Tue, 18 Jul 2023 10:32:54 GMT', 'b=2']
    """
    if isinstance(cookies_string, (list, tuple)):
        return list(cookies_string)
    if not isinstance(cookies_string, str):
        return []

    text = cookies_string
    length = len(text)
    cookies: list[str] = []
    start = 0
    pos = 0

    while True:
        pos = _skip_whitespace(text, pos)
        if pos >= length:
            break
        if text[pos] != ",":
            pos += 1
            continue

        last_comma = pos
        next_start = _skip_whitespace(text, pos + 1)
        pos = _scan_token(text, next_start)
        if pos < length and text[pos] == "=":
            # A name followed by '=': the comma separated two cookies.
            cookies.append(text[start:last_comma])
            start = pos = next_start
        else:
            # Comma inside an attribute value (a date) or before a flag.
            pos = last_comma + 1

    if length:
        cookies.append(text[start:])
    return cookies
