from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any
from urllib.parse import unquote

from .errors import InvalidSetCookieError
from .log import parser_logger
from .models import INVALID_DATE, Cookie, InvalidDate, ParseOptions

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")

_FLAG_ATTRIBUTES = {
    "secure": "secure",
    "httponly": "http_only",
}
_STRING_ATTRIBUTES = {
    "samesite": "same_site",
    "path": "path",
    "domain": "domain",
}


def decode_cookie_value(value: str) -> str:
    """
    Percent-decode a cookie value as UTF-8.

    Raises ValueError for a ``%`` not followed by two hex digits or for
    escapes that do not form valid UTF-8.
    """
    if "%" not in value:
        return value
    if _MALFORMED_ESCAPE.search(value):
        raise ValueError(f"malformed percent-escape in {value!r}")
    return unquote(value, encoding="utf-8", errors="strict")


def _read_date(text: str) -> datetime | None:
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def parse_expires(value: str) -> datetime | InvalidDate:
    """
    Read an Expires attribute as an aware UTC datetime.

    HTTP-dates (RFC 1123 and friends) are tried first, then ISO 8601. Naive
    results are taken to be UTC. Anything unreadable, or out of range once
    moved to UTC, gives ``INVALID_DATE``.
    """
    text = value.strip()
    parsed = _read_date(text) if text else None
    if parsed is not None:
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        try:
            return parsed.astimezone(timezone.utc)
        except OverflowError:
            pass
    parser_logger.debug("Unreadable Expires attribute %r", value)
    return INVALID_DATE


def parse_max_age(value: str) -> int | float:
    """
    Read the leading base-10 integer of a Max-Age attribute.

    Trailing garbage is ignored (``"60s"`` is 60); no digits at all gives
    ``math.nan``. Digit runs too long to convert give a signed infinity.
    """
    match = _LEADING_INTEGER.match(value)
    if match is None:
        parser_logger.debug("Non-numeric Max-Age attribute %r", value)
        return math.nan
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        parser_logger.debug("Max-Age attribute too long, %d characters", len(digits))
        return -math.inf if digits.startswith("-") else math.inf


def parse_cookie_from_string(
    set_cookie_value: str,
    options: ParseOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> Cookie:
    """
    Parse one Set-Cookie value (``name=value; Attr=X; Flag``) into a Cookie.

    Args:
        set_cookie_value: A single cookie value, already split from any
            comma-joined header.
        options: ParseOptions or a mapping of option names. Only
            ``decode_values`` matters here.
        **overrides: Individual options, e.g. ``decode_values=False``.

    Raises:
        InvalidSetCookieError: The value is blank or has no cookie name.
    """
    if not isinstance(set_cookie_value, str):
        raise TypeError(
            f"set-cookie value must be str, not {type(set_cookie_value).__name__}"
        )
    opts = ParseOptions.resolve(options, **overrides)

    parts = [part for part in set_cookie_value.split(";") if part.strip()]
    if not parts:
        raise InvalidSetCookieError(set_cookie_value)
    # Everything after the first '=' is the value, further '=' included.
    name, _, value = parts[0].partition("=")
    if not name:
        raise InvalidSetCookieError(set_cookie_value)

    if opts.decode_values:
        try:
            value = decode_cookie_value(value)
        except ValueError as exc:
            parser_logger.warning(
                "Could not decode cookie %r with value %r, keeping it as is (%s). "
                "Pass decode_values=False to disable decoding.",
                name,
                value,
                exc,
            )

    fields: dict[str, Any] = {}
    attributes: dict[str, str] = {}
    for part in parts[1:]:
        left, _, right = part.partition("=")
        key = left.lstrip().lower()
        if not key:
            parser_logger.warning("Skipping invalid set-cookie attribute %r", part)
            continue
        if key == "expires":
            fields["expires"] = parse_expires(right)
        elif key == "max-age":
            fields["max_age"] = parse_max_age(right)
        elif key in _FLAG_ATTRIBUTES:
            fields[_FLAG_ATTRIBUTES[key]] = True
        elif key in _STRING_ATTRIBUTES:
            fields[_STRING_ATTRIBUTES[key]] = right
        else:
            attributes[key] = right

    return Cookie(name=name, value=value, attributes=attributes, **fields)
