from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .headers import header_collection, iter_header_pairs
from .log import adapter_logger
from .models import Cookie, ParseOptions, ResponseLike
from .parser import parse_cookie_from_string
from .splitter import split_cookies_string

_REQUEST_HEADER_WARNING = (
    "setcookie appears to have been called on a request object. It parses "
    "Set-Cookie headers from responses, not Cookie headers from requests. "
    "Pass silent=True to suppress this warning."
)


def _collect(
    values: Iterable[str], opts: ParseOptions
) -> list[Cookie] | dict[str, Cookie]:
    if opts.split:
        values = [part for value in values for part in split_cookies_string(value)]
    values = [value for value in values if isinstance(value, str) and value.strip()]

    if not opts.map:
        return [parse_cookie_from_string(value, opts) for value in values]
    cookies: dict[str, Cookie] = {}
    for value in values:
        cookie = parse_cookie_from_string(value, opts)
        cookies[cookie.name] = cookie
    return cookies


def _empty(opts: ParseOptions) -> list[Cookie] | dict[str, Cookie]:
    return {} if opts.map else []


def parse_cookies_from_response(
    response: ResponseLike | Any,
    options: ParseOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> list[Cookie] | dict[str, Cookie]:
    """
    Parse every Set-Cookie header of a response-like object.

    Args:
        response: Anything exposing ``raw_headers`` or ``headers`` as a
            mapping, multidict or iterable of ``(name, value)`` pairs.
        options: ParseOptions or a mapping of option names.
        **overrides: Individual options, e.g. ``map=True``.

    Returns:
        A list of Cookies in header order, or a dict keyed by cookie name
        (last one wins) when ``map`` is set. Missing headers give an empty
        list or dict.
    """
    opts = ParseOptions.resolve(options, **overrides)
    headers = header_collection(response)
    if headers is None:
        return _empty(opts)

    values: list[str] = []
    warned = False
    for name, value in iter_header_pairs(headers):
        lowered = name.lower()
        if lowered == "set-cookie":
            values.append(value)
        elif lowered == "cookie" and not opts.silent and not warned:
            adapter_logger.warning(_REQUEST_HEADER_WARNING)
            warned = True
    return _collect(values, opts)


def parse(
    source: Any,
    options: ParseOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> list[Cookie] | dict[str, Cookie]:
    """
    Parse cookies from a header string, a list of header strings or a
    response-like object.

    A single string is treated as one Set-Cookie value unless ``split=True``,
    in which case it is first split on cookie-separating commas.
    """
    opts = ParseOptions.resolve(options, **overrides)
    if source is None:
        return _empty(opts)
    if isinstance(source, str):
        return _collect([source], opts)
    if isinstance(source, (list, tuple)):
        return _collect(source, opts)
    return parse_cookies_from_response(source, opts)
