"""
Example: Read Set-Cookie headers from a response

Works with any response object exposing ``raw_headers`` or ``headers``,
and with plain header strings, comma-joined or not.
"""

import logging
from types import SimpleNamespace

from setcookie import parse, parse_cookies_from_response, split_cookies_string


def response_example():
    """Parse cookies from a response-like object."""
    response = SimpleNamespace(
        raw_headers=[
            ("Content-Type", "text/html"),
            ("Set-Cookie", "session=abc123; Path=/; Secure; HttpOnly"),
            ("Set-Cookie", "theme=dark; Max-Age=3600; SameSite=Lax"),
        ]
    )
    for cookie in parse_cookies_from_response(response):
        print(f"{cookie.name}: {cookie.to_dict()}")

    # Keyed by cookie name instead
    cookies = parse_cookies_from_response(response, map=True)
    print(f"\nsession -> {cookies['session'].value}")


def aggregated_example():
    """Split a comma-joined header before parsing."""
    header = (
        "a=1; Expires=Tue, 18 Jul 2023 10:32:54 GMT; Path=/, "
        "b=hello%20world; Priority=High"
    )
    print(f"\nSplit: {split_cookies_string(header)}")
    for cookie in parse(header, split=True):
        print(f"{cookie.name}: {cookie.to_dict()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    print("=== Response ===")
    response_example()

    print("\n=== Aggregated header ===")
    aggregated_example()
