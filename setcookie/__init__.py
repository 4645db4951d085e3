from setcookie.adapter import parse, parse_cookies_from_response
from setcookie.errors import InvalidSetCookieError, SetCookieError
from setcookie.models import INVALID_DATE, Cookie, InvalidDate, ParseOptions
from setcookie.parser import parse_cookie_from_string
from setcookie.splitter import split_cookies_string

__all__ = [
    "parse",
    "parse_cookie_from_string",
    "parse_cookies_from_response",
    "split_cookies_string",
    "Cookie",
    "ParseOptions",
    "InvalidDate",
    "INVALID_DATE",
    "SetCookieError",
    "InvalidSetCookieError",
]
