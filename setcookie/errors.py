class SetCookieError(Exception):
    """Base error for setcookie."""


class InvalidSetCookieError(SetCookieError, ValueError):
    """Raised when a Set-Cookie value has no usable name=value pair."""

    def __init__(self, set_cookie_value: str) -> None:
        super().__init__(f"Invalid set-cookie value: {set_cookie_value!r}")
        self.set_cookie_value = set_cookie_value
