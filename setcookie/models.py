from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any, Protocol


class InvalidDate:
    """
    Marker stored in ``Cookie.expires`` when the Expires attribute was present
    but could not be read as a date. It is falsy so ``if cookie.expires:``
    treats it like a missing date.
    """

    _instance: InvalidDate | None = None

    def __new__(cls) -> InvalidDate:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "INVALID_DATE"

    def __repr__(self) -> str:
        return "INVALID_DATE"


INVALID_DATE = InvalidDate()

# camelCase spellings accepted for callers porting option objects from JS.
_OPTION_ALIASES = {"decodeValues": "decode_values"}


def _normalize_option_names(options: Mapping[str, Any]) -> dict[str, Any]:
    return {_OPTION_ALIASES.get(key, key): value for key, value in options.items()}


def _known_options(options: Mapping[str, Any]) -> dict[str, Any]:
    # Option objects ported from JS may carry extra keys; they are ignored.
    names = {f.name for f in fields(ParseOptions)}
    return {
        key: value
        for key, value in _normalize_option_names(options).items()
        if key in names
    }


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """
    Options shared by every parse entry point.

    Unknown keys in a mapping are ignored; unknown keyword overrides raise
    TypeError.

    Args:
        decode_values: Percent-decode cookie values (default: True)
        map: Return a name-keyed dict instead of a list; later cookies win (default: False)
        silent: Do not warn when a request ``Cookie`` header is seen (default: False)
        split: Split comma-joined Set-Cookie values before parsing (default: False)
    """

    decode_values: bool = True
    map: bool = False
    silent: bool = False
    split: bool = False

    @classmethod
    def resolve(
        cls, options: ParseOptions | Mapping[str, Any] | None = None, **overrides: Any
    ) -> ParseOptions:
        if options is None:
            resolved = cls()
        elif isinstance(options, ParseOptions):
            resolved = options
        elif isinstance(options, Mapping):
            resolved = cls(**_known_options(options))
        else:
            raise TypeError(
                f"options must be ParseOptions, a mapping or None, not {type(options).__name__}"
            )
        if overrides:
            resolved = replace(resolved, **_normalize_option_names(overrides))
        return resolved


@dataclass(frozen=True, slots=True)
class Cookie:
    """
    One parsed Set-Cookie value.

    Known attributes have fixed fields; anything else lands in ``attributes``
    under its lowercased key and can also be read as ``cookie.<key>``.
    """

    name: str
    value: str
    expires: datetime | InvalidDate | None = None
    max_age: int | float | None = None
    secure: bool = False
    http_only: bool = False
    same_site: str | None = None
    path: str | None = None
    domain: str | None = None
    attributes: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, MappingProxyType):
            object.__setattr__(
                self, "attributes", MappingProxyType(dict(self.attributes))
            )

    def __getattr__(self, name: str) -> str:
        # Only reached for names that are not fields.
        if name.startswith("_") or name == "attributes":
            raise AttributeError(name)
        try:
            return self.attributes[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __reduce__(self) -> tuple[Any, tuple[Any, ...]]:
        values = [getattr(self, f.name) for f in fields(self)]
        values[-1] = dict(self.attributes)
        return type(self), tuple(values)

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.attributes.get(key.lower(), default)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict holding only what the Set-Cookie value actually carried."""
        out: dict[str, Any] = {"name": self.name, "value": self.value}
        for key in ("expires", "max_age", "same_site", "path", "domain"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        for key in ("secure", "http_only"):
            if getattr(self, key):
                out[key] = True
        for key, value in self.attributes.items():
            out.setdefault(key, value)
        return out


class ResponseLike(Protocol):
    headers: Any
