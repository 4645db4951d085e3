from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any


def _to_str(value: Any) -> str:
    # Raw header bytes are latin-1 on the wire.
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    return str(value)


def header_collection(response: Any) -> Any:
    """
    Locate the header collection of a response-like object.

    Looks at ``raw_headers`` first (ordered, duplicates kept), then
    ``headers``, then a ``"headers"`` key when the response is itself a
    mapping. Returns None when nothing is found.
    """
    if response is None:
        return None
    for attr in ("raw_headers", "headers"):
        collection = getattr(response, attr, None)
        if collection is not None:
            return collection
    if isinstance(response, Mapping):
        return response.get("headers")
    return None


def iter_header_pairs(headers: Any) -> Iterator[tuple[str, str]]:
    """
    Yield ``(name, value)`` pairs from a header collection, keeping order.

    Supports collections exposing ``multi_items()`` or ``items()`` and plain
    iterables of pairs. A list or tuple value yields one pair per item;
    None values are skipped.
    """
    if headers is None:
        return
    multi_items = getattr(headers, "multi_items", None)
    if callable(multi_items):
        pairs: Iterable[Any] = multi_items()
    elif callable(getattr(headers, "items", None)):
        pairs = headers.items()
    else:
        pairs = headers

    for name, value in pairs:
        if value is None:
            continue
        name = _to_str(name)
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is not None:
                    yield name, _to_str(item)
        else:
            yield name, _to_str(value)
