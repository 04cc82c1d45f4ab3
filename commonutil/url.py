"""URL query-string and base64 data-URI helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any
from urllib.parse import quote, unquote

logger = logging.getLogger(__name__)

BASE64_PREFIXES = {
    "png": "data:image/png;base64,",
    "jpg": "data:image/jpg;base64,",
    "pdf": "data:application/pdf;base64,",
}

# Characters left unescaped, same set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "!~*'()"

# URL of the current request/page; get_url_params() falls back to it
current_url: ContextVar[str] = ContextVar("current_url", default="")


def base64_pre(kind: str) -> str | None:
    """
    Data-URI prefix for a base64 payload of the given kind (png, jpg, pdf).

    Examples:
        >>> base64_pre("png")
        'data:image/png;base64,'
        >>> base64_pre("gif") is None
        True
    """
    prefix = BASE64_PREFIXES.get(kind)
    if prefix is None:
        logger.debug("No base64 prefix for kind %r", kind)
    return prefix


def _encode_value(value: Any) -> str:
    # JSON for containers and for the literals JSON spells differently (true/false/null)
    if isinstance(value, dict | list | tuple | bool) or value is None:
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    else:
        text = str(value)
    return quote(text, safe=_URI_COMPONENT_SAFE)


def computed_url_params(url: str = "", params: Mapping[str, Any] | None = None) -> str:
    """
    Append params to url as a query string.

    Dicts, lists, booleans and None are JSON encoded before percent-encoding, so
    get_url_params() can restore containers. Uses "&" when url already has a query.

    Examples:
        >>> computed_url_params("http://localhost:9082", {"from": "home/more"})
        'http://localhost:9082?from=home%2Fmore'

        >>> computed_url_params("http://h?a=1", {"b": {"x": 1}})
        'http://h?a=1&b=%7B%22x%22%3A1%7D'
    """
    if not params:
        return url

    query = "&".join(f"{key}={_encode_value(value)}" for key, value in params.items())
    separator = "&" if "?" in url else "?"
    return url + separator + query


def get_url_params(url: str | None = None) -> dict[str, Any]:
    """
    Parse the query string of url into a dict.

    Values are percent-decoded; a value that decodes as JSON into a dict or list
    is replaced by that container, every other value stays a string.

    Args:
        url: URL to parse. If None, uses the `current_url` context variable

    Returns:
        Mapping of parameter names to values (later duplicates win)

    Examples:
        >>> get_url_params("http://h?from=home%2Fmore&n=1#top")
        {'from': 'home/more', 'n': '1'}

        >>> get_url_params('http://h?q=%7B%22a%22%3A1%7D')
        {'q': {'a': 1}}
    """
    if url is None:
        url = current_url.get()

    start = url.find("?")
    if start == -1:
        return {}
    query = url[start + 1 :].split("#", 1)[0]
    if not query:
        return {}

    params: dict[str, Any] = {}
    for item in query.split("&"):
        key, _, raw = item.partition("=")
        value: Any = unquote(raw)
        try:
            parsed = json.loads(value)
        except ValueError:
            # Plain strings are the common case
            parsed = None
        if isinstance(parsed, dict | list):
            value = parsed
        params[key] = value
    return params
