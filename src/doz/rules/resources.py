"""File and URL rules.

File rules accept anything satisfying ``FileLike`` (``doz.forms.UploadFile``
or a framework's upload object) and only inspect its metadata.
"""

import logging
import re
from collections.abc import Collection
from typing import Any
from urllib.parse import urlsplit

from doz._internal.multimap import FileLike
from doz.outcome import Outcome, invalid, valid

logger = logging.getLogger("doz.rules")

_MEGABYTE = 1024 * 1024
_SCHEME_RE = re.compile(r"[a-z][a-z0-9+.\-]*", re.IGNORECASE)
_BLANK_OR_CONTROL_RE = re.compile(r"[\s\x00-\x1f\x7f]")
# Schemes whose URLs must name a host (WHATWG "special" schemes, minus file)
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})
_FORBIDDEN_HOST_RE = re.compile(r'[#/<>?@\\^|"]')


def _megabytes(size_in_bytes: int) -> str:
    # Shortest round-trip form: 1.0 -> "1", 0.95367431640625 stays whole
    return repr(size_in_bytes / _MEGABYTE).removesuffix(".0")


def file(
    value: Any,
    max_size_in_bytes: int | None = None,
    allowed_extensions: Collection[str] | None = None,
) -> Outcome:
    """Value must be an uploaded file within size and extension limits.

    Extensions are compared case-insensitively against the part of the
    filename after the last dot; list them without the dot.
    """
    if not isinstance(value, FileLike):
        return invalid(value, "must be a File")

    if max_size_in_bytes is not None and value.size > max_size_in_bytes:
        return invalid(value, f"size must be less than {_megabytes(max_size_in_bytes)}MB")

    if allowed_extensions is not None:
        _, dot, ext = value.filename.rpartition(".")
        allowed = {e.lower() for e in allowed_extensions}
        if not dot or ext.lower() not in allowed:
            options = ", ".join(allowed_extensions)
            return invalid(value, f"must have one of these extensions: {options}")

    return valid(value)


def mime(value: Any, allowed_mime_types: Collection[str]) -> Outcome:
    """Value must be an uploaded file with one of the allowed content types."""
    if not isinstance(value, FileLike):
        return invalid(value, "must be a File")
    if value.content_type not in allowed_mime_types:
        options = ", ".join(allowed_mime_types)
        return invalid(value, f"must be one of these MIME types: {options}")
    return valid(value)


def url(value: Any, protocols: Collection[str] | None = None) -> Outcome:
    """Value must be an absolute URL, optionally restricted to *protocols*.

    Surrounding whitespace is ignored; whitespace or control characters
    inside the URL are not. ``http``, ``https``, ``ws``, ``wss`` and
    ``ftp`` URLs must name a well-formed host.

    On success the outcome carries the ``urllib.parse.SplitResult``.
    Protocols are scheme names without the colon (``"https"``).
    """
    if not isinstance(value, str):
        return invalid(value, "must be string")

    text = value.strip()
    if _BLANK_OR_CONTROL_RE.search(text):
        return invalid(value, "must be a valid URL")

    try:
        parts = urlsplit(text)
        parts.port  # noqa: B018  (raises ValueError for an out-of-range port)
    except ValueError as exc:
        logger.debug("URL parse failed for %r: %s", value, exc)
        return invalid(value, "must be a valid URL")

    if not _SCHEME_RE.fullmatch(parts.scheme) or not (parts.netloc or parts.path):
        return invalid(value, "must be a valid URL")

    if parts.scheme in _HOST_SCHEMES:
        host = parts.hostname
        if not host or _FORBIDDEN_HOST_RE.search(host):
            return invalid(value, "must be a valid URL")

    if protocols is not None and parts.scheme not in protocols:
        options = ", ".join(protocols)
        return invalid(value, f"must use one of these protocols: {options}")

    return valid(parts)
