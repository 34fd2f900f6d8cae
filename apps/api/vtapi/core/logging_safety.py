"""Utilities for credential-free structured logging fields."""

from __future__ import annotations

import hashlib
from typing import Any
from urllib.parse import urlsplit, urlunsplit


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Return a deterministic non-reversible token for log correlation fields."""
    text = str(value or "").strip()
    if not text:
        return f"{prefix}-missing"

    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:12]
    return f"{prefix}-{digest}"


def safe_log_uri(uri: str | None) -> str:
    """Drop userinfo, query and fragment from a media locator before logging it.

    Presigned source URLs carry their signature in the query string, and some
    destinations embed credentials in the authority part.
    """
    text = (uri or "").strip()
    if not text:
        return "uri-missing"

    try:
        parts = urlsplit(text)
    except ValueError:
        return "uri-unparseable"

    host = parts.netloc.rpartition("@")[2]
    return urlunsplit((parts.scheme, host, parts.path, "", ""))
