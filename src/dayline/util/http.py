"""
Helpers for summarising `requests` failures in log lines and error messages.
"""

from __future__ import annotations

import requests


def format_request_exception(exc: requests.RequestException) -> str:
    """
    Describe a request failure as `<ExcName>: <message>` plus status and URL when known.
    """
    parts = [f"{type(exc).__name__}: {exc}"]
    response = getattr(exc, "response", None)
    if response is not None:
        status = getattr(response, "status_code", None)
        if status is not None:
            parts.append(f"status={status}")
        url = getattr(response, "url", None)
        if url:
            parts.append(f"url={url}")
    else:
        request = getattr(exc, "request", None)
        url = getattr(request, "url", None) if request is not None else None
        if url:
            parts.append(f"url={url}")
    return " ".join(parts)
