# cover_extract/sources/web.py
from __future__ import annotations

import logging
from typing import Tuple
from urllib.parse import urlparse

import requests

from cover_extract.errors import UpstreamFailure

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
DEFAULT_TIMEOUT = 30


def is_valid_url(url: str) -> bool:
    parsed = urlparse((url or "").strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def fetch_posting(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Tuple[int, str]:
    """
    GET a job-posting page. Returns (status_code, html).
    Anything other than a 2xx response raises UpstreamFailure.
    """
    if not is_valid_url(url):
        raise UpstreamFailure(f"Invalid URL format: {url!r}")

    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("%s: request failed → %s", url, e)
        raise UpstreamFailure(f"Failed to fetch URL content: {e}") from e

    status = response.status_code
    if not 200 <= status < 300:
        logger.warning("%s: HTTP %s", url, status)
        raise UpstreamFailure(f"Failed to fetch URL content (HTTP {status})", status_code=status)

    return status, response.text
