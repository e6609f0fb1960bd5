"""Shared helpers for reading the record source."""

import time
from pathlib import Path

import requests

from cercaclasse.config import settings
from cercaclasse.exceptions import StoreLoadError
from cercaclasse.log import logger

MAX_RETRIES = 3


def fetch(url: str, *, timeout: int | None = None) -> requests.Response:
    """Fetch a URL with retry logic."""
    timeout = timeout or settings.fetch_timeout
    for attempt in range(MAX_RETRIES):
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            if attempt < MAX_RETRIES - 1:
                wait = 2 ** (attempt + 1)
                logger.warning(f"Retry {attempt + 1}/{MAX_RETRIES} for {url[:80]}...: {e}")
                time.sleep(wait)
            else:
                raise


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def read_source(source: str | Path) -> str:
    """Read the raw tabular text from a local path or an http(s) URL.

    The text is decoded as UTF-8; a leading byte-order mark is dropped.

    Raises:
        StoreLoadError: If the file or URL cannot be read.
    """
    location = str(source)
    try:
        if is_url(location):
            raw = fetch(location).content
        else:
            raw = Path(location).read_bytes()
        return raw.decode("utf-8-sig")
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        raise StoreLoadError(location, str(e)) from e
