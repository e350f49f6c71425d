"""
Trust checks for user-supplied image URLs.

A URL is trusted when it is a same-origin path or an absolute https URL.
The check is purely syntactic; nothing is fetched.
"""

from typing import Optional
from urllib.parse import urlsplit

TRUSTED_SCHEME = "https"


def _is_data_uri(url: str) -> bool:
    return url.lstrip().lower().startswith("data:")


def is_trusted_url(url: Optional[str]) -> bool:
    """
    Decide whether an image URL is safe to render directly.

    Examples:
        ```python
        is_trusted_url("https://example.com/a.png")   # True
        is_trusted_url("/local/path.png")             # True
        is_trusted_url("http://example.com/a.png")    # False
        is_trusted_url("data:text/html;base64,abcd")  # False
        ```

    Returns:
        False for anything the caller should replace with a placeholder
    """
    if not url:
        return False

    # Checked before parsing so parser leniency cannot let data URIs through
    if _is_data_uri(url):
        return False

    # "//host/x" is protocol-relative and browsers read "/\host/x" the same way
    if url.startswith("/") and url[1:2] not in ("/", "\\"):
        return True

    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return False

    return parts.scheme == TRUSTED_SCHEME and bool(host)
