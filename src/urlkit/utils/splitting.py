"""utils/splitting.py

Generic URL splitting for urlkit.

Grammar-level tokenization is left to :func:`urllib.parse.urlsplit`; this
module only reshapes its result into a mapping that holds the components
actually present in the string.
"""

import logging
import urllib.parse
from typing import Dict, Union

from urlkit.exceptions import MalformedUrlError

__all__ = ["COMPONENTS", "split_url"]

logger = logging.getLogger(__name__)

COMPONENTS = ("scheme", "user", "pass", "host", "port", "path", "query", "fragment")


def split_url(url: str) -> Dict[str, Union[str, int]]:
    """
    Split a URL string into its present components.

    Empty components are treated as absent and left out of the result, so
    ``split_url("http://example.com")`` has no ``path`` key. The host keeps
    the case it was written in.

    Args:
        url: The URL text.

    Returns:
        Mapping with any subset of the keys in ``COMPONENTS``. ``port`` is
        an int, every other value is a str.

    Raises:
        MalformedUrlError: If the string cannot be split (unbalanced IPv6
            brackets, a non-numeric or out-of-range port, or an authority
            with credentials or a port but no host).
    """
    try:
        parts = urllib.parse.urlsplit(url)
        port = parts.port
    except ValueError as exc:
        logger.debug("urlsplit() rejected %r: %s", url, exc)
        raise MalformedUrlError(f"Cannot split malformed url {url!r}: {exc}") from exc

    userinfo, _, hostinfo = parts.netloc.rpartition("@")
    host = hostinfo.partition(":")[0]
    if not host and (userinfo or port is not None):
        logger.debug("Authority without host in %r", url)
        raise MalformedUrlError(f"Cannot split malformed url {url!r}: host missing")

    found: Dict[str, Union[str, int, None]] = {
        "scheme": parts.scheme,
        "user": parts.username,
        "pass": parts.password,
        "host": host,
        "port": port,
        "path": parts.path,
        "query": parts.query,
        "fragment": parts.fragment,
    }

    # None and "" both mean the component was not in the string
    return {key: value for key, value in found.items() if value not in (None, "")}
