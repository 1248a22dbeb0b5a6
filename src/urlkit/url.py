"""src/urlkit/url.py

URL builder and parser for urlkit.
"""

# pylint: disable=too-many-instance-attributes,too-many-public-methods

import enum
import logging
from typing import Any, Optional, Union

from urlkit.exceptions import InvalidArgumentError, MalformedUrlError
from urlkit.path import Path
from urlkit.query import Query
from urlkit.utils.splitting import split_url
from urlkit.utils.validators import ensure_string, is_positive_int

__all__ = ["Url", "UrlFormat"]

logger = logging.getLogger(__name__)


class UrlFormat(str, enum.Enum):
    """Output forms understood by :meth:`Url.format`."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"

    @classmethod
    def from_string(cls, value: Any) -> "UrlFormat":
        """
        Resolve a case-insensitive mode name.

        Raises:
            InvalidArgumentError: If value is not a str, or names neither
                form.
        """
        if isinstance(value, cls):
            return value
        ensure_string(value, "UrlFormat.from_string", "mode")
        try:
            return cls(value.lower())
        except ValueError as exc:
            raise InvalidArgumentError(
                "Url.format() expects parameter mode to be the string 'absolute' "
                f"or 'relative'; {value!r} given"
            ) from exc


class Url:
    """
    A Uniform Resource Locator.

    Only well-formed URLs that follow convention (forward-slash path
    separator, ampersand argument separator) are parsed correctly. For
    anything else build the object through its properties.

    Example::

        url = Url()
        url.scheme = "http"
        url.host = "example.com"
        url.path = "foo/bar"
        url.format("absolute")  # "http://example.com/foo/bar"
        url.format("relative")  # "/foo/bar"
    """

    __slots__ = (
        "_scheme",
        "_username",
        "_password",
        "_host",
        "_port",
        "_path",
        "_query",
        "_fragment",
    )

    def __init__(self, url: Optional[str] = None):
        self._scheme: Optional[str] = None
        self._username: Optional[str] = None
        self._password: Optional[str] = None
        self._host: Optional[str] = None
        self._port: Any = None
        self._path = Path()
        self._query = Query()
        self._fragment: Optional[str] = None
        if isinstance(url, str):
            self.parse(url)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def scheme(self) -> Optional[str]:
        """The url's scheme, e.g. ``"http"``."""
        return self._scheme

    @scheme.setter
    def scheme(self, scheme: Optional[str]) -> None:
        self._scheme = scheme

    @property
    def username(self) -> Optional[str]:
        return self._username

    @username.setter
    def username(self, username: Optional[str]) -> None:
        self._username = username

    @property
    def password(self) -> Optional[str]:
        return self._password

    @password.setter
    def password(self, password: Optional[str]) -> None:
        self._password = password

    @property
    def host(self) -> Optional[str]:
        return self._host

    @host.setter
    def host(self, host: Optional[str]) -> None:
        self._host = host

    @property
    def port(self) -> Any:
        """
        The url's port.

        Parsing always stores an int; the setter keeps whatever it is given.
        """
        return self._port

    @port.setter
    def port(self, port: Any) -> None:
        self._port = port

    @property
    def path(self) -> Path:
        """The url's path. Never None."""
        return self._path

    @path.setter
    def path(self, path: Union[str, Path]) -> None:
        if isinstance(path, str):
            path = Path(path)
        elif not isinstance(path, Path):
            raise InvalidArgumentError(
                f"Url.path expects a string or Path, {type(path).__name__} given"
            )
        self._path = path

    @property
    def query(self) -> Query:
        """The url's query string. Never None."""
        return self._query

    @query.setter
    def query(self, query: Union[str, Query]) -> None:
        if isinstance(query, str):
            query = Query(query)
        elif not isinstance(query, Query):
            raise InvalidArgumentError(
                f"Url.query expects a string or Query, {type(query).__name__} given"
            )
        self._query = query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    @fragment.setter
    def fragment(self, fragment: Optional[str]) -> None:
        self._fragment = fragment

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Url({self.format()!r})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def format(self, mode: Union[str, UrlFormat] = UrlFormat.ABSOLUTE) -> str:
        """
        Format the url as a string.

        Args:
            mode: ``"absolute"`` includes every non-empty part;
                ``"relative"`` includes the path, query and fragment only,
                rooted at ``"/"``. Case-insensitive.

        Returns:
            The formatted url.

        Raises:
            InvalidArgumentError: If mode is not one of the two forms.
        """
        if UrlFormat.from_string(mode) is UrlFormat.ABSOLUTE:
            string = ""
            string = self._append_scheme(string)
            string = self._append_credentials(string)
            string = self._append_host(string)
            string = self._append_port(string)
        else:
            string = "/"

        string = self._append_path(string)
        string = self._append_query(string)
        string = self._append_fragment(string)

        return string

    def parse(self, url: str) -> "Url":
        """
        Parse a url string into this object's parts.

        Components missing from the string are left as they are. Each
        present component goes through its own ``_parse_*`` step, which
        subclasses may override.

        Args:
            url: The url to parse.

        Returns:
            self

        Raises:
            InvalidArgumentError: If url is not a str or is not a well-formed
                url.
            BadOperationError: If the query string cannot be parsed.
        """
        ensure_string(url, "Url.parse", "url")
        logger.debug("Parsing url %r", url)

        try:
            parts = split_url(url)
        except MalformedUrlError as exc:
            raise InvalidArgumentError(
                f"Url.parse() expects parameter url to be a well-formed url; {url!r} given"
            ) from exc

        if "scheme" in parts:
            self._parse_scheme(parts["scheme"])
        if "user" in parts:
            self._parse_username(parts["user"])
        if "pass" in parts:
            self._parse_password(parts["pass"])
        if "host" in parts:
            self._parse_host(parts["host"])
        if "port" in parts:
            self._parse_port(parts["port"])
        if "path" in parts:
            self._parse_path(parts["path"])
        if "query" in parts:
            self._parse_query(parts["query"])
        if "fragment" in parts:
            self._parse_fragment(parts["fragment"])

        return self

    # ------------------------------------------------------------------
    # Append steps
    # ------------------------------------------------------------------

    def _append_scheme(self, url: str) -> str:
        ensure_string(url, "Url._append_scheme", "url")
        if self._scheme:
            url += f"{self._scheme}://"
        return url

    def _append_credentials(self, url: str) -> str:
        ensure_string(url, "Url._append_credentials", "url")
        if self._username:
            url += self._username
            if self._password:
                url += f":{self._password}"
            url += "@"
        return url

    def _append_host(self, url: str) -> str:
        ensure_string(url, "Url._append_host", "url")
        if self._host:
            url += self._host
        return url

    def _append_port(self, url: str) -> str:
        ensure_string(url, "Url._append_port", "url")
        if self._port:
            url += f":{self._port}"
        return url

    def _append_path(self, url: str) -> str:
        """Append the path, keeping exactly one slash before it."""
        ensure_string(url, "Url._append_path", "url")
        path = str(self._path)
        if path:
            if not url.endswith("/"):
                url += "/"
            url += path
        return url

    def _append_query(self, url: str) -> str:
        ensure_string(url, "Url._append_query", "url")
        query = str(self._query)
        if query:
            url += f"?{query}"
        return url

    def _append_fragment(self, url: str) -> str:
        ensure_string(url, "Url._append_fragment", "url")
        if self._fragment:
            url += f"#{self._fragment}"
        return url

    # ------------------------------------------------------------------
    # Parse steps
    # ------------------------------------------------------------------

    def _parse_scheme(self, scheme: Any) -> "Url":
        self._scheme = ensure_string(scheme, "Url._parse_scheme", "scheme")
        return self

    def _parse_username(self, username: Any) -> "Url":
        self._username = ensure_string(username, "Url._parse_username", "username")
        return self

    def _parse_password(self, password: Any) -> "Url":
        self._password = ensure_string(password, "Url._parse_password", "password")
        return self

    def _parse_host(self, host: Any) -> "Url":
        self._host = ensure_string(host, "Url._parse_host", "host")
        return self

    def _parse_port(self, port: Any) -> "Url":
        """Store the port as an int. Accepts digit strings and positive ints."""
        if isinstance(port, str) and port.isdecimal():
            self._port = int(port)
        elif is_positive_int(port):
            self._port = port
        else:
            logger.debug("Url._parse_port() rejected port=%r", port)
            raise InvalidArgumentError(
                "Url._parse_port() expects parameter port to be a string or positive "
                f"integer; {port!r} given"
            )
        return self

    def _parse_path(self, path: Any) -> "Url":
        self._path = Path(ensure_string(path, "Url._parse_path", "path"))
        return self

    def _parse_query(self, query: Any) -> "Url":
        self._query = Query(ensure_string(query, "Url._parse_query", "query"))
        return self

    def _parse_fragment(self, fragment: Any) -> "Url":
        ensure_string(fragment, "Url._parse_fragment", "fragment")
        if fragment.startswith("#"):
            fragment = fragment[1:]
        self._fragment = fragment
        return self
