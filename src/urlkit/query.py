"""src/urlkit/query.py

URL query string as an ordered, mutable mapping of parameters.
"""

import logging
import urllib.parse
from typing import Dict, Iterator, Optional, Union

from urlkit.exceptions import BadOperationError, OutOfBoundsError
from urlkit.utils.validators import ensure_separator, ensure_string

__all__ = ["DEFAULT_SEPARATOR", "ParameterValue", "Query"]

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "&"

ParameterValue = Optional[Union[str, bool, int, float]]


def _encode_value(value: ParameterValue) -> str:
    # Form-encoding renders booleans as 1/0, not True/False
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class Query:
    """
    A URL query string.

    Only strings that use ``"="`` as the assignment operator can be parsed.
    When the pairs are joined by something other than an ampersand, pass
    that separator to the constructor (or set it before calling
    :meth:`parse`), otherwise parsing fails with
    :class:`~urlkit.exceptions.BadOperationError`.

    Example::

        query = Query("foo=bar&baz=qux")
        query.set_parameter("quux", "corge").unset_parameter("foo")
        str(query)  # "baz=qux&quux=corge"
    """

    __slots__ = ("_parameters", "_separator")

    def __init__(self, query: Optional[str] = None, separator: str = DEFAULT_SEPARATOR):
        self._parameters: Dict[str, ParameterValue] = {}
        self._separator = ensure_separator(separator, "Query")
        if isinstance(query, str):
            self.parse(query)

    @property
    def parameters(self) -> Dict[str, ParameterValue]:
        """The query's parameters, in insertion order."""
        return self._parameters

    @parameters.setter
    def parameters(self, parameters: Dict[str, ParameterValue]) -> None:
        self._parameters = dict(parameters)

    @property
    def separator(self) -> str:
        """The argument separator; defaults to an ampersand."""
        return self._separator

    @separator.setter
    def separator(self, separator: str) -> None:
        self._separator = ensure_separator(separator, "Query.separator")

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Query({self.format()!r}, separator={self._separator!r})"

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return (
            list(self._parameters.items()) == list(other._parameters.items())
            and self._separator == other._separator
        )

    def set_parameter(self, key: str, value: ParameterValue) -> "Query":
        """
        Set a parameter.

        An existing key keeps its position and only has its value replaced.

        Raises:
            InvalidArgumentError: If key is not a str.
        """
        ensure_string(key, "Query.set_parameter", "key")
        self._parameters[key] = value
        return self

    def get_parameter(self, key: str) -> ParameterValue:
        """
        Return a parameter's value.

        Falsy values (``None``, ``False``, ``0``, ``""``) are returned as
        stored; only a missing key is an error.

        Raises:
            InvalidArgumentError: If key is not a str.
            OutOfBoundsError: If key does not exist.
        """
        ensure_string(key, "Query.get_parameter", "key")
        if key not in self._parameters:
            raise OutOfBoundsError(f"Query.get_parameter() expects key {key!r} to exist")
        return self._parameters[key]

    def has_parameter(self, key: str) -> bool:
        """
        True if the parameter exists, whatever its value.

        Raises:
            InvalidArgumentError: If key is not a str.
        """
        ensure_string(key, "Query.has_parameter", "key")
        return key in self._parameters

    def unset_parameter(self, key: str) -> "Query":
        """
        Remove a parameter if it exists.

        Raises:
            InvalidArgumentError: If key is not a str.
        """
        ensure_string(key, "Query.unset_parameter", "key")
        self._parameters.pop(key, None)
        return self

    def parse(self, query: str) -> "Query":
        """
        Parse a query string into this object's parameters.

        Parsed pairs are merged into the parameters already held; nothing is
        cleared first, so calling parse twice accumulates both strings.
        Values are stored exactly as written, without percent-decoding.

        Args:
            query: The query string, without the leading ``"?"``.

        Returns:
            self

        Raises:
            InvalidArgumentError: If query is not a str.
            BadOperationError: If a pair holds zero or several ``"="``; the
                separator is probably not set correctly.
        """
        ensure_string(query, "Query.parse", "query")
        logger.debug("Parsing query %r with separator %r", query, self._separator)
        for pair in query.split(self._separator):
            if pair.count("=") != 1:
                logger.debug("Rejected query pair %r", pair)
                raise BadOperationError(
                    "Query.parse() expects a single assignment operator ('=') per "
                    f"key-value pair, got {pair!r}; is the separator correct?"
                )
            key, _, value = pair.partition("=")
            self._parameters[key] = value

        return self

    def format(self) -> str:
        """
        Return the query as a percent-encoded string.

        Parameters whose value is ``None`` are left out.
        """
        if not self._parameters:
            return ""

        return self._separator.join(
            urllib.parse.urlencode([(key, _encode_value(value))])
            for key, value in self._parameters.items()
            if value is not None
        )
