"""src/urlkit/exceptions.py

urlkit Exceptions hierarchy.
"""


class UrlKitError(Exception):
    """Base exception for all urlkit errors."""


class InvalidArgumentError(UrlKitError, ValueError):
    """
    Wrong type or out-of-contract value given to an accessor, parse or
    format entry point.
    """


class MalformedUrlError(InvalidArgumentError):
    """The URL splitting primitive could not break the string into parts."""


class OutOfBoundsError(UrlKitError, LookupError):
    """Lookup of a query parameter or path segment that does not exist."""


class BadOperationError(UrlKitError):
    """
    A query string pair does not hold exactly one assignment operator.
    Usually means the configured separator does not match the string.
    """
