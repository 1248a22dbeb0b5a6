"""utils/validators.py

Validation utilities for urlkit.
"""

import logging
from typing import Any

from urlkit.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def ensure_string(value: Any, method: str, name: str) -> str:
    """
    Check that an argument is a string.

    Args:
        value: The argument to check.
        method: Qualified name of the calling method, used in the message.
        name: Name of the argument, used in the message.

    Returns:
        The value itself, unchanged.

    Raises:
        InvalidArgumentError: If value is not a str.
    """
    if not isinstance(value, str):
        logger.debug("%s() rejected %s=%r", method, name, value)
        raise InvalidArgumentError(
            f"{method}() expects parameter {name} to be a string, "
            f"{type(value).__name__} given"
        )
    return value


def is_positive_int(value: Any) -> bool:
    """True for ints greater than zero. Booleans are not ports."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def ensure_separator(value: Any, method: str) -> str:
    """
    Check that a separator is a non-empty string.

    Raises:
        InvalidArgumentError: If value is not a str or is empty.
    """
    ensure_string(value, method, "separator")
    if not value:
        raise InvalidArgumentError(f"{method}() expects parameter separator to be non-empty")
    return value
