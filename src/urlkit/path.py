"""src/urlkit/path.py

Slash-delimited path made of ordered segments.
"""

import logging
from typing import Iterator, List, Optional, Union

from urlkit.exceptions import InvalidArgumentError, OutOfBoundsError
from urlkit.utils.validators import ensure_separator, ensure_string

__all__ = ["DEFAULT_PATH_SEPARATOR", "Path"]

logger = logging.getLogger(__name__)

DEFAULT_PATH_SEPARATOR = "/"


class Path:
    """
    Ordered list of path segments.

    The string form never carries a leading or trailing separator, so
    ``Path("/foo/bar/")`` and ``Path("foo/bar")`` both format as
    ``"foo/bar"``. Empty segments are dropped on parse.
    """

    __slots__ = ("_segments", "_separator")

    def __init__(self, path: Optional[str] = None, separator: str = DEFAULT_PATH_SEPARATOR):
        self._segments: List[str] = []
        self._separator = ensure_separator(separator, "Path")
        if isinstance(path, str):
            self.parse(path)

    @property
    def segments(self) -> List[str]:
        """The path's segments."""
        return self._segments

    @segments.setter
    def segments(self, segments: List[str]) -> None:
        self._segments = list(segments)

    @property
    def separator(self) -> str:
        """The segment separator; defaults to a forward slash."""
        return self._separator

    @separator.setter
    def separator(self, separator: str) -> None:
        self._separator = ensure_separator(separator, "Path.separator")

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Path({self.format()!r})"

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments and self._separator == other._separator

    def _resolve_offset(self, offset: Union[int, str], method: str) -> int:
        """Turn ``"first"``, ``"last"`` or a (negative) int into a list index."""
        if offset == "first":
            offset = 0
        elif offset == "last":
            offset = len(self._segments) - 1
        elif not isinstance(offset, int) or isinstance(offset, bool):
            raise InvalidArgumentError(
                f"{method}() expects parameter offset to be an int, 'first' or 'last'"
            )

        if offset < 0:
            offset += len(self._segments)
        if not 0 <= offset < len(self._segments):
            raise OutOfBoundsError(f"{method}() expects offset {offset} to be a valid index")
        return offset

    def parse(self, path: str) -> "Path":
        """
        Parse a path string into segments, replacing the current ones.

        Raises:
            InvalidArgumentError: If path is not a str.
        """
        ensure_string(path, "Path.parse", "path")
        logger.debug("Parsing path %r", path)
        trimmed = path.strip(self._separator)
        self._segments = [s for s in trimmed.split(self._separator) if s] if trimmed else []
        return self

    def format(self) -> str:
        """Join the segments with the separator."""
        return self._separator.join(self._segments)

    def append_segment(self, segment: str) -> "Path":
        """Add a segment to the end of the path."""
        self._segments.append(ensure_string(segment, "Path.append_segment", "segment"))
        return self

    def prepend_segment(self, segment: str) -> "Path":
        """Add a segment to the start of the path."""
        self._segments.insert(0, ensure_string(segment, "Path.prepend_segment", "segment"))
        return self

    def insert_segment(self, offset: int, segment: str) -> "Path":
        """
        Insert a segment before ``offset``.

        An offset equal to the number of segments appends.

        Raises:
            InvalidArgumentError: If segment is not a str or offset not an int.
            OutOfBoundsError: If offset is outside ``0..len(path)``.
        """
        ensure_string(segment, "Path.insert_segment", "segment")
        if not isinstance(offset, int) or isinstance(offset, bool):
            raise InvalidArgumentError("Path.insert_segment() expects parameter offset to be an int")
        if not 0 <= offset <= len(self._segments):
            raise OutOfBoundsError(
                f"Path.insert_segment() expects offset {offset} to be a valid index"
            )
        self._segments.insert(offset, segment)
        return self

    def get_segment(self, offset: Union[int, str]) -> str:
        """
        Return the segment at ``offset``.

        Args:
            offset: An index (negative counts from the end), ``"first"`` or
                ``"last"``.

        Raises:
            InvalidArgumentError: If offset has the wrong type.
            OutOfBoundsError: If no segment lives at offset.
        """
        return self._segments[self._resolve_offset(offset, "Path.get_segment")]

    def set_segment(self, offset: Union[int, str], segment: str) -> "Path":
        """Replace the segment at ``offset``."""
        ensure_string(segment, "Path.set_segment", "segment")
        self._segments[self._resolve_offset(offset, "Path.set_segment")] = segment
        return self

    def unset_segment(self, offset: Union[int, str]) -> "Path":
        """Remove the segment at ``offset``."""
        del self._segments[self._resolve_offset(offset, "Path.unset_segment")]
        return self

    def has_segment(self, segment: str, offset: Optional[Union[int, str]] = None) -> bool:
        """
        True if ``segment`` is in the path.

        When ``offset`` is given, only that position is checked and an
        offset past the end simply yields False.
        """
        ensure_string(segment, "Path.has_segment", "segment")
        if offset is None:
            return segment in self._segments
        try:
            return self.get_segment(offset) == segment
        except OutOfBoundsError:
            return False

    def get_index(self, segment: str) -> int:
        """
        Return the index of the first occurrence of ``segment``.

        Raises:
            OutOfBoundsError: If the segment is not in the path.
        """
        ensure_string(segment, "Path.get_index", "segment")
        try:
            return self._segments.index(segment)
        except ValueError as exc:
            raise OutOfBoundsError(
                f"Path.get_index() expects segment {segment!r} to exist"
            ) from exc

    def reverse(self) -> "Path":
        """Reverse the segments in place."""
        self._segments.reverse()
        return self

    def slice(self, offset: int, length: Optional[int] = None) -> List[str]:
        """
        Return ``length`` segments starting at ``offset``.

        Without a length, every segment from offset to the end is returned.
        """
        if not isinstance(offset, int) or isinstance(offset, bool):
            raise InvalidArgumentError("Path.slice() expects parameter offset to be an int")
        if length is None:
            return self._segments[offset:]
        if offset < 0:
            offset += len(self._segments)
        return self._segments[offset : offset + length]
