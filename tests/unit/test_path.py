"""tests/unit/test_path.py"""

import pytest

from urlkit.exceptions import InvalidArgumentError, OutOfBoundsError
from urlkit.path import Path


@pytest.fixture
def path() -> Path:
    return Path("foo/bar/baz")


class TestPathParse:
    """Tests for Path construction and parse()."""

    @pytest.mark.parametrize(
        "text, segments",
        [
            ("foo/bar/baz", ["foo", "bar", "baz"]),
            ("/foo/bar/", ["foo", "bar"]),
            ("foo//bar", ["foo", "bar"]),
            ("/", []),
            ("", []),
        ],
    )
    def test_segments(self, text, segments):
        assert Path(text).segments == segments

    def test_empty(self):
        path = Path()
        assert path.segments == []
        assert str(path) == ""
        assert len(path) == 0

    def test_parse_replaces_segments(self, path):
        path.parse("qux")
        assert path.segments == ["qux"]

    def test_custom_separator(self):
        path = Path("a\\b\\c", separator="\\")
        assert path.segments == ["a", "b", "c"]
        assert path.format() == "a\\b\\c"

    @pytest.mark.parametrize("separator", ["", None, 1])
    def test_rejects_bad_separator(self, separator):
        """Test an empty separator is refused instead of stripping whitespace."""
        with pytest.raises(InvalidArgumentError, match="separator"):
            Path("foo bar", separator=separator)
        with pytest.raises(InvalidArgumentError, match="separator"):
            Path().separator = separator

    def test_rejects_non_string(self, not_a_string):
        with pytest.raises(InvalidArgumentError):
            Path().parse(not_a_string)


class TestPathFormat:
    """Tests for Path.format()."""

    def test_no_leading_or_trailing_separator(self):
        assert str(Path("/foo/bar/")) == "foo/bar"

    def test_segments_setter(self):
        path = Path()
        path.segments = ["foo", "bar"]
        assert path.format() == "foo/bar"

    def test_repr_and_eq(self, path):
        assert repr(path) == "Path('foo/bar/baz')"
        assert path == Path("/foo/bar/baz/")
        assert path != Path("foo/bar")


class TestPathSegments:
    """Tests for the segment operations."""

    def test_append_and_prepend(self, path):
        path.append_segment("qux").prepend_segment("root")
        assert path.segments == ["root", "foo", "bar", "baz", "qux"]

    def test_insert(self, path):
        path.insert_segment(1, "qux")
        assert path.segments == ["foo", "qux", "bar", "baz"]

    def test_insert_at_end(self, path):
        path.insert_segment(3, "qux")
        assert path.get_segment("last") == "qux"

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_insert_out_of_bounds(self, path, offset):
        with pytest.raises(OutOfBoundsError):
            path.insert_segment(offset, "qux")

    @pytest.mark.parametrize(
        "offset, expected",
        [(0, "foo"), (1, "bar"), (-1, "baz"), ("first", "foo"), ("last", "baz")],
    )
    def test_get_segment(self, path, offset, expected):
        assert path.get_segment(offset) == expected

    @pytest.mark.parametrize("offset", [3, -4])
    def test_get_segment_out_of_bounds(self, path, offset):
        with pytest.raises(OutOfBoundsError):
            path.get_segment(offset)

    def test_get_segment_on_empty_path(self):
        with pytest.raises(OutOfBoundsError):
            Path().get_segment("first")

    @pytest.mark.parametrize("offset", ["middle", 1.0, None, True])
    def test_get_segment_bad_offset(self, path, offset):
        with pytest.raises(InvalidArgumentError):
            path.get_segment(offset)

    def test_set_segment(self, path):
        path.set_segment("last", "qux")
        assert str(path) == "foo/bar/qux"

    def test_unset_segment(self, path):
        path.unset_segment(0)
        assert str(path) == "bar/baz"

    def test_has_segment(self, path):
        assert path.has_segment("bar")
        assert not path.has_segment("qux")
        assert path.has_segment("foo", "first")
        assert not path.has_segment("foo", 1)
        assert not path.has_segment("foo", 10)

    def test_get_index(self, path):
        assert path.get_index("baz") == 2
        with pytest.raises(OutOfBoundsError):
            path.get_index("qux")

    def test_reverse(self, path):
        assert path.reverse().segments == ["baz", "bar", "foo"]

    def test_slice(self, path):
        assert path.slice(1) == ["bar", "baz"]
        assert path.slice(0, 2) == ["foo", "bar"]
        assert path.slice(-2, 1) == ["bar"]

    def test_non_string_segment_rejected(self, path, not_a_string):
        with pytest.raises(InvalidArgumentError):
            path.append_segment(not_a_string)

    def test_iter(self, path):
        assert list(path) == ["foo", "bar", "baz"]
