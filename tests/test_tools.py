#
# Bity - Tools Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bity.tools import U64_MAX, fmt_type, fmt_value, strip_per_second, strip_whitespace, validate_u64


# Tests ----------------------------------------------------------------------------------------------------------------

class TestStripPerSecond:
    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("whatever/s", "whatever", id="slash"),
            pytest.param("whateverps", "whatever", id="ps"),
            pytest.param("whatever/s/s", "whatever/s", id="slash-twice"),
            pytest.param("whateverpsps", "whateverps", id="ps-twice"),
            pytest.param("whateverps/s", "whateverps", id="ps-then-slash"),
            pytest.param("whatever/sps", "whatever/s", id="slash-then-ps"),
            pytest.param("  8kb/s ", "8kb", id="trimmed"),
            pytest.param("8kb", "8kb", id="no-suffix"),
            pytest.param("", "", id="empty"),
        ],
    )
    def test_strip(self, text, expected):
        assert strip_per_second(text) == expected

    def test_type_error(self):
        with pytest.raises(TypeError, match="text must be str"):
            strip_per_second(None)


class TestStripWhitespace:
    def test_ascii_whitespace(self):
        assert strip_whitespace(" \t\n\r\x0b\x0c12k\t ") == "12k"

    def test_separators_kept(self):
        assert strip_whitespace("\x1c12\x1f") == "\x1c12\x1f"


class TestValidateU64:
    @pytest.mark.parametrize("value", [0, 1, U64_MAX])
    def test_valid(self, value):
        assert validate_u64(value) == value

    @pytest.mark.parametrize("value", [-1, U64_MAX + 1])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match=r"must be in range \[0, 18446744073709551615\]"):
            validate_u64(value)

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_type_error(self, value):
        with pytest.raises(TypeError, match="count must be int"):
            validate_u64(value, name="count")


class TestFmt:
    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param(42, "<type: int>", id="instance"),
            pytest.param(int, "<type: int>", id="type"),
            pytest.param(ValueError("x"), "<type: ValueError>", id="exception"),
        ],
    )
    def test_fmt_type(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_fmt_value(self):
        assert fmt_value(42) == "<int: 42>"
        assert fmt_value("12kB") == "<str: '12kB'>"

    def test_fmt_value_truncated(self):
        assert fmt_value("hello world", max_repr=8) == "<str: 'hell'...>"

    def test_fmt_value_escapes(self):
        assert fmt_value(">") == "<str: '\\>'>"

    def test_fmt_value_broken_repr(self):
        class Broken:
            def __repr__(self):
                raise RuntimeError("boom")

        assert fmt_value(Broken()) == "<Broken: <Broken object (repr failed: RuntimeError)\\>>"
