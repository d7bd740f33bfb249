#
# Bity - Errors Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bity.errors import BityError, DecodeError, InvalidUnitError, NotAsciiError, ParseIntError


# Tests ----------------------------------------------------------------------------------------------------------------

class TestErrors:
    @pytest.mark.parametrize(
        "err, message, text",
        [
            pytest.param(NotAsciiError(), "input must be ascii", None, id="not-ascii"),
            pytest.param(InvalidUnitError("kk"), 'invalid unit "kk"', "kk", id="invalid-unit"),
            pytest.param(ParseIntError("1.1"), 'invalid number "1.1"', "1.1", id="parse-int"),
            pytest.param(DecodeError("bad value"), "bad value", None, id="decode"),
        ],
    )
    def test_message_and_text(self, err, message, text):
        assert str(err) == message
        assert err.text == text

    @pytest.mark.parametrize("cls", [NotAsciiError, InvalidUnitError, ParseIntError, DecodeError])
    def test_hierarchy(self, cls):
        assert issubclass(cls, BityError)
        assert issubclass(cls, ValueError)

    def test_parse_int_cause(self):
        cause = ValueError("invalid digit found in string")
        err = ParseIntError("1.", cause)
        assert err.cause is cause

    def test_parse_int_no_cause(self):
        assert ParseIntError("").cause is None

    def test_invalid_unit_alias(self):
        assert InvalidUnitError("ACk").unit == "ACk"
