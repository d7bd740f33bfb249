#
# Bity - CLI Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bity.cli import main


# Tests ----------------------------------------------------------------------------------------------------------------

class TestMain:
    @pytest.mark.parametrize(
        "argv, expected",
        [
            pytest.param(["parse", "byte", "12.3kB"], "12300", id="parse-byte"),
            pytest.param(["parse", "bps", "8.65kB/s"], "69200", id="parse-bps"),
            pytest.param(["parse", "si", "42"], "42", id="parse-plain"),
            pytest.param(["format", "pps", "1234"], "1.23kp/s", id="format-pps"),
            pytest.param(["format", "bit", "0"], "0b", id="format-zero"),
        ],
    )
    def test_success(self, argv, expected, capsys):
        assert main(argv) == 0
        assert capsys.readouterr().out == f"{expected}\n"

    def test_parse_error(self, capsys, caplog):
        with caplog.at_level(logging.ERROR, logger="bity.cli"):
            assert main(["parse", "si", "12Q"]) == 1
        assert capsys.readouterr().out == ""
        assert 'invalid unit "Q"' in caplog.text

    def test_format_out_of_range(self, caplog):
        with caplog.at_level(logging.ERROR, logger="bity.cli"):
            assert main(["format", "si", "18446744073709551616"]) == 1
        assert "must be in range" in caplog.text

    def test_unknown_domain(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["parse", "kelvin", "12"])
        assert exc_info.value.code == 2

    def test_format_requires_int(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["format", "si", "12k"])
        assert exc_info.value.code == 2
