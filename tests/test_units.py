#
# Bity - Units Tables Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bity.units import UnitsConf


# Tests ----------------------------------------------------------------------------------------------------------------

class TestUnitsConf:
    def test_prefix_factors(self):
        factors = [UnitsConf.SI_FACTORS[p.lower()] for p in UnitsConf.SI_PREFIXES[1:]]
        assert factors == [1000 ** n for n in range(1, 7)]

    def test_tables_are_ordered(self):
        assert list(UnitsConf.BIT_UNITS.items()) == [("b", 1), ("B", 8)]

    @pytest.mark.parametrize(
        "table",
        [
            pytest.param(UnitsConf.SI_FACTORS, id="si"),
            pytest.param(UnitsConf.BIT_UNITS, id="bit"),
            pytest.param(UnitsConf.BYTE_UNITS, id="byte"),
            pytest.param(UnitsConf.PACKET_UNITS, id="packet"),
        ],
    )
    def test_tables_are_immutable(self, table):
        with pytest.raises(TypeError):
            table["x"] = 1

    def test_per_second_order(self):
        assert UnitsConf.PER_SECOND_SUFFIXES == ("/s", "ps")
