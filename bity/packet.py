"""
SI prefixed packets parsing and formatting.

Examples:
    >>> parse("3.4kp")
    3400
    >>> format(1_234)
    '1.23kp'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import si
from .serde import Transcoder
from .units import UnitsConf


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    """
    Parse a SI prefixed packets string into a number of packets.

    The "p" suffix is optional; a lone "p" is the packet unit, not the peta prefix.
    """
    return si.parse_with_units(text, UnitsConf.PACKET_UNITS)


def format(value: int) -> str:
    return f"{si.format(value)}p"


transcoder = Transcoder("packet", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
