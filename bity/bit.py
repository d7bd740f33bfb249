"""
SI prefixed data (bit) parsing and formatting.

Examples:
    >>> parse("12.3kb")
    12300
    >>> parse("0.12kB")
    960
    >>> format(12_345_678)
    '12.34Mb'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import si
from .serde import Transcoder
from .units import UnitsConf


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    """
    Parse a data SI prefixed string into a number of bits.

    Equivalent to si.parse_with_units(text, {"b": 1, "B": 8}), so bytes are accepted too.

    Examples:
        >>> parse("12b")
        12
        >>> parse("12B")
        96
        >>> parse("12.345kB")
        98760
    """
    return si.parse_with_units(text, UnitsConf.BIT_UNITS)


def format(value: int) -> str:
    """Format a number of bits, e.g. 1_234 -> '1.23kb'."""
    return f"{si.format(value)}b"


transcoder = Transcoder("bit", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
