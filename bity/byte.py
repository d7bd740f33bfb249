"""
SI prefixed data (byte) parsing and formatting.

Examples:
    >>> parse("12.3kB")
    12300
    >>> parse("800b")
    100
    >>> format(1_234)
    '1.23kB'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import si
from .serde import Transcoder
from .units import UnitsConf


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    """
    Parse a data SI prefixed string into a number of bytes.

    If the input mentions bits (a lowercase "b" anywhere), it is parsed as bits and
    divided by 8, leftover bits are dropped.

    Examples:
        >>> parse("12b")
        1
        >>> parse("12kB")
        12000
        >>> parse("12.345kb")
        1543
    """
    if isinstance(text, str) and "b" in text:
        return si.parse_with_units(text, UnitsConf.BIT_UNITS) // UnitsConf.BITS_PER_BYTE
    return si.parse_with_units(text, UnitsConf.BYTE_UNITS)


def format(value: int) -> str:
    """Format a number of bytes, e.g. 12_000 -> '12kB'."""
    return f"{si.format(value)}B"


transcoder = Transcoder("byte", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
