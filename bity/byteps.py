"""
SI prefixed byte-rate parsing and formatting, in bytes per second.

Examples:
    >>> parse("94.5kB/s")
    94500
    >>> format(94_500)
    '94.5kB/s'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import byte
from .serde import Transcoder
from .tools import strip_per_second
from .units import UnitsConf


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    """
    Parse a byte-rate string into bytes per second.

    A trailing "/s" or "ps" is stripped once, then the rest goes to byte.parse().
    """
    return byte.parse(strip_per_second(text))


def format(value: int) -> str:
    return f"{byte.format(value)}{UnitsConf.PER_SECOND_FORMAT}"


transcoder = Transcoder("byteps", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
