"""
SI prefixed bit-rate parsing and formatting, in bits per second.

Examples:
    >>> parse("2.44Mbps")
    2440000
    >>> format(69_200)
    '69.2kb/s'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import bit
from .serde import Transcoder
from .tools import strip_per_second
from .units import UnitsConf


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    """
    Parse a bit-rate string into bits per second.

    A trailing "/s" or "ps" is stripped once, then the rest goes to bit.parse(),
    so byte rates are accepted as well.

    Examples:
        >>> parse("12.345kbps")
        12345
        >>> parse("8.65kB/s")
        69200
    """
    return bit.parse(strip_per_second(text))


def format(value: int) -> str:
    return f"{bit.format(value)}{UnitsConf.PER_SECOND_FORMAT}"


transcoder = Transcoder("bps", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
