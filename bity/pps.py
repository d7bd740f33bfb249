"""
SI prefixed packet-rate parsing and formatting.

Examples:
    >>> parse("2.44Mpps")
    2440000
    >>> format(2_440_000)
    '2.44Mp/s'
"""

# Local ----------------------------------------------------------------------------------------------------------------
from . import packet
from .serde import Transcoder
from .tools import strip_per_second
from .units import UnitsConf


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    # "12pps" -> "12p", "12ps" -> "12"
    return packet.parse(strip_per_second(text))


def format(value: int) -> str:
    return f"{packet.format(value)}{UnitsConf.PER_SECOND_FORMAT}"


transcoder = Transcoder("pps", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
