#
# Bity Units Tables
#

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict


# @formatter:off

class UnitsConf:
    """
    Read-only unit tables shared by the SI engine and the domain modules.

    Additional units tables are ordered: suffixes are matched in insertion order.
    """
    SI_PREFIXES = ("", "k", "M", "G", "T", "P", "E")

    SI_FACTORS = frozendict({
        "k": 10**3, "m": 10**6, "g": 10**9,
        "t": 10**12, "p": 10**15, "e": 10**18,
    })

    BIT_UNITS = frozendict({"b": 1, "B": 8})
    BYTE_UNITS = frozendict({"B": 1})
    PACKET_UNITS = frozendict({"p": 1})

    PER_SECOND_SUFFIXES = ("/s", "ps")
    PER_SECOND_FORMAT = "/s"

    BITS_PER_BYTE = 8

# @formatter:on


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Formatter and parser must agree on the prefix letters.
if tuple(p.lower() for p in UnitsConf.SI_PREFIXES[1:]) != tuple(UnitsConf.SI_FACTORS.keys()):
    raise AssertionError(
        "Configuration Error: SI_PREFIXES and SI_FACTORS must list the same prefixes in the same order."
    )
