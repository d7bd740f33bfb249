"""
SI prefix parsing and formatting.

Only "positive" multiples of 1000^n are supported: kilo, mega, giga, tera, peta and exa.
Parsing is lossless, the value is scaled as decimal digits and never goes through float.
Formatting is a display format: at most two fraction digits, truncated, never rounded.

Examples:
    >>> parse("12.3k")
    12300
    >>> parse("0.12k")
    120
    >>> format(1_234)
    '1.23k'
    >>> format(123_456)
    '123.45k'
    >>> format(12_345_678)
    '12.34M'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import string
from collections.abc import Iterable, Mapping

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidUnitError, NotAsciiError, ParseIntError
from .serde import Transcoder
from .tools import U64_MAX, fmt_type, strip_whitespace, validate_u64
from .units import UnitsConf

# Digits of U64_MAX, longer digit strings (leading zeros aside) always overflow
_U64_DIGITS = len(str(U64_MAX))


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str) -> int:
    """
    Parse a SI prefixed string into a number.

    Whitespaces are trimmed around the input and around the number, so "12 k" is valid.
    SI prefixes are unique letters, the prefix is matched case-insensitively.
    At most one prefix may be given ("5kk" is invalid), no prefix means a factor of 1.

    Raises:
        NotAsciiError: If text has a non-ASCII character.
        InvalidUnitError: If the unit is not a single SI prefix.
        ParseIntError: If the number has no digits or an invalid digit.

    Examples:
        >>> parse("12.3k")
        12300
        >>> parse("012.340k")  # Unused zeroes
        12340
        >>> parse("12.3456k")  # Overflowing fraction is truncated
        12345
        >>> parse(".5k")
        500
        >>> parse("5.k")
        5000
        >>> parse("0.2")  # Less than one
        0
    """
    return parse_with_units(text, ())


def parse_with_units(text: str, additional_units: Mapping[str, int] | Iterable[tuple[str, int]]) -> int:
    """
    Like parse() but with additional units matched after the SI prefix.

    Unlike SI prefixes, additional units are matched case-sensitively, at most one can be used
    and it must come after the prefix: "12kB" is valid, "12Bk" is not. An additional unit equal
    to a prefix letter shadows that prefix.

    Args:
        text            : The string to parse.
        additional_units: Ordered (suffix, factor) pairs or a mapping suffix -> factor.

    Examples:
        >>> parse_with_units("12kB", {"b": 1, "B": 8})
        96000
        >>> parse_with_units("12k", [("k", 2)])
        24
    """
    value_text, multiplier = resolve(text, additional_units)
    return scale(value_text, multiplier)


def resolve(text: str, additional_units: Mapping[str, int] | Iterable[tuple[str, int]] = ()) -> tuple[str, int]:
    """
    Split text into its value text and the multiplier of its unit.

    The trimmed input is split at the first ASCII letter. The unit text is consumed as
    [SI-prefix-letter][additional-unit]; anything left is an invalid unit.

    Returns:
        Tuple of (value_text, multiplier), multiplier is 1 if there is no unit text.

    Raises:
        NotAsciiError: If text has a non-ASCII character.
        InvalidUnitError: Carries the full original unit text, not only the remainder.

    Examples:
        >>> resolve(" 12.5 kB ", {"B": 1})
        ('12.5 ', 1000)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {fmt_type(text)}")
    if not text.isascii():
        raise NotAsciiError()

    units = _unit_pairs(additional_units)
    text = strip_whitespace(text)
    split = next((i for i, char in enumerate(text) if char in string.ascii_letters), len(text))
    value_text, original_unit_text = text[:split], text[split:]

    unit_text = original_unit_text
    multiplier = 1

    # SI prefix first, unless an additional unit claims the same letter
    if unit_text:
        factor = UnitsConf.SI_FACTORS.get(unit_text[0].lower())
        if factor is not None and all(suffix != unit_text[0] for suffix, _ in units):
            multiplier *= factor
            unit_text = unit_text[1:]

    if unit_text:
        for suffix, factor in units:
            if unit_text == suffix:
                multiplier *= factor
                unit_text = ""
                break

    if unit_text:
        raise InvalidUnitError(original_unit_text)

    return value_text, multiplier


def scale(value_text: str, multiplier: int) -> int:
    """
    Compute value_text × multiplier with exact decimal fixed-point arithmetic.

    value_text is [integer-digits][.fraction-digits], either side may be empty but not both.
    The fraction is multiplied before it is divided, and the division truncates: sub-unit
    precision is lost downwards only.

    Raises:
        ParseIntError: If value_text has no digits (no cause), an invalid digit (ValueError cause),
                       or a digit string or result beyond U64_MAX (OverflowError cause).

    Examples:
        >>> scale("12.345", 1000)
        12345
        >>> scale("12.3", 8)
        98
    """
    if not isinstance(value_text, str):
        raise TypeError(f"value_text must be str, got {fmt_type(value_text)}")
    if isinstance(multiplier, bool) or not isinstance(multiplier, int):
        raise TypeError(f"multiplier must be int, got {fmt_type(multiplier)}")
    if multiplier < 1:
        raise ValueError(f"multiplier must be positive, got {multiplier}")

    value_text = strip_whitespace(value_text)
    integer_text, _, fraction_text = value_text.partition(".")
    fraction_text = fraction_text.rstrip("0")
    if not integer_text and not fraction_text:
        raise ParseIntError(value_text)

    result = _scale_part(integer_text, multiplier, 1)
    result += _scale_part(fraction_text, multiplier, 10 ** len(fraction_text))

    if result > U64_MAX:
        cause = OverflowError("number too large to fit in target type")
        raise ParseIntError(value_text, cause) from cause
    return result


def format(value: int) -> str:
    """
    Format an integer into a SI prefixed string.

    The largest prefix with a non-zero integer part is used (no "0.**"), at most two
    fraction digits are displayed, truncated and with trailing zeroes stripped.

    Examples:
        >>> format(0)
        '0'
        >>> format(12)
        '12'
        >>> format(1_234)
        '1.23k'
        >>> format(1_200_000_000)
        '1.2G'
    """
    validate_u64(value)
    if value == 0:
        return "0"

    digits = str(value)
    exponent = min((len(digits) - 1) // 3, len(UnitsConf.SI_PREFIXES) - 1)
    split = len(digits) - 3 * exponent

    output = digits[:split]
    fraction = digits[split:].rstrip("0")
    if fraction:
        output += f".{fraction[:2]}"
    return output + UnitsConf.SI_PREFIXES[exponent]


# Private Methods ------------------------------------------------------------------------------------------------------

def _scale_part(digits: str, multiplier: int, reduce: int) -> int:
    if not digits:
        return 0
    try:
        number = _parse_u64(digits)
    except (ValueError, OverflowError) as err:
        raise ParseIntError(digits, err) from err
    return number * multiplier // reduce


def _parse_u64(digits: str) -> int:
    """Parse an unsigned 64-bit integer: optional leading '+', then ASCII digits only."""
    body = digits[1:] if digits.startswith("+") else digits
    if not body or any(char not in string.digits for char in body):
        raise ValueError("invalid digit found in string")
    significant = body.lstrip("0") or "0"
    if len(significant) > _U64_DIGITS or int(significant) > U64_MAX:
        raise OverflowError("number too large to fit in target type")
    return int(significant)


def _unit_pairs(additional_units: Mapping[str, int] | Iterable[tuple[str, int]]) -> tuple[tuple[str, int], ...]:
    if isinstance(additional_units, Mapping):
        additional_units = additional_units.items()
    elif isinstance(additional_units, (str, bytes)) or not isinstance(additional_units, Iterable):
        raise TypeError(f"additional_units must be a Mapping or an Iterable of pairs, "
                        f"got {fmt_type(additional_units)}")

    pairs = tuple(tuple(pair) for pair in additional_units)
    for pair in pairs:
        if len(pair) != 2 or not isinstance(pair[0], str) or not pair[0]:
            raise ValueError(f"additional unit must be a (non-empty str, int) pair, got {pair!r}")
        if validate_u64(pair[1], name=f"factor of unit {pair[0]!r}") == 0:
            raise ValueError(f"factor of unit {pair[0]!r} must be positive")
    return pairs


transcoder = Transcoder("si", parse, format)
serialize = transcoder.encode
deserialize = transcoder.decode
