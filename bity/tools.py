#
# Bity Tools & Utilities
#

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .units import UnitsConf

U64_MAX = 2**64 - 1

_WHITESPACE = " \t\n\r\x0b\x0c"


# Methods --------------------------------------------------------------------------------------------------------------

def strip_per_second(text: str) -> str:
    """
    Strip at most one trailing per-second suffix such as `/s` or `ps`.

    The input is trimmed first. `/s` is checked before `ps`, and only the last
    occurrence is removed even if the suffixes chain.

    Examples:
        >>> strip_per_second("8kb/s")
        '8kb'
        >>> strip_per_second("8kbps")
        '8kb'
        >>> strip_per_second("8kbps/s")
        '8kbps'
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {fmt_type(text)}")

    text = strip_whitespace(text)
    for suffix in UnitsConf.PER_SECOND_SUFFIXES:
        if text.endswith(suffix):
            return text.removesuffix(suffix)
    return text


def strip_whitespace(s: str) -> str:
    """Trim ASCII whitespace only, ASCII separators \\x1c-\\x1f are kept."""
    return s.strip(_WHITESPACE)


def validate_u64(value: Any, name: str = "value") -> int:
    """
    Check that value is an unsigned 64-bit integer and return it.

    Raises:
        TypeError: If value is not an int, bool is rejected as well.
        ValueError: If value is negative or greater than U64_MAX.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {fmt_type(value)}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} must be in range [0, {U64_MAX}], got {value}")
    return value


def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return f"<type: {type_name}>"


def fmt_value(x: Any, max_repr: int = 120) -> str:
    """
    Format a single value as a type–value pair for exception and log messages.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=8)
        "<str: 'hell'...>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    base_repr = base_repr.replace(">", "\\>")
    return f"<{t}: {_fmt_truncate(base_repr, max_repr)}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int, ellipsis: str = "...") -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep their quotes and get the ellipsis outside the closing quote.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner = s[1:1 + max(1, max_len - 4)]
        return f"{s[0]}{inner}{s[0]}{ellipsis}"

    return s[:max(1, max_len)] + ellipsis
