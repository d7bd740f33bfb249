#
# Bity Errors
#

# Classes --------------------------------------------------------------------------------------------------------------

class BityError(ValueError):
    """
    Base class for every error raised while parsing SI prefixed strings.

    Subclasses ValueError so callers may catch either. The offending substring of the
    original input (if any) is kept as an owned copy in `text`.
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class NotAsciiError(BityError):
    """Input contains a non-ASCII character, nothing else was parsed."""

    def __init__(self):
        super().__init__("input must be ascii")


class InvalidUnitError(BityError):
    """
    Unit text has leftover characters after SI prefix and additional unit matching.

    The full original unit text is carried, not only the unconsumed remainder.
    """

    def __init__(self, unit: str):
        super().__init__(f'invalid unit "{unit}"', text=unit)

    @property
    def unit(self) -> str:
        return self.text


class ParseIntError(BityError):
    """
    Numeric text could not be interpreted as digits.

    Attributes:
        text : The numeric substring (whole value text when it is empty, otherwise the failing side).
        cause: Underlying ValueError/OverflowError, None when the value text holds no digits at all.
    """

    def __init__(self, text: str, cause: Exception | None = None):
        super().__init__(f'invalid number "{text}"', text=text)
        self.cause = cause


class DecodeError(BityError):
    """Value rejected at the serialization boundary (config files, dataclass fields)."""
