"""
Bity serialization glue.

Exposes every parse/format pair as a Transcoder: decoding accepts either a native
unsigned integer (used verbatim) or a string (parsed), encoding always produces a string.

Dataclass fields marked with si_field() are decoded by from_dict() and encoded by to_dict(),
load_toml() and dump_toml() wrap both around TOML documents.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import importlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import toml

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import BityError, DecodeError
from .tools import U64_MAX, fmt_type, fmt_value

logger = logging.getLogger(__name__)

TRANSCODER_NAMES = ("si", "bit", "byte", "bps", "byteps", "packet", "pps")

METADATA_KEY = "bity"


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Transcoder:
    """
    Named encode/decode pair built over a module's parse() and format().

    Attributes:
        name  : Registry name, also the module name under the bity package.
        parse : Function str -> int raising BityError on invalid input.
        format: Function int -> str.
    """

    name: str
    parse: Callable[[str], int] = field(repr=False)
    format: Callable[[int], str] = field(repr=False)

    def decode(self, value: Any) -> int:
        """
        Decode an unsigned integer or a SI prefixed string into an int.

        Raises:
            DecodeError: If the string does not parse, or value is neither an unsigned 64-bit int nor a str.
        """
        if isinstance(value, int) and not isinstance(value, bool):
            if 0 <= value <= U64_MAX:
                return value
            logger.debug("%s: integer out of range %s", self.name, fmt_value(value))
            raise DecodeError(f"expected an unsigned 64-bit integer, got {value}")

        if isinstance(value, str):
            try:
                return self.parse(value)
            except BityError as err:
                logger.debug("%s: rejected %s: %s", self.name, fmt_value(value), err)
                raise DecodeError(str(err), text=err.text) from err

        logger.debug("%s: unsupported value %s", self.name, fmt_value(value))
        raise DecodeError(f"expected an unsigned integer or a string, got {fmt_type(value)}")

    def encode(self, value: int) -> str:
        """Encode an int into a SI prefixed string."""
        return self.format(value)


# Methods --------------------------------------------------------------------------------------------------------------

def get_transcoder(name: "str | Transcoder") -> Transcoder:
    """
    Return the Transcoder registered under name, Transcoder instances are returned as is.

    Examples:
        >>> get_transcoder("byte").decode("1.5kB")
        1500
    """
    if isinstance(name, Transcoder):
        return name
    if name not in TRANSCODER_NAMES:
        raise ValueError(f"unknown transcoder {fmt_value(name)}, expected one of {TRANSCODER_NAMES}")
    return importlib.import_module(f"{__package__}.{name}").transcoder


def transcoders() -> dict[str, Transcoder]:
    """All registered transcoders by name."""
    return {name: get_transcoder(name) for name in TRANSCODER_NAMES}


def si_field(transcoder: "str | Transcoder", **kwargs) -> Any:
    """
    Dataclass field decoded and encoded with the given transcoder.

    Accepts the same keyword arguments as dataclasses.field().

    Examples:
        >>> @dataclass
        ... class Config:
        ...     disk_size: int = si_field("byte")
        >>> from_dict(Config, {"disk-size": "88.1TB"})
        Config(disk_size=88100000000000)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = get_transcoder(transcoder)
    return field(metadata=metadata, **kwargs)


def from_dict(cls: type, data: Mapping[str, Any]) -> Any:
    """
    Build a dataclass instance from a mapping, decoding the fields created with si_field().

    Keys may be kebab-case or snake_case. Unknown keys are ignored, missing
    fields without defaults raise TypeError from the dataclass constructor.

    Raises:
        DecodeError: If a marked field cannot be decoded, the message is prefixed with the key.
    """
    if not (isinstance(cls, type) and is_dataclass(cls)):
        raise TypeError(f"cls must be a dataclass type, got {fmt_type(cls)}")
    if not isinstance(data, Mapping):
        raise TypeError(f"data must be a Mapping, got {fmt_type(data)}")

    init_fields = {f.name: f for f in fields(cls) if f.init}
    values = {}
    for key, value in data.items():
        name = key.replace("-", "_") if isinstance(key, str) else key
        f = init_fields.get(name)
        if f is None:
            logger.debug("%s: ignoring unknown key %s", cls.__name__, fmt_value(key))
            continue

        transcoder = f.metadata.get(METADATA_KEY)
        if transcoder is not None:
            try:
                value = transcoder.decode(value)
            except DecodeError as err:
                raise DecodeError(f"{key}: {err}", text=err.text) from err
        values[name] = value

    return cls(**values)


def to_dict(obj: Any, kebab_case: bool = False) -> dict[str, Any]:
    """
    Convert a dataclass instance into a dict, fields created with si_field() are encoded to strings.
    """
    if isinstance(obj, type) or not is_dataclass(obj):
        raise TypeError(f"obj must be a dataclass instance, got {fmt_type(obj)}")

    result = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        transcoder = f.metadata.get(METADATA_KEY)
        if transcoder is not None:
            value = transcoder.encode(value)
        key = f.name.replace("_", "-") if kebab_case else f.name
        result[key] = value
    return result


def load_toml(cls: type, text: str) -> Any:
    """Parse a TOML document into a dataclass instance, see from_dict()."""
    return from_dict(cls, toml.loads(text))


def dump_toml(obj: Any, kebab_case: bool = True) -> str:
    """Render a dataclass instance as a TOML document, see to_dict()."""
    return toml.dumps(to_dict(obj, kebab_case=kebab_case))
