import re

from folderbench.constants import KILOBYTE, MEGABYTE, GIGABYTE, TERABYTE
from folderbench.errors import ParseError

_SIZE_RE = re.compile(r"(?P<num>[0-9]+)(?P<unit>[kKmM]?)")

_UNITS = {"": 1, "k": KILOBYTE, "m": MEGABYTE}

_SCALES = (("Tb", TERABYTE), ("Gb", GIGABYTE), ("Mb", MEGABYTE), ("Kb", KILOBYTE))

_INT64_MAX = 2**63 - 1
_INT32_MAX = 2**31 - 1


def parse_size(text: str) -> int:
    """Parse '4096', '4K' or '10M' into a byte count."""
    if not isinstance(text, str):
        raise ParseError(f"Invalid size: {text!r}")
    m = _SIZE_RE.fullmatch(text)
    if m is None:
        raise ParseError(f"Invalid size: {text!r}")
    value = int(m.group("num")) * _UNITS[m.group("unit").lower()]
    if value > _INT64_MAX:
        raise ParseError(f"Size out of range: {text!r}")
    return value


def parse_size_int(text: str) -> int:
    """Like parse_size, but the result must fit a signed 32-bit integer."""
    value = parse_size(text)
    if value > _INT32_MAX:
        raise ParseError(f"Size out of range: {text!r}")
    return value


def as_scaled_string(value: int) -> str:
    for label, scale in _SCALES:
        if value >= scale:
            if value % scale == 0:
                return f"{value // scale}{label}"
            return f"{value / scale:.2f}{label}"
    return str(value)
