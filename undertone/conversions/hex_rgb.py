import string
from boundednumbers import clamp

from ..errors import InvalidFormatError
from ..types.color_types import RGB, Scalar

HEX_DIGITS = frozenset(string.hexdigits.lower())
HEX_LENGTHS = (3, 6)


def sanitize_hex(hex_color: str) -> str:
    """
    Normalize a hex color to its bare lowercase digits.

    Accepts ``"#rrggbb"``, ``"rrggbb"``, ``"#rgb"`` or ``"rgb"`` in any case,
    with surrounding whitespace.

    Raises:
        InvalidFormatError: if the input is not a non-empty string of
            exactly 3 or 6 hex digits once the ``#`` is removed.
    """
    if not hex_color or not isinstance(hex_color, str):
        raise InvalidFormatError(
            f'hex must be a non-empty string like "#aabbcc" or "abc", got {hex_color!r}'
        )
    digits = hex_color.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    digits = digits.lower()
    if len(digits) not in HEX_LENGTHS:
        raise InvalidFormatError(f"hex must be 3 or 6 hex digits, got {hex_color!r}")
    if not HEX_DIGITS.issuperset(digits):
        raise InvalidFormatError(f"hex contains non-hex characters: {hex_color!r}")
    return digits


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse a hex color into 8-bit channels. Shorthand nibbles are doubled."""
    digits = sanitize_hex(hex_color)
    if len(digits) == 3:
        return RGB(*(int(d * 2, 16) for d in digits))
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _to_byte(value: Scalar) -> int:
    return int(clamp(round(value), 0, 255))


def rgb_to_hex(rgb: tuple[Scalar, Scalar, Scalar]) -> str:
    """Format 8-bit channels as ``#rrggbb``; channels are rounded and clamped first."""
    r, g, b = rgb
    return f"#{_to_byte(r):02x}{_to_byte(g):02x}{_to_byte(b):02x}"


def normalize_hex(hex_color: str) -> str:
    """Canonical ``#rrggbb`` form of any accepted hex spelling."""
    return rgb_to_hex(hex_to_rgb(hex_color))
