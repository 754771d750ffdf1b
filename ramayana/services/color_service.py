from __future__ import annotations

import re
from typing import NamedTuple

# Leading hex run, optional 0x prefix; parsing stops at the first non-hex character.
_HEX_PREFIX_RE = re.compile(r"(?:0[xX])?([0-9A-Fa-f]+)")


class AccentColor(NamedTuple):
    """ARGB color with every channel normalized to [0.0, 1.0]."""

    alpha: float
    red: float
    green: float
    blue: float

    def to_hex(self) -> str:
        return "#{:02X}{:02X}{:02X}".format(*(round(c * 255) for c in (self.red, self.green, self.blue)))

    def to_css(self) -> str:
        r, g, b = (round(c * 255) for c in (self.red, self.green, self.blue))
        return f"rgba({r}, {g}, {b}, {self.alpha:.3f})"


def _parse_hex(s: str) -> int:
    match = _HEX_PREFIX_RE.match(s)
    return int(match.group(1), 16) if match else 0


def resolve_accent_color(hex_string: str) -> AccentColor:
    """Decode a 3, 6 or 8 digit hex string (RGB, RRGGBB, AARRGGBB).

    Anything else resolves to transparent black. Never raises.
    """
    text = hex_string if isinstance(hex_string, str) else ""
    digits = "".join(c for c in text if c.isalnum())
    value = _parse_hex(digits)

    if len(digits) == 3:
        a, r, g, b = 255, (value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17
    elif len(digits) == 6:
        a, r, g, b = 255, value >> 16, value >> 8 & 0xFF, value & 0xFF
    elif len(digits) == 8:
        a, r, g, b = value >> 24, value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF
    else:
        a, r, g, b = 0, 0, 0, 0

    return AccentColor(a / 255.0, r / 255.0, g / 255.0, b / 255.0)
