"""
Color Resolution

Colors in slide documents are either literal RGB objects or string references:
a theme key, a built-in palette name, or a ``#RRGGBB`` hex literal. References
are resolved to RGB triples (0-1 per channel) as the Slides API expects.
"""

import re
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RgbColor(BaseModel):
    """An RGB color with channels in the 0-1 range."""
    model_config = ConfigDict(frozen=True)

    red: float = Field(0.0, ge=0.0, le=1.0)
    green: float = Field(0.0, ge=0.0, le=1.0)
    blue: float = Field(0.0, ge=0.0, le=1.0)

    def to_api(self) -> Dict[str, float]:
        return {"red": self.red, "green": self.green, "blue": self.blue}


class ColorLiteral(BaseModel):
    """A color given directly as RGB channels."""
    model_config = ConfigDict(frozen=True)

    rgb: RgbColor


class ColorName(BaseModel):
    """A color given by name: theme key, palette name or hex string."""
    model_config = ConfigDict(frozen=True)

    name: str


ColorReference = Union[ColorLiteral, ColorName]
ThemeColors = Mapping[str, RgbColor]


# ============================================================
# BUILT-IN PALETTE
# ============================================================

BLACK = RgbColor(red=0, green=0, blue=0)

DEFAULT_COLORS: Dict[str, RgbColor] = {
    "white": RgbColor(red=1, green=1, blue=1),
    "black": BLACK,
    "darkBlue": RgbColor(red=0.102, green=0.212, blue=0.365),
    "accentBlue": RgbColor(red=0.193, green=0.51, blue=0.784),
    "darkGray": RgbColor(red=0.176, green=0.216, blue=0.282),
    "success": RgbColor(red=0.2, green=0.7, blue=0.3),
    "warning": RgbColor(red=0.9, green=0.6, blue=0.1),
    "danger": RgbColor(red=0.8, green=0.2, blue=0.2),
}

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


# ============================================================
# RESOLUTION
# ============================================================

def as_color_reference(value: Any) -> ColorReference:
    """Coerce a raw document value into a ColorReference.

    Accepts an existing reference, an RgbColor, a string, or a mapping with
    red/green/blue keys.
    """
    if isinstance(value, (ColorLiteral, ColorName)):
        return value
    if isinstance(value, RgbColor):
        return ColorLiteral(rgb=value)
    if isinstance(value, str):
        return ColorName(name=value)
    if isinstance(value, Mapping):
        return ColorLiteral(rgb=RgbColor(**value))
    raise ValueError(f"Expected a color name or an RGB object, got {type(value).__name__}")


def hex_to_rgb(hex_color: str) -> RgbColor:
    """Parse ``#RRGGBB`` (the ``#`` is optional). Malformed input yields black."""
    match = _HEX_RE.match(hex_color)
    if not match:
        return BLACK
    red, green, blue = (int(group, 16) / 255 for group in match.groups())
    return RgbColor(red=red, green=green, blue=blue)


def rgb_to_hex(color: RgbColor) -> str:
    """Format a color as ``#rrggbb``."""
    return "#" + "".join(
        f"{round(channel * 255):02x}" for channel in (color.red, color.green, color.blue)
    )


def resolve_color(
    color: Union[ColorReference, RgbColor, str],
    theme: Optional[ThemeColors] = None,
) -> RgbColor:
    """Resolve a color reference to an RgbColor.

    Order: literal value, theme key, built-in palette, hex string, black.
    A theme entry always wins over a palette entry with the same name.
    """
    ref = as_color_reference(color)
    if isinstance(ref, ColorLiteral):
        return ref.rgb

    name = ref.name
    if theme and name in theme:
        return theme[name]
    if name in DEFAULT_COLORS:
        return DEFAULT_COLORS[name]
    if name.startswith("#"):
        return hex_to_rgb(name)
    return BLACK
