# colour.py – palette cells in CIE LCh (D65) with sRGB realization

from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Tuple

from coloraide import Color

from .circstats import normalize_angle

log = logging.getLogger(__name__)

Hex = str
Hue = float
Chroma = float
Lightness = float

# d3's hcl() is CIE LCh(ab) against a D65 white; ColorAide ships it as lch-d65.
SPACE = "lch-d65"
GAMUT = "srgb"
FIT_HEX = {"method": "raytrace", "pspace": SPACE}  # chroma reduction at fixed L/h

CHANNELS = ("h", "c", "l")
FALLBACK_HEX: Hex = "#000000"

# projection inputs are bounded so the Lab -> XYZ cube cannot overflow; the
# fit already lands on the sRGB boundary long before either limit
MAX_PROJECT_CHROMA: Chroma = 500.0
PROJECT_LIGHTNESS = (-1e6, 1e6)
LIGHT_THRESHOLD: Lightness = 50.0


class InvalidColourError(ValueError):
    """A colour string that neither CSS nor bare hex parsing accepts."""


@dataclass(frozen=True)
class Realized:
    h: Hue
    c: Chroma
    l: Lightness

    def to_dict(self) -> Dict[str, float]:
        return {"h": self.h, "c": self.c, "l": self.l}


@dataclass(frozen=True)
class Colour:
    """One palette cell.

    ``h``/``c``/``l`` are what the user asked for; ``r`` is what ``hex``
    actually shows once the request has been fitted into sRGB.  ``id`` is
    carried through every edit of the same cell.
    """

    id: str
    h: Hue
    c: Chroma
    l: Lightness
    hex: Hex
    light: bool
    r: Realized

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "h": self.h,
            "c": self.c,
            "l": self.l,
            "hex": self.hex,
            "light": self.light,
            "r": self.r.to_dict(),
        }


# ---- input policy -----------------------------------------------------------


def _finite(name: str, value: Any, default: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError, OverflowError):
        log.warning("channel %s=%r is not a usable number; using %s", name, value, default)
        return default
    if not math.isfinite(v):
        log.warning("channel %s=%r is not finite; using %s", name, value, default)
        return default
    return v


def sanitize(h: Any, c: Any, l: Any) -> Tuple[Hue, Chroma, Lightness]:
    """Apply the request policy: hue wraps, negative chroma clamps to 0,
    lightness is kept as asked (the gamut fit clamps it, not us)."""
    return (
        normalize_angle(_finite("h", h, 0.0)),
        max(0.0, _finite("c", c, 0.0)),
        _finite("l", l, 0.0),
    )


def _canon(text: str) -> str:
    s = text.strip()
    raw = s.lstrip("#")
    if len(raw) in (3, 6) and all(ch in string.hexdigits for ch in raw):
        return "#" + raw.lower()
    return s


def parse_colour(text: str) -> Tuple[Hue, Chroma, Lightness]:
    """Parse a CSS colour or bare 3/6-digit hex into ``(h, c, l)``."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidColourError(f"invalid colour: {text!r}")
    try:
        lch = Color(_canon(text)).convert(SPACE)
    except (ValueError, OverflowError) as exc:
        raise InvalidColourError(f"invalid colour: {text!r}") from exc
    h, c, l = lch["h"], float(lch["c"]), float(lch["l"])
    if not (math.isfinite(c) and math.isfinite(l)) or math.isinf(h):
        raise InvalidColourError(f"colour out of range: {text!r}")
    return (0.0 if math.isnan(h) else float(h)), c, l


# ---- projection -------------------------------------------------------------


def project(h: Hue, c: Chroma, l: Lightness) -> Hex:
    """Display-safe hex for an LCh request, gamut-fitted into sRGB."""
    lo, hi = PROJECT_LIGHTNESS
    l = min(max(l, lo), hi)
    c = min(c, MAX_PROJECT_CHROMA)
    return Color(SPACE, [l, c, h]).convert(GAMUT).to_string(hex=True, fit=FIT_HEX)


def realize(hex_: Hex, hue_hint: Hue = 0.0) -> Realized:
    """Read ``hex_`` back into LCh.  Greys have no hue; ``hue_hint`` stands in."""
    lch = Color(hex_).convert(SPACE)
    h = lch["h"]
    return Realized(
        h=normalize_angle(hue_hint if math.isnan(h) else h),
        c=float(lch["c"]),
        l=float(lch["l"]),
    )


# ---- constructors -----------------------------------------------------------


def from_requested(h: Any, c: Any, l: Any, *, id: str) -> Colour:
    h, c, l = sanitize(h, c, l)
    hex_ = project(h, c, l)
    return Colour(
        id=id,
        h=h,
        c=c,
        l=l,
        hex=hex_,
        light=l >= LIGHT_THRESHOLD,
        r=realize(hex_, h),
    )


def from_hex(text: str, *, id: str, fallback: Colour | None = None) -> Colour:
    """Build a colour from a colour string.

    A string that does not parse is logged and replaced by ``fallback``
    (re-tagged with ``id``), or by black when there is none.
    """
    try:
        h, c, l = parse_colour(text)
    except InvalidColourError as exc:
        log.warning("%s; falling back", exc)
        if fallback is not None:
            return fallback if fallback.id == id else replace(fallback, id=id)
        h, c, l = parse_colour(FALLBACK_HEX)
    return from_requested(h, c, l, id=id)


def from_colour_input(
    value: str | Mapping[str, Any], *, id: str, fallback: Colour | None = None
) -> Colour:
    """Accept either a colour string or an ``{h, c, l}`` mapping."""
    if isinstance(value, str):
        return from_hex(value, id=id, fallback=fallback)
    if isinstance(value, Mapping) and all(k in value for k in CHANNELS):
        return from_requested(value["h"], value["c"], value["l"], id=id)
    log.warning("unsupported colour input %r; falling back", value)
    if fallback is not None:
        return fallback if fallback.id == id else replace(fallback, id=id)
    return from_hex(FALLBACK_HEX, id=id)


def recompute(existing: Colour, **patch: Any) -> Colour:
    """Re-derive ``existing`` with some of ``h``/``c``/``l`` replaced."""
    unknown = set(patch) - set(CHANNELS)
    if unknown:
        raise ValueError(f"unknown colour channel(s): {sorted(unknown)}")
    return from_requested(
        patch.get("h", existing.h),
        patch.get("c", existing.c),
        patch.get("l", existing.l),
        id=existing.id,
    )


__all__ = [
    "CHANNELS",
    "Colour",
    "InvalidColourError",
    "Realized",
    "from_colour_input",
    "from_hex",
    "from_requested",
    "parse_colour",
    "project",
    "realize",
    "recompute",
    "sanitize",
]
