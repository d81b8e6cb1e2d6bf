"""
Color palette synthesis.

Deterministic color-theory transforms that turn one seed color and a mood
into a full semantic palette: six roles plus a ten-step gray ramp tinted
with the seed hue. HSL channels are kept as floats so hex round trips are
exact; ``HSL.rounded()`` gives the integer form for display.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from vibesmith.core.errors import InvalidColorError
from vibesmith.core.thresholds import (
    CONTRAST_FIX_ITERATIONS,
    CONTRAST_FIX_STEP,
    WCAG_AA_RATIO,
)

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# Gray ramp, light to dark
GRAY_LIGHTNESS = (98, 96, 91, 83, 64, 45, 33, 23, 15, 9)
GRAY_SATURATION = (5, 5, 6, 6, 8, 10, 12, 14, 14, 14)

# CSS variable suffixes for the ramp (--gray-50 ... --gray-900)
GRAY_STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)


class PaletteMood(StrEnum):
    VIBRANT = "vibrant"
    MUTED = "muted"
    MONOCHROME = "monochrome"


TINT_STRENGTH: dict[PaletteMood, float] = {
    PaletteMood.VIBRANT: 0.05,
    PaletteMood.MUTED: 0.03,
    PaletteMood.MONOCHROME: 0.02,
}

DARK_TINT_STRENGTH = 0.03


@dataclass(frozen=True)
class HSL:
    """Hue 0-360, saturation and lightness 0-100."""

    h: float
    s: float
    l: float  # noqa: E741

    def rounded(self) -> tuple[int, int, int]:
        return round(self.h) % 360, round(self.s), round(self.l)


@dataclass(frozen=True)
class Palette:
    """Six semantic color roles plus the tinted gray ramp (light to dark)."""

    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    muted: str
    grays: tuple[str, ...] = field(default_factory=tuple)
    name: str = ""

    def roles(self) -> dict[str, str]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "background": self.background,
            "text": self.text,
            "muted": self.muted,
        }

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Palette:
        """Build a palette from user input; a missing ramp is derived from primary."""
        missing = [key for key in cls.role_names() if key not in data]
        if missing:
            raise InvalidColorError(f"palette is missing roles: {', '.join(missing)}")
        roles = {key: normalize_hex(data[key]) for key in cls.role_names()}
        grays = data.get("grays")
        if grays:
            ramp = tuple(normalize_hex(g) for g in grays)
        else:
            ramp = tuple(generate_tinted_grays(hex_to_hsl(roles["primary"]).h))
        return cls(**roles, grays=ramp, name=str(data.get("name", "")))

    @staticmethod
    def role_names() -> tuple[str, ...]:
        return ("primary", "secondary", "accent", "background", "text", "muted")


# =============================================================================
# Conversions
# =============================================================================


def normalize_hex(color: str) -> str:
    """Return ``#rrggbb`` lowercase for a 3- or 6-digit hex string."""
    match = _HEX_RE.match(color.strip()) if isinstance(color, str) else None
    if not match:
        raise InvalidColorError(f"not a hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.lower()}"


def _hex_channels(color: str) -> tuple[float, float, float]:
    digits = normalize_hex(color)[1:]
    return (
        int(digits[0:2], 16) / 255,
        int(digits[2:4], 16) / 255,
        int(digits[4:6], 16) / 255,
    )


def hex_to_hsl(color: str) -> HSL:
    r, g, b = _hex_channels(color)
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        # Achromatic
        return HSL(0.0, 0.0, lightness * 100)

    d = high - low
    saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
    if high == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4

    return HSL((hue / 6) * 360, saturation * 100, lightness * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(hsl: HSL) -> str:
    h = (hsl.h % 360) / 360
    s = hsl.s / 100
    lightness = hsl.l / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return "#" + "".join(f"{round(channel * 255):02x}" for channel in (r, g, b))


# =============================================================================
# Channel transforms
# =============================================================================


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def rotate_hue(hsl: HSL, degrees: float) -> HSL:
    return HSL((hsl.h + degrees) % 360, hsl.s, hsl.l)


def adjust_saturation(hsl: HSL, amount: float) -> HSL:
    return HSL(hsl.h, _clamp(hsl.s + amount, 0, 100), hsl.l)


def adjust_lightness(hsl: HSL, amount: float) -> HSL:
    return HSL(hsl.h, hsl.s, _clamp(hsl.l + amount, 0, 100))


def saturate(hsl: HSL, amount: float) -> HSL:
    return adjust_saturation(hsl, amount)


def desaturate(hsl: HSL, amount: float) -> HSL:
    return adjust_saturation(hsl, -amount)


def generate_tinted_grays(hue: float, tint_strength: float = DARK_TINT_STRENGTH) -> list[str]:
    """Ten grays from near-white to near-black, tinted toward ``hue``."""
    return [
        hsl_to_hex(HSL(hue, saturation * tint_strength * 10, lightness))
        for lightness, saturation in zip(GRAY_LIGHTNESS, GRAY_SATURATION, strict=True)
    ]


# =============================================================================
# Contrast
# =============================================================================


def relative_luminance(color: str) -> float:
    """WCAG 2.x relative luminance."""

    def linear(channel: float) -> float:
        return channel / 12.92 if channel <= 0.03928 else ((channel + 0.055) / 1.055) ** 2.4

    r, g, b = _hex_channels(color)
    return 0.2126 * linear(r) + 0.7152 * linear(g) + 0.0722 * linear(b)


def contrast_ratio(color1: str, color2: str) -> float:
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def has_adequate_contrast(color1: str, color2: str) -> bool:
    """WCAG AA for normal text (4.5:1)."""
    return contrast_ratio(color1, color2) >= WCAG_AA_RATIO


def ensure_contrast(foreground: str, background: str) -> str:
    """Return ``foreground``, stepped darker or lighter until it passes AA.

    Gives up after a fixed number of steps and falls back to pure black or
    white.
    """
    if has_adequate_contrast(foreground, background):
        return normalize_hex(foreground)

    should_darken = hex_to_hsl(background).l > 50
    step = -CONTRAST_FIX_STEP if should_darken else CONTRAST_FIX_STEP

    adjusted = hex_to_hsl(foreground)
    for _ in range(CONTRAST_FIX_ITERATIONS):
        adjusted = adjust_lightness(adjusted, step)
        candidate = hsl_to_hex(adjusted)
        if has_adequate_contrast(candidate, background):
            return candidate

    fallback = "#000000" if should_darken else "#ffffff"
    logger.debug("Contrast fix for %s on %s fell back to %s", foreground, background, fallback)
    return fallback


def contrast_text_color(background: str) -> str:
    """Black or white text for a background, cut at lightness 55."""
    return "#000000" if hex_to_hsl(background).l > 55 else "#ffffff"


# =============================================================================
# Palettes
# =============================================================================


def generate_palette(seed_color: str, mood: PaletteMood | str = PaletteMood.VIBRANT) -> Palette:
    """Build a light palette from a seed color.

    vibrant: complementary secondary (+180), accent at +60, both saturated.
    muted: secondary at +30 and accent at -30, both desaturated.
    monochrome: seed hue only, lightness and saturation shifts.
    """
    mood = PaletteMood(mood)
    hsl = hex_to_hsl(seed_color)

    if mood is PaletteMood.MONOCHROME:
        secondary = adjust_lightness(desaturate(hsl, 10), -15)
        accent = adjust_lightness(saturate(hsl, 10), 10)
    elif mood is PaletteMood.MUTED:
        secondary = desaturate(rotate_hue(hsl, 30), 15)
        accent = desaturate(rotate_hue(hsl, -30), 10)
    else:
        secondary = saturate(rotate_hue(hsl, 180), 10)
        accent = saturate(rotate_hue(hsl, 60), 15)

    grays = generate_tinted_grays(hsl.h, TINT_STRENGTH[mood])
    is_light_primary = hsl.l > 50

    background = grays[1] if mood is PaletteMood.MONOCHROME and not is_light_primary else grays[0]

    return Palette(
        primary=hsl_to_hex(hsl),
        secondary=hsl_to_hex(secondary),
        accent=hsl_to_hex(accent),
        background=background,
        text=ensure_contrast(grays[8], background),
        muted=grays[5],
        grays=tuple(grays),
        name=f"{mood.value} palette",
    )


def generate_dark_palette(
    seed_color: str, mood: PaletteMood | str = PaletteMood.VIBRANT
) -> Palette:
    """Dark variant of ``generate_palette``.

    Only the gray ramp is reversed; secondary and accent are the light
    palette's colors, not re-derived for a dark background.
    """
    light = generate_palette(seed_color, mood)
    dark_grays = list(reversed(generate_tinted_grays(hex_to_hsl(seed_color).h, DARK_TINT_STRENGTH)))
    background = dark_grays[0]

    return Palette(
        primary=light.primary,
        secondary=light.secondary,
        accent=light.accent,
        background=background,
        text=ensure_contrast(dark_grays[8], background),
        muted=dark_grays[5],
        grays=tuple(dark_grays),
        name=f"{light.name} (dark)",
    )


def analogous(seed_color: str) -> list[str]:
    hsl = hex_to_hsl(seed_color)
    return [hsl_to_hex(rotate_hue(hsl, -30)), normalize_hex(seed_color), hsl_to_hex(rotate_hue(hsl, 30))]


def triadic(seed_color: str) -> list[str]:
    hsl = hex_to_hsl(seed_color)
    return [normalize_hex(seed_color), hsl_to_hex(rotate_hue(hsl, 120)), hsl_to_hex(rotate_hue(hsl, 240))]


def split_complementary(seed_color: str) -> list[str]:
    hsl = hex_to_hsl(seed_color)
    return [normalize_hex(seed_color), hsl_to_hex(rotate_hue(hsl, 150)), hsl_to_hex(rotate_hue(hsl, 210))]


# =============================================================================
# Industry palettes
# =============================================================================


@dataclass(frozen=True)
class ColorModifier:
    """Per-vibe shift applied to an industry seed before synthesis."""

    hue_shift: float
    saturation_multiplier: float
    lightness_shift: float


DEFAULT_SEED_COLOR = "#1e5a8a"

INDUSTRY_COLORS: dict[str, str] = {
    "plumber": "#1e5a8a",
    "electrician": "#f59e0b",
    "hvac": "#0369a1",
    "roofer": "#854d0e",
    "contractor": "#374151",
    "lawyer": "#1e3a5f",
    "accountant": "#1e40af",
    "financial-advisor": "#065f46",
    "realtor": "#7c3aed",
    "dentist": "#0891b2",
    "chiropractor": "#059669",
    "veterinarian": "#7c3aed",
    "therapist": "#5f7161",
    "gym": "#dc2626",
    "restaurant": "#c2410c",
    "photographer": "#18181b",
}

VIBE_COLOR_MODIFIERS: dict[str, ColorModifier] = {
    "maverick": ColorModifier(180, 1.3, -5),
    "executive": ColorModifier(0, 0.7, 5),
    "artisan": ColorModifier(30, 0.9, 0),
    "bold": ColorModifier(-20, 1.2, -10),
    "playful": ColorModifier(60, 1.1, 10),
    "elegant": ColorModifier(-10, 0.8, 10),
    "minimal": ColorModifier(0, 0.5, 20),
    "creative": ColorModifier(45, 1.15, 0),
    "friendly": ColorModifier(20, 1.0, 5),
    "trustworthy": ColorModifier(0, 0.9, 0),
    "modern": ColorModifier(-15, 0.85, 0),
    "classic": ColorModifier(10, 0.75, 5),
    "minimalist": ColorModifier(0, 0.4, 30),
}


def apply_vibe_modifier(color: str, vibe_id: str | None) -> str:
    """Shift a seed color so the same industry reads differently per vibe."""
    modifier = VIBE_COLOR_MODIFIERS.get(vibe_id or "")
    if modifier is None:
        return normalize_hex(color)
    hsl = hex_to_hsl(color)
    return hsl_to_hex(
        HSL(
            (hsl.h + modifier.hue_shift) % 360,
            _clamp(hsl.s * modifier.saturation_multiplier, 0, 100),
            _clamp(hsl.l + modifier.lightness_shift, 10, 90),
        )
    )


def default_mood_for_industry(industry: str) -> PaletteMood:
    return PaletteMood.MONOCHROME if industry == "photographer" else PaletteMood.MUTED


def generate_palette_for_industry(
    industry: str,
    seed_color: str | None = None,
    mood: PaletteMood | str | None = None,
    vibe_id: str | None = None,
    dark: bool = False,
) -> Palette:
    """Palette for an industry, modulated by vibe.

    The seed comes from ``seed_color`` or the industry table; the vibe
    modifier is applied on top either way.
    """
    color = apply_vibe_modifier(
        seed_color or INDUSTRY_COLORS.get(industry, DEFAULT_SEED_COLOR), vibe_id
    )
    resolved_mood = PaletteMood(mood) if mood else default_mood_for_industry(industry)
    generator = generate_dark_palette if dark else generate_palette
    palette = generator(color, resolved_mood)
    logger.debug(
        "Palette for %s (vibe=%s, mood=%s, dark=%s): seed %s",
        industry,
        vibe_id,
        resolved_mood,
        dark,
        color,
    )
    return Palette(**{**palette.roles(), "grays": palette.grays, "name": f"{industry} palette"})
