"""
Page texture overlays.

Each texture is a small inline SVG tiled over the page through a fixed
``::before`` pseudo-element. The vibe picks the texture and scales its
default opacity.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import quote


class TextureOverlayType(StrEnum):
    GRAIN = "grain"
    NOISE = "noise"
    PAPER = "paper"
    FABRIC = "fabric"


@dataclass(frozen=True)
class TextureOverlay:
    type: TextureOverlayType
    name: str
    default_opacity: float
    background_size: str
    blend_mode: str
    svg: str


TEXTURE_OVERLAYS: dict[TextureOverlayType, TextureOverlay] = {
    TextureOverlayType.GRAIN: TextureOverlay(
        TextureOverlayType.GRAIN,
        "Film Grain",
        0.14,
        "220px 220px",
        "soft-light",
        """
<svg xmlns='http://www.w3.org/2000/svg' width='200' height='200' viewBox='0 0 200 200'>
  <filter id='grain'>
    <feTurbulence type='fractalNoise' baseFrequency='0.7' numOctaves='3' stitchTiles='stitch'/>
    <feColorMatrix type='saturate' values='0'/>
  </filter>
  <rect width='100%' height='100%' filter='url(#grain)' opacity='0.9'/>
</svg>
""",
    ),
    TextureOverlayType.NOISE: TextureOverlay(
        TextureOverlayType.NOISE,
        "High Frequency Noise",
        0.18,
        "160px 160px",
        "overlay",
        """
<svg xmlns='http://www.w3.org/2000/svg' width='200' height='200' viewBox='0 0 200 200'>
  <filter id='noise'>
    <feTurbulence type='turbulence' baseFrequency='0.95' numOctaves='1' seed='2'/>
    <feColorMatrix type='saturate' values='0'/>
  </filter>
  <rect width='100%' height='100%' filter='url(#noise)' opacity='0.8'/>
</svg>
""",
    ),
    TextureOverlayType.PAPER: TextureOverlay(
        TextureOverlayType.PAPER,
        "Paper Fibers",
        0.08,
        "260px 260px",
        "multiply",
        """
<svg xmlns='http://www.w3.org/2000/svg' width='240' height='240' viewBox='0 0 240 240'>
  <filter id='paper'>
    <feTurbulence type='fractalNoise' baseFrequency='0.35' numOctaves='2' seed='3'/>
    <feColorMatrix type='saturate' values='0'/>
    <feComponentTransfer>
      <feFuncA type='table' tableValues='0 0.6'/>
    </feComponentTransfer>
  </filter>
  <rect width='100%' height='100%' filter='url(#paper)' opacity='0.85'/>
</svg>
""",
    ),
    TextureOverlayType.FABRIC: TextureOverlay(
        TextureOverlayType.FABRIC,
        "Fabric Weave",
        0.12,
        "200px 200px",
        "soft-light",
        """
<svg xmlns='http://www.w3.org/2000/svg' width='200' height='200' viewBox='0 0 200 200'>
  <pattern id='weave' width='40' height='40' patternUnits='userSpaceOnUse'>
    <path d='M0 0L40 40M-20 20L20 -20M20 60L60 20' stroke='#000' stroke-opacity='0.12'/>
    <path d='M40 0L0 40M60 20L20 -20M20 60L-20 20' stroke='#000' stroke-opacity='0.08'/>
  </pattern>
  <rect width='100%' height='100%' fill='url(#weave)'/>
</svg>
""",
    ),
}

# (texture, opacity scale) per vibe
VIBE_TEXTURES: dict[str, tuple[TextureOverlayType, float]] = {
    "executive": (TextureOverlayType.PAPER, 0.7),
    "maverick": (TextureOverlayType.NOISE, 1.15),
    "elegant": (TextureOverlayType.PAPER, 0.75),
    "bold": (TextureOverlayType.GRAIN, 1.05),
    "friendly": (TextureOverlayType.FABRIC, 0.85),
    "minimal": (TextureOverlayType.PAPER, 0.4),
    "creative": (TextureOverlayType.FABRIC, 1.05),
    "trustworthy": (TextureOverlayType.PAPER, 0.6),
}

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TextureSelection:
    type: TextureOverlayType
    opacity: float
    background_size: str
    blend_mode: str
    data_uri: str


def svg_to_data_uri(svg: str) -> str:
    """Collapse whitespace and percent-encode an SVG for use in ``url()``."""
    normalized = _WHITESPACE_RE.sub(" ", svg).strip()
    return "data:image/svg+xml," + quote(normalized, safe="")


def resolve_texture_overlay(
    vibe_id: str | None = None,
    texture: TextureOverlayType | str | None = None,
    opacity: float | None = None,
) -> TextureSelection:
    """Pick the overlay for a vibe; explicit arguments win over the vibe's defaults."""
    vibe_type, scale = VIBE_TEXTURES.get(vibe_id or "", (TextureOverlayType.GRAIN, 1.0))
    overlay = TEXTURE_OVERLAYS[TextureOverlayType(texture) if texture else vibe_type]

    resolved = overlay.default_opacity * scale if opacity is None else opacity
    return TextureSelection(
        type=overlay.type,
        opacity=round(min(1.0, max(0.0, resolved)), 4),
        background_size=overlay.background_size,
        blend_mode=overlay.blend_mode,
        data_uri=svg_to_data_uri(overlay.svg),
    )


def generate_texture_overlay_css(
    vibe_id: str | None = None, class_name: str = "page-texture", z_index: int = 9999
) -> str:
    selection = resolve_texture_overlay(vibe_id)
    lines = [
        f".{class_name} {{ position: relative; }}",
        f".{class_name}::before {{",
        "  content: '';",
        "  position: fixed;",
        "  inset: 0;",
        f'  background-image: url("{selection.data_uri}");',
        "  background-repeat: repeat;",
        f"  background-size: {selection.background_size};",
        f"  opacity: {selection.opacity};",
        f"  mix-blend-mode: {selection.blend_mode};",
        "  pointer-events: none;",
        f"  z-index: {z_index};",
        "}",
    ]
    return "\n".join(lines)
