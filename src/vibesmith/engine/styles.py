"""
Document-level CSS generation.

Turns a DNA and palette into the shared stylesheet every page carries:
custom properties for the palette, grays, fonts and radii, a reset, shared
component classes, entrance animations, and the gene-driven texture,
border, hover and image-grading rules. Section modules only add their own
component CSS on top of this.
"""

from __future__ import annotations

from vibesmith.core.genes import (
    BORDER,
    DESIGN_STYLES,
    HOVER,
    MOTION,
    RADIUS,
    TEXTURE,
    TYPOGRAPHY,
    DNA,
)
from vibesmith.core.thresholds import MOBILE_BREAKPOINT_PX
from vibesmith.harmony.color_math import GRAY_STEPS, Palette, contrast_text_color, hex_to_hsl

FONT_PRECONNECT_HOSTS = ("https://fonts.googleapis.com", "https://fonts.gstatic.com")

_SYSTEM_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif"

ANIMATION_CLASSES: dict[str, str] = {
    "fade": "dna-fade-in",
    "slide": "dna-slide-in",
    "scale": "dna-scale-in",
}


def animation_class(motion: str) -> str:
    """Entrance animation class for a motion code (M1 fade, M2 slide, M3 scale)."""
    entrance = MOTION.get(motion, MOTION["M1"]).entrance
    return ANIMATION_CLASSES[entrance]


def fonts_url(typography: str) -> str:
    return TYPOGRAPHY.get(typography, TYPOGRAPHY["T1"]).fonts_url


# =============================================================================
# Base
# =============================================================================


def generate_root_variables(dna: DNA, palette: Palette) -> str:
    typography = TYPOGRAPHY[dna.typography]
    design = DESIGN_STYLES[dna.design]
    motion = MOTION[dna.motion]

    lines = [":root {"]
    lines += [f"  --{role}: {color};" for role, color in palette.roles().items()]
    lines.append(f"  --on-primary: {contrast_text_color(palette.primary)};")
    lines += [f"  --gray-{step}: {gray};" for step, gray in zip(GRAY_STEPS, palette.grays)]
    lines += [
        f"  --font-heading: '{typography.heading_font}', {_SYSTEM_STACK};",
        f"  --font-body: '{typography.body_font}', {_SYSTEM_STACK};",
        f"  --heading-weight: {typography.heading_weight};",
        f"  --letter-spacing: {typography.letter_spacing};",
        f"  --radius: {design.border_radius};",
        f"  --shadow-card: {design.shadow};",
        f"  --transition-duration: {motion.duration};",
        "}",
    ]
    return "\n".join(lines)


def generate_base_css(dna: DNA, palette: Palette) -> str:
    """Reset, palette bindings and shared component classes."""
    lines = [
        "*, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }",
        generate_root_variables(dna, palette),
        "html { scroll-behavior: smooth; }",
        "body {",
        "  font-family: var(--font-body);",
        "  line-height: 1.6;",
        "  color: var(--text);",
        "  background: var(--background);",
        "  -webkit-font-smoothing: antialiased;",
        "}",
        "h1, h2, h3, h4 {",
        "  font-family: var(--font-heading);",
        "  font-weight: var(--heading-weight);",
        "  letter-spacing: var(--letter-spacing);",
        "  line-height: 1.15;",
        "}",
        "a { color: inherit; }",
        "img { max-width: 100%; display: block; }",
        ".container { max-width: 1200px; margin: 0 auto; padding: 0 24px; }",
        "section { padding: 80px 0; }",
        ".section-header { text-align: center; max-width: 720px; margin: 0 auto 48px; }",
        ".section-header h2 { font-size: clamp(28px, 4vw, 40px); margin-bottom: 12px; }",
        ".section-header p { color: var(--muted); font-size: 18px; }",
        ".btn {",
        "  display: inline-flex;",
        "  align-items: center;",
        "  gap: 8px;",
        "  padding: 14px 28px;",
        "  font-weight: 600;",
        "  text-decoration: none;",
        "  border: 2px solid transparent;",
        "  cursor: pointer;",
        "  transition: transform var(--transition-duration) ease, box-shadow var(--transition-duration) ease;",
        "}",
        ".btn-primary { background: var(--primary); color: var(--on-primary); }",
        ".btn-secondary { background: transparent; color: inherit; border-color: currentColor; }",
        ".dna-card {",
        "  background: var(--background);",
        "  padding: 32px;",
        "  box-shadow: var(--shadow-card);",
        "}",
        ".section-placeholder { padding: 60px 0; background: var(--gray-50); text-align: center; }",
        f"@media (max-width: {MOBILE_BREAKPOINT_PX}px) {{",
        "  section { padding: 56px 0; }",
        "  .section-header { margin-bottom: 32px; }",
        "}",
    ]
    return "\n".join(lines)


def generate_entrance_animation_css() -> str:
    lines = [
        "@keyframes dna-fade-in { from { opacity: 0; } to { opacity: 1; } }",
        "@keyframes dna-slide-in {",
        "  from { opacity: 0; transform: translateY(20px); }",
        "  to { opacity: 1; transform: translateY(0); }",
        "}",
        "@keyframes dna-scale-in {",
        "  from { opacity: 0; transform: scale(0.95); }",
        "  to { opacity: 1; transform: scale(1); }",
        "}",
    ]
    lines += [
        f".{cls} {{ animation: {cls} 0.6s ease-out forwards; }}" for cls in ANIMATION_CLASSES.values()
    ]
    lines += [
        f".dna-stagger > *:nth-child({i + 1}) {{ animation-delay: {i / 10:g}s; }}" for i in range(6)
    ]
    lines += [
        ".dna-stagger > *:nth-child(n+7) { animation-delay: 0.6s; }",
        "@media (prefers-reduced-motion: reduce) {",
        "  .dna-fade-in, .dna-slide-in, .dna-scale-in { animation: none; opacity: 1; transform: none; }",
        "}",
    ]
    return "\n".join(lines)


# =============================================================================
# Gene-driven rules
# =============================================================================


def generate_texture_css(texture: str) -> str:
    """Section texture for the X gene; X4 (clean) emits nothing."""
    data = TEXTURE.get(texture, TEXTURE["X4"])

    match data.type:
        case "grain":
            return "\n".join(
                [
                    ".dna-texture { position: relative; }",
                    ".dna-texture::before {",
                    "  content: '';",
                    "  position: absolute;",
                    "  inset: 0;",
                    "  pointer-events: none;",
                    f"  opacity: {data.intensity};",
                    "  background-image: url(\"data:image/svg+xml,%3Csvg viewBox='0 0 200 200' "
                    "xmlns='http://www.w3.org/2000/svg'%3E%3Cfilter id='n'%3E%3CfeTurbulence "
                    "type='fractalNoise' baseFrequency='0.65' numOctaves='3' stitchTiles='stitch'/%3E"
                    "%3C/filter%3E%3Crect width='100%25' height='100%25' filter='url(%23n)'/%3E%3C/svg%3E\");",
                    "}",
                ]
            )
        case "mesh-gradient":
            stops = [
                ("40% 20%", "primary"),
                ("80% 0%", "secondary"),
                ("0% 50%", "accent"),
                ("80% 50%", "primary"),
                ("0% 100%", "secondary"),
                ("80% 100%", "accent"),
            ]
            gradients = ",\n    ".join(
                f"radial-gradient(at {at}, var(--{role}) 0px, transparent 50%)" for at, role in stops
            )
            return f".dna-texture {{\n  background-image:\n    {gradients};\n  background-size: 100% 100%;\n}}"
        case "dots":
            return "\n".join(
                [
                    ".dna-texture {",
                    "  background-image: radial-gradient(var(--gray-300) 1px, transparent 1px);",
                    "  background-size: 20px 20px;",
                    "}",
                ]
            )
        case _:
            return ""


def generate_border_css(border: str) -> str:
    data = BORDER.get(border, BORDER["B1"])

    if data.style == "solid":
        return "\n".join(
            [
                f".dna-bordered {{ border: {data.width} solid var(--gray-200); }}",
                ".dna-bordered:hover { border-color: var(--primary); }",
            ]
        )
    if data.style == "double-offset":
        return "\n".join(
            [
                f".dna-bordered {{ border: {data.width} solid var(--text); position: relative; }}",
                ".dna-bordered::after {",
                "  content: '';",
                "  position: absolute;",
                "  inset: -6px;",
                f"  border: {data.width} solid var(--primary);",
                "  pointer-events: none;",
                "}",
            ]
        )
    return ""


def generate_hover_css(hover: str, primary: str) -> str:
    data = HOVER.get(hover, HOVER["V1"])

    lines = [
        ".dna-hoverable { transition: transform 0.2s ease, box-shadow 0.2s ease; }",
        ".dna-hoverable:hover {",
        f"  transform: {data.transform};",
    ]
    if data.effect == "shadow":
        lines.append("  box-shadow: 0 16px 48px rgba(0, 0, 0, 0.15);")
    elif data.effect == "glow":
        # 8-digit hex: 25% alpha
        lines.append(f"  box-shadow: 0 0 30px {primary}40;")
    lines.append("}")
    return "\n".join(lines)


def radius_scale(radius: str) -> tuple[str, str, str]:
    """(small, medium, large) radii for an R code."""
    data = RADIUS.get(radius, RADIUS["R2"])
    if data.multiplier == 0:
        return "0", data.value, "0"
    if data.multiplier == 999:
        return "9999px", data.value, "9999px"
    base = int(data.value.removesuffix("px"))
    return f"{round(base * 0.5)}px", data.value, f"{round(base * 2)}px"


def generate_radius_css(radius: str) -> str:
    small, medium, large = radius_scale(radius)
    return "\n".join(
        [
            f":root {{ --radius-sm: {small}; --radius-md: {medium}; --radius-lg: {large}; }}",
            ".dna-card { border-radius: var(--radius-md); }",
            ".dna-btn { border-radius: var(--radius-sm); }",
            ".dna-section { border-radius: var(--radius-lg); }",
        ]
    )


def generate_image_grading_css(palette: Palette, design: str) -> str:
    """Photo filters that pull user images towards the palette."""
    hue = round(hex_to_hsl(palette.primary).h)

    if design in ("D7", "D12"):
        graded = "grayscale(100%) contrast(120%); mix-blend-mode: multiply"
        subtle = "grayscale(30%) contrast(110%)"
    elif design in ("D1", "D5", "D6"):
        graded = f"sepia(15%) contrast(105%) hue-rotate({hue}deg) saturate(90%)"
        subtle = f"sepia(8%) contrast(102%) hue-rotate({round(hue / 2)}deg)"
    elif design in ("D2", "D3", "D10"):
        graded = "saturate(120%) contrast(110%)"
        subtle = "saturate(108%) contrast(105%)"
    else:
        graded = f"saturate(105%) contrast(105%) hue-rotate({round(hue / 4)}deg)"
        subtle = "saturate(102%) contrast(102%)"

    return "\n".join(
        [
            f"img.theme-graded {{ filter: {graded}; }}",
            f"img.theme-graded-subtle {{ filter: {subtle}; }}",
        ]
    )


def generate_gene_css(dna: DNA, palette: Palette) -> str:
    """All gene-driven rules for a DNA, in a stable order."""
    parts = [
        generate_radius_css(dna.radius),
        generate_texture_css(dna.texture),
        generate_border_css(dna.border),
        generate_hover_css(dna.hover, palette.primary),
        generate_image_grading_css(palette, dna.design),
    ]
    return "\n".join(part for part in parts if part)
