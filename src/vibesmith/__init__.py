"""
vibesmith - generative design constraint engine.

Turns a handful of categorical design genes into a coherent single-page
site: vibe presets keep gene combinations compatible, a color synthesizer
builds the palette, a chaos-driven grid library lays sections out, and a
scored registry picks the renderer for each section.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.errors import ConfigError, InvalidColorError, InvalidGeneError, VibesmithError
from .core.genes import DNA, GeneCategory


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("vibesmith")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "DNA",
    "GeneCategory",
    "VibesmithError",
    "InvalidGeneError",
    "InvalidColorError",
    "ConfigError",
]
