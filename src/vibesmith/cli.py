"""
vibesmith CLI.

Commands:
- build:   render a site from a content JSON file
- vibes:   list the vibe presets
- palette: show the palette synthesized from a seed color
- pattern: show the grid pattern picked for a count and chaos level
- verify:  run the engine self-checks
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from vibesmith import __version__
from vibesmith.core.config import EngineConfig, load_config
from vibesmith.core.errors import VibesmithError
from vibesmith.core.genes import describe_dna
from vibesmith.core.logging import setup_logging
from vibesmith.core.thresholds import WCAG_AA_RATIO
from vibesmith.engine.blueprints import DEFAULT_SECTIONS
from vibesmith.engine.director_cut import director_cut
from vibesmith.engine.section_registry import SectionCategory, get_registry
from vibesmith.engine.site_builder import BuildOptions, build_website
from vibesmith.harmony.color_math import (
    INDUSTRY_COLORS,
    PaletteMood,
    contrast_ratio,
    generate_dark_palette,
    generate_palette,
)
from vibesmith.harmony.grid_patterns import pattern_column_count, select_pattern
from vibesmith.harmony.vibes import VIBES, generate_constrained_dna, is_valid

app = typer.Typer(
    help="vibesmith - generative site assembly from design genes",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

# Seeds and grid used by `verify`
_VERIFY_SEEDS = range(20)
_VERIFY_COUNTS = range(1, 13)
_VERIFY_CHAOS_STEPS = [step / 10 for step in range(11)]


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vibesmith {__version__}")
        raise typer.Exit()


def _load_config(config_path: Path | None) -> EngineConfig:
    try:
        return load_config(config_path)
    except VibesmithError as e:
        err_console.print(f"[red]Config error:[/red] {e}")
        raise typer.Exit(code=2) from e


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """vibesmith CLI main callback for global options."""


# =============================================================================
# build
# =============================================================================


@app.command()
def build(
    content_file: Annotated[
        Path, typer.Argument(help="Content JSON file", exists=True, dir_okay=False)
    ],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write HTML here instead of stdout")
    ] = None,
    vibe: Annotated[str | None, typer.Option("--vibe", help="Vibe id override")] = None,
    chaos: Annotated[
        float | None, typer.Option("--chaos", min=0.0, max=1.0, help="Chaos override (0-1)")
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Seed for DNA generation")] = None,
    color: Annotated[str | None, typer.Option("--color", help="Seed color (#rrggbb)")] = None,
    mood: Annotated[PaletteMood | None, typer.Option("--mood", help="Palette mood")] = None,
    no_fonts: Annotated[bool, typer.Option("--no-fonts", help="Skip web font links")] = False,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to vibesmith.toml")
    ] = None,
) -> None:
    """Render a site from a content JSON file."""
    config = _load_config(config_path)
    setup_logging(config.log_level)

    try:
        content = json.loads(content_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        err_console.print(f"[red]Invalid JSON in {content_file}:[/red] {e}")
        raise typer.Exit(code=1) from e

    options = BuildOptions(
        seed_color=color,
        palette_mood=mood,
        chaos=chaos if chaos is not None else config.chaos,
        vibe=vibe or config.vibe,
        include_fonts=config.include_fonts and not no_fonts,
    )
    resolved_seed = seed if seed is not None else config.seed
    rng = random.Random(resolved_seed) if resolved_seed is not None else None

    try:
        html = build_website(content, options, rng=rng)
    except ValidationError as e:
        err_console.print(f"[red]Invalid content in {content_file}:[/red]\n{e}")
        raise typer.Exit(code=1) from e
    except VibesmithError as e:
        err_console.print(f"[red]Build failed:[/red] {e}")
        raise typer.Exit(code=1) from e

    if output is None:
        typer.echo(html)
        return
    output.write_text(html, encoding="utf-8")
    err_console.print(f"[green]Wrote[/green] {output} ({len(html):,} bytes)")


# =============================================================================
# vibes / palette / pattern
# =============================================================================


@app.command()
def vibes() -> None:
    """List the vibe presets."""
    table = Table(title="Vibes")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Chaos", justify="right")
    table.add_column("Description", style="dim")
    for preset in VIBES.values():
        table.add_row(preset.id, preset.name, f"{preset.chaos:.2f}", preset.description)
    console.print(table)


@app.command()
def palette(
    color: Annotated[str, typer.Argument(help="Seed color (#rgb or #rrggbb)")],
    mood: Annotated[PaletteMood, typer.Option("--mood", help="Palette mood")] = PaletteMood.VIBRANT,
    dark: Annotated[bool, typer.Option("--dark", help="Dark variant")] = False,
) -> None:
    """Show the palette synthesized from a seed color."""
    try:
        result = generate_dark_palette(color, mood) if dark else generate_palette(color, mood)
    except VibesmithError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title=f"Palette for {color} ({mood}{', dark' if dark else ''})")
    table.add_column("Role", style="cyan")
    table.add_column("Color")
    table.add_column("Swatch")
    table.add_column("Contrast vs background", justify="right")
    for role, value in result.roles().items():
        ratio = contrast_ratio(value, result.background)
        style = "green" if ratio >= WCAG_AA_RATIO else "yellow"
        table.add_row(role, value, f"[on {value}]      [/]", f"[{style}]{ratio:.2f}:1[/{style}]")
    console.print(table)
    console.print("Grays: " + " ".join(f"[on {gray}]  [/]" for gray in result.grays))


@app.command()
def pattern(
    count: Annotated[int, typer.Argument(min=0, help="Number of items")],
    chaos: Annotated[float, typer.Argument(min=0.0, max=1.0, help="Chaos level (0-1)")],
) -> None:
    """Show the grid pattern selected for a count and chaos level."""
    spans = select_pattern(count, chaos)
    typer.echo(f"pattern: {spans}")
    typer.echo(f"columns: {pattern_column_count(spans)}")
    if 0 in spans:
        typer.echo("broken:  yes")


# =============================================================================
# verify
# =============================================================================


def _check_vibes() -> list[str]:
    failures = []
    for preset in VIBES.values():
        for seed in _VERIFY_SEEDS:
            dna = generate_constrained_dna(preset, random.Random(seed))
            if not is_valid(dna, preset):
                failures.append(f"vibe {preset.id} seed {seed}: {describe_dna(dna)}")
    return failures


def _check_patterns() -> list[str]:
    failures = []
    for count in _VERIFY_COUNTS:
        for chaos in _VERIFY_CHAOS_STEPS:
            spans = select_pattern(count, chaos)
            if len(spans) != count:
                failures.append(f"select_pattern({count}, {chaos}) has length {len(spans)}")
    return failures


def _check_palettes() -> list[str]:
    failures = []
    for industry, seed_color in INDUSTRY_COLORS.items():
        for mood in PaletteMood:
            for generate in (generate_palette, generate_dark_palette):
                result = generate(seed_color, mood)
                ratio = contrast_ratio(result.text, result.background)
                if ratio < WCAG_AA_RATIO:
                    failures.append(f"{industry} {mood} {generate.__name__}: contrast {ratio:.2f}")
    return failures


def _check_registry() -> list[str]:
    registry = get_registry()
    failures = [
        f"no variant registered for {category}"
        for category in SectionCategory
        if not registry.variants(category)
    ]
    for vibe_id in VIBES:
        for section in director_cut(DEFAULT_SECTIONS, vibe_id):
            if section.variant and registry.get(section.variant) is None:
                failures.append(f"vibe {vibe_id} forces unknown variant {section.variant}")
    return failures


@app.command()
def verify() -> None:
    """Run engine self-checks; exits non-zero if any fail."""
    checks = [
        ("Vibe-constrained DNA validates", _check_vibes),
        ("Grid patterns match item count", _check_patterns),
        ("Palette text contrast >= 4.5:1", _check_palettes),
        ("Registry covers every category", _check_registry),
    ]

    table = Table(title="vibesmith verify")
    table.add_column("Check")
    table.add_column("Result")
    failed = False
    for name, check in checks:
        failures = check()
        if failures:
            failed = True
            table.add_row(name, f"[red]FAIL ({len(failures)})[/red]")
            for failure in failures[:5]:
                table.add_row("", f"[dim]{failure}[/dim]")
        else:
            table.add_row(name, "[green]ok[/green]")
    console.print(table)

    if failed:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
