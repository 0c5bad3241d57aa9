"""linedrift CLI — Typer application with scan, init, and profiles commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import typer
from rich.console import Console
from rich.logging import RichHandler

from linedrift import __version__
from linedrift.detector.models import LineRecord, Summary

app = typer.Typer(
    name="linedrift",
    help="Flag lines that differ significantly from the line before them.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _setup_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    root = logging.getLogger("linedrift")
    root.handlers.clear()
    root.addHandler(
        RichHandler(console=console, show_path=False, show_time=debug, markup=False)
    )
    root.setLevel(level)
    root.propagate = False


def _fail(label: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {exc}")
    return typer.Exit(code=2)


class _Tally:
    """Pass-through that remembers whether anything was flagged."""

    def __init__(self, items: Iterable[Union[LineRecord, Summary]]) -> None:
        self._items = items
        self.flagged = 0

    def __iter__(self) -> Iterator[Union[LineRecord, Summary]]:
        for item in self._items:
            if isinstance(item, LineRecord) and item.is_flagged:
                self.flagged += 1
            yield item


# ── scan ──────────────────────────────────────────────────────────────────────


@app.command()
def scan(
    files: Optional[List[str]] = typer.Argument(None, help="Input files ('-' or none for stdin)"),
    threshold: Optional[str] = typer.Option(None, "--threshold", "-t", help="Mismatch threshold: 0.3, 30 or 30%"),
    offset: Optional[int] = typer.Option(None, "--offset", "-o", help="Ignore the first N characters"),
    chars: Optional[str] = typer.Option(None, "--chars", "-c", help="Compare only these character positions, e.g. 0..8,12"),
    fields: Optional[str] = typer.Option(None, "--fields", "-f", help="Compare only these fields, e.g. 1,3..5"),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Field delimiter regex (default: whitespace)"),
    context: Optional[int] = typer.Option(None, "--context", "-C", help="Lines of context before and after"),
    before: Optional[int] = typer.Option(None, "--before", "-B", help="Lines of context before a flagged line"),
    after: Optional[int] = typer.Option(None, "--after", "-A", help="Lines of context after a flagged line"),
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Named profile (see `linedrift profiles`)"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to .linedrift.toml"),
    format: Optional[str] = typer.Option(None, "--format", help="Output format: plain | json | terminal"),
    no_summary: bool = typer.Option(False, "--no-summary", help="Omit the 'N lines processed' line"),
    fail_on_change: bool = typer.Option(False, "--fail-on-change", help="Exit 1 if any line is flagged"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output"),
) -> None:
    """Read lines and report those that drift from their predecessor."""
    from linedrift.config.loader import load_config
    from linedrift.config.schema import OUTPUT_FORMATS, ExtractConfig
    from linedrift.config.settings import build_settings
    from linedrift.detector.engine import DetectError, iter_records, run
    from linedrift.errors import ConfigError, InputError
    from linedrift.extract.modes import describe
    from linedrift.output import json_report, plain, terminal
    from linedrift.profiles.registry import build_registry
    from linedrift.source.reader import iter_lines

    _setup_logging(verbose, debug)
    root = Path.cwd()

    # --- Load config + profile ---
    try:
        cfg = load_config(root, config)
        profile_id = profile or cfg.profile
        if profile_id:
            build_registry(root).require(profile_id).apply(cfg)
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc

    # --- CLI overrides ---
    if threshold is not None:
        cfg.detect.threshold = threshold
    if offset is not None or chars is not None or fields is not None:
        cfg.extract = ExtractConfig(
            offset=offset, chars=chars, fields=fields, delimiter=delimiter
        )
    elif delimiter is not None:
        cfg.extract.delimiter = delimiter
    if context is not None:
        cfg.context.context = context
    if before is not None:
        cfg.context.before = before
    if after is not None:
        cfg.context.after = after
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if no_summary:
        cfg.output.show_summary = False
    fail_on_change = fail_on_change or cfg.detect.fail_on_change

    try:
        settings = build_settings(cfg)
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc

    if verbose or debug:
        console.print(f"[dim]Threshold: {settings.threshold:.2%}[/dim]")
        console.print(f"[dim]Extraction: {describe(settings.mode)}[/dim]")
        console.print(f"[dim]Context: {settings.before} before, {settings.after} after[/dim]")
        if profile_id:
            console.print(f"[dim]Profile: {profile_id}[/dim]")

    lines = iter_lines(files)

    # --- Run + output ---
    try:
        if cfg.output.format == "plain":
            tally = _Tally(iter_records(lines, settings))
            plain.stream(tally, sys.stdout, show_summary=cfg.output.show_summary)
            changed = tally.flagged > 0
        else:
            report = run(lines, settings)
            if cfg.output.format == "json":
                print(json_report.render(report))
            else:
                terminal.render(report, show_summary=cfg.output.show_summary)
            changed = report.changed
            if debug:
                console.print(f"[dim]Duration: {report.duration_ms:.0f}ms[/dim]")
    except InputError as exc:
        raise _fail("Input error", exc) from exc
    except DetectError as exc:
        raise _fail("Detector error", exc) from exc

    # --- Exit code ---
    if fail_on_change and changed:
        raise typer.Exit(code=1)
    raise typer.Exit(code=0)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .linedrift.toml in the current directory."""
    from linedrift.config.defaults import DEFAULT_TOML
    from linedrift.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── profiles ──────────────────────────────────────────────────────────────────


@app.command()
def profiles() -> None:
    """List built-in and custom profiles."""
    from linedrift.errors import ConfigError
    from linedrift.profiles.registry import build_registry

    try:
        registry = build_registry(Path.cwd())
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc

    for p in registry.all_profiles:
        print(f"{p.id:<12} {p.description}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"linedrift {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """linedrift — flag lines that drift from the line before them."""
