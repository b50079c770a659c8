"""picomap CLI — Typer application with render, serve, and init commands."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from picomap import __version__

app = typer.Typer(
    name="picomap",
    help="Render a narrow change/diagnostic map of an editor buffer.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config(config: Optional[str]):
    """Load config from the working directory, exit 2 on failure."""
    from picomap.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _read_payload(source: str) -> Any:
    """Read a JSON document from *source* (a path, or ``-`` for stdin)."""
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            text = Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] cannot read {source}: {exc}")
        raise typer.Exit(code=2) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        console.print(f"[bold red]Invalid payload:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── render ────────────────────────────────────────────────────────────────────


@app.command()
def render(
    payload: str = typer.Argument("-", help="Sync payload JSON file, or - for stdin"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .picomap.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: plain | terminal | json"),
    smoothing: Optional[str] = typer.Option(None, "--smoothing", help="Run smoothing: forward | symmetric"),
    height: Optional[int] = typer.Option(None, "--height", min=0, help="Override the view height"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Render one sync payload and print the map."""
    from picomap.config.schema import OUTPUT_FORMATS, SMOOTHING_MODES
    from picomap.output import json_report, plain, terminal
    from picomap.protocol.decoder import DecodeError, decode_message, decode_sync
    from picomap.protocol.models import MessageKind
    from picomap.server.session import Session

    _configure_logging(verbose, debug)
    cfg = _load_config(config)

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if smoothing:
        if smoothing not in SMOOTHING_MODES:
            console.print(f"[bold red]Invalid smoothing:[/bold red] {smoothing}")
            raise typer.Exit(code=2)
        cfg.render.smoothing = smoothing  # type: ignore[assignment]

    # --- Decode ---
    raw = _read_payload(payload)
    try:
        if isinstance(raw, dict) and "event" in raw:
            message = decode_message(raw)
            if message.kind is not MessageKind.SYNC:
                raise DecodeError(f"expected a sync event, got {message.name!r}")
            raw = message.args
        sync = decode_sync(raw)
    except DecodeError as exc:
        console.print(f"[bold red]Invalid payload:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if height is not None:
        sync = dataclasses.replace(sync, view=dataclasses.replace(sync.view, height=height))

    session = Session(cfg)
    session.sync(sync)

    # --- Output ---
    if cfg.output.format == "terminal":
        terminal.render(session, show_summary=cfg.output.show_summary)
    elif cfg.output.format == "json":
        print(json_report.render(session))
    elif session.lines:
        typer.echo(plain.render(session))


# ── serve ─────────────────────────────────────────────────────────────────────


@app.command()
def serve(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .picomap.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output with timing"),
) -> None:
    """Read JSON-lines events on stdin and write rendered maps to stdout."""
    from picomap.server.loop import serve as run_loop
    from picomap.server.session import Session

    _configure_logging(verbose, debug)
    cfg = _load_config(config)

    run_loop(Session(cfg), sys.stdin, sys.stdout)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .picomap.toml in the current directory."""
    from picomap.config.defaults import DEFAULT_TOML
    from picomap.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"picomap {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """picomap: a narrow change/diagnostic map for editor side panels."""
