"""Rich terminal preview: coloured glyph columns and markers."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

from picomap.server.session import Session

_CHANGE_STYLE = "green"

_DIAG_STYLE = {
    1: "yellow",
    2: "bold red",
}

_MARKER_STYLE = {
    "c": "bold cyan",
    "s": "magenta",
    "v": "dim",
}


def styled_row(row: str) -> Text:
    """Style one formatted row: two glyphs, two 2-digit numbers, a marker."""
    change_glyph, diag_glyph = row[0], row[1]
    change_num, diag_num = row[2:4], row[4:6]
    marker = row[6:]

    diag_style = _DIAG_STYLE.get(int(diag_num), "") if diag_num.isdigit() else ""

    text = Text()
    text.append(change_glyph, style=_CHANGE_STYLE)
    text.append(diag_glyph, style=diag_style)
    text.append(" ")
    text.append(change_num, style="dim green")
    text.append(" ")
    text.append(diag_num, style=f"dim {diag_style}".strip())
    text.append(" ")
    text.append(marker, style=_MARKER_STYLE.get(marker, ""))
    return text


def render(
    session: Session,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print the last rendered map of *session* using Rich."""
    console = console or Console(stderr=True)

    if not session.lines:
        console.print("[dim]Nothing to render (empty buffer or zero height).[/dim]")
    for row in session.lines:
        console.print(styled_row(row), highlight=False)

    if show_summary:
        _print_summary(console, session)


def _print_summary(console: Console, session: Session) -> None:
    diags = session.diags.highlight()
    console.print()
    console.print(f"[dim]Lines:[/dim]      {session.length}")
    console.print(f"[dim]Rows:[/dim]       {len(session.lines)}")
    console.print(f"[dim]Changed:[/dim]    {sum(session.changes.highlight())}")
    console.print(f"[dim]Warnings:[/dim]   {diags.count(1)}")
    console.print(f"[dim]Errors:[/dim]     {diags.count(2)}")
    console.print(f"[dim]Smoothing:[/dim]  {session.config.render.smoothing}")
