#!/usr/bin/env python3
from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from ...formats.envelope_types import CompressionCodec

THEME = Theme(
    {
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
        "legacy": "magenta",
        "codec.none": "dim",
        "codec.zstd": "cyan",
        "codec.lz4": "blue",
    }
)


@dataclass
class UIContext:
    console: Console
    console_err: Console
    quiet: bool = False


def _stream_is_tty(stream) -> bool:
    # sys.__stdout__ is None under pythonw and some embedders
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (OSError, ValueError):
        return False


def _build_console(*, stderr: bool) -> Console:
    stream = sys.__stderr__ if stderr else sys.__stdout__
    return Console(stderr=stderr, theme=THEME, force_terminal=_stream_is_tty(stream))


DEFAULT_CONTEXT = UIContext(
    console=_build_console(stderr=False),
    console_err=_build_console(stderr=True),
)
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(*, quiet: bool, no_color: bool, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    context.quiet = quiet
    context.console.no_color = no_color
    context.console_err.no_color = no_color


def warn(message: str, *, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    if context.quiet:
        return
    context.console_err.print(f"[warning]Warning:[/warning] {message}")


def info(message: str, *, context: UIContext | None = None) -> None:
    context = _resolve_context(context)
    if context.quiet:
        return
    context.console.print(message)


def codec_markup(codec: CompressionCodec) -> str:
    return f"[codec.{codec.label}]{codec.label}[/codec.{codec.label}]"


def build_grid_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    title: str | None = None,
) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAD, show_lines=False)
    for index, header in enumerate(headers):
        table.add_column(header, style="bold" if index == 0 else None, no_wrap=index == 0)
    for row in rows:
        table.add_row(*(str(cell) for cell in row))
    return table


__all__ = [
    "THEME",
    "UIContext",
    "build_grid_table",
    "codec_markup",
    "configure_ui",
    "console",
    "console_err",
    "info",
    "warn",
]
