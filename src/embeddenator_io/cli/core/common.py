#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import importlib.metadata
from collections.abc import Callable
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...config import AppConfig, load_app_config
from ...formats.envelope_types import CompressionCodec, PayloadKind
from ..ui import configure_ui, console_err

CODEC_CHOICES = ("auto", "none", "zstd", "lz4")
KIND_CHOICES = ("engram", "sub-engram")


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _load_config(ctx: typer.Context) -> AppConfig:
    config = load_app_config(_ctx_value(ctx, "config"))
    configure_ui(
        quiet=bool(_ctx_value(ctx, "quiet")) or config.ui.quiet,
        no_color=bool(_ctx_value(ctx, "no_color")) or config.ui.no_color,
    )
    return config


def _kind_callback(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return PayloadKind.parse(value).label
    except ValueError as exc:
        raise typer.BadParameter("kind must be engram or sub-engram") from exc


def _codec_callback(value: str) -> str:
    normalized = value.strip().lower()
    if normalized not in CODEC_CHOICES:
        raise typer.BadParameter(f"codec must be one of: {', '.join(CODEC_CHOICES)}")
    return normalized


def _resolve_kind(value: str | None, config: AppConfig) -> PayloadKind:
    if value is None:
        return config.envelope.kind
    return PayloadKind.parse(value)


def _format_level(codec: CompressionCodec, level: int | None) -> str:
    if not codec.uses_level:
        return "-"
    return "default" if level is None else str(level)


def _format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in ("KiB", "MiB", "GiB", "TiB"):
        value /= 1024
        if value < 1024 or unit == "TiB":
            return f"{value:.1f} {unit}"
    return f"{size} B"


def _get_version() -> str:
    try:
        return importlib.metadata.version("embeddenator-io")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
