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

from pathlib import Path

import typer

from ...core.bounds import ENVELOPE_HEADER_BYTES
from ...core.errors import EnvelopeError
from ...formats.envelope_codec import read_header
from ..core.common import _ctx_value, _format_bytes, _run_cli
from ..ui import build_grid_table, codec_markup, console

_INSPECT_HELP = (
    "Show envelope headers without decompressing payloads.\n\n"
    "Examples:\n"
    "  embeddenator-io inspect engram.edn\n"
    "  embeddenator-io inspect *.edn\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_INSPECT_HELP)(inspect)


def inspect(
    ctx: typer.Context,
    inputs: list[Path] = typer.Argument(..., help="Files to inspect.", exists=True, dir_okay=False),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> int:
        rows: list[tuple[str, ...]] = []
        failures = 0
        for path in inputs:
            row, ok = describe_file(path)
            rows.append(row)
            if not ok:
                failures += 1
        console.print(
            build_grid_table(
                ("File", "Format", "Kind", "Codec", "Declared size", "Stored size", "Reserved"),
                rows,
            )
        )
        return 1 if failures else 0

    _run_cli(_run, debug=debug_value)


def describe_file(path: Path) -> tuple[tuple[str, ...], bool]:
    data = path.read_bytes()
    try:
        header = read_header(data, strict_reserved=False)
    except EnvelopeError as exc:
        return (str(path), "[error]invalid[/error]", str(exc), "-", "-", "-", "-"), False
    if header is None:
        return (
            str(path),
            "[legacy]legacy[/legacy]",
            "-",
            "-",
            "-",
            _format_bytes(len(data)),
            "-",
        ), True
    return (
        str(path),
        "EDN1",
        header.kind.label,
        codec_markup(header.codec),
        _format_bytes(header.uncompressed_len),
        _format_bytes(len(data) - ENVELOPE_HEADER_BYTES),
        f"0x{header.reserved:04x}",
    ), True
