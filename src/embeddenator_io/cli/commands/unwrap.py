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

from ...formats.envelope_codec import unwrap_payload
from ..core.common import (
    _ctx_value,
    _format_bytes,
    _kind_callback,
    _load_config,
    _resolve_kind,
    _run_cli,
)
from ..ui import info, warn

_UNWRAP_HELP = (
    "Unwrap an EDN1 envelope (legacy, header-less files are copied through).\n\n"
    "Examples:\n"
    "  embeddenator-io unwrap engram.edn -o engram.bin\n"
    "  embeddenator-io unwrap sub.edn --kind sub-engram -o sub.bin\n"
    "  embeddenator-io unwrap big.edn --max-bytes 0 -o big.bin\n"
)


def register(app: typer.Typer) -> None:
    app.command("unwrap", help=_UNWRAP_HELP)(unwrap_command)


def unwrap_command(
    ctx: typer.Context,
    input: Path = typer.Argument(..., help="Envelope to unwrap.", exists=True, dir_okay=False),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the payload."),
    kind: str | None = typer.Option(
        None,
        "--kind",
        "-k",
        help="Expected payload kind (engram / sub-engram; default from config).",
        callback=_kind_callback,
    ),
    max_bytes: int | None = typer.Option(
        None,
        "--max-bytes",
        help="Largest declared payload size to accept (0 = no limit; default from config).",
        rich_help_panel="Limits",
    ),
    lenient_reserved: bool = typer.Option(
        False,
        "--lenient-reserved",
        help="Accept envelopes with non-zero reserved header bytes.",
        rich_help_panel="Limits",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        payload_kind = _resolve_kind(kind, config)
        limit = config.envelope.max_payload_bytes
        if max_bytes is not None:
            if max_bytes < 0:
                raise ValueError("--max-bytes must be a positive integer or 0")
            limit = max_bytes or None
        strict = config.envelope.strict_reserved and not lenient_reserved
        data = input.read_bytes()
        payload, envelope_info = unwrap_payload(
            payload_kind,
            data,
            max_payload_bytes=limit,
            strict_reserved=strict,
        )
        output.write_bytes(payload)
        if envelope_info.legacy:
            warn(f"{input} has no envelope header; copied as legacy data")
            return
        codec = envelope_info.codec.label if envelope_info.codec is not None else "none"
        info(
            f"[success]Unwrapped[/success] {input} -> {output} "
            f"({payload_kind.label}, {codec}; "
            f"{_format_bytes(envelope_info.wrapped_len)} -> {_format_bytes(len(payload))})"
        )

    _run_cli(_run, debug=debug_value)
