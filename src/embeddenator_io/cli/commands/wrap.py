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

from ...formats.envelope_codec import wrap
from ...formats.envelope_types import CompressionCodec, WriteOptions
from ...profiles import CompressionProfile, CompressionProfiler
from ..core.common import (
    _codec_callback,
    _ctx_value,
    _format_bytes,
    _format_level,
    _kind_callback,
    _load_config,
    _resolve_kind,
    _run_cli,
)
from ..ui import info

_WRAP_HELP = (
    "Wrap a file in an EDN1 envelope.\n\n"
    "With --codec auto (the default) the codec and level come from the compression\n"
    "profile selected for the input path (or --as-path).\n\n"
    "Examples:\n"
    "  embeddenator-io wrap engram.bin -o engram.edn\n"
    "  embeddenator-io wrap vmlinuz --as-path /boot/vmlinuz -o vmlinuz.edn\n"
    "  embeddenator-io wrap data.bin --codec zstd --level 19 -o data.edn\n"
)


def register(app: typer.Typer) -> None:
    app.command("wrap", help=_WRAP_HELP)(wrap_command)


def wrap_command(
    ctx: typer.Context,
    input: Path = typer.Argument(..., help="File to wrap.", exists=True, dir_okay=False),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the envelope."),
    kind: str | None = typer.Option(
        None,
        "--kind",
        "-k",
        help="Payload kind (engram / sub-engram; default from config).",
        callback=_kind_callback,
    ),
    codec: str = typer.Option(
        "auto",
        "--codec",
        "-c",
        help="Compression codec: auto, none, zstd, lz4.",
        callback=_codec_callback,
        rich_help_panel="Compression",
    ),
    level: int | None = typer.Option(
        None,
        "--level",
        "-l",
        help="Zstd level (-7..22). Ignored by none and lz4.",
        rich_help_panel="Compression",
    ),
    as_path: str | None = typer.Option(
        None,
        "--as-path",
        help="Select the profile as if the file lived at this path.",
        rich_help_panel="Compression",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        payload_kind = _resolve_kind(kind, config)
        profile_path = as_path if as_path is not None else str(input)
        options, profile = resolve_write_options(
            config.profiler, profile_path, codec=codec, level=level
        )
        data = input.read_bytes()
        wrapped = wrap(payload_kind, options, data)
        output.write_bytes(wrapped)
        source = f"profile {profile.name}" if profile is not None else "explicit"
        info(
            f"[success]Wrapped[/success] {input} -> {output} "
            f"({payload_kind.label}, {options.codec.label} "
            f"level {_format_level(options.codec, options.level)}, {source}; "
            f"{_format_bytes(len(data))} -> {_format_bytes(len(wrapped))})"
        )

    _run_cli(_run, debug=debug_value)


def resolve_write_options(
    profiler: CompressionProfiler,
    path: str,
    *,
    codec: str,
    level: int | None,
) -> tuple[WriteOptions, CompressionProfile | None]:
    if codec == "auto":
        profile = profiler.select(path)
        options = profile.to_write_options()
        if level is not None and options.codec.uses_level:
            options = WriteOptions(codec=options.codec, level=level)
        return options, profile
    resolved = CompressionCodec.parse(codec)
    return WriteOptions(codec=resolved, level=level if resolved.uses_level else None), None
