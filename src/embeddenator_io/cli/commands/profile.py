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

import typer

from ...profiles import CompressionProfile
from ..core.common import _ctx_value, _format_bytes, _format_level, _load_config, _run_cli
from ..ui import build_grid_table, codec_markup, console

_PROFILE_HELP = (
    "Show which compression profile applies to each path.\n\n"
    "Examples:\n"
    "  embeddenator-io profile /boot/vmlinuz /etc/passwd\n"
    "  embeddenator-io profile /usr/lib/libssl.so.3 --size 4194304\n"
    "  embeddenator-io profile --list\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PROFILE_HELP)(profile)


def profile(
    ctx: typer.Context,
    paths: list[str] | None = typer.Argument(None, help="Paths to classify."),
    list_profiles: bool = typer.Option(
        False,
        "--list",
        help="List the active profile table in priority order.",
    ),
    size: int | None = typer.Option(
        None,
        "--size",
        help="Also estimate the compressed size for a file of this many bytes.",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        config = _load_config(ctx)
        profiler = config.profiler
        if list_profiles or not paths:
            rows = [
                _profile_row(str(index), item)
                for index, item in enumerate(profiler.profiles, start=1)
            ]
            rows.append(_profile_row("default", profiler.default))
            console.print(
                build_grid_table(
                    ("Priority", "Profile", "Codec", "Level", "Ratio", "Description"), rows
                )
            )
            if list_profiles:
                return
        if size is not None and size < 0:
            raise ValueError("--size must be non-negative")
        headers = ["Path", "Profile", "Codec", "Level"]
        if size is not None:
            headers.append("Estimate")
        rows = []
        for path in paths or []:
            selected = profiler.select(path)
            row = [
                path,
                selected.name,
                codec_markup(selected.codec),
                _format_level(selected.codec, selected.level),
            ]
            if size is not None:
                row.append(_format_bytes(selected.estimate_compressed_size(size)))
            rows.append(row)
        if rows:
            console.print(build_grid_table(headers, rows))

    _run_cli(_run, debug=debug_value)


def _profile_row(priority: str, item: CompressionProfile) -> tuple[str, ...]:
    return (
        priority,
        item.name,
        codec_markup(item.codec),
        _format_level(item.codec, item.level),
        f"{item.expected_ratio:.2f}",
        item.description,
    )
