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

from ...config import init_user_config, resolve_config_path
from ..core.common import _ctx_value, _run_cli
from ..ui import console, info

_CONFIG_HELP = (
    "Show or initialize the active TOML config.\n\n"
    "Examples:\n"
    "  embeddenator-io config\n"
    "  embeddenator-io config --print-path\n"
    "  embeddenator-io config --init\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Copy the packaged defaults to the user config directory.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="With --init, overwrite an existing user config.",
    ),
) -> None:
    config_value = _ctx_value(ctx, "config")
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
        if init:
            path = init_user_config(overwrite=force)
            info(f"User config ready at {path}")
            return
        path = resolve_config_path(config_value)
        if print_path:
            console.print(str(path))
            return
        if not path.exists():
            raise FileNotFoundError(f"config file not found: {path}")
        console.print(f"[muted]# {path}[/muted]")
        console.print(path.read_text(encoding="utf-8"), markup=False, highlight=False)

    _run_cli(_run, debug=debug_value)
