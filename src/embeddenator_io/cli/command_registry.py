#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    inspect as inspect_command,
    profile as profile_command,
    unwrap as unwrap_command,
    wrap as wrap_command,
)


def register(app: typer.Typer) -> None:
    wrap_command.register(app)
    unwrap_command.register(app)
    inspect_command.register(app)
    profile_command.register(app)
    config_command.register(app)
