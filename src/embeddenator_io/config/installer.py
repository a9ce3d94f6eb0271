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

import os
import shutil
import sys
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "data" / "default.toml"
CONFIG_FILENAME = "config.toml"
APP_NAME = "embeddenator-io"
CONFIG_PATH_ENV = "EMBEDDENATOR_IO_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


def user_config_path() -> Path:
    return _user_config_dir() / CONFIG_FILENAME


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path and env_path.strip():
        return Path(env_path.strip())
    user_path = user_config_path()
    if user_path.exists():
        return user_path
    return DEFAULT_CONFIG_PATH


def init_user_config(*, overwrite: bool = False) -> Path:
    dest = user_config_path()
    dest.parent.mkdir(parents=True, exist_ok=True)
    if overwrite or not dest.exists():
        shutil.copyfile(DEFAULT_CONFIG_PATH, dest)
    return dest


def user_config_needs_init() -> bool:
    return not user_config_path().exists()
