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

"""Config loaders and installers."""

from .installer import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    init_user_config,
    resolve_config_path,
    user_config_needs_init,
    user_config_path,
)
from .loader import (
    AppConfig,
    EnvelopeSettings,
    UiDefaults,
    load_app_config,
    parse_app_config,
)

__all__ = [
    "AppConfig",
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "EnvelopeSettings",
    "UiDefaults",
    "init_user_config",
    "load_app_config",
    "parse_app_config",
    "resolve_config_path",
    "user_config_needs_init",
    "user_config_path",
]
