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

"""Path-driven compression profile selection."""

from .builtin import (
    BUILTIN_PROFILES,
    PROFILE_ARCHIVE,
    PROFILE_BINARIES,
    PROFILE_CONFIG,
    PROFILE_DEFAULT,
    PROFILE_DOCS,
    PROFILE_KERNEL,
    PROFILE_LIBRARIES,
    PROFILE_LOGS,
    PROFILE_MEDIA,
    PROFILE_RUNTIME,
)
from .profile import CompressionProfile
from .profiler import CompressionProfiler
from .rules import PathRules

__all__ = [
    "BUILTIN_PROFILES",
    "CompressionProfile",
    "CompressionProfiler",
    "PROFILE_ARCHIVE",
    "PROFILE_BINARIES",
    "PROFILE_CONFIG",
    "PROFILE_DEFAULT",
    "PROFILE_DOCS",
    "PROFILE_KERNEL",
    "PROFILE_LIBRARIES",
    "PROFILE_LOGS",
    "PROFILE_MEDIA",
    "PROFILE_RUNTIME",
    "PathRules",
]
