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

"""Built-in compression profiles, listed in priority order."""

from __future__ import annotations

from ..formats.envelope_types import CompressionCodec
from .profile import CompressionProfile
from .rules import PathRules

PROFILE_KERNEL = CompressionProfile(
    name="kernel",
    codec=CompressionCodec.ZSTD,
    level=19,
    expected_ratio=0.25,
    description="Maximum compression for kernel and boot files",
    rules=PathRules(
        prefixes=("/boot", "/lib/modules", "/usr/lib/modules"),
        names=("vmlinuz*", "initrd*", "initramfs*", "*.ko", "*.ko.zst", "*.ko.xz"),
    ),
)

PROFILE_LIBRARIES = CompressionProfile(
    name="libraries",
    codec=CompressionCodec.ZSTD,
    level=9,
    expected_ratio=0.40,
    description="Balanced compression for shared libraries",
    rules=PathRules(
        prefixes=("/lib", "/lib64", "/usr/lib", "/usr/lib64", "/usr/local/lib"),
        names=("*.so", "*.so.*", "*.dll", "*.dylib"),
    ),
)

PROFILE_BINARIES = CompressionProfile(
    name="binaries",
    codec=CompressionCodec.ZSTD,
    level=6,
    expected_ratio=0.45,
    description="Fast compression for executables",
    rules=PathRules(
        prefixes=("/bin", "/sbin", "/usr/bin", "/usr/sbin", "/usr/local/bin", "/usr/local/sbin"),
        names=("*.exe",),
    ),
)

PROFILE_CONFIG = CompressionProfile(
    name="config",
    codec=CompressionCodec.LZ4,
    expected_ratio=0.50,
    description="Fast LZ4 compression for configuration files",
    rules=PathRules(
        prefixes=("/etc",),
        names=(
            "*.conf",
            "*.cfg",
            "*.ini",
            "*.yaml",
            "*.yml",
            "*.toml",
            "*.json",
            "*.xml",
        ),
    ),
)

PROFILE_LOGS = CompressionProfile(
    name="logs",
    codec=CompressionCodec.ZSTD,
    level=3,
    expected_ratio=0.35,
    description="Light compression for logs, journals and databases",
    rules=PathRules(
        prefixes=("/var/log",),
        names=("*.log", "*.log.*", "*.journal", "*.db", "*.sqlite", "*.sqlite3"),
    ),
)

PROFILE_DOCS = CompressionProfile(
    name="docs",
    codec=CompressionCodec.ZSTD,
    level=10,
    expected_ratio=0.30,
    description="Mid-level compression for documentation",
    rules=PathRules(
        prefixes=("/usr/share/doc", "/usr/share/man", "/usr/share/info"),
        names=("*.md", "*.rst", "*.adoc", "*.man"),
    ),
)

PROFILE_MEDIA = CompressionProfile(
    name="media",
    codec=CompressionCodec.NONE,
    expected_ratio=0.98,
    description="Skip compression for already-compressed media and archives",
    rules=PathRules(
        names=(
            "*.jpg",
            "*.jpeg",
            "*.png",
            "*.gif",
            "*.webp",
            "*.mp3",
            "*.mp4",
            "*.mkv",
            "*.webm",
            "*.ogg",
            "*.flac",
            "*.zip",
            "*.gz",
            "*.xz",
            "*.zst",
            "*.bz2",
            "*.7z",
            "*.rar",
        ),
    ),
)

PROFILE_RUNTIME = CompressionProfile(
    name="runtime",
    codec=CompressionCodec.NONE,
    expected_ratio=1.0,
    description="No compression for runtime and temporary data",
    rules=PathRules(
        prefixes=("/tmp", "/var/tmp", "/run", "/dev/shm"),
        segments=("cache",),
    ),
)

PROFILE_ARCHIVE = CompressionProfile(
    name="archive",
    codec=CompressionCodec.ZSTD,
    level=22,
    expected_ratio=0.20,
    description="Maximum compression for backups and cold storage",
    rules=PathRules(
        prefixes=("/var/backups", "/backup"),
        segments=("archive",),
    ),
)

PROFILE_DEFAULT = CompressionProfile(
    name="default",
    codec=CompressionCodec.ZSTD,
    level=3,
    expected_ratio=0.55,
    description="General-purpose balanced compression",
)

BUILTIN_PROFILES: tuple[CompressionProfile, ...] = (
    PROFILE_KERNEL,
    PROFILE_LIBRARIES,
    PROFILE_BINARIES,
    PROFILE_CONFIG,
    PROFILE_LOGS,
    PROFILE_DOCS,
    PROFILE_MEDIA,
    PROFILE_RUNTIME,
    PROFILE_ARCHIVE,
)
