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

from dataclasses import dataclass, field

from ..core.bounds import ZSTD_MAX_LEVEL, ZSTD_MIN_LEVEL
from ..formats.envelope_types import CompressionCodec, WriteOptions
from .rules import PathRules


@dataclass(frozen=True)
class CompressionProfile:
    name: str
    codec: CompressionCodec
    level: int | None = None
    expected_ratio: float = 1.0
    description: str = ""
    rules: PathRules = field(default_factory=PathRules)

    def __post_init__(self) -> None:
        name = self.name.strip() if isinstance(self.name, str) else ""
        if not name:
            raise ValueError("profile name must be a non-empty string")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "codec", CompressionCodec.parse(self.codec))
        if self.level is not None:
            if isinstance(self.level, bool) or not isinstance(self.level, int):
                raise ValueError(f"profile {name}: level must be an integer")
            if self.codec.uses_level and not ZSTD_MIN_LEVEL <= self.level <= ZSTD_MAX_LEVEL:
                raise ValueError(
                    f"profile {name}: zstd level must be within "
                    f"[{ZSTD_MIN_LEVEL}, {ZSTD_MAX_LEVEL}]"
                )
        if not 0.0 < float(self.expected_ratio) <= 1.0:
            raise ValueError(f"profile {name}: expected_ratio must be in (0, 1]")

    def matches(self, path: str) -> bool:
        return self.rules.matches(path)

    def to_write_options(self) -> WriteOptions:
        level = self.level if self.codec.uses_level else None
        return WriteOptions(codec=self.codec, level=level)

    def estimate_compressed_size(self, original_size: int) -> int:
        if original_size < 0:
            raise ValueError("original_size must be non-negative")
        return int(original_size * self.expected_ratio)
