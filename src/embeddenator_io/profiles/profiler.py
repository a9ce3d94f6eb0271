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

from collections.abc import Iterable

from .builtin import BUILTIN_PROFILES, PROFILE_DEFAULT
from .profile import CompressionProfile
from .rules import normalize_match_path


class CompressionProfiler:
    """Resolve a path to a compression profile.

    Profiles are evaluated in the order given and the first one whose rules
    match wins; when nothing matches the ``default`` profile is returned, so
    ``select`` never fails. The table is fixed at construction time.
    """

    __slots__ = ("_profiles", "_default")

    def __init__(
        self,
        profiles: Iterable[CompressionProfile] | None = None,
        *,
        default: CompressionProfile | None = None,
    ) -> None:
        table = BUILTIN_PROFILES if profiles is None else tuple(profiles)
        seen: set[str] = set()
        for profile in table:
            if not isinstance(profile, CompressionProfile):
                raise TypeError(f"expected CompressionProfile, got {type(profile).__name__}")
            key = profile.name.lower()
            if key in seen:
                raise ValueError(f"duplicate profile name: {profile.name}")
            seen.add(key)
        resolved_default = PROFILE_DEFAULT if default is None else default
        if not isinstance(resolved_default, CompressionProfile):
            raise TypeError("default profile must be a CompressionProfile")
        self._profiles: tuple[CompressionProfile, ...] = table
        self._default = resolved_default

    @classmethod
    def builtin(cls) -> "CompressionProfiler":
        return cls()

    @classmethod
    def with_default(cls, default: CompressionProfile) -> "CompressionProfiler":
        return cls(default=default)

    @property
    def profiles(self) -> tuple[CompressionProfile, ...]:
        return self._profiles

    @property
    def default(self) -> CompressionProfile:
        return self._default

    def select(self, path: str) -> CompressionProfile:
        if not isinstance(path, str):
            raise TypeError("path must be a string")
        normalized = normalize_match_path(path)
        if normalized:
            for profile in self._profiles:
                if profile.rules._matches_normalized(normalized):
                    return profile
        return self._default

    def for_path(self, path: str) -> CompressionProfile:
        return self.select(path)

    def by_name(self, name: str) -> CompressionProfile | None:
        key = name.strip().lower()
        for profile in (*self._profiles, self._default):
            if profile.name.lower() == key:
                return profile
        return None

    def estimate_compressed_size(self, path: str, original_size: int) -> int:
        return self.select(path).estimate_compressed_size(original_size)

    def __repr__(self) -> str:
        names = ", ".join(profile.name for profile in self._profiles)
        return f"CompressionProfiler([{names}], default={self._default.name})"
