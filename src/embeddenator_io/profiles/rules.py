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

"""Path predicates used by compression profiles.

Matching is case-insensitive and works on ``/``-separated paths (``\\`` is
treated as ``/``). A rule set matches when any one of its predicates does:

``prefixes``
    Segment-aware prefix. ``/usr/lib`` matches ``/usr/lib`` and
    ``/usr/lib/libssl.so.3`` but not ``/usr/libexec/ssh-keysign``.
``segments``
    Exact match of any directory component, so ``cache`` matches
    ``/home/u/.cache/cache/blob`` but not a file named ``cache``.
``names``
    ``fnmatch`` glob against the final path component (``*.conf``,
    ``vmlinuz*``, ``*.so.*``).
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase


def normalize_match_path(path: str) -> str:
    return path.replace("\\", "/").lower()


@dataclass(frozen=True)
class PathRules:
    prefixes: tuple[str, ...] = ()
    segments: tuple[str, ...] = ()
    names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefixes", _normalize_prefixes(self.prefixes))
        object.__setattr__(self, "segments", _normalize_tokens(self.segments, label="segment"))
        object.__setattr__(self, "names", _normalize_tokens(self.names, label="name pattern"))

    @property
    def empty(self) -> bool:
        return not (self.prefixes or self.segments or self.names)

    def matches(self, path: str) -> bool:
        normalized = normalize_match_path(path)
        if not normalized:
            return False
        return self._matches_normalized(normalized)

    def _matches_normalized(self, normalized: str) -> bool:
        for prefix in self.prefixes:
            if normalized == prefix or normalized.startswith(prefix + "/"):
                return True
        parts = normalized.split("/")
        if self.segments:
            directories = parts[:-1]
            for segment in self.segments:
                if segment in directories:
                    return True
        if self.names:
            basename = parts[-1]
            if basename:
                for pattern in self.names:
                    if fnmatchcase(basename, pattern):
                        return True
        return False


def _normalize_prefixes(values: object) -> tuple[str, ...]:
    prefixes: list[str] = []
    for value in _as_str_tuple(values, label="prefix"):
        prefix = normalize_match_path(value.strip()).rstrip("/")
        if not prefix:
            raise ValueError("path prefix must not be empty or '/'")
        prefixes.append(prefix)
    return tuple(prefixes)


def _normalize_tokens(values: object, *, label: str) -> tuple[str, ...]:
    tokens: list[str] = []
    for value in _as_str_tuple(values, label=label):
        token = value.strip().lower()
        if not token:
            raise ValueError(f"{label} must not be empty")
        if "/" in token or "\\" in token:
            raise ValueError(f"{label} must not contain path separators: {value!r}")
        tokens.append(token)
    return tuple(tokens)


def _as_str_tuple(values: object, *, label: str) -> tuple[str, ...]:
    if isinstance(values, str):
        raise ValueError(f"{label} list must be a sequence of strings, not a string")
    items = tuple(values)  # type: ignore[arg-type]
    for item in items:
        if not isinstance(item, str):
            raise ValueError(f"{label} must be a string, got {item!r}")
    return items
