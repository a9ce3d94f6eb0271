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

from dataclasses import dataclass
from enum import IntEnum

MAGIC = b"EDN1"


class PayloadKind(IntEnum):
    ENGRAM_BINCODE = 1
    SUB_ENGRAM_BINCODE = 2

    @classmethod
    def parse(cls, value: object) -> "PayloadKind":
        """Resolve a kind from its member, wire value, or a user-facing name."""
        if isinstance(value, PayloadKind):
            return value
        if isinstance(value, bool):
            raise ValueError(f"unknown payload kind: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            if key in _KIND_ALIASES:
                return _KIND_ALIASES[key]
        raise ValueError(f"unknown payload kind: {value!r}")

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


class CompressionCodec(IntEnum):
    NONE = 0
    ZSTD = 1
    LZ4 = 2

    @classmethod
    def parse(cls, value: object) -> "CompressionCodec":
        if isinstance(value, CompressionCodec):
            return value
        if isinstance(value, bool):
            raise ValueError(f"unknown compression codec: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("none", "off", "raw"):
                return cls.NONE
            if key == "zstd":
                return cls.ZSTD
            if key == "lz4":
                return cls.LZ4
        raise ValueError(f"unknown compression codec: {value!r}")

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def uses_level(self) -> bool:
        return self is CompressionCodec.ZSTD


_KIND_ALIASES = {
    "engram": PayloadKind.ENGRAM_BINCODE,
    "engram_bincode": PayloadKind.ENGRAM_BINCODE,
    "sub_engram": PayloadKind.SUB_ENGRAM_BINCODE,
    "subengram": PayloadKind.SUB_ENGRAM_BINCODE,
    "sub_engram_bincode": PayloadKind.SUB_ENGRAM_BINCODE,
}

_KIND_LABELS = {
    PayloadKind.ENGRAM_BINCODE: "engram",
    PayloadKind.SUB_ENGRAM_BINCODE: "sub-engram",
}


@dataclass(frozen=True)
class WriteOptions:
    codec: CompressionCodec = CompressionCodec.NONE
    level: int | None = None


@dataclass(frozen=True)
class EnvelopeHeader:
    kind: PayloadKind
    codec: CompressionCodec
    reserved: int
    uncompressed_len: int


@dataclass(frozen=True)
class EnvelopeInfo:
    legacy: bool
    kind: PayloadKind | None
    codec: CompressionCodec | None
    raw_len: int
    wrapped_len: int

    @property
    def compressed(self) -> bool:
        return self.codec is not None and self.codec is not CompressionCodec.NONE
