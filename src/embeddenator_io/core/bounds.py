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

# Fixed envelope header size (magic + kind + codec + reserved + length).
ENVELOPE_HEADER_BYTES = 16

# Default cap on the declared uncompressed length accepted by unwrap (1 GiB).
MAX_ENVELOPE_PAYLOAD_BYTES = 1_073_741_824

# Zstandard level range accepted on write.
ZSTD_MIN_LEVEL = -7
ZSTD_MAX_LEVEL = 22

# Zstandard level used when a write does not name one.
ZSTD_DEFAULT_LEVEL = 3

# Largest value representable in the u64 length field.
MAX_U64 = (1 << 64) - 1


__all__ = [
    "ENVELOPE_HEADER_BYTES",
    "MAX_ENVELOPE_PAYLOAD_BYTES",
    "MAX_U64",
    "ZSTD_DEFAULT_LEVEL",
    "ZSTD_MAX_LEVEL",
    "ZSTD_MIN_LEVEL",
]
