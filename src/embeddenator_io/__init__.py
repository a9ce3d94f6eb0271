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

"""EDN1 payload envelopes and path-driven compression profiles."""

from .core.errors import (
    CompressionFailureError,
    EnvelopeError,
    KindMismatchError,
    PayloadTooLargeError,
    SizeMismatchError,
    UnsupportedFormatError,
)
from .formats import (
    ENVELOPE_MAGIC,
    CompressionCodec,
    EnvelopeHeader,
    EnvelopeInfo,
    PayloadKind,
    WriteOptions,
    is_envelope,
    read_header,
    unwrap,
    unwrap_payload,
    wrap,
    wrap_or_legacy,
)
from .profiles import CompressionProfile, CompressionProfiler, PathRules

__all__ = [
    "ENVELOPE_MAGIC",
    "CompressionCodec",
    "CompressionFailureError",
    "CompressionProfile",
    "CompressionProfiler",
    "EnvelopeError",
    "EnvelopeHeader",
    "EnvelopeInfo",
    "KindMismatchError",
    "PathRules",
    "PayloadKind",
    "PayloadTooLargeError",
    "SizeMismatchError",
    "UnsupportedFormatError",
    "WriteOptions",
    "is_envelope",
    "read_header",
    "unwrap",
    "unwrap_payload",
    "wrap",
    "wrap_or_legacy",
]
