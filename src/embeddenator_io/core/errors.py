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

"""Typed failures raised by the envelope codec and its compression backends.

Every error is a ``ValueError`` so callers that only care about "bad input"
can keep catching that, while callers that need to react programmatically can
match the concrete subclass and read ``field``/``expected``/``observed``.
"""

from __future__ import annotations


class EnvelopeError(ValueError):
    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        expected: object = None,
        observed: object = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.observed = observed


class UnsupportedFormatError(EnvelopeError):
    """Unknown kind or codec byte, or reserved bits set in strict mode."""


class KindMismatchError(EnvelopeError):
    """Envelope holds a different payload kind than the caller asked for."""


class SizeMismatchError(EnvelopeError):
    """Declared and actual lengths disagree (corrupt or truncated data)."""


class PayloadTooLargeError(EnvelopeError):
    """Declared uncompressed length exceeds the configured maximum."""


class CompressionFailureError(EnvelopeError):
    def __init__(
        self,
        codec: str,
        reason: str,
        *,
        field: str | None = None,
        expected: object = None,
        observed: object = None,
    ) -> None:
        super().__init__(
            f"{codec} compression failure: {reason}",
            field=field,
            expected=expected,
            observed=observed,
        )
        self.codec = codec
        self.reason = reason


__all__ = [
    "CompressionFailureError",
    "EnvelopeError",
    "KindMismatchError",
    "PayloadTooLargeError",
    "SizeMismatchError",
    "UnsupportedFormatError",
]
