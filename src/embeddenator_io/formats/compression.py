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

"""Compression backends behind the envelope codec.

Each codec is a small backend object exposing ``compress(data, level)`` and
``decompress(data, expected_len)``. The codec libraries are imported lazily so a
missing optional dependency only fails when that codec is actually used.
"""

from __future__ import annotations

from typing import Protocol

from ..core.bounds import ZSTD_DEFAULT_LEVEL, ZSTD_MAX_LEVEL, ZSTD_MIN_LEVEL
from ..core.errors import CompressionFailureError, SizeMismatchError
from .envelope_types import CompressionCodec


class CompressionBackend(Protocol):
    codec: CompressionCodec

    def compress(self, data: bytes, level: int | None) -> bytes: ...

    def decompress(self, data: bytes, expected_len: int) -> bytes: ...


class NoneBackend:
    codec = CompressionCodec.NONE

    def compress(self, data: bytes, level: int | None) -> bytes:
        return bytes(data)

    def decompress(self, data: bytes, expected_len: int) -> bytes:
        return bytes(data)


class ZstdBackend:
    codec = CompressionCodec.ZSTD

    def compress(self, data: bytes, level: int | None) -> bytes:
        resolved = ZSTD_DEFAULT_LEVEL if level is None else level
        if isinstance(resolved, bool) or not isinstance(resolved, int):
            raise CompressionFailureError("zstd", f"level must be an integer, got {level!r}")
        if not ZSTD_MIN_LEVEL <= resolved <= ZSTD_MAX_LEVEL:
            raise CompressionFailureError(
                "zstd",
                f"level {resolved} outside [{ZSTD_MIN_LEVEL}, {ZSTD_MAX_LEVEL}]",
                field="level",
                expected=(ZSTD_MIN_LEVEL, ZSTD_MAX_LEVEL),
                observed=resolved,
            )
        zstd = _import_zstd()
        try:
            compressor = zstd.ZstdCompressor(
                level=resolved, write_checksum=True, write_content_size=True
            )
            return compressor.compress(data)
        except (zstd.ZstdError, ValueError) as exc:
            raise CompressionFailureError("zstd", str(exc)) from exc

    def decompress(self, data: bytes, expected_len: int) -> bytes:
        zstd = _import_zstd()
        try:
            declared = zstd.frame_content_size(data)
        except (zstd.ZstdError, ValueError) as exc:
            raise CompressionFailureError("zstd", str(exc)) from exc
        if declared >= 0 and declared != expected_len:
            raise SizeMismatchError(
                f"zstd frame declares {declared} bytes, envelope declares {expected_len}",
                field="uncompressed_len",
                expected=expected_len,
                observed=declared,
            )
        decompressor = zstd.ZstdDecompressor()
        try:
            if declared >= 0:
                return decompressor.decompress(data)
            return decompressor.decompress(data, max_output_size=max(expected_len, 1))
        except (zstd.ZstdError, ValueError) as exc:
            raise CompressionFailureError("zstd", str(exc)) from exc


class Lz4Backend:
    codec = CompressionCodec.LZ4

    def compress(self, data: bytes, level: int | None) -> bytes:
        lz4_frame = _import_lz4_frame()
        try:
            return lz4_frame.compress(
                data,
                store_size=True,
                content_checksum=True,
                block_checksum=True,
            )
        except (RuntimeError, ValueError) as exc:
            raise CompressionFailureError("lz4", str(exc)) from exc

    def decompress(self, data: bytes, expected_len: int) -> bytes:
        lz4_frame = _import_lz4_frame()
        try:
            frame_info = lz4_frame.get_frame_info(data)
        except (RuntimeError, ValueError) as exc:
            raise CompressionFailureError("lz4", str(exc)) from exc
        declared = int(frame_info.get("content_size") or 0)
        if declared and declared != expected_len:
            raise SizeMismatchError(
                f"lz4 frame declares {declared} bytes, envelope declares {expected_len}",
                field="uncompressed_len",
                expected=expected_len,
                observed=declared,
            )
        # Frames without a stored size are bounded by the envelope length instead.
        decompressor = lz4_frame.LZ4FrameDecompressor()
        try:
            decoded = decompressor.decompress(data, max_length=expected_len + 1)
        except (RuntimeError, ValueError) as exc:
            raise CompressionFailureError("lz4", str(exc)) from exc
        if len(decoded) > expected_len:
            raise SizeMismatchError(
                f"lz4 frame expands past the {expected_len} bytes the envelope declares",
                field="uncompressed_len",
                expected=expected_len,
                observed=len(decoded),
            )
        if not decompressor.eof or decompressor.unused_data:
            raise SizeMismatchError(
                "lz4 frame is truncated or followed by trailing data",
                field="uncompressed_len",
                expected=expected_len,
                observed=len(decoded),
            )
        return decoded


_BACKENDS: dict[CompressionCodec, CompressionBackend] = {
    CompressionCodec.NONE: NoneBackend(),
    CompressionCodec.ZSTD: ZstdBackend(),
    CompressionCodec.LZ4: Lz4Backend(),
}


def get_backend(codec: CompressionCodec) -> CompressionBackend:
    try:
        return _BACKENDS[codec]
    except KeyError as exc:
        raise CompressionFailureError(str(codec), "no backend registered") from exc


def available_codecs() -> tuple[CompressionCodec, ...]:
    """Codecs whose backing library can be imported in this environment."""
    available = [CompressionCodec.NONE]
    loaders = ((CompressionCodec.ZSTD, _import_zstd), (CompressionCodec.LZ4, _import_lz4_frame))
    for codec, loader in loaders:
        try:
            loader()
        except CompressionFailureError:
            continue
        available.append(codec)
    return tuple(available)


def _import_zstd():
    try:
        import zstandard as zstd
    except ImportError as exc:
        raise CompressionFailureError("zstd", "zstandard is required for zstd support") from exc
    return zstd


def _import_lz4_frame():
    try:
        import lz4.frame as lz4_frame
    except ImportError as exc:
        raise CompressionFailureError("lz4", "lz4 is required for lz4 support") from exc
    return lz4_frame
