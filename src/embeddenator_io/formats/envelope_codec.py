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

import struct

from ..core.bounds import ENVELOPE_HEADER_BYTES, MAX_ENVELOPE_PAYLOAD_BYTES, MAX_U64
from ..core.errors import (
    KindMismatchError,
    PayloadTooLargeError,
    SizeMismatchError,
    UnsupportedFormatError,
)
from .compression import get_backend
from .envelope_types import (
    MAGIC,
    CompressionCodec,
    EnvelopeHeader,
    EnvelopeInfo,
    PayloadKind,
    WriteOptions,
)

# magic, kind, codec, reserved, uncompressed length
_HEADER = struct.Struct("<4sBBHQ")


def wrap(kind: PayloadKind, options: WriteOptions, data: bytes) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("payload must be bytes")
    raw = bytes(data)
    kind = PayloadKind(kind)
    codec = CompressionCodec(options.codec)
    if len(raw) > MAX_U64:
        raise ValueError("payload length exceeds u64 range")
    body = get_backend(codec).compress(raw, options.level)
    header = _HEADER.pack(MAGIC, int(kind), int(codec), 0, len(raw))
    return header + body


def wrap_or_legacy(kind: PayloadKind, options: WriteOptions, data: bytes) -> bytes:
    # Writers always emit the modern format; only readers handle legacy input.
    return wrap(kind, options, data)


def is_envelope(data: bytes) -> bool:
    # Anything shorter than a full header is legacy, even if it starts with the magic.
    return len(data) >= ENVELOPE_HEADER_BYTES and bytes(data[: len(MAGIC)]) == MAGIC


def read_header(data: bytes, *, strict_reserved: bool = True) -> EnvelopeHeader | None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("payload must be bytes")
    if not is_envelope(data):
        return None
    _magic, kind_id, codec_id, reserved, uncompressed_len = _HEADER.unpack_from(data, 0)
    try:
        kind = PayloadKind(kind_id)
    except ValueError as exc:
        raise UnsupportedFormatError(
            f"unknown envelope payload kind: {kind_id}",
            field="kind",
            observed=kind_id,
        ) from exc
    try:
        codec = CompressionCodec(codec_id)
    except ValueError as exc:
        raise UnsupportedFormatError(
            f"unknown envelope compression codec: {codec_id}",
            field="codec",
            observed=codec_id,
        ) from exc
    if strict_reserved and reserved != 0:
        raise UnsupportedFormatError(
            f"envelope reserved field must be zero, got 0x{reserved:04x}",
            field="reserved",
            expected=0,
            observed=reserved,
        )
    return EnvelopeHeader(
        kind=kind,
        codec=codec,
        reserved=reserved,
        uncompressed_len=uncompressed_len,
    )


def unwrap_payload(
    expected_kind: PayloadKind,
    data: bytes,
    *,
    max_payload_bytes: int | None = MAX_ENVELOPE_PAYLOAD_BYTES,
    strict_reserved: bool = True,
) -> tuple[bytes, EnvelopeInfo]:
    expected_kind = PayloadKind(expected_kind)
    header = read_header(data, strict_reserved=strict_reserved)
    if header is None:
        raw = bytes(data)
        info = EnvelopeInfo(
            legacy=True,
            kind=None,
            codec=None,
            raw_len=len(raw),
            wrapped_len=len(raw),
        )
        return raw, info

    if header.kind is not expected_kind:
        raise KindMismatchError(
            f"unexpected envelope payload kind: expected {expected_kind.label}, "
            f"found {header.kind.label}",
            field="kind",
            expected=expected_kind,
            observed=header.kind,
        )
    if max_payload_bytes is not None and header.uncompressed_len > max_payload_bytes:
        raise PayloadTooLargeError(
            f"envelope declares {header.uncompressed_len} bytes, "
            f"limit is {max_payload_bytes}",
            field="uncompressed_len",
            expected=max_payload_bytes,
            observed=header.uncompressed_len,
        )

    body = bytes(data[ENVELOPE_HEADER_BYTES:])
    if header.codec is CompressionCodec.NONE and len(body) != header.uncompressed_len:
        raise SizeMismatchError(
            f"raw envelope payload is {len(body)} bytes, header declares "
            f"{header.uncompressed_len}",
            field="uncompressed_len",
            expected=header.uncompressed_len,
            observed=len(body),
        )
    decoded = get_backend(header.codec).decompress(body, header.uncompressed_len)
    if len(decoded) != header.uncompressed_len:
        raise SizeMismatchError(
            f"envelope size mismatch: decoded {len(decoded)} bytes, header declares "
            f"{header.uncompressed_len}",
            field="uncompressed_len",
            expected=header.uncompressed_len,
            observed=len(decoded),
        )
    info = EnvelopeInfo(
        legacy=False,
        kind=header.kind,
        codec=header.codec,
        raw_len=len(decoded),
        wrapped_len=len(data),
    )
    return decoded, info


def unwrap(
    expected_kind: PayloadKind,
    data: bytes,
    *,
    max_payload_bytes: int | None = MAX_ENVELOPE_PAYLOAD_BYTES,
    strict_reserved: bool = True,
) -> bytes:
    payload, _info = unwrap_payload(
        expected_kind,
        data,
        max_payload_bytes=max_payload_bytes,
        strict_reserved=strict_reserved,
    )
    return payload
