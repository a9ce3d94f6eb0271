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

"""Structured value <-> bytes conversion in two interchangeable formats.

``cbor`` is the compact format and round-trips floats and byte strings
exactly. ``json`` is the verbose, human-readable one; it cannot carry raw
bytes and may lose float precision in foreign readers.
"""

from __future__ import annotations

import json
from typing import Any, Literal

import cbor2

ValueFormat = Literal["cbor", "json"]
VALUE_FORMATS: tuple[ValueFormat, ...] = ("cbor", "json")


def to_cbor(value: Any) -> bytes:
    try:
        return cbor2.dumps(value, canonical=True)
    except (cbor2.CBOREncodeError, TypeError) as exc:
        raise ValueError(f"value is not CBOR-serializable: {exc}") from exc


def from_cbor(data: bytes) -> Any:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("cbor data must be bytes")
    try:
        return cbor2.loads(bytes(data))
    except (cbor2.CBORDecodeError, EOFError) as exc:
        raise ValueError(f"invalid CBOR data: {exc}") from exc


def to_json(value: Any, *, pretty: bool = False) -> str:
    try:
        if pretty:
            return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
        return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"value is not JSON-serializable: {exc}") from exc


def from_json(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError(f"invalid JSON data: {exc}") from exc


def encode_value(value: Any, fmt: str = "cbor") -> bytes:
    resolved = _resolve_format(fmt)
    if resolved == "cbor":
        return to_cbor(value)
    return to_json(value).encode("utf-8")


def decode_value(data: bytes, fmt: str = "cbor") -> Any:
    resolved = _resolve_format(fmt)
    if resolved == "cbor":
        return from_cbor(data)
    return from_json(bytes(data))


def _resolve_format(fmt: str) -> ValueFormat:
    normalized = str(fmt).strip().lower()
    if normalized == "cbor":
        return "cbor"
    if normalized == "json":
        return "json"
    raise ValueError(f"unsupported value format: {fmt!r} (expected one of: cbor, json)")
