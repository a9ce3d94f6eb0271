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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.bounds import MAX_ENVELOPE_PAYLOAD_BYTES
from ..formats.envelope_types import CompressionCodec, PayloadKind
from ..profiles import BUILTIN_PROFILES, PROFILE_DEFAULT, CompressionProfile, CompressionProfiler
from ..profiles.rules import PathRules
from .installer import resolve_config_path


@dataclass(frozen=True)
class EnvelopeSettings:
    max_payload_bytes: int | None = MAX_ENVELOPE_PAYLOAD_BYTES
    strict_reserved: bool = True
    kind: PayloadKind = PayloadKind.ENGRAM_BINCODE


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    source_path: Path | None = None
    envelope: EnvelopeSettings = field(default_factory=EnvelopeSettings)
    profiler: CompressionProfiler = field(default_factory=CompressionProfiler)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    return parse_app_config(data, source_path=config_path)


def parse_app_config(data: dict[str, object], *, source_path: Path | None = None) -> AppConfig:
    return AppConfig(
        source_path=source_path,
        envelope=_parse_envelope_settings(_get_dict(data, "envelope")),
        profiler=_parse_profiler(_get_dict(data, "profiles")),
        ui=_parse_ui_defaults(_get_dict(data, "ui")),
    )


def _parse_envelope_settings(cfg: dict[str, object]) -> EnvelopeSettings:
    max_payload_bytes: int | None = MAX_ENVELOPE_PAYLOAD_BYTES
    if cfg.get("max_payload_bytes") is not None:
        parsed = _parse_int_strict(
            cfg.get("max_payload_bytes"), field="envelope.max_payload_bytes"
        )
        if parsed < 0:
            raise ValueError("envelope.max_payload_bytes must be a positive integer or 0")
        max_payload_bytes = parsed or None
    return EnvelopeSettings(
        max_payload_bytes=max_payload_bytes,
        strict_reserved=_parse_bool(
            cfg.get("strict_reserved"), field="envelope.strict_reserved", default=True
        ),
        kind=_parse_kind(cfg.get("kind"), field="envelope.kind"),
    )


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _parse_profiler(cfg: dict[str, object]) -> CompressionProfiler:
    include_builtin = _parse_bool(cfg.get("builtin"), field="profiles.builtin", default=True)
    rules = cfg.get("rule", [])
    if not isinstance(rules, list):
        raise ValueError("profiles.rule must be an array of tables")
    custom: list[CompressionProfile] = []
    for index, entry in enumerate(rules):
        label = f"profiles.rule[{index}]"
        if not isinstance(entry, dict):
            raise ValueError(f"{label} must be a table")
        custom.append(_parse_profile(entry, label=label, require_rules=True))

    table: list[CompressionProfile] = list(custom)
    if include_builtin:
        custom_names = {profile.name.lower() for profile in custom}
        table.extend(
            profile for profile in BUILTIN_PROFILES if profile.name.lower() not in custom_names
        )

    default = PROFILE_DEFAULT
    default_cfg = cfg.get("default")
    if default_cfg is not None:
        if not isinstance(default_cfg, dict):
            raise ValueError("profiles.default must be a table")
        merged: dict[str, object] = {
            "name": PROFILE_DEFAULT.name,
            "codec": PROFILE_DEFAULT.codec.label,
            "level": PROFILE_DEFAULT.level,
            "expected_ratio": PROFILE_DEFAULT.expected_ratio,
            "description": PROFILE_DEFAULT.description,
        }
        if "codec" in default_cfg and "level" not in default_cfg:
            merged["level"] = None
        merged.update(default_cfg)
        default = _parse_profile(merged, label="profiles.default", require_rules=False)
    return CompressionProfiler(table, default=default)


def _parse_profile(
    cfg: dict[str, object],
    *,
    label: str,
    require_rules: bool,
) -> CompressionProfile:
    name = cfg.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"{label}.name must be a non-empty string")
    codec = _parse_codec(cfg.get("codec"), field=f"{label}.codec")
    level = None
    if cfg.get("level") is not None:
        level = _parse_int_strict(cfg.get("level"), field=f"{label}.level")
    ratio_value = cfg.get("expected_ratio", 1.0 if codec is CompressionCodec.NONE else 0.5)
    if isinstance(ratio_value, bool) or not isinstance(ratio_value, (int, float)):
        raise ValueError(f"{label}.expected_ratio must be a number")
    description = cfg.get("description", "")
    if not isinstance(description, str):
        raise ValueError(f"{label}.description must be a string")
    rules = PathRules(
        prefixes=_parse_str_list(cfg.get("prefixes"), field=f"{label}.prefixes"),
        segments=_parse_str_list(cfg.get("segments"), field=f"{label}.segments"),
        names=_parse_str_list(cfg.get("names"), field=f"{label}.names"),
    )
    if require_rules and rules.empty:
        raise ValueError(f"{label} must define at least one of prefixes, segments, names")
    try:
        return CompressionProfile(
            name=name,
            codec=codec,
            level=level,
            expected_ratio=float(ratio_value),
            description=description,
            rules=rules,
        )
    except ValueError as exc:
        raise ValueError(f"{label}: {exc}") from exc


def _parse_codec(value: object, *, field: str) -> CompressionCodec:
    if not isinstance(value, str):
        raise ValueError(f"{field} must be one of: none, zstd, lz4")
    try:
        return CompressionCodec.parse(value)
    except ValueError as exc:
        raise ValueError(f"{field} must be one of: none, zstd, lz4") from exc


def _parse_kind(value: object, *, field: str) -> PayloadKind:
    if value is None:
        return PayloadKind.ENGRAM_BINCODE
    if not isinstance(value, str):
        raise ValueError(f"{field} must be 'engram' or 'sub-engram'")
    try:
        return PayloadKind.parse(value)
    except ValueError as exc:
        raise ValueError(f"{field} must be 'engram' or 'sub-engram'") from exc


def _parse_str_list(value: object, *, field: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"{field} must be a list of strings")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"{field} must contain only non-empty strings")
        items.append(item)
    return tuple(items)


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")
