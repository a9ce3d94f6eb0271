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

import re
import unittest
from pathlib import Path

from typer.testing import CliRunner

from embeddenator_io.cli import app
from embeddenator_io.formats.envelope_codec import read_header, unwrap, wrap
from embeddenator_io.formats.envelope_types import CompressionCodec, PayloadKind, WriteOptions
from tests.test_support import (
    REPEATED_PAYLOAD,
    TEXT_PAYLOAD,
    build_header,
    isolated_user_config,
)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliTyper(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self.enterContext(isolated_user_config())

    def _invoke(self, args: list[str]):
        return self.runner.invoke(app, args)

    def test_root_info_commands(self) -> None:
        cases = (
            {
                "args": ["--help"],
                "contains": ("wrap", "unwrap", "inspect", "profile", "config"),
            },
            {
                "args": ["--version"],
                "contains": ("embeddenator-io",),
            },
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self._invoke(case["args"])
                self.assertEqual(result.exit_code, 0)
                output = _strip_ansi(result.output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_wrap_help_lists_codec_options(self) -> None:
        result = self._invoke(["wrap", "--help"])
        self.assertEqual(result.exit_code, 0)
        output = _strip_ansi(result.output)
        self.assertIn("--codec", output)
        self.assertIn("--as-path", output)

    def test_wrap_explicit_codec_then_unwrap(self) -> None:
        with self.runner.isolated_filesystem():
            Path("payload.bin").write_bytes(TEXT_PAYLOAD)
            result = self._invoke(
                ["wrap", "payload.bin", "-o", "payload.edn", "--codec", "zstd", "--level", "19"]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Wrapped", result.output)
            wrapped = Path("payload.edn").read_bytes()
            header = read_header(wrapped)
            assert header is not None
            self.assertIs(header.codec, CompressionCodec.ZSTD)
            self.assertIs(header.kind, PayloadKind.ENGRAM_BINCODE)

            result = self._invoke(["unwrap", "payload.edn", "-o", "payload.out"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("Unwrapped", result.output)
            self.assertEqual(Path("payload.out").read_bytes(), TEXT_PAYLOAD)

    def test_wrap_auto_uses_profile_for_path(self) -> None:
        cases = (
            ("/boot/vmlinuz", CompressionCodec.ZSTD, "kernel"),
            ("/etc/hosts", CompressionCodec.LZ4, "config"),
            ("/tmp/scratch", CompressionCodec.NONE, "runtime"),
        )
        with self.runner.isolated_filesystem():
            Path("input.bin").write_bytes(REPEATED_PAYLOAD)
            for as_path, codec, profile_name in cases:
                with self.subTest(as_path=as_path):
                    result = self._invoke(
                        ["wrap", "input.bin", "-o", "input.edn", "--as-path", as_path]
                    )
                    self.assertEqual(result.exit_code, 0, result.output)
                    self.assertIn(f"profile {profile_name}", _strip_ansi(result.output))
                    header = read_header(Path("input.edn").read_bytes())
                    assert header is not None
                    self.assertIs(header.codec, codec)

    def test_wrap_sub_engram_kind(self) -> None:
        with self.runner.isolated_filesystem():
            Path("sub.bin").write_bytes(b"sub engram bytes")
            result = self._invoke(
                ["wrap", "sub.bin", "-o", "sub.edn", "--kind", "sub-engram", "-c", "lz4"]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            wrapped = Path("sub.edn").read_bytes()
            self.assertEqual(unwrap(PayloadKind.SUB_ENGRAM_BINCODE, wrapped), b"sub engram bytes")

    def test_wrap_rejects_bad_options(self) -> None:
        with self.runner.isolated_filesystem():
            Path("input.bin").write_bytes(b"data")
            result = self._invoke(["wrap", "input.bin", "-o", "x.edn", "--codec", "brotli"])
            self.assertEqual(result.exit_code, 2)
            self.assertIn("Invalid value", _strip_ansi(result.output))

            result = self._invoke(["wrap", "input.bin", "-o", "x.edn", "--kind", "manifest"])
            self.assertEqual(result.exit_code, 2)

            result = self._invoke(
                ["wrap", "input.bin", "-o", "x.edn", "--codec", "zstd", "--level", "40"]
            )
            self.assertEqual(result.exit_code, 2)
            self.assertIn("zstd compression failure", _strip_ansi(result.output))
            self.assertFalse(Path("x.edn").exists())

    def test_unwrap_kind_mismatch_fails(self) -> None:
        with self.runner.isolated_filesystem():
            wrapped = wrap(PayloadKind.ENGRAM_BINCODE, WriteOptions(CompressionCodec.ZSTD), b"x")
            Path("engram.edn").write_bytes(wrapped)
            result = self._invoke(
                ["unwrap", "engram.edn", "-o", "out.bin", "--kind", "sub-engram"]
            )
            self.assertEqual(result.exit_code, 2)
            self.assertIn("unexpected envelope payload kind", _strip_ansi(result.output))
            self.assertFalse(Path("out.bin").exists())

    def test_unwrap_legacy_copies_with_warning(self) -> None:
        with self.runner.isolated_filesystem():
            Path("legacy.bin").write_bytes(b"old bincode payload")
            result = self._invoke(["unwrap", "legacy.bin", "-o", "out.bin"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("legacy", _strip_ansi(result.output))
            self.assertEqual(Path("out.bin").read_bytes(), b"old bincode payload")

            result = self._invoke(["--quiet", "unwrap", "legacy.bin", "-o", "quiet.bin"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(result.output.strip(), "")

    def test_unwrap_size_limit(self) -> None:
        with self.runner.isolated_filesystem():
            wrapped = wrap(
                PayloadKind.ENGRAM_BINCODE, WriteOptions(CompressionCodec.ZSTD), REPEATED_PAYLOAD
            )
            Path("big.edn").write_bytes(wrapped)
            result = self._invoke(["unwrap", "big.edn", "-o", "out.bin", "--max-bytes", "100"])
            self.assertEqual(result.exit_code, 2)
            self.assertIn("limit is 100", _strip_ansi(result.output))

            result = self._invoke(["unwrap", "big.edn", "-o", "out.bin", "--max-bytes", "0"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(Path("out.bin").read_bytes(), REPEATED_PAYLOAD)

    def test_unwrap_lenient_reserved(self) -> None:
        with self.runner.isolated_filesystem():
            wrapped = bytearray(wrap(PayloadKind.ENGRAM_BINCODE, WriteOptions(), b"abc"))
            wrapped[6] = 1
            Path("odd.edn").write_bytes(bytes(wrapped))
            result = self._invoke(["unwrap", "odd.edn", "-o", "out.bin"])
            self.assertEqual(result.exit_code, 2)
            self.assertIn("reserved", _strip_ansi(result.output))

            result = self._invoke(["unwrap", "odd.edn", "-o", "out.bin", "--lenient-reserved"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(Path("out.bin").read_bytes(), b"abc")

    def test_unwrap_uses_config_kind(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cfg.toml").write_text('[envelope]\nkind = "sub-engram"\n', encoding="utf-8")
            wrapped = wrap(PayloadKind.SUB_ENGRAM_BINCODE, WriteOptions(), b"abc")
            Path("sub.edn").write_bytes(wrapped)
            result = self._invoke(["--config", "cfg.toml", "unwrap", "sub.edn", "-o", "out.bin"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(Path("out.bin").read_bytes(), b"abc")

    def test_inspect_reports_each_file(self) -> None:
        with self.runner.isolated_filesystem():
            Path("a.edn").write_bytes(
                wrap(PayloadKind.ENGRAM_BINCODE, WriteOptions(CompressionCodec.LZ4), TEXT_PAYLOAD)
            )
            Path("b.bin").write_bytes(b"plain")
            result = self._invoke(["inspect", "a.edn", "b.bin"])
            self.assertEqual(result.exit_code, 0, result.output)
            output = _strip_ansi(result.output)
            self.assertIn("EDN1", output)
            self.assertIn("lz4", output)
            self.assertIn("legacy", output)

    def test_inspect_invalid_header_exit_code(self) -> None:
        with self.runner.isolated_filesystem():
            Path("bad.edn").write_bytes(build_header(kind=9, codec=0, length=0))
            result = self._invoke(["inspect", "bad.edn"])
            self.assertEqual(result.exit_code, 1)
            self.assertIn("invalid", _strip_ansi(result.output))

    def test_profile_paths(self) -> None:
        result = self._invoke(["profile", "/boot/vmlinuz", "/etc/hosts", "--size", "1000"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = _strip_ansi(result.output)
        self.assertIn("kernel", output)
        self.assertIn("config", output)
        self.assertIn("250 B", output)

    def test_profile_list(self) -> None:
        result = self._invoke(["profile", "--list"])
        self.assertEqual(result.exit_code, 0, result.output)
        output = _strip_ansi(result.output)
        for name in ("kernel", "libraries", "media", "archive", "default"):
            self.assertIn(name, output)

    def test_profile_custom_rule_from_config(self) -> None:
        toml = '[[profiles.rule]]\nname = "scratch"\ncodec = "none"\nprefixes = ["/scratch"]\n'
        with self.runner.isolated_filesystem():
            Path("cfg.toml").write_text(toml, encoding="utf-8")
            result = self._invoke(["--config", "cfg.toml", "profile", "/scratch/a"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("scratch", _strip_ansi(result.output))

    def test_invalid_config_reports_error(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cfg.toml").write_text('[envelope]\nkind = "manifest"\n', encoding="utf-8")
            result = self._invoke(["--config", "cfg.toml", "profile", "/a"])
            self.assertEqual(result.exit_code, 2)
            self.assertIn("envelope.kind", _strip_ansi(result.output))

    def test_config_print_path_and_show(self) -> None:
        with self.runner.isolated_filesystem():
            Path("cfg.toml").write_text("[ui]\nquiet = false\n", encoding="utf-8")
            result = self._invoke(["--config", "cfg.toml", "config", "--print-path"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertEqual(result.output.strip(), "cfg.toml")

            result = self._invoke(["--config", "cfg.toml", "config"])
            self.assertEqual(result.exit_code, 0, result.output)
            self.assertIn("quiet = false", result.output)

            result = self._invoke(["--config", "missing.toml", "config"])
            self.assertEqual(result.exit_code, 2)
            self.assertIn("config file not found", _strip_ansi(result.output))

    def test_config_init(self) -> None:
        result = self._invoke(["config", "--init"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("User config ready", _strip_ansi(result.output))
        result = self._invoke(["config"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[envelope]", result.output)


if __name__ == "__main__":
    unittest.main()
