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

import unittest

from embeddenator_io.encoding import (
    VALUE_FORMATS,
    decode_value,
    encode_value,
    from_cbor,
    from_json,
    to_cbor,
    to_json,
)

SAMPLE = {"path": "/etc/hosts", "codec": "lz4", "level": None, "sizes": [1, 2, 3], "ratio": 0.5}


class TestSerialize(unittest.TestCase):
    def test_formats(self) -> None:
        self.assertEqual(VALUE_FORMATS, ("cbor", "json"))

    def test_encode_decode_each_format(self) -> None:
        for fmt in VALUE_FORMATS:
            with self.subTest(fmt=fmt):
                self.assertEqual(decode_value(encode_value(SAMPLE, fmt), fmt), SAMPLE)

    def test_format_name_is_case_insensitive(self) -> None:
        self.assertEqual(encode_value(SAMPLE, " JSON "), encode_value(SAMPLE, "json"))

    def test_unknown_format(self) -> None:
        with self.assertRaises(ValueError):
            encode_value(SAMPLE, "yaml")
        with self.assertRaises(ValueError):
            decode_value(b"", "msgpack")

    def test_cbor_is_canonical(self) -> None:
        first = to_cbor({"b": 1, "a": 2})
        second = to_cbor({"a": 2, "b": 1})
        self.assertEqual(first, second)

    def test_cbor_keeps_bytes(self) -> None:
        value = {"blob": b"\x00\x01\xff"}
        self.assertEqual(from_cbor(to_cbor(value)), value)

    def test_json_rejects_bytes(self) -> None:
        with self.assertRaises(ValueError):
            to_json({"blob": b"\x00"})

    def test_json_sorted_and_compact(self) -> None:
        self.assertEqual(to_json({"b": 1, "a": [1, 2]}), '{"a":[1,2],"b":1}')
        self.assertIn("\n", to_json({"a": 1}, pretty=True))

    def test_invalid_input(self) -> None:
        with self.assertRaises(ValueError):
            from_cbor(b"\x82\x01")
        with self.assertRaises(ValueError):
            from_json("{not json")
        with self.assertRaises(TypeError):
            from_cbor("text")  # type: ignore[arg-type]

    def test_unserializable_value(self) -> None:
        with self.assertRaises(ValueError):
            to_cbor(object())


if __name__ == "__main__":
    unittest.main()
