#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from ctff.caps import (
    CapsCursor,
    extract_caps,
    format_caps_bitmap,
    pack_bits,
    unformat_caps_bitmap,
    unpack_bits,
)
from ctff.errors import CtffFormatError

T = True
F = False


class CapsBitmapTests(unittest.TestCase):
    def test_format_runs(self) -> None:
        self.assertEqual(format_caps_bitmap([]), "")
        self.assertEqual(format_caps_bitmap([F, F, T, T, F]), '";;!')
        self.assertEqual(format_caps_bitmap([T, T, T]), ";;;")
        self.assertEqual(format_caps_bitmap([F, F, F]), "#")
        self.assertEqual(format_caps_bitmap([F] * 100 + [T]), "!(;")

    def test_roundtrip(self) -> None:
        samples = [
            [],
            [T],
            [F],
            [T] * 40,
            [F] * 500,
            [T, F, T, F, F, T, T, F, F, F],
            [F] * 92 + [T] + [F] * 8465,
        ]
        for bits in samples:
            self.assertEqual(unformat_caps_bitmap(format_caps_bitmap(bits)), bits)

    def test_unformat_rejects_foreign_characters(self) -> None:
        with self.assertRaises(CtffFormatError):
            unformat_caps_bitmap("!\t;")

    def test_extract_caps_ascii_only(self) -> None:
        self.assertEqual(extract_caps("The CAT é1"), [T, F, F, T, T, T])
        self.assertEqual(extract_caps("123 ..."), [])

    def test_cursor_consumes_in_order(self) -> None:
        cursor = CapsCursor([T, F, T])
        self.assertEqual(cursor.apply("ab"), "Ab")
        self.assertEqual(cursor.apply("1-cd"), "1-Cd")
        self.assertEqual(cursor.remaining, 0)
        self.assertEqual(cursor.apply("ef"), "ef")

    def test_cursor_without_flags_keeps_lowercase(self) -> None:
        cursor = CapsCursor()
        self.assertEqual(cursor.apply("hello"), "hello")
        self.assertEqual(len(cursor), 0)

    def test_pack_bits(self) -> None:
        bits = [T, F, F, F, F, F, F, F, T]
        packed = pack_bits(bits)
        self.assertEqual(packed, b"\x80\x80")
        self.assertEqual(unpack_bits(packed, len(bits)), bits)
        self.assertEqual(pack_bits([]), b"")


if __name__ == "__main__":
    unittest.main()
