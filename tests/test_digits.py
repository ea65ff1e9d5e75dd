#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from ctff.digits import (
    ALPHABET,
    BASE,
    char_to_digit,
    decode_bytes,
    decode_index,
    digit_to_char,
    digits_to_int,
    encode_bytes,
    encode_index,
    int_to_digits,
)
from ctff.errors import CtffFormatError


class DigitCodecTests(unittest.TestCase):
    def test_alphabet_skips_structural_characters(self) -> None:
        self.assertEqual(len(ALPHABET), 92)
        for ch in ("*", "+", ";"):
            self.assertNotIn(ch, ALPHABET)
        self.assertEqual(ALPHABET[0], " ")
        self.assertEqual(ALPHABET[-1], "~")

    def test_digit_char_bijection(self) -> None:
        seen = set()
        for d in range(BASE):
            ch = digit_to_char(d)
            seen.add(ch)
            self.assertEqual(char_to_digit(ch), d)
        self.assertEqual(len(seen), BASE)

    def test_shift_past_reserved_points(self) -> None:
        self.assertEqual(digit_to_char(9), ")")
        self.assertEqual(digit_to_char(10), ",")
        self.assertEqual(digit_to_char(25), "<")
        self.assertEqual(digit_to_char(26), "=")

    def test_reserved_char_is_not_a_digit(self) -> None:
        for ch in ("*", "+", ";", "\t", "é"):
            with self.assertRaises(CtffFormatError):
                char_to_digit(ch)
        with self.assertRaises(CtffFormatError):
            digit_to_char(92)

    def test_int_to_digits_big_endian(self) -> None:
        self.assertEqual(int_to_digits(0), [0])
        self.assertEqual(int_to_digits(91), [91])
        self.assertEqual(int_to_digits(92), [1, 0])
        self.assertEqual(int_to_digits(92 * 92 + 5), [1, 0, 5])
        with self.assertRaises(CtffFormatError):
            int_to_digits(-1)

    def test_index_roundtrip(self) -> None:
        for n in (0, 1, 41, 91, 92, 93, 8463, 8464, 10 ** 6, 2 ** 70):
            self.assertEqual(digits_to_int(int_to_digits(n)), n)
            self.assertEqual(decode_index(encode_index(n)), n)

    def test_encode_index_text(self) -> None:
        self.assertEqual(encode_index(0), " ")
        self.assertEqual(encode_index(92), "! ")
        self.assertEqual(decode_index("! "), 92)
        self.assertEqual(decode_index(""), 0)

    def test_bytes_roundtrip_keeps_leading_zeros(self) -> None:
        samples = [b"", b"\x00", b"\x00\x00\x07", b"hello", b"\xff" * 9, bytes(range(256))]
        for raw in samples:
            encoded = encode_bytes(raw)
            self.assertTrue(all(ch in ALPHABET for ch in encoded))
            self.assertEqual(decode_bytes(encoded), raw)

    def test_bytes_small_values(self) -> None:
        self.assertEqual(encode_bytes(b""), "")
        self.assertEqual(encode_bytes(b"\x05"), "%")
        self.assertEqual(encode_bytes(b"\x00\x05"), " %")


if __name__ == "__main__":
    unittest.main()
