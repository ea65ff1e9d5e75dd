#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import unittest

from ctff.escape import escape_token, join_tokens, split_escaped, unescape_token


class EscapeCodecTests(unittest.TestCase):
    def test_escape_reserved(self) -> None:
        self.assertEqual(escape_token("a;b\\c"), "a\\;b\\\\c")
        self.assertEqual(escape_token("plain"), "plain")

    def test_unescape_roundtrip(self) -> None:
        for word in ("", "\\", ";", "\\;", ";;\\\\", "a\\b;c", "*+x"):
            self.assertEqual(unescape_token(escape_token(word)), word)

    def test_dangling_backslash_is_dropped(self) -> None:
        self.assertEqual(unescape_token("abc\\"), "abc")
        self.assertEqual(unescape_token("\\"), "")

    def test_split_honors_escapes(self) -> None:
        self.assertEqual(split_escaped("a;b\\;c;d"), ["a", "b\\;c", "d"])
        self.assertEqual(split_escaped("\\\\;x"), ["\\\\", "x"])

    def test_split_trims_trailing_empty_token(self) -> None:
        self.assertEqual(split_escaped("a;"), ["a"])
        self.assertEqual(split_escaped(""), [])
        self.assertEqual(split_escaped("a;;b"), ["a", "", "b"])

    def test_join_then_split(self) -> None:
        tokens = ["x;y", "\\", "z", "*a\\;"]
        line = join_tokens(tokens)
        self.assertEqual([unescape_token(t) for t in split_escaped(line)], tokens)


if __name__ == "__main__":
    unittest.main()
