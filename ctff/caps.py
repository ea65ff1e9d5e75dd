#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Capitalization stream: one flag per ASCII letter, True = uppercase.

On disk the stream is run-length encoded with the base-92 digit alphabet:
a run of lowercase letters is written as the digits of its length, every
uppercase letter as a literal ";". A zero-length run writes nothing, and a
trailing lowercase run is written without a following ";".

    [F, F, T, T, F] -> "\"" + ";" + ";" + "!"   (run 2, T, T, run 1)
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ctff.digits import char_to_digit, digits_to_int, encode_index

CAPS_TRUE = ";"


def is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def extract_caps(text: str) -> List[bool]:
    return [("A" <= ch <= "Z") for ch in text if is_ascii_letter(ch)]


def format_caps_bitmap(caps: Iterable[bool]) -> str:
    out: List[str] = []
    run = 0
    for bit in caps:
        if not bit:
            run += 1
            continue
        if run:
            out.append(encode_index(run))
            run = 0
        out.append(CAPS_TRUE)
    if run:
        out.append(encode_index(run))
    return "".join(out)


def unformat_caps_bitmap(encoded: str) -> List[bool]:
    """Inverse of format_caps_bitmap.

    Raises CtffFormatError on a character outside the digit alphabet.
    """
    out: List[bool] = []
    digits: List[int] = []
    for ch in encoded:
        if ch == CAPS_TRUE:
            out.extend([False] * digits_to_int(digits))
            out.append(True)
            digits.clear()
        else:
            digits.append(char_to_digit(ch))
    if digits:
        out.extend([False] * digits_to_int(digits))
    return out


class CapsCursor:
    """Sequential reader over a capitalization stream.

    One cursor is threaded through a whole document so that flags are
    consumed in reading order across line boundaries. Once the flags are
    exhausted every further letter stays lowercase.
    """

    def __init__(self, caps: Optional[Sequence[bool]] = None) -> None:
        self._caps: Sequence[bool] = caps if caps is not None else ()
        self.position = 0

    def __len__(self) -> int:
        return len(self._caps)

    @property
    def remaining(self) -> int:
        return max(0, len(self._caps) - self.position)

    def next_flag(self) -> bool:
        pos = self.position
        self.position += 1
        if pos < len(self._caps):
            return bool(self._caps[pos])
        return False

    def apply(self, word: str) -> str:
        out: List[str] = []
        for ch in word:
            if is_ascii_letter(ch):
                out.append(ch.upper() if self.next_flag() else ch)
            else:
                out.append(ch)
        return "".join(out)


def pack_bits(bits: Sequence[bool]) -> bytes:
    """Pack flags MSB-first; the last byte is zero padded."""
    out = bytearray((len(bits) + 7) // 8)
    for i, bit in enumerate(bits):
        if bit:
            out[i // 8] |= 1 << (7 - (i % 8))
    return bytes(out)


def unpack_bits(data: bytes, total_bits: int) -> List[bool]:
    if total_bits > len(data) * 8:
        total_bits = len(data) * 8
    return [bool(data[i // 8] & (1 << (7 - (i % 8)))) for i in range(total_bits)]
