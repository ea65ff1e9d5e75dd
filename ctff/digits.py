#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Base-92 digits over printable ASCII.

A digit d in [0, 91] is written as chr(d + 32), shifted upward past the three
code points that carry structure in the ".ctff" format:

- 42 "*"  literal-word marker
- 43 "+"  index/suffix separator
- 59 ";"  token delimiter and capitalization "true" marker

so the alphabet is the 95 printable characters " ".."~" minus those three.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ctff.errors import CtffFormatError

BASE = 92
RESERVED_CHARS = ("*", "+", ";")

ALPHABET: str = "".join(chr(c) for c in range(32, 127) if chr(c) not in RESERVED_CHARS)
CHAR_TO_DIGIT: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}


def digit_to_char(digit: int) -> str:
    if digit < 0 or digit >= BASE:
        raise CtffFormatError(f"base-92 digit out of range: {digit}")
    return ALPHABET[digit]


def char_to_digit(ch: str) -> int:
    digit = CHAR_TO_DIGIT.get(ch)
    if digit is None:
        raise CtffFormatError(f"not a base-92 digit character: {ch!r}")
    return digit


def int_to_digits(value: int) -> List[int]:
    """Big-endian base-92 digits of a non-negative integer. 0 -> [0]."""
    if value < 0:
        raise CtffFormatError("negative values have no base-92 form")
    if value == 0:
        return [0]
    out: List[int] = []
    v = int(value)
    while v > 0:
        v, rem = divmod(v, BASE)
        out.append(rem)
    out.reverse()
    return out


def digits_to_int(digits: Sequence[int]) -> int:
    num = 0
    for d in digits:
        num = num * BASE + int(d)
    return num


def encode_index(value: int) -> str:
    return "".join(ALPHABET[d] for d in int_to_digits(value))


def decode_index(text: str) -> int:
    # Empty input decodes to 0, matching digits_to_int([]).
    return digits_to_int([char_to_digit(ch) for ch in text])


def encode_bytes(data: bytes) -> str:
    """Encode a byte string as one big base-92 number.

    Each leading zero byte becomes one leading digit-0 character so that
    decode_bytes() restores the exact input length.
    """
    raw = bytes(data)
    zeros = len(raw) - len(raw.lstrip(b"\x00"))
    num = int.from_bytes(raw, "big")
    head = ALPHABET[0] * zeros
    if num == 0:
        return head
    return head + encode_index(num)


def decode_bytes(text: str) -> bytes:
    zeros = len(text) - len(text.lstrip(ALPHABET[0]))
    rest = text[zeros:]
    num = decode_index(rest) if rest else 0
    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * zeros + body
