#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ctff.dictionary import Dictionary
from ctff.digits import decode_index, encode_index
from ctff.errors import CtffFormatError
from ctff.escape import unescape_token

LITERAL_MARKER = "*"
SUFFIX_SEPARATOR = "+"
INVALID_INDEX = "INVALID_INDEX"

TOKEN_EXACT = "exact"
TOKEN_PREFIX = "prefix"
TOKEN_LITERAL = "literal"


@dataclass(frozen=True)
class Token:
    kind: str
    index: Optional[int] = None
    suffix: str = ""

    def render(self) -> str:
        if self.kind == TOKEN_LITERAL:
            return LITERAL_MARKER + self.suffix
        head = encode_index(int(self.index or 0))
        if self.kind == TOKEN_PREFIX and self.suffix:
            return head + SUFFIX_SEPARATOR + self.suffix
        return head


def make_token(word: str, dictionary: Dictionary) -> Token:
    idx = dictionary.find(word)
    if idx is not None:
        return Token(TOKEN_EXACT, idx)
    idx = dictionary.longest_prefix(word)
    if idx is None:
        return Token(TOKEN_LITERAL, None, word)
    return Token(TOKEN_PREFIX, idx, word[len(dictionary[idx]):])


def encode_word(word: str, dictionary: Dictionary) -> str:
    """Encode one lowercase word as an (unescaped) token."""
    return make_token(word, dictionary).render()


def parse_token(token: str) -> Token:
    """Structured view of an unescaped token.

    Raises CtffFormatError when the index part is not base-92 digits.
    """
    if token.startswith(LITERAL_MARKER):
        return Token(TOKEN_LITERAL, None, token[1:])
    head, sep, tail = token.partition(SUFFIX_SEPARATOR)
    idx = decode_index(head)
    if sep:
        return Token(TOKEN_PREFIX, idx, tail)
    return Token(TOKEN_EXACT, idx)


def decode_word(token: str, dictionary: Dictionary) -> str:
    """Decode one token as it appears in a compressed line (still escaped).

    An index outside the dictionary, or one that is not made of digit
    characters, decodes to INVALID_INDEX instead of raising.
    """
    if not token:
        return ""
    if token.startswith(LITERAL_MARKER):
        return unescape_token(token[1:])
    head, _sep, tail = token.partition(SUFFIX_SEPARATOR)
    try:
        idx = decode_index(unescape_token(head))
    except CtffFormatError:
        return INVALID_INDEX
    if idx < 0 or idx >= len(dictionary):
        return INVALID_INDEX
    return unescape_token(dictionary[idx] + tail)
