#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Line and document level transform for the ".ctff" format.

Envelope:

    <compressed line 1>
    ...
    <compressed line N>
    \\UPR
    <run-length capitalization stream>   (no trailing newline)

Each compressed line is its words' tokens, escaped and joined with ";".
Capitalization of the whole document is kept in one flat stream, consumed
in reading order on decode.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from ctff.caps import CapsCursor, extract_caps, format_caps_bitmap, unformat_caps_bitmap
from ctff.dictionary import Dictionary
from ctff.errors import CtffFormatError
from ctff.escape import join_tokens, split_escaped
from ctff.words import TOKEN_EXACT, TOKEN_LITERAL, TOKEN_PREFIX, decode_word, encode_word, make_token

UPR_MARKER = "\\UPR"
WORD_SEPARATOR = " "

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def split_text_lines(text: str) -> List[str]:
    """Split on "\\n" only; a final newline does not start another line."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def compress_line(line: str, dictionary: Dictionary) -> str:
    words = line.split(WORD_SEPARATOR)
    return join_tokens(encode_word(ascii_lower(w), dictionary) for w in words)


def decompress_line(line: str, dictionary: Dictionary, cursor: CapsCursor) -> str:
    words = [cursor.apply(decode_word(tok, dictionary)) for tok in split_escaped(line)]
    return WORD_SEPARATOR.join(words)


def compress_lines(lines: Iterable[str], dictionary: Dictionary) -> List[str]:
    """Compress input lines into envelope lines (body, marker, caps)."""
    body: List[str] = []
    caps: List[bool] = []
    for line in lines:
        caps.extend(extract_caps(line))
        body.append(compress_line(line, dictionary))
    body.append(UPR_MARKER)
    body.append(format_caps_bitmap(caps))
    return body


@dataclass
class DecompressResult:
    lines: List[str] = field(default_factory=list)
    caps_found: bool = False
    caps_valid: bool = True
    caps_bits: int = 0


def decompress_lines(lines: Sequence[str], dictionary: Dictionary) -> DecompressResult:
    """Decompress envelope lines.

    Without a marker every line is treated as body and the output stays
    lowercase (caps_found=False). A capitalization line with characters
    outside the digit alphabet is dropped the same way (caps_valid=False).
    """
    body: List[str] = []
    caps_line = ""
    caps_found = False
    for i, line in enumerate(lines):
        if line.rstrip("\r") == UPR_MARKER:
            caps_found = True
            if i + 1 < len(lines):
                caps_line = lines[i + 1].rstrip("\r")
            break
        body.append(line)

    caps: List[bool] = []
    caps_valid = True
    if caps_found:
        try:
            caps = unformat_caps_bitmap(caps_line)
        except CtffFormatError:
            caps_valid = False

    cursor = CapsCursor(caps)
    out = [decompress_line(line, dictionary, cursor) for line in body]
    return DecompressResult(lines=out, caps_found=caps_found, caps_valid=caps_valid, caps_bits=len(caps))


def render_envelope(lines: Sequence[str]) -> str:
    # The last envelope line (caps stream) carries no newline.
    return "\n".join(lines)


def compress_text(text: str, dictionary: Dictionary) -> str:
    return render_envelope(compress_lines(split_text_lines(text), dictionary))


def decompress_text(text: str, dictionary: Dictionary) -> str:
    result = decompress_lines(split_text_lines(text), dictionary)
    return "".join(line + "\n" for line in result.lines)


def compression_stats(lines: Sequence[str], dictionary: Dictionary) -> Dict[str, object]:
    """Return token and size telemetry for compressing `lines`.

    This is purely diagnostic and does not alter the output format.
    """
    counts = {TOKEN_EXACT: 0, TOKEN_PREFIX: 0, TOKEN_LITERAL: 0}
    for line in lines:
        for w in line.split(WORD_SEPARATOR):
            counts[make_token(ascii_lower(w), dictionary).kind] += 1
    envelope = compress_lines(lines, dictionary)
    plain_bytes = sum(len(line.encode("utf-8", errors="surrogateescape")) + 1 for line in lines)
    compressed_bytes = len(render_envelope(envelope).encode("utf-8", errors="surrogateescape"))
    delta = plain_bytes - compressed_bytes
    gain_pct: float
    if plain_bytes > 0:
        gain_pct = (delta / float(plain_bytes)) * 100.0
    else:
        gain_pct = 0.0
    return {
        "plain_bytes": plain_bytes,
        "compressed_bytes": compressed_bytes,
        "words": sum(counts.values()),
        "exact": counts[TOKEN_EXACT],
        "prefix": counts[TOKEN_PREFIX],
        "literal": counts[TOKEN_LITERAL],
        "caps_bits": sum(len(extract_caps(line)) for line in lines),
        "delta_bytes": delta,
        "gain_pct": gain_pct,
    }
