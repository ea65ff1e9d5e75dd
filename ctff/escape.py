#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Iterable, List

ESCAPE_CHAR = "\\"
DELIMITER = ";"


def escape_token(token: str) -> str:
    out: List[str] = []
    for ch in token:
        if ch == ESCAPE_CHAR:
            out.append("\\\\")
        elif ch == DELIMITER:
            out.append("\\;")
        else:
            out.append(ch)
    return "".join(out)


def unescape_token(token: str) -> str:
    """Drop each escape prefix and keep the character after it.

    A dangling backslash at the end of input contributes nothing.
    """
    out: List[str] = []
    i = 0
    n = len(token)
    while i < n:
        ch = token[i]
        if ch != ESCAPE_CHAR:
            out.append(ch)
            i += 1
            continue
        if i + 1 < n:
            out.append(token[i + 1])
        i += 2
    return "".join(out)


def join_tokens(tokens: Iterable[str]) -> str:
    return DELIMITER.join(escape_token(t) for t in tokens)


def split_escaped(line: str) -> List[str]:
    """Split a joined line on unescaped delimiters.

    Escapes are only used to find the delimiters; the returned tokens still
    carry them. A trailing empty token is dropped.
    """
    parts: List[str] = []
    buf: List[str] = []
    escaping = False
    for ch in line:
        if escaping:
            buf.append(ch)
            escaping = False
        elif ch == ESCAPE_CHAR:
            buf.append(ch)
            escaping = True
        elif ch == DELIMITER:
            parts.append("".join(buf))
            buf.clear()
        else:
            buf.append(ch)
    if buf:
        parts.append("".join(buf))
    return parts
