#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import os
from typing import Dict, List, Optional, Tuple

from ctff.dictionary import Dictionary
from ctff.document import (
    DecompressResult,
    compress_lines,
    decompress_lines,
    render_envelope,
    split_text_lines,
)
from ctff.errors import CtffError

COMPRESSED_EXT = ".ctff"
PLAIN_EXT = ".txt"


def load_config(path: str) -> Dict[str, object]:
    if not path or not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def read_lines(path: str) -> List[str]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
    # newline="" keeps "\r" inside lines; only "\n" ends a line.
    # Undecodable bytes ride through as surrogates and are written back as is.
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return split_text_lines(f.read())


def write_text_atomic(path: str, text: str) -> None:
    tmp = path + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
            f.write(text)
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)


def is_compressed_path(path: str, compressed_ext: str = COMPRESSED_EXT) -> bool:
    return path.endswith(compressed_ext)


def output_path_for(path: str, ext: str) -> str:
    """Replace the last extension of the file name with `ext`."""
    base, old_ext = os.path.splitext(path)
    if not old_ext:
        raise CtffError(f"Invalid file name: {path}")
    return base + ext


def compress_file(
    src: str,
    dictionary: Dictionary,
    dst: Optional[str] = None,
    compressed_ext: str = COMPRESSED_EXT,
) -> Tuple[str, int]:
    """Compress `src` and return (output path, number of lines)."""
    out_path = dst or output_path_for(src, compressed_ext)
    lines = read_lines(src)
    write_text_atomic(out_path, render_envelope(compress_lines(lines, dictionary)))
    return out_path, len(lines)


def decompress_file(
    src: str,
    dictionary: Dictionary,
    dst: Optional[str] = None,
    plain_ext: str = PLAIN_EXT,
) -> Tuple[str, DecompressResult]:
    out_path = dst or output_path_for(src, plain_ext)
    result = decompress_lines(read_lines(src), dictionary)
    write_text_atomic(out_path, "".join(line + "\n" for line in result.lines))
    return out_path, result
