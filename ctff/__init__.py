#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
ctff package

Codec units for ctffCodec.py: a reversible word-dictionary text format
(".ctff") that replaces words with base-92 dictionary references and keeps
capitalization in a separate run-length section. ctffCodec.py stays the
entrypoint; the logic lives here in testable modules.
"""

from __future__ import annotations

from ctff.dictionary import Dictionary, load_dictionary
from ctff.document import compress_lines, compress_text, decompress_lines, decompress_text
from ctff.errors import CtffError, CtffFormatError, DictionaryError

__all__ = [
    "CtffError",
    "CtffFormatError",
    "Dictionary",
    "DictionaryError",
    "compress_lines",
    "compress_text",
    "decompress_lines",
    "decompress_text",
    "load_dictionary",
]
