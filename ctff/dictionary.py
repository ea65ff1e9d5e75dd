#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Optional, Sequence

from ctff.errors import DictionaryError

DICT_EXT = ".txt"
PACKAGE_DICT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dict")

_END = None  # trie key holding the dictionary index of the word ending at a node


def _build_trie(words: Sequence[str]) -> dict:
    root: dict = {}
    for idx, word in enumerate(words):
        node = root
        for ch in word:
            nxt = node.get(ch)
            if nxt is None:
                nxt = {}
                node[ch] = nxt
            node = nxt
        # First occurrence keeps the index.
        node.setdefault(_END, idx)
    return root


class Dictionary:
    """Ordered, read-only word list. A word's position is its index."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words: tuple = tuple(words)
        self._index: Dict[str, int] = {}
        for i, w in enumerate(self.words):
            self._index.setdefault(w, i)
        self._trie = _build_trie(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> str:
        return self.words[index]

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def find(self, word: str) -> Optional[int]:
        return self._index.get(word)

    def longest_prefix(self, word: str) -> Optional[int]:
        """Index of the longest non-empty entry that is a prefix of `word`.

        Equal-length candidates are the same string, so the first occurrence
        in dictionary order wins.
        """
        node = self._trie
        best: Optional[int] = None
        for ch in word:
            node = node.get(ch)
            if node is None:
                break
            idx = node.get(_END)
            if idx is not None:
                best = idx
        return best


def resolve_dictionary_path(name: str, dict_dirs: Sequence[str]) -> str:
    """Map a dictionary name to `<dir>/<name>.txt`.

    A name that already points at an existing file is returned as is. When
    no directory has the file, the path under the first directory is
    returned so the caller reports a meaningful location.
    """
    if os.path.isfile(name):
        return name
    fname = name if name.endswith(DICT_EXT) else name + DICT_EXT
    candidates: List[str] = [os.path.join(d, fname) for d in dict_dirs if d]
    for path in candidates:
        if os.path.isfile(path):
            return path
    return candidates[0] if candidates else fname


def load_dictionary(path: str) -> Dictionary:
    """Read one word per line, in file order.

    Line endings are stripped; every other character is kept so that indices
    match the file line numbers.
    """
    if not os.path.isfile(path):
        raise DictionaryError(path)
    words: List[str] = []
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for raw in f:
                words.append(raw.rstrip("\r\n"))
    except (OSError, UnicodeDecodeError) as ex:
        raise DictionaryError(path, f"unreadable ({ex})") from ex
    if not words:
        raise DictionaryError(path, "is empty")
    return Dictionary(words)
