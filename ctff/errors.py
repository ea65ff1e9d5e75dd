#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class CtffError(ValueError):
    pass


class CtffFormatError(CtffError):
    pass


class DictionaryError(CtffError):
    def __init__(self, path: str, reason: str = "not found") -> None:
        super().__init__(f"Dictionary file {reason}: {path}")
        self.path = path
        self.reason = reason
