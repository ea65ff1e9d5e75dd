#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

import argparse
import datetime as _dt
import os
import sys
from typing import Dict, List, Optional

from ctff.dictionary import PACKAGE_DICT_DIR, load_dictionary, resolve_dictionary_path
from ctff.document import compression_stats
from ctff.errors import CtffError
from ctff.storage import (
    COMPRESSED_EXT,
    PLAIN_EXT,
    compress_file,
    decompress_file,
    is_compressed_path,
    load_config,
    read_lines,
)

VERSION = "1.0.0"

BASE_DIR = os.path.dirname(os.path.abspath(sys.argv[0]))
CONFIG_FILE = os.path.join(BASE_DIR, "config.json")

DEFAULTS: Dict[str, object] = {
    "dict_dir": None,
    "dictionary": "english",
    "compressed_ext": COMPRESSED_EXT,
    "plain_ext": PLAIN_EXT,
}


# ----------------------------
# Utilities: time / output
# ----------------------------

def ts_now() -> str:
    return _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def out(msg: str) -> None:
    sys.stdout.write(msg + "\n")
    sys.stdout.flush()


def err(msg: str) -> None:
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()


def dict_dirs_for(cfg: Dict[str, object]) -> List[str]:
    dict_dir = cfg.get("dict_dir")
    if isinstance(dict_dir, str) and dict_dir:
        return [dict_dir]
    return [os.path.join(BASE_DIR, "dict"), PACKAGE_DICT_DIR]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ctffCodec.py",
        description="Compress a text file into .ctff with a word dictionary, or restore a .ctff file.",
    )
    ap.add_argument("file", help="input file; a .ctff file is decompressed, anything else is compressed")
    ap.add_argument("dictionary", nargs="?", default=None, help="dictionary name in the dict directory (default: english)")
    ap.add_argument("--dict-dir", dest="dict_dir", default=None, help="directory holding <name>.txt dictionaries")
    ap.add_argument("--config", default=CONFIG_FILE, help=f"JSON config file (default: {CONFIG_FILE})")
    ap.add_argument("-o", "--output", default=None, help="output file (default: input name with its extension replaced)")
    ap.add_argument("--stats", action="store_true", help="print compression telemetry after compressing")
    ap.add_argument("--quiet", action="store_true", help="less terminal output")
    ap.add_argument("--version", action="version", version=f"ctffCodec.py v{VERSION}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg: Dict[str, object] = dict(DEFAULTS)
    cfg.update(load_config(args.config))
    if args.dict_dir:
        cfg["dict_dir"] = args.dict_dir
    if args.dictionary:
        cfg["dictionary"] = args.dictionary
    compressed_ext = str(cfg.get("compressed_ext") or COMPRESSED_EXT)
    plain_ext = str(cfg.get("plain_ext") or PLAIN_EXT)

    src = args.file
    if not os.path.isfile(src):
        err(f"{ts_now()} ERROR: File not found: {src}")
        return 2

    dict_path = resolve_dictionary_path(str(cfg.get("dictionary") or "english"), dict_dirs_for(cfg))
    try:
        dictionary = load_dictionary(dict_path)
    except CtffError as ex:
        err(f"{ts_now()} ERROR: {ex}")
        return 2

    try:
        if is_compressed_path(src, compressed_ext):
            dst, result = decompress_file(src, dictionary, args.output, plain_ext=plain_ext)
            if not result.caps_found:
                err(f"{ts_now()} WARNING: No \\UPR section found in {src}; output is lowercase")
            elif not result.caps_valid:
                err(f"{ts_now()} WARNING: capitalization section in {src} is malformed; output is lowercase")
            if not args.quiet:
                out(f"{ts_now()} decompressed {src} -> {dst} ({len(result.lines)} lines)")
        else:
            dst, count = compress_file(src, dictionary, args.output, compressed_ext=compressed_ext)
            if not args.quiet:
                out(f"{ts_now()} compressed {src} -> {dst} ({count} lines)")
            if args.stats:
                stats = compression_stats(read_lines(src), dictionary)
                out(
                    f"words={stats['words']} exact={stats['exact']} prefix={stats['prefix']} "
                    f"literal={stats['literal']} caps_bits={stats['caps_bits']} "
                    f"bytes={stats['plain_bytes']}->{stats['compressed_bytes']} "
                    f"gain={float(stats['gain_pct']):.1f}%"
                )
    except (CtffError, OSError) as ex:
        err(f"{ts_now()} ERROR: {ex}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
