#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
rtfDump.py: inspect and decompress Compressed RTF (LZFu/MELA) blobs.

Usage:
    python rtfDump.py body.bin --header          # show header + first payload bytes
    python rtfDump.py body.bin > body.rtf        # decompressed RTF to stdout
    python rtfDump.py body.bin --out body.rtf
    python rtfDump.py body.bin --plain           # visible text only
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from compressed_rtf_reader.decompressor import BOUND_MODES, DEFAULT_BOUND, decompress
from compressed_rtf_reader.dump import dump_envelope
from compressed_rtf_reader.errors import RtfDecompressorError
from compressed_rtf_reader.header import parse_header
from compressed_rtf_reader.text import rtf_to_plain_text, to_ascii

VERSION = "1.0.0"


def out(msg: str) -> None:
    sys.stdout.write(msg + "\n")
    sys.stdout.flush()


def err(msg: str) -> None:
    sys.stderr.write(msg + "\n")
    sys.stderr.flush()


def build_parser() -> argparse.ArgumentParser:
    DEFAULTS = {
        "bound": DEFAULT_BOUND,
        "dump_bytes": 256,
    }

    ap = argparse.ArgumentParser(
        prog="rtfDump.py",
        description="Decompress Compressed RTF (PR_RTF_COMPRESSED) blobs.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    ap.add_argument("path", nargs="?", help="input blob (16-byte header + payload)")
    ap.add_argument("--header", action="store_true", help="print header and payload dump, then exit")
    ap.add_argument(
        "--dump-bytes",
        type=int,
        default=DEFAULTS["dump_bytes"],
        help=f"payload bytes shown by --header (default: {DEFAULTS['dump_bytes']})",
    )
    ap.add_argument("--out", default=None, help="write decompressed RTF here instead of stdout")
    ap.add_argument("--plain", action="store_true", help="print visible text instead of RTF")
    ap.add_argument(
        "--bound",
        choices=BOUND_MODES,
        default=DEFAULTS["bound"],
        help=(
            f"how far compressed data is read (default: {DEFAULTS['bound']})\n"
            "  input:    whole file (Outlook behaviour)\n"
            "  declared: stop at the header's compressed size"
        ),
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    ap.add_argument("--version", action="store_true", help="print version and exit")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.version:
        out(f"rtfDump.py v{VERSION}")
        return 0
    if not args.path:
        err("ERROR: input path is required")
        return 2
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    try:
        data = Path(args.path).read_bytes()
    except OSError as e:
        err(f"ERROR: cannot read {args.path}: {e}")
        return 2

    try:
        if args.header:
            out(dump_envelope(data, parse_header(data), max_payload=args.dump_bytes))
            return 0
        raw = decompress(data, bound=args.bound)
        if args.plain:
            out(rtf_to_plain_text(to_ascii(raw)))
            return 0
    except RtfDecompressorError as e:
        err(f"ERROR: {e}")
        return 1

    if args.out:
        try:
            Path(args.out).write_bytes(raw)
        except OSError as e:
            err(f"ERROR: cannot write {args.out}: {e}")
            return 2
        err(f"wrote {len(raw)} byte(s) to {args.out}")
        return 0

    sys.stdout.buffer.write(raw)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
