#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
compressed_rtf_reader package

Reader for the Compressed RTF (LZFu/MELA) encapsulation found in MAPI
message properties. The decoding core lives in `header` and `decompressor`;
`text` and `dump` are thin helpers on top of it.
"""

from __future__ import annotations

from compressed_rtf_reader.decompressor import decompress, decompress_text
from compressed_rtf_reader.errors import (
    CorruptedError,
    InvalidCompTypeError,
    InvalidDictionaryReferenceError,
    InvalidSizeError,
    RtfDecompressorError,
    TruncatedInputError,
)
from compressed_rtf_reader.header import CompressionKind, RtfHeader, parse_header

__all__ = [
    "CompressionKind",
    "CorruptedError",
    "InvalidCompTypeError",
    "InvalidDictionaryReferenceError",
    "InvalidSizeError",
    "RtfDecompressorError",
    "RtfHeader",
    "TruncatedInputError",
    "decompress",
    "decompress_text",
    "parse_header",
]
