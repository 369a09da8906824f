#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


class RtfDecompressorError(ValueError):
    pass


class InvalidSizeError(RtfDecompressorError):
    def __init__(self, size: int) -> None:
        super().__init__(f"invalid size: {size} (0x{size:X})")
        self.size = size


class InvalidCompTypeError(RtfDecompressorError):
    def __init__(self, comp_type: int) -> None:
        super().__init__(f"invalid compression type: 0x{comp_type:08X}")
        self.comp_type = comp_type


class InvalidDictionaryReferenceError(RtfDecompressorError):
    """Back-reference into a dictionary region that was never written.

    Reserved for a strict reader; the lenient loop in `decompressor` never raises it.
    """


class CorruptedError(RtfDecompressorError):
    pass


class TruncatedInputError(RtfDecompressorError):
    def __init__(self, wanted: int, available: int) -> None:
        super().__init__(f"unexpected end of input: wanted {wanted} byte(s), {available} available")
        self.wanted = wanted
        self.available = available
