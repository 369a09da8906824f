#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from striprtf.striprtf import rtf_to_text

from compressed_rtf_reader.errors import CorruptedError


def to_ascii(raw: bytes) -> str:
    try:
        return bytes(raw).decode("ascii", errors="strict")
    except UnicodeDecodeError as e:
        raise CorruptedError(f"decompressed RTF is not ASCII (byte 0x{raw[e.start]:02X} at {e.start})") from e


def rtf_to_plain_text(rtf: str) -> str:
    """Strip RTF control words and groups, keeping the visible text."""
    if not isinstance(rtf, str):
        raise TypeError("rtf must be str")
    return rtf_to_text(rtf).strip()
