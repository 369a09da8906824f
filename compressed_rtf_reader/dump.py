#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Human-readable dumps of envelopes for debugging. Not used by the decoder."""

from __future__ import annotations

import struct
from typing import List

from compressed_rtf_reader.header import HEADER_SIZE, RtfHeader


def _magic_text(value: int) -> str:
    raw = struct.pack("<I", value)
    return "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in raw)


def format_header(header: RtfHeader) -> str:
    lines = [
        f"compressed_size: {header.compressed_size} (0x{header.compressed_size:08X})",
        f"raw_size:        {header.raw_size} (0x{header.raw_size:08X})",
        f"comp_type:       {header.compression_kind.name} "
        f"(0x{int(header.compression_kind):08X} '{_magic_text(int(header.compression_kind))}')",
        f"checksum:        0x{header.checksum:08X} (not verified)",
        f"payload_size:    {header.payload_size}",
    ]
    return "\n".join(lines)


def hexdump(data: bytes, width: int = 16, start: int = 0) -> str:
    if width <= 0:
        raise ValueError("width must be > 0")
    out: List[str] = []
    for pos in range(0, len(data), width):
        row = data[pos : pos + width]
        hex_part = " ".join(f"{b:02x}" for b in row)
        text_part = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in row)
        out.append(f"{start + pos:08x}  {hex_part:<{width * 3 - 1}}  |{text_part}|")
    return "\n".join(out)


def dump_envelope(data: bytes, header: RtfHeader, max_payload: int = 256) -> str:
    """Header fields followed by a hex dump of the first payload bytes."""
    payload = bytes(data[HEADER_SIZE : HEADER_SIZE + max(0, int(max_payload))])
    parts = [format_header(header), f"input_size:      {len(data)}"]
    if payload:
        parts.append("payload:")
        parts.append(hexdump(payload, start=HEADER_SIZE))
    return "\n".join(parts)
