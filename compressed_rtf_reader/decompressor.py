#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Compressed RTF decompression.

Uncompressed (MELA) envelopes are passed through. Compressed (LZFu) envelopes
are decoded with the LZ77 loop: each control byte announces eight tokens,
lowest bit first; a clear bit is a literal byte, a set bit is a big-endian
16-bit reference (12-bit dictionary offset, 4-bit length - 2) into a
4096-byte circular dictionary seeded with common RTF boilerplate.

Running out of input mid-stream ends decoding with the output produced so far,
as Outlook's WrapCompressedRTFStream does.
"""

from __future__ import annotations

import logging
from typing import Tuple, Union

from compressed_rtf_reader.cursor import ByteCursor
from compressed_rtf_reader.dictionary import DICTIONARY_MASK, INITIAL_DICTIONARY_SIZE, new_dictionary
from compressed_rtf_reader.errors import TruncatedInputError
from compressed_rtf_reader.header import HEADER_SIZE, SIZE_FIELD_LEN, RtfHeader, parse_header
from compressed_rtf_reader.text import to_ascii

logger = logging.getLogger(__name__)

BOUND_INPUT = "input"
BOUND_DECLARED = "declared"
BOUND_MODES = (BOUND_INPUT, BOUND_DECLARED)
DEFAULT_BOUND = BOUND_INPUT

BytesLike = Union[bytes, bytearray, memoryview]


def _bit_set(value: int, index: int) -> bool:
    return (value >> index) & 1 == 1


def _split_reference(token: int) -> Tuple[int, int]:
    """Return (offset, actual_length) for a 16-bit dictionary reference."""
    offset = (token >> 4) & 0xFFF
    length = (token & 0xF) + 2
    return offset, length


def _loop_limit(header: RtfHeader, total: int, bound: str) -> int:
    if bound == BOUND_INPUT:
        return total
    declared_end = SIZE_FIELD_LEN + header.compressed_size
    if declared_end < total:
        logger.warning(
            "ignoring %d trailing byte(s) beyond declared compressed size %d",
            total - declared_end,
            header.compressed_size,
        )
    return min(total, declared_end)


def _decompress_lz(cur: ByteCursor) -> bytes:
    dictionary = new_dictionary()
    write_offset = INITIAL_DICTIONARY_SIZE
    out = bytearray()

    while not cur.at_end():
        try:
            control = cur.read_u8()
        except TruncatedInputError:
            logger.debug("input ended before control byte, %d byte(s) decoded", len(out))
            return bytes(out)

        for bit in range(8):
            if not _bit_set(control, bit):
                try:
                    value = cur.read_u8()
                except TruncatedInputError:
                    logger.debug("input ended inside literal, %d byte(s) decoded", len(out))
                    return bytes(out)
                out.append(value)
                dictionary[write_offset] = value
                write_offset = (write_offset + 1) & DICTIONARY_MASK
                continue

            try:
                hi = cur.read_u8()
                lo = cur.read_u8()
            except TruncatedInputError:
                logger.debug("input ended inside reference, %d byte(s) decoded", len(out))
                return bytes(out)
            offset, length = _split_reference((hi << 8) | lo)
            if offset == write_offset:
                logger.debug("end marker at offset %d, %d byte(s) decoded", offset, len(out))
                return bytes(out)

            # Reads may hit bytes written earlier in this same run (overlapping copy).
            read_offset = offset
            for _ in range(length):
                value = dictionary[read_offset]
                out.append(value)
                dictionary[write_offset] = value
                read_offset = (read_offset + 1) & DICTIONARY_MASK
                write_offset = (write_offset + 1) & DICTIONARY_MASK

    logger.debug("input consumed without end marker, %d byte(s) decoded", len(out))
    return bytes(out)


def decompress(data: BytesLike, *, bound: str = DEFAULT_BOUND) -> bytes:
    """Decode a Compressed RTF envelope into raw RTF bytes.

    bound selects how far the compressed loop may read:
    - "input": the whole buffer (matches Outlook, tolerates a wrong size field)
    - "declared": only the bytes covered by the header's compressed_size
    Uncompressed envelopes always return every byte after the header.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    if bound not in BOUND_MODES:
        raise ValueError(f"unsupported bound: {bound!r} (expected one of {', '.join(BOUND_MODES)})")
    raw = bytes(data)

    cur = ByteCursor(raw)
    header = parse_header(cur)
    if not header.is_compressed:
        return cur.read_rest()

    payload = ByteCursor(raw, limit=_loop_limit(header, len(raw), bound))
    payload.read(HEADER_SIZE)
    return _decompress_lz(payload)


def decompress_text(data: BytesLike, *, bound: str = DEFAULT_BOUND) -> str:
    """decompress() followed by strict ASCII decoding (CorruptedError on failure)."""
    return to_ascii(decompress(data, bound=bound))
