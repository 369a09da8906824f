#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Union

from compressed_rtf_reader.cursor import ByteCursor
from compressed_rtf_reader.errors import InvalidCompTypeError, InvalidSizeError

logger = logging.getLogger(__name__)

HEADER_SIZE = 0x10
# compressed_size counts everything after its own field: the 12 remaining header bytes + payload.
SIZE_FIELD_LEN = 4
MIN_SIZE_UNCOMPRESSED = 0x0C
MIN_SIZE_COMPRESSED = 0x10


class CompressionKind(enum.IntEnum):
    COMPRESSED = 0x75465A4C  # b"LZFu"
    UNCOMPRESSED = 0x414C454D  # b"MELA"


@dataclass(frozen=True)
class RtfHeader:
    compressed_size: int
    raw_size: int
    compression_kind: CompressionKind
    checksum: int

    @property
    def is_compressed(self) -> bool:
        return self.compression_kind == CompressionKind.COMPRESSED

    @property
    def payload_size(self) -> int:
        """Payload bytes declared after the 16-byte header."""
        return self.compressed_size - (HEADER_SIZE - SIZE_FIELD_LEN)


def parse_header(source: Union[bytes, bytearray, memoryview, ByteCursor]) -> RtfHeader:
    """Read and validate the 16-byte header.

    Accepts raw bytes or a ByteCursor; a cursor is left positioned right after the header.
    The checksum is returned as-is and never verified.
    """
    cur = source if isinstance(source, ByteCursor) else ByteCursor(bytes(source))
    if cur.remaining < HEADER_SIZE:
        raise InvalidSizeError(cur.remaining)

    compressed_size = cur.read_u32le()
    raw_size = cur.read_u32le()
    kind_raw = cur.read_u32le()
    try:
        kind = CompressionKind(kind_raw)
    except ValueError:
        raise InvalidCompTypeError(kind_raw) from None
    checksum = cur.read_u32le()

    if compressed_size < MIN_SIZE_UNCOMPRESSED or (
        kind == CompressionKind.COMPRESSED and compressed_size < MIN_SIZE_COMPRESSED
    ):
        raise InvalidSizeError(compressed_size)

    header = RtfHeader(
        compressed_size=compressed_size,
        raw_size=raw_size,
        compression_kind=kind,
        checksum=checksum,
    )
    logger.debug(
        "header: kind=%s compressed_size=%d raw_size=%d checksum=0x%08X",
        kind.name,
        compressed_size,
        raw_size,
        checksum,
    )
    return header
