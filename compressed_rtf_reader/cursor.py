#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import struct
from typing import Optional

from compressed_rtf_reader.errors import TruncatedInputError


class ByteCursor:
    """Forward-only reader over an in-memory buffer.

    `limit` caps how far the cursor may read (defaults to the buffer length).
    Reads past the limit raise TruncatedInputError and leave the position unchanged.
    """

    def __init__(self, data: bytes, limit: Optional[int] = None) -> None:
        self._data = data
        self._pos = 0
        if limit is None:
            limit = len(data)
        self._limit = max(0, min(int(limit), len(data)))

    @property
    def position(self) -> int:
        return self._pos

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def remaining(self) -> int:
        return self._limit - self._pos

    def at_end(self) -> bool:
        return self._pos >= self._limit

    def read(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("count must be >= 0")
        if count > self.remaining:
            raise TruncatedInputError(count, self.remaining)
        start = self._pos
        self._pos += count
        return bytes(self._data[start:self._pos])

    def read_u8(self) -> int:
        if self._pos >= self._limit:
            raise TruncatedInputError(1, 0)
        b = self._data[self._pos]
        self._pos += 1
        return b

    def read_u32le(self) -> int:
        return struct.unpack("<I", self.read(4))[0]

    def read_rest(self) -> bytes:
        return self.read(self.remaining)
