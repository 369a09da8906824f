#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

DICTIONARY_SIZE = 0x1000
DICTIONARY_MASK = DICTIONARY_SIZE - 1

# Written at offset 0 before decoding starts; never emitted.
INITIAL_DICTIONARY = (
    rb"{\rtf1\ansi\mac\deff0\deftab720{\fonttbl;}"
    rb"{\f0\fnil \froman \fswiss \fmodern \fscript "
    rb"\fdecor MS Sans SerifSymbolArialTimes New RomanCourier{\colortbl\red0\green0\blue0"
    b"\r\n"
    rb"\par \pard\plain\f0\fs20\b\i\u\tab\tx"
)
INITIAL_DICTIONARY_SIZE = len(INITIAL_DICTIONARY)  # 207


def new_dictionary() -> bytearray:
    """Fresh 4096-byte working dictionary with the seed at offset 0."""
    buf = bytearray(DICTIONARY_SIZE)
    buf[:INITIAL_DICTIONARY_SIZE] = INITIAL_DICTIONARY
    return buf
