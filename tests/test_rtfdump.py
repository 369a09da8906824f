#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import io
import struct
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

import rtfDump
from compressed_rtf_reader.decompressor import DEFAULT_BOUND

SAMPLE = bytes.fromhex(
    "2d0000002b0000004c5a4675f1c5c7a7"
    "03000a0072637067313235"
    "42320af32068656c090020"
    "627705b06c647d0a800fa0"
)


class RtfDumpCliTests(unittest.TestCase):
    def _run(self, *argv: str):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            rc = rtfDump.main(list(argv))
        return rc, stdout.getvalue(), stderr.getvalue()

    def test_writes_decompressed_output(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "body.bin"
            dst = Path(td) / "body.rtf"
            src.write_bytes(SAMPLE)
            rc, _out, err = self._run(str(src), "--out", str(dst))
            self.assertEqual(rc, 0)
            self.assertEqual(dst.read_bytes(), b"{\\rtf1\\ansi\\ansicpg1252\\pard hello world}\r\n")
            self.assertIn("wrote 43 byte(s)", err)

    def test_header_dump(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "body.bin"
            src.write_bytes(SAMPLE)
            rc, out, _err = self._run(str(src), "--header")
        self.assertEqual(rc, 0)
        self.assertIn("COMPRESSED", out)
        self.assertIn("payload:", out)

    def test_plain_text(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "body.bin"
            src.write_bytes(SAMPLE)
            rc, out, _err = self._run(str(src), "--plain")
        self.assertEqual(rc, 0)
        self.assertIn("hello world", out)

    def test_invalid_blob_returns_1(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            src = Path(td) / "bad.bin"
            src.write_bytes(struct.pack("<IIII", 0x20, 0, 0x11223344, 0))
            rc, _out, err = self._run(str(src))
        self.assertEqual(rc, 1)
        self.assertIn("ERROR: invalid compression type: 0x11223344", err)

    def test_missing_file_returns_2(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            rc, _out, err = self._run(str(Path(td) / "nope.bin"))
        self.assertEqual(rc, 2)
        self.assertIn("cannot read", err)

    def test_missing_path_returns_2(self) -> None:
        rc, _out, err = self._run()
        self.assertEqual(rc, 2)
        self.assertIn("input path is required", err)

    def test_bound_default_follows_library(self) -> None:
        args = rtfDump.build_parser().parse_args(["body.bin"])
        self.assertEqual(args.bound, DEFAULT_BOUND)
        self.assertEqual(args.dump_bytes, 256)

    def test_version(self) -> None:
        rc, out, _err = self._run("--version")
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), f"rtfDump.py v{rtfDump.VERSION}")


if __name__ == "__main__":
    unittest.main()
