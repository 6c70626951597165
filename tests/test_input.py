"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, control-key tokens, and UTF-8 input.
"""

from __future__ import annotations

import os
import time
import unittest

from repojump import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B\x1bOC\x1b[D", 4), ["UP", "DOWN", "RIGHT", "LEFT"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_unsupported_csi_sequence_is_consumed(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[3~x", 2), ["UNKNOWN", "x"])

    def test_picker_control_keys(self) -> None:
        self.assertEqual(
            self._read_all(b"\x03\x0e\x10\x7f\x08\r\n\t", 8),
            ["CTRL_C", "CTRL_N", "CTRL_P", "BACKSPACE", "BACKSPACE", "ENTER_CR", "ENTER_LF", "TAB"],
        )

    def test_other_control_bytes_map_to_ctrl_tokens(self) -> None:
        self.assertEqual(self._read_all(b"\x0b\x04", 2), ["CTRL_K", "CTRL_D"])

    def test_multibyte_utf8_is_one_key(self) -> None:
        self.assertEqual(self._read_all("é日".encode("utf-8"), 2), ["é", "日"])

    def test_timeout_without_input_returns_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = input_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "")

    def test_closed_input_raises_eof(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            with self.assertRaises(EOFError):
                input_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)


if __name__ == "__main__":
    unittest.main()
