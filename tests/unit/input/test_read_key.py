"""Tests for raw key decoding from a file descriptor."""

from __future__ import annotations

import os
import unittest

from diffexplore.input import _PENDING_BYTES, read_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        _PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        _PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_plain_and_control_keys(self) -> None:
        self.assertEqual(
            self._keys(b"jk q\x03\x06\x15\x02\r\n", 10),
            ["j", "k", " ", "q", "CTRL_C", "CTRL_F", "CTRL_U", "CTRL_B", "ENTER_CR", "ENTER_LF"],
        )

    def test_arrow_and_page_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1bOA\x1b[5~\x1b[6~", 5),
            ["UP", "DOWN", "UP", "PAGE_UP", "PAGE_DOWN"],
        )

    def test_lone_escape_times_out_to_esc(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_plain_key_keeps_both(self) -> None:
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_utf8_character_is_one_key(self) -> None:
        self.assertEqual(self._keys("é".encode("utf-8"), 1), ["é"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(read_key(self.read_fd, timeout_ms=10), "")


if __name__ == "__main__":
    unittest.main()
