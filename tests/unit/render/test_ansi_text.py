from __future__ import annotations

import unittest

from diffexplore.ansi import clip_ansi_line, display_width, fit_ansi_line, pad_left, sanitize_terminal_text


class AnsiTextTests(unittest.TestCase):
    def test_clip_preserves_escape_sequences(self) -> None:
        self.assertEqual(clip_ansi_line("\033[31mabcdef\033[0m", 3), "\033[31mabc\033[0m")

    def test_wide_characters_count_double(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(clip_ansi_line("日本語", 5), "日本")
        self.assertEqual(fit_ansi_line("日本語", 5), "日本 ")

    def test_fit_pads_to_width(self) -> None:
        self.assertEqual(fit_ansi_line("ab", 4), "ab  ")
        self.assertEqual(fit_ansi_line("abc", 0), "")

    def test_pad_left_right_aligns(self) -> None:
        self.assertEqual(pad_left("5h", 3), " 5h")
        self.assertEqual(pad_left("123", 2), "12")

    def test_sanitize_expands_tabs_and_escapes_controls(self) -> None:
        self.assertEqual(sanitize_terminal_text("a\tb"), "a    b")
        self.assertEqual(sanitize_terminal_text("x\x07y\r"), "x\\x07y\\x0d")
        self.assertEqual(sanitize_terminal_text("plain"), "plain")


if __name__ == "__main__":
    unittest.main()
