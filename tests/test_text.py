import unittest

from cursorhelp.ui.text import ELLIPSIS, ellipsize


def _max_chars(limit: int):
    return lambda line: len(line) <= limit


class TestEllipsize(unittest.TestCase):
    def test_short_text_is_untouched(self) -> None:
        self.assertEqual(ellipsize("Alice", 1, _max_chars(10)), ["Alice"])

    def test_wraps_words_within_line_budget(self) -> None:
        lines = ellipsize("hello big world", 2, _max_chars(10))
        self.assertEqual(lines, ["hello big", "world"])

    def test_single_line_overflow_ends_with_ellipsis(self) -> None:
        lines = ellipsize("Jean-Baptiste Poquelin", 1, _max_chars(10))
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].endswith(ELLIPSIS))
        self.assertLessEqual(len(lines[0]), 10)

    def test_bio_is_limited_to_two_lines(self) -> None:
        bio = "Passionné de code et d'open source. Toujours prêt à apprendre."
        lines = ellipsize(bio, 2, _max_chars(20))
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0], "Passionné de code et")
        self.assertTrue(lines[1].endswith(ELLIPSIS))
        self.assertLessEqual(len(lines[1]), 20)

    def test_long_word_is_split_by_character(self) -> None:
        self.assertEqual(ellipsize("abcdefgh", 3, _max_chars(3)), ["abc", "def", "gh"])

    def test_empty_text(self) -> None:
        self.assertEqual(ellipsize("", 2, _max_chars(5)), [])

    def test_rejects_zero_lines(self) -> None:
        with self.assertRaises(ValueError):
            ellipsize("x", 0, _max_chars(5))


if __name__ == "__main__":
    unittest.main()
