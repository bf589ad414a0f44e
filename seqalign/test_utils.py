"""Unit tests for utils.py."""
import os
import tempfile
import unicodedata
import unittest

from seqalign import utils
from seqalign.measures import Levenshtein
from seqalign.operations import Delete, IndexedOperation, Insert, Match


class TestReadPairs(unittest.TestCase):

    def test_read_pairs(self):

        lines = ["abby\ta b i\n", "\n", "abject\ta b ʒ ɛ k t\r\n"]
        self.assertListEqual(
            [("abby", "a b i"), ("abject", "a b ʒ ɛ k t")],
            list(utils.read_pairs(lines)))

    def test_empty_fields(self):

        self.assertListEqual([("", "abc"), ("abc", "")],
                             list(utils.read_pairs(["\tabc", "abc\t"])))
        self.assertListEqual(
            [("", ""), ("", "a")],
            list(utils.read_pairs(["\t\n", "\n", "\ta\r\n"])))

    def test_whitespace_line_is_malformed(self):

        with self.assertRaisesRegex(ValueError, "Line 1"):
            list(utils.read_pairs(["   \n"]))

    def test_malformed_line(self):

        with self.assertRaisesRegex(ValueError, "Line 2"):
            list(utils.read_pairs(["a\tb", "a\tb\tc"]))


class TestOpenNormalize(unittest.TestCase):

    def test_normalization_round_trip(self):

        composed = unicodedata.normalize("NFC", "café\tcafe\n")
        with tempfile.TemporaryDirectory() as tempdir:
            path = os.path.join(tempdir, "pairs.tsv")
            with utils.OpenNormalize(path, normalize=True, mode="w") as w:
                w.write(composed)
            with utils.OpenNormalize(path, normalize=True) as f:
                lines = list(f)
        self.assertEqual([unicodedata.normalize("NFD", composed)], lines)

    def test_bad_mode(self):

        with self.assertRaises(ValueError):
            utils.OpenNormalize("pairs.tsv", normalize=False, mode="rb")


class TestScripts(unittest.TestCase):

    def test_apply_script(self):

        script = Levenshtein().align("pineapple", "pen").edit_script()
        self.assertListEqual(
            list("pen"), utils.apply_script("pineapple", "pen", script))
        self.assertEqual(7, utils.script_cost(script))
        self.assertEqual(
            "match substitute match delete delete delete delete delete delete",
            utils.format_script(script))

    def test_apply_script_rejects_gaps(self):

        script = (IndexedOperation(Match(), 1, 0),)
        with self.assertRaises(ValueError):
            utils.apply_script("ab", "b", script)

        script = (IndexedOperation(Insert(1), 0, 0),)
        with self.assertRaises(ValueError):
            utils.apply_script("a", "b", script)

    def test_apply_empty_script(self):

        self.assertListEqual([], utils.apply_script("", "", ()))
        self.assertEqual(0, utils.script_cost(()))
        self.assertEqual(
            "delete", utils.format_script((IndexedOperation(Delete(1), 0, 0),)))


class TestTimer(unittest.TestCase):

    def test_timer(self):

        with utils.Timer() as timer:
            pass
        self.assertGreaterEqual(timer.elapsed, 0.)


if __name__ == "__main__":
    unittest.main()
