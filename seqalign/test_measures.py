"""Unit tests for measures.py."""
import collections
import unittest

from seqalign import measures
from seqalign.operations import Delete, Insert, Match, Substitute, Transpose


DistanceCase = collections.namedtuple(
    "DistanceCase",
    "source target levenshtein_dist levenshtein_damerau_dist lcs_dist")

TESTCASES = [
    DistanceCase("pineapple", "", 9, 9, 9),
    DistanceCase("", "pineapple", 9, 9, 9),
    DistanceCase("pineapple", "pen", 7, 7, 8),
    DistanceCase("pen", "pineapple", 7, 7, 8),
    DistanceCase("pineapple", "applet", 5, 5, 5),
    DistanceCase("applet", "pen", 4, 4, 5),
    DistanceCase("tpyo", "typo", 2, 1, 2),
]


class TestMeasures(unittest.TestCase):

    def run_testcases(self, measure, distance):
        for testcase in TESTCASES:
            alignment = measure.align(testcase.source, testcase.target)
            self.assertEqual(distance(testcase), alignment.distance(),
                             testcase)

    def test_levenshtein(self):

        self.run_testcases(measures.Levenshtein(1, 1, 1),
                           lambda testcase: testcase.levenshtein_dist)

    def test_levenshtein_damerau(self):

        self.run_testcases(measures.LevenshteinDamerau(1, 1, 1, 1),
                           lambda testcase: testcase.levenshtein_damerau_dist)

    def test_lcs(self):

        self.run_testcases(measures.LCS(1, 1),
                           lambda testcase: testcase.lcs_dist)

    def test_lcs_matches(self):

        alignment = measures.LCS().align("pineapple", "applet")
        matched = "".join("pineapple"[i] for i, _ in alignment.aligned_indices())
        self.assertEqual("apple", matched)

    def test_operation_order(self):

        self.assertTupleEqual(
            (Insert(2), Delete(3), Match(), Substitute(4)),
            measures.Levenshtein(2, 3, 4).operations())
        self.assertTupleEqual(
            (Insert(1), Delete(1), Match(), Substitute(1), Transpose(5)),
            measures.LevenshteinDamerau(transpose_cost=5).operations())
        self.assertTupleEqual(
            (Insert(1), Delete(1), Match()), measures.LCS().operations())

    def test_from_name(self):

        measure = measures.from_name("lcs", insert_cost=2, substitute_cost=3)
        self.assertIsInstance(measure, measures.LCS)
        self.assertTupleEqual((Insert(2), Delete(1), Match()),
                              measure.operations())

        measure = measures.from_name("levenshtein-damerau", transpose_cost=2)
        self.assertIn(Transpose(2), measure.operations())

        with self.assertRaises(ValueError) as context:
            measures.from_name("hamming")
        self.assertIsNone(context.exception.__cause__)
        self.assertTrue(context.exception.__suppress_context__)

    def test_invalid_costs(self):

        with self.assertRaises(ValueError):
            measures.Levenshtein(insert_cost=-1)
        with self.assertRaises(ValueError):
            measures.Levenshtein(insert_cost=2 ** 63)
        with self.assertRaises(ValueError):
            measures.LCS(delete_cost=2 ** 64)

    def test_repr(self):

        self.assertEqual(
            "LCS(Insert(weight=1), Delete(weight=1), Match())",
            repr(measures.LCS()))


if __name__ == "__main__":
    unittest.main()
