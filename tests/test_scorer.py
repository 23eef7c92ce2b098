import math
import unittest

from docsearch.indexer.corpus_index import CorpusIndex
from docsearch.search.scorer import idf, score, tf


class TestTermFrequency(unittest.TestCase):
    def test_tf_is_count_over_total(self):
        table = {"CAT": 1, "DOG": 2}
        self.assertAlmostEqual(tf("CAT", table), 1 / 3)
        self.assertAlmostEqual(tf("DOG", table), 2 / 3)

    def test_absent_term(self):
        self.assertEqual(tf("BIRD", {"CAT": 1}), 0)

    def test_empty_table(self):
        """An empty document never divides by zero."""
        self.assertEqual(tf("CAT", {}), 0)

    def test_precomputed_total(self):
        table = {"CAT": 1, "DOG": 3}
        self.assertEqual(tf("DOG", table, total=4), tf("DOG", table))

    def test_tf_within_unit_interval(self):
        table = {"A": 5, "B": 1, "C": 9}
        for term in ["A", "B", "C", "D"]:
            self.assertGreaterEqual(tf(term, table), 0)
            self.assertLessEqual(tf(term, table), 1)


class TestInverseDocumentFrequency(unittest.TestCase):
    def setUp(self):
        """Set up the two-document corpus."""
        self.index = CorpusIndex({
            "a": {"CAT": 1, "DOG": 2},
            "b": {"DOG": 3},
        })

    def test_term_in_every_document(self):
        self.assertEqual(idf("DOG", self.index), 0)

    def test_rare_term(self):
        self.assertAlmostEqual(idf("CAT", self.index), math.log10(2))

    def test_absent_term_falls_back_to_one_document(self):
        self.assertAlmostEqual(idf("BIRD", self.index), math.log10(2))

    def test_empty_index(self):
        self.assertEqual(idf("CAT", CorpusIndex()), 0)

    def test_idf_grows_as_fewer_documents_contain_term(self):
        index = CorpusIndex({
            "d1": {"W": 1, "X": 1, "Y": 1, "Z": 1},
            "d2": {"W": 1, "X": 1, "Y": 1},
            "d3": {"W": 1, "X": 1},
            "d4": {"W": 1},
        })
        values = [idf(term, index) for term in ["W", "X", "Y", "Z"]]

        self.assertEqual(values[0], 0)
        for lower, higher in zip(values, values[1:]):
            self.assertLess(lower, higher)


class TestScore(unittest.TestCase):
    def test_score_is_tf_times_idf(self):
        index = CorpusIndex({
            "a": {"CAT": 1, "DOG": 2},
            "b": {"DOG": 3},
        })
        self.assertAlmostEqual(score("CAT", index["a"], index), (1 / 3) * math.log10(2))
        self.assertEqual(score("CAT", index["b"], index), 0)
        self.assertEqual(score("DOG", index["a"], index), 0)


if __name__ == "__main__":
    unittest.main()
