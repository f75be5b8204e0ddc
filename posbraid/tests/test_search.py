"""
Tests for the posbraid search driver and command line.

These tests verify:
1. Exact output for genus 0 and 1
2. The properties every accepted word must have, for genus 2 and 3
3. Determinism of the enumeration
4. Command-line output, debug narration and the usage error path
"""

import io
import unittest

from posbraid.braid import b1, components
from posbraid.cli import USAGE_MESSAGE, main
from posbraid.config import SearchConfig
from posbraid.search import BraidSearch, SearchResult, Transition, list_braids


def rotations(word):
    return [word[i:] + word[:i] for i in range(1, len(word))]


class TestSmallGenera(unittest.TestCase):
    """Tests with fully known enumerations."""

    def test_genus_zero_is_empty(self):
        self.assertEqual(list_braids(0), [])

    def test_genus_one_is_trefoil(self):
        results = list_braids(1)
        self.assertEqual(len(results), 1)
        self.assertEqual(results[0].letters, "aaa")
        self.assertEqual(results[0].dt_code, (4, 6, 2))
        self.assertEqual(results[0].format(), "aaa\n: 3 1 4 6 2\n")

    def test_genus_one_transitions(self):
        """Test the driver takes the expected step sequence."""
        search = BraidSearch(SearchConfig(genus=1))
        steps = []
        while not search.finished:
            steps.append(search.step())
        T = Transition
        self.assertEqual(steps, [
            T.DEEPEN, T.EMIT, T.ADVANCE, T.BACKTRACK,
            T.DEEPEN, T.DEEPEN, T.ADVANCE, T.ADVANCE, T.ADVANCE, T.BACKTRACK,
            T.ADVANCE, T.ADVANCE, T.BACKTRACK, T.BACKTRACK,
        ])
        self.assertEqual(search.stats.steps, 14)
        self.assertEqual(search.stats.emitted, 1)
        self.assertEqual(search.stats.rejections["PRIME"], 5)

    def test_genus_two_is_cinquefoil(self):
        """Test the full genus 2 enumeration is the single word aaaaa."""
        results = list_braids(2)
        self.assertEqual([r.format() for r in results], ["aaaaa\n: 5 1 6 8 10 2 4\n"])

    def test_genus_three_lists_rotation_once(self):
        """Test aabaabba is reported through its smaller rotation aaabaabb."""
        search = BraidSearch(SearchConfig(genus=3))
        letters = [r.letters for r in search.run()]
        self.assertNotIn("aabaabba", letters)
        self.assertEqual(letters.count("aaabaabb"), 1)
        self.assertEqual(search.stats.duplicates, 1)
        self.assertEqual(len(letters), 21)


class TestSearchProperties(unittest.TestCase):
    """Tests for properties of every accepted word."""

    @classmethod
    def setUpClass(cls):
        cls.results = {genus: list_braids(genus) for genus in (2, 3)}

    def test_indices_are_sequential(self):
        for results in self.results.values():
            self.assertEqual([r.index for r in results], list(range(1, len(results) + 1)))

    def test_words_are_knots_of_the_right_genus(self):
        for genus, results in self.results.items():
            for r in results:
                self.assertEqual(components(r.word), 1, r.letters)
                self.assertEqual(b1(r.word), 2 * genus, r.letters)

    def test_words_are_rotation_minimal(self):
        for results in self.results.values():
            for r in results:
                for rotated in rotations(r.word):
                    self.assertLessEqual(r.word, rotated, r.letters)

    def test_generators_occur_twice(self):
        for results in self.results.values():
            for r in results:
                for letter in set(r.word):
                    self.assertGreaterEqual(r.word.count(letter), 2, r.letters)

    def test_dt_code_shape(self):
        for results in self.results.values():
            for r in results:
                n = len(r.word)
                self.assertEqual(len(r.dt_code), n)
                self.assertNotIn(0, r.dt_code)
                self.assertEqual(sorted(abs(e) for e in r.dt_code),
                                 list(range(2, 2 * n + 1, 2)))

    def test_words_are_distinct(self):
        for results in self.results.values():
            words = [r.word for r in results]
            self.assertEqual(len(words), len(set(words)))

    def test_genus_three_contains_torus_knot(self):
        letters = [r.letters for r in self.results[3]]
        self.assertEqual(letters[0], "aaaaaaa")

    def test_deterministic(self):
        again = list_braids(2)
        self.assertEqual(again, self.results[2])


class TestCommandLine(unittest.TestCase):
    """Tests for the posbraid entry point."""

    def run_main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        code = main(argv, stdout=stdout, stderr=stderr)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_genus_one(self):
        code, out, err = self.run_main(["1"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "aaa\n: 3 1 4 6 2\n")
        self.assertEqual(err, "Working on genus 1.\n")

    def test_output_matches_results(self):
        _, out, _ = self.run_main(["2"])
        expected = "".join(r.format() for r in list_braids(2))
        self.assertEqual(out, expected)
        self.assertEqual(out, self.run_main(["2"])[1])

    def test_missing_genus(self):
        code, out, err = self.run_main([])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith(USAGE_MESSAGE))

    def test_malformed_genus(self):
        for argv in (["x"], ["-1"], ["1.5"]):
            code, out, err = self.run_main(argv)
            self.assertEqual(code, 0)
            self.assertEqual(out, "")
            self.assertTrue(err.startswith(USAGE_MESSAGE), argv)

    def test_debug_narration(self):
        _, out, err = self.run_main(["1", "--debug"])
        self.assertEqual(out, "aaa\n: 3 1 4 6 2\n")
        self.assertIn('Working on "aa". Too short, appending.\n', err)
        self.assertIn('Working on "aaa". Is good!\n', err)
        self.assertIn('Working on "aac". Last letter too high, popping back.\n', err)
        self.assertIn("Not completable (13: PRIME), increasing.", err)
        self.assertIn("Search finished after 14 steps", err)


class TestSearchResult(unittest.TestCase):

    def test_format(self):
        result = SearchResult(index=7, word=(1, 2, 1, 2), dt_code=(4, -6, 8, 2))
        self.assertEqual(result.letters, "abab")
        self.assertEqual(result.crossings, 4)
        self.assertEqual(result.format(), "abab\n: 4 7 4 -6 8 2\n")

    def test_negative_genus(self):
        with self.assertRaises(ValueError):
            SearchConfig(genus=-1)


if __name__ == '__main__':
    unittest.main()
