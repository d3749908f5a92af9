#!/usr/bin/env python3

import math
import unittest

from icpermute import Permutator

class TestIcPermute(unittest.TestCase):
    def _collect(self, permutator: Permutator) -> list[tuple[int, ...]]:
        permutations = []
        while (permutation := permutator.next()) is not None:
            permutations.append(tuple(permutation))
        return permutations

    def test_counts(self):
        for n in range(6):
            values = list(range(10, 10 + n))
            permutations = self._collect(Permutator(values))
            self.assertEqual(len(permutations), math.factorial(n))
            self.assertEqual(len(set(permutations)), math.factorial(n))
            for permutation in permutations:
                self.assertEqual(sorted(permutation), values)

    def test_phase_settings(self):
        permutations = set(Permutator(range(5, 10)))
        self.assertEqual(len(permutations), 120)
        self.assertIn((9, 8, 7, 6, 5), permutations)
        self.assertIn((5, 6, 7, 8, 9), permutations)

    def test_exhaustion_is_sticky(self):
        permutator = Permutator([1, 2])
        self.assertEqual(len(self._collect(permutator)), 2)
        self.assertIsNone(permutator.next())
        self.assertIsNone(permutator.next())

    def test_buffer_is_reused(self):
        permutator = Permutator([1, 2, 3])
        first = permutator.next()
        second = permutator.next()
        self.assertIs(first, second)

    def test_reset(self):
        permutator = Permutator([3, 1, 2])
        before = self._collect(permutator)
        permutator.reset()
        self.assertEqual(self._collect(permutator), before)

    def test_input_is_not_mutated(self):
        values = [1, 2, 3, 4]
        list(Permutator(values))
        self.assertEqual(values, [1, 2, 3, 4])

if __name__ == '__main__':
    unittest.main()
