import unittest

import numpy as np

import cachematrix
from cachematrix import CacheMatrix


class TestCacheMatrix(unittest.TestCase):
    def test_construct_starts_without_inverse(self):
        data = np.array([[1.0, 2.0], [2.0, 1.0]])
        x = CacheMatrix(data)

        self.assertIs(x.get(), data)
        self.assertIsNone(x.get_inverse())
        self.assertFalse(x.has_inverse)

    def test_default_matrix_is_nan_placeholder(self):
        x = CacheMatrix()
        data = x.get()

        self.assertEqual(data.shape, (1, 1))
        self.assertTrue(np.isnan(data[0, 0]))
        self.assertIsNone(x.get_inverse())

    def test_construct_accepts_non_square_and_empty(self):
        # Validation is deferred to the first inversion.
        CacheMatrix([[1, 2, 3], [4, 5, 6]])
        CacheMatrix([])
        CacheMatrix([[1, 2], [3]])

    def test_set_replaces_matrix_and_drops_inverse(self):
        x = CacheMatrix([[2.0]])
        x.set_inverse(np.array([[0.5]]))
        self.assertTrue(x.has_inverse)

        x.set([[4.0]])
        self.assertEqual(x.get(), [[4.0]])
        self.assertIsNone(x.get_inverse())
        self.assertFalse(x.has_inverse)

    def test_set_drops_inverse_even_for_same_value(self):
        data = [[2.0]]
        x = CacheMatrix(data)
        x.set_inverse([[0.5]])

        x.set(data)
        self.assertIsNone(x.get_inverse())

    def test_set_inverse_is_stored_unchecked(self):
        x = CacheMatrix([[1.0, 2.0], [2.0, 1.0]])
        bogus = object()
        x.set_inverse(bogus)

        self.assertIs(x.get_inverse(), bogus)
        # The raw setter is trusted; cache_solve hands the stored value back.
        with cachematrix.suppress_cache_notices():
            self.assertIs(cachematrix.cache_solve(x), bogus)

    def test_repr_reports_shape_and_cache_state(self):
        x = CacheMatrix(np.eye(3))
        self.assertEqual(repr(x), "CacheMatrix(shape=3x3, cached=False)")

        x.set_inverse(np.eye(3))
        self.assertEqual(repr(x), "CacheMatrix(shape=3x3, cached=True)")

    def test_repr_tolerates_ragged_input(self):
        x = CacheMatrix([[1, 2], [3]])
        self.assertIn("cached=False", repr(x))


if __name__ == "__main__":
    unittest.main()
