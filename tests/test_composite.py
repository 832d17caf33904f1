#! /usr/bin/env python

import doctest
import itertools
import unittest

import numpy as np

from quantumutilities import composite
from quantumutilities.composite import (
    partial_trace,
    partial_trace_keep,
    partial_transpose,
    subsystem_indices,
    tensor,
)
from quantumutilities.shared import ArgumentError, DimensionMismatch

RNG = np.random.default_rng(42)


def load_tests(loader, tests, ignore):
    tests.addTests(doctest.DocTestSuite(composite))
    return tests


def random_density(dim):
    A = RNG.uniform(size=(dim, dim)) + 1j * RNG.uniform(size=(dim, dim))
    rho = A @ A.conj().T
    return rho / np.trace(rho)


def random_state(dim):
    v = RNG.uniform(size=dim) + 1j * RNG.uniform(size=dim)
    return v / np.linalg.norm(v)


class TensorTestCase(unittest.TestCase):
    """Kronecker products of operators and states."""

    def test_two_operators(self):
        A = np.array([[1, 2], [3, 4]])
        B = np.array([[5, 6], [7, 8]])
        expected = np.array(
            [
                [5, 6, 10, 12],
                [7, 8, 14, 16],
                [15, 18, 20, 24],
                [21, 24, 28, 32],
            ]
        )
        np.testing.assert_array_equal(tensor(A, B), expected)

    def test_associative(self):
        A, B, C = random_density(2), random_density(3), random_density(2)
        ABC = tensor(A, B, C)
        np.testing.assert_allclose(ABC, tensor(tensor(A, B), C))
        np.testing.assert_allclose(ABC, tensor(A, tensor(B, C)))
        self.assertEqual(ABC.shape, (12, 12))

    def test_vectors(self):
        v, w = random_state(3), random_state(4)
        vw = tensor(v, w)
        self.assertEqual(vw.shape, (12,))
        np.testing.assert_allclose(vw.reshape(3, 4), np.outer(v, w))

    def test_single_operand(self):
        A = random_density(3)
        np.testing.assert_array_equal(tensor(A), A)

    def test_no_operands(self):
        with self.assertRaises(ArgumentError):
            tensor()


class SubsystemIndicesTestCase(unittest.TestCase):
    """Composite index decomposition."""

    def test_matches_tensor_of_basis_vectors(self):
        dims = (2, 3, 4)
        indices = subsystem_indices(dims)
        self.assertEqual(indices.shape, (24, 3))
        for k, idx in enumerate(indices):
            kets = [np.eye(d)[i] for d, i in zip(dims, idx)]
            expected = np.zeros(24)
            expected[k] = 1
            np.testing.assert_array_equal(tensor(*kets), expected)


class PartialTraceTestCase(unittest.TestCase):
    """Partial traces of operators and pure states."""

    def setUp(self):
        self.dims = (2, 3, 5, 4)
        self.factors = [random_density(d) for d in self.dims]
        self.ABCD = tensor(*self.factors)

    def test_pure_state(self):
        v, w = random_state(3), random_state(4)
        vw = tensor(v, w)
        np.testing.assert_allclose(partial_trace(vw, 2, (3, 4)), np.outer(v, v.conj()))
        np.testing.assert_allclose(partial_trace(vw, 1, (3, 4)), np.outer(w, w.conj()))

    def test_pure_state_equals_projector(self):
        psi = random_state(12)
        rho = np.outer(psi, psi.conj())
        np.testing.assert_allclose(
            partial_trace(psi, [1, 3], (2, 3, 2)),
            partial_trace(rho, [1, 3], (2, 3, 2)),
        )

    def test_single_factor(self):
        for keep in range(4):
            trace = [i + 1 for i in range(4) if i != keep]
            np.testing.assert_allclose(
                partial_trace(self.ABCD, trace, self.dims), self.factors[keep]
            )

    def test_every_subset(self):
        for r in range(1, 4):
            for trace in itertools.combinations(range(1, 5), r):
                kept = [self.factors[i - 1] for i in range(1, 5) if i not in trace]
                result = partial_trace(self.ABCD, trace, self.dims)
                np.testing.assert_allclose(result, tensor(*kept))

    def test_single_index(self):
        A, B, C, D = self.factors
        np.testing.assert_allclose(partial_trace(self.ABCD, 4, self.dims), tensor(A, B, C))
        np.testing.assert_allclose(partial_trace(self.ABCD, 1, self.dims), tensor(B, C, D))

    def test_order_independence(self):
        for trace in [(3, 4), (2, 4), (1, 2, 4)]:
            for perm in itertools.permutations(trace):
                np.testing.assert_allclose(
                    partial_trace(self.ABCD, perm, self.dims),
                    partial_trace(self.ABCD, trace, self.dims),
                )

    def test_non_product_against_loops(self):
        dims = (2, 3)
        rho = random_density(6)
        expected = np.zeros((2, 2), dtype=complex)
        for a in range(2):
            for b in range(2):
                expected[a, b] = sum(rho[3 * a + j, 3 * b + j] for j in range(3))
        np.testing.assert_allclose(partial_trace(rho, 2, dims), expected)

    def test_empty_trace(self):
        rho = random_density(6)
        result = partial_trace(rho, [], (2, 3))
        np.testing.assert_array_equal(result, rho)
        self.assertIsNot(result, rho)

    def test_trace_everything(self):
        rho = random_density(6) * 3
        result = partial_trace(rho, (1, 2), (2, 3))
        self.assertEqual(result.shape, (1, 1))
        self.assertAlmostEqual(result[0, 0], np.trace(rho))

    def test_integer_dtype(self):
        A = np.arange(1, 17).reshape(4, 4)
        result = partial_trace(A, 1, (2, 2))
        np.testing.assert_array_equal(result, [[12, 14], [20, 22]])
        self.assertTrue(np.issubdtype(result.dtype, np.integer))

    def test_keep(self):
        for keep in [1, (2, 3), [1, 4], (1, 2, 3, 4)]:
            kept = [keep] if isinstance(keep, int) else list(keep)
            trace = [i for i in range(1, 5) if i not in kept]
            np.testing.assert_allclose(
                partial_trace_keep(self.ABCD, keep, self.dims),
                partial_trace(self.ABCD, trace, self.dims),
            )

    def test_index_out_of_range(self):
        rho = random_density(4)
        with self.assertRaises(ArgumentError):
            partial_trace(rho, {5}, (2, 2))
        with self.assertRaises(ArgumentError):
            partial_trace(rho, 0, (2, 2))
        with self.assertRaises(ArgumentError):
            partial_trace_keep(rho, 3, (2, 2))

    def test_non_integer_index(self):
        rho = random_density(4)
        with self.assertRaises(ArgumentError):
            partial_trace(rho, 1.9, (2, 2))
        with self.assertRaises(ArgumentError):
            partial_trace(rho, [1.9], (2, 2))
        with self.assertRaises(ArgumentError):
            partial_trace_keep(rho, [1.5], (2, 2))
        with self.assertRaises(ArgumentError):
            partial_transpose(rho, 0.5, (2, 2))

    def test_integral_index_types(self):
        rho = random_density(4)
        expected = partial_trace(rho, 2, (2, 2))
        for index in [2.0, np.int64(2), [np.int32(2)], {2}]:
            np.testing.assert_allclose(partial_trace(rho, index, (2, 2)), expected)

    def test_non_integer_dims(self):
        with self.assertRaises(ArgumentError):
            partial_trace(random_density(5), 1, (2.5, 2))
        with self.assertRaises(ArgumentError):
            subsystem_indices((2, 1.5))

    def test_repeated_index(self):
        with self.assertRaises(ArgumentError):
            partial_trace(random_density(4), (1, 1), (2, 2))

    def test_dims_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            partial_trace(random_density(4), 1, (2, 3))

    def test_not_square(self):
        with self.assertRaises(DimensionMismatch):
            partial_trace(np.ones((4, 2)), 1, (2, 2))
        # DimensionMismatch is also an ArgumentError
        with self.assertRaises(ArgumentError):
            partial_trace(np.ones((4, 2)), 1, (2, 2))

    def test_non_positive_dims(self):
        with self.assertRaises(ArgumentError):
            partial_trace(np.ones((1, 1)), 1, (1, 0))


class PartialTransposeTestCase(unittest.TestCase):
    """Partial transposes."""

    def test_product_state(self):
        A, B = random_density(2), random_density(3)
        AB = tensor(A, B)
        np.testing.assert_allclose(partial_transpose(AB, 2, (2, 3)), tensor(A, B.T))
        np.testing.assert_allclose(partial_transpose(AB, 1, (2, 3)), tensor(A.T, B))
        np.testing.assert_allclose(partial_transpose(AB, (1, 2), (2, 3)), AB.T)

    def test_involution(self):
        rho = random_density(12)
        twice = partial_transpose(partial_transpose(rho, 2, (2, 3, 2)), 2, (2, 3, 2))
        np.testing.assert_allclose(twice, rho)

    def test_out_of_range(self):
        with self.assertRaises(ArgumentError):
            partial_transpose(random_density(4), 3, (2, 2))


if __name__ == "__main__":
    unittest.main()
