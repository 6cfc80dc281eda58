# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Unit tests for clause, flat buffer and XOR clause ingestion.
"""
import unittest
from array import array

import numpy as np

from pyxsat.exceptions import InvalidLiteral, InvalidXorLiteral, MalformedBuffer, NonIntegerLiteral
from pyxsat.clauses import is_flat_buffer, iter_buffer_clauses, parse_clause
from pyxsat.literals import Lit
from pyxsat.solver import Solver


class TestParseClause(unittest.TestCase):
    def test_parse(self):
        parsed = parse_clause([1, -3, 2])
        self.assertEqual(parsed.lits, [Lit(0, False), Lit(2, True), Lit(1, False)])
        self.assertEqual(parsed.max_var, 2)

    def test_parse_generator(self):
        parsed = parse_clause(x for x in (4, -1))
        self.assertEqual(parsed.max_var, 3)

    def test_not_iterable(self):
        with self.assertRaises(TypeError):
            parse_clause(1)

    def test_buffer_detection(self):
        self.assertTrue(is_flat_buffer(array('i', [1, 0])))
        self.assertTrue(is_flat_buffer(np.array([1, 0])))
        self.assertFalse(is_flat_buffer([[1], [2]]))
        self.assertFalse(is_flat_buffer((1, 0)))

    def test_buffer_split(self):
        clauses = [p.lits for p in iter_buffer_clauses(array('l', [1, 2, 0, 0, -1, 0]))]
        self.assertEqual(clauses, [[Lit(0, False), Lit(1, False)], [Lit(0, True)]])


class TestAddClause(unittest.TestCase):
    def setUp(self):
        self.solver = Solver()

    def test_grows_variables(self):
        self.solver.add_clause([1, -5])
        self.assertEqual(self.solver.nb_vars(), 5)
        self.solver.add_clause([2])
        self.assertEqual(self.solver.nb_vars(), 5)

    def test_zero_literal(self):
        with self.assertRaises(InvalidLiteral):
            self.solver.add_clause([1, 0])
        self.assertEqual(self.solver.nb_vars(), 0)
        self.assertEqual(self.solver.nb_clauses(), 0)

    def test_too_large(self):
        with self.assertRaises(ValueError):
            self.solver.add_clause([1, 2 ** 31])
        self.assertEqual(self.solver.nb_vars(), 0)

    def test_wrong_types(self):
        with self.assertRaises(TypeError):
            self.solver.add_clause(1)
        with self.assertRaises(NonIntegerLiteral):
            self.solver.add_clause([1, "a"])
        with self.assertRaises(TypeError):
            self.solver.add_clause([1.5])
        self.assertEqual(self.solver.nb_vars(), 0)

    def test_accepts_iterables(self):
        self.solver.add_clause((1, 2))
        self.solver.add_clause(np.array([-1, 3]))
        self.solver.add_clause(x for x in [-2, -3])
        self.assertEqual(self.solver.nb_vars(), 3)
        self.assertEqual(self.solver.nb_clauses(), 3)

    def test_empty_clause_is_unsat(self):
        self.solver.add_clause([1])
        self.solver.add_clause([])
        self.assertEqual(self.solver.solve(), (False, None))


class TestAddClauses(unittest.TestCase):
    def setUp(self):
        self.solver = Solver()

    def test_list_form(self):
        self.solver.add_clauses([[1], [-2], [3], [-1, 2, 3]])
        self.assertEqual(self.solver.solve(), (True, (None, True, False, True)))

    def test_max_var(self):
        self.solver.add_clauses([], max_var=10)
        self.assertEqual(self.solver.nb_vars(), 10)
        self.solver.add_clauses([[1, 2]], max_var=3)
        self.assertEqual(self.solver.nb_vars(), 10)

    def test_flat_buffer_equivalent_to_lists(self):
        other = Solver()
        self.solver.add_clauses(array('i', [1, 2, 0, -1, 0]))
        other.add_clauses([[1, 2], [-1]])
        self.assertEqual(self.solver.nb_vars(), other.nb_vars())
        self.assertEqual(self.solver.nb_clauses(), other.nb_clauses())
        self.assertEqual(self.solver.solve(), other.solve())
        self.assertEqual(self.solver.solve(), (True, (None, False, True)))

    def test_flat_buffer_typecodes(self):
        for typecode in ('i', 'l', 'q'):
            with self.subTest(typecode=typecode):
                s = Solver()
                s.add_clauses(array(typecode, [1, 0, -2, 0]))
                self.assertEqual(s.solve(), (True, (None, True, False)))

    def test_numpy_buffers(self):
        for dtype in (np.int32, np.int64, np.intc, np.longlong):
            with self.subTest(dtype=dtype):
                s = Solver()
                s.add_clauses(np.array([-1, 0, 1, 2, 0], dtype=dtype))
                self.assertEqual(s.solve(), (True, (None, False, True)))

    def test_unterminated_buffer(self):
        with self.assertRaises(MalformedBuffer):
            self.solver.add_clauses(array('i', [1, 2, 0, -1]))
        self.assertEqual(self.solver.nb_clauses(), 0)
        self.assertEqual(self.solver.nb_vars(), 0)
        self.assertEqual(self.solver.solve(), (True, (None,)))

    def test_unsupported_buffers(self):
        bad = [
            array('h', [1, 0]),
            array('I', [1, 0]),
            np.array([1.0, 0.0]),
            np.array([1, 0], dtype=np.int16),
            np.array([[1, 0], [2, 0]]),
        ]
        for buffer in bad:
            with self.subTest(buffer=buffer):
                with self.assertRaises(MalformedBuffer):
                    self.solver.add_clauses(buffer)
        self.assertEqual(self.solver.nb_vars(), 0)

    def test_empty_buffer_is_noop(self):
        for buffer in (array('i'), array('q'), np.array([], dtype=np.int64)):
            with self.subTest(buffer=buffer):
                self.solver.add_clauses(buffer)
                self.assertEqual(self.solver.nb_vars(), 0)
                self.assertEqual(self.solver.nb_clauses(), 0)
        self.assertEqual(self.solver.solve(), (True, (None,)))

    def test_empty_buffer_and_empty_clauses(self):
        self.solver.add_clauses(array('i'))
        self.assertEqual(self.solver.nb_vars(), 0)
        self.solver.add_clauses(array('l', [0, 1, 0, 0, 2, 0]))
        self.assertEqual(self.solver.nb_vars(), 2)
        # consecutive zeros are skipped, not read as empty clauses
        self.assertEqual(self.solver.solve(), (True, (None, True, True)))

    def test_list_batch_not_atomic(self):
        with self.assertRaises(InvalidLiteral):
            self.solver.add_clauses([[1, 2], [3], [4, 0], [5]])
        self.assertEqual(self.solver.nb_vars(), 3)
        sat, solution = self.solver.solve()
        self.assertTrue(sat)
        self.assertTrue(solution[3])

    def test_buffer_batch_not_atomic(self):
        with self.assertRaises(InvalidLiteral):
            self.solver.add_clauses(array('q', [-1, 0, 2 ** 40, 0, 3, 0]))
        self.assertEqual(self.solver.nb_vars(), 1)
        self.assertEqual(self.solver.solve(), (True, (None, False)))

    def test_bad_iterables(self):
        with self.assertRaises(TypeError):
            self.solver.add_clauses(1)
        with self.assertRaises(TypeError):
            self.solver.add_clauses([1, 2])


class TestAddXorClause(unittest.TestCase):
    def setUp(self):
        self.solver = Solver()

    def test_xor_rhs_true(self):
        self.solver.add_xor_clause([1, 2], True)
        self.solver.add_clause([1])
        self.assertEqual(self.solver.solve(), (True, (None, True, False)))

    def test_xor_rhs_false(self):
        self.solver.add_xor_clause([1, 2, 3], False)
        self.solver.add_clause([1])
        self.solver.add_clause([-2])
        self.assertEqual(self.solver.solve(), (True, (None, True, False, True)))

    def test_negated_literal_rejected(self):
        with self.assertRaises(InvalidXorLiteral):
            self.solver.add_xor_clause([1, -2], True)
        self.assertEqual(self.solver.nb_vars(), 0)
        self.assertEqual(self.solver.nb_clauses(), 0)

    def test_rhs_must_be_bool(self):
        with self.assertRaises(TypeError):
            self.solver.add_xor_clause([1, 2], 1)
        self.assertEqual(self.solver.nb_vars(), 0)

    def test_repeated_variable_cancels(self):
        self.solver.add_xor_clause([1, 1], True)
        self.assertEqual(self.solver.nb_vars(), 1)
        self.assertFalse(self.solver.is_satisfiable())

    def test_empty_xor(self):
        self.solver.add_xor_clause([], False)
        self.assertTrue(self.solver.is_satisfiable())
        self.solver.add_xor_clause([], True)
        self.assertFalse(self.solver.is_satisfiable())

    def test_long_xor_hides_auxiliary_variables(self):
        self.solver.add_xor_clause(list(range(1, 11)), True)
        self.assertEqual(self.solver.nb_vars(), 10)
        sat, solution = self.solver.solve()
        self.assertTrue(sat)
        self.assertEqual(len(solution), 11)
        self.assertEqual(sum(solution[1:]) % 2, 1)


if __name__ == '__main__':
    unittest.main()
