# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Unit tests for multi-solution enumeration with blocking clauses.
"""
import itertools
import unittest

from pyxsat.enumerator import blocking_clause
from pyxsat.exceptions import IndeterminateResult
from pyxsat.literals import Lit
from pyxsat.minisat22 import Lbool
from pyxsat.solver import Solver


def pigeonhole(pigeons, holes):
    def x(p, h):
        return p * holes + h + 1

    clauses = [[x(p, h) for h in range(holes)] for p in range(pigeons)]
    for h in range(holes):
        for p1, p2 in itertools.combinations(range(pigeons), 2):
            clauses.append([-x(p1, h), -x(p2, h)])
    return clauses


class TestBlockingClause(unittest.TestCase):
    def test_literals_follow_model(self):
        model = [Lbool.TRUE, Lbool.FALSE, Lbool.TRUE]
        selected = [Lit(0, False), Lit(1, False)]
        self.assertEqual(blocking_clause(model, selected), [Lit(0, True), Lit(1, False)])

    def test_negated_selection_ignored(self):
        model = [Lbool.TRUE, Lbool.FALSE, Lbool.TRUE]
        selected = [Lit(0, False), Lit(1, True), Lit(2, True)]
        self.assertEqual(blocking_clause(model, selected), [Lit(0, True)])


class TestMsolveSelected(unittest.TestCase):
    def setUp(self):
        self.solver = Solver()

    def test_three_solutions(self):
        self.solver.add_clause([1, 2])
        solutions = self.solver.msolve_selected(1000, [1, 2])
        self.assertEqual(len(solutions), 3)
        self.assertEqual(set(solutions), {(1, 2), (1, -2), (-1, 2)})
        # blocking clauses stay in the solver
        self.assertEqual(self.solver.solve(), (False, None))

    def test_blocking_clauses_satisfy_earlier_clauses(self):
        self.solver.add_clause([1, 2, 3])
        self.solver.add_clause([-1, -2])
        solutions = self.solver.msolve_selected(100, [1, 2, 3])
        expected = {
            (1, -2, 3), (1, -2, -3), (-1, 2, 3), (-1, 2, -3), (-1, -2, 3),
        }
        self.assertEqual(len(solutions), 5)
        self.assertEqual(set(solutions), expected)
        self.assertFalse(self.solver.is_satisfiable())

    def test_dense_solutions(self):
        self.solver.add_clause([1, 2])
        solutions = self.solver.msolve_selected(10, [1, 2], raw=False)
        self.assertEqual(set(solutions), {(None, True, True), (None, True, False), (None, False, True)})

    def test_max_reached(self):
        self.solver.add_clause([1, 2, 3])
        solutions = self.solver.msolve_selected(2, [1, 2, 3])
        self.assertEqual(len(solutions), 2)
        self.assertNotEqual(solutions[0], solutions[1])

    def test_single_solution_adds_no_ban(self):
        self.solver.add_clause([1])
        solutions = self.solver.msolve_selected(1, [1])
        self.assertEqual(solutions, [(1,)])
        self.assertEqual(self.solver.solve(), (True, (None, True)))

    def test_zero_requested(self):
        self.solver.add_clause([1, 2])
        self.assertEqual(self.solver.msolve_selected(0, [1, 2]), [])
        self.assertTrue(self.solver.is_satisfiable())

    def test_unsat_gives_no_solution(self):
        self.solver.add_clause([1])
        self.solver.add_clause([-1])
        self.assertEqual(self.solver.msolve_selected(5, [1]), [])

    def test_projection_on_selected(self):
        # 3 free variables but only variable 1 is selected
        self.solver.add_clause([1, 2, 3])
        solutions = self.solver.msolve_selected(100, [1])
        self.assertEqual(len(solutions), 2)
        self.assertEqual({solution[0] for solution in solutions}, {1, -1})

    def test_negated_selection_does_not_ban(self):
        self.solver.add_clause([1, 2])
        solutions = self.solver.msolve_selected(10, [1, -2])
        self.assertEqual(len(solutions), 2)
        self.assertEqual({solution[0] for solution in solutions}, {1, -1})

    def test_only_negated_selection(self):
        # the banning clause is empty, so enumeration stops after one solution
        self.solver.add_clause([1, 2])
        solutions = self.solver.msolve_selected(10, [-1, -2])
        self.assertEqual(len(solutions), 1)
        self.assertFalse(self.solver.is_satisfiable())

    def test_selection_grows_variables(self):
        self.solver.add_clause([1])
        solutions = self.solver.msolve_selected(10, [1, 3])
        self.assertEqual(self.solver.nb_vars(), 3)
        self.assertEqual(len(solutions), 2)
        for solution in solutions:
            self.assertEqual(solution[0], 1)
            self.assertEqual(len(solution), 3)

    def test_xor_solutions(self):
        self.solver.add_xor_clause([1, 2, 3, 4, 5, 6, 7], False)
        solutions = self.solver.msolve_selected(1000, list(range(1, 8)))
        self.assertEqual(len(solutions), 64)
        self.assertEqual(len(set(solutions)), 64)
        for solution in solutions:
            self.assertEqual(sum(1 for lit in solution if lit > 0) % 2, 0)

    def test_unknown_aborts(self):
        s = Solver(confl_limit=1)
        s.add_clauses(pigeonhole(7, 6))
        with self.assertRaises(IndeterminateResult) as ctx:
            s.msolve_selected(5, [1, 2])
        self.assertEqual(ctx.exception.solutions_found, 0)

    def test_bad_selection(self):
        with self.assertRaises(TypeError):
            self.solver.msolve_selected(3, 1)
        with self.assertRaises(ValueError):
            self.solver.msolve_selected(3, [0])


if __name__ == '__main__':
    unittest.main()
