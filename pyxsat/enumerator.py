# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Enumeration of several distinct solutions by banning each model found.

After every satisfiable call a blocking clause over the selected variables
is added: each selected variable appears with the polarity that makes its
literal false under the current model, so the next model has to differ on
at least one of them. Only variables selected with a positive literal take
part; negated entries of the selection are ignored.
"""
from typing import List, Sequence

from pyxsat.exceptions import IndeterminateResult
from pyxsat.literals import Lit
from pyxsat.minisat22 import Lbool
from pyxsat.solutions import dense_solution, lbool_to_status, raw_solution


def blocking_clause(model: Sequence[int], selected: Sequence[Lit]) -> List[Lit]:
    """Clause excluding the current values of the positively selected variables."""
    return [Lit(lit.var, model[lit.var] == Lbool.TRUE) for lit in selected if not lit.sign]


def enumerate_solutions(engine, max_nr_of_solutions: int, selected: Sequence[Lit], raw: bool = True) -> list:
    """
    Find up to ``max_nr_of_solutions`` solutions differing on ``selected``.

    Args:
        engine: The SATEngine to query. Blocking clauses stay in it afterwards.
        max_nr_of_solutions: Upper bound on the number of solve calls.
        selected: Parsed selection literals; every variable must already exist.
        raw: Raw (signed literal) tuples if True, dense tuples otherwise.

    Returns:
        list: The solutions in the order they were found. Fewer than requested
        when the problem becomes unsatisfiable.

    Raises:
        IndeterminateResult: If a solve call hits the time or conflict limit.
    """
    solutions = []
    render = raw_solution if raw else dense_solution
    nr_of_solutions = 0
    while nr_of_solutions < max_nr_of_solutions:
        status = lbool_to_status(engine.solve())
        nr_of_solutions += 1
        if status is False:
            break
        if status is None:
            raise IndeterminateResult(solutions_found=len(solutions))

        model = engine.get_model()
        solutions.append(render(model))
        if nr_of_solutions < max_nr_of_solutions:
            engine.add_clause(blocking_clause(model, selected))
    return solutions
