# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Incremental SAT solver with XOR constraints.

Example:
    >>> from pyxsat.solver import Solver
    >>> s = Solver()
    >>> s.add_clause([1])
    >>> s.add_clause([-2])
    >>> s.add_clause([3])
    >>> s.add_clause([-1, 2, 3])
    >>> s.solve()
    (True, (None, True, False, True))
    >>> s.solve([-3])
    (False, None)
"""
import numbers

from pyxsat.clauses import ClauseIngestor, parse_clause
from pyxsat.engine import SATEngine
from pyxsat.enumerator import enumerate_solutions
from pyxsat.exceptions import SolverClosed
from pyxsat.learnts import LearntClauseCursor
from pyxsat.solutions import dense_solution, lbool_to_status
from pyxsat.varspace import VariableSpace


def _check_int(name, value):
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")


class Solver:
    """
    Solver(verbose=0, time_limit=0.0, confl_limit=0, threads=1)

    Args:
        verbose: Verbosity level, 0 prints nothing.
        time_limit: Abort a solve call after this many seconds. 0 means never.
        confl_limit: Abort a solve call after this many conflicts. 0 means never.
        threads: Number of threads to use. The search runs on the calling
            thread, so the value is only validated and reported.

    The search is pure Python and runs under the GIL, so a solve call does
    not run in parallel with other Python threads. A solver is not
    safe for concurrent use; serialize calls into one instance.
    """

    def __init__(self, verbose=0, time_limit=0.0, confl_limit=0, threads=1):
        _check_int("verbose", verbose)
        if not isinstance(time_limit, numbers.Real) or isinstance(time_limit, bool):
            raise TypeError("time_limit must be a number")
        _check_int("confl_limit", confl_limit)
        _check_int("threads", threads)
        if verbose < 0:
            raise ValueError("verbosity must be at least 0")
        if time_limit < 0:
            raise ValueError("time_limit must be at least 0")
        if confl_limit < 0:
            raise ValueError("conflict limit must be at least 0")
        if threads <= 0:
            raise ValueError("number of threads must be at least 1")

        engine = SATEngine()
        if time_limit > 0:
            engine.set_max_time(float(time_limit))
        if confl_limit > 0:
            engine.set_max_confl(int(confl_limit))
        if verbose > 0:
            engine.set_verbosity(int(verbose))
        engine.set_num_threads(int(threads))

        self._engine = engine
        self._varspace = VariableSpace(engine)
        self._ingestor = ClauseIngestor(engine, self._varspace)
        self._cursor = LearntClauseCursor(engine)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    def close(self):
        """Release the engine. Further calls raise SolverClosed."""
        if self._engine is not None:
            self._cursor.end()
        self._engine = None

    @property
    def closed(self) -> bool:
        return self._engine is None

    def _live_engine(self) -> SATEngine:
        if self._engine is None:
            raise SolverClosed()
        return self._engine

    def add_clause(self, clause):
        """
        Add a clause to the solver.

        Args:
            clause: An iterable of non-zero integer literals.
        """
        self._live_engine()
        self._ingestor.add_clause(clause)

    def add_clauses(self, clauses, max_var=0):
        """
        Add many clauses to the solver.

        Args:
            clauses: An iterable of clauses, or a flat array.array / numpy array
                (typecode 'i', 'l' or 'q') of zero separated and zero terminated clauses.
            max_var: Declare at least this many variables before adding anything.
        """
        self._live_engine()
        _check_int("max_var", max_var)
        self._ingestor.add_clauses(clauses, int(max_var))

    def add_xor_clause(self, xor_clause, rhs):
        """Add the constraint ``xor_clause[0] ^ xor_clause[1] ^ ... == rhs``."""
        self._live_engine()
        self._ingestor.add_xor_clause(xor_clause, rhs)

    def _parse_assumptions(self, assumptions):
        lits = parse_clause(assumptions).lits
        for lit in lits:
            self._varspace.require(lit.var)
        return lits

    def solve(self, assumptions=None):
        """
        Solve the clauses added so far.

        Args:
            assumptions: Optional literals forced for this call only.

        Returns:
            tuple: ``(True, solution)`` where ``solution[i]`` is the value of
            variable ``i`` and ``solution[0]`` is None, ``(False, None)`` when
            unsatisfiable, ``(None, None)`` when a limit was reached.
        """
        engine = self._live_engine()
        assumption_lits = self._parse_assumptions(assumptions) if assumptions is not None else []
        status = lbool_to_status(engine.solve(assumption_lits))
        if status is True:
            return True, dense_solution(engine.get_model())
        return status, None

    def is_satisfiable(self):
        """Return True, False, or None if a limit was reached."""
        return lbool_to_status(self._live_engine().solve())

    def nb_vars(self):
        """Return the number of variables in the solver."""
        return self._live_engine().nVars()

    def nb_clauses(self):
        """Return the number of clauses in the solver."""
        return self._live_engine().nClauses()

    def msolve_selected(self, max_nr_of_solutions, var_selected, raw=True):
        """
        Find multiple solutions, banning each one before the next solve.

        The banning clause only mentions ``var_selected``, so solutions only
        differ on those variables. Negated entries of ``var_selected`` are
        accepted but do not take part in banning.

        Args:
            max_nr_of_solutions: Maximum number of solutions to search for.
            var_selected: Variables for which the solver must find different solutions.
            raw: Solutions as tuples of signed literals, e.g. ``(1, -2, 3)``,
                if True; dense tuples such as ``(None, True, False, True)`` otherwise.

        Returns:
            list: The solutions found.
        """
        engine = self._live_engine()
        _check_int("max_nr_of_solutions", max_nr_of_solutions)
        parsed = parse_clause(var_selected)
        if parsed.lits:
            self._varspace.ensure_capacity(parsed.max_var)
        return enumerate_solutions(engine, max_nr_of_solutions, parsed.lits, raw=bool(raw))

    def start_getting_small_clauses(self, max_len, max_glue=1000):
        """Start getting learnt clauses of at most ``max_len`` literals."""
        self._live_engine()
        self._cursor.start(max_len, max_glue)

    def get_next_small_clause(self):
        """Return the next learnt clause as a list of literals, or None."""
        self._live_engine()
        return self._cursor.next()

    def end_getting_small_clauses(self):
        """End getting learnt clauses."""
        self._live_engine()
        self._cursor.end()

    def get_stats(self):
        """Search statistics of the engine."""
        return self._live_engine().get_stats()
