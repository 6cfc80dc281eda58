# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
SAT engine wrapper around the MiniSat core.

``SATEngine`` is the narrow API the binding layer talks to: variable
allocation, clauses, XOR constraints, solving under assumptions, the model,
resource limits and learnt clause retrieval.

XOR constraints are cut into chunks of at most ``xor_cut_len`` variables
linked by auxiliary variables, and every chunk is expanded into the CNF
clauses forbidding the assignments of wrong parity. Auxiliary variables live
only in the core: callers see the "outer" variables they allocated, and
models and learnt clauses are translated back to that numbering.
"""
import itertools
import time

from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from pyxsat.minisat22 import Lbool, MinisatSolver, mkLit, sign, var


class SATEngine:
    def __init__(self):
        self.core = MinisatSolver()
        self.outer_to_inner: List[int] = []
        self.inner_to_outer: List[Optional[int]] = []
        self.max_time = 0.0
        self.max_confl = 0
        self.num_threads = 1
        self.xor_cut_len = 4
        self.solve_time = 0.0
        self._small_clauses = None

    def set_verbosity(self, verbosity: int):
        self.core.verbosity = verbosity

    def set_max_time(self, seconds: float):
        self.max_time = seconds

    def set_max_confl(self, conflicts: int):
        self.max_confl = conflicts

    def set_num_threads(self, num_threads: int):
        # The core searches on the calling thread; the count is kept for reporting.
        self.num_threads = num_threads

    def nVars(self) -> int:
        return len(self.outer_to_inner)

    def nClauses(self) -> int:
        return self.core.nClauses()

    def okay(self) -> bool:
        return self.core.ok

    def new_var(self) -> int:
        inner = self.core.newVar()
        outer = len(self.outer_to_inner)
        self.outer_to_inner.append(inner)
        self.inner_to_outer.append(outer)
        return outer

    def new_vars(self, n: int):
        for _ in range(n):
            self.new_var()

    def _new_aux_var(self) -> int:
        inner = self.core.newVar()
        self.inner_to_outer.append(None)
        return inner

    def _to_inner(self, lit: Tuple[int, bool]) -> int:
        v, s = lit
        return mkLit(self.outer_to_inner[v], s)

    def _to_outer(self, lit: int) -> Optional[Tuple[int, bool]]:
        outer = self.inner_to_outer[var(lit)]
        if outer is None:
            return None
        return outer, sign(lit)

    def add_clause(self, lits: Iterable[Tuple[int, bool]]) -> bool:
        """
        Add a clause of (variable, negated) pairs over allocated variables.

        Returns:
            bool: False once the clause set is known to be unsatisfiable.
        """
        ps = [self._to_inner(lit) for lit in lits]
        return self.core.addClause_(ps)

    def add_xor_clause(self, variables: Sequence[int], rhs: bool) -> bool:
        """
        Add the constraint ``variables[0] ^ variables[1] ^ ... == rhs``.

        Variables fixed at the root level are folded into ``rhs`` and
        variables occurring an even number of times cancel out.
        """
        core = self.core
        if not core.ok:
            return False
        free = []
        for v in variables:
            inner = self.outer_to_inner[v]
            value = core.value_var(inner)
            if value == Lbool.UNDEF:
                free.append(inner)
            elif value == Lbool.TRUE:
                rhs = not rhs
        counts = Counter(free)
        free = [v for v in dict.fromkeys(free) if counts[v] % 2 == 1]

        if not free:
            if rhs:
                return core.addClause_([])
            return True

        while len(free) > self.xor_cut_len:
            head = free[:self.xor_cut_len - 1]
            aux = self._new_aux_var()
            # aux carries the parity of head
            if not self._add_xor_cnf(head + [aux], False):
                return False
            free = free[self.xor_cut_len - 1:] + [aux]
        return self._add_xor_cnf(free, rhs)

    def _add_xor_cnf(self, inner_vars: List[int], rhs: bool) -> bool:
        for bits in itertools.product((False, True), repeat=len(inner_vars)):
            if sum(bits) % 2 == int(rhs):
                continue
            # Forbid this wrong-parity assignment
            if not self.core.addClause_([mkLit(v, b) for v, b in zip(inner_vars, bits)]):
                return False
        return True

    def solve(self, assumptions: Optional[Iterable[Tuple[int, bool]]] = None) -> int:
        """
        Run the search, returning Lbool.TRUE, Lbool.FALSE or Lbool.UNDEF.

        Conflict and time limits apply to this call only.
        """
        core = self.core
        assumps = [self._to_inner(lit) for lit in assumptions] if assumptions else []
        core.budgetOff()
        if self.max_confl > 0:
            core.setConfBudget(self.max_confl)
        if self.max_time > 0:
            core.setTimeBudget(self.max_time)
        if core.verbosity >= 1:
            print("c vars: {} (internal {}), clauses: {}, threads: {}".format(
                self.nVars(), core.nVars(), core.nClauses(), self.num_threads))
        start = time.monotonic()
        try:
            return core.solve_(assumps)
        finally:
            self.solve_time += time.monotonic() - start
            core.budgetOff()

    def get_model(self) -> List[int]:
        """Lbool value of every outer variable after a satisfiable solve."""
        model = self.core.model
        values = []
        for inner in self.outer_to_inner:
            values.append(model[inner] if inner < len(model) else Lbool.UNDEF)
        return values

    def start_getting_small_clauses(self, max_len: int, max_glue: int):
        """
        Snapshot the retained learnt clauses with at most ``max_len`` literals
        and glue at most ``max_glue``. Clauses over auxiliary variables are skipped.
        """
        core = self.core
        found = []
        if max_len >= 1:
            for lit in core.learnt_units:
                outer = self._to_outer(lit)
                if outer is not None:
                    found.append([outer])
        for cr in core.learnts:
            c = core.ca[cr]
            if c.size() > max_len or c.lbd > max_glue:
                continue
            lits = [self._to_outer(lit) for lit in c.lits]
            if None in lits:
                continue
            found.append(lits)
        self._small_clauses = iter(found)

    def get_next_small_clause(self) -> Optional[List[Tuple[int, bool]]]:
        if self._small_clauses is None:
            return None
        return next(self._small_clauses, None)

    def end_getting_small_clauses(self):
        self._small_clauses = None

    def get_stats(self) -> dict:
        core = self.core
        return {
            "solves": core.solves,
            "restarts": core.starts,
            "conflicts": core.conflicts,
            "decisions": core.decisions,
            "propagations": core.propagations,
            "max_literals": core.max_literals,
            "tot_literals": core.tot_literals,
            "learnts": core.nLearnts(),
            "solve_time": self.solve_time,
        }
