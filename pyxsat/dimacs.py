# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
DIMACS CNF reading, with CryptoMiniSat style XOR lines.

An XOR line starts with 'x': ``x1 -2 3 0`` stands for x1 ^ ~x2 ^ x3 = true.
Each negation flips the parity, so it is stored as variables [1, 2, 3]
with rhs False.
"""
import gzip

from typing import List, NamedTuple, Optional, Tuple

from pysat.formula import CNF


class DimacsFormula(NamedTuple):
    cnf: CNF
    xor_clauses: List[Tuple[List[int], bool]]
    declared_vars: Optional[int]
    declared_clauses: Optional[int]


def _parse_problem_line(line: str) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) >= 4 and parts[1] == 'cnf':
        return int(parts[2]), int(parts[3])
    raise ValueError(f"PARSE ERROR! Unexpected format in the 'p' line: {line!r}")


def _parse_xor_line(line: str) -> Tuple[List[int], bool]:
    variables = []
    rhs = True
    for token in line[1:].split():
        lit = int(token)
        if lit == 0:
            break
        if lit < 0:
            rhs = not rhs
        variables.append(abs(lit))
    return variables, rhs


def read_dimacs(filename: str) -> DimacsFormula:
    """
    Reads a CNF file line by line.

    - 'c' and '%' lines are comments.
    - The 'p cnf' line is metadata only.
    - Clauses may span several lines and end with 0.
    - Lines starting with 'x' hold one XOR clause each.

    Args:
        filename (str): Path to a .cnf or .cnf.gz file.

    Returns:
        DimacsFormula: Clauses as a pysat CNF plus the XOR clauses and header counts.
    """
    open_fn = gzip.open if filename.endswith('.gz') else open
    cnf = CNF()
    xor_clauses = []
    declared_vars = None
    declared_clauses = None
    lits = []
    with open_fn(filename, 'rt', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if not line or line[0] in ('c', 'C', '%'):
                continue
            if line[0] == 'p':
                declared_vars, declared_clauses = _parse_problem_line(line)
                continue
            if line[0] == 'x':
                xor_clauses.append(_parse_xor_line(line))
                continue
            for token in line.split():
                lit = int(token)
                if lit == 0:
                    cnf.append(lits)
                    lits = []
                else:
                    lits.append(lit)
    if lits:
        cnf.append(lits)
    return DimacsFormula(cnf, xor_clauses, declared_vars, declared_clauses)


def load_dimacs(filename: str, solver) -> DimacsFormula:
    """Read a DIMACS file and add its clauses and XOR clauses to ``solver``."""
    formula = read_dimacs(filename)
    solver.add_clauses(formula.cnf.clauses, max_var=formula.declared_vars or 0)
    for variables, rhs in formula.xor_clauses:
        solver.add_xor_clause(variables, rhs)

    if formula.declared_vars is not None and formula.declared_vars != solver.nb_vars():
        print("WARNING! DIMACS header mismatch: wrong number of variables.")
    n_constraints = len(formula.cnf.clauses) + len(formula.xor_clauses)
    if formula.declared_clauses is not None and formula.declared_clauses != n_constraints:
        print("WARNING! DIMACS header mismatch: wrong number of clauses.")
    return formula
