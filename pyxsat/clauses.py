# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Clause and XOR clause ingestion.

Clauses arrive either as iterables of integer literals or as one flat
integer buffer (``array.array`` with typecode 'i', 'l' or 'q', or a 1-D
numpy integer array of the same widths) holding zero separated and zero
terminated clauses. Both forms are turned into a stream of ``ParsedClause``
objects and go through the same submission path.
"""
import numpy as np

from typing import Iterable, Iterator, List, NamedTuple

from pyxsat.exceptions import InvalidXorLiteral, MalformedBuffer
from pyxsat.literals import Lit, decode

# Element widths of C int, long and long long
BUFFER_ITEMSIZES = frozenset(np.dtype(code).itemsize for code in ('i', 'l', 'q'))


class ParsedClause(NamedTuple):
    lits: List[Lit]
    max_var: int


def _iterate(obj):
    try:
        return iter(obj)
    except TypeError:
        raise TypeError("iterable object expected") from None


def parse_clause(literals) -> ParsedClause:
    """
    Decode every literal of one clause.

    Nothing is submitted here, so a bad literal anywhere in the clause
    leaves the solver untouched.

    Raises:
        InvalidLiteral: On the first literal that fails to decode.
        TypeError: If ``literals`` is not iterable.
    """
    lits = []
    max_var = 0
    for value in _iterate(literals):
        lit = decode(value).unwrap()
        if lit.var > max_var:
            max_var = lit.var
        lits.append(lit)
    return ParsedClause(lits, max_var)


def is_flat_buffer(obj) -> bool:
    """Detect array.array and numpy arrays by their introspection attributes."""
    if all(hasattr(obj, attr) for attr in ('buffer_info', 'typecode', 'itemsize')):
        return True
    return all(hasattr(obj, attr) for attr in ('__array_interface__', 'dtype', 'itemsize'))


def _as_clause_array(buffer) -> np.ndarray:
    typecode = getattr(buffer, 'typecode', None)
    if typecode is not None and typecode not in ('i', 'l', 'q'):
        raise MalformedBuffer(f"invalid clause array: invalid typecode '{typecode}'")
    try:
        arr = np.asarray(buffer)
    except (TypeError, ValueError) as exc:
        raise MalformedBuffer(f"invalid clause array: {exc}") from exc
    if arr.ndim != 1:
        raise MalformedBuffer(f"invalid clause array: expected 1 dimension, got {arr.ndim}")
    if arr.dtype.kind != 'i' or arr.dtype.itemsize not in BUFFER_ITEMSIZES:
        raise MalformedBuffer(f"invalid clause array: invalid item type '{arr.dtype}'")
    return arr


def iter_buffer_clauses(buffer) -> Iterator[ParsedClause]:
    """
    Split a flat buffer on its zero sentinels.

    The terminator is checked before the first clause is yielded. Empty
    clauses (consecutive zeros) are skipped.

    Raises:
        MalformedBuffer: If the last element is not zero or the element type is unsupported.
    """
    arr = _as_clause_array(buffer)
    if arr.size == 0:
        return
    if arr[-1] != 0:
        raise MalformedBuffer("last clause not terminated by zero")
    start = 0
    for end in np.flatnonzero(arr == 0).tolist():
        if end > start:
            yield parse_clause(arr[start:end].tolist())
        start = end + 1


def iter_list_clauses(clauses) -> Iterator[ParsedClause]:
    for clause in _iterate(clauses):
        yield parse_clause(clause)


class ClauseIngestor:
    """
    Feeds parsed clauses into the engine, growing the variable space as needed.

    Batch ingestion is not atomic: when an element fails, clauses submitted
    before it stay in the solver.
    """

    def __init__(self, engine, varspace):
        self.engine = engine
        self.varspace = varspace

    def submit(self, parsed: ParsedClause) -> None:
        if parsed.lits:
            self.varspace.ensure_capacity(parsed.max_var)
        self.engine.add_clause(parsed.lits)

    def add_clause(self, literals) -> None:
        self.submit(parse_clause(literals))

    def add_clauses(self, clauses, max_var: int = 0) -> None:
        """
        Add a batch given as an iterable of clauses or as a flat buffer.

        Args:
            clauses: Iterable of iterables of literals, or a flat zero separated buffer.
            max_var: Number of variables to declare before anything is ingested.
        """
        self.varspace.declare(max_var)
        if is_flat_buffer(clauses):
            stream = iter_buffer_clauses(clauses)
        else:
            stream = iter_list_clauses(clauses)
        for parsed in stream:
            self.submit(parsed)

    def add_xor_clause(self, literals: Iterable, rhs: bool) -> None:
        """
        Add ``x1 ^ x2 ^ ... == rhs`` over positive variables.

        Raises:
            TypeError: If ``rhs`` is not a bool.
            InvalidXorLiteral: If any literal is negated. Nothing is changed in that case.
        """
        if not isinstance(rhs, (bool, np.bool_)):
            raise TypeError("rhs must be boolean")
        parsed = parse_clause(literals)
        for lit in parsed.lits:
            if lit.sign:
                raise InvalidXorLiteral(value=lit.to_int())
        if parsed.lits:
            self.varspace.ensure_capacity(parsed.max_var)
        self.engine.add_xor_clause([lit.var for lit in parsed.lits], bool(rhs))
