# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Cursor over the learnt clauses retained by the engine.
"""
from typing import List, Optional

from pyxsat.exceptions import NoActiveCursor
from pyxsat.literals import encode


class LearntClauseCursor:
    """
    start / next / end protocol over short learnt clauses.

    ``start`` takes a fresh snapshot and discards any unfinished traversal.
    ``end`` may be called any number of times; ``next`` afterwards raises
    NoActiveCursor.
    """

    def __init__(self, engine):
        self.engine = engine
        self.active = False

    def start(self, max_len: int, max_glue: int = 1000) -> None:
        for name, value in (("max_len", max_len), ("max_glue", max_glue)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")
            if value < 0:
                raise ValueError(f"{name} must be at least 0")
        self.engine.start_getting_small_clauses(max_len, max_glue)
        self.active = True

    def next(self) -> Optional[List[int]]:
        """Next clause as a list of signed literals, or None when exhausted."""
        if not self.active:
            raise NoActiveCursor()
        lits = self.engine.get_next_small_clause()
        if lits is None:
            return None
        return [encode(v, negated) for v, negated in lits]

    def end(self) -> None:
        if self.active:
            self.engine.end_getting_small_clauses()
        self.active = False
