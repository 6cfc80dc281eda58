# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Variable space bookkeeping for one engine instance.

The declared variable count only grows. Clause ingestion grows it lazily;
assumptions may only reference variables that already exist.
"""
from pyxsat.exceptions import UnknownVariable


class VariableSpace:
    def __init__(self, engine):
        self.engine = engine

    @property
    def count(self) -> int:
        return self.engine.nVars()

    def ensure_capacity(self, max_var: int) -> None:
        """Grow the variable count to ``max_var + 1`` if it is smaller."""
        n_vars = self.engine.nVars()
        if max_var >= n_vars:
            self.engine.new_vars(max_var - n_vars + 1)

    def declare(self, n_vars: int) -> None:
        """Pre-declare at least ``n_vars`` variables."""
        current = self.engine.nVars()
        if n_vars > current:
            self.engine.new_vars(n_vars - current)

    def require(self, var_index: int) -> None:
        if var_index >= self.engine.nVars():
            raise UnknownVariable(var_index + 1)
