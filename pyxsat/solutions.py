# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Interpretation of engine results.

A model is a list of Lbool values, one per variable. It is rendered either
dense, ``(None, v1, v2, ...)`` indexable by the DIMACS variable number, or
raw, ``(1, -2, ...)`` with one signed literal per variable of known value.
"""
from typing import List, Optional, Tuple

from pyxsat.exceptions import IllegalEngineState
from pyxsat.literals import encode
from pyxsat.minisat22 import Lbool

_LBOOL_TO_PY = {
    Lbool.TRUE: True,
    Lbool.FALSE: False,
    Lbool.UNDEF: None,
}


def lbool_to_status(res) -> Optional[bool]:
    """Map SAT / UNSAT / UNKNOWN to True / False / None."""
    try:
        return _LBOOL_TO_PY[res]
    except (KeyError, TypeError):
        raise IllegalEngineState(res) from None


def dense_solution(model: List[int]) -> Tuple[Optional[bool], ...]:
    return (None,) + tuple(lbool_to_status(value) for value in model)


def raw_solution(model: List[int]) -> Tuple[int, ...]:
    return tuple(
        encode(v, value == Lbool.FALSE)
        for v, value in enumerate(model)
        if lbool_to_status(value) is not None
    )
