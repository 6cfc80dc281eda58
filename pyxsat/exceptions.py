# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Exception classes raised by the pyxsat solver binding.

Every class also derives from the builtin exception that callers of a
loosely-typed SAT binding conventionally catch (ValueError, TypeError,
RuntimeError), so existing ``except ValueError`` handlers keep working.
"""


class SATBindingError(Exception):
    """Base exception class for all solver binding errors."""
    pass


class InvalidLiteral(SATBindingError, ValueError):
    """
    Raised when a literal is zero, out of the representable range, or not an integer.

    Attributes:
        value: The offending input value.
    """
    def __init__(self, message="invalid literal", value=None):
        self.value = value
        self.message = message
        super().__init__(self.message)


class NonIntegerLiteral(InvalidLiteral, TypeError):
    """Raised when a literal is not integer-like."""
    def __init__(self, value=None):
        super().__init__("integer expected", value)


class InvalidXorLiteral(SATBindingError, ValueError):
    """Raised when an XOR clause contains a negated literal."""
    def __init__(self, message="XOR clause must contain only positive variables (not inverted literals)",
                 value=None):
        self.value = value
        self.message = message
        super().__init__(self.message)


class MalformedBuffer(SATBindingError, ValueError):
    """
    Raised when a flat clause buffer cannot be ingested.

    This covers a buffer whose last element is not the zero terminator and
    buffers of an unsupported element type or width.
    """
    def __init__(self, message="invalid clause array"):
        self.message = message
        super().__init__(self.message)


class UnknownVariable(SATBindingError, ValueError):
    """
    Raised when an assumption references a variable that was never declared.

    Attributes:
        variable: 1-based external variable number.
    """
    def __init__(self, variable=None):
        self.variable = variable
        self.message = f"variable '{variable}' not used in clauses"
        super().__init__(self.message)


class NoActiveCursor(SATBindingError, RuntimeError):
    """Raised when learnt clauses are pulled without an open cursor."""
    def __init__(self, message="no active learnt clause cursor, call start_getting_small_clauses() first"):
        self.message = message
        super().__init__(self.message)


class IllegalEngineState(SATBindingError, RuntimeError):
    """
    Raised when the engine returns a status outside SAT / UNSAT / UNKNOWN.

    This never happens in correct operation and is not retried.
    """
    def __init__(self, status=None):
        self.status = status
        self.message = f"Error occurred in the SAT engine: illegal result {status!r}"
        super().__init__(self.message)


class IndeterminateResult(SATBindingError, RuntimeError):
    """
    Raised when solution enumeration hits a resource limit.

    Attributes:
        solutions_found: Number of solutions found before the limit was reached.
    """
    def __init__(self, message="solver returned UNKNOWN, cannot enumerate further solutions",
                 solutions_found=None):
        self.solutions_found = solutions_found
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        if self.solutions_found is not None:
            return f"{self.message} (solutions_found={self.solutions_found})"
        return self.message


class SolverClosed(SATBindingError, RuntimeError):
    """Raised when a closed solver is used."""
    def __init__(self, message="operation on a closed solver"):
        self.message = message
        super().__init__(self.message)
