"""
Exceptions raised by the polynomial engine.
"""


class PolynomialError(Exception):
    """Base exception for polynomial errors."""


class ParseError(PolynomialError, ValueError):
    """Raised when polynomial or term text cannot be parsed.

    Parameters
    ----------
    message : str
        The error message.
    text : str, optional
        The offending input.
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message if text is None else f"{message}: {text!r}")
        self.text = text


class UnsupportedOperationError(PolynomialError, NotImplementedError):
    """Raised for operations the engine does not define, e.g. negative powers."""


class ContractViolationError(PolynomialError, ValueError):
    """Raised when a term-level operation is called outside its precondition."""


class UnboundVariableError(PolynomialError, KeyError):
    """Raised when evaluating a term whose variable has no bound value."""

    def __init__(self, symbol: str):
        super().__init__(f"Variable '{symbol}' not in env")
        self.symbol = symbol

    def __str__(self) -> str:
        return self.args[0]


class ConvergenceError(PolynomialError):
    """Raised when the GCD heuristic stalls or runs out of iterations."""
