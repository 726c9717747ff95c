from __future__ import annotations
from typing import Any, Dict, List, Union
from arithmetic import gcd
from coefficient import Coefficient
from polynomial import Polynomial
from polynomial_parser import parse_polynomial
import numpy as np

NumberLike = Union[int, float, complex, Coefficient]

ROOT_TOLERANCE = 1e-12


class CAS:
    def __init__(self) -> None:
        pass

    def _wrap(self, obj: Any) -> "CAS.ExprResult":
        if isinstance(obj, CAS.ExprResult):
            return obj
        if isinstance(obj, Polynomial):
            return CAS.ExprResult(obj)
        if isinstance(obj, str):
            return self.parse(obj)
        raise TypeError("Unsupported object for wrapping")

    def parse(self, expr: str) -> "CAS.ExprResult":
        return CAS.ExprResult(parse_polynomial(expr))

    class ExprResult:
        def __init__(self, poly: Polynomial) -> None:
            self._poly = poly

        @property
        def poly(self) -> Polynomial:
            return self._poly

        def eval(self, env: Dict[str, Any] | None = None) -> Any:
            return self._poly.evaluate(env or {})

        def diff(self, var: str) -> "CAS.ExprResult":
            """Partial derivative of this expression with respect to var."""
            return CAS.ExprResult(self._poly.derivative(var))

        def roots(self, var: str, tol: float = ROOT_TOLERANCE) -> List[complex]:
            """All complex roots of a univariate polynomial in var.

            Uses numpy's companion-matrix root finder. Imaginary or real parts
            smaller than tol are snapped to zero. Raises ValueError when the
            polynomial involves any other variable.
            """
            if not self._poly.is_univariate(var):
                raise ValueError(f"Polynomial is not univariate in '{var}': {self._poly}")
            coeffs = [complex(c) for c in reversed(self._poly.to_univariate_coeffs(var))]
            # Remove leading zeros
            while coeffs and abs(coeffs[0]) < tol:
                coeffs.pop(0)
            if len(coeffs) < 2:
                return []
            found = []
            for r in np.roots(np.array(coeffs, dtype=complex)):
                re = 0.0 if abs(r.real) < tol else float(r.real)
                im = 0.0 if abs(r.imag) < tol else float(r.imag)
                found.append(complex(re, im))
            found.sort(key=lambda z: (z.real, z.imag))
            return found

        def __eq__(self, other: object) -> bool:
            if isinstance(other, CAS.ExprResult):
                return self._poly == other._poly
            return NotImplemented

        def __str__(self) -> str:
            return str(self._poly)

    def eval(self, expr: Any, env: Dict[str, NumberLike] | None = None) -> Any:
        return self._wrap(expr).eval(env or {})

    def differentiate(self, expr: Any, var: str) -> "CAS.ExprResult":
        return self._wrap(expr).diff(var)

    def gcd(self, left: Any, right: Any) -> "CAS.ExprResult":
        return CAS.ExprResult(gcd(self._wrap(left).poly, self._wrap(right).poly))

    def roots(self, expr: Any, var: str) -> List[complex]:
        return self._wrap(expr).roots(var)

    def simplify(self, expr: str) -> str:
        return str(parse_polynomial(expr))
