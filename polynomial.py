from __future__ import annotations
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union
from dataclasses import dataclass, field
from coefficient import Coefficient
from indeterminate import Indeterminate
from term import Term

Bindings = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


@dataclass
class Polynomial:
    """A sum of terms with complex coefficients, kept in canonical order.

    Every construction path deep-copies the given terms, folds like terms
    together, drops zero coefficients and sorts the result with
    :meth:`order_monomials`, so equal polynomials print identically.
    The polynomial without terms is zero.
    """

    terms: List[Term] = field(default_factory=list)

    def __post_init__(self):
        self.normalize()

    @staticmethod
    def from_terms(terms: Iterable[Term]) -> "Polynomial":
        return Polynomial(list(terms))

    @staticmethod
    def parse(text: str) -> "Polynomial":
        # Local import to avoid circular dependency at module load time
        from polynomial_parser import parse_polynomial
        return parse_polynomial(text)

    @staticmethod
    def constant(value: Coefficient | complex | float | int) -> "Polynomial":
        return Polynomial([Term.constant(value)])

    @staticmethod
    def variable(name: str) -> "Polynomial":
        return Polynomial([Term(Coefficient(1), (Indeterminate(name, 1),))])

    def normalize(self) -> None:
        # combine like terms, first occurrence keeps its position
        acc: Dict[Tuple[Tuple[str, int], ...], Term] = {}
        for t in self.terms:
            key = t.signature()
            if key in acc:
                acc[key] = Term.add(acc[key], t)
            else:
                acc[key] = t.clone()
        self.terms = [t for t in acc.values() if not t.is_zero()]
        self.order_monomials()

    def order_monomials(self) -> None:
        # Term.__lt__ is total over distinct signatures
        self.terms = sorted(self.terms)

    def clone(self) -> "Polynomial":
        return Polynomial([t.clone() for t in self.terms])

    def is_zero(self) -> bool:
        return len(self.terms) == 0

    def is_constant(self) -> bool:
        return all(t.is_constant() for t in self.terms)

    def has_variables(self) -> bool:
        return any(t.has_variables() for t in self.terms)

    def variables(self) -> List[str]:
        return sorted({s for t in self.terms for s in t.variables()})

    def degree(self) -> int:
        return max((t.degree() for t in self.terms), default=0)

    def degree_var(self, var: str) -> int:
        return max((t.degree_var(var) for t in self.terms), default=0)

    def max_coefficient(self) -> Coefficient:
        """Largest-magnitude coefficient among terms that carry variables.

        Returns ``Coefficient(-1)`` when no term has variables. On equal
        magnitudes the term that comes first in canonical order wins.
        """
        best: Coefficient | None = None
        for t in self.terms:
            if t.has_variables() and (best is None or t.coeff.magnitude() > best.magnitude()):
                best = t.coeff
        return Coefficient(-1) if best is None else best

    def is_univariate(self, var: str) -> bool:
        return all(s == var for s in self.variables())

    def to_univariate_coeffs(self, var: str) -> list[Coefficient]:
        """Ascending coefficients [a0, a1, ..., an] of a polynomial in var alone.

        Returns an empty list when any other variable occurs.
        """
        if not self.is_univariate(var):
            return []
        coeffs = [Coefficient(0)] * (self.degree_var(var) + 1)
        for t in self.terms:
            coeffs[t.degree_var(var)] += t.coefficient()
        return coeffs

    def evaluate(self, bindings: Bindings | None = None) -> Any:
        """Sum of every term evaluated with ``bindings``.

        ``bindings`` maps each symbol to a number (or a numpy array, giving an
        element-wise result); a sequence of ``(symbol, value)`` pairs is
        accepted too. Every symbol of the polynomial must be bound.
        """
        env = dict(bindings or {})
        total: Any = complex(0)
        for t in self.terms:
            total = total + t.evaluate(env)
        return total

    def __add__(self, rhs: "Polynomial") -> "Polynomial":
        from arithmetic import add
        return add(self, rhs)

    def __sub__(self, rhs: "Polynomial") -> "Polynomial":
        from arithmetic import subtract
        return subtract(self, rhs)

    def __mul__(self, rhs: "Polynomial") -> "Polynomial":
        from arithmetic import multiply
        return multiply(self, rhs)

    def __truediv__(self, rhs: "Polynomial") -> "Polynomial":
        from arithmetic import divide
        return divide(self, rhs)

    def __pow__(self, exp: int) -> "Polynomial":
        from arithmetic import pow
        return pow(self, exp)

    def __neg__(self) -> "Polynomial":
        return Polynomial([-t for t in self.terms])

    def derivative(self, var: str) -> "Polynomial":
        from arithmetic import get_derivative
        return get_derivative(self, var)

    def gcd(self, other: "Polynomial") -> "Polynomial":
        from arithmetic import gcd
        return gcd(self, other)

    def to_string(self) -> str:
        if len(self.terms) == 0:
            return "0"
        parts: List[str] = []
        for idx, t in enumerate(self.terms):
            if idx == 0:
                parts.append(t.to_string())
            elif t.coeff.sign() < 0:
                parts.append(f" - {t.to_string(unsigned=True)}")
            else:
                parts.append(f" + {t.to_string(unsigned=True)}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()
