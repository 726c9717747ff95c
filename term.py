from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union
from coefficient import Coefficient
from errors import ContractViolationError, UnboundVariableError
from indeterminate import Indeterminate

VarsLike = Union[Iterable[Indeterminate], Mapping[str, int]]

@dataclass(order=False)
class Term:
	"""A monomial: a complex coefficient times a product of indeterminates.

	Variables are merged by symbol, zero exponents are dropped and the
	remainder is kept sorted by symbol, so two terms with the same
	variables always carry the same ``vars`` tuple.
	"""
	coeff: Coefficient = field(default_factory=lambda: Coefficient(0))
	vars: Tuple[Indeterminate, ...] = ()
	def __post_init__(self) -> None:
		self.coeff = Coefficient(self.coeff)
		self.vars = _canonical_vars(self.vars)
	@staticmethod
	def empty() -> Term:
		return Term(Coefficient(0), ())
	@staticmethod
	def constant(value: Coefficient | complex | float | int) -> Term:
		return Term(Coefficient(value), ())
	@staticmethod
	def parse(text: str) -> Term:
		# Local import to avoid circular dependency at module load time
		from polynomial_parser import parse_term
		return parse_term(text)
	def coefficient(self) -> Coefficient:
		return self.coeff
	def degree(self) -> int:
		return sum(v.exponent for v in self.vars)
	def degree_var(self, var: str) -> int:
		for v in self.vars:
			if v.symbol == var:
				return v.exponent
		return 0
	def variable_count(self) -> int:
		return len(self.vars)
	def has_variables(self) -> bool:
		return len(self.vars) > 0
	def is_constant(self) -> bool:
		return not self.vars
	def is_zero(self) -> bool:
		return self.coeff.is_zero()
	def vmap(self) -> Dict[str,int]:
		return {v.symbol: v.exponent for v in self.vars}
	def variables(self) -> List[str]:
		return [v.symbol for v in self.vars]
	def signature(self) -> Tuple[Tuple[str,int], ...]:
		return tuple(v.pair() for v in self.vars)
	def clone(self) -> Term:
		return Term(self.coeff, tuple(v.clone() for v in self.vars))
	def evaluate(self, bindings: Mapping[str, Any]) -> Any:
		r: Any = complex(self.coeff)
		for v in self.vars:
			if v.symbol not in bindings:
				raise UnboundVariableError(v.symbol)
			value = bindings[v.symbol]
			if isinstance(value, Coefficient):
				value = complex(value)
			r = r * (value ** v.exponent)
		return r

	@staticmethod
	def are_identical(a: Term, b: Term) -> bool:
		# compare variable signature only
		return a.vars == b.vars
	@staticmethod
	def add(a: Term, b: Term) -> Term:
		if not Term.are_identical(a, b):
			raise ContractViolationError(f"Cannot add unlike terms {a} and {b}")
		return Term(a.coeff + b.coeff, a.vars)
	@staticmethod
	def subtract(a: Term, b: Term) -> Term:
		if not Term.are_identical(a, b):
			raise ContractViolationError(f"Cannot subtract unlike terms {a} and {b}")
		return Term(a.coeff - b.coeff, a.vars)
	@staticmethod
	def multiply(a: Term, b: Term) -> Term:
		v = a.vmap()
		for k,e in b.vmap().items():
			v[k] = v.get(k,0) + e
		return Term(a.coeff * b.coeff, v)
	@staticmethod
	def negate(a: Term) -> Term:
		return Term(-a.coeff, a.vars)
	@staticmethod
	def share_common_factor(a: Term, b: Term) -> bool:
		"""True when the monomial of ``b`` divides the monomial of ``a``."""
		return all(a.degree_var(v.symbol) >= v.exponent for v in b.vars)
	@staticmethod
	def divide(a: Term, b: Term) -> Term:
		if not Term.share_common_factor(a, b):
			raise ContractViolationError(f"{b} does not divide {a}")
		c = a.coeff / b.coeff
		if c.is_zero():
			return Term.empty()
		v = a.vmap()
		for k,e in b.vmap().items():
			v[k] -= e
		return Term(c, v)
	def __neg__(self) -> Term:
		return Term.negate(self)
	def __mul__(self, other: Term) -> Term:
		return Term.multiply(self, other)

	def __lt__(self, other: Term) -> bool:
		# degree descending, then fewer symbols first, then larger magnitude,
		# then larger real part, then signature
		a, b = self.degree(), other.degree()
		if a != b:
			return a > b
		a, b = self.variable_count(), other.variable_count()
		if a != b:
			return a < b
		m, n = self.coeff.magnitude(), other.coeff.magnitude()
		if m != n:
			return m > n
		if self.coeff.real != other.coeff.real:
			return self.coeff.real > other.coeff.real
		return self.signature() < other.signature()
	def to_string(self, unsigned: bool = False) -> str:
		c = -self.coeff if unsigned and self.coeff.sign() < 0 else self.coeff
		# If no variables, print coefficient directly
		if len(self.vars) == 0:
			return c.to_string()
		if c.is_one():
			coeff_part = ""
		elif c == -1:
			coeff_part = "-"
		else:
			coeff_part = f"{c.to_string()}*"
		return coeff_part + "*".join(v.to_string() for v in self.vars)
	def __str__(self) -> str:
		return self.to_string()

def _canonical_vars(vars: VarsLike) -> Tuple[Indeterminate, ...]:
	items = vars.items() if isinstance(vars, Mapping) else ((v.symbol, v.exponent) for v in vars)
	merged: Dict[str,int] = {}
	for symbol, exp in items:
		if exp < 0:
			raise ValueError(f"Negative exponent {exp} for '{symbol}'")
		merged[symbol] = merged.get(symbol, 0) + exp
	return tuple(Indeterminate(s, e) for s, e in sorted(merged.items()) if e != 0)
