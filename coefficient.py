from __future__ import annotations
import numbers
import numpy as np
from errors import ParseError

class Coefficient:
	__slots__ = ("_c",)
	def __init__(self, value: Coefficient | complex | float | int = 0) -> None:
		if isinstance(value, Coefficient):
			self._c = value._c
		elif isinstance(value, (numbers.Number, np.number)) and not isinstance(value, bool):
			self._c = complex(value)
		else:
			raise TypeError(f"Cannot use {type(value).__name__} as a coefficient")
	@staticmethod
	def _of(other: Coefficient | complex | float | int) -> complex:
		return other._c if isinstance(other, Coefficient) else complex(other)
	def __add__(self, other: Coefficient | complex) -> Coefficient:
		return Coefficient(self._c + Coefficient._of(other))
	def __sub__(self, other: Coefficient | complex) -> Coefficient:
		return Coefficient(self._c - Coefficient._of(other))
	def __mul__(self, other: Coefficient | complex) -> Coefficient:
		return Coefficient(self._c * Coefficient._of(other))
	def __truediv__(self, other: Coefficient | complex) -> Coefficient:
		den = Coefficient._of(other)
		if den == 0:
			raise ZeroDivisionError("division by zero coefficient")
		return Coefficient(self._c / den)
	def __neg__(self) -> Coefficient:
		return Coefficient(-self._c)
	def __pow__(self, exp: int) -> Coefficient:
		if exp == 0:
			return Coefficient(1)
		return Coefficient(self._c ** exp)
	def __eq__(self, other: object) -> bool:
		if isinstance(other, Coefficient):
			return self._c == other._c
		if isinstance(other, numbers.Number):
			return self._c == other
		return NotImplemented
	def __hash__(self) -> int:
		return hash(self._c)
	def __complex__(self) -> complex:
		return self._c
	@property
	def real(self) -> float:
		return self._c.real
	@property
	def imag(self) -> float:
		return self._c.imag
	def magnitude(self) -> float:
		return abs(self._c)
	def is_zero(self) -> bool:
		return self._c == 0
	def is_one(self) -> bool:
		return self._c == 1
	def is_real(self) -> bool:
		return self._c.imag == 0
	def sign(self) -> int:
		# sign of the real part; a purely imaginary value counts as positive
		return -1 if self._c.real < 0 else 1
	def to_string(self) -> str:
		if self.is_real():
			return _format_real(self._c.real)
		re, im = self._c.real, self._c.imag
		im_part = f"{_format_real(abs(im))}j"
		if re == 0:
			return f"({'-' if im < 0 else ''}{im_part})"
		return f"({_format_real(re)}{'-' if im < 0 else '+'}{im_part})"
	@staticmethod
	def parse(text: str) -> Coefficient:
		s = text.strip()
		if not s:
			raise ParseError("Empty coefficient")
		if s.startswith("(") and s.endswith(")"):
			try:
				return Coefficient(complex(s))
			except ValueError:
				raise ParseError("Invalid complex coefficient", text) from None
		if not (s[0].isdigit() or s[0] in "+-."):
			raise ParseError("Invalid coefficient", text)
		try:
			return Coefficient(float(s))
		except ValueError:
			raise ParseError("Invalid coefficient", text) from None
	def __repr__(self) -> str:
		return f"Coefficient({self.to_string()})"
	def __str__(self) -> str:
		return self.to_string()

def _format_real(x: float) -> str:
	if x == 0:
		return "0"
	if x.is_integer() and abs(x) < 1e16:
		return str(int(x))
	return repr(x)
