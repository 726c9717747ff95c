from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Indeterminate:
	symbol: str
	exponent: int = 1
	def clone(self) -> Indeterminate:
		return Indeterminate(self.symbol, self.exponent)
	def with_exponent(self, exponent: int) -> Indeterminate:
		return Indeterminate(self.symbol, exponent)
	def pair(self) -> tuple[str, int]:
		return (self.symbol, self.exponent)
	def to_string(self) -> str:
		if self.exponent == 1:
			return self.symbol
		return f"{self.symbol}^{self.exponent}"
	def __str__(self) -> str:
		return self.to_string()
