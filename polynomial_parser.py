from __future__ import annotations
from typing import Dict, List
from coefficient import Coefficient
from errors import ParseError
from term import Term
from polynomial import Polynomial

# Lexer + recursive reader for one term; '+'/'-' split the polynomial into terms
class Tok:
	def __init__(self, kind: str, lex: str = "", num: Coefficient | None = None):
		self.kind, self.lex, self.num = kind, lex, num

def _is_exponent_sign(s: str, i: int) -> bool:
	# the '-' in "1e-5" belongs to the number, not to the term separator
	return i >= 2 and s[i-1] in "eE" and (s[i-2].isdigit() or s[i-2] == '.') and i+1 < len(s) and s[i+1].isdigit()

def split_terms(expr: str) -> List[str]:
	"""Split polynomial text into signed term chunks.

	Whitespace is dropped and every '-' starts a new chunk that keeps the
	sign, as if the text had been rewritten with '-' -> '+-' and split on
	'+'. Signs inside a parenthesised complex coefficient do not split.
	"""
	s = "".join(expr.split())
	chunks: List[str] = []
	cur = ""
	depth = 0
	for i, c in enumerate(s):
		if c == '(':
			depth += 1
		elif c == ')':
			depth -= 1
			if depth < 0: raise ParseError("Mismatched parens", expr)
		elif c in "+-" and depth == 0 and not _is_exponent_sign(s, i):
			chunks.append(cur)
			cur = c if c == '-' else ""
			continue
		cur += c
	if depth != 0: raise ParseError("Mismatched parens", expr)
	chunks.append(cur)
	# a leading '-' leaves an empty chunk in front
	if len(chunks) > 1 and chunks[0] == "" and chunks[1].startswith('-'):
		chunks.pop(0)
	return chunks

def tokenize(chunk: str) -> List[Tok]:
	s = chunk
	i, n = 0, len(s)
	toks: List[Tok] = []
	while i < n:
		c = s[i]
		if c.isspace():
			i += 1; continue
		if c in "*^":
			toks.append(Tok(c, c))
			i += 1; continue
		# complex literal, e.g. "(1-2j)"
		if c == '(':
			j = s.find(')', i)
			if j < 0: raise ParseError("Mismatched parens", chunk)
			toks.append(Tok('NUM', s[i:j+1], Coefficient.parse(s[i:j+1])))
			i = j+1; continue
		# number (int, decimal or scientific)
		if c.isdigit() or c == '.':
			j = i
			while j < n and (s[j].isdigit() or s[j] == '.'):
				j += 1
			if j+1 < n and s[j] in "eE" and (s[j+1].isdigit() or (s[j+1] in "+-" and j+2 < n and s[j+2].isdigit())):
				j += 2
				while j < n and s[j].isdigit():
					j += 1
			toks.append(Tok('NUM', s[i:j], Coefficient.parse(s[i:j])))
			i = j; continue
		# symbols are single letters; "xy" lexes as two symbols and is rejected by the reader
		if c.isalpha():
			toks.append(Tok('ID', c))
			i += 1; continue
		raise ParseError(f"Unexpected char {c}", chunk)
	return toks

def parse_term(text: str) -> Term:
	"""Parse one monomial such as ``6*X``, ``X^2``, ``-1`` or ``(2+1j)*x*y``."""
	if not isinstance(text, str):
		raise ParseError("Term text is not a string", text)
	s = text.strip()
	sign = 1
	if s[:1] in ("+", "-"):
		sign = -1 if s[0] == '-' else 1
		s = s[1:]
	toks = tokenize(s)
	if not toks:
		raise ParseError("Empty term", text)
	pos = 0
	coeff = Coefficient(1)
	if toks[0].kind == 'NUM':
		coeff = toks[0].num
		pos = 1
	vars: Dict[str,int] = {}
	while pos < len(toks):
		if pos > 0:
			if toks[pos].kind != '*': raise ParseError(f"Expected '*' before {toks[pos].lex!r}", text)
			pos += 1
		if pos >= len(toks) or toks[pos].kind != 'ID':
			raise ParseError("Expected a variable symbol", text)
		sym = toks[pos].lex
		pos += 1
		exp = 1
		if pos < len(toks) and toks[pos].kind == '^':
			pos += 1
			if pos >= len(toks) or toks[pos].kind != 'NUM' or not toks[pos].lex.isdigit():
				raise ParseError("Exponent must be a non-negative integer", text)
			exp = int(toks[pos].lex)
			pos += 1
		vars[sym] = vars.get(sym, 0) + exp
	return Term(coeff * sign, vars)

def parse_polynomial(expr: str) -> Polynomial:
	if not isinstance(expr, str) or not expr.strip():
		raise ParseError("Polynomial text is empty", expr)
	chunks = split_terms(expr)
	if not chunks:
		raise ParseError("No terms found", expr)
	return Polynomial([parse_term(c) for c in chunks])
