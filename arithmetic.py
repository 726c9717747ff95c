"""Arithmetic on :class:`Polynomial` values.

Every function here is pure: operands are never mutated and a new
polynomial is returned. ``divide`` and ``gcd`` are deliberately weak:
``divide`` is a term-wise pseudo-division that silently drops dividend
terms no divisor term divides, and ``gcd`` is a Euclidean-style heuristic
over coefficient magnitudes, not an exact multivariate GCD.
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, List, Tuple
from errors import ConvergenceError, UnsupportedOperationError
from polynomial import Polynomial
from term import Term

logger = logging.getLogger(__name__)

GCD_MAX_ITERATIONS = 1000


def add(left: Polynomial, right: Polynomial) -> Polynomial:
    return _one_to_one(left, right, Term.add, lambda t: t.clone())


def subtract(left: Polynomial, right: Polynomial) -> Polynomial:
    return _one_to_one(left, right, Term.subtract, Term.negate)


def _one_to_one(
    left: Polynomial,
    right: Polynomial,
    operation: Callable[[Term, Term], Term],
    unmatched: Callable[[Term], Term],
) -> Polynomial:
    terms: List[Term] = [t.clone() for t in left.terms]
    for rt in right.terms:
        idx = next((i for i, lt in enumerate(terms) if Term.are_identical(lt, rt)), None)
        if idx is None:
            terms.append(unmatched(rt))
            continue
        result = operation(terms.pop(idx), rt)
        if result.is_zero():
            continue
        if result not in terms:
            terms.append(result)
    return Polynomial(terms)


def multiply(left: Polynomial, right: Polynomial) -> Polynomial:
    # like terms merge into one entry that moves to the end, as a
    # remove-and-append over a plain list would do
    acc: Dict[Tuple[Tuple[str, int], ...], Term] = {}
    for a in left.terms:
        for b in right.terms:
            prod = Term.multiply(a, b)
            key = prod.signature()
            if key in acc:
                prod = Term.add(prod, acc.pop(key))
            acc[key] = prod
    return Polynomial(list(acc.values()))


def pow(poly: Polynomial, exponent: int) -> Polynomial:
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise TypeError(f"Exponent must be an int, got {type(exponent).__name__}")
    if exponent < 0:
        raise UnsupportedOperationError("Raising a polynomial to a negative exponent is not supported")
    if exponent == 0:
        return Polynomial.constant(1)
    res = poly.clone()
    for _ in range(exponent - 1):
        res = multiply(res, poly)
    return res


def get_derivative(poly: Polynomial, symbol: str) -> Polynomial:
    terms: List[Term] = []
    for t in poly.terms:
        e = t.degree_var(symbol)
        if e == 0:
            continue
        v = t.vmap()
        v[symbol] = e - 1
        terms.append(Term(t.coefficient() * e, v))
    return Polynomial(terms)


def divide(dividend: Polynomial, divisor: Polynomial) -> Polynomial:
    """Term-wise pseudo-division of ``dividend`` by ``divisor``.

    For each divisor term, every remaining dividend term it divides is
    consumed and divided by it. Quotients equal to one already collected are
    skipped. Dividend terms that no divisor term divides are dropped without
    a remainder, so the result is only the true quotient when ``divisor``
    divides ``dividend`` term by term, e.g. ``(36XY + 6X + 6Y + 1) / (6X + 1)``.
    """
    quotient: List[Term] = []
    remaining: List[Term] = [t.clone() for t in dividend.terms]
    for dt in divisor.terms:
        matches = [t for t in remaining if Term.share_common_factor(t, dt)]
        for m in matches:
            remaining.remove(m)
            result = Term.divide(m, dt)
            if result.is_zero() or result in quotient:
                continue
            quotient.append(result)
    return Polynomial(quotient)


def gcd(left: Polynomial, right: Polynomial) -> Polynomial:
    """Best-effort common factor of two polynomials.

    Repeatedly subtracts the operands and keeps whichever pair has shrinking
    maximum coefficients, stopping once one operand loses its variables.
    The variable-free operand is returned if there is one, else the
    subtrahend. An iteration that changes nothing would loop forever, so it
    raises :class:`ConvergenceError`, as does exceeding ``GCD_MAX_ITERATIONS``.
    """
    minuend = left.clone()
    subtrahend = right.clone()
    for iteration in range(GCD_MAX_ITERATIONS):
        m_max = minuend.max_coefficient().magnitude()
        s_max = subtrahend.max_coefficient().magnitude()
        difference = subtract(minuend, subtrahend)
        d_max = difference.max_coefficient().magnitude()
        logger.debug("gcd iteration %d: (%s) - (%s) = %s", iteration, minuend, subtrahend, difference)

        progressed = True
        if m_max > s_max and s_max > d_max:
            minuend, subtrahend = subtrahend, difference
        elif d_max > s_max:
            subtrahend = difference
        else:
            progressed = False

        if not (m_max > 0 and s_max > 0 and minuend.has_variables() and subtrahend.has_variables()):
            break
        if not progressed:
            logger.warning("gcd stalled on (%s, %s)", minuend, subtrahend)
            raise ConvergenceError(f"GCD made no progress on ({minuend}, {subtrahend})")
    else:
        raise ConvergenceError(f"GCD did not converge within {GCD_MAX_ITERATIONS} iterations")

    if minuend.has_variables():
        return subtrahend.clone()
    return minuend.clone()
