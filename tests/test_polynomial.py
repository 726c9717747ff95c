import numpy as np
import pytest

from coefficient import Coefficient
from errors import UnboundVariableError
from polynomial import Polynomial
from term import Term


def poly(text):
    return Polynomial.parse(text)


def test_evaluate():
    p = poly("36*x*y - 6*x - 6*y + 1")
    actual = p.evaluate({"x": 45468, "y": 63570})
    assert actual == complex(104053773133, 0)


def test_evaluate_accepts_pairs():
    p = poly("36*x*y - 6*x - 6*y + 1")
    assert p.evaluate([("x", 45468), ("y", 63570)]) == 104053773133


def test_evaluate_complex_values():
    p = poly("x^2 + 1")
    assert p.evaluate({"x": 1j}) == 0
    assert poly("(2j)*x").evaluate({"x": 1j}) == -2


def test_evaluate_numpy_arrays():
    p = poly("x^2*y + 1")
    result = p.evaluate({"x": np.array([0, 1, 2]), "y": np.array([5, 5, -1])})
    np.testing.assert_allclose(result, [1, 6, -3])


def test_evaluate_coefficient_bindings():
    p = poly("x^2 + 1")
    assert p.evaluate({"x": Coefficient(2)}) == 5
    assert p.evaluate({"x": Coefficient(1j)}) == 0


def test_evaluate_zero_polynomial():
    assert poly("0").evaluate() == 0


def test_evaluate_unbound():
    with pytest.raises(UnboundVariableError):
        poly("x + y").evaluate({"x": 1})


def test_degree():
    assert poly("x^2*y + x^4 + 3").degree() == 4
    assert poly("7").degree() == 0
    assert Polynomial().degree() == 0


def test_has_variables():
    assert poly("x + 1").has_variables()
    assert not poly("5").has_variables()
    assert not Polynomial().has_variables()


def test_max_coefficient():
    assert poly("2*x - 7*y + 100").max_coefficient() == -7
    assert poly("5").max_coefficient() == Coefficient(-1)
    assert Polynomial().max_coefficient() == -1


def test_max_coefficient_uses_magnitude():
    assert poly("(3+4j)*x + 4*y").max_coefficient() == complex(3, 4)


def test_construction_sorts_and_drops_zeros():
    p = Polynomial([Term(1, {}), Term(0, {"x": 3}), Term(2, {"x": 1}), Term(-5, {"x": 2})])
    assert str(p) == "-5*x^2 + 2*x + 1"
    assert all(not t.is_zero() for t in p.terms)


def test_construction_copies_terms():
    t = Term(2, {"x": 1})
    p = Polynomial([t])
    assert p.terms[0] == t
    assert p.terms[0] is not t


def test_ordering_is_idempotent():
    p = poly("3*X^2*Y^3 + 6*X*Y^4 + X^3*Y^2 + 4*X^5 - 6*X^2*Y + 3*X*Y*Z - 5*X^2 + 3*Y^3 + 24*X*Y - 4")
    assert Polynomial(p.terms) == p
    assert str(poly(str(p))) == str(p)
    q = p.clone()
    q.order_monomials()
    assert q.terms == p.terms


def test_clone():
    p = poly("w^2*x*y + w*x + w*y + 1")
    q = p.clone()
    assert q == p
    assert q is not p
    assert all(a is not b for a, b in zip(p.terms, q.terms))


@pytest.mark.parametrize(
    "first, second",
    [
        ("x + y", "y + x"),
        ("2*x - 2*y", "-2*y + 2*x"),
        ("x*y - x - y + 1", "1 - y - x + y*x"),
        ("a*b*c - a*b*d", "-a*b*d + c*b*a"),
        ("(1+1j)*x + (1-1j)*y", "(1-1j)*y + (1+1j)*x"),
    ],
)
def test_equal_content_is_equal_regardless_of_term_order(first, second):
    assert poly(first) == poly(second)
    assert str(poly(first)) == str(poly(second))


def test_equality():
    assert poly("x + 1") == poly("1 + x")
    assert poly("x + 1") != poly("x + 2")
    assert poly("x*y") != poly("x*y + 1")
    assert Polynomial() == poly("0")
    assert Polynomial() == poly("x - x")


def test_zero_prints_as_zero():
    assert str(Polynomial()) == "0"


def test_variables():
    assert poly("z*x + y^2 + 1").variables() == ["x", "y", "z"]
    assert poly("3").variables() == []


def test_univariate_coeffs():
    p = poly("2*X^3 - X + 5")
    assert p.is_univariate("X")
    assert p.to_univariate_coeffs("X") == [5, -1, 0, 2]
    assert poly("X*Y").to_univariate_coeffs("X") == []
    assert poly("7").to_univariate_coeffs("X") == [7]
    assert Polynomial().to_univariate_coeffs("X") == [0]


def test_degree_var():
    p = poly("x^3*y + y^2")
    assert p.degree_var("x") == 3
    assert p.degree_var("y") == 2
    assert p.degree_var("z") == 0
    assert Polynomial().degree_var("x") == 0


def test_constant_and_variable():
    assert str(Polynomial.constant(3)) == "3"
    assert str(Polynomial.variable("q")) == "q"


def test_operators():
    x = Polynomial.variable("x")
    one = Polynomial.constant(1)
    assert str((x + one) * (x - one)) == "x^2 - 1"
    assert str((x + one) ** 2) == "x^2 + 2*x + 1"
    assert str(-(x - one)) == "-x + 1"
    assert str(poly("6*x*y + 6*x") / poly("6*x")) == "y + 1"
    assert str(poly("x^3*y").derivative("x")) == "3*x^2*y"
