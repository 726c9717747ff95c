import pytest

from cas import CAS
from coefficient import Coefficient
from errors import ParseError
from polynomial import Polynomial


@pytest.fixture
def cas():
    return CAS()


def test_parse_and_print(cas):
    assert str(cas.parse("6*X + 1")) == "6*X + 1"
    assert cas.simplify("x + x - 1") == "2*x - 1"


def test_parse_error(cas):
    with pytest.raises(ParseError):
        cas.parse("6*X +")


def test_eval(cas):
    assert cas.eval("36*x*y - 6*x - 6*y + 1", {"x": 45468, "y": 63570}) == 104053773133
    assert cas.parse("x^2").eval({"x": 3}) == 9
    assert cas.eval("x^2 + 1", {"x": Coefficient(1j)}) == 0


def test_differentiate(cas):
    assert str(cas.differentiate("4*X^2*Y^4 - 4*X*Y^2 + 1", "X")) == "8*X*Y^4 - 4*Y^2"
    assert cas.parse("x*y").diff("y") == cas.parse("x")


def test_gcd(cas):
    assert str(cas.gcd("6", Polynomial.parse("X + 1"))) == "6"


def test_roots_real(cas):
    roots = cas.roots("X^2 - 1", "X")
    assert roots == pytest.approx([-1, 1])


def test_roots_complex(cas):
    roots = cas.roots("X^2 + 1", "X")
    assert roots == pytest.approx([-1j, 1j])


def test_roots_complex_coefficients(cas):
    # (x - i)(x - 2) = x^2 - (2+i)x + 2i
    roots = cas.roots("x^2 - (2+1j)*x + (2j)", "x")
    assert roots == pytest.approx([1j, 2])


def test_roots_of_constant(cas):
    assert cas.roots("5", "x") == []


def test_roots_requires_univariate(cas):
    with pytest.raises(ValueError):
        cas.roots("x*y + 1", "x")


def test_wrap_rejects_other_types(cas):
    with pytest.raises(TypeError):
        cas.eval(3.5)
