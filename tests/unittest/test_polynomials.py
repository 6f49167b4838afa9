from pytest import raises, mark

from lina import IntegerElement, Polynomial, PolynomialRing, FieldPolynomialRing, Fraction, integer_ring, rationals, \
    OperationUndefinedError, InexactDivisionError, NotImplementedOperationError, ElementNotInvertibleError, \
    NoStrategyError

Z = integer_ring()
Q = rationals()
Zx = PolynomialRing.over(Z)
Qx = PolynomialRing.over(Q)


def zpoly(*coefficients):
    return Polynomial(Z, *(IntegerElement(c) for c in coefficients))


def qpoly(*coefficients):
    return Polynomial(Q, *(IntegerElement(c) if isinstance(c, int) else c for c in coefficients))


def test_rings():
    assert type(Zx) is PolynomialRing
    assert isinstance(Qx, FieldPolynomialRing)
    assert PolynomialRing.over(Z) is Zx
    assert Zx == PolynomialRing(Z)
    assert hash(Zx) == hash(PolynomialRing(Z))
    assert Zx != Qx
    assert Zx.name == 'Z[X]'
    assert Qx.name == 'Q[X]'
    assert Zx.is_integral_domain and Zx.is_commutative
    with raises(TypeError):
        FieldPolynomialRing(Z)


def test_degree():
    assert zpoly(1, 2).degree == 1
    assert zpoly(1, 0, 0).degree == 0
    assert zpoly(0, 0).degree == -1
    assert Polynomial(Z).degree == -1
    assert Zx.zero.is_zero()
    assert Zx.one.is_one()


def test_trailing_zeros():
    p = zpoly(1, 2, 0)
    assert p.coefficients == (IntegerElement(1), IntegerElement(2), IntegerElement(0))
    assert p == zpoly(1, 2)
    assert hash(p) == hash(zpoly(1, 2))
    assert (p + zpoly(0, 0, 0)).coefficients == (IntegerElement(1), IntegerElement(2))


def test_coefficient():
    p = zpoly(1, 2, 0)
    assert p.coefficient(0) == IntegerElement(1)
    assert p.coefficient(2) == Z.zero
    assert p.coefficient(10) == Z.zero
    assert p.leading_coefficient == IntegerElement(2)


def test_coefficients_coerced():
    p = qpoly(1, Fraction(IntegerElement(1), IntegerElement(2)))
    assert isinstance(p.coefficients[0], Fraction)
    with raises(OperationUndefinedError):
        Polynomial(Z, Fraction(IntegerElement(1), IntegerElement(2)))


@mark.parametrize('p', [zpoly(1, 2), zpoly(0), zpoly(-3, 0, 5)])
def test_identities(p):
    assert p + Zx.zero == p
    assert p * Zx.one == p
    assert p.add(Z.zero) == p
    assert p.multiply(Z.one) == p


def test_arithmetic():
    assert zpoly(1, 2) + zpoly(3, 4, 5) == zpoly(4, 6, 5)
    assert zpoly(1, 2) - zpoly(1, 2, 5) == zpoly(0, 0, -5)
    assert zpoly(1, 1) * zpoly(-1, 1) == zpoly(-1, 0, 1)
    assert zpoly(1, 1) * Zx.zero == Zx.zero
    assert -zpoly(1, -2) == zpoly(-1, 2)
    assert zpoly(1).add(zpoly(0, 1), zpoly(0, 0, 1)) == zpoly(1, 1, 1)


def test_scalar_operands():
    p = zpoly(1, 2)
    assert p + IntegerElement(3) == zpoly(4, 2)
    assert p * IntegerElement(3) == zpoly(3, 6)
    assert p - IntegerElement(1) == zpoly(0, 2)


def test_swapped_operand_dispatch():
    p = zpoly(1, 2)
    assert not IntegerElement(3).can_add(p)
    assert p.can_add(IntegerElement(3))
    assert IntegerElement(3) + p == zpoly(4, 2)
    assert IntegerElement(3) * p == zpoly(3, 6)
    assert IntegerElement(1) - p == zpoly(0, -2)
    assert Z.add(IntegerElement(1), p, IntegerElement(2)) == zpoly(4, 2)
    assert Z.subtract(IntegerElement(1), p) == zpoly(0, -2)


def test_incompatible_operands():
    p = zpoly(1, 2)
    half = Fraction(IntegerElement(1), IntegerElement(2))
    with raises(OperationUndefinedError):
        Z.add(p, half)
    with raises(TypeError):
        p + half
    with raises(OperationUndefinedError):
        p.add(qpoly(1))


def test_division():
    quotient = qpoly(-1, 0, 1) / qpoly(1, 1)
    assert quotient == qpoly(-1, 1)
    assert Qx.parse_element('polynomial[-1,0,1]') / Qx.parse_element('polynomial[1,1]') \
        == Qx.parse_element('polynomial[-1,1]')
    assert zpoly(-1, 0, 1) / zpoly(1, 1) == zpoly(-1, 1)


def test_scalar_division():
    assert qpoly(2, 4) / IntegerElement(2) == qpoly(1, 2)
    assert qpoly(1, 2) / Fraction(IntegerElement(1), IntegerElement(2)) == qpoly(2, 4)
    assert zpoly(2, 4) / IntegerElement(2) == zpoly(1, 2)
    with raises(OperationUndefinedError):
        zpoly(1, 2) / IntegerElement(2)


def test_inexact_division():
    with raises(InexactDivisionError) as e:
        qpoly(1, 0, 1) / qpoly(1, 1)
    assert e.value.remainder == qpoly(2)
    assert not qpoly(1, 0, 1).divisible_by(qpoly(1, 1))


def test_inexact_division_over_integers():
    with raises(InexactDivisionError) as e:
        zpoly(1, 1) / zpoly(0, 2)
    assert e.value.remainder == zpoly(1, 1)
    with raises(InexactDivisionError) as e:
        zpoly(1, 2) / IntegerElement(2)
    assert e.value.remainder == zpoly(1)
    assert not zpoly(1, 1).divisible_by(zpoly(0, 2))


@mark.parametrize('divisor', [Zx.zero, IntegerElement(0), zpoly(0, 0)])
def test_divide_by_zero(divisor):
    with raises(OperationUndefinedError):
        zpoly(1, 2) / divisor


def test_divide_by_zero_over_field():
    with raises(OperationUndefinedError):
        qpoly(1, 2) / Qx.zero
    with raises(OperationUndefinedError):
        Qx.remainder_division(qpoly(1, 2), Qx.zero)


def test_inverse():
    assert qpoly(2).inverse() == qpoly(Fraction(IntegerElement(1), IntegerElement(2)))
    assert zpoly(-1).inverse() == zpoly(-1)
    assert not zpoly(1, 1).invertible()
    with raises(ElementNotInvertibleError):
        zpoly(1, 1).inverse()
    with raises(ElementNotInvertibleError):
        Zx.zero.inverse()
    with raises(ElementNotInvertibleError):
        zpoly(2).inverse()


def test_constant_equals_scalar():
    assert zpoly(3) == IntegerElement(3)
    assert IntegerElement(3) == zpoly(3, 0)
    assert hash(zpoly(3)) == hash(IntegerElement(3))
    assert zpoly(3, 1) != IntegerElement(3)


def test_constants_equal_across_rings():
    assert qpoly(1) == IntegerElement(1) == zpoly(1)
    assert qpoly(1) == zpoly(1)
    assert zpoly(1, 0) == qpoly(1)
    assert hash(qpoly(1)) == hash(zpoly(1))
    assert qpoly(1, 1) != zpoly(1, 1)
    assert qpoly(2) != zpoly(1)


def test_interpret():
    three = zpoly(3).interpret(Z)
    assert isinstance(three, IntegerElement)
    assert three == IntegerElement(3)
    assert zpoly(1, 1).interpret(Zx) == zpoly(1, 1)
    with raises(OperationUndefinedError):
        zpoly(1, 1).interpret(Z)
    assert Zx.coerce(IntegerElement(4)) == zpoly(4)
    assert isinstance(Zx.coerce(IntegerElement(4)), Polynomial)


def test_evaluate():
    p = zpoly(-1, 0, 1)
    assert p.evaluate(IntegerElement(3)) == IntegerElement(8)
    assert p(IntegerElement(0)) == IntegerElement(-1)
    assert Zx.zero(IntegerElement(5)) == Z.zero


def test_monomial_and_variable():
    assert Polynomial.monomial(Z, 2, IntegerElement(3)) == zpoly(0, 0, 3)
    assert Zx.variable * Zx.variable == Polynomial.monomial(Z, 2, Z.one)


def test_string_round_trip():
    p = zpoly(1, -2, 3)
    assert str(p) == 'polynomial[1,-2,3]'
    assert Zx.parse_element(str(p)) == p
    q = qpoly(Fraction(IntegerElement(1), IntegerElement(2)), 3)
    assert str(q) == 'polynomial[fraction[1,2],fraction[3,1]]'
    assert Qx.parse_element(str(q)) == q
    assert Qx.parse_element('polynomial[1,3]') == qpoly(1, 3)


@mark.parametrize('text', ['1', 'polynomial[]', 'polynomial[1,a]', 'fraction[1,2]'])
def test_parse_failures(text):
    with raises(ValueError):
        Zx.parse_element(text)


@mark.parametrize('a, b', [
    ((-1, 0, 1), (1, 1)),
    ((1, 0, 1), (1, 1)),
    ((0, 0, 0, 1), (3, 1)),
    ((5,), (1, 2, 3)),
])
def test_remainder_division(a, b):
    a = qpoly(*a)
    b = qpoly(*b)
    q, r = Qx.remainder_division(a, b)
    assert q.multiply(b).add(r) == a
    assert r.is_zero() or Qx.degree(r) < Qx.degree(b)


def test_field_degree():
    assert Qx.degree(qpoly(1, 1)) == 1
    assert Qx.degree(qpoly(3)) == 0
    with raises(OperationUndefinedError):
        Qx.degree(Qx.zero)


def test_gcd():
    a = qpoly(-1, 0, 1)
    b = qpoly(1, 2, 1)
    g = Qx.gcd(a, b)
    assert Qx.degree(g) == 1
    assert a.divisible_by(g)
    assert b.divisible_by(g)
    lcm = Qx.lcm(a, b)
    assert Qx.degree(lcm) == 3
    assert lcm.divisible_by(a) and lcm.divisible_by(b)


def test_canonical_unit():
    assert Qx.canonical_unit(qpoly(2, 4)) == qpoly(4)
    assert (qpoly(2, 4) / Qx.canonical_unit(qpoly(2, 4))).leading_coefficient.is_one()


def test_irreducible():
    assert Qx.irreducible(qpoly(1, 1))
    assert Qx.irreducible(qpoly(3))
    with raises(NotImplementedOperationError):
        Qx.irreducible(qpoly(1, 0, 1))
    with raises(NotImplementedOperationError):
        Zx.irreducible(zpoly(1, 1))


def test_factor():
    with raises(NoStrategyError):
        Zx.factor()(zpoly(1, 1))
    assert Qx.factor()(qpoly(1, 1)) == [qpoly(1, 1)]
    assert Qx.factor() is Qx.factor()
    with raises(NoStrategyError):
        Qx.factor()(qpoly(-1, 0, 1))


def test_degree_code_function():
    p = zpoly(1, 2, 3)
    assert set(p.instance_functions()) == {'factor', 'inverse', 'negative', 'degree'}
    assert p.instance_function('degree')(p) == 2
    assert p.instance_function('negative')(p) == zpoly(-1, -2, -3)
