from pytest import raises

from lina import IntegerElement, Polynomial, PolynomialRing, Fraction, integer_ring, OperationUndefinedError, \
    InexactDivisionError
from lina import dispatch
from lina.ring import interpret

Z = integer_ring()
Zx = PolynomialRing.over(Z)


def zpoly(*coefficients):
    return Polynomial(Z, *(IntegerElement(c) for c in coefficients))


def test_candidates():
    p = zpoly(1, 2)
    three = IntegerElement(3)
    assert list(dispatch.add.candidates(three, p)) == [(p, three)]
    assert list(dispatch.add.candidates(p, three)) == [(p, three)]
    assert list(dispatch.multiply.candidates(three, three)) == [(three, three), (three, three)]


def test_get_default():
    half = Fraction(IntegerElement(1), IntegerElement(2))
    assert dispatch.add.get(zpoly(1), half, default=None) is None
    assert dispatch.add.get(IntegerElement(1), zpoly(1)) == zpoly(2)


def test_fold():
    assert dispatch.add(IntegerElement(1)) == IntegerElement(1)
    assert dispatch.add(IntegerElement(1), zpoly(0, 1), IntegerElement(2)) == zpoly(3, 1)
    assert dispatch.multiply(IntegerElement(2), zpoly(0, 1), zpoly(0, 1)) == zpoly(0, 0, 2)


def test_error_names_both_rings():
    half = Fraction(IntegerElement(1), IntegerElement(2))
    with raises(OperationUndefinedError) as e:
        dispatch.multiply(zpoly(1, 1), half)
    assert 'Z[X]' in str(e.value)
    assert 'Q' in str(e.value)
    assert e.value.operands == (zpoly(1, 1), half)


def test_subtract_swapped():
    assert dispatch.subtract(IntegerElement(5), zpoly(1, 1)) == zpoly(4, -1)
    with raises(OperationUndefinedError):
        dispatch.subtract(zpoly(1), Fraction(IntegerElement(1), IntegerElement(2)))


def test_divide_swapped():
    assert dispatch.divide(IntegerElement(6), zpoly(-1)) == zpoly(-6)
    assert dispatch.divide(IntegerElement(6), zpoly(2)) == zpoly(3)
    assert IntegerElement(6) / zpoly(2) == zpoly(3)
    assert dispatch.divide(IntegerElement(0), zpoly(1, 1)) == Zx.zero
    assert IntegerElement(0) / zpoly(1, 1) == IntegerElement(0)
    with raises(InexactDivisionError):
        dispatch.divide(IntegerElement(7), zpoly(2))
    with raises(OperationUndefinedError):
        IntegerElement(6) / zpoly(1, 1)
    with raises(OperationUndefinedError):
        dispatch.divide(IntegerElement(6), Zx.zero)


def test_default_interpret():
    assert interpret(Zx.zero, Z) == Z.zero
    assert interpret(Zx.one, Z) == Z.one
    assert interpret(IntegerElement(5), Z) == IntegerElement(5)
    with raises(OperationUndefinedError):
        interpret(zpoly(1, 1), Z)


def test_ring_helpers():
    assert Z.add(IntegerElement(1), IntegerElement(2), IntegerElement(3)) == IntegerElement(6)
    assert Z.multiply(IntegerElement(2), IntegerElement(3)) == IntegerElement(6)
    assert Z.subtract(IntegerElement(2), IntegerElement(3)) == IntegerElement(-1)
    assert Z.divide(IntegerElement(6), IntegerElement(3)) == IntegerElement(2)
