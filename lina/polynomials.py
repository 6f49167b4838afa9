from __future__ import annotations

from functools import lru_cache
from typing import List, Sequence, Tuple

from lina import dispatch
from lina.codes import code_function
from lina.computation import Computation, TrivialComputation, Uncomputation
from lina.euclidean import EuclideanRing
from lina.exceptions import OperationUndefinedError, ElementNotInvertibleError, ElementParseError, \
    InexactDivisionError, NotImplementedOperationError
from lina.field import Field
from lina.ring import Ring, RingElement, interpret
from lina.strategies import Strategy, FunctionStrategy, TRIVIAL_COST
from lina.util import split_tagged


class Polynomial(RingElement):
    """
    A polynomial over a ring, stored as its coefficients, constant term first.

    The coefficients are kept as given and may include trailing zeros; the degree is recomputed from the highest
    nonzero coefficient. Results of arithmetic carry no trailing zeros.
    """

    def __init__(self, coefficient_ring: Ring, *coefficients: RingElement):
        """
        :param coefficient_ring: the ring of the coefficients
        :param coefficients: the coefficients, constant term first. No coefficients make the zero polynomial.
        :raises OperationUndefinedError: if one of the coefficients is not an element of the coefficient ring
        """
        if not coefficients:
            coefficients = (coefficient_ring.zero,)
        self.coefficient_ring = coefficient_ring
        self.coefficients: Tuple[RingElement, ...] = tuple(coefficient_ring.coerce(c) for c in coefficients)

    @classmethod
    def monomial(cls, coefficient_ring: Ring, degree: int, coefficient: RingElement) -> Polynomial:
        """
        create a polynomial of the form coefficient * X**degree
        """
        return cls(coefficient_ring, *([coefficient_ring.zero] * degree), coefficient)

    @classmethod
    def _trimmed(cls, coefficient_ring: Ring, coefficients: Sequence[RingElement]) -> Polynomial:
        end = len(coefficients)
        while end > 1 and coefficients[end - 1].is_zero():
            end -= 1
        return cls(coefficient_ring, *coefficients[:end])

    @property
    def degree(self) -> int:
        """
        the index of the highest nonzero coefficient, or -1 for the zero polynomial
        """
        for i in range(len(self.coefficients) - 1, -1, -1):
            if not self.coefficients[i].is_zero():
                return i
        return -1

    def coefficient(self, index: int) -> RingElement:
        """
        the coefficient of X**index, zero beyond the degree of the polynomial
        """
        if index < 0 or index > self.degree:
            return self.coefficient_ring.zero
        return self.coefficients[index]

    @property
    def leading_coefficient(self) -> RingElement:
        return self.coefficient(self.degree)

    def _lift(self, other: RingElement) -> Polynomial:
        if isinstance(other, Polynomial):
            return other
        return Polynomial(self.coefficient_ring, other)

    def _check(self, operands, verb):
        for o in operands:
            if not self.can_add(o):
                raise OperationUndefinedError(f'cannot {verb} polynomial over {self.coefficient_ring}'
                                              f' and element {o} of ring {o.ring}', self, o)

    def add(self, *addends: RingElement) -> Polynomial:
        self._check(addends, 'add')
        ret = self
        for a in addends:
            other = self._lift(a)
            length = max(ret.degree, other.degree) + 1
            ret = self._trimmed(self.coefficient_ring,
                                [dispatch.add(ret.coefficient(j), other.coefficient(j)) for j in range(length)])
        return ret

    def subtract(self, subtrahend: RingElement) -> Polynomial:
        self._check((subtrahend,), 'subtract')
        other = self._lift(subtrahend)
        length = max(self.degree, other.degree) + 1
        return self._trimmed(self.coefficient_ring,
                             [dispatch.subtract(self.coefficient(j), other.coefficient(j)) for j in range(length)])

    def multiply(self, *factors: RingElement) -> Polynomial:
        self._check(factors, 'multiply')
        ret = self
        for f in factors:
            other = self._lift(f)
            if other.degree == -1 or ret.degree == -1:
                return Polynomial(self.coefficient_ring)
            coefficients = []
            for j in range(ret.degree + other.degree + 1):
                c = self.coefficient_ring.zero
                for k in range(max(0, j - other.degree), min(j, ret.degree) + 1):
                    c = dispatch.add(c, dispatch.multiply(ret.coefficient(k), other.coefficient(j - k)))
                coefficients.append(c)
            ret = self._trimmed(self.coefficient_ring, coefficients)
        return ret

    def divide(self, divisor: RingElement) -> Polynomial:
        """
        divide by a scalar, or by a polynomial through long division

        :raises InexactDivisionError: if the polynomial division leaves a nonzero remainder
        """
        self._check((divisor,), 'divide')
        if not isinstance(divisor, Polynomial) and divisor.invertible():
            return self.multiply(divisor.inverse())

        div = self._lift(divisor)
        if div.degree == -1:
            raise OperationUndefinedError(f'cannot divide {self} by zero', self, divisor)

        quotient = Polynomial(self.coefficient_ring)
        remainder = self
        while remainder.degree >= div.degree:
            try:
                factor = self.coefficient_ring.coerce(remainder.leading_coefficient).divide(div.leading_coefficient)
            except OperationUndefinedError as e:
                raise InexactDivisionError(self, divisor, remainder) from e
            term = Polynomial.monomial(self.coefficient_ring, remainder.degree - div.degree, factor)
            quotient = quotient.add(term)
            remainder = remainder.subtract(div.multiply(term))

        if not remainder.is_zero():
            raise InexactDivisionError(self, divisor, remainder)
        return quotient

    def invertible(self) -> bool:
        return self.degree == 0 and self.coefficients[0].invertible()

    def inverse(self) -> Polynomial:
        if self.degree != 0:
            raise ElementNotInvertibleError(self, 'only nonzero polynomials of degree 0 can be invertible')
        return Polynomial(self.coefficient_ring, self.coefficients[0].inverse())

    def negative(self) -> Polynomial:
        return Polynomial(self.coefficient_ring, *(c.negative() for c in self.coefficients))

    def can_add(self, other: RingElement) -> bool:
        if isinstance(other, Polynomial):
            return other.coefficient_ring == self.coefficient_ring
        return self.coefficient_ring.contains(other)

    def can_multiply(self, other: RingElement) -> bool:
        return self.can_add(other)

    @property
    def ring(self) -> PolynomialRing:
        return PolynomialRing.over(self.coefficient_ring)

    def is_zero(self) -> bool:
        return self.degree == -1

    def is_one(self) -> bool:
        return self.degree == 0 and self.coefficients[0].is_one()

    def interpret(self, ring: Ring) -> RingElement:
        if ring == self.ring:
            return self
        if self.degree <= 0:
            return self.coefficient(0).interpret(ring)
        return interpret(self, ring)

    def evaluate(self, x: RingElement) -> RingElement:
        """
        evaluate the polynomial at x by Horner's method
        """
        ret = self.leading_coefficient
        for i in range(self.degree - 1, -1, -1):
            ret = dispatch.add(dispatch.multiply(ret, x), self.coefficients[i])
        return ret

    __call__ = evaluate

    @code_function('degree', 'compute the degree of the polynomial')
    def degree_function(self) -> Computation[int]:
        return degree_computation

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            if other.coefficient_ring != self.coefficient_ring:
                # constant polynomials over different rings compare by their constant terms
                return self.degree <= 0 and other.degree <= 0 and self.coefficient(0) == other.coefficient(0)
            degree = self.degree
            return degree == other.degree \
                and all(self.coefficients[i] == other.coefficients[i] for i in range(degree + 1))
        if isinstance(other, RingElement) and self.degree <= 0 and self.coefficient_ring.contains(other):
            return self.coefficient(0) == other
        return NotImplemented

    def __hash__(self):
        degree = self.degree
        if degree <= 0:
            return hash(self.coefficient(0))
        return hash(self.coefficients[:degree + 1])

    def __str__(self):
        return 'polynomial[' + ','.join(str(c) for c in self.coefficients) + ']'


degree_computation = TrivialComputation(FunctionStrategy(
    lambda p: p.degree, applies_to=lambda *p: len(p) == 1 and isinstance(p[0], Polynomial),
    name='degree', description='compute the degree of a polynomial'))


class PolynomialRing(Ring):
    """
    The ring of polynomials over a ring. Polynomial rings over fields are euclidean, use PolynomialRing.over to get a
     FieldPolynomialRing where possible.
    """

    def __init__(self, coefficient_ring: Ring):
        self.coefficient_ring = coefficient_ring

    @staticmethod
    @lru_cache
    def over(coefficient_ring: Ring) -> PolynomialRing:
        """
        :return: the polynomial ring over coefficient_ring, a FieldPolynomialRing if coefficient_ring is a field
        """
        if isinstance(coefficient_ring, Field):
            return FieldPolynomialRing(coefficient_ring)
        return PolynomialRing(coefficient_ring)

    @property
    def name(self) -> str:
        return f'{self.coefficient_ring.name}[X]'

    @property
    def zero(self) -> Polynomial:
        return Polynomial(self.coefficient_ring)

    @property
    def one(self) -> Polynomial:
        return Polynomial(self.coefficient_ring, self.coefficient_ring.one)

    @property
    def variable(self) -> Polynomial:
        """
        the polynomial X
        """
        return Polynomial(self.coefficient_ring, self.coefficient_ring.zero, self.coefficient_ring.one)

    @property
    def is_commutative(self) -> bool:
        return self.coefficient_ring.is_commutative

    @property
    def is_integral_domain(self) -> bool:
        return self.coefficient_ring.is_integral_domain

    def parse_element(self, text: str) -> Polynomial:
        literal = split_tagged(text)
        if literal is None:
            raise ElementParseError(text, "the form 'polynomial[coeff0,coeff1,...]'")
        return self.parse_parameters(*literal)

    def parse_parameters(self, tag: str, parameters: Sequence[str]) -> Polynomial:
        if tag != 'polynomial' or not parameters:
            return super().parse_parameters(tag, parameters)
        return Polynomial(self.coefficient_ring, *(self.coefficient_ring.parse_element(p) for p in parameters))

    def contains(self, element: RingElement) -> bool:
        if isinstance(element, Polynomial):
            return element.coefficient_ring == self.coefficient_ring
        return isinstance(element, RingElement) and self.coefficient_ring.contains(element)

    def coerce(self, element: RingElement) -> Polynomial:
        """
        convert element into a polynomial of this ring, scalars become constant polynomials
        """
        if not (isinstance(element, Polynomial) and element.coefficient_ring == self.coefficient_ring):
            element = element.interpret(self)
        if isinstance(element, Polynomial):
            if element.coefficient_ring != self.coefficient_ring:
                raise OperationUndefinedError(f'polynomial {element} over {element.coefficient_ring}'
                                              f' is not a member of {self}', element)
            return element
        return Polynomial(self.coefficient_ring, element)

    def irreducible(self, element: RingElement) -> bool:
        raise NotImplementedOperationError(f'{type(self).__name__} {self} does not know about irreducible elements',
                                           element)

    def factor(self) -> Computation[List[RingElement]]:
        return Uncomputation(f'{type(self).__name__} {self} does not know about factorization')

    def __eq__(self, other):
        return isinstance(other, PolynomialRing) and other.coefficient_ring == self.coefficient_ring

    def __hash__(self):
        return hash((PolynomialRing, self.coefficient_ring))


class LinearFactorStrategy(Strategy[List[Polynomial]]):
    """
    Polynomials of degree at most 1 over a field are irreducible
    """
    name = 'linear'
    description = 'factor a polynomial of degree at most one'

    def __init__(self, ring: FieldPolynomialRing):
        self.ring = ring

    def applies_to(self, *problem) -> bool:
        if len(problem) != 1 or not isinstance(problem[0], RingElement):
            return False
        try:
            return self.ring.coerce(problem[0]).degree <= 1
        except OperationUndefinedError:
            return False

    def expected_cost(self, *problem) -> int:
        return TRIVIAL_COST

    def execute(self, element) -> List[Polynomial]:
        return [self.ring.coerce(element)]


@lru_cache
def polynomial_factorization(ring: FieldPolynomialRing) -> Computation[List[Polynomial]]:
    """
    :return: the process-wide computation factoring polynomials of ring, open for additional strategies
    """
    return Computation(f'factor a polynomial over {ring.coefficient_ring}', [LinearFactorStrategy(ring)])


class FieldPolynomialRing(PolynomialRing, EuclideanRing):
    """
    The ring of polynomials over a field, which is euclidean with the polynomial degree as degree function
    """

    def __init__(self, coefficient_ring: Field):
        if not isinstance(coefficient_ring, Field):
            raise TypeError(f'{type(self).__name__} requires a field, try PolynomialRing instead for {coefficient_ring}')
        super().__init__(coefficient_ring)

    def degree(self, element: RingElement) -> int:
        p = self.coerce(element)
        if p.is_zero():
            raise OperationUndefinedError('the degree of zero is undefined', element)
        return p.degree

    def remainder_division(self, dividend: RingElement, divisor: RingElement) -> Tuple[Polynomial, Polynomial]:
        remainder = self.coerce(dividend)
        div = self.coerce(divisor)
        if div.is_zero():
            raise OperationUndefinedError(f'cannot divide {dividend} by zero', dividend, divisor)

        quotient = self.zero
        while remainder.degree >= div.degree:
            factor = remainder.leading_coefficient.divide(div.leading_coefficient)
            term = Polynomial.monomial(self.coefficient_ring, remainder.degree - div.degree, factor)
            remainder = remainder.subtract(term.multiply(div))
            quotient = quotient.add(term)

        return quotient, remainder

    def gcd(self, a: RingElement, b: RingElement) -> Polynomial:
        return super().gcd(self.coerce(a), self.coerce(b))

    def canonical_unit(self, element: RingElement) -> Polynomial:
        """
        the leading coefficient, so that the normal associate is monic
        """
        p = self.coerce(element)
        if p.is_zero():
            return self.one
        return Polynomial(self.coefficient_ring, p.leading_coefficient)

    def irreducible(self, element: RingElement) -> bool:
        if self.coerce(element).degree <= 1:
            return True
        return super().irreducible(element)

    def factor(self) -> Computation[List[Polynomial]]:
        return polynomial_factorization(self)
