from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from lina.codes import code_function
from lina.computation import Computation, TrivialComputation
from lina.euclidean import EuclideanRing
from lina.exceptions import OperationUndefinedError, ElementNotInvertibleError, ElementParseError, \
    AlgebraicInvariantError
from lina.field import Field
from lina.integers import IntegerRing, integer_ring
from lina.polynomials import PolynomialRing
from lina.ring import Ring, RingElement, interpret
from lina.strategies import FunctionStrategy
from lina.util import split_tagged

logger = logging.getLogger(__name__)


class Fraction(RingElement):
    """
    A formal quotient of two elements of a euclidean ring.

    Fractions are always stored in reduced form: the numerator and denominator are divided by their gcd, and then by
    the canonical unit of the denominator, so that two equal fractions have equal numerators and denominators.
    """

    def __init__(self, numerator: RingElement, denominator: RingElement = None):
        """
        :param numerator: the numerator
        :param denominator: the denominator, defaults to the one element of the numerator's ring
        :raises OperationUndefinedError: if the denominator is zero, if neither operand's ring contains the other, or
         if the coefficient ring is not euclidean
        """
        if denominator is None:
            denominator = numerator.ring.one
        if denominator.is_zero():
            raise OperationUndefinedError(f'the denominator of fraction {numerator}/{denominator} is zero',
                                          numerator, denominator)

        if numerator.ring.contains(denominator):
            ring = numerator.ring
        elif denominator.ring.contains(numerator):
            ring = denominator.ring
        else:
            raise OperationUndefinedError(f'numerator {numerator} of ring {numerator.ring} and denominator'
                                          f' {denominator} of ring {denominator.ring} have no common ring',
                                          numerator, denominator)
        if not isinstance(ring, EuclideanRing):
            raise OperationUndefinedError(f'fractions require a euclidean ring, got {ring}', numerator, denominator)

        numerator = ring.coerce(numerator)
        denominator = ring.coerce(denominator)
        try:
            gcd = ring.gcd(numerator, denominator)
            numerator = numerator.divide(gcd)
            denominator = denominator.divide(gcd)
            unit = ring.canonical_unit(denominator).inverse()
        except (OperationUndefinedError, ElementNotInvertibleError) as e:
            raise AlgebraicInvariantError(f'failed to shorten fraction {numerator}/{denominator}') from e
        if not unit.is_one():
            numerator = numerator.multiply(unit)
            denominator = denominator.multiply(unit)
        if not gcd.is_one():
            logger.debug('shortened fraction by %s to %s/%s', gcd, numerator, denominator)

        self.coefficient_ring: EuclideanRing = ring
        self.numerator = numerator
        self.denominator = denominator

    def _lift(self, other: RingElement) -> Fraction:
        if isinstance(other, Fraction) and other.coefficient_ring == self.coefficient_ring:
            return other
        return Fraction(other, self.coefficient_ring.one)

    def _check(self, operands, verb):
        for o in operands:
            if not self.can_add(o):
                raise OperationUndefinedError(f'cannot {verb} fraction over {self.coefficient_ring}'
                                              f' and element {o} of ring {o.ring}', self, o)

    def add(self, *addends: RingElement) -> Fraction:
        self._check(addends, 'add')
        ret = self
        for a in addends:
            other = self._lift(a)
            ret = Fraction(
                ret.numerator.multiply(other.denominator).add(other.numerator.multiply(ret.denominator)),
                ret.denominator.multiply(other.denominator))
        return ret

    def subtract(self, subtrahend: RingElement) -> Fraction:
        self._check((subtrahend,), 'subtract')
        other = self._lift(subtrahend)
        return Fraction(
            self.numerator.multiply(other.denominator).subtract(other.numerator.multiply(self.denominator)),
            self.denominator.multiply(other.denominator))

    def multiply(self, *factors: RingElement) -> Fraction:
        self._check(factors, 'multiply')
        ret = self
        for f in factors:
            other = self._lift(f)
            ret = Fraction(ret.numerator.multiply(other.numerator), ret.denominator.multiply(other.denominator))
        return ret

    def divide(self, divisor: RingElement) -> Fraction:
        self._check((divisor,), 'divide')
        if divisor.is_zero():
            raise OperationUndefinedError(f'cannot divide {self} by zero', self, divisor)
        return self.multiply(self._lift(divisor).inverse())

    def invertible(self) -> bool:
        return not self.is_zero()

    def inverse(self) -> Fraction:
        if self.is_zero():
            raise ElementNotInvertibleError(self, 'zero is never invertible')
        try:
            return Fraction(self.denominator, self.numerator)
        except OperationUndefinedError as e:
            raise AlgebraicInvariantError(f'reduced fraction {self} failed to invert') from e

    def negative(self) -> Fraction:
        return Fraction(self.numerator.negative(), self.denominator)

    def can_add(self, other: RingElement) -> bool:
        if isinstance(other, Fraction) and other.coefficient_ring == self.coefficient_ring:
            return True
        return isinstance(other, RingElement) and self.coefficient_ring.contains(other)

    def can_multiply(self, other: RingElement) -> bool:
        return self.can_add(other)

    @property
    def ring(self) -> Ring:
        if self.denominator.is_one():
            return self.coefficient_ring
        return QuotientField.over(self.coefficient_ring)

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    def is_one(self) -> bool:
        return self.numerator.is_one() and self.denominator.is_one()

    def interpret(self, ring: Ring) -> RingElement:
        if isinstance(ring, QuotientField) and ring.coefficient_ring == self.coefficient_ring:
            return self
        if self.denominator.is_one():
            return self.numerator.interpret(ring)
        return interpret(self, ring)

    @code_function('numerator', 'get the numerator of the fraction')
    def numerator_function(self) -> Computation[RingElement]:
        return numerator_computation

    @code_function('denominator', 'get the denominator of the fraction')
    def denominator_function(self) -> Computation[RingElement]:
        return denominator_computation

    def __eq__(self, other):
        if isinstance(other, Fraction) and other.coefficient_ring == self.coefficient_ring:
            return self.numerator == other.numerator and self.denominator == other.denominator
        if isinstance(other, RingElement) and self.coefficient_ring.contains(other):
            return self.denominator.is_one() and self.numerator == other
        return NotImplemented

    def __hash__(self):
        if self.denominator.is_one():
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __str__(self):
        return f'fraction[{self.numerator},{self.denominator}]'


def _single_fraction(*problem):
    return len(problem) == 1 and isinstance(problem[0], Fraction)


numerator_computation = TrivialComputation(FunctionStrategy(
    lambda f: f.numerator, applies_to=_single_fraction,
    name='numerator', description='get the numerator of a fraction'))

denominator_computation = TrivialComputation(FunctionStrategy(
    lambda f: f.denominator, applies_to=_single_fraction,
    name='denominator', description='get the denominator of a fraction'))


class QuotientField(Field):
    """
    The field of fractions over an integral domain. Use QuotientField.over to get the rationals for the integers.
    """

    def __init__(self, coefficient_ring: Ring):
        if not coefficient_ring.is_integral_domain:
            raise ValueError(f'quotient fields are only defined over integral domains, {coefficient_ring} is not one')
        self.coefficient_ring = coefficient_ring

    @staticmethod
    @lru_cache
    def over(coefficient_ring: Ring) -> QuotientField:
        """
        :return: the quotient field of coefficient_ring, the shared rationals for the integers
        """
        if isinstance(coefficient_ring, IntegerRing):
            return rationals()
        return QuotientField(coefficient_ring)

    @property
    def name(self) -> str:
        if isinstance(self.coefficient_ring, PolynomialRing):
            return f'{self.coefficient_ring.coefficient_ring.name}(X)'
        return f'quotientField({self.coefficient_ring.name})'

    @property
    def zero(self) -> Fraction:
        return Fraction(self.coefficient_ring.zero)

    @property
    def one(self) -> Fraction:
        return Fraction(self.coefficient_ring.one)

    def parse_element(self, text: str) -> Fraction:
        literal = split_tagged(text)
        if literal is not None and literal.tag == 'fraction':
            return self.parse_parameters(*literal)
        return Fraction(self.coefficient_ring.parse_element(text))

    def parse_parameters(self, tag: str, parameters: Sequence[str]) -> Fraction:
        if tag != 'fraction' or len(parameters) != 2:
            return super().parse_parameters(tag, parameters)
        numerator, denominator = (self.coefficient_ring.parse_element(p) for p in parameters)
        try:
            return Fraction(numerator, denominator)
        except OperationUndefinedError as e:
            raise ElementParseError(f'{tag}[' + ','.join(parameters) + ']', 'a nonzero denominator') from e

    def contains(self, element: RingElement) -> bool:
        if isinstance(element, Fraction):
            return element.coefficient_ring == self.coefficient_ring
        return isinstance(element, RingElement) and self.coefficient_ring.contains(element)

    def coerce(self, element: RingElement) -> Fraction:
        """
        convert element into a fraction of this field, members of the coefficient ring get the denominator one
        """
        if isinstance(element, Fraction) and element.coefficient_ring == self.coefficient_ring:
            return element
        element = element.interpret(self)
        if isinstance(element, Fraction):
            return element
        return Fraction(element, self.coefficient_ring.one)

    def __eq__(self, other):
        return isinstance(other, QuotientField) and other.coefficient_ring == self.coefficient_ring

    def __hash__(self):
        return hash((QuotientField, self.coefficient_ring))


class RationalsField(QuotientField):
    """
    The field of the rational numbers, Q. Use rationals() to get the shared instance.
    """

    def __init__(self):
        super().__init__(integer_ring())

    @property
    def name(self) -> str:
        return 'Q'


@lru_cache
def rationals() -> RationalsField:
    """
    :return: the process-wide field of the rational numbers
    """
    return RationalsField()
