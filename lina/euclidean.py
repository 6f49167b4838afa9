"""
Euclidean rings and the generic Euclidean algorithm.

A Euclidean ring R is an integral domain with a degree function d from R \\ {0} into the natural numbers, such that
for every a and nonzero b there exist q, r with a = q*b + r and either r = 0 or d(r) < d(b). The degree function is
implemented by degree(), the division by remainder_division(). Since the degree of each remainder is strictly smaller
than the last, the Euclidean algorithm terminates.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

from lina.ring import Ring, RingElement
from lina import dispatch


class EuclideanRing(Ring, ABC):
    @property
    def is_commutative(self) -> bool:
        return True

    @property
    def is_integral_domain(self) -> bool:
        return True

    @abstractmethod
    def degree(self, element: RingElement) -> int:
        """
        the euclidean degree of a nonzero element

        :raises OperationUndefinedError: if the element is zero, or not an element of the ring
        """
        pass

    @abstractmethod
    def remainder_division(self, dividend: RingElement, divisor: RingElement) -> Tuple[RingElement, RingElement]:
        """
        :return: (quotient, remainder) such that dividend = quotient * divisor + remainder, and the remainder is
         either zero or of smaller degree than divisor
        :raises OperationUndefinedError: if the divisor is zero, or one of the arguments is not an element of the ring
        """
        pass

    def gcd(self, a: RingElement, b: RingElement) -> RingElement:
        """
        a greatest common divisor of a and b by the euclidean algorithm. The result is only determined up to units.
        """
        if a.is_zero():
            return b
        if b.is_zero():
            return a

        if self.degree(a) > self.degree(b):
            dividend, divisor = a, b
        else:
            dividend, divisor = b, a

        _, remainder = self.remainder_division(dividend, divisor)
        return self.gcd(remainder, divisor)

    def lcm(self, a: RingElement, b: RingElement) -> RingElement:
        """
        a least common multiple of a and b, up to units
        """
        gcd = self.gcd(a, b)
        return dispatch.multiply(a.divide(gcd), b)

    def canonical_unit(self, element: RingElement) -> RingElement:
        """
        :return: the unit u such that element / u is the normal representative among the associates of element
        """
        return self.one
