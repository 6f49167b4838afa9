from __future__ import annotations

from abc import abstractmethod
from functools import lru_cache
from math import gcd, isqrt
import re
from typing import List, Optional, Sequence, Tuple

from lina.computation import Computation
from lina.euclidean import EuclideanRing
from lina.exceptions import OperationUndefinedError, ElementNotInvertibleError, ElementParseError, StrategyError
from lina.ring import RingElement
from lina.strategies import Strategy, TRIVIAL_COST, INAPPLICABLE_COST

_decimal_pattern = re.compile(r'-?[0-9]+')


class IntegerElement(RingElement):
    """
    An element of the ring of the integers, Z
    """
    __slots__ = 'value',

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'integer elements must wrap an int, got {value!r}')
        self.value = value

    @staticmethod
    def _values(operands):
        for o in operands:
            if not isinstance(o, IntegerElement):
                raise OperationUndefinedError(f'element {o} is not an integer', o)
            yield o.value

    def add(self, *addends: RingElement) -> IntegerElement:
        return IntegerElement(self.value + sum(self._values(addends)))

    def subtract(self, subtrahend: RingElement) -> IntegerElement:
        other, = self._values((subtrahend,))
        return IntegerElement(self.value - other)

    def multiply(self, *factors: RingElement) -> IntegerElement:
        ret = self.value
        for v in self._values(factors):
            ret *= v
        return IntegerElement(ret)

    def divisible_by(self, divisor: RingElement) -> bool:
        if not isinstance(divisor, IntegerElement) or divisor.is_zero():
            return False
        return self.value % divisor.value == 0

    def divide(self, divisor: RingElement) -> IntegerElement:
        other, = self._values((divisor,))
        if other == 0:
            raise OperationUndefinedError(f'cannot divide {self} by zero', self, divisor)
        if self.value % other:
            raise OperationUndefinedError(f'{self} is not divisible by {divisor}', self, divisor)
        return IntegerElement(self.value // other)

    def invertible(self) -> bool:
        return self.value in (1, -1)

    def inverse(self) -> IntegerElement:
        if not self.invertible():
            raise ElementNotInvertibleError(self, 'only 1 and -1 are invertible over the integers')
        return self

    def negative(self) -> IntegerElement:
        return IntegerElement(-self.value)

    def can_add(self, other: RingElement) -> bool:
        return isinstance(other, IntegerElement)

    def can_multiply(self, other: RingElement) -> bool:
        return isinstance(other, IntegerElement)

    @property
    def ring(self) -> IntegerRing:
        return integer_ring()

    def is_zero(self) -> bool:
        return self.value == 0

    def is_one(self) -> bool:
        return self.value == 1

    def __int__(self):
        return self.value

    def __eq__(self, other):
        if not isinstance(other, IntegerElement):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return str(self.value)


class IntegerRing(EuclideanRing):
    """
    The ring of the integers, Z. Use integer_ring() to get the shared instance.
    """

    @property
    def name(self) -> str:
        return 'Z'

    @property
    def zero(self) -> IntegerElement:
        return IntegerElement(0)

    @property
    def one(self) -> IntegerElement:
        return IntegerElement(1)

    def parse_element(self, text: str) -> IntegerElement:
        stripped = text.strip()
        if not _decimal_pattern.fullmatch(stripped):
            raise ElementParseError(text, 'a decimal integer')
        return IntegerElement(int(stripped))

    def parse_parameters(self, tag: str, parameters: Sequence[str]) -> IntegerElement:
        if tag != 'integer' or len(parameters) != 1:
            return super().parse_parameters(tag, parameters)
        return self.parse_element(parameters[0])

    def contains(self, element: RingElement) -> bool:
        return isinstance(element, RingElement) and element.ring == self

    def coerce(self, element: RingElement) -> IntegerElement:
        ret = element.interpret(self)
        if not isinstance(ret, IntegerElement):
            raise OperationUndefinedError(f'element {element} of ring {element.ring} is not an integer', element)
        return ret

    def degree(self, element: RingElement) -> int:
        element = self.coerce(element)
        if element.is_zero():
            raise OperationUndefinedError('the degree of zero is undefined', element)
        return abs(element.value)

    def remainder_division(self, dividend: RingElement, divisor: RingElement) \
            -> Tuple[IntegerElement, IntegerElement]:
        """
        truncating division, the remainder takes the sign of the dividend
        """
        a = self.coerce(dividend).value
        b = self.coerce(divisor).value
        if b == 0:
            raise OperationUndefinedError(f'cannot divide {dividend} by zero', dividend, divisor)
        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            q = -q
        return IntegerElement(q), IntegerElement(a - q * b)

    def gcd(self, a: RingElement, b: RingElement) -> RingElement:
        return super().gcd(self.coerce(a), self.coerce(b))

    def canonical_unit(self, element: RingElement) -> IntegerElement:
        if self.coerce(element).value < 0:
            return IntegerElement(-1)
        return self.one

    def irreducible(self, element: RingElement) -> bool:
        n = abs(self.coerce(element).value)
        return n <= 1 or is_prime(n)

    def factor(self) -> Computation[List[IntegerElement]]:
        return integer_factorization()

    def __eq__(self, other):
        return isinstance(other, IntegerRing)

    def __hash__(self):
        return hash(IntegerRing)


@lru_cache
def integer_ring() -> IntegerRing:
    """
    :return: the process-wide ring of the integers
    """
    return IntegerRing()


# every composite below 3.3 * 10**24 fails the strong probable prime test for at least one of these bases
_witnesses = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_prime(n: int) -> bool:
    """
    Miller-Rabin primality test, deterministic for n < 3.3 * 10**24

    >>> [p for p in range(20) if is_prime(p)]
    [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if n < 2:
        return False
    for p in _witnesses:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _witnesses:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


class IntegerFactorStrategy(Strategy[List[IntegerElement]]):
    """
    A base class for strategies that factor a single integer. A negative integer is factored into the unit -1
     followed by the prime factors of its absolute value, in ascending order.
    """

    @staticmethod
    def _value(problem) -> Optional[int]:
        if len(problem) != 1 or not isinstance(problem[0], RingElement):
            return None
        try:
            return integer_ring().coerce(problem[0]).value
        except OperationUndefinedError:
            return None

    @abstractmethod
    def accepts(self, n: int) -> bool:
        pass

    @abstractmethod
    def cost(self, n: int) -> int:
        pass

    @abstractmethod
    def prime_factors(self, n: int) -> List[int]:
        """
        :param n: an integer greater than 1
        :return: the prime factors of n, with multiplicity
        """
        pass

    def applies_to(self, *problem) -> bool:
        n = self._value(problem)
        return n is not None and self.accepts(n)

    def expected_cost(self, *problem) -> int:
        n = self._value(problem)
        if n is None or not self.accepts(n):
            return INAPPLICABLE_COST
        return self.cost(n)

    def execute(self, *problem) -> List[IntegerElement]:
        n = self._value(problem)
        if n is None or not self.accepts(n):
            raise OperationUndefinedError(f'strategy {self.name} cannot factor <' + ', '.join(map(str, problem)) + '>',
                                          *problem)
        ret = [IntegerElement(-1)] if n < 0 else []
        ret.extend(IntegerElement(p) for p in sorted(self.prime_factors(abs(n))))
        return ret


class UnitFactorizationStrategy(IntegerFactorStrategy):
    name = 'units'
    description = 'zero and the units of the integers are their own factorization'

    def accepts(self, n: int) -> bool:
        return abs(n) <= 1

    def cost(self, n: int) -> int:
        return TRIVIAL_COST

    def prime_factors(self, n: int) -> List[int]:
        return []

    def execute(self, *problem) -> List[IntegerElement]:
        n = self._value(problem)
        if n is None or not self.accepts(n):
            raise OperationUndefinedError(f'{problem[0] if problem else None} is not zero or a unit', *problem)
        return [IntegerElement(n)]


class TrialDivisionStrategy(IntegerFactorStrategy):
    name = 'trial-division'
    description = 'factor an integer by dividing out every candidate up to its square root'
    # the cost of trial division grows with the bit length of the input
    base_cost = 10

    def accepts(self, n: int) -> bool:
        return abs(n) > 1

    def cost(self, n: int) -> int:
        return min(self.base_cost + abs(n).bit_length(), INAPPLICABLE_COST - 1)

    def prime_factors(self, n: int) -> List[int]:
        ret = []
        while n % 2 == 0:
            ret.append(2)
            n //= 2
        p = 3
        while p * p <= n:
            while n % p == 0:
                ret.append(p)
                n //= p
            p += 2
        if n > 1:
            ret.append(n)
        return ret


class PollardRhoStrategy(IntegerFactorStrategy):
    name = 'pollard-rho'
    description = "factor an integer by Pollard's rho method, splitting off probable primes"
    base_cost = 40
    # the number of polynomials x**2 + c to try before giving up on a composite
    max_attempts = 20

    def accepts(self, n: int) -> bool:
        return abs(n) > 1

    def cost(self, n: int) -> int:
        return self.base_cost

    def _split(self, n: int) -> int:
        """
        :return: a non-trivial divisor of the odd composite n
        """
        root = isqrt(n)
        if root * root == n:
            return root
        for c in range(1, self.max_attempts + 1):
            x = y = 2
            d = 1
            while d == 1:
                x = (x * x + c) % n
                y = (y * y + c) % n
                y = (y * y + c) % n
                d = gcd(abs(x - y), n)
            if d != n:
                return d
        raise StrategyError(self, (IntegerElement(n),))

    def prime_factors(self, n: int) -> List[int]:
        ret = []
        while n % 2 == 0:
            ret.append(2)
            n //= 2
        stack = [n] if n > 1 else []
        while stack:
            m = stack.pop()
            if is_prime(m):
                ret.append(m)
                continue
            d = self._split(m)
            stack.extend((d, m // d))
        return ret


@lru_cache
def integer_factorization() -> Computation[List[IntegerElement]]:
    """
    :return: the process-wide computation factoring integers, open for additional strategies
    """
    return Computation('factor an integer into primes', [
        UnitFactorizationStrategy(),
        TrialDivisionStrategy(),
        PollardRhoStrategy(),
    ])
