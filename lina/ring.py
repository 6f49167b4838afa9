from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from lina import dispatch
from lina.codes import CodeValue, code_function
from lina.computation import Computation, TrivialComputation
from lina.exceptions import OperationUndefinedError, ElementParseError
from lina.strategies import FunctionStrategy
from lina.util import TaggedLiteral


class RingElement(CodeValue, ABC):
    """
    An immutable element of a ring. All operations return new elements.

    Due to the inclusion hierarchy of rings, elements of different rings may still be combined, for example a
    polynomial and a scalar of its coefficient ring. An element's can_add and can_multiply predicates decide which
    operands it accepts, and need not be symmetric; the operators, and the Ring.add and Ring.multiply helpers, try
    both operand orders.
    """

    @abstractmethod
    def add(self, *addends: RingElement) -> RingElement:
        """
        :raises OperationUndefinedError: if one of the addends is not accepted by this element
        """
        pass

    @abstractmethod
    def subtract(self, subtrahend: RingElement) -> RingElement:
        """
        :raises OperationUndefinedError: if the subtrahend is not accepted by this element
        """
        pass

    @abstractmethod
    def multiply(self, *factors: RingElement) -> RingElement:
        """
        :raises OperationUndefinedError: if one of the factors is not accepted by this element
        """
        pass

    @abstractmethod
    def divide(self, divisor: RingElement) -> RingElement:
        """
        :raises OperationUndefinedError: if the divisor is zero, or the quotient does not exist or is unknown
        """
        pass

    def divisible_by(self, divisor: RingElement) -> bool:
        """
        :return: whether this element is divisible by divisor, False also if the answer is unknown
        """
        try:
            self.divide(divisor)
        except OperationUndefinedError:
            return False
        return True

    @abstractmethod
    def invertible(self) -> bool:
        """
        :return: whether the element is a unit, False also if the answer is unknown
        """
        pass

    @abstractmethod
    def inverse(self) -> RingElement:
        """
        :raises ElementNotInvertibleError: if the element is not a unit
        """
        pass

    @abstractmethod
    def negative(self) -> RingElement:
        """
        the additive inverse, which every ring element has
        """
        pass

    @abstractmethod
    def can_add(self, other: RingElement) -> bool:
        pass

    @abstractmethod
    def can_multiply(self, other: RingElement) -> bool:
        pass

    @property
    @abstractmethod
    def ring(self) -> Ring:
        """
        the ring this element considers itself a member of, agnostic of the ring inclusion hierarchy
        """
        pass

    @abstractmethod
    def is_zero(self) -> bool:
        pass

    @abstractmethod
    def is_one(self) -> bool:
        pass

    def interpret(self, ring: Ring) -> RingElement:
        """
        interpret this element as an element of another ring. The default only re-interprets the zero and one
         elements.

        :raises OperationUndefinedError: if the interpretation is impossible or unknown
        """
        return interpret(self, ring)

    __add__ = dispatch.add.op()
    __radd__ = dispatch.add.rop()
    __mul__ = dispatch.multiply.op()
    __rmul__ = dispatch.multiply.rop()
    __sub__ = dispatch.subtract_op
    __rsub__ = dispatch.rsubtract_op
    __truediv__ = dispatch.divide_op
    __rtruediv__ = dispatch.rdivide_op

    def __neg__(self):
        return self.negative()

    def __repr__(self):
        return f'{type(self).__name__}({self})'

    @code_function('factor', 'factor the element into irreducible factors')
    def factor_function(self) -> Computation[List[RingElement]]:
        return self.ring.factor()

    @code_function('inverse', 'compute the multiplicative inverse')
    def inverse_function(self) -> Computation[RingElement]:
        return inversion

    @code_function('negative', 'compute the additive inverse')
    def negative_function(self) -> Computation[RingElement]:
        return negation


def interpret(element: RingElement, ring: Ring) -> RingElement:
    """
    interpret a ring element as an element of another ring, admitting only members of the ring and the zero and one
     elements
    """
    if ring.contains(element):
        return element
    if element.is_zero():
        return ring.zero
    if element.is_one():
        return ring.one
    raise OperationUndefinedError(f'cannot interpret element {element} of ring {element.ring}'
                                  f' as element of ring {ring} by default', element)


class Ring(ABC):
    """
    A ring, identified by its name
    """

    add = staticmethod(dispatch.add)
    multiply = staticmethod(dispatch.multiply)
    subtract = staticmethod(dispatch.subtract)
    divide = staticmethod(dispatch.divide)

    @property
    @abstractmethod
    def name(self) -> str:
        """
        a short representation of the ring, such as "Z" for the integers
        """
        pass

    @property
    @abstractmethod
    def zero(self) -> RingElement:
        pass

    @property
    @abstractmethod
    def one(self) -> RingElement:
        pass

    @property
    @abstractmethod
    def is_commutative(self) -> bool:
        pass

    @property
    @abstractmethod
    def is_integral_domain(self) -> bool:
        """
        whether the ring is commutative and without non-trivial divisors of zero
        """
        pass

    @abstractmethod
    def parse_element(self, text: str) -> RingElement:
        """
        parse the textual representation of an element, as produced by str()

        :raises ElementParseError: if the text does not represent an element of the ring
        """
        pass

    def parse_parameters(self, tag: str, parameters: Sequence[str]) -> RingElement:
        """
        parse an element given as a type tag and its already split parameter list, as in tag[param_1,...,param_n]

        :raises ElementParseError: if the tag or parameters do not represent an element of the ring
        """
        raise ElementParseError(str(TaggedLiteral(tag, list(parameters))), f'an element of {self.name}')

    @abstractmethod
    def contains(self, element: RingElement) -> bool:
        """
        :return: whether the ring considers element a member of itself
        """
        pass

    def __contains__(self, item):
        return isinstance(item, RingElement) and self.contains(item)

    def coerce(self, element: RingElement) -> RingElement:
        """
        convert an element into this ring's own representation

        :raises OperationUndefinedError: if the element cannot be interpreted in this ring
        """
        return element.interpret(self)

    @abstractmethod
    def irreducible(self, element: RingElement) -> bool:
        """
        :return: whether element is irreducible over this ring; zero and units are considered irreducible
        :raises OperationUndefinedError: if the element cannot be interpreted as an element of this ring
        """
        pass

    @abstractmethod
    def factor(self) -> Computation[List[RingElement]]:
        """
        :return: a computation factoring an element of the ring into irreducible factors, the product of which is the
         element. Units are not factored further.
        """
        pass

    def __str__(self):
        return self.name

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'


def _single_element(*problem):
    return len(problem) == 1 and isinstance(problem[0], RingElement)


inversion = TrivialComputation(FunctionStrategy(
    lambda x: x.inverse(), applies_to=lambda *p: _single_element(*p) and p[0].invertible(),
    name='inverse', description='compute the multiplicative inverse of a unit'))

negation = TrivialComputation(FunctionStrategy(
    lambda x: x.negative(), applies_to=_single_element,
    name='negative', description='compute the additive inverse of a ring element'))
