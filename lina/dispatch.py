"""
Arithmetic across ring inclusions.

An element only knows how to combine with the elements it declares compatible through its capability predicates
(can_add, can_multiply), and those predicates need not be symmetric: a polynomial accepts a bare scalar of its
coefficient ring, but the scalar does not accept the polynomial. The dispatches in this module try both operand
orders before failing, so neither concrete type has to know about every other.
"""
from __future__ import annotations

from functools import partial
from typing import Iterator, Tuple

from lina.exceptions import OperationUndefinedError

EMPTY = object()


class InclusionDispatch:
    """
    A binary ring operation, resolved by asking each operand in turn whether it accepts the other
    """

    def __init__(self, name: str, capability: str, method: str, doc: str = None):
        """
        :param name: the name of the operation, for error messages
        :param capability: the name of the element predicate deciding whether the element accepts an operand
        :param method: the name of the element method performing the operation
        :param doc: an optional doc for the callable
        """
        self.__name__ = name
        self.__doc__ = doc
        self.capability = capability
        self.method = method

    def _accepts(self, receiver, operand) -> bool:
        predicate = getattr(receiver, self.capability, None)
        return predicate is not None and predicate(operand)

    def candidates(self, a, b) -> Iterator[Tuple[object, object]]:
        """
        yield (receiver, operand) pairs that may carry out the operation, in the order they are attempted
        """
        if self._accepts(a, b):
            yield a, b
        if self._accepts(b, a):
            yield b, a

    def get(self, a, b, default=None):
        """
        apply the operation to two operands, trying the swapped order if the first operand rejects the second.
         If neither operand accepts the other, returns default.
        """
        for receiver, operand in self.candidates(a, b):
            return getattr(receiver, self.method)(operand)
        return default

    def pair(self, a, b):
        """
        apply the operation to two operands and raise an error if neither accepts the other
        """
        ret = self.get(a, b, default=EMPTY)
        if ret is EMPTY:
            raise OperationUndefinedError(f'cannot {self.__name__} element {a} of ring {_ring_of(a)}'
                                          f' and element {b} of ring {_ring_of(b)}', a, b)
        return ret

    def __call__(self, first, *rest):
        """
        fold the operation over one or more operands, from left to right
        """
        ret = first
        for r in rest:
            ret = self.pair(ret, r)
        return ret

    def op(self):
        """
        :return: an adapter for the dispatch to be used as a binary operator, returning NotImplemented if neither
         operand accepts the other
        """
        return InclusionOp(self)

    def rop(self):
        """
        :return: an adapter for the dispatch to be used as a reflected binary operator
        """
        return ReflectedInclusionOp(self)

    def __str__(self):
        return f'<InclusionDispatch {self.__name__}>'


def _ring_of(x):
    return getattr(x, 'ring', type(x).__name__)


class InclusionOp:
    """
    An operator adapter for an InclusionDispatch
    """

    def __init__(self, dispatch: InclusionDispatch):
        self.dispatch = dispatch

    def __get__(self, instance, owner):
        if instance is not None:
            return partial(self.__call__, instance)
        return self

    def __call__(self, a, b):
        return self.dispatch.get(a, b, default=NotImplemented)


class ReflectedInclusionOp(InclusionOp):
    def __call__(self, a, b):
        return self.dispatch.get(b, a, default=NotImplemented)


add = InclusionDispatch('add', 'can_add', 'add',
                        doc='add one or more ring elements, respecting ring inclusions')
multiply = InclusionDispatch('multiply', 'can_multiply', 'multiply',
                             doc='multiply one or more ring elements, respecting ring inclusions')


def subtract(minuend, subtrahend):
    """
    subtract a ring element from another. If only the subtrahend accepts the minuend, the difference is computed as
     (-subtrahend) + minuend.
    """
    if add._accepts(minuend, subtrahend):
        return minuend.subtract(subtrahend)
    if add._accepts(subtrahend, minuend):
        return subtrahend.negative().add(minuend)
    raise OperationUndefinedError(f'cannot subtract element {subtrahend} of ring {_ring_of(subtrahend)}'
                                  f' from element {minuend} of ring {_ring_of(minuend)}', minuend, subtrahend)


def divide(dividend, divisor):
    """
    divide a ring element by another. If only the divisor accepts the dividend, a unit divisor multiplies the
     dividend by its inverse; otherwise the dividend is lifted into the divisor's ring and divided there.
    """
    if multiply._accepts(dividend, divisor):
        return dividend.divide(divisor)
    if multiply._accepts(divisor, dividend):
        if divisor.is_zero():
            raise OperationUndefinedError(f'cannot divide {dividend} by zero', dividend, divisor)
        if divisor.invertible():
            return divisor.inverse().multiply(dividend)
        return divisor.ring.coerce(dividend).divide(divisor)
    raise OperationUndefinedError(f'cannot divide element {dividend} of ring {_ring_of(dividend)}'
                                  f' by element {divisor} of ring {_ring_of(divisor)}', dividend, divisor)


def _subtract_op(a, b):
    if not (add._accepts(a, b) or add._accepts(b, a)):
        return NotImplemented
    return subtract(a, b)


def _divide_op(a, b):
    if not (multiply._accepts(a, b) or multiply._accepts(b, a)):
        return NotImplemented
    return divide(a, b)


class FunctionOp(InclusionOp):
    """
    An operator adapter for a plain binary function that returns NotImplemented on incompatible operands
    """

    def __init__(self, func):
        super().__init__(None)
        self.func = func

    def __call__(self, a, b):
        return self.func(a, b)


class ReflectedFunctionOp(FunctionOp):
    def __call__(self, a, b):
        return self.func(b, a)


subtract_op = FunctionOp(_subtract_op)
rsubtract_op = ReflectedFunctionOp(_subtract_op)
divide_op = FunctionOp(_divide_op)
rdivide_op = ReflectedFunctionOp(_divide_op)
