from __future__ import annotations

from abc import ABC
from typing import List

from lina.computation import Computation, TrivialComputation
from lina.exceptions import OperationUndefinedError
from lina.ring import Ring, RingElement
from lina.strategies import Strategy


class FieldFactorStrategy(Strategy[List[RingElement]]):
    """
    Every nonzero field element is a unit, so it is its own factorization
    """
    name = 'field-element'
    description = 'factor a field element'

    def __init__(self, field: Field):
        self.field = field

    def applies_to(self, *problem) -> bool:
        if len(problem) != 1 or not isinstance(problem[0], RingElement):
            return False
        try:
            self.field.coerce(problem[0])
        except OperationUndefinedError:
            return False
        return True

    def expected_cost(self, *problem) -> int:
        return 10

    def execute(self, element) -> List[RingElement]:
        return [element]


class Field(Ring, ABC):
    """
    A commutative ring in which every nonzero element is invertible
    """

    @property
    def is_commutative(self) -> bool:
        return True

    @property
    def is_integral_domain(self) -> bool:
        return True

    def irreducible(self, element: RingElement) -> bool:
        self.coerce(element)
        return True

    def factor(self) -> Computation[List[RingElement]]:
        return TrivialComputation(FieldFactorStrategy(self), description=f'factor an element of {self.name}')
