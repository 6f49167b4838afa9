from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar, Optional

R = TypeVar('R')

# the expected cost of a strategy that performs an elementary operation
TRIVIAL_COST = 0
# the expected cost of a strategy that cannot be applied at all
INAPPLICABLE_COST = 100


class Strategy(ABC, Generic[R]):
    """
    A candidate algorithm for a single kind of computation.

    A problem instance is an ordered tuple of arbitrary values, whose validity is for the strategy to decide. A
    strategy must report an unsupported problem shape as inapplicable rather than raise.

    The expected cost is a rough guess in the range [TRIVIAL_COST, INAPPLICABLE_COST], where TRIVIAL_COST means the
    strategy in essence carries out an elementary operation, and INAPPLICABLE_COST means the strategy cannot be
    applied to the problem.
    """
    name: str = None
    description: str = None

    @abstractmethod
    def applies_to(self, *problem) -> bool:
        """
        :return: whether the strategy can be applied to the problem, must not have side effects
        """
        pass

    @abstractmethod
    def expected_cost(self, *problem) -> int:
        """
        :return: the expected cost of applying the strategy to the problem, must not have side effects
        """
        pass

    @abstractmethod
    def execute(self, *problem) -> R:
        """
        run the strategy on the problem
        """
        pass

    def __str__(self):
        return f'<{type(self).__name__} {self.name}>'


class FunctionStrategy(Strategy[R]):
    """
    A strategy assembled from plain callables
    """

    def __init__(self, execute: Callable[..., R], applies_to: Callable[..., bool] = None,
                 expected_cost: Optional[Callable[..., int]] = None, name: str = None, description: str = None,
                 cost: int = TRIVIAL_COST):
        """
        :param execute: the function carrying out the strategy
        :param applies_to: an applicability predicate, defaults to accepting every problem
        :param expected_cost: a cost estimation function, defaults to the constant cost
        :param name: an optional name for the strategy, defaults to the name of execute
        :param description: an optional description for the strategy, defaults to the doc of execute
        :param cost: the constant cost to use if expected_cost is not given
        """
        self.func = execute
        self.applies_func = applies_to
        self.cost_func = expected_cost
        self.cost = cost
        self.name = name or getattr(execute, '__name__', None)
        self.description = description or getattr(execute, '__doc__', None) or self.name

    def applies_to(self, *problem) -> bool:
        if self.applies_func is None:
            return True
        return self.applies_func(*problem)

    def expected_cost(self, *problem) -> int:
        if self.cost_func is None:
            return self.cost
        return self.cost_func(*problem)

    def execute(self, *problem) -> R:
        return self.func(*problem)
