from __future__ import annotations

import logging
from functools import partial
from threading import Lock
from typing import Generic, TypeVar, List, Tuple, Iterable, Iterator, Callable, Union
from warnings import warn

from sortedcontainers import SortedKeyList

from lina.exceptions import NoStrategyError, StrategyRegistrationError
from lina.strategies import Strategy, FunctionStrategy, INAPPLICABLE_COST, TRIVIAL_COST

logger = logging.getLogger(__name__)

R = TypeVar('R')


class RankedSearch(Generic[R]):
    """
    The applicable strategies of a computation for a single problem, ranked by expected cost and then by
    registration order
    """

    def __init__(self, owner: Computation[R], problem: tuple):
        self.problem = problem
        self.ranked = SortedKeyList(key=lambda entry: (entry[0], entry[1]))
        for index, strategy in enumerate(owner.strategies()):
            if not strategy.applies_to(*problem):
                continue
            cost = strategy.expected_cost(*problem)
            if cost >= owner.inapplicable_cost:
                continue
            self.ranked.add((cost, index, strategy))

    def costs(self) -> Iterator[Tuple[int, Strategy[R]]]:
        return ((cost, strategy) for (cost, _, strategy) in self.ranked)

    def __iter__(self) -> Iterator[Strategy[R]]:
        return (strategy for (_, _, strategy) in self.ranked)

    def __len__(self):
        return len(self.ranked)

    def __bool__(self):
        return bool(self.ranked)


class Computation(Generic[R]):
    """
    A registry of strategies for one abstract task, and the dispatch that selects the cheapest applicable one.

    A computation is not tied to a single problem instance, it is meant to be reused, and new strategies can be
    registered with it at any time.
    """
    # strategies reporting at least this cost are never selected
    inapplicable_cost = INAPPLICABLE_COST

    def __init__(self, description: str, strategies: Iterable[Strategy[R]] = ()):
        """
        :param description: a description of the kind of computation
        :param strategies: strategies to register immediately
        """
        self.description = description
        self._strategies: List[Strategy[R]] = []
        self._lock = Lock()
        for s in strategies:
            self.add_strategy(s)

    def strategies(self) -> Tuple[Strategy[R], ...]:
        """
        :return: a snapshot of the registered strategies, in registration order
        """
        with self._lock:
            return tuple(self._strategies)

    def add_strategy(self, strategy: Strategy[R]):
        """
        register a strategy with the computation. Registering a strategy under an existing name warns, but both
         strategies are kept.
        """
        with self._lock:
            if any(s.name == strategy.name for s in self._strategies):
                warn(f'{self} already has a strategy named {strategy.name!r}', RuntimeWarning, stacklevel=2)
            self._strategies.append(strategy)
        logger.debug('registered strategy %s with %s', strategy.name, self)
        return self

    def add_func(self, cost: Union[int, Callable] = TRIVIAL_COST, applies_to: Callable[..., bool] = None,
                 name: str = None, func=None):
        """
        register a strategy generated from a function, usable as a decorator

        :param cost: the expected cost of the strategy, either constant or a function of the problem
        :param applies_to: an applicability predicate, defaults to accepting every problem
        :param name: the name of the strategy, defaults to the function's name
        :param func: the function to use
        """
        if not func:
            if callable(cost):
                func = cost
                cost = TRIVIAL_COST
            else:
                return partial(self.add_func, cost, applies_to, name)
        if callable(cost):
            strategy = FunctionStrategy(func, applies_to, expected_cost=cost, name=name)
        else:
            strategy = FunctionStrategy(func, applies_to, cost=cost, name=name)
        self.add_strategy(strategy)
        return func

    def candidates_for(self, *problem) -> RankedSearch[R]:
        """
        get the applicable strategies for a problem, cheapest first. Ties are broken by registration order.
        """
        return RankedSearch(self, problem)

    def applicable_strategies(self, *problem) -> List[Strategy[R]]:
        """
        :return: the strategies that consider themselves applicable to the problem, in registration order
        """
        return [s for s in self.strategies() if s.applies_to(*problem)]

    def cheapest_strategy(self, *problem) -> Strategy[R]:
        """
        :return: an applicable strategy of minimal expected cost
        :raises NoStrategyError: if no registered strategy applies to the problem
        """
        for strategy in self.candidates_for(*problem):
            return strategy
        raise NoStrategyError(self, problem)

    def compute(self, *problem) -> R:
        """
        perform the computation using the cheapest applicable strategy
        """
        strategy = self.cheapest_strategy(*problem)
        logger.debug('%s selected strategy %s', self, strategy.name)
        return strategy.execute(*problem)

    __call__ = compute

    def __str__(self):
        return f'<{type(self).__name__} {self.description}>'


class TrivialComputation(Computation[R]):
    """
    A computation so simple that exactly one strategy is required. The strategy is fixed on construction and the
     description is inferred from it.
    """

    def __init__(self, strategy: Strategy[R], description: str = None):
        super().__init__(description or strategy.description)
        self._strategies.append(strategy)

    @property
    def strategy(self) -> Strategy[R]:
        return self._strategies[0]

    def add_strategy(self, strategy: Strategy[R]):
        raise StrategyRegistrationError(self, strategy)


class Uncomputation(Computation[R]):
    """
    A computation that is not implemented, or impossible altogether. It never has any strategies.
    """

    def __init__(self, notice: str):
        super().__init__(f'uncomputation {notice}')
        self.notice = notice

    def add_strategy(self, strategy: Strategy[R]):
        raise StrategyRegistrationError(self, strategy)

    def cheapest_strategy(self, *problem) -> Strategy[R]:
        raise NoStrategyError(self, problem, self.notice)
