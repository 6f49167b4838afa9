"""
Parsing of tagged element literals, such as polynomial[1,fraction[1,2]], for front ends that do not know in advance
which ring a literal belongs to.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from threading import Lock
from typing import Dict, Optional

from lina.exceptions import ElementParseError
from lina.integers import integer_ring
from lina.polynomials import PolynomialRing
from lina.quotients import rationals
from lina.ring import Ring, RingElement
from lina.util import split_tagged


class Deserializer(ABC):
    """
    A parser for the already split parameter list of a tagged literal
    """

    @abstractmethod
    def parse(self, *parameters: str) -> RingElement:
        """
        :raises ElementParseError: if the parameters do not form a valid element
        """
        pass


class RingDeserializer(Deserializer):
    """
    A deserializer parsing literals of a single tag as elements of a ring
    """

    def __init__(self, ring: Ring, tag: str):
        self.ring = ring
        self.tag = tag

    def parse(self, *parameters: str) -> RingElement:
        return self.ring.parse_parameters(self.tag, parameters)

    def __repr__(self):
        return f'{type(self).__name__}({self.ring!r}, {self.tag!r})'


class ValueDeserializer:
    """
    A registry of deserializers by type tag. Literals without a tag are parsed by the untagged ring, if one is
     given.
    """

    def __init__(self, untagged: Optional[Ring] = None):
        self._deserializers: Dict[str, Deserializer] = {}
        self.untagged = untagged
        self._lock = Lock()

    def register(self, tag: str, deserializer: Deserializer):
        """
        register the deserializer for a tag, replacing any previous one
        """
        with self._lock:
            self._deserializers[tag] = deserializer
        return self

    def tags(self):
        with self._lock:
            return frozenset(self._deserializers)

    def parse(self, text: str) -> RingElement:
        """
        parse a tagged literal with the deserializer registered for its tag, or an untagged literal with the
         untagged ring

        :raises ElementParseError: if the literal is malformed or its tag is unknown
        """
        literal = split_tagged(text)
        if literal is None:
            if self.untagged is not None:
                return self.untagged.parse_element(text)
            raise ElementParseError(text, 'a literal of the form tag[param_1,...,param_n]')
        with self._lock:
            deserializer = self._deserializers.get(literal.tag)
        if deserializer is None:
            raise ElementParseError(text, 'one of the tags ' + ', '.join(sorted(self.tags())))
        return deserializer.parse(*literal.parameters)


def default_deserializer() -> ValueDeserializer:
    """
    :return: a new registry, parsing integers (tagged or bare) as elements of Z, and fractions and polynomials over Q
    """
    return ValueDeserializer(integer_ring()) \
        .register('integer', RingDeserializer(integer_ring(), 'integer')) \
        .register('fraction', RingDeserializer(rationals(), 'fraction')) \
        .register('polynomial', RingDeserializer(PolynomialRing.over(rationals()), 'polynomial'))
