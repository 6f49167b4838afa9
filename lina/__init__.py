from lina.computation import Computation, TrivialComputation, Uncomputation
from lina.strategies import Strategy, FunctionStrategy, TRIVIAL_COST, INAPPLICABLE_COST
from lina.ring import Ring, RingElement
from lina.field import Field
from lina.euclidean import EuclideanRing
from lina.integers import IntegerElement, IntegerRing, integer_ring
from lina.polynomials import Polynomial, PolynomialRing, FieldPolynomialRing
from lina.quotients import Fraction, QuotientField, RationalsField, rationals
from lina.deserialize import Deserializer, RingDeserializer, ValueDeserializer, default_deserializer
from lina.codes import CodeFunction, CodeValue, code_function
from lina.exceptions import OperationUndefinedError, InexactDivisionError, NotImplementedOperationError, \
    ElementNotInvertibleError, ElementParseError, NoStrategyError, StrategyError, StrategyRegistrationError, \
    AlgebraicInvariantError
from lina._version import __version__

__all__ = ['Computation', 'TrivialComputation', 'Uncomputation', 'Strategy', 'FunctionStrategy', 'TRIVIAL_COST',
           'INAPPLICABLE_COST', 'Ring', 'RingElement', 'Field', 'EuclideanRing', 'IntegerElement', 'IntegerRing',
           'integer_ring', 'Polynomial', 'PolynomialRing', 'FieldPolynomialRing', 'Fraction', 'QuotientField',
           'RationalsField', 'rationals', 'Deserializer', 'RingDeserializer', 'ValueDeserializer',
           'default_deserializer', 'CodeFunction', 'CodeValue', 'code_function', 'OperationUndefinedError',
           'InexactDivisionError', 'NotImplementedOperationError', 'ElementNotInvertibleError', 'ElementParseError',
           'NoStrategyError', 'StrategyError', 'StrategyRegistrationError', 'AlgebraicInvariantError', '__version__']
