class OperationUndefinedError(ArithmeticError):
    """An error indicating that a ring operation is meaningless for its operands"""

    def __init__(self, message, *operands):
        super().__init__(message)
        self.operands = operands


class InexactDivisionError(OperationUndefinedError):
    """An error indicating that a polynomial division left a nonzero remainder"""

    def __init__(self, dividend, divisor, remainder):
        super().__init__(f'{dividend} is not evenly divisible by {divisor} (remainder {remainder})',
                         dividend, divisor)
        self.remainder = remainder


class NotImplementedOperationError(OperationUndefinedError):
    """An error indicating that an operation is meaningful, but the ring does not know how to perform it"""


class ElementNotInvertibleError(ArithmeticError):
    """An error indicating an attempt to invert a non-unit"""

    def __init__(self, element, reason=None):
        msg = f'element {element} of ring {element.ring} is not invertible'
        if reason:
            msg = f'{reason} - {msg}'
        super().__init__(msg)
        self.element = element


class ElementParseError(ValueError):
    """An error indicating that a string does not represent an element of a ring"""

    def __init__(self, text, expected=None):
        msg = f'unable to parse {text!r}'
        if expected:
            msg += f', expected {expected}'
        super().__init__(msg)
        self.text = text


class NoStrategyError(LookupError):
    """An error indicating that a computation has no applicable strategy for a problem"""

    def __init__(self, computation, problem, notice=None):
        args = "<" + ", ".join(str(p) for p in problem) + ">"
        if notice:
            msg = f'no applicable strategy [{notice}] for computation {computation.description!r} on problem {args}'
        else:
            msg = f'no applicable strategy for computation {computation.description!r} on problem {args}'
        super().__init__(msg)
        self.computation = computation
        self.problem = problem


class StrategyError(RuntimeError):
    """An error indicating that a strategy failed while executing"""

    def __init__(self, strategy, problem):
        super().__init__(f'strategy {strategy.name!r} failed on problem <' + ", ".join(str(p) for p in problem) + '>')
        self.strategy = strategy
        self.problem = problem


class StrategyRegistrationError(TypeError):
    """An error indicating that a computation does not accept new strategies"""

    def __init__(self, computation, strategy):
        super().__init__(f'cannot register strategy {strategy.name!r} with {type(computation).__name__}'
                         f' {computation.description!r}')


class AlgebraicInvariantError(RuntimeError):
    """An internal fault: an algebraic invariant that must always hold was violated"""
