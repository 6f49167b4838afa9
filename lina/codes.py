"""
The name-indexed lookup of operations that a value exposes to front ends.

A front end that has a value at hand (for example, one produced by a Deserializer) can list the operations the
value's type supports, and run one of them through its Computation, without knowing the concrete type.
"""
from __future__ import annotations

from typing import Callable, Dict, NamedTuple, Optional

from lina.computation import Computation


class CodeFunction(NamedTuple):
    """
    An operation exposed by a value, evaluated through a computation
    """
    name: str
    description: str
    computation: Computation

    def __call__(self, *problem):
        return self.computation.compute(*problem)


class code_function:
    """
    A descriptor declaring that a method returning a Computation is an operation exposed under a code name.
     Accessed through an instance, it evaluates to a CodeFunction.
    """

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None,
                 func: Callable[..., Computation] = None):
        self.name = name
        self.description = description
        self.func = func

    def __call__(self, func: Callable[..., Computation]):
        self.func = func
        return self

    def __set_name__(self, owner, name):
        if not self.name:
            self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        description = self.description or self.func.__doc__ or self.name
        return CodeFunction(self.name, description.strip(), self.func(instance))


class CodeValue:
    """
    A mixin for values that expose code functions
    """

    @property
    def value_type_name(self) -> str:
        return type(self).__name__

    def instance_functions(self) -> Dict[str, CodeFunction]:
        """
        :return: the code functions that can be called on this value, keyed by their code names
        """
        attributes = {}
        for cls in reversed(type(self).__mro__):
            for attr, v in vars(cls).items():
                if isinstance(v, code_function):
                    attributes[v.name] = attr
        return {name: getattr(self, attr) for name, attr in attributes.items()}

    def instance_function(self, name: str) -> CodeFunction:
        """
        :raises KeyError: if the value exposes no code function of that name
        """
        for cls in type(self).__mro__:
            for attr, v in vars(cls).items():
                if isinstance(v, code_function) and v.name == name:
                    return getattr(self, attr)
        raise KeyError(name)
