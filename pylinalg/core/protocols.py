"""
Core protocols for PyLinalg.

These define structural interfaces rather than base classes, so any
numeric type (float, numpy scalars, Fraction, Decimal) and any solve
strategy can take part without inheriting from library code.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
S = TypeVar('S')  # System type accepted by a backend


@runtime_checkable
class Element(Protocol):
    """
    Capability set every table element must provide.

    Tables, determinants and matrices only ever add, subtract, multiply,
    divide and compare their elements, so any type closed under these
    operations works. Ordering is only needed by the inversion count of
    the permutation expansion, and there it is applied to indices, not
    to elements.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class Backend(Protocol[S, P]):
    """
    Protocol for linear-system solve strategies.

    Each backend takes a linear-equation system and produces a Result
    envelope, or None when its method cannot solve the system.
    Backends are stateless.

    Type Parameters:
        S: The system type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'cramer', 'inverse'
        """
        ...

    def solve(self, system: S) -> 'Result[P] | None':
        """
        Execute the computation.

        Args:
            system: The linear-equation system to solve

        Returns:
            Result envelope containing the parameter payload, or None if
            this method cannot solve the system
        """
        ...
