"""Result primitives for service-layer outcomes.

Services return ``Ok`` or ``Err`` instead of raising for expected
failures (e.g. a missing entity).  Callers check the variant explicitly;
``unwrap()`` is available where raising is the desired behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying a typed ``error``."""

    error: E

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err[E]]
