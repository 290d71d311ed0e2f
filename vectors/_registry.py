from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, TypeVar

logger = logging.getLogger(__name__)

Ret = TypeVar("Ret")
F = TypeVar("F", bound=Callable[..., Ret])


class Registry(Generic[F, Ret]):
    """A registry for different implementations, similar to functools.singledispatch.

    An implementation can be registered with the `register` method.

    When the registry is called, it will try each registered implementation in order.
    Each implementation is a callable that can either:
    - Return the sentinel value `NotImplemented` if it cannot handle the input,
      signaling that the next implementation should be tried.
    - Return anything else, which will be returned as the result.

    Unlike singledispatch, an implementation can look at all of its arguments,
    which is what we need for scalar operations where any operand may be the
    one that decides the numeric type, eg `fma(0, 2, Decimal("1.5"))`.

    Examples
    --------
    >>> from decimal import Decimal
    >>> from vectors._registry import Registry
    >>> double = Registry[Callable[..., object], object]()
    >>> @double.register
    ... def _decimal(x):
    ...     if not isinstance(x, Decimal):
    ...         return NotImplemented
    ...     return x.scaleb(0) * 2
    >>> @double.register
    ... def _default(x):
    ...     return x * 2
    >>> double(Decimal("1.5"))
    Decimal('3.0')
    >>> double(4)
    8
    """

    def __init__(
        self,
        implementations: Iterable[F] = (),
        *,
        name: str = "registry",
    ) -> None:
        self.implementations = tuple(implementations)
        """Mutable, so users can modify as needed."""
        self.name = name

    def register(self, implementation: F) -> F:
        """
        Register (after existing implementations) a new implementation of the Registry.
        """
        self.implementations = (*self.implementations, implementation)
        logger.debug(f"Registered {implementation.__name__} for {self.name}")
        return implementation

    def __call__(self, *args, **kwargs) -> Ret:
        """
        Call the first implementation that does not return `NotImplemented`.
        """
        for implementation in self.implementations:
            result = implementation(*args, **kwargs)
            if result is NotImplemented:
                continue
            else:
                return result
        types = ", ".join(type(a).__name__ for a in args)
        raise NotImplementedError(f"{self.name} is not implemented for ({types})")

    def __repr__(self) -> str:
        return f"Registry({self.name!r}, n={len(self.implementations)})"
