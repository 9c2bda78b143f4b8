"""Structural capability checks.

Answers "does this object look like a payment processor?" by name only.
Argument signatures and behaviour are never inspected, so a True result
only means the members exist and are callable. Used by the menu as a
demonstration, never for dispatch.
"""

import inspect
from typing import Any, Iterable, Mapping, Tuple, Union

# Operation set of a payment processor
PAYMENT_PROCESSOR_INTERFACE: Tuple[str, ...] = ("process",)

Shape = Union[str, type, Mapping[str, Any], Iterable[str]]


def required_operations(shape: Shape) -> Tuple[str, ...]:
    """
    Resolve a shape into the operation names it requires.

    Args:
        shape: A single operation name, an iterable of names, a mapping
            (its keys are the names), or a class. A class contributes its
            abstract methods, or its public callables if it declares none.

    Returns:
        Tuple of operation names.
    """
    if isinstance(shape, str):
        return (shape,)
    if inspect.isclass(shape):
        abstract = getattr(shape, "__abstractmethods__", frozenset())
        if abstract:
            return tuple(sorted(abstract))
        return tuple(
            name
            for name, member in inspect.getmembers(shape)
            if not name.startswith("_") and callable(member)
        )
    if isinstance(shape, Mapping):
        return tuple(shape.keys())
    return tuple(shape)


def implements_interface(instance: Any, shape: Shape) -> bool:
    """Return True if `instance` has a callable member for every operation in `shape`."""
    for name in required_operations(shape):
        if not callable(getattr(instance, name, None)):
            return False
    return True


def interface_name(shape: Shape) -> str:
    """Display name used when reporting a check."""
    if inspect.isclass(shape):
        return shape.__name__
    if required_operations(shape) == PAYMENT_PROCESSOR_INTERFACE:
        return "PaymentProcessor"
    return "Interface(" + ", ".join(required_operations(shape)) + ")"
