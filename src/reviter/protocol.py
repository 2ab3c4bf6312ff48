"""
Abstract operations of the iteration protocol.

Capabilities are looked up by their ``Capability`` member name and every
consumer goes through these functions instead of touching the members
directly.
"""

from __future__ import annotations

import logging
import typing as tp
from collections.abc import Callable

from reviter.defaults import Absent, Capability, Default, Presence
from reviter.errors import InvalidProtocolUse, NotReversible
from reviter.step import IterationStep
from reviter.wtyping import SupportsAdvance

logger = logging.getLogger(__name__)

_PRIMITIVES = (bool, int, float, complex, str, bytes)


def is_object_like(value: object) -> bool:
    """
    Example:
        >>> is_object_like([])
        True
        >>> is_object_like(None), is_object_like(3), is_object_like("abc")
        (False, False, False)
    """
    return value is not None and not isinstance(value, _PRIMITIVES)


def to_object[T](value: T | None) -> T:
    if value is None:
        raise InvalidProtocolUse("cannot convert None to an object")
    return value


def check_capability(obj: object, capability: Capability) -> Presence:
    member = getattr(obj, capability, None)
    if member is None:
        return Presence.ABSENT
    return Presence.CALLABLE if callable(member) else Presence.NOT_CALLABLE


def get_method(
    obj: object, capability: Capability
) -> Callable[[], object] | tp.Literal[Default.Absent]:
    """Return the bound capability member of obj, or Absent if it has none.

    Raises:
        InvalidProtocolUse: obj is not object-like, or the member is present
            but not callable.
    """
    if not is_object_like(obj):
        raise InvalidProtocolUse(
            f"{capability} looked up on non-object {type(obj).__name__!r}"
        )
    match check_capability(obj, capability):
        case Presence.ABSENT:
            return Absent
        case Presence.NOT_CALLABLE:
            raise InvalidProtocolUse(
                f"{type(obj).__name__}.{capability} is not callable"
            )
        case Presence.CALLABLE:
            return tp.cast(Callable[[], object], getattr(obj, capability))


def get_iterator[T](
    obj: object,
    method: Callable[[], object] | tp.Literal[Default.Absent] = Absent,
) -> SupportsAdvance[T]:
    """Call an iterator-producing method and check what comes back.

    With no method, the ITERABLE capability of obj is used.
    """
    if method is Absent:
        method = get_method(obj, Capability.ITERABLE)
    if not callable(method):
        raise InvalidProtocolUse(f"{type(obj).__name__!r} object is not iterable")
    iterator = method()
    if not is_object_like(iterator):
        raise InvalidProtocolUse(
            f"iterator method must return an iterator, got {type(iterator).__name__!r}"
        )
    return tp.cast(SupportsAdvance[T], iterator)


def iterator_next[T](
    iterator: SupportsAdvance[T], value: object = Absent
) -> IterationStep[T]:
    result = iterator.advance() if value is Absent else iterator.advance(value)
    if not isinstance(result, IterationStep):
        raise InvalidProtocolUse(
            f"advance() must return an IterationStep, got {type(result).__name__!r}"
        )
    return tp.cast(IterationStep[T], result)


def iterator_complete(step: IterationStep[object]) -> bool:
    return step.done


def iterator_value[T](step: IterationStep[T]) -> T | tp.Literal[Default.Absent]:
    return step.value


def iterator_step[T](
    iterator: SupportsAdvance[T],
) -> IterationStep[T] | tp.Literal[False]:
    """Advance iterator, returning the step, or False if it is done."""
    step = iterator_next(iterator)
    if iterator_complete(step):
        return False
    return step


def reverse[T](x: object) -> SupportsAdvance[T]:
    """
    Obtain an iterator that walks x in the opposite direction.

    Works on collections, which always hand out a fresh reverse iterator,
    and on live iterators, which decide for themselves whether they can
    still turn around.

    Args:
        x: anything advertising the REVERSE_ITERABLE capability

    Returns:
        the iterator produced by x's ``obtain_reverse_iterator``

    Raises:
        InvalidProtocolUse: x is None, the member is not callable, or it
            returned something that is not an object.
        NotReversible: x has no ``obtain_reverse_iterator`` member.

    Example:
        >>> reverse(42)
        Traceback (most recent call last):
            ...
        reviter.errors.NotReversible: 'int' object is not reversible
    """
    obj = to_object(x)
    if not is_object_like(obj):
        raise NotReversible(f"{type(obj).__name__!r} object is not reversible")
    method = get_method(obj, Capability.REVERSE_ITERABLE)
    if method is Absent:
        raise NotReversible(f"{type(obj).__name__!r} object is not reversible")
    return get_iterator(obj, method)
