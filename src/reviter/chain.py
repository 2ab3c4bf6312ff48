from __future__ import annotations

import abc
import logging
import typing as tp
from collections.abc import Callable, Iterator

from typing_extensions import Self, override

from reviter.defaults import Absent, Capability, Presence
from reviter.errors import IllegalReversal, InvalidProtocolUse
from reviter.protocol import check_capability, is_object_like, iterator_next, reverse
from reviter.step import IterationStep
from reviter.wtyping import SupportsAdvance, Transform

logger = logging.getLogger(__name__)


class StepIterator[T](Iterator[T]):
    """
    Base of every iterator in the protocol.

    Subclasses implement ``advance``; the rest (being their own iterable,
    mapping, reversing and plain Python iteration) is shared from here.
    """

    @abc.abstractmethod
    def advance(self, value: object = Absent, /) -> IterationStep[T]:
        """Take one step.

        Args:
            value: resume value, forwarded by decorators and otherwise ignored.
        """
        raise NotImplementedError

    def obtain_iterator(self) -> Self:
        return self

    def reverse(self) -> StepIterator[T]:
        """Iterator over the same elements in the opposite direction.

        Raises:
            NotReversible: this iterator cannot be reversed at all.
            IllegalReversal: this iterator has already started moving.
        """
        return tp.cast(StepIterator[T], reverse(self))

    def __reversed__(self) -> StepIterator[T]:
        return self.reverse()

    def map[R](
        self,
        transform: Transform[T, R],
        context: object = Absent,
    ) -> MappingIterator[T, R]:
        return MappingIterator(self, transform, context)

    def to_list(self) -> list[T]:
        """Drain the remaining values into a list."""
        return list(self)

    @override
    def __iter__(self) -> Self:
        return self

    @override
    def __next__(self) -> T:
        step = self.advance()
        if step.done:
            raise StopIteration
        return tp.cast(T, step.value)


@tp.final
class MappingIterator[T, R](StepIterator[R]):
    """
    Lazily apply a transform to every value of a source iterator.

    If the source could be reversed when it was wrapped, so can the mapped
    iterator: reversing it reverses whatever the source is at that moment
    and maps the result with the same transform and context. Nothing is
    ever buffered.

    Args:
        source: iterator to pull values from
        transform: applied to each value; receives context first if one is given
        context: optional leading argument for transform; None means no context

    Example:
        >>> from reviter.sequence import SeqView
        >>> doubled = SeqView(["A", "B", "C"]).values().map(lambda s: s + s)
        >>> doubled.reverse().to_list()
        ['CC', 'BB', 'AA']
    """

    obtain_reverse_iterator: Callable[[], MappingIterator[T, R]]

    def __init__(
        self,
        source: SupportsAdvance[T],
        transform: Transform[T, R],
        context: object = Absent,
    ) -> None:
        if not is_object_like(source):
            raise InvalidProtocolUse(
                f"cannot map over non-iterator {type(source).__name__!r}"
            )
        self._source: SupportsAdvance[T] | None = source
        self._transform: Transform[T, R] | None = transform
        self._context: object = Absent if context is None else context
        # decided once, from the source as it is now
        if check_capability(source, Capability.REVERSE_ITERABLE) is not Presence.ABSENT:
            self.obtain_reverse_iterator = self._obtain_mapped_reverse_iterator

    def _release(self) -> None:
        self._source = None
        self._transform = None
        self._context = Absent

    def _apply(self, value: T) -> R:
        transform = tp.cast(Callable[..., R], self._transform)
        if self._context is Absent:
            return transform(value)
        return transform(self._context, value)

    @override
    def advance(self, value: object = Absent, /) -> IterationStep[R]:
        source = self._source
        if source is None:
            return IterationStep.finished()
        result = iterator_next(source, value)
        if result.done:
            self._release()
            return tp.cast(IterationStep[R], result)
        return IterationStep.of(self._apply(tp.cast(T, result.value)))

    def _obtain_mapped_reverse_iterator(self) -> MappingIterator[T, R]:
        source = self._source
        if source is None:
            logger.debug("refusing to reverse exhausted %s", type(self).__name__)
            raise IllegalReversal("Cannot reverse an exhausted iterator.")
        reversed_source: SupportsAdvance[T] = reverse(source)
        logger.debug(
            "re-deriving mapping over %s reversed to %s",
            type(source).__name__,
            type(reversed_source).__name__,
        )
        return MappingIterator(
            reversed_source,
            tp.cast(Transform[T, R], self._transform),
            self._context,
        )
