from __future__ import annotations

import logging
import typing as tp
from collections.abc import Sequence

from typing_extensions import override

from reviter._helpers import in_bounds, is_sequence, item_at, last_index, sequence_length
from reviter.chain import StepIterator
from reviter.defaults import Absent, ItemKind
from reviter.errors import IllegalReversal, InvalidProtocolUse
from reviter.index import Entry
from reviter.step import IterationStep

logger = logging.getLogger(__name__)


def create_sequence_iterator[T](
    seq: Sequence[T], kind: ItemKind = ItemKind.VALUE
) -> SequenceIterator[tp.Any]:
    return SequenceIterator(seq, kind)


def create_sequence_reverse_iterator[T](
    seq: Sequence[T], kind: ItemKind = ItemKind.VALUE
) -> SequenceReverseIterator[tp.Any]:
    return SequenceReverseIterator(seq, kind)


class SequenceIterator[R](StepIterator[R]):
    """
    Walk a sequence front to back.

    The length is read again on every step, so a sequence that grows while
    it is being iterated yields the new elements too, and one that shrinks
    ends early.

    Args:
        seq: sequence to walk, held by reference
        kind: whether to yield positions, elements or ``Entry`` pairs
    """

    def __init__(self, seq: Sequence[tp.Any], kind: ItemKind = ItemKind.VALUE) -> None:
        self._seq: Sequence[tp.Any] | None = seq
        self._next_index: int = 0
        self._kind: ItemKind = kind

    @property
    def kind(self) -> ItemKind:
        return self._kind

    @override
    def advance(self, value: object = Absent, /) -> IterationStep[R]:
        del value
        seq = self._seq
        if seq is None:
            return IterationStep.finished()
        index = self._next_index
        if not in_bounds(index, sequence_length(seq)):
            self._seq = None
            return IterationStep.finished()
        self._next_index = index + 1
        return IterationStep.of(tp.cast(R, item_at(seq, index, self._kind)))

    def obtain_reverse_iterator(self) -> SequenceReverseIterator[R]:
        """
        Turn an untouched iterator around.

        Raises:
            IllegalReversal: ``advance`` was already called.

        Example:
            >>> it = SeqView("ABC").keys()
            >>> it.obtain_reverse_iterator().to_list()
            [2, 1, 0]
            >>> _ = it.advance()
            >>> it.obtain_reverse_iterator()
            Traceback (most recent call last):
                ...
            reviter.errors.IllegalReversal: Cannot reverse once iteration has begun.
        """
        seq = self._seq
        if seq is None or self._next_index != 0:
            logger.debug(
                "refusing to reverse %s at index %d", type(self).__name__, self._next_index
            )
            raise IllegalReversal
        logger.debug("converting %s(%s) to reverse", type(self).__name__, self._kind.value)
        return SequenceReverseIterator(seq, self._kind)


class SequenceReverseIterator[R](StepIterator[R]):
    """
    Walk a sequence back to front.

    Starts from the last position as of creation. Positions past the end of
    a sequence that shrank in the meantime are skipped.

    Args:
        seq: sequence to walk, held by reference
        kind: whether to yield positions, elements or ``Entry`` pairs
    """

    def __init__(self, seq: Sequence[tp.Any], kind: ItemKind = ItemKind.VALUE) -> None:
        self._seq: Sequence[tp.Any] | None = seq
        self._next_index: int = last_index(seq)
        self._kind: ItemKind = kind

    @property
    def kind(self) -> ItemKind:
        return self._kind

    @override
    def advance(self, value: object = Absent, /) -> IterationStep[R]:
        del value
        seq = self._seq
        if seq is None:
            return IterationStep.finished()
        index = min(self._next_index, last_index(seq))
        if not in_bounds(index, sequence_length(seq)):
            self._seq = None
            return IterationStep.finished()
        self._next_index = index - 1
        return IterationStep.of(tp.cast(R, item_at(seq, index, self._kind)))

    def obtain_reverse_iterator(self) -> SequenceIterator[R]:
        """
        Turn an untouched reverse iterator back into a forward one.

        Raises:
            IllegalReversal: ``advance`` was already called, or the
                sequence changed length since this iterator was created.
        """
        seq = self._seq
        if seq is None or self._next_index != last_index(seq):
            logger.debug(
                "refusing to reverse %s at index %d", type(self).__name__, self._next_index
            )
            raise IllegalReversal
        logger.debug("converting %s(%s) to forward", type(self).__name__, self._kind.value)
        return SequenceIterator(seq, self._kind)


@tp.final
class SeqView[T]:
    """
    Iteration entry point over a sequence owned by someone else.

    The sequence is not copied, every iterator handed out reads it live.

    Args:
        seq: any sized, indexable sequence

    Example:
        >>> letters = SeqView(["A", "B", "C"])
        >>> letters.values().to_list()
        ['A', 'B', 'C']
        >>> letters.reversed().to_list()
        ['C', 'B', 'A']
        >>> letters.entries().reverse().to_list()
        [Entry(idx=2, value='C'), Entry(idx=1, value='B'), Entry(idx=0, value='A')]
    """

    def __init__(self, seq: Sequence[T]) -> None:
        if not is_sequence(seq):
            raise InvalidProtocolUse(
                f"expected a sized, indexable sequence, got {type(seq).__name__!r}"
            )
        self._seq = seq

    def entries(self) -> SequenceIterator[Entry[T]]:
        return create_sequence_iterator(self._seq, ItemKind.ENTRY)

    def keys(self) -> SequenceIterator[int]:
        return create_sequence_iterator(self._seq, ItemKind.KEY)

    def values(self) -> SequenceIterator[T]:
        return create_sequence_iterator(self._seq, ItemKind.VALUE)

    def reversed_entries(self) -> SequenceReverseIterator[Entry[T]]:
        return create_sequence_reverse_iterator(self._seq, ItemKind.ENTRY)

    def reversed_keys(self) -> SequenceReverseIterator[int]:
        return create_sequence_reverse_iterator(self._seq, ItemKind.KEY)

    def reversed_values(self) -> SequenceReverseIterator[T]:
        return create_sequence_reverse_iterator(self._seq, ItemKind.VALUE)

    def reversed(self) -> SequenceReverseIterator[T]:
        return self.reversed_values()

    def obtain_iterator(self) -> SequenceIterator[T]:
        return self.values()

    def obtain_reverse_iterator(self) -> SequenceReverseIterator[T]:
        return self.reversed_values()

    def __iter__(self) -> SequenceIterator[T]:
        return self.values()

    def __reversed__(self) -> SequenceReverseIterator[T]:
        return self.reversed_values()

    def __len__(self) -> int:
        return sequence_length(self._seq)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._seq!r})"
