from __future__ import annotations

import typing as tp
from collections.abc import Callable

from reviter.defaults import Default
from reviter.step import IterationStep


@tp.runtime_checkable
class SupportsAdvance[T](tp.Protocol):
    def advance(self, value: object = Default.Absent, /) -> IterationStep[T]: ...


@tp.runtime_checkable
class SupportsIterator[T](tp.Protocol):
    def obtain_iterator(self) -> SupportsAdvance[T]: ...


@tp.runtime_checkable
class SupportsReverseIterator[T](tp.Protocol):
    def obtain_reverse_iterator(self) -> SupportsAdvance[T]: ...


type Transform[T, R] = Callable[[T], R] | Callable[[tp.Any, T], R]
