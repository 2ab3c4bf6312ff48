from __future__ import annotations

import typing as tp
from dataclasses import dataclass

from reviter.defaults import Absent, Default
from reviter.errors import InvalidProtocolUse


@dataclass(frozen=True, slots=True)
class IterationStep[T]:
    """Result of a single ``advance()``.

    A finished step never carries a value.

    Example:
        >>> IterationStep.of("A")
        IterationStep(value='A', done=False)
        >>> IterationStep.finished()
        IterationStep(value=<Default.Absent: 1>, done=True)
    """

    value: T | tp.Literal[Default.Absent]
    done: bool

    def __post_init__(self) -> None:
        if self.done and self.value is not Absent:
            raise InvalidProtocolUse(
                f"finished step cannot carry a value, got {self.value!r}"
            )

    @classmethod
    def of(cls, value: T) -> IterationStep[T]:
        return cls(value, False)

    @classmethod
    def finished(cls) -> IterationStep[T]:
        return cls(Absent, True)
