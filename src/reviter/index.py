import typing as tp


class Entry[T](tp.NamedTuple):
    """Position and element yielded by ``ItemKind.ENTRY`` iterators."""

    idx: int
    value: T
