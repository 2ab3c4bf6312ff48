from collections.abc import Mapping, Sequence

from reviter.defaults import ItemKind
from reviter.errors import InvalidProtocolUse
from reviter.index import Entry


def is_sequence(obj: object) -> bool:
    return isinstance(obj, Sequence) or (
        not isinstance(obj, Mapping)
        and hasattr(obj, "__len__")
        and hasattr(obj, "__getitem__")
    )


def sequence_length(seq: Sequence[object]) -> int:
    return max(len(seq), 0)


def last_index(seq: Sequence[object]) -> int:
    return sequence_length(seq) - 1


def in_bounds(index: int, length: int) -> bool:
    return 0 <= index < length


def item_at[T](seq: Sequence[T], index: int, kind: ItemKind) -> int | T | Entry[T]:
    match kind:
        case ItemKind.KEY:
            return index
        case ItemKind.VALUE:
            return seq[index]
        case ItemKind.ENTRY:
            return Entry(index, seq[index])
        case unknown:  # pyright: ignore[reportUnnecessaryComparison]
            raise InvalidProtocolUse(f"Received unknown item kind: {unknown!r}")  # pyright: ignore[reportUnreachable]
