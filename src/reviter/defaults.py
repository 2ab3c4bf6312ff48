import enum
from typing import Literal


class Default(enum.Enum):
    """Sentinel values used as defaults."""

    Absent = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
Absent: Literal[Default.Absent] = Default.Absent


class ItemKind(enum.Enum):
    """What a sequence iterator yields for each position."""

    KEY = "key"
    VALUE = "value"
    ENTRY = "key+value"


class Capability(enum.StrEnum):
    """Protocol members, by the attribute name that carries them."""

    ITERABLE = "obtain_iterator"
    REVERSE_ITERABLE = "obtain_reverse_iterator"


class Presence(enum.Enum):
    ABSENT = enum.auto()
    CALLABLE = enum.auto()
    NOT_CALLABLE = enum.auto()
