from reviter.chain import MappingIterator, StepIterator
from reviter.defaults import Absent, Capability, ItemKind
from reviter.errors import IllegalReversal, InvalidProtocolUse, NotReversible, ReviterError
from reviter.index import Entry
from reviter.protocol import get_iterator, reverse
from reviter.sequence import SeqView, SequenceIterator, SequenceReverseIterator
from reviter.step import IterationStep

__all__ = [
    "Absent",
    "Capability",
    "Entry",
    "IllegalReversal",
    "InvalidProtocolUse",
    "ItemKind",
    "IterationStep",
    "MappingIterator",
    "NotReversible",
    "ReviterError",
    "SeqView",
    "SequenceIterator",
    "SequenceReverseIterator",
    "StepIterator",
    "get_iterator",
    "reverse",
]
