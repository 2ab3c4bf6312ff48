import pytest

from reviter.chain import MappingIterator
from reviter.defaults import Absent, Capability, Presence
from reviter.errors import IllegalReversal, InvalidProtocolUse, NotReversible, ReviterError
from reviter.protocol import (
    check_capability,
    get_iterator,
    get_method,
    is_object_like,
    iterator_complete,
    iterator_next,
    iterator_step,
    iterator_value,
    reverse,
    to_object,
)
from reviter.sequence import SeqView, SequenceReverseIterator
from reviter.step import IterationStep
from reviter.wtyping import SupportsAdvance, SupportsIterator, SupportsReverseIterator


class NotCallableMember:
    obtain_iterator = 0
    obtain_reverse_iterator = "nope"


class ReturnsPrimitive:
    def obtain_iterator(self) -> int:
        return 1

    def obtain_reverse_iterator(self) -> None:
        return None


class DisabledMember:
    obtain_reverse_iterator = None


class BadAdvance:
    def advance(self, value: object = Absent, /) -> tuple[object, bool]:
        return ("A", False)


def test_is_object_like():
    assert is_object_like(object())
    assert is_object_like(SeqView([]))
    assert is_object_like(())
    for primitive in (None, True, 0, 1.5, 2j, "", b""):
        assert not is_object_like(primitive)


def test_to_object():
    obj = object()
    assert to_object(obj) is obj
    assert to_object(5) == 5
    with pytest.raises(InvalidProtocolUse):
        _ = to_object(None)


def test_check_capability():
    view = SeqView("abc")
    assert check_capability(view, Capability.ITERABLE) is Presence.CALLABLE
    assert check_capability(view, Capability.REVERSE_ITERABLE) is Presence.CALLABLE
    assert check_capability(object(), Capability.ITERABLE) is Presence.ABSENT
    assert check_capability(DisabledMember(), Capability.REVERSE_ITERABLE) is Presence.ABSENT
    assert (
        check_capability(NotCallableMember(), Capability.ITERABLE)
        is Presence.NOT_CALLABLE
    )


def test_get_method():
    assert get_method(object(), Capability.REVERSE_ITERABLE) is Absent
    assert callable(get_method(SeqView("abc"), Capability.ITERABLE))
    with pytest.raises(InvalidProtocolUse, match="not callable"):
        _ = get_method(NotCallableMember(), Capability.ITERABLE)
    with pytest.raises(InvalidProtocolUse):
        _ = get_method(None, Capability.ITERABLE)


def test_get_iterator():
    it = get_iterator(SeqView("abc"))
    assert iterator_next(it) == IterationStep.of("a")
    with pytest.raises(InvalidProtocolUse, match="not iterable"):
        _ = get_iterator(object())
    with pytest.raises(InvalidProtocolUse, match="not callable"):
        _ = get_iterator(NotCallableMember())
    with pytest.raises(InvalidProtocolUse, match="must return an iterator"):
        _ = get_iterator(ReturnsPrimitive())


def test_get_iterator_returns_independent_iterators():
    view = SeqView("abc")
    first, second = get_iterator(view), get_iterator(view)
    assert first is not second
    _ = iterator_next(first)
    assert iterator_next(second) == IterationStep.of("a")


def test_iterator_next_requires_step():
    with pytest.raises(InvalidProtocolUse, match="IterationStep"):
        _ = iterator_next(BadAdvance())  # pyright: ignore[reportArgumentType]


def test_step_helpers():
    it = SeqView("a").values()
    step = iterator_step(it)
    assert step is not False
    assert not iterator_complete(step)
    assert iterator_value(step) == "a"
    assert iterator_step(it) is False
    done = iterator_next(it)
    assert iterator_complete(done)
    assert iterator_value(done) is Absent


def test_reverse_collection_gives_fresh_start():
    view = SeqView("abc")
    rev = reverse(view)
    assert isinstance(rev, SequenceReverseIterator)
    assert rev.to_list() == ["c", "b", "a"]
    assert reverse(view).to_list() == ["c", "b", "a"]


def test_reverse_errors():
    with pytest.raises(InvalidProtocolUse):
        _ = reverse(None)
    with pytest.raises(NotReversible, match="'int' object is not reversible"):
        _ = reverse(42)
    with pytest.raises(NotReversible):
        _ = reverse(object())
    with pytest.raises(NotReversible):
        _ = reverse(DisabledMember())
    with pytest.raises(InvalidProtocolUse, match="not callable"):
        _ = reverse(NotCallableMember())
    with pytest.raises(InvalidProtocolUse, match="must return an iterator"):
        _ = reverse(ReturnsPrimitive())


def test_errors_are_type_errors():
    for exc in (InvalidProtocolUse, NotReversible, IllegalReversal):
        assert issubclass(exc, TypeError)
        assert issubclass(exc, ReviterError)


def test_capability_protocols():
    view = SeqView("abc")
    it = view.values()
    assert isinstance(view, SupportsIterator)
    assert isinstance(view, SupportsReverseIterator)
    assert isinstance(it, SupportsAdvance)
    assert isinstance(it, SupportsReverseIterator)
    assert not isinstance(view, SupportsAdvance)
    assert not isinstance(object(), SupportsReverseIterator)
    # a mapping over a forward-only source lacks the member entirely
    mapped = MappingIterator(BadAdvance(), str)  # pyright: ignore[reportArgumentType]
    assert isinstance(mapped, SupportsAdvance)
    assert not isinstance(mapped, SupportsReverseIterator)
