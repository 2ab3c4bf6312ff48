class ReviterError(Exception):
    """Base class for errors raised by the iteration protocol."""


class InvalidProtocolUse(ReviterError, TypeError):
    """A receiver or a protocol member does not have the required shape."""


class NotReversible(ReviterError, TypeError):
    """The value does not advertise the reverse-iterable capability."""


class IllegalReversal(ReviterError, TypeError):
    """A sequence iterator was asked to turn around after it started moving."""

    def __init__(self, message: str = "Cannot reverse once iteration has begun.") -> None:
        super().__init__(message)
