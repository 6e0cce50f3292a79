from __future__ import annotations


class NatsError(Exception):
    """Base class for all exceptions raised by this library."""

    pass


# Argument errors


class InvalidArgumentError(NatsError, ValueError):
    """Error raised when a caller provides an invalid argument."""

    pass


# Header errors


class InvalidHeaderError(NatsError):
    """Error raised when a serialized header block is malformed."""

    def __init__(self, msg: str = "invalid header") -> None:
        self.msg = msg
        super().__init__(msg)


# Message errors


class MsgError(NatsError):
    """Base class for errors raised when a message is misused."""

    pass


class NoReplySubjectError(MsgError):
    """Error raised when responding to a message without reply subject."""

    def __init__(self) -> None:
        super().__init__("no reply subject")


class MsgNotBoundError(MsgError):
    """Error raised when responding to a message which did not arrive
    through a subscription bound to a connection."""

    def __init__(self) -> None:
        super().__init__("message is not bound to a subscription")
