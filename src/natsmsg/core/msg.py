from __future__ import annotations

import weakref
from typing import Any, TypeVar, Union

from ..errors import InvalidArgumentError
from ..protocol import Headers, PendingMessage
from ..protocol.constant import MSG_PREVIEW_SIZE
from .subscription import Subscription

Payload = Union[bytes, bytearray]
MsgT = TypeVar("MsgT", bound="Msg")

# Shared payload of messages without data
EMPTY = b""


class Msg:
    """
    Msg represents a message sent or received by the application.

    It encapsulates a subject, an optional reply subject, a payload,
    optional headers, and the subscription the message arrived on.

    Both async and sync flavours inherit from this class and only
    differ in how they respond to a message.
    """

    __slots__ = [
        "_subject",
        "_reply",
        "_data",
        "_headers",
        "_sub",
        "__weakref__",
    ]

    def __init__(
        self,
        subject: str,
        reply: str | None = None,
        headers: Headers | None = None,
        data: bytes | bytearray | memoryview | None = None,
    ) -> None:
        if not subject or subject.isspace():
            raise InvalidArgumentError("subject cannot be null, empty, or whitespace")
        self._subject = subject
        self._reply = reply
        self._headers = headers
        self._sub: weakref.ref[Subscription] | None = None
        self.data = data if data is not None else EMPTY

    @classmethod
    def from_wire(
        cls: type[MsgT],
        subject: str,
        reply: str | None,
        buf: bytes | bytearray | memoryview,
        header_size: int,
        total_size: int,
        sub: Subscription | None = None,
    ) -> MsgT:
        """Create a message from a frame received from the server.

        Subject and reply come from a control line parsed by the
        transport and are not validated.

        Args:
            subject: The message subject.
            reply: The reply subject, may be empty.
            buf: The frame buffer, starting with the header block (if any)
                followed by the payload.
            header_size: The size of the header block, 0 when there are
                no headers.
            total_size: The size of the header block and payload.
            sub: The subscription the message arrived on.

        Raises:
            InvalidArgumentError: When the header region or the payload is not
                within buf.
            InvalidHeaderError: When the header block is malformed.
        """
        if total_size > 0 and header_size > total_size:
            raise InvalidArgumentError("header size exceeds total size")
        if total_size > len(buf):
            raise InvalidArgumentError("total size exceeds byte array length")
        msg = cls.__new__(cls)
        msg._subject = subject
        msg._reply = reply
        msg._sub = weakref.ref(sub) if sub is not None else None
        msg._headers = None
        if header_size > 0:
            msg._headers = Headers.from_bytes(buf, header_size)
        # Make a deep copy of the payload
        if total_size > header_size:
            start = max(header_size, 0)
            msg._data = bytearray(memoryview(buf)[start:total_size])
        else:
            msg._data = EMPTY
        return msg

    @classmethod
    def from_pending(
        cls: type[MsgT],
        pending: PendingMessage,
        buf: bytes | bytearray | memoryview,
        sub: Subscription | None = None,
    ) -> MsgT:
        """Create a message from a pending message and its frame."""
        return cls.from_wire(
            pending.subject,
            pending.reply or None,
            buf,
            pending.header_bytes_needed,
            pending.bytes_needed,
            sub,
        )

    def __repr__(self) -> str:
        sub = self.arrival_subscription
        return (
            f"Msg(sid={sub.sid() if sub else None}, subject={self._subject}, "
            f"reply={self._reply}, size={len(self._data or EMPTY)}, "
            f"headers={self._headers})"
        )

    def __str__(self) -> str:
        parts = ["{"]
        if self._headers is not None:
            parts.append(f"Headers={self._headers!r};")
        reply = self._reply if self._reply is not None else "null"
        parts.append(f"Subject={self._subject};Reply={reply};Payload=<")
        data = self._data or EMPTY
        parts.append(bytes(data[:MSG_PREVIEW_SIZE]).decode("latin-1"))
        if len(data) > MSG_PREVIEW_SIZE:
            parts.append(f"{len(data) - MSG_PREVIEW_SIZE} more bytes")
        parts.append(">}")
        return "".join(parts)

    @property
    def subject(self) -> str:
        return self._subject

    @subject.setter
    def subject(self, value: str) -> None:
        self._subject = value

    @property
    def reply(self) -> str | None:
        return self._reply

    @reply.setter
    def reply(self, value: str | None) -> None:
        self._reply = value

    @property
    def data(self) -> Payload | None:
        """The message payload.

        Setting data copies application data into the message, so the
        caller may keep modifying its own buffer. See `assign_data()` to
        pass a buffer without copying it.
        """
        return self._data

    @data.setter
    def data(self, value: bytes | bytearray | memoryview | None) -> None:
        if value is None:
            self._data = None
        elif len(value) == 0:
            self._data = EMPTY
        else:
            self._data = bytearray(value)

    def assign_data(self, data: Payload | None) -> None:
        """Assign the payload without copying it.

        A change to the buffer after assignment is visible in the
        message: the caller is responsible for not modifying it.
        """
        self._data = data

    @property
    def headers(self) -> Headers | None:
        """The message headers, or None when the message has no headers.

        Use `get_or_create_headers()` to add headers to a message.
        """
        return self._headers

    @headers.setter
    def headers(self, value: Headers | None) -> None:
        self._headers = value

    def get_or_create_headers(self) -> Headers:
        """Returns the message headers, creating empty headers when the
        message does not have any yet."""
        if self._headers is None:
            self._headers = Headers()
        return self._headers

    def has_headers(self) -> bool:
        return self._headers is not None and len(self._headers) > 0

    @property
    def arrival_subscription(self) -> Subscription | None:
        """The subscription which received the message, if it is still alive."""
        if self._sub is None:
            return None
        return self._sub()

    def _connection(self) -> Any | None:
        sub = self.arrival_subscription
        if sub is None:
            return None
        return sub.connection()
