from __future__ import annotations

from natsmsg.errors import InvalidArgumentError

from ..constant import CRLF, CRLF_S, HMSG_RE, HPUB_OP_S, MSG_RE, PUB_OP_S
from ..errors import InvalidProtocolMessageError
from ..payload import Headers, PendingMessage
from .headers import encode_headers


def parse_msg_arg(line: bytes | bytearray) -> PendingMessage:
    """Parse a MSG or HMSG control line.

    Examples:

        MSG foo.bar 9 11\\r\\n
        HMSG foo.bar 9 _INBOX.34 34 45\\r\\n

    Raises:
        InvalidProtocolMessageError: When the line is not a valid control line.

    Returns:
        A pending message describing the frame following the control line.
    """
    pending = PendingMessage()
    if msg := MSG_RE.match(line):
        subject, sid, _, reply, needed_bytes = msg.groups()
        try:
            pending.populate(subject, reply, sid, needed_bytes)
        except ValueError as exc:
            raise InvalidProtocolMessageError(f"invalid MSG: {line!r}") from exc
        return pending
    if msg := HMSG_RE.match(line):
        subject, sid, _, reply, header_size, needed_bytes = msg.groups()
        try:
            pending.populate(subject, reply, sid, needed_bytes, header_size)
        except ValueError as exc:
            raise InvalidProtocolMessageError(f"invalid HMSG: {line!r}") from exc
        if pending.header_bytes_needed > pending.bytes_needed:
            raise InvalidProtocolMessageError(
                f"header size ({pending.header_bytes_needed}) exceeds "
                f"total size ({pending.bytes_needed})"
            )
        return pending
    raise InvalidProtocolMessageError(f"not a message control line: {line!r}")


def encode_msg(
    subject: str,
    reply: str | None,
    payload: bytes | bytearray | None,
    headers: Headers | None = None,
) -> bytes:
    """Returns PUB or HPUB command as bytes.

    HPUB is used only when headers hold at least one entry.

    Raises:
        InvalidArgumentError: When subject is empty or contains whitespace.

    Returns:
        The wired representation of a PUB or HPUB command.
    """
    _check_subject(subject)
    payload = payload or b""
    payload_size = len(payload)
    encoded_hdr = encode_headers(headers)
    if encoded_hdr is None:
        args = [PUB_OP_S, subject, reply, str(payload_size)]
        return (
            (" ".join(arg for arg in args if arg) + CRLF_S).encode()
            + payload
            + CRLF
        )
    hdr_len = len(encoded_hdr)
    total_size = payload_size + hdr_len
    args = [HPUB_OP_S, subject, reply, str(hdr_len), str(total_size)]
    return (
        (" ".join(arg for arg in args if arg) + CRLF_S).encode()
        + encoded_hdr
        + payload
        + CRLF
    )


def _check_subject(sub: str) -> None:
    if not sub:
        raise InvalidArgumentError("subject cannot be empty")
    if any(c.isspace() for c in sub):
        raise InvalidArgumentError("subject cannot contain whitespace")
