from __future__ import annotations

import logging

from natsmsg.errors import InvalidArgumentError, InvalidHeaderError

from ..constant import (
    CRLF_S,
    DOUBLE_CRLF,
    DOUBLE_CRLF_SIZE,
    HDR_KV_SEP,
    MIN_VALID_HDR_LEN,
    NATS_HDR_PREAMBLE,
    NATS_HDR_PREAMBLE_SIZE,
)
from ..payload import Headers

logger = logging.getLogger("natsmsg.protocol.serialization.headers")


def encode_headers(headers: Headers | None) -> bytes | None:
    """Encode headers into their wire representation.

    Args:
        headers: The headers to encode.

    Returns:
        The serialized header block, or `None` when there are no headers
        to send. Empty headers are never encoded into a lone preamble.
    """
    if headers is None:
        return None
    return headers.to_bytes()


def parse_headers(
    data: bytes | bytearray | memoryview | None, byte_count: int | None = None
) -> Headers:
    """Parse a serialized header block.

    Example header block:

        NATS/1.0\\r\\nfoo:bar\\r\\nhello:world\\r\\n\\r\\n

    Args:
        data: The buffer holding the header block. It may be larger than
            the header block.
        byte_count: The number of bytes of the header block within data.
            Defaults to the length of data.

    Raises:
        InvalidArgumentError: When byte count or buffer are invalid.
        InvalidHeaderError: When header block is malformed.

    Returns:
        A new Headers instance.
    """
    if byte_count is None:
        byte_count = len(data) if data is not None else 0
    if byte_count < 1:
        raise InvalidArgumentError("invalid byte count")
    if data is None:
        raise InvalidArgumentError("invalid byte array")
    if len(data) < byte_count:
        raise InvalidArgumentError("count exceeds byte array length")
    if byte_count < MIN_VALID_HDR_LEN:
        logger.debug("rejecting header block of %d bytes", byte_count)
        raise InvalidHeaderError()
    view = memoryview(data)[:byte_count]
    # Check for the trailing \r\n\r\n
    if view[-DOUBLE_CRLF_SIZE:] != DOUBLE_CRLF:
        logger.debug("rejecting header block without trailing CRLF")
        raise InvalidHeaderError()
    if view[:NATS_HDR_PREAMBLE_SIZE] != NATS_HDR_PREAMBLE:
        logger.debug("rejecting header block with invalid preamble")
        raise InvalidHeaderError()
    try:
        raw_fields = str(
            view[NATS_HDR_PREAMBLE_SIZE:-DOUBLE_CRLF_SIZE], encoding="utf-8"
        )
    except UnicodeDecodeError as exc:
        raise InvalidHeaderError("header is not valid utf-8") from exc

    lines = [line for line in raw_fields.split(CRLF_S) if line]
    if not lines:
        raise InvalidHeaderError("empty header")

    # Populate a fresh instance so that nothing is observable on failure
    hdr = Headers()
    for line in lines:
        key, sep, value = line.partition(HDR_KV_SEP)
        if not sep or not key or not value:
            raise InvalidHeaderError("field missing key or value")
        hdr[key] = value
    return hdr
