from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Tuple, Union

from natsmsg.errors import InvalidArgumentError

from ..constant import CRLF_S, HDR_KV_SEP, NATS_HDR_PREAMBLE_S

HeadersInit = Union["Headers", Mapping[str, str], Iterable[Tuple[str, str]]]


class Headers:
    """Headers holds the key/value header block of a message.

    Keys are unique and case-sensitive. Assigning an existing key
    replaces its value but keeps its position, so that iteration
    order (and thus the serialized form) is stable.

    The serialized form is cached. Any mutation clears the cache,
    and the next call to `to_bytes()` serializes again.

    Headers are not threadsafe: concurrent access or modifications
    result in undefined behavior.

    Example:
        >>> hdr = Headers()
        >>> hdr["Content-Type"] = "json"
        >>> hdr.to_bytes()
        b'NATS/1.0\\r\\nContent-Type:json\\r\\n\\r\\n'
    """

    __slots__ = ["_fields", "_raw"]

    def __init__(self, fields: HeadersInit | None = None) -> None:
        self._fields: dict[str, str] = {}
        # Serialized form, None when headers changed since last encoding
        self._raw: bytes | None = None
        if fields is None:
            return
        if isinstance(fields, (Headers, Mapping)):
            pairs: Iterable[tuple[str, str]] = fields.items()
        else:
            pairs = fields
        for key, value in pairs:
            self[key] = value

    @classmethod
    def from_bytes(
        cls, data: bytes | bytearray | memoryview | None, byte_count: int | None = None
    ) -> Headers:
        """Decode a serialized header block.

        See `natsmsg.protocol.serialization.parse_headers`.
        """
        # Imported here because the serialization module depends on Headers
        from ..serialization.headers import parse_headers

        return parse_headers(data, byte_count)

    def __repr__(self) -> str:
        return f"Headers({self._fields!r})"

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return list(self._fields.items()) == list(other._fields.items())
        if isinstance(other, Mapping):
            return self._fields == dict(other)
        return NotImplemented

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __setitem__(self, key: str, value: str) -> None:
        _check_field(key, value)
        self._fields[key] = value
        self._raw = None

    def __delitem__(self, key: str) -> None:
        del self._fields[key]
        self._raw = None

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._fields.get(key, default)

    def pop(self, key: str, default: str | None = None) -> str | None:
        """Remove a key and return its value, or default when missing."""
        if key not in self._fields:
            return default
        self._raw = None
        return self._fields.pop(key)

    def clear(self) -> None:
        self._fields.clear()
        self._raw = None

    def keys(self) -> list[str]:
        return list(self._fields)

    def values(self) -> list[str]:
        return list(self._fields.values())

    def items(self) -> list[tuple[str, str]]:
        return list(self._fields.items())

    def copy(self) -> Headers:
        """Returns a new Headers instance holding the same entries."""
        return Headers(self)

    def to_bytes(self) -> bytes | None:
        """Returns the serialized header block.

        An empty header block is treated as no headers at all, in which
        case `None` is returned. The returned object is cached and
        returned again as long as headers are not modified.
        """
        if not self._fields:
            return None
        if self._raw is None:
            hdr = [NATS_HDR_PREAMBLE_S]
            for key, value in self._fields.items():
                hdr.append(f"{key}{HDR_KV_SEP}{value}{CRLF_S}")
            hdr.append(CRLF_S)
            self._raw = "".join(hdr).encode("utf-8")
        return self._raw


def _check_field(key: str, value: str) -> None:
    if not isinstance(key, str) or not key:
        raise InvalidArgumentError("header key must be a non-empty string")
    if HDR_KV_SEP in key:
        raise InvalidArgumentError(f"header key cannot contain '{HDR_KV_SEP}'")
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError("header value must be a non-empty string")
    if CRLF_S in key or CRLF_S in value:
        raise InvalidArgumentError("header fields cannot contain CRLF")
