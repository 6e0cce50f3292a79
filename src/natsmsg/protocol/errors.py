from __future__ import annotations


class ProtocolError(Exception):
    """Base class for protocol errors."""

    pass


# Parser errors


class ProtocolParserError(ProtocolError):
    """Raised when a protocol parser error occurs."""

    pass


class InvalidProtocolMessageError(ProtocolParserError):
    """Raised when an invalid protocol message is received."""

    pass
