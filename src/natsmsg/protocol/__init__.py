from .errors import InvalidProtocolMessageError, ProtocolError
from .payload import Headers, PendingMessage
from .serialization import encode_headers, encode_msg, parse_headers, parse_msg_arg

__all__ = [
    "Headers",
    "InvalidProtocolMessageError",
    "PendingMessage",
    "ProtocolError",
    "encode_headers",
    "encode_msg",
    "parse_headers",
    "parse_msg_arg",
]
