from .errors import (
    InvalidArgumentError,
    InvalidHeaderError,
    MsgError,
    MsgNotBoundError,
    NatsError,
    NoReplySubjectError,
)
from .io.msg import Msg
from .protocol import Headers, encode_headers, encode_msg, parse_headers

__all__ = [
    "Headers",
    "InvalidArgumentError",
    "InvalidHeaderError",
    "Msg",
    "MsgError",
    "MsgNotBoundError",
    "NatsError",
    "NoReplySubjectError",
    "encode_headers",
    "encode_msg",
    "parse_headers",
]
