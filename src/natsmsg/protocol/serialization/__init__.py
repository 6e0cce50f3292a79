from .headers import encode_headers, parse_headers
from .msg import encode_msg, parse_msg_arg

__all__ = [
    "encode_headers",
    "encode_msg",
    "parse_headers",
    "parse_msg_arg",
]
