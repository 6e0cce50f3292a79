from .headers import Headers
from .msg import PendingMessage

__all__ = [
    "Headers",
    "PendingMessage",
]
