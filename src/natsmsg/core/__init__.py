from .msg import EMPTY, Msg
from .subscription import AsyncPublisher, Publisher, Subscription

__all__ = [
    "EMPTY",
    "AsyncPublisher",
    "Msg",
    "Publisher",
    "Subscription",
]
