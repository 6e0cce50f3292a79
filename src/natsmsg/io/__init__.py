from .msg import Msg

__all__ = ["Msg"]
