from __future__ import annotations

import logging

from ..core.msg import Msg as BaseMsg
from ..core.subscription import Publisher
from ..errors import MsgNotBoundError, NoReplySubjectError

logger = logging.getLogger("natsmsg.io.msg")


class Msg(BaseMsg):
    """
    Msg represents a message delivered by a synchronous client.
    """

    __slots__ = ()

    def respond(self, data: bytes | bytearray | None = None) -> None:
        """
        respond replies to the inbox of the message if there is one.

        Raises:
            NoReplySubjectError: When the message has no reply subject.
            MsgNotBoundError: When the message did not arrive through a
                subscription bound to a connection.
        """
        if not self._reply:
            raise NoReplySubjectError()
        conn: Publisher | None = self._connection()
        if conn is None:
            raise MsgNotBoundError()
        logger.debug("responding to message on %s", self._reply)
        conn.publish(self._reply, data or b"")
