from __future__ import annotations

import logging

from ..core.msg import Msg as BaseMsg
from ..core.subscription import AsyncPublisher
from ..errors import MsgNotBoundError, NoReplySubjectError

logger = logging.getLogger("natsmsg.aio.msg")


class Msg(BaseMsg):
    """
    Msg represents a message delivered by an asynchronous client.
    """

    __slots__ = ()

    async def respond(self, data: bytes | bytearray | None = None) -> None:
        """
        respond replies to the inbox of the message if there is one.
        """
        if not self._reply:
            raise NoReplySubjectError()
        conn: AsyncPublisher | None = self._connection()
        if conn is None:
            raise MsgNotBoundError()
        logger.debug("responding to message on %s", self._reply)
        await conn.publish(self._reply, data or b"")
