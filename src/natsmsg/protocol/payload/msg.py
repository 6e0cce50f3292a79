from __future__ import annotations


class PendingMessage:
    """PendingMessage contains all data found in a MSG or a HMSG
    control line.

    It describes the frame following the control line: the first
    `header_bytes_needed` bytes hold the header block, and the frame
    holds `bytes_needed` bytes in total (headers included).
    """

    __slots__ = ["subject", "reply", "sid", "header_bytes_needed", "bytes_needed"]

    def __init__(self) -> None:
        self.subject = ""
        self.reply = ""
        self.sid = 0
        self.header_bytes_needed = 0
        self.bytes_needed = 0

    def __repr__(self) -> str:
        return (
            f"PendingMessage(subject={self.subject}, reply={self.reply}, "
            f"sid={self.sid}, header_bytes_needed={self.header_bytes_needed}, "
            f"bytes_needed={self.bytes_needed})"
        )

    def populate(
        self,
        subject: bytes,
        reply: bytes | None,
        sid: bytes,
        needed_bytes: bytes,
        header_size: bytes | None = None,
    ) -> None:
        self.subject = subject.decode()
        if reply:
            self.reply = reply.decode()
        else:
            self.reply = ""
        if header_size:
            self.header_bytes_needed = int(header_size)
        else:
            self.header_bytes_needed = 0
        self.sid = int(sid)
        self.bytes_needed = int(needed_bytes)
