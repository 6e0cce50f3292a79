from __future__ import annotations

import abc
from typing import Any, Protocol


class Publisher(Protocol):
    """Connection-like object used by synchronous messages to respond."""

    def publish(self, subject: str, data: bytes) -> None:
        ...


class AsyncPublisher(Protocol):
    """Connection-like object used by asynchronous messages to respond."""

    async def publish(self, subject: str, data: bytes) -> None:
        ...


class Subscription(metaclass=abc.ABCMeta):
    """Interface for the subscription a message arrived on.

    Messages only hold a weak reference to their subscription, so
    implementations must support weak references (plain classes do,
    classes defining `__slots__` must include `__weakref__`).
    """

    @abc.abstractmethod
    def sid(self) -> int:
        """
        Returns the subscription ID.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def subject(self) -> str:
        """
        Returns the subject of the `Subscription`.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def connection(self) -> Any | None:
        """
        Returns the connection the `Subscription` is bound to, or None
        when the subscription is no longer bound to a connection.
        """
        raise NotImplementedError
