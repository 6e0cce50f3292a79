from __future__ import annotations

import pytest

from natsmsg.core.subscription import Subscription


class FakeConnection:
    def __init__(self) -> None:
        self.published: list[tuple[str, bytes]] = []

    def publish(self, subject: str, data: bytes) -> None:
        self.published.append((subject, data))


class FakeAsyncConnection:
    def __init__(self) -> None:
        self.published: list[tuple[str, bytes]] = []

    async def publish(self, subject: str, data: bytes) -> None:
        self.published.append((subject, data))


class FakeSubscription(Subscription):
    def __init__(self, conn: object | None = None, sid: int = 1) -> None:
        self._conn = conn
        self._sid = sid

    def sid(self) -> int:
        return self._sid

    def subject(self) -> str:
        return "foo"

    def connection(self) -> object | None:
        return self._conn


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def connection() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def async_connection() -> FakeAsyncConnection:
    return FakeAsyncConnection()


@pytest.fixture
def subscription(connection: FakeConnection) -> FakeSubscription:
    return FakeSubscription(connection)


@pytest.fixture
def async_subscription(async_connection: FakeAsyncConnection) -> FakeSubscription:
    return FakeSubscription(async_connection)


@pytest.fixture
def unbound_subscription() -> FakeSubscription:
    return FakeSubscription(None)
