from __future__ import annotations

import gc

import pytest

from natsmsg.core.msg import EMPTY, Msg
from natsmsg.errors import InvalidArgumentError, InvalidHeaderError
from natsmsg.protocol import Headers

HEADER = b"NATS/1.0\r\nfoo:bar\r\n\r\n"


class TestMsgConstructor:
    @pytest.mark.parametrize("subject", ["", "   ", "\t\r\n", None])
    def test_invalid_subject(self, subject):
        with pytest.raises(InvalidArgumentError):
            Msg(subject)

    def test_minimal_message(self):
        msg = Msg("a")
        assert msg.subject == "a"
        assert msg.reply is None
        assert msg.headers is None
        assert msg.data is EMPTY
        assert msg.arrival_subscription is None

    def test_message_with_all_fields(self):
        hdr = Headers({"foo": "bar"})
        msg = Msg("foo", "bar", hdr, b"hello")
        assert msg.subject == "foo"
        assert msg.reply == "bar"
        assert msg.headers is hdr
        assert msg.data == b"hello"

    def test_constructor_copies_data(self):
        src = bytearray(b"hello")
        msg = Msg("foo", data=src)
        src[0] = ord("X")
        assert msg.data == b"hello"

    def test_constructor_with_empty_data(self):
        assert Msg("foo", data=bytearray()).data is EMPTY


class TestMsgData:
    def test_set_data_copies(self):
        msg = Msg("foo")
        src = bytearray(b"hello")
        msg.data = src
        src[0] = ord("X")
        assert msg.data[0] != ord("X")
        assert msg.data is not src

    def test_set_data_from_memoryview(self):
        msg = Msg("foo")
        msg.data = memoryview(b"hello world")[:5]
        assert msg.data == b"hello"

    def test_set_empty_data(self):
        msg = Msg("foo", data=b"hello")
        msg.data = b""
        assert msg.data is EMPTY

    def test_set_none_data(self):
        msg = Msg("foo", data=b"hello")
        msg.data = None
        assert msg.data is None

    def test_assign_data_does_not_copy(self):
        msg = Msg("foo")
        buf = bytearray(b"hello")
        msg.assign_data(buf)
        buf[0] = ord("X")
        assert msg.data[0] == ord("X")
        assert msg.data is buf


class TestMsgHeaders:
    def test_headers_read_has_no_side_effect(self):
        msg = Msg("foo")
        assert msg.headers is None
        assert msg.headers is None
        assert msg.has_headers() is False

    def test_get_or_create_headers(self):
        msg = Msg("foo")
        hdr = msg.get_or_create_headers()
        assert isinstance(hdr, Headers)
        assert msg.get_or_create_headers() is hdr
        assert msg.headers is hdr
        assert msg.has_headers() is False
        hdr["foo"] = "bar"
        assert msg.has_headers() is True

    def test_get_or_create_keeps_existing_headers(self):
        hdr = Headers({"foo": "bar"})
        msg = Msg("foo", headers=hdr)
        assert msg.get_or_create_headers() is hdr

    def test_set_headers_replaces(self):
        msg = Msg("foo", headers=Headers({"a": "1"}))
        other = Headers({"b": "2"})
        msg.headers = other
        assert msg.headers is other
        msg.headers = None
        assert msg.headers is None


class TestMsgFromWire:
    def test_without_headers(self):
        buf = bytearray(b"hello\r\n")
        msg = Msg.from_wire("foo", "bar", buf, 0, 5)
        assert msg.subject == "foo"
        assert msg.reply == "bar"
        assert msg.headers is None
        assert msg.data == b"hello"
        buf[0] = ord("X")
        assert msg.data == b"hello"

    def test_with_headers(self):
        buf = HEADER + b"hello"
        msg = Msg.from_wire("foo", None, buf, len(HEADER), len(buf))
        assert msg.headers == {"foo": "bar"}
        assert msg.data == b"hello"

    def test_headers_only(self):
        msg = Msg.from_wire("foo", None, HEADER, len(HEADER), len(HEADER))
        assert msg.headers == {"foo": "bar"}
        assert msg.data is EMPTY

    def test_empty_payload(self):
        msg = Msg.from_wire("foo", None, b"", 0, 0)
        assert msg.data is EMPTY

    def test_subject_is_not_validated(self):
        msg = Msg.from_wire("", None, b"", 0, 0)
        assert msg.subject == ""

    def test_invalid_header(self):
        buf = b"XATS/1.0\r\nfoo:bar\r\n\r\nhello"
        with pytest.raises(InvalidHeaderError):
            Msg.from_wire("foo", None, buf, 21, len(buf))

    def test_total_size_exceeds_buffer(self):
        with pytest.raises(InvalidArgumentError, match="exceeds byte array length"):
            Msg.from_wire("foo", None, b"hello", 0, 10)

    def test_header_size_exceeds_total_size(self):
        buf = HEADER + b"hello"
        with pytest.raises(InvalidArgumentError, match="exceeds total size"):
            Msg.from_wire("foo", None, buf, len(HEADER), len(HEADER) - 1)

    def test_frame_with_trailing_bytes(self):
        buf = HEADER + b"hello\r\nMSG foo 1 3\r\n"
        msg = Msg.from_wire("foo", None, buf, len(HEADER), len(HEADER) + 5)
        assert msg.data == b"hello"

    def test_arrival_subscription(self, subscription):
        msg = Msg.from_wire("foo", None, b"", 0, 0, subscription)
        assert msg.arrival_subscription is subscription

    def test_arrival_subscription_is_not_owned(self, connection, subscription):
        sub = type(subscription)(connection)
        msg = Msg.from_wire("foo", None, b"", 0, 0, sub)
        del sub
        gc.collect()
        assert msg.arrival_subscription is None


class TestMsgRepr:
    def test_str(self):
        msg = Msg("foo", data=b"hello")
        assert str(msg) == "{Subject=foo;Reply=null;Payload=<hello>}"

    def test_str_with_reply_and_headers(self):
        msg = Msg("foo", "bar", Headers({"a": "1"}))
        assert str(msg) == (
            "{Headers=Headers({'a': '1'});Subject=foo;Reply=bar;Payload=<>}"
        )

    def test_str_is_bounded(self):
        msg = Msg("foo", data=b"a" * 32 + b"b" * 1000)
        assert str(msg) == (
            "{Subject=foo;Reply=null;Payload=<" + "a" * 32 + "1000 more bytes>}"
        )

    def test_str_exactly_preview_size(self):
        msg = Msg("foo", data=b"a" * 32)
        assert str(msg) == "{Subject=foo;Reply=null;Payload=<" + "a" * 32 + ">}"

    def test_str_renders_raw_bytes(self):
        msg = Msg("foo", data=b"\xe9t\xe9")
        assert str(msg) == "{Subject=foo;Reply=null;Payload=<\xe9t\xe9>}"

    def test_str_without_data(self):
        msg = Msg("foo")
        msg.data = None
        assert str(msg) == "{Subject=foo;Reply=null;Payload=<>}"

    def test_repr(self, subscription):
        msg = Msg.from_wire("foo", "bar", b"hello", 0, 5, subscription)
        assert repr(msg) == (
            "Msg(sid=1, subject=foo, reply=bar, size=5, headers=None)"
        )
