import pytest

from stocks_mock.observability.interceptor import (
    CapturedResponse,
    HijackNotSupportedError,
    ResponseInterceptor,
    SupportsHijack,
)

from conftest import RecordingSend


class HijackableSend(RecordingSend):
    def __init__(self) -> None:
        super().__init__()
        self.hijacked = 0

    def hijack(self) -> str:
        self.hijacked += 1
        return "raw-connection"


async def test_defaults_to_success_when_no_status_written(recording_send) -> None:
    interceptor = ResponseInterceptor(recording_send)
    await interceptor({"type": "http.response.body", "body": b"hi"})

    assert interceptor.status_code == 200
    assert interceptor.captured.recorded is False
    assert recording_send.messages == [{"type": "http.response.body", "body": b"hi"}]


async def test_first_status_wins_but_later_ones_are_forwarded(recording_send) -> None:
    interceptor = ResponseInterceptor(recording_send)
    await interceptor({"type": "http.response.start", "status": 404, "headers": []})
    await interceptor({"type": "http.response.start", "status": 200, "headers": []})

    assert interceptor.status_code == 404
    assert interceptor.captured.recorded is True
    assert recording_send.statuses == [404, 200]


async def test_uses_supplied_captured_state(recording_send) -> None:
    captured = CapturedResponse()
    interceptor = ResponseInterceptor(recording_send, captured)
    await interceptor({"type": "http.response.start", "status": 201, "headers": []})

    assert captured == CapturedResponse(status_code=201, recorded=True)


async def test_hijack_delegates_when_supported() -> None:
    send = HijackableSend()
    interceptor = ResponseInterceptor(send)
    await interceptor({"type": "http.response.start", "status": 101, "headers": []})

    assert isinstance(send, SupportsHijack)
    assert interceptor.hijack() == "raw-connection"
    assert send.hijacked == 1
    assert interceptor.status_code == 101
    assert send.statuses == [101]


def test_hijack_unsupported_raises(recording_send) -> None:
    interceptor = ResponseInterceptor(recording_send)

    with pytest.raises(HijackNotSupportedError, match="does not support hijack"):
        interceptor.hijack()
    assert interceptor.captured == CapturedResponse()


def test_nested_interceptors_delegate_hijack_down_the_chain() -> None:
    inner = ResponseInterceptor(HijackableSend())
    outer = ResponseInterceptor(inner)
    assert outer.hijack() == "raw-connection"

    bare = ResponseInterceptor(ResponseInterceptor(RecordingSend()))
    with pytest.raises(HijackNotSupportedError):
        bare.hijack()


def test_unknown_attributes_come_from_wrapped_send(recording_send) -> None:
    recording_send.server_extension = "zerocopy"
    interceptor = ResponseInterceptor(recording_send)

    assert interceptor.server_extension == "zerocopy"
    assert interceptor.messages is recording_send.messages
    with pytest.raises(AttributeError):
        _ = interceptor.missing_capability
