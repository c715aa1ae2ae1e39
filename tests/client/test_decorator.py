"""Tests for the instrumented decorator — trace, notify and result sequencing."""

import pytest
from pydantic import BaseModel, ConfigDict

from g2mock.client.domain.operation import CannedField, Operation
from g2mock.client.domain.settings import ClientSettings
from g2mock.client.infrastructure.decorator import instrumented, render_details
from g2mock.client.infrastructure.instrumentation import ClientInstrumentation
from g2mock.messagelog.domain.level import LogLevel
from tests.messagelog.fake_logger import FakeMessageLogger
from tests.observer.fake_observer import FakeObserver

_ECHO = Operation(
    name="echo",
    event_id=9001,
    trace_entry=1,
    trace_exit=2,
    details={"text": "text", "canned": CannedField(name="echo")},
)
_FAIL = Operation(name="fail", event_id=9002, trace_entry=3, trace_exit=4)
_REGISTER = Operation(
    name="register_observer", event_id=9003, trace_entry=5, trace_exit=6
)
_UNREGISTER = Operation(
    name="unregister_observer", event_id=9004, trace_entry=7, trace_exit=8
)


class _EchoResults(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    echo: str = "canned"


class _EchoClient:
    def __init__(self, settings: ClientSettings | None = None) -> None:
        self.logger = FakeMessageLogger()
        self.results = _EchoResults()
        self.instrumentation = ClientInstrumentation(
            component="echo", component_id=9000, settings=settings, logger=self.logger
        )

    @instrumented(_ECHO)
    async def echo(self, text: str) -> str:
        self.logger.log(500, "echo.body")
        return self.results.echo

    @instrumented(_FAIL)
    async def fail(self, reason: str) -> None:
        raise RuntimeError(reason)


def _make_tracing_client() -> _EchoClient:
    return _EchoClient(settings=ClientSettings(log_level=LogLevel.TRACE))


class TestRenderDetails:
    """Detail sources resolve to strings from arguments or canned results."""

    def test_argument_and_canned_sources(self) -> None:
        details = render_details(_ECHO, {"text": "hi"}, _EchoResults(echo="x"))
        assert details == {"text": "hi", "canned": "x"}

    def test_non_string_arguments_are_stringified(self) -> None:
        operation = Operation(
            name="lookup",
            event_id=1,
            trace_entry=1,
            trace_exit=2,
            details={"id": "entity_id"},
        )
        assert render_details(operation, {"entity_id": 42}, _EchoResults()) == {
            "id": "42"
        }


class TestInstrumentedResult:
    """The wrapped method's result passes through unchanged."""

    async def test_returns_method_result(self) -> None:
        client = _EchoClient()
        client.results.echo = "configured"

        assert await client.echo("hi") == "configured"

    async def test_keyword_arguments_are_accepted(self) -> None:
        client = _EchoClient()
        assert await client.echo(text="hi") == "canned"

    async def test_wrapper_keeps_method_name(self) -> None:
        assert _EchoClient.echo.__name__ == "echo"

    async def test_errors_propagate(self) -> None:
        client = _EchoClient()

        with pytest.raises(RuntimeError, match="boom"):
            await client.fail("boom")


class TestInstrumentedTracing:
    """Entry and exit traces are emitted only when tracing is on."""

    async def test_no_traces_when_tracing_is_off(self) -> None:
        client = _EchoClient()

        await client.echo("hi")

        assert client.logger.codes() == [500]

    async def test_entry_body_exit_order_when_tracing(self) -> None:
        client = _make_tracing_client()

        await client.echo("hi")

        assert client.logger.codes() == [1, 500, 2]

    async def test_entry_trace_carries_arguments(self) -> None:
        client = _make_tracing_client()

        await client.echo("hi")

        entry = client.logger.messages[0]
        assert entry.event == "echo.echo.entry"
        assert entry.details == {"text": "hi"}

    async def test_exit_trace_carries_result_and_elapsed(self) -> None:
        client = _make_tracing_client()

        await client.echo("hi")

        exit_ = client.logger.messages[-1]
        assert exit_.event == "echo.echo.exit"
        assert exit_.details["text"] == "hi"
        assert exit_.details["result"] == "canned"
        assert exit_.details["error"] is None
        assert exit_.details["elapsed_ms"] >= 0  # type: ignore[operator]

    async def test_exit_trace_records_error(self) -> None:
        client = _make_tracing_client()

        with pytest.raises(RuntimeError):
            await client.fail("boom")

        exit_ = client.logger.messages[-1]
        assert exit_.code == 4
        assert isinstance(exit_.details["error"], RuntimeError)
        assert "result" not in exit_.details


class TestInstrumentedNotification:
    """Registered observers hear about every call."""

    async def test_observer_receives_call_details(self) -> None:
        client = _EchoClient()
        observer = FakeObserver()
        client.instrumentation.register_observer(_REGISTER, observer)

        await client.echo("hi")
        await client.instrumentation.drain_notifications()

        [notification] = observer.notifications_for(9001)
        assert notification["text"] == "hi"
        assert notification["canned"] == "canned"
        assert notification["subjectId"] == "9000"

    async def test_failed_call_is_still_announced(self) -> None:
        client = _EchoClient()
        observer = FakeObserver()
        client.instrumentation.register_observer(_REGISTER, observer)

        with pytest.raises(RuntimeError):
            await client.fail("boom")
        await client.instrumentation.drain_notifications()

        assert len(observer.notifications_for(9002)) == 1

    async def test_unregistered_observer_hears_nothing_further(self) -> None:
        client = _EchoClient()
        observer = FakeObserver()
        client.instrumentation.register_observer(_REGISTER, observer)
        client.instrumentation.unregister_observer(_UNREGISTER, observer)

        await client.echo("hi")
        await client.instrumentation.drain_notifications()

        assert observer.notifications_for(9001) == []
