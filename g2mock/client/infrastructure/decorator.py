"""instrumented — the trace and notify wrapper applied to every mock client method."""

import functools
import inspect
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel

from g2mock.client.domain.operation import CannedField, Operation
from g2mock.client.infrastructure.instrumentation import ClientInstrumentation


class InstrumentedClient(Protocol):
    """What the decorator needs from the client it wraps."""

    instrumentation: ClientInstrumentation
    results: BaseModel


def render_details(
    operation: Operation, arguments: Mapping[str, object], results: BaseModel
) -> dict[str, str]:
    """Resolve operation.details into the string map sent to observers."""
    rendered: dict[str, str] = {}
    for key, source in operation.details.items():
        if isinstance(source, CannedField):
            value = getattr(results, source.name)
        else:
            value = arguments[source]
        rendered[key] = str(value)
    return rendered


F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def instrumented(
    operation: Operation,
) -> Callable[[F], F]:
    """Wrap an async client method in the trace / notify / result / trace sequence.

    The wrapped method only produces the result. Around it the wrapper:
    emits the entry trace when tracing is on, dispatches the notification
    when observers are registered (without waiting for delivery), awaits the
    method, and emits the exit trace with the result, any error and the
    elapsed time once the method has finished.
    """

    def decorate(method: F) -> F:
        signature = inspect.signature(method)

        @functools.wraps(method)
        async def wrapper(client: InstrumentedClient, *args: Any, **kwargs: Any) -> Any:
            instrumentation = client.instrumentation
            started = time.perf_counter()
            bound = signature.bind(client, *args, **kwargs)
            bound.apply_defaults()
            arguments = dict(list(bound.arguments.items())[1:])

            if instrumentation.is_trace:
                instrumentation.trace_entry(operation, **arguments)
            if instrumentation.has_observers():
                instrumentation.notify(
                    operation, render_details(operation, arguments, client.results)
                )

            result: Any = None
            error: Exception | None = None
            try:
                result = await method(client, *args, **kwargs)
                return result
            except Exception as exc:
                error = exc
                raise
            finally:
                if instrumentation.is_trace:
                    exit_fields: dict[str, object] = dict(arguments)
                    if result is not None:
                        exit_fields["result"] = result
                    instrumentation.trace_exit(
                        operation, started, **exit_fields, error=error
                    )

        return wrapper  # type: ignore[return-value]

    return decorate
