"""Process-wide structlog configuration for programs that use the mock clients."""

import structlog

from g2mock.core.errors import LogFormatError


def configure_structlog(log_format: str = "console") -> None:
    """Configure structlog based on the requested format.

    Level filtering is done per client by StructlogMessageLogger, so the
    structlog wrapper itself lets every level through.

    Raises:
        LogFormatError: if log_format is neither 'console' nor 'json'.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer(default=repr)
    else:
        raise LogFormatError(log_format=log_format)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
