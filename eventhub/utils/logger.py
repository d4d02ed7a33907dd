"""Loguru setup for the admin service.

Standard-library records (uvicorn, gunicorn, fastapi) are routed into loguru so
every line shares one format, and are optionally shipped to an OTLP collector.
"""

import logging
import sys
from types import FrameType
from loguru import logger
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
from opentelemetry._logs import set_logger_provider

from eventhub.core.config import Settings
from eventhub.core.telemetry import build_resource

SERVER_LOGGERS = [
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
    "gunicorn.error",
    "gunicorn.access",
    "fastapi",
]

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> <level>{level}</level>: "
    "<cyan>[{name}:{line}]</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        # The OTLP sink logs through opentelemetry.*; forwarding those would loop
        if record.name.startswith("opentelemetry"):
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _add_otlp_sink(settings: Settings) -> None:
    logger_provider = LoggerProvider(resource=build_resource(settings))
    set_logger_provider(logger_provider)
    exporter = OTLPLogExporter(
        endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT,
        insecure=settings.OTEL_EXPORTER_OTLP_INSECURE,
    )
    logger_provider.add_log_record_processor(BatchLogRecordProcessor(exporter))
    logger.add(
        LoggingHandler(logger_provider=logger_provider),
        level=settings.LOG_LEVEL,
        serialize=True,
    )


def setup_logging(settings: Settings):
    """
    Make loguru the only log output of the process.

    Installs `InterceptHandler` on the root and server loggers, replaces
    loguru's default sink with a coloured stderr sink at `LOG_LEVEL`, and adds
    an OTLP sink when `OTEL_EXPORTER_OTLP_ENDPOINT` is set. A failing OTLP
    sink is reported on stderr and does not stop the application.

    Returns:
        The configured loguru logger.
    """
    level = settings.LOG_LEVEL
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(level)

    for name in SERVER_LOGGERS:
        log = logging.getLogger(name)
        log.handlers = [InterceptHandler()]
        log.propagate = False

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        colorize=True,
        enqueue=True,
    )

    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        try:
            _add_otlp_sink(settings)
            logger.info("Shipping logs to the OTLP collector.")
        except Exception as e:
            print(f"Log Setup Failed: {e}", file=sys.stderr)

    return logger
