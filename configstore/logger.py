import logging
from typing import Any

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "configstore"


def _renderer(json_logs: bool) -> Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """
    Route configstore log lines through structlog.

    Only the `configstore` stdlib logger gets a handler, the root logger and
    its handlers belong to the embedding application. Nothing is done when
    structlog was already configured by the application.
    """
    if structlog.is_configured():
        return

    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        # Console output renders tracebacks itself
        shared.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_logs),
        ],
    ))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(log_level.upper())
    package_logger.propagate = False


class ConfigStoreLogger:
    """
    Structured logger for the configstore package.

    Unlike a process-wide context, values bound with `bind` only travel with
    the returned logger, so every component can carry its own context.
    The underlying structlog logger is a lazy proxy: loggers created at import
    time still follow a configuration done later by the application.
    """

    def __init__(self, log_name: str = PACKAGE_LOGGER, **context: Any):
        self.name = log_name
        self.context = context
        self.logger = structlog.stdlib.get_logger(log_name, **context)

    def bind(self, **new_values: Any) -> "ConfigStoreLogger":
        """
        Return a new logger carrying the given key-value pairs.

        Args:
            **new_values: Key-value pairs added to every log line of the new logger
        """
        return ConfigStoreLogger(self.name, **{**self.context, **new_values})

    def debug(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.debug(event, *args, **kw)

    def info(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.info(event, *args, **kw)

    def warning(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.warning(event, *args, **kw)

    warn = warning

    def error(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.error(event, *args, **kw)

    def critical(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.critical(event, *args, **kw)

    def exception(self, event: str | None = None, *args: Any, **kw: Any):
        self.logger.exception(event, *args, **kw)


_logger = ConfigStoreLogger()


def get_configstore_logger() -> ConfigStoreLogger:
    """Return the package logger."""
    return _logger


def init_logger(config):
    """
    Initialize structured logging for an application embedding configstore.

    Args:
        config: Configuration object with LOG_LEVEL and JSON_LOGS settings

    Returns:
        ConfigStoreLogger: The package logger
    """
    log_level = "DEBUG" if config.DEBUG else config.LOG_LEVEL

    setup_logging(json_logs=config.JSON_LOGS, log_level=log_level)

    return get_configstore_logger()
