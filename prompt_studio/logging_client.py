"""
Logging client configuration for console output and the central log collector.
"""
import logging
import logging.handlers
from typing import Optional


def setup_logger(
    service_name: str,
    level: str = "INFO",
    log_host: Optional[str] = None,
    log_port: int = 9999
) -> logging.Logger:
    """
    Setup the service logger.

    Module loggers (``logging.getLogger(__name__)``) live under the
    ``prompt_studio`` namespace, so they are attached to the same handlers.

    Args:
        service_name: Name of service ('prompt-studio')
        level: Log level name
        log_host: Host of the logging service; socket handler is skipped when None
        log_port: Port of the logging service

    Returns:
        Configured logger
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers
    logger.handlers = []

    package_logger = logging.getLogger("prompt_studio")
    package_logger.setLevel(logger.level)
    package_logger.handlers = []

    # Add service name to all log records
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)
        record.service = service_name
        return record

    logging.setLogRecordFactory(record_factory)

    handlers = []

    if log_host:
        # Send to logging service
        handlers.append(logging.handlers.SocketHandler(log_host, log_port))

    # Console handler for local debugging
    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter(
        '%(asctime)s - [%(service)s] - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    handlers.append(console_handler)

    for handler in handlers:
        logger.addHandler(handler)
        package_logger.addHandler(handler)

    return logger
