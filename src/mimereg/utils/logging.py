"""Logging setup for registry diagnostics.

The registry reports duplicate definitions and corpus load results
through loguru. configure_logging() decides where those records go;
only records emitted from the mimereg package reach its sinks.
"""

import sys

from loguru import logger

from mimereg.config.models import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(config: LoggingConfig) -> None:
    """
    Replace the loguru sinks with ones built from the configuration.

    Console output goes to stderr so command output on stdout stays
    clean. A file sink is added when config.file is set.
    """
    logger.remove()

    serialize = config.format == "json"
    fmt = "{message}" if serialize else CONSOLE_FORMAT

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        filter="mimereg",
        serialize=serialize,
        colorize=not serialize,
    )

    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=config.level,
            filter="mimereg",
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
            compression="gz",
        )

    logger.debug("Logging configured: level={} format={}", config.level, config.format)
