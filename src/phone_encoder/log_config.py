"""
Logging setup. Logs always go to stderr so stdout carries only encodings.

The library modules log through module-level structlog loggers. Without a
call to configure_logging, structlog's defaults print every level to stdout,
so programs using load_dictionary or solve_numbers directly should call it
first.
"""
import logging
import sys

import structlog


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
