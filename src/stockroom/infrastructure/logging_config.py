"""Logging setup for the CLI process."""

from __future__ import annotations

import logging

import click

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Writes records with ``click.echo(err=True)``.

    The stream is looked up per record, so output follows whatever
    stderr click currently sees.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: str = "WARNING") -> None:
    """Send ``stockroom`` logs to stderr at *level*.

    Calling it again replaces the handler instead of adding another.
    """
    logger = logging.getLogger("stockroom")
    logger.setLevel(getattr(logging, level.upper()))
    for handler in list(logger.handlers):
        if isinstance(handler, ClickEchoHandler):
            logger.removeHandler(handler)

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
