"""Scan feedback on the terminal.

Status lines are colored with click; the terminal bell stands in for the
success/error tones (two bells for a sale, one for a rejected scan).
"""

from __future__ import annotations

import click

from stockroom.application.ports import ScanFeedback, StatusLevel

_COLORS = {
    StatusLevel.READY: "cyan",
    StatusLevel.SUCCESS: "green",
    StatusLevel.ERROR: "red",
}

BELL = "\a"


class ConsoleFeedback(ScanFeedback):

    def __init__(self, sound: bool = True) -> None:
        self._sound = sound

    def success(self) -> None:
        self._beep(2)

    def failure(self) -> None:
        self._beep(1)

    def status(self, message: str, level: StatusLevel) -> None:
        click.secho(message, fg=_COLORS[level], err=level is StatusLevel.ERROR)

    def _beep(self, times: int) -> None:
        if self._sound:
            click.echo(BELL * times, nl=False)
