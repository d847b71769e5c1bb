"""Interfaces for the external collaborators the application drives.

Concrete implementations live in the infrastructure layer; tests use
in-memory fakes.
"""

from __future__ import annotations

import queue
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class StatusLevel(Enum):
    READY = "ready"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class DecodeConfig:
    """How often the decoder samples frames and where it looks."""

    fps: int = 10
    box_width: int = 250
    box_height: int = 250


class CodeRenderer(ABC):

    @abstractmethod
    def render(self, text: str, size: int) -> bytes:
        """Return a PNG image of *size* x *size* pixels encoding *text*."""


class DecodeSource(ABC):
    """A camera or scanner that turns codes into text payloads.

    Payloads are put on the channel handed to ``start``. A ``None`` on the
    channel means the source has closed and will produce nothing more.
    """

    @abstractmethod
    def start(self, config: DecodeConfig, channel: queue.Queue) -> None:
        """Begin decoding. Raises CapabilityUnavailableError if unavailable."""

    @abstractmethod
    def stop(self) -> None:
        """Stop decoding. Safe to call more than once."""


class ScanFeedback(ABC):

    @abstractmethod
    def success(self) -> None:
        """Positive cue after a sale."""

    @abstractmethod
    def failure(self) -> None:
        """Negative cue after a rejected scan."""

    @abstractmethod
    def status(self, message: str, level: StatusLevel) -> None:
        """Show a status line to the operator."""
