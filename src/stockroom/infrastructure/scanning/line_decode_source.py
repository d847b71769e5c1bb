"""Decode source for keyboard-wedge scanners.

Handheld USB barcode/QR scanners type the decoded text followed by
Enter, so every non-blank line on the stream is one payload.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import TextIO

from stockroom.application.ports import DecodeConfig, DecodeSource
from stockroom.domain.exceptions import CapabilityUnavailableError

logger = logging.getLogger(__name__)


class LineDecodeSource(DecodeSource):
    """Reads the stream on one background thread for its whole lifetime.

    A blocking read cannot be interrupted, so ``stop()`` detaches the
    channel instead of killing the reader. Lines read while detached are
    dropped, and a later ``start()`` reattaches the same reader rather than
    spawning a second one on the same stream.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._channel: queue.Queue | None = None
        self._exhausted = False
        self._thread: threading.Thread | None = None

    def start(self, config: DecodeConfig, channel: queue.Queue) -> None:
        if self._stream is None or self._stream.closed:
            raise CapabilityUnavailableError("No scanner input stream available")
        with self._lock:
            if self._exhausted:
                raise CapabilityUnavailableError("Scanner input stream has ended")
            self._channel = channel
            if self._thread is None:
                self._thread = threading.Thread(
                    target=self._read_lines, name="line-decoder", daemon=True
                )
                self._thread.start()

    def stop(self) -> None:
        with self._lock:
            self._channel = None

    def _read_lines(self) -> None:
        for line in self._stream:
            payload = line.strip()
            if not payload:
                continue
            with self._lock:
                if self._channel is None:
                    logger.debug("Dropped %r while stopped", payload)
                    continue
                logger.debug("Decoded %r", payload)
                self._channel.put(payload)
        with self._lock:
            self._exhausted = True
            if self._channel is not None:
                self._channel.put(None)
