"""Application service: Scan Session.

A point-of-sale loop around a decode source. Every accepted scan sells
one unit through the InventoryStore and then locks the scanner for a
cooldown window so a code held in front of the camera is not sold twice.

States::

    IDLE --start--> READY --decode--> COOLDOWN --window elapsed--> READY
    READY/COOLDOWN --stop--> STOPPED --start--> READY

Decodes arriving in any state other than READY are dropped, not queued.
"""

from __future__ import annotations

import logging
import math
import queue
import threading
import time
from enum import Enum
from typing import Callable

from stockroom.application.inventory_store import InventoryStore
from stockroom.application.ports import (
    DecodeConfig,
    DecodeSource,
    ScanFeedback,
    StatusLevel,
)
from stockroom.domain.exceptions import CapabilityUnavailableError
from stockroom.domain.model.inventory import SaleResult, SaleStatus

logger = logging.getLogger(__name__)

SUCCESS_COOLDOWN_SECONDS = 2.0
FAILURE_COOLDOWN_SECONDS = 1.0

READY_MESSAGE = "Ready to scan..."


class ScanState(Enum):
    IDLE = "IDLE"
    READY = "READY"
    COOLDOWN = "COOLDOWN"
    STOPPED = "STOPPED"


class ScanSession:

    def __init__(
        self,
        store: InventoryStore,
        decoder: DecodeSource,
        feedback: ScanFeedback,
        clock: Callable[[], float] = time.monotonic,
        success_cooldown: float = SUCCESS_COOLDOWN_SECONDS,
        failure_cooldown: float = FAILURE_COOLDOWN_SECONDS,
        config: DecodeConfig | None = None,
    ) -> None:
        self._store = store
        self._decoder = decoder
        self._feedback = feedback
        self._clock = clock
        self._success_cooldown = success_cooldown
        self._failure_cooldown = failure_cooldown
        self._config = config or DecodeConfig()

        self._lock = threading.Lock()
        self._channel: queue.Queue = queue.Queue()
        self._state = ScanState.IDLE
        self._cooldown_until = 0.0
        self._countdown_shown: int | None = None

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def active(self) -> bool:
        return self._state in (ScanState.READY, ScanState.COOLDOWN)

    @property
    def channel(self) -> queue.Queue:
        return self._channel

    # --- Transitions ----------------------------------------------------------

    def start(self) -> bool:
        """Start decoding. Returns False if the decode source is unavailable."""
        if self.active:
            return True

        try:
            self._decoder.start(self._config, self._channel)
        except CapabilityUnavailableError as exc:
            logger.warning("Unable to start scanning: %s", exc)
            self._feedback.status(f"Scanner unavailable: {exc}", StatusLevel.ERROR)
            return False

        with self._lock:
            self._state = ScanState.READY
        logger.info("Scan session started at %d fps", self._config.fps)
        self._feedback.status(READY_MESSAGE, StatusLevel.READY)
        return True

    def stop(self) -> None:
        with self._lock:
            if self._state not in (ScanState.READY, ScanState.COOLDOWN):
                return
            self._state = ScanState.STOPPED
        self._decoder.stop()
        logger.info("Scan session stopped")
        self._feedback.status("Scanner stopped", StatusLevel.READY)

    def on_decode(self, payload: str) -> SaleResult | None:
        """Handle one decoded payload.

        Returns the sale outcome, or None if the payload was ignored
        because the session is not ready.
        """
        sku = payload.strip()
        with self._lock:
            if self._state is not ScanState.READY:
                logger.debug("Ignoring scan %r while %s", sku, self._state.value)
                return None
            # Claim the scanner before selling so a second decode is dropped.
            self._state = ScanState.COOLDOWN
            self._cooldown_until = math.inf

        try:
            result = self._store.sell(sku)
        except Exception:
            self._begin_cooldown(self._failure_cooldown)
            raise

        if result.status is SaleStatus.SOLD:
            self._feedback.success()
            self._feedback.status(
                f"Sold 1 unit of {result.product.design} ({result.product.stock} left)",
                StatusLevel.SUCCESS,
            )
            self._begin_cooldown(self._success_cooldown)
        else:
            self._feedback.failure()
            if result.status is SaleStatus.OUT_OF_STOCK:
                message = f"Out of stock: {result.product.design}"
            else:
                message = f"SKU not found: {sku}"
            self._feedback.status(message, StatusLevel.ERROR)
            self._begin_cooldown(self._failure_cooldown)
        return result

    def poll(self) -> None:
        """Advance the cooldown countdown; re-arm the scanner once it elapses."""
        with self._lock:
            if self._state is not ScanState.COOLDOWN:
                return
            remaining = self._cooldown_until - self._clock()
            if remaining > 0:
                seconds = math.ceil(remaining)
                if seconds == self._countdown_shown:
                    return
                self._countdown_shown = seconds
                message, level = _countdown_message(seconds), StatusLevel.READY
            else:
                self._state = ScanState.READY
                self._countdown_shown = None
                message, level = READY_MESSAGE, StatusLevel.READY
        self._feedback.status(message, level)

    # --- Event loop -----------------------------------------------------------

    def pump(self, timeout: float = 0.0) -> bool:
        """Dispatch everything waiting on the channel.

        Waits up to *timeout* seconds for the first payload. Returns False
        once the decode source has closed the channel.
        """
        block = timeout > 0
        while True:
            self.poll()
            try:
                payload = self._channel.get(block=block, timeout=timeout if block else None)
            except queue.Empty:
                return True
            block = False
            if payload is None:
                return False
            self.on_decode(payload)

    def run(self) -> None:
        """Pump at the decode rate until stopped or the source closes."""
        interval = 1.0 / self._config.fps
        while self.active:
            if not self.pump(timeout=interval):
                logger.info("Decode source closed")
                self.stop()

    # --- Internal helpers -----------------------------------------------------

    def _begin_cooldown(self, window: float) -> None:
        seconds = math.ceil(window)
        with self._lock:
            self._cooldown_until = self._clock() + window
            self._countdown_shown = seconds
        self._feedback.status(_countdown_message(seconds), StatusLevel.READY)


def _countdown_message(seconds: int) -> str:
    return f"Cooldown... Next scan in {seconds}s..."
