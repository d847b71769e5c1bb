"""In-memory fakes for testing.

These implement the same abstract interfaces as the infrastructure
classes but keep everything in memory. No file I/O, no hardware.
"""

from __future__ import annotations

import copy
import queue

from stockroom.application.ports import (
    CodeRenderer,
    DecodeConfig,
    DecodeSource,
    ScanFeedback,
    StatusLevel,
)
from stockroom.domain.exceptions import CapabilityUnavailableError
from stockroom.domain.model.product import Product
from stockroom.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):
    """Stores deep copies, like a real slot that serializes on every save."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._stored: list[Product] = copy.deepcopy(products or [])
        self.save_count = 0

    def load(self) -> list[Product]:
        return copy.deepcopy(self._stored)

    def save(self, products: list[Product]) -> None:
        self._stored = copy.deepcopy(products)
        self.save_count += 1

    @property
    def stored(self) -> list[Product]:
        return self._stored


class SequentialSkus:
    """SKU factory returning predictable codes: TEST-000-000-001, ..."""

    def __init__(self) -> None:
        self._n = 0

    def __call__(self, design: str, size: str, color: str) -> str:
        self._n += 1
        return f"TEST-000-000-{self._n:03d}"


class FakeClock:

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeDecodeSource(DecodeSource):
    """Feeds pre-recorded payloads into the session channel."""

    def __init__(
        self,
        payloads: list[str] | None = None,
        close: bool = False,
        available: bool = True,
    ) -> None:
        self._payloads = list(payloads or [])
        self._close = close
        self._available = available
        self.config: DecodeConfig | None = None
        self.channel: queue.Queue | None = None
        self.started = 0
        self.stopped = 0

    def start(self, config: DecodeConfig, channel: queue.Queue) -> None:
        if not self._available:
            raise CapabilityUnavailableError("Camera permission denied")
        self.config = config
        self.channel = channel
        self.started += 1
        for payload in self._payloads:
            channel.put(payload)
        if self._close:
            channel.put(None)

    def stop(self) -> None:
        self.stopped += 1


class RecordingFeedback(ScanFeedback):

    def __init__(self) -> None:
        self.events: list[str] = []
        self.messages: list[tuple[str, StatusLevel]] = []

    def success(self) -> None:
        self.events.append("success")

    def failure(self) -> None:
        self.events.append("failure")

    def status(self, message: str, level: StatusLevel) -> None:
        self.messages.append((message, level))

    @property
    def last_message(self) -> str:
        return self.messages[-1][0]


class FakeCodeRenderer(CodeRenderer):

    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def render(self, text: str, size: int) -> bytes:
        self.calls.append((text, size))
        return f"PNG:{text}:{size}".encode()
