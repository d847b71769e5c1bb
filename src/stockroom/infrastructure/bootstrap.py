"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from typing import TextIO

from stockroom.application.inventory_store import InventoryStore
from stockroom.application.label_sheet import LabelSheetGenerator
from stockroom.application.ports import DecodeConfig
from stockroom.application.scan_session import ScanSession
from stockroom.infrastructure.codes.qr_renderer import QrCodeRenderer
from stockroom.infrastructure.config import Settings
from stockroom.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from stockroom.infrastructure.scanning.console_feedback import ConsoleFeedback
from stockroom.infrastructure.scanning.line_decode_source import LineDecodeSource


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository.for_slot(settings.data_dir, settings.slot)


def inventory_store(settings: Settings) -> InventoryStore:
    return InventoryStore(product_repository(settings))


def code_renderer() -> QrCodeRenderer:
    return QrCodeRenderer()


def label_sheet_generator(settings: Settings) -> LabelSheetGenerator:
    return LabelSheetGenerator(
        code_renderer(),
        columns=settings.label_columns,
        rows=settings.label_rows,
        max_quantity=settings.max_labels,
        image_size=settings.label_image_size,
    )


def scan_session(settings: Settings, stream: TextIO, sound: bool = True) -> ScanSession:
    return ScanSession(
        inventory_store(settings),
        LineDecodeSource(stream),
        ConsoleFeedback(sound=sound),
        success_cooldown=settings.success_cooldown,
        failure_cooldown=settings.failure_cooldown,
        config=DecodeConfig(
            fps=settings.fps,
            box_width=settings.scan_box,
            box_height=settings.scan_box,
        ),
    )
