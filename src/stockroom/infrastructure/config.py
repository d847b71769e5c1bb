"""Runtime settings.

Built by the CLI from its options (each backed by a STOCKROOM_* env var)
and handed to the composition root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# The repo root when installed in editable mode.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_SLOT = "stockroom_inventory"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    slot: str = DEFAULT_SLOT
    log_level: str = "WARNING"

    # scanning
    fps: int = 10
    scan_box: int = 250
    success_cooldown: float = 2.0
    failure_cooldown: float = 1.0

    # label sheets
    label_columns: int = 4
    label_rows: int = 5
    max_labels: int = 500
    label_image_size: int = 200
    qr_export_size: int = 500
