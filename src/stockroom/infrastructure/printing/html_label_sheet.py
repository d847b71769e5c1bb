"""Print-ready HTML for a LabelSheet.

Each page is an A4 CSS grid; pages after the first start on a new sheet
of paper. Images are embedded as data URIs so the file works offline.
"""

from __future__ import annotations

import base64
from html import escape

from stockroom.application.label_sheet import LabelPage, LabelSheet

_STYLE = """
@media print {
    body { -webkit-print-color-adjust: exact; print-color-adjust: exact; }
    .page-break { page-break-before: always; }
    .no-print { display: none; }
}
body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; }
.page { width: 210mm; height: 297mm; padding: 10mm; box-sizing: border-box; margin: 0 auto;
        display: grid; grid-template-columns: repeat(%(columns)d, 1fr);
        grid-template-rows: repeat(%(rows)d, 1fr); gap: 5mm; }
.qr-item { text-align: center; border: 1px dashed #ccc; padding: 2mm; display: flex;
           flex-direction: column; align-items: center; justify-content: center; overflow: hidden; }
.qr-item img { width: 30mm; height: 30mm; }
.qr-item .sku { font-family: monospace; font-weight: bold; font-size: 8pt; margin-top: 2mm; word-break: break-all; }
.qr-item .details { font-size: 7pt; color: #555; }
.print-header { padding: 20px; text-align: center; background-color: #f3f4f6; }
"""


def _data_uri(png: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


def _render_page(page: LabelPage, first: bool) -> str:
    classes = "page" if first else "page page-break"
    items = "".join(
        f'<div class="qr-item" style="grid-row: {label.row + 1}; grid-column: {label.column + 1};">'
        f'<img src="{_data_uri(label.image)}" alt="QR Code">'
        f'<div class="sku">{escape(label.sku)}</div>'
        f'<div class="details">{escape(label.caption)}</div>'
        f"</div>"
        for label in page.labels
    )
    return f'<div class="{classes}">{items}</div>'


def render_label_sheet_html(sheet: LabelSheet) -> str:
    """Render every page of *sheet* into a single HTML document."""
    style = _STYLE % {"columns": sheet.columns, "rows": sheet.rows}
    pages = "".join(
        _render_page(page, first=(i == 0)) for i, page in enumerate(sheet.pages)
    )
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="UTF-8">'
        f"<title>Print QR Codes - {escape(sheet.sku)}</title>"
        f"<style>{style}</style></head><body>"
        '<div class="print-header no-print">'
        "<h1>Printing QR Code Labels</h1>"
        f"<p><strong>Product:</strong> {escape(sheet.caption)} - {escape(sheet.sku)}</p>"
        f"<p>{sheet.label_count} labels on {len(sheet.pages)} page(s). "
        "Enable background graphics and default margins when printing.</p>"
        "</div>"
        f"{pages}</body></html>\n"
    )
