"""QR code rendering with the ``qrcode`` library."""

from __future__ import annotations

import io

import qrcode
from PIL import Image

from stockroom.application.ports import CodeRenderer
from stockroom.domain.exceptions import ValidationError


class QrCodeRenderer(CodeRenderer):

    def __init__(self, border: int = 4) -> None:
        self._border = border

    def render(self, text: str, size: int) -> bytes:
        if not text:
            raise ValidationError("Cannot render an empty QR code")
        if size <= 0:
            raise ValidationError("QR code size must be positive")

        qr = qrcode.QRCode(box_size=10, border=self._border)
        qr.add_data(text)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white").get_image()

        img = img.convert("RGB").resize((size, size), Image.Resampling.NEAREST)
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()
