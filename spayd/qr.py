"""QR code rendering through the ``qrcode`` library.

Only validated descriptors are encoded; matrix layout and error
correction belong to ``qrcode``.
"""

import io

import qrcode
from qrcode.constants import ERROR_CORRECT_M

from spayd.descriptor import spayd_string
from spayd.logging import get_logger
from spayd.models.payment import Payment

logger = get_logger(__name__)


def make_qr(
    payment: Payment,
    error_correction: int = ERROR_CORRECT_M,
    box_size: int = 10,
    border: int = 4,
) -> qrcode.QRCode:
    """Validate ``payment`` and return a fitted QR code of its descriptor.

    Raises
    ------
    SpaydError
        When the payment does not validate.
    """
    payload = spayd_string(payment)
    qr = qrcode.QRCode(
        version=None,
        error_correction=error_correction,
        box_size=box_size,
        border=border,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    logger.debug("Encoded %d-character descriptor as QR version %s", len(payload), qr.version)
    return qr


def qr_png_bytes(payment: Payment, box_size: int = 6, border: int = 2) -> bytes:
    """Render the payment's QR code as PNG bytes."""
    qr = make_qr(payment, box_size=box_size, border=border)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
