"""QR code rendering."""
import base64
import io

import qrcode
from qrcode.image.svg import SvgImage


def generate_qr_code(data: str) -> io.BytesIO:
    """Generate a QR code as an SVG image in a BytesIO buffer.

    Args:
        data: The data to encode in the QR code

    Returns:
        io.BytesIO: The SVG document, positioned at the start
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(image_factory=SvgImage)
    buffer = io.BytesIO()
    img.save(buffer)
    buffer.seek(0)
    return buffer


def qr_data_url(data: str) -> str:
    """Encode ``data`` as a QR code and return it as an embeddable data URL."""
    svg = generate_qr_code(data).getvalue()
    return "data:image/svg+xml;base64," + base64.b64encode(svg).decode("ascii")
