import io

import qrcode
import qrcode.image.svg
from PIL import Image

from src.app.services.qr_code_encoder import IQRCodeEncoder, QRCodeFormat

QR_BORDER = 2
QR_ERROR_CORRECTION = qrcode.constants.ERROR_CORRECT_M


class QRCodeEncoder(IQRCodeEncoder):
    """QR encoder backed by the qrcode library (Pillow for PNG output)"""

    def encode(self, data: str, image_format: QRCodeFormat, size: int) -> bytes:
        qr = qrcode.QRCode(error_correction=QR_ERROR_CORRECTION, border=QR_BORDER)
        qr.add_data(data)
        qr.make(fit=True)

        # Pick the largest module size that fits the requested width
        modules = qr.modules_count + 2 * QR_BORDER
        qr.box_size = max(1, size // modules)

        buffer = io.BytesIO()
        if image_format == QRCodeFormat.svg:
            image = qr.make_image(image_factory=qrcode.image.svg.SvgPathImage)
            # Dimensions default to millimetres; the viewBox keeps the drawing scaled
            root = image.get_image()
            root.set("width", str(size))
            root.set("height", str(size))
            image.save(buffer)
            return buffer.getvalue()

        image = qr.make_image(fill_color="black", back_color="white")
        image.save(buffer, format="PNG")

        # Scale to the exact requested size without blurring modules
        buffer.seek(0)
        resized = Image.open(buffer).convert("RGB").resize((size, size), Image.Resampling.NEAREST)
        output = io.BytesIO()
        resized.save(output, format="PNG")
        return output.getvalue()
