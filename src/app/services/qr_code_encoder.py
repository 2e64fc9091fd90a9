from abc import ABC, abstractmethod
from enum import Enum


class QRCodeFormat(str, Enum):
    png = "png"
    svg = "svg"


class IQRCodeEncoder(ABC):
    """Renders a string as a QR code image"""

    @abstractmethod
    def encode(self, data: str, image_format: QRCodeFormat, size: int) -> bytes:
        """
        Encode data as a QR code.

        Args:
            data: Text to encode (the token deep link)
            image_format: png or svg
            size: Target width/height in pixels

        Returns:
            Image bytes in the requested format
        """
        pass
