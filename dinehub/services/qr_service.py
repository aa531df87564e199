import base64
import logging
from io import BytesIO
import qrcode
from PIL import Image
from dinehub.core.config import settings
from dinehub.core.exceptions import UpstreamServiceError

logger = logging.getLogger(__name__)

class QRService:
    @staticmethod
    def public_menu_url(protocol: str, host: str, slug: str) -> str:
        return f"{protocol}://{host}/menu/{slug}"

    @staticmethod
    def generate_qr(
        text: str,
        size: int = 300,
        border: int = 4,
        color: str = "#000000",
        background: str = "#FFFFFF",
    ) -> bytes:
        """Render ``text`` as a square PNG QR code."""
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=border,
        )
        qr.add_data(text)
        qr.make(fit=True)

        img = qr.make_image(
            fill_color=color,
            back_color=background,
        ).resize((size, size), Image.Resampling.NEAREST)

        output = BytesIO()
        img.save(output, format="PNG")
        return output.getvalue()

    @staticmethod
    def to_data_uri(png: bytes) -> str:
        return "data:image/png;base64," + base64.b64encode(png).decode("ascii")

    def menu_qr_data_uri(self, protocol: str, host: str, slug: str) -> str:
        """Data URI of a QR code pointing at the restaurant's public menu."""
        url = self.public_menu_url(protocol, host, slug)
        try:
            png = self.generate_qr(
                url,
                size=settings.QR_SIZE,
                border=settings.QR_BORDER,
                color=settings.QR_COLOR,
                background=settings.QR_BACKGROUND,
            )
        except Exception as exc:
            logger.exception("QR encoding failed for %s", url)
            raise UpstreamServiceError("Failed to generate QR code") from exc
        return self.to_data_uri(png)

qr_service = QRService()
