from pydantic import Field
from dinehub.schemas.base import CamelModel

class QRCodeOut(CamelModel):
    qr_code_url: str = Field(..., description="data:image/png;base64 URI")
