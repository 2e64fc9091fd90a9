"""
Render Token QR Code Use Case

Renders the deep link of a participant token as a QR code image.
"""

from datetime import datetime
from typing import Callable
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.qr_code_encoder import IQRCodeEncoder, QRCodeFormat
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.domain.access_url import build_access_url
from src.domain.clock import utcnow
from src.domain.entities import TokenType

from .dtos import TokenQRCode
from .shareable_token import load_shareable_token

MEDIA_TYPES = {
    QRCodeFormat.png: "image/png",
    QRCodeFormat.svg: "image/svg+xml",
}


class RenderTokenQRUseCase:
    """
    Use case for rendering a token QR code.

    Business Rules:
    - Only active admins of the owning tenant
    - Only participant tokens get QR codes (organizer links are not printed)
    - Only active tokens (revoked/expired tokens are gone)
    - Image rendering is delegated to the QR encoder unchanged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        encoder: IQRCodeEncoder,
        frontend_url: str,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.encoder = encoder
        self.frontend_url = frontend_url
        self.clock = clock

    async def execute(
        self,
        admin_id: UUID,
        tenant_id: UUID,
        event_id: UUID,
        token_id: UUID,
        image_format: QRCodeFormat = QRCodeFormat.png,
        size: int = 300,
    ) -> Result[TokenQRCode]:
        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            result = await load_shareable_token(
                self.uow, tenant_id, event_id, token_id, self.clock()
            )
            if result.is_err():
                return Return.err(result.error)

            event, access_token = result.value
            if access_token.token_type != TokenType.participant:
                return Return.err(
                    Error(
                        "QR_PARTICIPANT_ONLY",
                        "QR codes can only be generated for participant tokens",
                    )
                )

            url = build_access_url(self.frontend_url, event.slug, access_token.token)
            content = self.encoder.encode(url, image_format, size)

            return Return.ok(
                TokenQRCode(
                    content=content,
                    media_type=MEDIA_TYPES[image_format],
                    filename=f"{access_token.token_type.value}-token-{access_token.id}.{image_format.value}",
                )
            )
