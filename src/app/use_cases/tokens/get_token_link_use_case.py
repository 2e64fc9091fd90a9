"""
Get Token Link Use Case

Returns the public deep link of an access token for copy-to-clipboard.
"""

from datetime import datetime
from typing import Callable
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.domain.access_url import build_access_url
from src.domain.clock import utcnow

from .dtos import TokenLinkResponse
from .shareable_token import load_shareable_token


class GetTokenLinkUseCase:
    """
    Use case for formatting a token's deep link.

    Business Rules:
    - Only active admins of the owning tenant
    - Only active tokens (revoked/expired tokens are gone)
    - URL format: {frontend_url}/events/{slug}?token={token}
    """

    def __init__(
        self, uow: UnitOfWork, frontend_url: str, clock: Callable[[], datetime] = utcnow
    ):
        self.uow = uow
        self.frontend_url = frontend_url
        self.clock = clock

    async def execute(
        self, admin_id: UUID, tenant_id: UUID, event_id: UUID, token_id: UUID
    ) -> Result[TokenLinkResponse]:
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
            url = build_access_url(self.frontend_url, event.slug, access_token.token)

            return Return.ok(
                TokenLinkResponse(
                    token_id=str(access_token.id),
                    token=access_token.token,
                    url=url,
                    short_url=url,
                )
            )
