"""
Revoke Access Token Use Case

Handles idempotent revocation of access tokens.
"""

import logging
from datetime import datetime
from typing import Callable
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import check_tenant_admin
from src.domain.clock import utcnow
from src.domain.entities import AuditEvent

from .dtos import AccessTokenResponse, RevokeTokenResponse

logger = logging.getLogger(__name__)


class RevokeTokenUseCase:
    """
    Use case for revoking an access token.

    Business Rules:
    - Only active admins of the owning tenant can revoke
    - Token must belong to the given event within the admin's tenant
    - Idempotent: revoking an already revoked token returns it unchanged
    - The revocation is a conditional write (only if not yet revoked), so
      concurrent first revocations agree on a single revoked_at
    - Audit event is written only by the call that revoked the token
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, admin_id: UUID, tenant_id: UUID, event_id: UUID, token_id: UUID
    ) -> Result[RevokeTokenResponse]:
        """
        Execute revoke token use case.

        Args:
            admin_id: Admin ID from JWT
            tenant_id: Tenant ID from JWT
            event_id: Event the token must belong to
            token_id: Token to revoke

        Returns:
            Result with RevokeTokenResponse DTO, or Error
        """
        async with self.uow:
            error = await check_tenant_admin(self.uow, admin_id, tenant_id)
            if error:
                return Return.err(error)

            access_token = await self.uow.access_tokens.get_by_id(tenant_id, token_id)
            if access_token is None or access_token.event_id != event_id:
                return Return.err(Error("TOKEN_NOT_FOUND", "Token not found"))

            now = self.clock()

            if access_token.revoked_at is None:
                revoked = await self.uow.access_tokens.revoke_if_active(
                    tenant_id, token_id, revoked_at=now, revoked_by=admin_id
                )

                if revoked:
                    audit = AuditEvent(
                        tenant_id=tenant_id,
                        user_id=admin_id,
                        action="token_revoked",
                        event_metadata={
                            "event_id": str(event_id),
                            "token_id": str(token_id),
                            "token_type": access_token.token_type.value,
                        },
                    )
                    await self.uow.audit_events.create(audit)
                    await self.uow.commit()
                    logger.info("Revoked token %s for event %s", token_id, event_id)

                # Re-read so a concurrent winner's revoked_at is what we return
                access_token = await self.uow.access_tokens.get_by_id(tenant_id, token_id)

            return Return.ok(
                RevokeTokenResponse(
                    message="Token revoked successfully",
                    token=AccessTokenResponse.from_entity(access_token, now),
                )
            )
