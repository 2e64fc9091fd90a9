from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import AccessToken


class UsageRecordingError(Exception):
    """Raised when the usage counter of a token could not be written"""


class IAccessTokenRepository(ABC):
    """
    AccessToken repository interface - application layer

    Every tenant-owned lookup takes tenant_id explicitly. Only the
    token-string lookup is global, because the string is the credential.
    """

    @abstractmethod
    async def get_by_id(
        self, tenant_id: UUID, token_id: UUID
    ) -> Optional[AccessToken]:
        """Get token by ID within a tenant"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[AccessToken]:
        """Get token by exact token string"""
        pass

    @abstractmethod
    async def exists_by_token(self, token: str) -> bool:
        """Check whether a token string is already taken"""
        pass

    @abstractmethod
    async def list_by_event(
        self, tenant_id: UUID, event_id: UUID
    ) -> List[AccessToken]:
        """Get all tokens of an event within a tenant, newest first"""
        pass

    @abstractmethod
    async def create(self, access_token: AccessToken) -> AccessToken:
        """Create a new access token"""
        pass

    @abstractmethod
    async def record_usage(self, token_id: UUID, used_at: datetime) -> None:
        """
        Atomically increment use_count by one and advance last_used_at.

        last_used_at never moves backwards, even if writes land out of order.

        Raises:
            UsageRecordingError: if the storage rejected the write
        """
        pass

    @abstractmethod
    async def revoke_if_active(
        self, tenant_id: UUID, token_id: UUID, revoked_at: datetime, revoked_by: UUID
    ) -> bool:
        """
        Set revoked_at/revoked_by only if the token is not revoked yet.

        Returns:
            True if this call revoked the token, False if it was already revoked
        """
        pass
