"""
Access Token Use Case DTOs (Data Transfer Objects)

All Response classes for the access token domain.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.clock import isoformat_utc
from src.domain.entities import AccessToken


# ============================================================================
# Response DTOs
# ============================================================================


class AccessTokenResponse(BaseModel):
    """Access token with its derived status"""

    id: str
    event_id: str
    token: str
    token_type: str
    expires_at: str
    created_at: str
    last_used_at: Optional[str] = None
    use_count: int
    revoked_at: Optional[str] = None
    revoked_by: Optional[str] = None
    status: str
    is_active: bool

    @classmethod
    def from_entity(cls, access_token: AccessToken, now: datetime) -> "AccessTokenResponse":
        status = access_token.status_at(now)
        return cls(
            id=str(access_token.id),
            event_id=str(access_token.event_id),
            token=access_token.token,
            token_type=access_token.token_type.value,
            expires_at=isoformat_utc(access_token.expires_at),
            created_at=isoformat_utc(access_token.created_at),
            last_used_at=isoformat_utc(access_token.last_used_at),
            use_count=access_token.use_count,
            revoked_at=isoformat_utc(access_token.revoked_at),
            revoked_by=str(access_token.revoked_by) if access_token.revoked_by else None,
            status=status.value,
            is_active=access_token.is_active_at(now),
        )


class IssueTokenResponse(AccessTokenResponse):
    """Newly issued token plus its public deep link"""

    url: str


class TokenValidationResponse(BaseModel):
    """
    Outcome of validating a token string.

    Invalid results carry a human-readable reason; revoked tokens also
    carry revoked_at. Valid results carry the token's identity.
    """

    valid: bool
    token_id: Optional[str] = None
    event_id: Optional[str] = None
    token_type: Optional[str] = None
    expires_at: Optional[str] = None
    reason: Optional[str] = None
    revoked_at: Optional[str] = None


class RevokeTokenResponse(BaseModel):
    """Response for revoke token use case"""

    message: str
    token: AccessTokenResponse


class ListTokensResponse(BaseModel):
    """Tokens of an event plus counts over all of its tokens"""

    tokens: List[AccessTokenResponse]
    total: int
    active_count: int
    revoked_count: int
    expired_count: int


class TokenLinkResponse(BaseModel):
    """Deep link for copy-to-clipboard"""

    token_id: str
    token: str
    url: str
    short_url: str


class TokenQRCode(BaseModel):
    """Rendered QR code image for a token deep link"""

    content: bytes
    media_type: str
    filename: str
