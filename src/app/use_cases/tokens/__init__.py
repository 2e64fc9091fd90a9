"""
Access Token Use Cases

Issue, validate, revoke, list and share event access tokens.
"""

from .dtos import (
    AccessTokenResponse,
    IssueTokenResponse,
    ListTokensResponse,
    RevokeTokenResponse,
    TokenLinkResponse,
    TokenQRCode,
    TokenValidationResponse,
)
from .get_token_link_use_case import GetTokenLinkUseCase
from .issue_token_use_case import IssueTokenUseCase
from .list_tokens_use_case import ListTokensUseCase
from .render_token_qr_use_case import RenderTokenQRUseCase
from .revoke_token_use_case import RevokeTokenUseCase
from .validate_token_use_case import ValidateTokenUseCase

__all__ = [
    "IssueTokenUseCase",
    "ValidateTokenUseCase",
    "RevokeTokenUseCase",
    "ListTokensUseCase",
    "GetTokenLinkUseCase",
    "RenderTokenQRUseCase",
    "AccessTokenResponse",
    "IssueTokenResponse",
    "ListTokensResponse",
    "RevokeTokenResponse",
    "TokenLinkResponse",
    "TokenQRCode",
    "TokenValidationResponse",
]
