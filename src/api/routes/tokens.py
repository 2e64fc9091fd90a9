"""
Access Token API Routes

Issue, list, revoke and share tokens (tenant admins), and validate tokens
(public).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import AliasChoices, BaseModel, Field

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.qr_code_encoder import IQRCodeEncoder, QRCodeFormat
from src.app.services.token_generator import ITokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tokens import (
    GetTokenLinkUseCase,
    IssueTokenResponse,
    IssueTokenUseCase,
    ListTokensResponse,
    ListTokensUseCase,
    RenderTokenQRUseCase,
    RevokeTokenResponse,
    RevokeTokenUseCase,
    TokenLinkResponse,
    TokenValidationResponse,
    ValidateTokenUseCase,
)
from src.domain.entities import TokenStatus, TokenType
from src.depends import (
    get_current_user,
    get_qr_encoder,
    get_token_generator,
    get_unit_of_work,
)

router = APIRouter(tags=["Tokens"])

FORBIDDEN_CODES = (
    "NOT_TENANT_ADMIN",
    "TENANT_SUSPENDED",
    "EVENT_NOT_PRIVATE",
    "QR_PARTICIPANT_ONLY",
)
NOT_FOUND_CODES = ("EVENT_NOT_FOUND", "TOKEN_NOT_FOUND")
INACTIVE_TOKEN_STATUS = {
    "TOKEN_REVOKED": TokenStatus.revoked.value,
    "TOKEN_EXPIRED": TokenStatus.expired.value,
}


class IssueTokenRequest(BaseModel):
    """POST /events/{event_id}/tokens request payload"""

    token_type: TokenType = Field(
        ...,
        validation_alias=AliasChoices("token_type", "type"),
        description="organizer or participant",
    )
    expires_at: datetime = Field(..., description="Expiration timestamp (must be in the future)")


def _raise_for_error(error: Error):
    """Map a token use case error to its HTTP response"""
    if error.code in FORBIDDEN_CODES:
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    if error.code in NOT_FOUND_CODES:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code in INACTIVE_TOKEN_STATUS:
        raise ClientError(
            error,
            status_code=status.HTTP_410_GONE,
            extra={"status": INACTIVE_TOKEN_STATUS[error.code]},
        )
    if error.code == "INVALID_EXPIRATION":
        raise ClientError(
            error,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=[{"field": "expires_at", "message": error.message}],
        )
    raise ServerError(error)


@router.post(
    "/events/{event_id}/tokens",
    status_code=status.HTTP_201_CREATED,
    response_model=IssueTokenResponse,
)
async def issue_token(
    event_id: UUID,
    request: IssueTokenRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_generator: ITokenGenerator = Depends(get_token_generator),
):
    """
    Issue Access Token

    Creates an organizer or participant token for a private event and
    returns it with its deep link.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: Not a tenant admin, tenant suspended or public event
        - 404 Not Found: Event not in caller's tenant
        - 422 Unprocessable Entity: expires_at not in the future
        - 500 Internal Server Error: Token generation failed
    """
    use_case = IssueTokenUseCase(
        uow,
        token_generator,
        ApplicationConfig.FRONTEND_URL,
        max_attempts=ApplicationConfig.TOKEN_GENERATION_MAX_ATTEMPTS,
    )
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
        event_id=event_id,
        token_type=request.token_type,
        expires_at=request.expires_at,
    )

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/events/{event_id}/tokens",
    status_code=status.HTTP_200_OK,
    response_model=ListTokensResponse,
)
async def list_tokens(
    event_id: UUID,
    status_filter: Optional[TokenStatus] = Query(None, alias="status"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Event Tokens

    Returns the event's tokens newest first with derived status, optionally
    filtered by status. Counts always cover every token of the event.
    """
    use_case = ListTokensUseCase(uow)
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
        event_id=event_id,
        status=status_filter,
    )

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.post(
    "/events/{event_id}/tokens/{token_id}/revoke",
    status_code=status.HTTP_200_OK,
    response_model=RevokeTokenResponse,
)
async def revoke_token(
    event_id: UUID,
    token_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Access Token

    Idempotent: revoking an already revoked token returns it unchanged.
    """
    use_case = RevokeTokenUseCase(uow)
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
        event_id=event_id,
        token_id=token_id,
    )

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get("/events/{event_id}/tokens/{token_id}/qr")
async def get_token_qr_code(
    event_id: UUID,
    token_id: UUID,
    image_format: QRCodeFormat = Query(QRCodeFormat.png, alias="format"),
    size: int = Query(300, ge=100, le=1000, description="Image width/height in pixels"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    encoder: IQRCodeEncoder = Depends(get_qr_encoder),
):
    """
    Token QR Code

    Renders the deep link of an active participant token as a PNG or SVG
    attachment.

    Raises:
        - 403 Forbidden: Organizer token
        - 404 Not Found: Unknown event or token
        - 410 Gone: Token revoked or expired
    """
    use_case = RenderTokenQRUseCase(uow, encoder, ApplicationConfig.FRONTEND_URL)
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
        event_id=event_id,
        token_id=token_id,
        image_format=image_format,
        size=size,
    )

    if result.is_err():
        _raise_for_error(result.error)

    qr_code = result.value
    return Response(
        content=qr_code.content,
        media_type=qr_code.media_type,
        headers={"Content-Disposition": f'attachment; filename="{qr_code.filename}"'},
    )


@router.get(
    "/events/{event_id}/tokens/{token_id}/copy-url",
    status_code=status.HTTP_200_OK,
    response_model=TokenLinkResponse,
)
async def get_token_url(
    event_id: UUID,
    token_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Token Deep Link

    Returns the shareable URL of an active token.
    """
    use_case = GetTokenLinkUseCase(uow, ApplicationConfig.FRONTEND_URL)
    result = await use_case.execute(
        admin_id=UUID(current_user["user_id"]),
        tenant_id=UUID(current_user["tenant_id"]),
        event_id=event_id,
        token_id=token_id,
    )

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.get(
    "/tokens/validate",
    status_code=status.HTTP_200_OK,
    response_model=TokenValidationResponse,
    response_model_exclude_none=True,
)
async def validate_token(
    token: str = Query(..., description="Token string to validate"),
    event_id: Optional[UUID] = Query(None, description="Event the token must belong to"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Validate Access Token (public)

    Always answers 200 with a structured result; invalid tokens carry a
    human-readable reason. A valid token counts as one use.
    """
    use_case = ValidateTokenUseCase(uow)
    result = await use_case.execute(token, event_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
