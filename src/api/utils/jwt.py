from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig

ADMIN_ROLE = "admin"


def generate_jwt(
    admin_id: UUID,
    tenant_id: UUID,
    role: str = ADMIN_ROLE,
    expires_delta: timedelta = timedelta(minutes=15),
) -> str:
    """
    Generate an admin JWT as the upstream identity provider does

    Args:
        admin_id: Admin UUID (carried as the "user_id" claim)
        tenant_id: Tenant UUID
        role: Role claim
        expires_delta: Token lifetime

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(admin_id),
        "tenant_id": str(tenant_id),
        "role": role,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
