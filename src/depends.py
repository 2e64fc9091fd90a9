from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.qr_code_encoder import QRCodeEncoder
from src.adapter.services.token_generator import SecureTokenGenerator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.qr_code_encoder import IQRCodeEncoder
from src.app.services.token_generator import ITokenGenerator

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

_token_generator = SecureTokenGenerator()
_qr_encoder = QRCodeEncoder()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_generator() -> ITokenGenerator:
    return _token_generator


def get_qr_encoder() -> IQRCodeEncoder:
    return _qr_encoder


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Identity is issued upstream; this service only verifies the signature
    and reads the claims.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id (admin id), tenant_id, role

    Raises:
        HTTPException: 401 if token is invalid, expired or missing claims
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or not payload.get("user_id") or not payload.get("tenant_id"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload
