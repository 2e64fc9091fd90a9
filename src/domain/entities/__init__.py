"""
Event Access Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    TenantStatus,
    AdminStatus,
    EventVisibility,
    TokenType,
    TokenStatus,
)

# Export all entities
from .tenant import Tenant
from .admin import Admin
from .event import Event
from .access_token import AccessToken, TOKEN_ALPHABET, TOKEN_LENGTH
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "TenantStatus",
    "AdminStatus",
    "EventVisibility",
    "TokenType",
    "TokenStatus",
    # Entities
    "Tenant",
    "Admin",
    "Event",
    "AccessToken",
    "AuditEvent",
    # Token format
    "TOKEN_ALPHABET",
    "TOKEN_LENGTH",
]
