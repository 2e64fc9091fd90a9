"""
Event Access Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TenantStatus(str, Enum):
    """Tenant status"""

    active = "active"
    suspended = "suspended"


class AdminStatus(str, Enum):
    """Tenant administrator account status"""

    active = "active"
    disabled = "disabled"


class EventVisibility(str, Enum):
    """public = no token required, private = token required"""

    public = "public"
    private = "private"


class TokenType(str, Enum):
    """Access token type"""

    organizer = "organizer"  # full access
    participant = "participant"  # read-only


class TokenStatus(str, Enum):
    """Derived access token status, computed on read"""

    active = "active"
    revoked = "revoked"
    expired = "expired"
