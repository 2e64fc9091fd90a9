"""
Public (token-gated) Event Use Cases
"""

from .access_public_event_use_case import AccessPublicEventUseCase
from .dtos import EventAccess, EventAccessSummaryResponse, PublicEventInfo, PublicEventResponse
from .get_event_access_summary_use_case import GetEventAccessSummaryUseCase

__all__ = [
    "AccessPublicEventUseCase",
    "GetEventAccessSummaryUseCase",
    "EventAccess",
    "EventAccessSummaryResponse",
    "PublicEventInfo",
    "PublicEventResponse",
]
