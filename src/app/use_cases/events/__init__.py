"""
Event Management Use Cases
"""

from .create_event_use_case import CreateEventUseCase
from .dtos import CreateEventResponse, EventResponse, ListEventsResponse
from .list_events_use_case import ListEventsUseCase

__all__ = [
    "CreateEventUseCase",
    "ListEventsUseCase",
    "CreateEventResponse",
    "EventResponse",
    "ListEventsResponse",
]
