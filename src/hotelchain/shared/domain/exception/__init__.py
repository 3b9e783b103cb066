from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    HotelChainNotFoundException,
    HotelNotFoundException,
    InvalidStateTransitionException,
    NoAvailabilityException,
    ReservationNotFoundException,
    ReserverPayerNotFoundException,
    ResourceNotFoundException,
    RoomNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "InvalidStateTransitionException",
    "NoAvailabilityException",
    "HotelChainNotFoundException",
    "HotelNotFoundException",
    "RoomNotFoundException",
    "ReservationNotFoundException",
    "ReserverPayerNotFoundException",
]
