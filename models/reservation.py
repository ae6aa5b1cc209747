"""
models/reservation.py
---------------------
Domain models for reservations and the guest's reservation listing.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from models.property import Property


@dataclass
class Reservation:
    """
    A guest's stay at a property.

    Attributes:
        guest_id: The reserving user.
        property_id: The reserved property.
        start_date: First night.
        end_date: Departure day.
        id: Database primary key (None for new records).
    """
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    id: Optional[int] = None

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days


@dataclass
class ReservationListing:
    """A reservation joined with its property and that property's average rating."""
    reservation: Reservation
    property: Property
    average_rating: Optional[float] = None
