"""
repositories/reservation_repo.py
--------------------------------
Data access layer for a guest's reservations.
"""

from typing import Optional

from config import DEFAULT_RESULT_LIMIT
from models.property import Property
from models.reservation import Reservation, ReservationListing
from repositories.base import BaseRepository
from utils.result import Result


class ReservationRepository(BaseRepository):
    """Repository for reading the reservations table."""

    def get_all_reservations(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> Result:
        """
        Get a guest's reservations with their property and its average rating.

        Reviews are aggregated per reservation and property, so a property
        without reviews does not appear.

        Args:
            guest_id: The guest's user id.
            limit: Maximum number of rows.

        Returns:
            Success(list[ReservationListing]) ordered by start date, or Failure.
        """
        sql = """
            SELECT reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   properties.*,
                   avg(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            JOIN property_reviews ON property_reviews.property_id = properties.id
            WHERE reservations.guest_id = %s
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        return self._fetch_all(
            f"fetch reservations for guest #{guest_id}",
            sql,
            [guest_id, limit],
            self._row_to_listing,
        )

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_listing(row: dict) -> ReservationListing:
        """Convert a joined row to a ReservationListing."""
        reservation = Reservation(
            id=row["reservation_id"],
            guest_id=row["guest_id"],
            property_id=row["id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
        )
        rating: Optional[float] = row.get("average_rating")
        return ReservationListing(
            reservation=reservation,
            property=Property.from_row(row),
            average_rating=float(rating) if rating is not None else None,
        )
