"""
models/property.py
------------------
Domain models for rental properties, their listings, and listing filters.
"""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional


@dataclass
class Property:
    """
    Represents a rental property.

    Attributes:
        owner_id: The owning user.
        title: Listing headline.
        description: Free-text description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        cost_per_night: Nightly price in cents.
        parking_spaces: Number of parking spots.
        number_of_bathrooms: Bathroom count.
        number_of_bedrooms: Bedroom count.
        country, street, city, province, post_code: Address parts.
        id: Database primary key (None for new records).
    """
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Property":
        """Build a Property from a row dict, ignoring extra columns."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in row.items() if k in names})

    def __str__(self) -> str:
        return f"{self.title} ({self.city}) - {self.cost_per_night / 100:.2f}/night"


@dataclass
class PropertyListing:
    """A property together with the average rating of its reviews."""
    property: Property
    average_rating: Optional[float] = None


def to_minor_units(amount: Any) -> int:
    """Convert a price in major units (dollars) to cents."""
    return int((Decimal(str(amount)) * 100).to_integral_value())


def _number(name: str, value: Any) -> Optional[Decimal]:
    """Parse an optional numeric filter; None, '' and zero mean 'not set'."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not number.is_finite():
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return number or None


@dataclass
class PropertyFilters:
    """
    Optional filters for the property listing.

    Prices are in major units; the repository converts them to cents
    before comparing against `cost_per_night`.
    """
    city: Optional[str] = None
    minimum_rating: Optional[Decimal] = None
    minimum_price_per_night: Optional[Decimal] = None
    maximum_price_per_night: Optional[Decimal] = None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "PropertyFilters":
        """
        Build filters from a loose mapping such as parsed query-string values.

        Unknown keys are ignored. Empty strings, None and zero leave a filter
        unset.

        Raises:
            ValueError: If a numeric filter is not a number.
        """
        options = options or {}
        city = options.get("city")
        city = str(city) if city else None
        return cls(
            city=city,
            minimum_rating=_number("minimum_rating", options.get("minimum_rating")),
            minimum_price_per_night=_number(
                "minimum_price_per_night", options.get("minimum_price_per_night")
            ),
            maximum_price_per_night=_number(
                "maximum_price_per_night", options.get("maximum_price_per_night")
            ),
        )

    def is_empty(self) -> bool:
        return not (
            self.city
            or self.minimum_rating
            or self.minimum_price_per_night
            or self.maximum_price_per_night
        )
