"""
repositories/property_repo.py
-----------------------------
Data access layer for properties: the filtered listing and inserts.
"""

from typing import Any, Mapping, Optional, Union

from config import CITY_SEARCH_CASE_INSENSITIVE, DEFAULT_RESULT_LIMIT
from db.connection import ConnectionProvider
from db.query_builder import QueryBuilder
from models.property import Property, PropertyFilters, PropertyListing, to_minor_units
from repositories.base import BaseRepository
from utils.logger import get_logger
from utils.result import Result

logger = get_logger(__name__)

_LISTING_SQL = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON property_reviews.property_id = properties.id
"""

# Insert order; matches the VALUES placeholders below.
_PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
    "country",
    "street",
    "city",
    "province",
    "post_code",
)


class PropertyRepository(BaseRepository):
    """Repository for the properties table."""

    def __init__(self, provider: ConnectionProvider, case_insensitive_city: Optional[bool] = None):
        super().__init__(provider)
        if case_insensitive_city is None:
            case_insensitive_city = CITY_SEARCH_CASE_INSENSITIVE
        self.city_operator = "ILIKE" if case_insensitive_city else "LIKE"

    def build_listing_query(
        self,
        options: Union[PropertyFilters, Mapping[str, Any], None],
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> tuple[str, list]:
        """
        Compose the listing SELECT for the given filters.

        Clauses are appended in a fixed order: city (WHERE), GROUP BY,
        minimum rating, minimum price, maximum price (HAVING chain),
        ORDER BY cost_per_night, LIMIT. Prices are converted to cents.

        Raises:
            ValueError: If a numeric filter in a mapping is not a number.
        """
        filters = options if isinstance(options, PropertyFilters) else PropertyFilters.from_mapping(options)

        qb = QueryBuilder(_LISTING_SQL)
        if filters.city:
            qb.where(f"city {self.city_operator}", f"%{filters.city}%")
        qb.group_by("properties.id")
        if filters.minimum_rating:
            qb.having("avg(property_reviews.rating) >=", filters.minimum_rating)
        if filters.minimum_price_per_night:
            qb.having("cost_per_night >", to_minor_units(filters.minimum_price_per_night))
        if filters.maximum_price_per_night:
            qb.having("cost_per_night <", to_minor_units(filters.maximum_price_per_night))
        qb.order_by("cost_per_night")
        qb.limit(limit)
        return qb.build()

    def get_all_properties(
        self,
        options: Union[PropertyFilters, Mapping[str, Any], None] = None,
        limit: int = DEFAULT_RESULT_LIMIT,
    ) -> Result:
        """
        List properties with their average rating, cheapest first.

        Args:
            options: PropertyFilters, or a mapping with any of 'city',
                'minimum_rating', 'minimum_price_per_night',
                'maximum_price_per_night' (prices in dollars).
            limit: Maximum number of rows.

        Returns:
            Success(list[PropertyListing]) or Failure.
        """
        sql, params = self.build_listing_query(options, limit)
        logger.debug(f"Property listing query: {sql} params={params}")
        return self._fetch_all("list properties", sql, params, self._row_to_listing)

    def add_property(self, prop: Union[Property, Mapping[str, Any]]) -> Result:
        """
        Insert a property. No field validation happens here.

        Args:
            prop: A Property or a mapping with all 14 property columns.

        Returns:
            Success(Property) with its generated `id`, or Failure.
        """
        if isinstance(prop, Property):
            values = [getattr(prop, c) for c in _PROPERTY_COLUMNS]
        else:
            values = [prop.get(c) for c in _PROPERTY_COLUMNS]
        sql = f"""
            INSERT INTO properties ({", ".join(_PROPERTY_COLUMNS)})
            VALUES ({", ".join(["%s"] * len(_PROPERTY_COLUMNS))})
            RETURNING *;
        """
        result = self._fetch_one("add property", sql, values, Property.from_row)
        if result.ok:
            logger.info(f"Added property #{result.value.id} for owner {result.value.owner_id}")
        return result

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_listing(row: dict) -> PropertyListing:
        """Convert a listing row to a PropertyListing."""
        rating = row.get("average_rating")
        return PropertyListing(
            property=Property.from_row(row),
            average_rating=float(rating) if rating is not None else None,
        )
