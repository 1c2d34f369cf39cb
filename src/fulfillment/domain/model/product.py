"""Product aggregate.

Products live independently of orders. They are created and stocked
outside the fulfillment engine; fulfillment only reads them and
conditionally rewrites ``available`` and ``lead_time``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from fulfillment.domain.exceptions import (
    MissingRequiredDateFieldsError,
    ValidationError,
)


class ProductType(Enum):
    NORMAL = "NORMAL"
    SEASONAL = "SEASONAL"
    EXPIRABLE = "EXPIRABLE"


@dataclass
class Product:
    """A product in the catalog.

    The date fields are populated according to ``type``:

    - SEASONAL: ``season_start_date`` and ``season_end_date``, no expiry
    - EXPIRABLE: ``expiry_date``, no season dates
    - NORMAL: none of them

    Use ``Product.create()`` for new products; it enforces the rules
    above.  The ``__init__`` is intentionally simple so the repository
    can reconstitute persisted products without re-validating.
    """

    id: int
    name: str
    type: ProductType
    available: int = 0
    lead_time: int = 0
    season_start_date: datetime | None = None
    season_end_date: datetime | None = None
    expiry_date: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: int,
        name: str,
        type: ProductType,
        available: int = 0,
        lead_time: int = 0,
        season_start_date: datetime | None = None,
        season_end_date: datetime | None = None,
        expiry_date: datetime | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if available < 0:
            raise ValidationError("Available stock cannot be negative")
        if lead_time < 0:
            raise ValidationError("Lead time cannot be negative")

        for label, value in (
            ("Season start date", season_start_date),
            ("Season end date", season_end_date),
            ("Expiry date", expiry_date),
        ):
            if value is not None and value.tzinfo is None:
                raise ValidationError(f"{label} must be timezone-aware")

        has_season = season_start_date is not None or season_end_date is not None
        if type is ProductType.SEASONAL:
            if season_start_date is None or season_end_date is None:
                raise ValidationError("Seasonal products need both season dates")
            if season_start_date >= season_end_date:
                raise ValidationError("Season must start before it ends")
            if expiry_date is not None:
                raise ValidationError("Seasonal products cannot have an expiry date")
        elif type is ProductType.EXPIRABLE:
            if expiry_date is None:
                raise ValidationError("Expirable products need an expiry date")
            if has_season:
                raise ValidationError("Expirable products cannot have season dates")
        elif has_season or expiry_date is not None:
            raise ValidationError("Normal products cannot have season or expiry dates")

        return Product(
            id=id,
            name=name.strip(),
            type=type,
            available=available,
            lead_time=lead_time,
            season_start_date=season_start_date,
            season_end_date=season_end_date,
            expiry_date=expiry_date,
        )

    # --- Required-date accessors ----------------------------------------------

    def season_window(self) -> tuple[datetime, datetime]:
        """Return ``(start, end)`` of the selling season."""
        if self.season_start_date is None or self.season_end_date is None:
            raise MissingRequiredDateFieldsError(
                f"Seasonal product '{self.name}' (#{self.id}) has no season window"
            )
        return self.season_start_date, self.season_end_date

    def required_expiry_date(self) -> datetime:
        if self.expiry_date is None:
            raise MissingRequiredDateFieldsError(
                f"Expirable product '{self.name}' (#{self.id}) has no expiry date"
            )
        return self.expiry_date
