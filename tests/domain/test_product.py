"""Unit tests for the Product aggregate."""

from datetime import datetime

import pytest

from fulfillment.domain.exceptions import (
    MissingRequiredDateFieldsError,
    ValidationError,
)
from fulfillment.domain.model.product import Product, ProductType
from tests.fakes import NOW, days


class TestProductCreate:

    def test_normal_product(self):
        p = Product.create(id=1, name="  USB Cable ", type=ProductType.NORMAL, available=5)
        assert p.name == "USB Cable"
        assert p.available == 5
        assert p.lead_time == 0

    def test_seasonal_product(self):
        p = Product.create(
            id=1, name="Watermelon", type=ProductType.SEASONAL,
            season_start_date=NOW, season_end_date=NOW + days(60),
        )
        assert p.season_window() == (NOW, NOW + days(60))

    def test_expirable_product(self):
        p = Product.create(
            id=1, name="Milk", type=ProductType.EXPIRABLE, expiry_date=NOW,
        )
        assert p.required_expiry_date() == NOW

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create(id=1, name="  ", type=ProductType.NORMAL)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create(id=1, name="USB Cable", type=ProductType.NORMAL, available=-1)

    def test_negative_lead_time_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create(id=1, name="USB Cable", type=ProductType.NORMAL, lead_time=-3)

    def test_seasonal_without_dates_rejected(self):
        with pytest.raises(ValidationError, match="both season dates"):
            Product.create(
                id=1, name="Watermelon", type=ProductType.SEASONAL,
                season_start_date=NOW,
            )

    def test_seasonal_with_inverted_window_rejected(self):
        with pytest.raises(ValidationError, match="start before it ends"):
            Product.create(
                id=1, name="Watermelon", type=ProductType.SEASONAL,
                season_start_date=NOW, season_end_date=NOW,
            )

    def test_seasonal_with_expiry_rejected(self):
        with pytest.raises(ValidationError, match="cannot have an expiry"):
            Product.create(
                id=1, name="Watermelon", type=ProductType.SEASONAL,
                season_start_date=NOW, season_end_date=NOW + days(1),
                expiry_date=NOW,
            )

    def test_expirable_without_expiry_rejected(self):
        with pytest.raises(ValidationError, match="need an expiry"):
            Product.create(id=1, name="Milk", type=ProductType.EXPIRABLE)

    def test_expirable_with_season_rejected(self):
        with pytest.raises(ValidationError, match="cannot have season"):
            Product.create(
                id=1, name="Milk", type=ProductType.EXPIRABLE,
                expiry_date=NOW, season_end_date=NOW,
            )

    def test_normal_with_dates_rejected(self):
        with pytest.raises(ValidationError, match="Normal products"):
            Product.create(
                id=1, name="USB Cable", type=ProductType.NORMAL, expiry_date=NOW,
            )

    def test_naive_expiry_date_rejected(self):
        with pytest.raises(ValidationError, match="Expiry date must be timezone-aware"):
            Product.create(
                id=1, name="Milk", type=ProductType.EXPIRABLE,
                expiry_date=datetime(2030, 1, 1),
            )

    def test_naive_season_date_rejected(self):
        with pytest.raises(ValidationError, match="Season end date must be timezone-aware"):
            Product.create(
                id=1, name="Watermelon", type=ProductType.SEASONAL,
                season_start_date=NOW, season_end_date=datetime(2030, 1, 1),
            )


class TestRequiredDates:

    def test_missing_season_window(self):
        p = Product(id=1, name="Grapes", type=ProductType.SEASONAL)
        with pytest.raises(MissingRequiredDateFieldsError):
            p.season_window()

    def test_missing_expiry(self):
        p = Product(id=1, name="Milk", type=ProductType.EXPIRABLE)
        with pytest.raises(MissingRequiredDateFieldsError):
            p.required_expiry_date()
