"""Tests for the AddProduct use case."""

from datetime import datetime

import pytest

from fulfillment.application.add_product import AddProductHandler
from fulfillment.domain.exceptions import ValidationError
from fulfillment.domain.model.product import ProductType
from tests.fakes import NOW, FakeProductRepository, days


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)

        first = handler.handle("USB Cable", "NORMAL", available=5)
        second = handler.handle("Milk", "expirable", expiry_date=NOW + days(3))

        assert (first.id, second.id) == (1, 2)
        assert repo.get_by_id(2).type is ProductType.EXPIRABLE

    def test_dto_formats_dates(self):
        handler = AddProductHandler(FakeProductRepository())

        dto = handler.handle(
            "Watermelon", "SEASONAL",
            season_start_date=NOW, season_end_date=NOW + days(30),
        )

        assert dto.season_start_date == "2024-06-15 12:00 UTC"
        assert dto.season_end_date == "2024-07-15 12:00 UTC"
        assert dto.expiry_date is None

    def test_duplicate_name_rejected(self):
        handler = AddProductHandler(FakeProductRepository())
        handler.handle("USB Cable", "NORMAL")

        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("usb cable", "NORMAL")

    def test_unknown_type_rejected(self):
        handler = AddProductHandler(FakeProductRepository())
        with pytest.raises(ValidationError, match="Unknown product type"):
            handler.handle("Gift Card", "DIGITAL")

    def test_invalid_dates_not_persisted(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)

        with pytest.raises(ValidationError):
            handler.handle("Milk", "EXPIRABLE")
        assert repo.list_all() == []

    def test_naive_expiry_date_rejected(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)

        with pytest.raises(ValidationError, match="timezone-aware"):
            handler.handle("Milk", "EXPIRABLE", available=4, expiry_date=datetime(2030, 1, 1))
        assert repo.list_all() == []
