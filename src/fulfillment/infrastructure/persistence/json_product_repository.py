"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fulfillment.domain.exceptions import EntityNotFoundError, ValidationError
from fulfillment.domain.model.product import Product, ProductType
from fulfillment.domain.repository.product_repository import (
    UPDATABLE_FIELDS,
    ProductRepository,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw():
            if raw["name"].lower() == name.lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, product: Product) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))
        self._persist_raw(records)

    def update_fields(self, product_id: int, fields: dict[str, Any]) -> None:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(
                f"Cannot update product field(s): {', '.join(sorted(unknown))}"
            )

        records = self._load_raw()
        for raw in records:
            if raw["id"] == product_id:
                raw.update(fields)
                self._persist_raw(records)
                return
        raise EntityNotFoundError(f"Product #{product_id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "type": product.type.value,
            "available": product.available,
            "lead_time": product.lead_time,
            "season_start_date": _iso(product.season_start_date),
            "season_end_date": _iso(product.season_end_date),
            "expiry_date": _iso(product.expiry_date),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            type=ProductType(raw["type"]),
            available=raw.get("available", 0),
            lead_time=raw.get("lead_time", 0),
            season_start_date=_parse(raw.get("season_start_date")),
            season_end_date=_parse(raw.get("season_end_date")),
            expiry_date=_parse(raw.get("expiry_date")),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse(value: str | None) -> datetime | None:
    """Stored timestamps without an offset are read as UTC."""
    if not value:
        return None
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
