"""Tests for the JSON-file-backed product repository."""

import json
import logging
from decimal import Decimal

from pms.domain.model.product import Product
from pms.domain.model.value_objects import Money, StockQuantity
from pms.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def _pen() -> Product:
    return Product.create(
        name="Pen",
        price=Money.of("1.50"),
        quantity=StockQuantity(12),
        description="Blue ink",
    )


class TestJsonProductRepositoryFile:

    def test_creates_missing_file_and_parents(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "next_id": 1,
            "products": [],
        }

    def test_file_creation_logged_at_debug(self, tmp_path, caplog):
        logger_name = "pms.infrastructure.persistence.json_product_repository"
        caplog.set_level(logging.DEBUG, logger=logger_name)
        path = tmp_path / "products.json"

        JsonProductRepository(path)
        JsonProductRepository(path)

        messages = [r.getMessage() for r in caplog.records if r.name == logger_name]
        assert messages == [f"Created product store at {path}"]

    def test_reads_legacy_array_file(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(
            json.dumps([{"id": 4, "name": "Old", "price": "2.00"}]), encoding="utf-8"
        )
        repo = JsonProductRepository(path)
        old = repo.get_by_id(4)
        assert old.name == "Old"
        assert old.quantity.value == 0
        assert old.description == ""
        assert repo.next_id() == 5

    def test_price_stored_as_string(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.save(_pen())
        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw == {
            "next_id": 2,
            "products": [
                {
                    "id": 1,
                    "name": "Pen",
                    "price": "1.50",
                    "currency": "USD",
                    "quantity": 12,
                    "description": "Blue ink",
                }
            ],
        }

    def test_no_temp_file_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_pen())
        assert [p.name for p in tmp_path.iterdir()] == ["products.json"]

    def test_stale_temp_file_does_not_break_reads(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.save(_pen())
        # A write interrupted before the swap only leaves a partial sibling
        (tmp_path / "products.json.tmp").write_text('{"next_id": 3, "prod', encoding="utf-8")

        assert [p.name for p in JsonProductRepository(path).list_all()] == ["Pen"]


class TestJsonProductRepositoryCrud:

    def test_save_assigns_sequential_ids(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        first, second = _pen(), _pen()
        repo.save(first)
        repo.save(second)
        assert (first.id, second.id) == (1, 2)

    def test_round_trip_through_new_instance(self, tmp_path):
        path = tmp_path / "products.json"
        pen = _pen()
        JsonProductRepository(path).save(pen)

        loaded = JsonProductRepository(path).get_by_id(pen.id)
        assert loaded == pen
        assert loaded.price.amount == Decimal("1.50")

    def test_save_existing_replaces_in_place(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        pen = _pen()
        repo.save(pen)
        pen.name = "Fountain Pen"
        repo.save(pen)
        assert [p.name for p in repo.list_all()] == ["Fountain Pen"]

    def test_get_unknown_returns_none(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.get_by_id(1) is None

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        pen = _pen()
        repo.save(pen)
        assert repo.delete(pen.id) is True
        assert repo.get_by_id(pen.id) is None
        assert repo.list_all() == []

    def test_delete_unknown_returns_false(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(_pen())
        assert repo.delete(99) is False
        assert len(repo.list_all()) == 1

    def test_next_id_follows_highest(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id=10, name="Ten", price=Money.of("1")))
        assert repo.next_id() == 11

    def test_deleted_newest_id_not_reused(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        first, second = _pen(), _pen()
        repo.save(first)
        repo.save(second)
        repo.delete(second.id)

        third = _pen()
        JsonProductRepository(path).save(third)
        assert third.id == 3

    def test_deleting_only_product_keeps_counter(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        pen = _pen()
        repo.save(pen)
        repo.delete(pen.id)
        assert json.loads(path.read_text(encoding="utf-8"))["next_id"] == 2
        assert repo.next_id() == 2
