"""Tests for the JSON-backed pizza catalog."""

import json

import pytest

from classroom.domain.exceptions import ValidationError
from classroom.domain.model.value_objects import Money
from classroom.infrastructure.bootstrap import catalog_repository
from classroom.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)


class TestBundledMenu:

    def test_menu_order_and_prices(self):
        pizzas = catalog_repository().list_all()
        assert [(p.name, p.base_price) for p in pizzas] == [
            ("Cheese", Money.of("8.00")),
            ("Pepperoni", Money.of("9.00")),
            ("Hawaiian", Money.of("10.00")),
            ("Meatlovers", Money.of("11.00")),
        ]

    def test_images_and_descriptions_present(self):
        for pizza in catalog_repository().list_all():
            assert pizza.image.startswith("/images/")
            assert pizza.description


class TestJsonCatalogRepository:

    def _write(self, tmp_path, data):
        path = tmp_path / "pizzas.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_lookup_by_index(self, tmp_path):
        path = self._write(tmp_path, [{"name": "Veggie", "base_price": "7.50"}])
        repo = JsonCatalogRepository(path)

        assert repo.get_by_index(0).name == "Veggie"
        assert repo.get_by_index(0).description == ""
        assert repo.get_by_index(1) is None
        assert repo.get_by_index(-1) is None

    def test_lookup_by_name_is_case_insensitive(self, tmp_path):
        path = self._write(
            tmp_path,
            [{"name": "Veggie", "base_price": "7.50"}, {"name": "Margherita", "base_price": "8"}],
        )
        repo = JsonCatalogRepository(path)

        assert repo.get_by_name("margherita") == 1
        assert repo.get_by_name("Calzone") is None

    def test_file_is_not_written(self, tmp_path):
        path = self._write(tmp_path, [{"name": "Veggie", "base_price": "7.50"}])
        before = path.read_text(encoding="utf-8")

        repo = JsonCatalogRepository(path)
        repo.list_all()

        assert path.read_text(encoding="utf-8") == before

    def test_list_is_a_copy(self, tmp_path):
        path = self._write(tmp_path, [{"name": "Veggie", "base_price": "7.50"}])
        repo = JsonCatalogRepository(path)

        repo.list_all().clear()

        assert len(repo.list_all()) == 1

    def test_non_list_rejected(self, tmp_path):
        path = self._write(tmp_path, {"name": "Veggie"})
        with pytest.raises(ValidationError, match="JSON list"):
            JsonCatalogRepository(path)

    def test_bad_price_rejected(self, tmp_path):
        path = self._write(tmp_path, [{"name": "Veggie", "base_price": "cheap"}])
        with pytest.raises(ValidationError, match="Invalid money amount"):
            JsonCatalogRepository(path)
