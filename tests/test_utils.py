"""Tests for envelope and parsing helpers."""

import pytest

from inventory_api.errors import NotFoundError
from inventory_api.utils import fail, is_empty, ok, parse_id, parse_int


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, "", "  ", "\t"])
    def test_empty(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", [0, 0.0, False, "x", " a "])
    def test_not_empty(self, value):
        assert not is_empty(value)


class TestParsing:
    def test_parse_int(self):
        assert parse_int("12") == 12
        assert parse_int(" 7 ") == 7
        assert parse_int("abc") is None
        assert parse_int(None) is None

    def test_parse_id_raises_not_found(self):
        with pytest.raises(NotFoundError, match="Product not found"):
            parse_id("abc", "Product not found")


class TestEnvelope:
    def test_collection_carries_count(self):
        assert ok([{"a": 1}, {"a": 2}], collection=True) == {
            "success": True,
            "data": [{"a": 1}, {"a": 2}],
            "count": 2,
        }

    def test_extra_keys_are_kept(self):
        body = ok(message="Product updated successfully", affectedRows=1)

        assert body == {
            "success": True,
            "message": "Product updated successfully",
            "affectedRows": 1,
        }

    def test_none_inside_data_is_preserved(self):
        body = ok({"productID": 1, "productType": None})

        assert body["data"] == {"productID": 1, "productType": None}

    def test_failure(self):
        assert fail("Product not found") == {"success": False, "message": "Product not found"}
        assert fail("Error fetching data", "boom")["error"] == "boom"
