"""Tests for the product type existence check."""

import pytest

from inventory_api.errors import InvalidReferenceError, ValidationError
from inventory_api.integrity import ensure_product_type_exists


def test_existing_type_passes(db, beverage_id):
    ensure_product_type_exists(db, beverage_id)


def test_missing_type_is_invalid_reference(db, beverage_id):
    with pytest.raises(InvalidReferenceError, match="Invalid productTypeID"):
        ensure_product_type_exists(db, beverage_id + 100)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_value_fails_before_lookup(db, value):
    with pytest.raises(ValidationError, match="productTypeID is required"):
        ensure_product_type_exists(db, value)
