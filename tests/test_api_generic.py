"""API tests for the table-parameterized /api/generic endpoints."""

import pytest
from sqlalchemy import inspect, text

from inventory_api import config, models


@pytest.fixture
def suppliers(engine):
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE supplier (id INTEGER PRIMARY KEY, name TEXT)"))
        conn.execute(
            text("INSERT INTO supplier (id, name) VALUES (1, 'Acme Foods'), (2, 'Tea Traders')")
        )


def test_list_any_table(client, suppliers):
    body = client.get("/api/generic/supplier").json()

    assert body["success"] is True
    assert body["count"] == 2
    assert {row["name"] for row in body["data"]} == {"Acme Foods", "Tea Traders"}


def test_get_by_literal_id_column(client, suppliers):
    resp = client.get("/api/generic/supplier/2")

    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": 2, "name": "Tea Traders"}


def test_get_missing_record(client, suppliers):
    resp = client.get("/api/generic/supplier/99")

    assert resp.status_code == 404
    assert resp.json()["message"] == "Record not found"


def test_search_by_field(client, seed, beverage_id):
    seed(models.Product, productName="Green Tea", productTypeID=beverage_id)
    seed(models.Product, productName="Cola", productTypeID=beverage_id)

    body = client.get("/api/generic/product/search/productName/tea").json()

    assert body["count"] == 1
    assert body["data"][0]["productName"] == "Green Tea"


def test_unknown_table_is_store_error(client, monkeypatch):
    monkeypatch.setattr(config, "ENVIRONMENT", "production")

    resp = client.get("/api/generic/nonexistentTable")

    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Error fetching data"
    assert body["error"] == "Something went wrong"


def test_store_error_detail_in_development(client, monkeypatch):
    monkeypatch.setattr(config, "ENVIRONMENT", "development")

    body = client.get("/api/generic/nonexistentTable").json()

    assert "nonexistentTable" in body["error"]


def test_get_from_unknown_table(client):
    resp = client.get("/api/generic/nonexistentTable/1")

    assert resp.status_code == 500
    assert resp.json()["message"] == "Error fetching record"


def test_search_unknown_table(client):
    resp = client.get("/api/generic/nonexistentTable/search/name/x")

    assert resp.status_code == 500
    assert resp.json()["message"] == "Error searching records"


def test_identifier_injection_is_inert(client, engine, beverage_id):
    resp = client.get('/api/generic/product"; DROP TABLE product; --')

    assert resp.status_code == 500
    assert "product" in inspect(engine).get_table_names()


def test_search_unknown_field_is_store_error(client, seed, beverage_id):
    seed(models.Product, productName="Green Tea", productTypeID=beverage_id)
    seed(models.Product, productName="Cola", productTypeID=beverage_id)

    resp = client.get("/api/generic/product/search/nosuchField/such")

    assert resp.status_code == 500
    assert resp.json()["message"] == "Error searching records"


def test_get_from_table_without_id_column(client, seed, beverage_id):
    seed(models.Product, productName="Green Tea", productTypeID=beverage_id)

    resp = client.get("/api/generic/product/1")

    assert resp.status_code == 500
    assert resp.json()["message"] == "Error fetching record"
