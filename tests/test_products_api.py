"""Test /api/owner/products endpoints."""

import logging

import pytest

from app.core.sheets_client import AppendResult, AppendStatus
from app.routers import products as products_router

PRODUCTS_URL = "/api/owner/products"


def asset_number(asset_id: str) -> int:
    return int(asset_id.rsplit("-", 1)[1])


class TestListProducts:
    """Test GET /api/owner/products."""

    def test_returns_seed_products_in_order(self, client):
        response = client.get(PRODUCTS_URL)
        assert response.status_code == 200
        data = response.json()
        assert [p["assetId"] for p in data] == ["MARXIA-0001", "MARXIA-0002"]
        assert data[0]["productName"] == "Pre-existing Gadget"
        assert data[1]["price"] == 49.5

    def test_uses_camel_case_fields(self, client):
        product = client.get(PRODUCTS_URL).json()[0]
        for key in ("id", "assetId", "productName", "quantityAvailable", "taxName", "taxRate"):
            assert key in product
        assert "product_name" not in product

    def test_created_product_is_listed_last(self, client, widget_payload):
        created = client.post(PRODUCTS_URL, json=widget_payload).json()
        data = client.get(PRODUCTS_URL).json()
        assert len(data) == 3
        assert data[-1]["id"] == created["id"]


class TestCreateProduct:
    """Test POST /api/owner/products happy paths."""

    def test_widget_scenario(self, client, fresh_store, widget_payload):
        counter = fresh_store.asset_counter
        response = client.post(PRODUCTS_URL, json=widget_payload)

        assert response.status_code == 201
        data = response.json()
        assert asset_number(data["assetId"]) == counter + 1
        assert data["assetId"] == "MARXIA-0003"
        assert data["description"] == ""
        assert data["productName"] == "Widget"
        assert data["price"] == 9.99
        assert data["quantityAvailable"] == 3
        assert data["taxName"] is None
        assert data["taxRate"] is None
        assert data["photoUrl"] is None

    def test_asset_ids_strictly_increase(self, client, widget_payload):
        seen = [asset_number(p["assetId"]) for p in client.get(PRODUCTS_URL).json()]
        for i in range(5):
            payload = dict(widget_payload, productName=f"Widget {i}")
            created = client.post(PRODUCTS_URL, json=payload).json()
            number = asset_number(created["assetId"])
            assert number > max(seen)
            seen.append(number)

    def test_internal_ids_are_unique(self, client, widget_payload):
        ids = {client.post(PRODUCTS_URL, json=widget_payload).json()["id"] for _ in range(3)}
        assert len(ids) == 3

    def test_name_is_trimmed(self, client, widget_payload):
        payload = dict(widget_payload, productName="  Widget  ")
        assert client.post(PRODUCTS_URL, json=payload).json()["productName"] == "Widget"

    def test_money_values_rounded_to_two_decimals(self, client, widget_payload):
        payload = dict(widget_payload, price=19.999, taxRate=7.256)
        data = client.post(PRODUCTS_URL, json=payload).json()
        assert data["price"] == 20.0
        assert data["taxRate"] == 7.26

    def test_integer_price_and_tax_rate_accepted(self, client, widget_payload):
        payload = dict(widget_payload, price=10, taxRate=0)
        response = client.post(PRODUCTS_URL, json=payload)
        assert response.status_code == 201
        assert response.json()["price"] == 10.0
        assert response.json()["taxRate"] == 0.0

    def test_whole_float_quantity_accepted(self, client, widget_payload):
        response = client.post(PRODUCTS_URL, json=dict(widget_payload, quantityAvailable=3.0))
        assert response.status_code == 201
        assert response.json()["quantityAvailable"] == 3

    def test_all_optional_fields(self, client, widget_payload):
        payload = dict(
            widget_payload,
            description="A very useful widget.",
            taxName="VAT",
            taxRate=20,
            photoUrl="https://example.com/widget.png",
        )
        data = client.post(PRODUCTS_URL, json=payload).json()
        assert data["description"] == "A very useful widget."
        assert data["taxName"] == "VAT"
        assert data["taxRate"] == 20.0
        assert data["photoUrl"] == "https://example.com/widget.png"

    def test_blank_optional_strings_treated_as_absent(self, client, widget_payload):
        payload = dict(widget_payload, description="", taxName="", photoUrl="")
        data = client.post(PRODUCTS_URL, json=payload).json()
        assert data["description"] == ""
        assert data["taxName"] is None
        assert data["photoUrl"] is None

    def test_client_supplied_ids_are_ignored(self, client, widget_payload):
        payload = dict(widget_payload, id="my-id", assetId="MARXIA-9999")
        data = client.post(PRODUCTS_URL, json=payload).json()
        assert data["id"] != "my-id"
        assert data["assetId"] == "MARXIA-0003"


class TestCreateProductValidation:
    """Invalid payloads are rejected with 400 and leave the store untouched."""

    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"productName": ""}, "Product name"),
            ({"productName": "   "}, "Product name"),
            ({"productName": "x" * 256}, "Product name"),
            ({"productName": 42}, "Product name"),
            ({"price": 0}, "Price"),
            ({"price": -1.5}, "Price"),
            ({"price": "9.99"}, "Price"),
            ({"quantityAvailable": -1}, "Quantity available"),
            ({"quantityAvailable": 2.5}, "Quantity available"),
            ({"quantityAvailable": "3"}, "Quantity available"),
            ({"quantityAvailable": True}, "Quantity available"),
            ({"description": 123}, "Description"),
            ({"taxName": "x" * 101}, "Tax name"),
            ({"taxRate": 100.5}, "Tax rate"),
            ({"taxRate": -1}, "Tax rate"),
            ({"photoUrl": "https://example.com/" + "x" * 2048}, "Photo URL must be a string"),
            ({"photoUrl": "not a url"}, "Photo URL must be a valid URL"),
        ],
    )
    def test_invalid_field(self, client, fresh_store, widget_payload, overrides, expected):
        size_before = len(fresh_store.products)
        response = client.post(PRODUCTS_URL, json=dict(widget_payload, **overrides))

        assert response.status_code == 400
        assert expected in response.json()["message"]
        assert len(fresh_store.products) == size_before

    @pytest.mark.parametrize("missing", ["productName", "price", "quantityAvailable"])
    def test_missing_required_field(self, client, widget_payload, missing):
        payload = {k: v for k, v in widget_payload.items() if k != missing}
        response = client.post(PRODUCTS_URL, json=payload)
        assert response.status_code == 400
        assert "required" in response.json()["message"]

    def test_empty_name_scenario(self, client):
        response = client.post(
            PRODUCTS_URL,
            json={"productName": "", "price": 9.99, "quantityAvailable": 3},
        )
        assert response.status_code == 400
        assert "Product name" in response.json()["message"]

    def test_first_invalid_field_is_reported(self, client):
        response = client.post(
            PRODUCTS_URL,
            json={"productName": "", "price": -1, "quantityAvailable": -1},
        )
        assert response.json()["message"].startswith("Product name")

        response = client.post(
            PRODUCTS_URL,
            json={"productName": "Widget", "price": -1, "quantityAvailable": -1},
        )
        assert response.json()["message"].startswith("Price")

    @pytest.mark.parametrize(
        "field, literal, expected",
        [
            ("price", "Infinity", "Price"),
            ("price", "NaN", "Price"),
            ("price", "-Infinity", "Price"),
            ("taxRate", "Infinity", "Tax rate"),
            ("taxRate", "NaN", "Tax rate"),
            ("quantityAvailable", "NaN", "Quantity available"),
        ],
    )
    def test_non_finite_numbers_rejected(self, client, fresh_store, field, literal, expected):
        # json= would refuse to encode these, so send the raw body
        body = {"productName": '"X"', "price": "1", "quantityAvailable": "1", field: literal}
        raw = "{" + ", ".join(f'"{k}": {v}' for k, v in body.items()) + "}"
        response = client.post(
            PRODUCTS_URL,
            content=raw,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"].startswith(expected)
        assert len(fresh_store.products) == 2
        assert all(p["price"] is not None for p in client.get(PRODUCTS_URL).json())

    def test_body_must_be_an_object(self, client):
        response = client.post(PRODUCTS_URL, json=[{"productName": "Widget"}])
        assert response.status_code == 400
        assert response.json() == {"message": "Request body must be a JSON object."}

    def test_body_must_be_json(self, client):
        response = client.post(
            PRODUCTS_URL,
            content="productName=Widget",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "message" in response.json()


class TestCreateProductFailures:
    """Unexpected errors and other methods."""

    def test_unexpected_error_returns_500(self, client, fresh_store, monkeypatch, widget_payload):
        def boom(store, product):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(products_router.repo, "upsert", boom)
        response = client.post(PRODUCTS_URL, json=widget_payload)

        assert response.status_code == 500
        assert response.json() == {"message": "Internal Server Error while creating product."}
        assert len(fresh_store.products) == 2

    @pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PURGE"])
    def test_other_methods_not_allowed(self, client, method):
        response = client.request(method, PRODUCTS_URL)
        assert response.status_code == 405
        assert response.headers["allow"] == "GET, POST"
        assert response.json() == {"message": f"Method {method} Not Allowed"}

    def test_head_not_allowed(self, client):
        response = client.head(PRODUCTS_URL)
        assert response.status_code == 405
        assert response.headers["allow"] == "GET, POST"


class TestProductSheetLogging:
    """The Google Sheets log never affects the create request."""

    def test_unconfigured_sheet_is_skipped(self, client, monkeypatch, widget_payload):
        outcomes = []
        log_to_sheet = products_router.service.log_to_sheet
        monkeypatch.setattr(
            products_router.service,
            "log_to_sheet",
            lambda product: outcomes.append(log_to_sheet(product)),
        )

        response = client.post(PRODUCTS_URL, json=widget_payload)

        assert response.status_code == 201
        assert outcomes == [AppendStatus.SKIPPED]

    def test_row_is_appended_when_configured(self, client, monkeypatch, sheets_configured, widget_payload):
        calls = []

        def fake_append(sheet_id, range_, rows):
            calls.append((sheet_id, range_, rows))
            return AppendResult(status=AppendStatus.APPENDED, response={"updates": {}})

        monkeypatch.setattr("app.services.product_service.append_rows", fake_append)
        created = client.post(PRODUCTS_URL, json=dict(widget_payload, taxRate=20)).json()

        assert len(calls) == 1
        sheet_id, range_, rows = calls[0]
        assert sheet_id == sheets_configured
        assert range_ == "ProductLog!A1"
        row = rows[0]
        assert row[:4] == [created["assetId"], "Widget", 9.99, 3]
        assert row[5:] == ["", "", 20.0, ""]

    def test_sheet_failure_does_not_fail_create(self, client, fresh_store, monkeypatch, sheets_configured, widget_payload):
        def broken_service():
            raise RuntimeError("could not authenticate")

        monkeypatch.setattr("app.core.sheets_client._build_sheets_service", broken_service)
        response = client.post(PRODUCTS_URL, json=widget_payload)

        assert response.status_code == 201
        assert len(fresh_store.products) == 3

    def test_missing_sheet_id_is_logged_once(self, client, monkeypatch, sheets_configured, widget_payload, caplog):
        monkeypatch.setattr(products_router.service, "sheet_id", None)

        with caplog.at_level(logging.INFO):
            response = client.post(PRODUCTS_URL, json=widget_payload)

        assert response.status_code == 201
        assert caplog.text.count("Skipping") == 1
        assert "was not logged to Google Sheets (skipped)" in caplog.text
