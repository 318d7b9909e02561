"""HTTP tests for the stateless endpoints.

The client is created without entering the lifespan, so the catalog
database is never contacted and catalog-backed endpoints answer 503.
"""

import csv
from io import StringIO

import pytest
from fastapi.testclient import TestClient

from pcbuilder.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _build(psu_wattage: int = 650, cpu_socket: str = "AM5") -> dict:
    return {
        "cpu": {
            "id": "cpu-1",
            "name": "Ryzen 5 7600",
            "category_id": "MICRO",
            "cost": 100,
            "spec": {"component_type": "cpu", "socket": cpu_socket, "tdp_watts": 65},
        },
        "motherboard": {
            "id": "mb-1",
            "name": "B650",
            "category_id": "MOTHE",
            "cost": 100,
            "spec": {
                "component_type": "motherboard",
                "socket": "AM5",
                "ram_type": "DDR5",
                "ram_slots": 4,
            },
        },
        "ram": {
            "id": "ram-1",
            "name": "DDR5 32GB",
            "category_id": "MEDIM",
            "stock_quantity": 10,
            "spec": {"component_type": "ram", "ram_type": "DDR5", "modules_in_kit": 2},
        },
        "gpu": {
            "id": "gpu-1",
            "name": "RTX 4070",
            "spec": {"component_type": "gpu", "tdp_watts": 220, "length_mm": 285},
        },
        "psu": {
            "id": "psu-1",
            "name": "PSU",
            "spec": {"component_type": "psu", "wattage": psu_wattage},
        },
    }


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestBuilderEndpoints:
    def test_evaluate_compatible(self, client):
        response = client.post("/api/builder/evaluate", json=_build())
        assert response.status_code == 200
        body = response.json()
        assert body["is_compatible"] is True
        assert body["errors"] == []

    def test_evaluate_socket_mismatch(self, client):
        response = client.post("/api/builder/evaluate", json=_build(cpu_socket="AM4"))
        body = response.json()
        assert body["is_compatible"] is False
        assert body["issues"][0]["code"] == "E_SOCKET_MISMATCH"
        assert body["issues"][0]["slots"] == ["cpu", "motherboard"]

    def test_power(self, client):
        response = client.post("/api/builder/power", json=_build())
        assert response.json() == {"watts_needed": 385, "watts_recommended": 462}

    def test_summary(self, client):
        response = client.post("/api/builder/summary", json=_build(psu_wattage=400))
        body = response.json()
        assert body["psu_wattage"] == 400
        assert body["max_ram_kits"] == 2
        assert body["max_storage_units"] == 1
        assert body["filled_slots"] == ["cpu", "motherboard", "ram", "gpu", "psu"]
        assert body["compatibility"]["warnings"] == [
            "PSU 400W works but 462W is recommended for better efficiency"
        ]

    def test_inline_candidates(self, client):
        payload = {
            "target_slot": "motherboard",
            "build": {"cpu": _build()["cpu"]},
            "catalog": [
                {"id": "a", "name": "AM4 board", "spec": {"component_type": "motherboard", "socket": "AM4"}},
                {"id": "b", "name": "AM5 board", "spec": {"component_type": "motherboard", "socket": "AM5"}},
                {"id": "c", "name": "Unlisted board"},
            ],
        }
        response = client.post("/api/builder/candidates", json=payload)
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["b", "c"]

    def test_inline_candidates_with_preferences(self, client):
        payload = {
            "target_slot": "cpu",
            "usage": "gaming",
            "cpu_brand": "Intel",
            "catalog": [
                {"id": "a", "name": "Ryzen 7", "spec": {"component_type": "cpu", "socket": "AM5", "is_gamer": True}},
                {"id": "b", "name": "Core i3", "spec": {"component_type": "cpu", "socket": "LGA1700", "is_gamer": False}},
                {"id": "c", "name": "Core i7", "spec": {"component_type": "cpu", "socket": "LGA1700", "is_gamer": True}},
            ],
        }
        response = client.post("/api/builder/candidates", json=payload)
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == ["c"]

    def test_case_form_factors_sorted_in_response(self, client):
        payload = {
            "target_slot": "case",
            "catalog": [
                {
                    "id": "cs",
                    "name": "Tower",
                    "spec": {"component_type": "case", "supported_form_factors": ["Mini-ITX", "ATX"]},
                },
            ],
        }
        response = client.post("/api/builder/candidates", json=payload)
        spec = response.json()[0]["spec"]
        assert spec["supported_form_factors"] == ["ATX", "Mini-ITX"]

    def test_invalid_slot(self, client):
        response = client.post(
            "/api/builder/candidates", json={"target_slot": "toaster"}
        )
        assert response.status_code == 422

    def test_invalid_spec_kind(self, client):
        build = {"cpu": {"id": "x", "name": "x", "spec": {"component_type": "monitor"}}}
        response = client.post("/api/builder/evaluate", json=build)
        assert response.status_code == 422

    def test_catalog_candidates_need_database(self, client):
        response = client.post("/api/builder/candidates/gpu", json={})
        assert response.status_code == 503

    def test_quotation(self, client):
        payload = {"build": _build(), "ram_quantity": 2, "client_name": "Ana"}
        response = client.post("/api/builder/quotation", json=payload)
        body = response.json()
        assert body["client_name"] == "Ana"
        assert [i["id"] for i in body["items"]] == [
            "cpu-1",
            "mb-1",
            "ram-1",
            "gpu-1",
            "psu-1",
        ]
        assert body["items"][0]["price"] == 130
        assert body["items"][2]["quantity"] == 2


class TestCatalogEndpoints:
    def test_categories(self, client):
        body = client.get("/api/catalog/categories").json()
        assert body["cpu"] == ["MICRO"]
        assert body["cooling"] == ["ENFRI"]

    def test_classify(self, client):
        body = client.get("/api/catalog/classify/VIDEO").json()
        assert body == {"category_id": "VIDEO", "component_type": "gpu"}

    def test_classify_unknown(self, client):
        body = client.get("/api/catalog/classify/SOFTW").json()
        assert body["component_type"] is None

    def test_search_needs_database(self, client):
        response = client.get("/api/catalog/search", params={"q": "ryzen"})
        assert response.status_code == 503


class TestPricingEndpoints:
    def test_price(self, client):
        response = client.post(
            "/api/pricing/price", json={"cost": 100, "category_id": "MICRO"}
        )
        assert response.json() == {"price": 130, "formatted": "$130.00"}

    def test_breakdown(self, client):
        items = [{"id": "a", "name": "CPU", "category_id": "MICRO", "price": 108}]
        body = client.post("/api/pricing/breakdown", json=items).json()
        assert body == {"subtotal": 100.0, "iva": 8.0, "total": 108.0}

    def test_prorate(self, client):
        payload = {
            "items": [
                {"id": "a", "name": "A", "price": 100},
                {"id": "b", "name": "B", "price": 100},
            ],
            "new_total": 205,
        }
        body = client.post("/api/pricing/prorate", json=payload).json()
        assert [i["price"] for i in body] == [100, 105]

    def test_negative_total_rejected(self, client):
        payload = {"items": [], "new_total": -1}
        response = client.post("/api/pricing/prorate", json=payload)
        assert response.status_code == 422


class TestQuotationEndpoints:
    QUOTATION = {
        "client_name": "Ana",
        "items": [{"id": "a", "name": "Ryzen", "sku": "R5", "price": 130, "quantity": 2}],
    }

    def test_text(self, client):
        response = client.post("/api/quotations/text", json=self.QUOTATION)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "*TOTAL: $260.00*" in response.text

    def test_html(self, client):
        response = client.post("/api/quotations/html", json=self.QUOTATION)
        assert response.headers["content-type"].startswith("text/html")
        assert "Ryzen" in response.text

    def test_csv(self, client):
        response = client.post("/api/quotations/csv", json=self.QUOTATION)
        assert response.headers["content-type"].startswith("text/csv")
        rows = list(csv.reader(StringIO(response.text)))
        assert rows[1] == ["1", "R5", "Ryzen", "2", "130.00", "260.00"]
