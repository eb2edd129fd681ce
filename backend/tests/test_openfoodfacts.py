import asyncio

import httpx

from smart_pantry.integrations.openfoodfacts import (
    OpenFoodFactsClient,
    parse_product_response,
    parse_unit,
)


NUTELLA = {
    "status": 1,
    "product": {
        "product_name": "Nutella",
        "brands": "Ferrero, Nutella",
        "categories": "Spreads, Sweet spreads, Hazelnut spreads, Cocoa and hazelnuts spreads",
        "quantity": "400 g",
        "image_url": "https://images.openfoodfacts.org/nutella.jpg",
        "nutriments": {
            "energy-kcal_100g": 539,
            "proteins_100g": 6.3,
            "sugars_100g": "56.3",
        },
    },
}


def make_client(handler) -> OpenFoodFactsClient:
    return OpenFoodFactsClient(
        base_url="https://off.test",
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def lookup(handler, barcode="3017620422003"):
    return asyncio.run(make_client(handler).lookup(barcode))


def test_lookup_found():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["user_agent"] = request.headers.get("user-agent")
        seen["fields"] = request.url.params.get("fields")
        return httpx.Response(200, json=NUTELLA)

    product = lookup(handler)

    assert product is not None
    assert product.barcode == "3017620422003"
    assert product.name == "Nutella"
    assert product.brand == "Ferrero"
    assert product.category.startswith("Spreads")
    assert product.unit == "g"
    assert product.source_origin == "external"
    assert product.nutrition_info["energy_kcal"] == 539.0
    assert product.nutrition_info["sugars"] == 56.3
    assert product.nutrition_info["fat"] is None

    assert seen["path"] == "/api/v2/product/3017620422003"
    assert seen["user_agent"] == "SmartPantry/1.0"
    assert "product_name" in seen["fields"]


def test_lookup_unknown_product():
    def handler(request):
        return httpx.Response(200, json={"status": 0, "status_verbose": "product not found"})

    assert lookup(handler) is None


def test_lookup_http_error_status():
    assert lookup(lambda request: httpx.Response(404)) is None
    assert lookup(lambda request: httpx.Response(503)) is None


def test_lookup_network_failure_reads_as_not_found():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert lookup(handler) is None


def test_lookup_timeout_reads_as_not_found():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    assert lookup(handler) is None


def test_lookup_invalid_json():
    assert lookup(lambda request: httpx.Response(200, text="<html>maintenance</html>")) is None


def test_parse_requires_a_name():
    data = {"status": 1, "product": {"brands": "Nameless", "categories": "Snacks"}}
    assert parse_product_response(data, "12345678") is None


def test_parse_falls_back_to_generic_name():
    data = {"status": 1, "product": {"generic_name": "Sparkling water"}}
    product = parse_product_response(data, "12345678")
    assert product.name == "Sparkling water"
    assert product.brand is None
    assert product.category is None
    assert product.nutrition_info is None


def test_parse_unit():
    assert parse_unit("500 g") == "g"
    assert parse_unit("1,5 L") == "l"
    assert parse_unit("6 x 330ml") == "ml"
    assert parse_unit("1 kg") == "kg"
    assert parse_unit("one box") == "g"
    assert parse_unit(None) == "g"
