"""Tests for web storefront"""
from datetime import date

import pytest
from fastapi.testclient import TestClient

from greenify.cart.models import Product
from greenify.web.main import create_app


@pytest.fixture
def app():
    """Fresh app with its own cart"""
    return create_app(
        [
            Product(id="a", name="Alpha", price=10.0, category="Pflegeleicht"),
            Product(id="b", name="Beta", price=5.0, category="Luftreiniger"),
        ]
    )


@pytest.fixture
def client(app):
    """Test client"""
    return TestClient(app)


def _cart(client):
    return client.get("/api/cart").json()


def test_landing(client):
    """Landing page renders"""
    response = client.get("/")
    assert response.status_code == 200
    assert "Get Started" in response.text


def test_products_grouped(client):
    """Products page shows categories and add buttons"""
    response = client.get("/products")
    assert response.status_code == 200
    assert "Pflegeleicht" in response.text
    assert "Luftreiniger" in response.text
    assert response.text.count("In den Warenkorb") == 2


def test_add_disables_button(client):
    """After adding, product is marked as in cart"""
    response = client.post("/cart/add", data={"product_id": "a"}, follow_redirects=False)
    assert response.status_code == 303
    page = client.get("/products").text
    assert "Im Warenkorb" in page
    assert page.count("In den Warenkorb") == 1


def test_add_twice_is_noop(client):
    """Second add keeps quantity 1 and reports it"""
    client.post("/cart/add", data={"product_id": "a"})
    response = client.post("/cart/add", data={"product_id": "a"}, follow_redirects=False)
    assert "already_in_cart" in response.headers["location"]
    assert _cart(client)["items"][0]["quantity"] == 1


def test_add_unknown_product(client):
    """Unknown product id is rejected without error"""
    response = client.post("/cart/add", data={"product_id": "ghost"})
    assert response.status_code == 200
    assert _cart(client)["items"] == []


def test_scenario_totals(client):
    """add a, add b, increment a => 3 units, 25 total"""
    client.post("/cart/add", data={"product_id": "a"})
    client.post("/cart/add", data={"product_id": "b"})
    client.post("/cart/increment", data={"product_id": "a"})

    data = _cart(client)
    assert [(it["id"], it["quantity"]) for it in data["items"]] == [("a", 2), ("b", 1)]
    assert data["total_quantity"] == 3
    assert data["total_cost"] == 25

    page = client.get("/cart").text
    assert "Gesamtanzahl: <strong>3</strong>" in page
    assert "25.00" in page


def test_decrement_and_remove(client):
    """decrement to zero and remove drop items"""
    client.post("/cart/add", data={"product_id": "a"})
    client.post("/cart/add", data={"product_id": "b"})
    client.post("/cart/decrement", data={"product_id": "a"})
    assert [it["id"] for it in _cart(client)["items"]] == ["b"]

    client.post("/cart/remove", data={"product_id": "b"})
    assert _cart(client)["items"] == []


def test_unknown_ids_are_noops(client):
    """increment/decrement/remove of unknown ids never fail"""
    client.post("/cart/add", data={"product_id": "a"})
    for path in ("/cart/increment", "/cart/decrement", "/cart/remove"):
        response = client.post(path, data={"product_id": "ghost"})
        assert response.status_code == 200
    assert _cart(client)["total_quantity"] == 1


def test_clear(client):
    """Clear empties the cart page"""
    client.post("/cart/add", data={"product_id": "a"})
    client.post("/cart/clear")
    page = client.get("/cart").text
    assert "Dein Warenkorb ist leer." in page
    assert _cart(client)["total_cost"] == 0


def test_checkout_placeholder(client):
    """Checkout redirects with notice and keeps the cart"""
    client.post("/cart/add", data={"product_id": "a"})
    response = client.post("/cart/checkout")
    assert response.status_code == 200
    assert "Checkout kommt bald!" in response.text
    assert _cart(client)["total_quantity"] == 1


def test_carts_are_per_app():
    """Each app owns its own cart"""
    first = TestClient(create_app())
    second = TestClient(create_app())
    first.post("/cart/add", data={"product_id": "monstera"})
    assert first.get("/api/cart").json()["total_quantity"] == 1
    assert second.get("/api/cart").json()["total_quantity"] == 0


def test_banner_shows_german_text(client):
    """Message codes are shown as readable text"""
    client.post("/cart/add", data={"product_id": "a"})
    page = client.post("/cart/add", data={"product_id": "a"}).text
    assert '<p class="message">Im Warenkorb</p>' in page
    assert "already_in_cart" not in page

    page = client.post("/cart/add", data={"product_id": "ghost"}).text
    assert '<p class="message">Unbekanntes Produkt.</p>' in page
    assert "unknown_product" not in page


def test_unknown_path_renders_landing(client):
    """Any unknown page falls back to the landing page"""
    response = client.get("/does/not/exist")
    assert response.status_code == 200
    assert "Get Started" in response.text


def test_header_only_on_shop_pages(client):
    """Header is shown on /products and /cart, not on the landing page"""
    assert "<header>" not in client.get("/").text
    assert "<header>" not in client.get("/elsewhere").text
    assert "<header>" in client.get("/products").text
    assert "<header>" in client.get("/cart").text


def test_footer_has_current_year(client):
    """Footer prints the current year"""
    assert f"&copy; {date.today().year}" in client.get("/").text


def test_api_not_shadowed_by_fallback(client):
    """JSON endpoint still answers with JSON"""
    assert client.get("/api/cart").json()["items"] == []
