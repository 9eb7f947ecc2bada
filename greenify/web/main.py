from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Any, List, Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from greenify.cart.models import Product
from greenify.cart.store import CartStore
from greenify.cart.views import CartView, line_total
from greenify.config import settings
from greenify.services.catalog import CATALOG, find_product, products_by_category
from greenify.services.checkout import checkout
from greenify.utils.formatters import money

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["money"] = money

# коды из ?msg= -> текст для баннера; неизвестный код показывается как есть
MESSAGES = {
    "already_in_cart": "Im Warenkorb",
    "unknown_product": "Unbekanntes Produkt.",
}

# шапка только на страницах магазина
HEADER_PATHS = ("/products", "/cart")


def _store(request: Request) -> CartStore:
    return request.app.state.cart


def _view(request: Request) -> CartView:
    return request.app.state.cart_view


def _render(request: Request, name: str, ctx: dict[str, Any]) -> HTMLResponse:
    view = _view(request)
    msg = request.query_params.get("msg", "")
    base = {
        "shop_name": settings.shop_name,
        "cart_count": view.total_quantity(),
        "message": MESSAGES.get(msg, msg),
        "show_header": request.url.path in HEADER_PATHS,
        "year": date.today().year,
    }
    base.update(ctx)
    return templates.TemplateResponse(request, name, base)


def _redirect(url: str, msg: str = "") -> RedirectResponse:
    if msg:
        url = f"{url}?{urlencode({'msg': msg})}"
    return RedirectResponse(url=url, status_code=303)


def create_app(catalog: Optional[List[Product]] = None) -> FastAPI:
    app = FastAPI(title=f"{settings.shop_name} Web")

    # одна корзина на запущенное приложение (одна сессия)
    store = CartStore()
    app.state.cart = store
    app.state.cart_view = CartView(store)
    app.state.catalog = list(catalog) if catalog is not None else CATALOG

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # ---------------- pages ----------------

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return _render(request, "index.html", {})

    @app.get("/products", response_class=HTMLResponse)
    def products(request: Request):
        return _render(
            request,
            "products.html",
            {
                "groups": products_by_category(request.app.state.catalog),
                "in_cart": _store(request).state,
            },
        )

    @app.get("/cart", response_class=HTMLResponse)
    def cart(request: Request):
        view = _view(request)
        return _render(
            request,
            "cart.html",
            {
                "items": view.items(),
                "total_quantity": view.total_quantity(),
                "total_cost": view.total_cost(),
                "line_total": line_total,
            },
        )

    # ---------------- commands ----------------

    @app.post("/cart/add")
    def cart_add(request: Request, product_id: str = Form(...)):
        product = find_product(request.app.state.catalog, product_id)
        if product is None:
            logger.warning("add: unknown product_id=%s", product_id)
            return _redirect("/products", "unknown_product")
        if not _store(request).add_to_cart(product):
            return _redirect("/products", "already_in_cart")
        return _redirect("/products")

    @app.post("/cart/increment")
    def cart_increment(request: Request, product_id: str = Form(...)):
        _store(request).increment(product_id)
        return _redirect("/cart")

    @app.post("/cart/decrement")
    def cart_decrement(request: Request, product_id: str = Form(...)):
        _store(request).decrement(product_id)
        return _redirect("/cart")

    @app.post("/cart/remove")
    def cart_remove(request: Request, product_id: str = Form(...)):
        _store(request).remove(product_id)
        return _redirect("/cart")

    @app.post("/cart/clear")
    def cart_clear(request: Request):
        _store(request).clear()
        return _redirect("/cart")

    @app.post("/cart/checkout")
    def cart_checkout(request: Request):
        return _redirect("/cart", checkout(_view(request)))

    # ---------------- query (json) ----------------

    @app.get("/api/cart")
    def api_cart(request: Request):
        view = _view(request)
        return {
            "items": [
                {
                    "id": it.product.id,
                    "name": it.product.name,
                    "price": it.product.price,
                    "quantity": it.quantity,
                }
                for it in view.items()
            ],
            "total_quantity": view.total_quantity(),
            "total_cost": view.total_cost(),
        }

    # любой неизвестный путь ведёт на лендинг
    @app.get("/{path:path}", response_class=HTMLResponse)
    def fallback(request: Request, path: str):
        return _render(request, "index.html", {})

    return app


app = create_app()
