from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from greenify.cart.models import Product
from greenify.constants import PRODUCTS
from greenify.utils.validators import require_non_empty, require_non_negative_number


def _parse_price(row: Dict[str, Any], pid: str) -> float:
    if row.get("price") is None:
        raise ValueError(f"price of {pid} is missing")
    try:
        return float(row["price"])
    except (TypeError, ValueError):
        raise ValueError(f"price of {pid} is not a number: {row['price']!r}") from None


def load_catalog(rows: Iterable[Dict[str, Any]]) -> List[Product]:
    """
    Собирает каталог из простых dict'ов.
    Бросает ValueError при пустом/повторном id, отсутствующей или некорректной цене.
    """
    products: List[Product] = []
    seen: set[str] = set()
    for row in rows:
        pid = str(row.get("id", "")).strip()
        require_non_empty(pid, "product id")
        if pid in seen:
            raise ValueError(f"duplicate product id: {pid}")
        price = _parse_price(row, pid)
        require_non_negative_number(price, f"price of {pid}")
        seen.add(pid)
        products.append(
            Product(
                id=pid,
                name=str(row.get("name") or pid),
                price=price,
                category=str(row.get("category") or ""),
                image=str(row.get("image") or ""),
            )
        )
    return products


CATALOG: List[Product] = load_catalog(PRODUCTS)


def categories(products: Iterable[Product]) -> List[str]:
    out: List[str] = []
    for p in products:
        if p.category not in out:
            out.append(p.category)
    return out


def products_by_category(products: Iterable[Product]) -> Dict[str, List[Product]]:
    products = list(products)
    grouped: Dict[str, List[Product]] = {c: [] for c in categories(products)}
    for p in products:
        grouped[p.category].append(p)
    return grouped


def find_product(products: Iterable[Product], product_id: str) -> Optional[Product]:
    for p in products:
        if p.id == product_id:
            return p
    return None
