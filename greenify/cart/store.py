from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional

from greenify.cart.models import LineItem, Product

logger = logging.getLogger(__name__)

Listener = Callable[["CartStore"], None]


class CartStore:
    """
    Единственный источник правды для корзины: product_id -> LineItem.

    Все операции тотальные: неизвестный id - это no-op, а не ошибка.
    Каждая операция возвращает True, если состояние изменилось.
    """

    def __init__(self) -> None:
        self._items: Dict[str, LineItem] = {}
        self._version = 0
        self._listeners: List[Listener] = []

    # ---------------- queries ----------------

    @property
    def state(self) -> Mapping[str, LineItem]:
        return MappingProxyType(self._items)

    @property
    def version(self) -> int:
        return self._version

    def get(self, product_id: str) -> Optional[LineItem]:
        return self._items.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    # ---------------- commands ----------------

    def add_to_cart(self, product: Product) -> bool:
        if product.id in self._items:
            return False
        self._items[product.id] = LineItem(product=product, quantity=1)
        self._changed("add", product.id)
        return True

    def increment(self, product_id: str) -> bool:
        item = self._items.get(product_id)
        if item is None:
            return False
        # replacing the value keeps the key's insertion position
        self._items[product_id] = replace(item, quantity=item.quantity + 1)
        self._changed("increment", product_id)
        return True

    def decrement(self, product_id: str) -> bool:
        item = self._items.get(product_id)
        if item is None:
            return False
        qty = item.quantity - 1
        if qty <= 0:
            del self._items[product_id]
        else:
            self._items[product_id] = replace(item, quantity=qty)
        self._changed("decrement", product_id)
        return True

    def remove(self, product_id: str) -> bool:
        if self._items.pop(product_id, None) is None:
            return False
        self._changed("remove", product_id)
        return True

    def clear(self) -> bool:
        if not self._items:
            return False
        # тот же dict: выданные ранее state-представления видят очистку
        self._items.clear()
        self._changed("clear", None)
        return True

    # ---------------- listeners ----------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self, op: str, product_id: Optional[str]) -> None:
        self._version += 1
        logger.debug("cart %s %s -> version=%s size=%s", op, product_id, self._version, len(self._items))
        for listener in list(self._listeners):
            listener(self)
