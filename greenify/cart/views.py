from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Tuple

from greenify.cart.models import LineItem
from greenify.cart.store import CartStore


def items(state: Mapping[str, LineItem]) -> Tuple[LineItem, ...]:
    return tuple(state.values())


def total_quantity(state: Mapping[str, LineItem]) -> int:
    return sum(it.quantity for it in state.values())


def total_cost(state: Mapping[str, LineItem]) -> float:
    return sum((line_total(it) for it in state.values()), 0.0)


def line_total(item: LineItem) -> float:
    return item.quantity * item.product.price


class CartView:
    """
    Производные значения корзины.
    Кэш привязан к store.version: пересчёт только после мутации.
    """

    def __init__(self, store: CartStore) -> None:
        self.store = store
        self._cache: Dict[str, Tuple[int, Any]] = {}

    def _cached(self, key: str, fn: Callable[[Mapping[str, LineItem]], Any]) -> Any:
        version = self.store.version
        hit = self._cache.get(key)
        if hit is not None and hit[0] == version:
            return hit[1]
        value = fn(self.store.state)
        self._cache[key] = (version, value)
        return value

    def items(self) -> Tuple[LineItem, ...]:
        return self._cached("items", items)

    def total_quantity(self) -> int:
        return self._cached("total_quantity", total_quantity)

    def total_cost(self) -> float:
        return self._cached("total_cost", total_cost)

    def distinct_count(self) -> int:
        return len(self.store)

    def is_empty(self) -> bool:
        return len(self.store) == 0
