from __future__ import annotations

import logging

from greenify.cart.views import CartView
from greenify.constants import CHECKOUT_NOTICE
from greenify.utils.formatters import money

logger = logging.getLogger(__name__)


def checkout(view: CartView) -> str:
    # заглушка: оплаты пока нет, корзину не трогаем
    logger.info(
        "checkout requested: positions=%s qty=%s total=%s",
        view.distinct_count(),
        view.total_quantity(),
        money(view.total_cost()),
    )
    return CHECKOUT_NOTICE
