from typing import Iterable, Mapping

from aiogram.types import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
)

from greenify.cart.models import LineItem, Product


def main_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text="/products"), KeyboardButton(text="/cart")],
        ],
        resize_keyboard=True,
    )


def products_kb(products: Iterable[Product], in_cart: Mapping[str, LineItem]) -> InlineKeyboardMarkup:
    rows = []
    for p in products:
        if p.id in in_cart:
            # повторное добавление запрещено, кнопка только информирует
            rows.append([InlineKeyboardButton(text=f"✅ {p.name}", callback_data=f"add:{p.id}")])
        else:
            rows.append([InlineKeyboardButton(text=f"🛒 {p.name}", callback_data=f"add:{p.id}")])
    return InlineKeyboardMarkup(inline_keyboard=rows)


def cart_kb(items: Iterable[LineItem]) -> InlineKeyboardMarkup:
    rows = []
    for it in items:
        pid = it.product.id
        rows.append(
            [
                InlineKeyboardButton(text="−", callback_data=f"dec:{pid}"),
                InlineKeyboardButton(text=f"{it.product.name} × {it.quantity}", callback_data=f"noop:{pid}"),
                InlineKeyboardButton(text="+", callback_data=f"inc:{pid}"),
                InlineKeyboardButton(text="🗑", callback_data=f"rm:{pid}"),
            ]
        )
    if rows:
        rows.append(
            [
                InlineKeyboardButton(text="Bezahlen", callback_data="checkout"),
                InlineKeyboardButton(text="Warenkorb leeren", callback_data="clear"),
            ]
        )
    return InlineKeyboardMarkup(inline_keyboard=rows)
