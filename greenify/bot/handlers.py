from typing import List

from aiogram import F, Router
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message

from greenify.bot.keyboards import cart_kb, main_kb, products_kb
from greenify.cart.models import Product
from greenify.cart.store import CartStore
from greenify.cart.views import CartView, line_total
from greenify.config import settings
from greenify.services.catalog import find_product, products_by_category
from greenify.services.checkout import checkout
from greenify.utils.formatters import money

router = Router()


def _is_admin(user) -> bool:
    try:
        return int(user.id) == int(settings.admin_id)
    except Exception:
        return False


def _cart_text(view: CartView) -> str:
    if view.is_empty():
        return "Dein Warenkorb ist leer."
    lines = ["<b>Dein Warenkorb</b>"]
    for it in view.items():
        lines.append(
            f"{it.product.name}: {it.quantity} × {money(it.product.price)} = {money(line_total(it))}"
        )
    lines.append("")
    lines.append(f"Gesamtanzahl: <b>{view.total_quantity()}</b>")
    lines.append(f"Gesamtkosten: <b>{money(view.total_cost())}</b>")
    return "\n".join(lines)


@router.message(Command("start"))
async def cmd_start(message: Message) -> None:
    if not _is_admin(message.from_user):
        await message.answer("⛔️ Kein Zugriff.")
        return
    await message.answer(
        f"<b>{settings.shop_name}</b>\nFrisches Grün für dein Zuhause. /products",
        reply_markup=main_kb(),
    )


@router.message(Command("products"))
async def cmd_products(message: Message, cart: CartStore, catalog: List[Product]) -> None:
    if not _is_admin(message.from_user):
        await message.answer("⛔️ Kein Zugriff.")
        return
    for category, products in products_by_category(catalog).items():
        text = "\n".join([f"<b>{category}</b>"] + [f"{p.name}: {money(p.price)}" for p in products])
        await message.answer(text, reply_markup=products_kb(products, cart.state))


@router.message(Command("cart"))
async def cmd_cart(message: Message, cart_view: CartView) -> None:
    if not _is_admin(message.from_user):
        await message.answer("⛔️ Kein Zugriff.")
        return
    await message.answer(_cart_text(cart_view), reply_markup=cart_kb(cart_view.items()))


@router.callback_query(F.data.startswith("add:"))
async def cb_add(call: CallbackQuery, cart: CartStore, catalog: List[Product]) -> None:
    if not _is_admin(call.from_user):
        await call.answer("⛔️", show_alert=True)
        return
    pid = call.data.split(":", 1)[1]
    product = find_product(catalog, pid)
    if product is None:
        await call.answer("Unbekanntes Produkt.")
        return
    if not cart.add_to_cart(product):
        await call.answer("Im Warenkorb")
        return
    await call.answer("In den Warenkorb ✅")


@router.callback_query(F.data.regexp(r"^(inc|dec|rm):"))
async def cb_change_qty(call: CallbackQuery, cart: CartStore, cart_view: CartView) -> None:
    if not _is_admin(call.from_user):
        await call.answer("⛔️", show_alert=True)
        return
    op, pid = call.data.split(":", 1)
    if op == "inc":
        cart.increment(pid)
    elif op == "dec":
        cart.decrement(pid)
    else:
        cart.remove(pid)
    await call.message.edit_text(_cart_text(cart_view), reply_markup=cart_kb(cart_view.items()))
    await call.answer()


@router.callback_query(F.data == "clear")
async def cb_clear(call: CallbackQuery, cart: CartStore, cart_view: CartView) -> None:
    if not _is_admin(call.from_user):
        await call.answer("⛔️", show_alert=True)
        return
    cart.clear()
    await call.message.edit_text(_cart_text(cart_view), reply_markup=cart_kb(cart_view.items()))
    await call.answer()


@router.callback_query(F.data == "checkout")
async def cb_checkout(call: CallbackQuery, cart_view: CartView) -> None:
    if not _is_admin(call.from_user):
        await call.answer("⛔️", show_alert=True)
        return
    await call.answer(checkout(cart_view), show_alert=True)


@router.callback_query(F.data.startswith("noop:"))
async def cb_noop(call: CallbackQuery) -> None:
    await call.answer()
