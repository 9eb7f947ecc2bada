import asyncio
import logging
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from greenify.bot.handlers import router
from greenify.cart.store import CartStore
from greenify.cart.views import CartView
from greenify.config import require_bot_settings, settings
from greenify.services.catalog import CATALOG

async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    require_bot_settings()

    cart = CartStore()

    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    dp = Dispatcher(cart=cart, cart_view=CartView(cart), catalog=CATALOG)
    dp.include_router(router)

    await dp.start_polling(bot)

if __name__ == "__main__":
    asyncio.run(main())
