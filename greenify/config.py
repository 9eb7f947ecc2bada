from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../greenify-shop
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


@dataclass(frozen=True)
class Settings:
    shop_name: str
    currency: str
    decimals: int
    bot_token: str
    admin_id: int


def load_settings() -> Settings:
    return Settings(
        shop_name=_get_env("SHOP_NAME", default="Greenify Co.") or "Greenify Co.",
        currency=_get_env("CURRENCY", default="€") or "€",
        decimals=_get_int("DECIMALS", default=2),  # 0 допустим: валюта без копеек
        bot_token=_get_env("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", default="") or "",
        admin_id=_get_int("ADMIN_ID", "ADMIN_TG_ID", default=0) or 0,
    )


settings = load_settings()


def require_bot_settings() -> None:
    # web storefront runs without these, only the bot needs them
    if not settings.bot_token:
        raise RuntimeError("BOT_TOKEN is empty. Set BOT_TOKEN in .env")
    if not settings.admin_id:
        raise RuntimeError("ADMIN_ID is empty. Set ADMIN_ID (or ADMIN_TG_ID) in .env")
