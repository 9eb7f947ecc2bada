"""Pytest configuration and fixtures"""
import os

import pytest
from unittest.mock import AsyncMock, Mock

# Set test environment variables before greenify.config is imported
os.environ.setdefault("BOT_TOKEN", "test_token")
os.environ.setdefault("ADMIN_ID", "123456789")
os.environ.setdefault("CURRENCY", "€")
os.environ.setdefault("DECIMALS", "2")

from greenify.cart.models import Product
from greenify.cart.store import CartStore
from greenify.cart.views import CartView
from greenify.config import settings


@pytest.fixture
def product_a():
    """Product priced 10"""
    return Product(id="a", name="Alpha", price=10.0, category="Pflegeleicht")


@pytest.fixture
def product_b():
    """Product priced 5"""
    return Product(id="b", name="Beta", price=5.0, category="Luftreiniger")


@pytest.fixture
def store():
    """Empty cart store"""
    return CartStore()


@pytest.fixture
def view(store):
    """Cached view over the store fixture"""
    return CartView(store)


@pytest.fixture
def admin_message():
    """Mock Telegram message from the admin"""
    message = Mock()
    message.from_user = Mock(id=settings.admin_id)
    message.answer = AsyncMock()
    return message


@pytest.fixture
def admin_call():
    """Mock callback query from the admin"""
    call = Mock()
    call.from_user = Mock(id=settings.admin_id)
    call.answer = AsyncMock()
    call.message = Mock()
    call.message.edit_text = AsyncMock()
    return call
