"""Shared test fixtures and configuration."""
import pytest
import os
from pathlib import Path
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("APPWRITE_ENDPOINT", "https://backend.test/v1")
os.environ.setdefault("APPWRITE_PROJECT_ID", "test-project")
os.environ.setdefault("MENU_SOURCE", "yaml")

from app.main import app
from app.core.config import Settings
from app.core.container import ClientContainer
from app.services.cart.models import CartCustomization, CartItem
from app.services.identity.models import User
from app.services.identity.service import IdentityService
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.menu.repository import MenuRepository


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        appwrite_endpoint="https://backend.test/v1",
        appwrite_project_id="test-project",
        appwrite_database_id="test-db",
        appwrite_bucket_id="test-bucket",
        menu_source="yaml",
        search_debounce_seconds=1.0,
        seed_delete_delay=0,
        seed_create_delay=0,
        seed_link_delay=0,
        seed_item_delay=0,
    )


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_menu_repository(test_menu_path):
    """Create menu repository with test data."""
    provider = InMemoryMenuProvider(menu_file=str(test_menu_path))
    return MenuRepository(provider)


@pytest.fixture
def test_user():
    return User(
        id="user-row-1",
        account_id="account-1",
        name="Jane Doe",
        email="jane@example.com",
        avatar="https://backend.test/v1/avatars/initials?name=Jane+Doe",
    )


@pytest.fixture
def mock_identity(test_user):
    """Identity service with a restorable session."""
    identity = AsyncMock(spec=IdentityService)
    identity.restore_session = AsyncMock(return_value=True)
    identity.get_current_user = AsyncMock(return_value=test_user)
    identity.sign_in = AsyncMock(return_value={"$id": "session-1"})
    identity.sign_out = AsyncMock(return_value=None)
    identity.create_user = AsyncMock(return_value=test_user)
    return identity


@pytest.fixture
def test_container(test_settings, test_menu_path, mock_identity):
    """Container wired to the YAML menu and a mocked identity service."""
    return ClientContainer(
        test_settings,
        menu_provider=InMemoryMenuProvider(menu_file=str(test_menu_path)),
        identity=mock_identity,
    )


@pytest.fixture
def test_client(test_container):
    """Create FastAPI test client bound to the test container."""
    app.state.container = test_container

    client = TestClient(app)

    yield client

    del app.state.container


@pytest.fixture
def cheese():
    return CartCustomization(id="cus-cheese", name="Extra Cheese", price=1.0, type="topping")


@pytest.fixture
def bacon():
    return CartCustomization(id="cus-bacon", name="Bacon", price=2.0, type="topping")


@pytest.fixture
def burger():
    """Factory for burger cart items with the given customizations."""
    def _burger(*customizations, quantity=1):
        return CartItem(
            id="burger",
            name="Classic Cheeseburger",
            price=5.0,
            image_url="https://images.test/burger.png",
            quantity=quantity,
            customizations=list(customizations),
        )
    return _burger
