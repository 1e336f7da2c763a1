"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from app.main import app
from app.core.dependencies import get_data_manager
from app.services.menu.repository import MenuRepository
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.store.data_manager import DataManager


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
def data_manager(test_menu_repository):
    """Fresh data manager over the test menu."""
    return DataManager(menu_repository=test_menu_repository)


@pytest.fixture
def pizza(data_manager):
    """Pizza, $12.99."""
    return data_manager.get_item(1)


@pytest.fixture
def burger(data_manager):
    """Burger, $8.99."""
    return data_manager.get_item(2)


@pytest.fixture
def ice_cream(data_manager):
    """Ice Cream, $4.99."""
    return data_manager.get_item(3)


@pytest.fixture
def recorder():
    """Callable that records every snapshot it receives."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, snapshot):
            self.calls.append(snapshot)

        @property
        def last(self):
            return self.calls[-1]

    return Recorder()


@pytest.fixture
def test_client(data_manager):
    """Create FastAPI test client bound to the test data manager."""
    app.dependency_overrides[get_data_manager] = lambda: data_manager

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()
