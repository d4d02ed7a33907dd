import asyncio
import pytest
from fastapi.testclient import TestClient

from eventhub.core.config import get_settings
from eventhub.database.event_store import InMemoryEventStore, get_event_store
from eventhub.main import app
from eventhub.routers.dashboard import get_dashboard
from eventhub.viewmodels.dashboard import DashboardViewModel


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="function")
def event_store():
    """Provide a fresh store seeded with events "1" and "2"."""
    return InMemoryEventStore()


@pytest.fixture(scope="function")
def dashboard():
    """Provide an activated view-model whose loading phase has already ended."""

    async def _load():
        vm = DashboardViewModel(loading_delay=0)
        vm.activate()
        await vm.wait_loaded()
        return vm

    return asyncio.run(_load())


@pytest.fixture(scope="function")
def loading_dashboard():
    """Provide a view-model still in its loading phase."""
    return DashboardViewModel(loading_delay=60)


@pytest.fixture(scope="function")
def client(event_store, dashboard):
    """Test client wired to the fresh store and the loaded dashboard (lifespan not run)."""
    app.dependency_overrides[get_event_store] = lambda: event_store
    app.dependency_overrides[get_dashboard] = lambda: dashboard
    yield TestClient(app)
    app.dependency_overrides.clear()
