from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport

from bloodwise.main import app
from bloodwise.core.simulator_factory import get_simulator
from bloodwise.services.history import history_store
from bloodwise.services.simulation.instant import InstantSimulator

@pytest.fixture
def simulator() -> InstantSimulator:
    """
    No sleeping, and every coin flip succeeds unless a test says otherwise.
    """
    return InstantSimulator(outcome=True)

@pytest.fixture(scope="function")
async def client(simulator) -> AsyncGenerator[AsyncClient, None]:
    """
    Creates a FastAPI Test Client that uses the instant simulator.
    """
    app.dependency_overrides[get_simulator] = lambda: simulator

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()

@pytest.fixture(autouse=True)
def clean_history():
    """
    The history store is process-wide; start every test empty.
    """
    history_store.clear()
    yield
    history_store.clear()
