import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from status_api.services.wormly import WormlyClient
from tests.mocks.fake_wormly import app as fake_wormly_app
from tests.mocks.fake_wormly import state as fake_wormly_state

FAKE_WORMLY_URL = "http://fake-wormly/"


@pytest.fixture
def fake_wormly():
    """Fake Wormly response state, reset to the default host list for each test."""
    fake_wormly_state.reset()
    yield fake_wormly_state
    fake_wormly_state.reset()


@pytest_asyncio.fixture
async def wormly_client(fake_wormly):
    """WormlyClient wired to the fake Wormly API via in-process ASGITransport."""
    http_client = AsyncClient(transport=ASGITransport(app=fake_wormly_app))
    client = WormlyClient(base_url=FAKE_WORMLY_URL, api_key="test-key", http_client=http_client)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def app_with_wormly(wormly_client):
    """Status API app with its Wormly client replaced by the fake."""
    from status_api.main import app

    original = getattr(app.state, "wormly_client", None)
    app.state.wormly_client = wormly_client
    yield app
    app.state.wormly_client = original


@pytest_asyncio.fixture
async def client(app_with_wormly):
    transport = ASGITransport(app=app_with_wormly)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
