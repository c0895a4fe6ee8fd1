import os

import httpx
import pytest
import pytest_asyncio

from deso_api.api.client import DesoApiClient
from deso_api.config import NODE_URL


LIVE = os.getenv("LIVE_DESO") in {"1", "true", "yes"}
SAMPLE_USERNAME = os.getenv("DESO_SAMPLE_USERNAME", "diamondhands")


pytestmark = pytest.mark.skipif(not LIVE, reason="Live DeSo integration tests are disabled")


@pytest_asyncio.fixture
async def live_client():
    async with httpx.AsyncClient(base_url=os.getenv("DESO_BASE_URL", NODE_URL), timeout=10.0) as httpx_client:
        yield DesoApiClient(async_client=httpx_client)


@pytest.mark.asyncio
async def test_live_exchange_rate(live_client):
    rate = await live_client.get_exchange_rate()
    assert isinstance(rate, dict)
    assert "USDCentsPerDeSoExchangeRate" in rate


@pytest.mark.asyncio
async def test_live_app_state(live_client):
    state = await live_client.get_app_state()
    assert isinstance(state, dict)


@pytest.mark.asyncio
async def test_live_single_profile(live_client):
    profile = await live_client.get_single_profile(username=SAMPLE_USERNAME)
    assert profile["Profile"]["Username"].lower() == SAMPLE_USERNAME.lower()
