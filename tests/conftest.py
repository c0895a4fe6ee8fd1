import os
import sys

import pytest
import pytest_asyncio

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from deso_api.api.transport import close_shared_transport  # noqa: E402
from deso_api.metrics import default_metrics  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest_asyncio.fixture(autouse=True)
async def reset_shared_transport():
    await close_shared_transport()
    yield
    await close_shared_transport()
