"""Test configuration and fixtures.

The AI client is replaced by an AsyncMock through FastAPI dependency
overrides, so no test reaches the external AI service.
"""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock

from dotenv import load_dotenv

# Load test environment variables before the settings are instantiated
test_env_path = Path(__file__).parent.parent / ".env.test"
load_dotenv(test_env_path, override=True)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.features.ai.client import AIPasswordClient  # noqa: E402
from src.features.ai.dependencies import get_ai_client  # noqa: E402
from src.main import app  # noqa: E402


@pytest.fixture
def ai_client() -> AsyncMock:
    """AsyncMock standing in for the AI client.

    Configure ``ai_client.generate`` / ``ai_client.validate`` per test with
    ``return_value`` or ``side_effect``.
    """
    return AsyncMock(spec=AIPasswordClient)


@pytest.fixture(autouse=True)
def override_ai_client(ai_client: AsyncMock):
    """Route every AI endpoint to the mocked client."""
    app.dependency_overrides[get_ai_client] = lambda: ai_client
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
