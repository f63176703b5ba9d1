import pytest
from httpx import ASGITransport, AsyncClient

from app.main import create_app


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'todos.db'}"

@pytest.fixture
async def initialized_app(database_url):
    app = create_app(database_url)
    # run startup/shutdown exactly as the server would
    async with app.router.lifespan_context(app):
        yield app

@pytest.fixture
async def client(initialized_app):
    transport = ASGITransport(app=initialized_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
