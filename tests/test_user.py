import pytest

from app.main import create_app
from app.repositories.user_repo import UserRepository

pytestmark = pytest.mark.anyio


async def test_seeded_users_are_listed(client):
    res = await client.get("/users")
    assert res.status_code == 200
    assert res.json() == [
        {"id": "dane", "name": "Dane"},
        {"id": "keagan", "name": "Keagan"},
        {"id": "paul", "name": "Paul"},
        {"id": "shelley", "name": "Shelley"},
    ]

async def test_seeding_is_idempotent_across_restarts(database_url):
    for _ in range(3):
        app = create_app(database_url)
        async with app.router.lifespan_context(app):
            async with app.state.database.session() as db:
                users = await UserRepository().list_all(db)
        assert [u.id for u in users] == ["dane", "keagan", "paul", "shelley"]
