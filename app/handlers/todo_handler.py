from typing import Optional

from mangum import Mangum
from app.main import create_app


def build_handler(database_url: Optional[str] = None) -> Mangum:
    # lifespan runs on every invocation: schema check, seeding, dispose
    return Mangum(create_app(database_url), lifespan="auto")


handler = build_handler()
app = handler.app
