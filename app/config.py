import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite+aiosqlite:///./todos.db",
)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")

# Fixed at process start, not read from the environment.
HOST = "0.0.0.0"
PORT = 9090

CORS_ORIGINS = ["*"]
CORS_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
