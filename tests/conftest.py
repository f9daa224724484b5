"""
Shared fixtures. The environment is pinned before krishimitra is imported:
a throwaway SQLite file, no artificial latency and no outbound API keys.
"""

import os
import tempfile

import pytest

_db_dir = tempfile.mkdtemp(prefix="krishimitra-test-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SIMULATED_LATENCY_SECONDS"] = "0"
os.environ["OPENWEATHERMAP_API_KEY"] = ""
os.environ["OPENCAGE_API_KEY"] = ""

from fastapi.testclient import TestClient  # noqa: E402

from krishimitra.main import app  # noqa: E402


@pytest.fixture(scope="session")
def client():
    # Entering the client runs the lifespan, which creates the tables
    with TestClient(app) as test_client:
        yield test_client
