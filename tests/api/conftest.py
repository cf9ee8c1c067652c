from __future__ import annotations

import pytest

from timestamper.api.app import create_app
from timestamper.config import AppConfig, ApiConfig


@pytest.fixture
def client(tmp_path):
    """
    Flask test client (no real server), timestamps_dir = tmp_path.
    """
    config = AppConfig(api=ApiConfig(timestamps_dir=str(tmp_path)))
    app = create_app(config)
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
