import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client() -> TestClient:
    from md_to_slack.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_cli_defaults(monkeypatch):
    # Keep CLI output independent of a developer's .env / environment.
    from md_to_slack import config

    monkeypatch.setattr(config, "DEFAULT_TEXT", "")
    monkeypatch.setattr(config, "DEFAULT_HEADER", "")
    yield
