import pytest
from pelican.log import LimitFilter


@pytest.fixture(autouse=True)
def reset_pelican_log_dedup(monkeypatch):
    """Pelican drops repeated log messages; start every test with a clean slate."""
    monkeypatch.setattr(LimitFilter, "_raised_messages", set(), raising=False)
    monkeypatch.setattr(LimitFilter, "_ignore", set(), raising=False)
