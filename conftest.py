"""
Pytest configuration for urlsign tests.
Keeps URLSIGN_* settings from the calling shell out of the test run.
"""
import pytest

URLSIGN_ENV = (
  "URLSIGN_MAX_ACTIVE_HOURS",
  "URLSIGN_HASH_ALGO",
  "URLSIGN_KEY",
  "URLSIGN_KEYS",
)


@pytest.fixture(autouse=True)
def clean_urlsign_env(monkeypatch):
  """Auto-applied fixture: every test starts from the built-in defaults."""
  for name in URLSIGN_ENV:
    monkeypatch.delenv(name, raising=False)
