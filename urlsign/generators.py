"""
Random token/key generation and expiry helpers.
"""
import secrets
import time

from .config import Clock

TOKEN_BYTES = 8  # 16 hex chars
KEY_BYTES = 16  # 32 hex chars


def generate_token() -> str:
  """
  Generate a token to put in the URL query string.

  Store it with its expiry and make sure it is unique.
  """
  return secrets.token_hex(TOKEN_BYTES)


def generate_key() -> str:
  """Generate a URL signing key."""
  return secrets.token_hex(KEY_BYTES)


def get_now_plus_seconds(seconds: int, clock: Clock = time.time) -> int:
  return int(clock()) + seconds


def get_now_plus_minutes(minutes: int, clock: Clock = time.time) -> int:
  """Current Unix timestamp plus n minutes."""
  return get_now_plus_seconds(minutes * 60, clock)


def get_now_plus_hours(hours: int, clock: Clock = time.time) -> int:
  """Current Unix timestamp plus n hours."""
  return get_now_plus_seconds(hours * 60 * 60, clock)


def get_now_plus_days(days: int, clock: Clock = time.time) -> int:
  """Current Unix timestamp plus n days."""
  return get_now_plus_seconds(days * 24 * 60 * 60, clock)
