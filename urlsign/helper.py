"""
UrlSigningHelper - sign and verify URLs through one object.

Keys should be rotated at regular intervals (~1 per month). When a key is
retired, keep passing it to validate_signed_url until max_active_duration_hours
after the last URL it signed.

Usage:

  helper = UrlSigningHelper()

  key = helper.generate_key()          # store it
  token = helper.generate_token()      # store it with the expiry, keep it unique
  expires = helper.get_now_plus_minutes(10)

  url = helper.create_signed_url(
    f"https://my.site.com/test?with=qs&token={token}", expires, key
  )

  result = helper.validate_signed_url(url, [key])
  if not result:
    ...  # reject
  result.token  # complete the action, then deactivate the token
"""
import time
from typing import Iterable, Optional

from . import generators
from .config import Clock, SecretKey, SigningConfig
from .signer import UrlSigner
from .verifier import UrlVerifier, ValidationResult


class UrlSigningHelper:
  """Signer, verifier and generators sharing one config and clock."""

  def __init__(self, config: Optional[SigningConfig] = None, clock: Clock = time.time):
    self.config = config or SigningConfig()
    self.clock = clock
    self.signer = UrlSigner(self.config, clock)
    self.verifier = UrlVerifier(self.config, clock)

  def create_signed_url(self, url: str, expires: int, secret_key: SecretKey) -> str:
    return self.signer.create_signed_url(url, expires, secret_key)

  def validate_signed_url(self, url: str, secret_keys: Iterable[SecretKey]) -> ValidationResult:
    return self.verifier.validate_signed_url(url, secret_keys)

  def generate_token(self) -> str:
    return generators.generate_token()

  def generate_key(self) -> str:
    return generators.generate_key()

  def get_now_plus_minutes(self, minutes: int) -> int:
    return generators.get_now_plus_minutes(minutes, self.clock)

  def get_now_plus_hours(self, hours: int) -> int:
    return generators.get_now_plus_hours(hours, self.clock)

  def get_now_plus_days(self, days: int) -> int:
    return generators.get_now_plus_days(days, self.clock)
