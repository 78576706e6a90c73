"""
URL signing.

SECURITY-CRITICAL: Do not alter without review.
Appends an expiry and an HMAC signature computed over the canonical URL.
The secret key should be kept for at least [time of last signing] +
max_active_duration_hours so that URLs signed with it can still be verified.
"""
import base64
import hashlib
import hmac
import logging
import time
from typing import Optional

from .canonical import canonicalize, decompose
from .config import Clock, SecretKey, SigningConfig
from .exceptions import (
  ExpiryTooFarError,
  InvalidTokenError,
  MalformedQueryError,
  MalformedUrlError,
  ReservedParameterError,
  WeakKeyError,
)

logger = logging.getLogger(__name__)


def _key_bytes(key: SecretKey) -> bytes:
  return key if isinstance(key, bytes) else key.encode("utf-8")


def compute_signature(canonical_url: str, key: SecretKey, algorithm: str = "sha256") -> str:
  """
  Compute the base64 HMAC of a canonical URL.

  Args:
    canonical_url: Output of canonicalize()
    key: Secret key
    algorithm: hashlib digest name

  Returns:
    Standard base64 of the raw digest
  """
  digest = hmac.new(
    _key_bytes(key),
    canonical_url.encode("utf-8"),
    getattr(hashlib, algorithm)
  ).digest()
  return base64.b64encode(digest).decode("ascii")


class UrlSigner:
  """Creates short-lived signed URLs."""

  def __init__(self, config: Optional[SigningConfig] = None, clock: Clock = time.time):
    self.config = config or SigningConfig()
    self.clock = clock

  def create_signed_url(self, url: str, expires: int, secret_key: SecretKey) -> str:
    """
    Sign a URL.

    Args:
      url: Unsigned URL with a token parameter in its query string
      expires: Unix timestamp at which the URL stops being valid
      secret_key: Key to sign with, at least min_key_length chars

    Returns:
      The signed URL

    Raises:
      MalformedUrlError: No scheme or host, or a repeated or undecodable query parameter
      ReservedParameterError: expires or signature already present
      InvalidTokenError: token missing or of the wrong length
      WeakKeyError: secret_key too short
      ExpiryTooFarError: expires beyond now + max active duration
    """
    cfg = self.config

    try:
      parts = decompose(url)
    except MalformedQueryError as e:
      raise MalformedUrlError(str(e)) from e
    except ValueError as e:
      raise MalformedUrlError(f"URL is malformed: {e}") from e

    if not parts.scheme or not parts.host:
      raise MalformedUrlError("URL is malformed.")

    reserved = [name for name in cfg.reserved_params if name in parts.query]
    if reserved:
      raise ReservedParameterError(
        f'Query parameters "{cfg.expires_param}" and "{cfg.signature_param}" are reserved.'
      )

    token = parts.query.get(cfg.token_param)
    if token is None or len(token) != cfg.token_length:
      raise InvalidTokenError(
        f'{cfg.token_length} char "{cfg.token_param}" parameter not found in url query string.'
      )

    if len(secret_key) < cfg.min_key_length:
      raise WeakKeyError(f"Secret key must be at least {cfg.min_key_length} chars.")

    if isinstance(expires, bool) or not isinstance(expires, int):
      raise TypeError(f"expires must be an int Unix timestamp, got {type(expires).__name__}")

    if expires > int(self.clock()) + cfg.max_active_seconds:
      raise ExpiryTooFarError(
        f"Expiry timestamp greater than maximum allowed {cfg.max_active_duration_hours} hours."
      )

    params = dict(parts.query)
    params[cfg.expires_param] = str(expires)
    canonical_url = canonicalize(parts, params)

    params[cfg.signature_param] = compute_signature(canonical_url, secret_key, cfg.hash_algorithm)
    signed_url = canonicalize(parts, params)
    if parts.fragment:
      signed_url = f"{signed_url}#{parts.fragment}"

    logger.debug("Signed URL for host %s expiring at %d", parts.host, expires)
    return signed_url
