"""
Signed URL verification.

SECURITY-CRITICAL: Do not alter without review.
Every runtime failure (missing signature, expired, tampered, unknown key)
returns the same INVALID result so callers cannot tell them apart.
"""
from __future__ import annotations

import hmac
import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from .canonical import canonicalize, decompose
from .config import Clock, SecretKey, SigningConfig
from .exceptions import InvalidInputError, NoKeysProvidedError
from .signer import compute_signature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
  """Outcome of a validation: the embedded token, or INVALID."""

  token: Optional[str] = None

  @property
  def valid(self) -> bool:
    return self.token is not None

  def __bool__(self) -> bool:
    return self.valid


INVALID = ValidationResult()


class UrlVerifier:
  """Checks signed URLs against a set of candidate keys."""

  def __init__(self, config: Optional[SigningConfig] = None, clock: Clock = time.time):
    self.config = config or SigningConfig()
    self.clock = clock

  def validate_signed_url(self, url: str, secret_keys: Iterable[SecretKey]) -> ValidationResult:
    """
    Check a signed URL for validity against the provided set of keys.

    Pass the active key and any keys still inside their rotation window.

    Args:
      url: The signed URL to check
      secret_keys: Candidate keys, any one of which may have signed the URL

    Returns:
      ValidationResult carrying the token, or INVALID

    Raises:
      InvalidInputError: url is not a string or is too short
      NoKeysProvidedError: secret_keys is empty, or a single key instead of a collection
    """
    cfg = self.config

    if not isinstance(url, str) or len(url) < cfg.min_url_length:
      raise InvalidInputError("First argument URL must be a valid URL of type string.")

    # A bare key would otherwise be iterated one character at a time
    if isinstance(secret_keys, (str, bytes)):
      raise NoKeysProvidedError("Secret keys must be a collection of keys, not a single key.")

    keys = list(secret_keys)
    if not keys:
      raise NoKeysProvidedError("Secret keys must contain at least one item.")

    try:
      parts = decompose(url)
    except ValueError as e:
      logger.debug("Rejected URL: %s", e)
      return INVALID

    params = dict(parts.query)
    provided_signature = params.pop(cfg.signature_param, None)
    if provided_signature is None:
      logger.debug("Rejected URL: no %s parameter", cfg.signature_param)
      return INVALID

    canonical_url = canonicalize(parts, params)

    matched = False
    for key in keys:
      computed = compute_signature(canonical_url, key, cfg.hash_algorithm)
      if hmac.compare_digest(provided_signature.encode("utf-8"), computed.encode("utf-8")):
        matched = True
        break

    if not matched:
      logger.debug("Rejected URL: signature mismatch under %d key(s)", len(keys))
      return INVALID

    try:
      expires = int(params[cfg.expires_param])
    except (KeyError, ValueError):
      logger.debug("Rejected URL: missing or non-integer %s", cfg.expires_param)
      return INVALID

    if expires <= int(self.clock()):
      logger.debug("Rejected URL: expired at %d", expires)
      return INVALID

    token = params.get(cfg.token_param)
    if token is None:
      logger.debug("Rejected URL: no %s parameter", cfg.token_param)
      return INVALID

    return ValidationResult(token=token)
