"""
Signing configuration.

Defaults can be overridden per process through environment variables, or per
signer/verifier by passing a SigningConfig.
"""
import hashlib
import os
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Maximum time until expiry, recommended seven days
DEFAULT_MAX_ACTIVE_DURATION_HOURS = 168

# sha1 | sha256 (default) | sha512
DEFAULT_HASH_ALGO = "sha256"

SUPPORTED_HASH_ALGOS = ("sha1", "sha256", "sha512")

SecretKey = Union[str, bytes]
Clock = Callable[[], float]  # returns Unix seconds


def _env_max_active_hours() -> int:
  return int(os.getenv("URLSIGN_MAX_ACTIVE_HOURS", str(DEFAULT_MAX_ACTIVE_DURATION_HOURS)))


def _env_hash_algo() -> str:
  return os.getenv("URLSIGN_HASH_ALGO", DEFAULT_HASH_ALGO)


class SigningConfig(BaseModel):
  """
  Constants shared by the signer and the verifier.

  Both sides must use the same config or signatures never match.
  """
  model_config = ConfigDict(frozen=True, validate_default=True)

  max_active_duration_hours: int = Field(
    default_factory=_env_max_active_hours,
    description="Upper bound on how far in the future a URL may expire"
  )
  hash_algorithm: str = Field(
    default_factory=_env_hash_algo,
    description="HMAC digest: sha1, sha256 or sha512"
  )
  token_param: str = Field("token", description="Query parameter holding the token")
  expires_param: str = Field("expires", description="Reserved parameter for the expiry timestamp")
  signature_param: str = Field("signature", description="Reserved parameter for the signature")
  token_length: int = Field(16, description="Required token length in characters")
  min_key_length: int = Field(32, description="Minimum secret key length")
  min_url_length: int = Field(5, description="Shortest string accepted for validation")

  @field_validator("hash_algorithm")
  @classmethod
  def _check_algorithm(cls, value: str) -> str:
    value = value.lower()
    if value not in SUPPORTED_HASH_ALGOS or value not in hashlib.algorithms_available:
      raise ValueError(f"Unsupported hash algorithm: {value}")
    return value

  @field_validator("max_active_duration_hours", "token_length", "min_key_length", "min_url_length")
  @classmethod
  def _check_positive(cls, value: int) -> int:
    if value <= 0:
      raise ValueError("must be positive")
    return value

  @model_validator(mode="after")
  def _check_param_names(self) -> "SigningConfig":
    names = {self.token_param, self.expires_param, self.signature_param}
    if len(names) != 3 or "" in names:
      raise ValueError("token, expires and signature parameter names must be distinct and non-empty")
    return self

  @property
  def max_active_seconds(self) -> int:
    return self.max_active_duration_hours * 60 * 60

  @property
  def reserved_params(self) -> tuple[str, str]:
    return (self.expires_param, self.signature_param)
