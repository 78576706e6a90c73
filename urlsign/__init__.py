"""Time-limited, tamper-evident signed URLs."""
from .canonical import UrlParts, build_query, canonicalize, decompose
from .config import Clock, SecretKey, SigningConfig
from .exceptions import (
  DuplicateParameterError,
  ExpiryTooFarError,
  InvalidInputError,
  InvalidTokenError,
  MalformedQueryError,
  MalformedUrlError,
  NoKeysProvidedError,
  ReservedParameterError,
  SigningError,
  UndecodableQueryError,
  UrlSigningError,
  ValidationInputError,
  WeakKeyError,
)
from .generators import (
  generate_key,
  generate_token,
  get_now_plus_days,
  get_now_plus_hours,
  get_now_plus_minutes,
)
from .helper import UrlSigningHelper
from .signer import UrlSigner, compute_signature
from .verifier import INVALID, UrlVerifier, ValidationResult

__all__ = [
  "UrlParts",
  "build_query",
  "canonicalize",
  "decompose",
  "SigningConfig",
  "Clock",
  "SecretKey",
  "UrlSigningError",
  "SigningError",
  "MalformedUrlError",
  "ReservedParameterError",
  "InvalidTokenError",
  "WeakKeyError",
  "ExpiryTooFarError",
  "ValidationInputError",
  "InvalidInputError",
  "NoKeysProvidedError",
  "MalformedQueryError",
  "DuplicateParameterError",
  "UndecodableQueryError",
  "generate_token",
  "generate_key",
  "get_now_plus_minutes",
  "get_now_plus_hours",
  "get_now_plus_days",
  "UrlSigningHelper",
  "UrlSigner",
  "compute_signature",
  "UrlVerifier",
  "ValidationResult",
  "INVALID",
]
