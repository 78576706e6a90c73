"""
Errors raised by urlsign.

Only caller mistakes raise. A URL that fails verification is never an
exception; the verifier returns INVALID instead.
"""


class UrlSigningError(ValueError):
  """Base exception for urlsign."""


class SigningError(UrlSigningError):
  """Raised when create_signed_url is called with unusable arguments."""


class MalformedUrlError(SigningError):
  """URL has no scheme or host, or repeats a query parameter."""


class ReservedParameterError(SigningError):
  """URL already carries a reserved parameter (expires/signature)."""


class InvalidTokenError(SigningError):
  """Token parameter is missing or has the wrong length."""


class WeakKeyError(SigningError):
  """Secret key is shorter than the configured minimum."""


class ExpiryTooFarError(SigningError):
  """Expiry lies beyond the maximum active duration."""


class ValidationInputError(UrlSigningError):
  """Raised when validate_signed_url is called with unusable arguments."""


class InvalidInputError(ValidationInputError):
  """URL argument is not a string or is too short to be a URL."""


class NoKeysProvidedError(ValidationInputError):
  """No candidate keys were supplied."""


class MalformedQueryError(UrlSigningError):
  """Query string cannot be parsed without losing information."""


class DuplicateParameterError(MalformedQueryError):
  """Query string names the same parameter more than once."""


class UndecodableQueryError(MalformedQueryError):
  """Query string holds percent-escapes that are not valid UTF-8."""
