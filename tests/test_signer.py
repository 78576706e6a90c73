"""
Tests for signed URL creation.
"""
import pytest
from urlsign.canonical import decompose
from urlsign.config import SigningConfig
from urlsign.exceptions import (
  ExpiryTooFarError,
  InvalidTokenError,
  MalformedUrlError,
  ReservedParameterError,
  SigningError,
  WeakKeyError,
)
from urlsign.signer import UrlSigner, compute_signature

NOW = 1_700_000_000
URL = "http://test.com/?token=1234567890987654"
KEY = "SECRET12123456788765432121TERCES"


@pytest.fixture
def signer():
  return UrlSigner(clock=lambda: NOW)


def test_create_signed_url_returns_string(signer):
  """Test that signing returns a URL string with expires and signature."""
  signed = signer.create_signed_url(URL, NOW + 60, KEY)

  assert isinstance(signed, str)
  query = decompose(signed).query
  assert list(query) == ["token", "expires", "signature"]
  assert query["token"] == "1234567890987654"
  assert query["expires"] == str(NOW + 60)


def test_signature_covers_url_with_expires(signer):
  """Test that the signature is the HMAC of the URL including expires."""
  signed = signer.create_signed_url(URL, NOW + 60, KEY)

  expected = compute_signature(f"{URL}&expires={NOW + 60}", KEY)
  assert decompose(signed).query["signature"] == expected


def test_signature_is_base64_sha256(signer):
  """Test that the default digest is a base64-encoded 32 byte HMAC."""
  signature = compute_signature("http://test.com/", KEY)

  assert len(signature) == 44
  assert signature.endswith("=")


def test_existing_parameters_keep_their_position(signer):
  """Test that caller parameters stay ahead of the appended ones."""
  url = "https://my.site.com/test?with=qs&token=1234567890987654"

  signed = signer.create_signed_url(url, NOW + 60, KEY)

  assert signed.startswith(f"{url}&expires={NOW + 60}&signature=")


def test_port_and_fragment_preserved(signer):
  """Test that the port stays in the URL and the fragment is re-appended."""
  signed = signer.create_signed_url(
    "http://test.com:8080/a?token=1234567890987654#top", NOW + 60, KEY
  )

  assert signed.startswith("http://test.com:8080/a?token=1234567890987654&expires=")
  assert signed.endswith("#top")


def test_past_expiry_is_allowed(signer):
  """Test that an expiry in the past can still be signed."""
  signed = signer.create_signed_url(URL, NOW - 1, KEY)

  assert decompose(signed).query["expires"] == str(NOW - 1)


def test_bytes_key_matches_str_key(signer):
  """Test that a bytes key signs like its str equivalent."""
  assert signer.create_signed_url(URL, NOW + 60, KEY) == \
    signer.create_signed_url(URL, NOW + 60, KEY.encode())


@pytest.mark.parametrize("url", [
  "httptest.com/?token=1234567890987654",
  "http:///?token=1234567890987654",
  "httptest.com?token=1234567890987654",
  "http://[::1/?token=1234567890987654",
])
def test_malformed_url_rejected(signer, url):
  """Test that URLs without scheme or host are refused."""
  with pytest.raises(MalformedUrlError):
    signer.create_signed_url(url, NOW + 60, KEY)


def test_duplicate_parameter_rejected(signer):
  """Test that repeated query parameters are refused as malformed."""
  with pytest.raises(MalformedUrlError):
    signer.create_signed_url(f"{URL}&token=1234567890987654", NOW + 60, KEY)


@pytest.mark.parametrize("extra", ["expires=1", "signature=abc", "expires="])
def test_reserved_parameter_rejected(signer, extra):
  """Test that expires and signature cannot be supplied by the caller."""
  with pytest.raises(ReservedParameterError):
    signer.create_signed_url(f"{URL}&{extra}", NOW + 60, KEY)


@pytest.mark.parametrize("url", [
  "http://test.com/?token=123456789098765",
  "http://test.com/?token=12345678909876543",
  "http://test.com/?other=1234567890987654",
  "http://test.com/",
])
def test_invalid_token_rejected(signer, url):
  """Test that a missing or wrong-length token is refused."""
  with pytest.raises(InvalidTokenError):
    signer.create_signed_url(url, NOW + 60, KEY)


def test_weak_key_rejected(signer):
  """Test that keys under 32 chars are refused."""
  with pytest.raises(WeakKeyError):
    signer.create_signed_url(URL, NOW + 60, KEY[:31])


def test_expiry_at_maximum_allowed(signer):
  """Test that an expiry exactly at the 168 hour limit is accepted."""
  signed = signer.create_signed_url(URL, NOW + 168 * 3600, KEY)

  assert decompose(signed).query["expires"] == str(NOW + 168 * 3600)


def test_expiry_beyond_maximum_rejected(signer):
  """Test that an expiry past the 168 hour limit is refused."""
  with pytest.raises(ExpiryTooFarError):
    signer.create_signed_url(URL, NOW + 168 * 3600 + 1, KEY)


def test_custom_max_duration():
  """Test that the maximum active duration can be overridden."""
  signer = UrlSigner(SigningConfig(max_active_duration_hours=1), clock=lambda: NOW)

  signer.create_signed_url(URL, NOW + 3600, KEY)
  with pytest.raises(ExpiryTooFarError):
    signer.create_signed_url(URL, NOW + 3601, KEY)


@pytest.mark.parametrize("expires", ["1700000060", 1700000060.0, True])
def test_non_integer_expiry_rejected(signer, expires):
  """Test that expires must be an int."""
  with pytest.raises(TypeError):
    signer.create_signed_url(URL, expires, KEY)


def test_checks_run_in_order(signer):
  """Test that the first failing check decides the error."""
  with pytest.raises(MalformedUrlError):
    signer.create_signed_url("httptest.com/?expires=1", NOW + 10**9, "short")

  with pytest.raises(ReservedParameterError):
    signer.create_signed_url("http://test.com/?expires=1", NOW + 10**9, "short")

  with pytest.raises(InvalidTokenError):
    signer.create_signed_url("http://test.com/?token=x", NOW + 10**9, "short")

  with pytest.raises(WeakKeyError):
    signer.create_signed_url(URL, NOW + 10**9, "short")


def test_signing_errors_share_base_class(signer):
  """Test that every signing failure is a SigningError and a ValueError."""
  with pytest.raises(SigningError):
    signer.create_signed_url(URL, NOW + 60, "short")

  with pytest.raises(ValueError):
    signer.create_signed_url(URL, NOW + 60, "short")


@pytest.mark.parametrize("escape", ["%FE", "%FF", "%C3"])
def test_undecodable_query_rejected(signer, escape):
  """Test that a query value that is not UTF-8 is refused, not rewritten."""
  with pytest.raises(MalformedUrlError):
    signer.create_signed_url(f"{URL}&file={escape}", NOW + 60, KEY)
