"""
URL canonicalization shared by signing and verification.

The signer and the verifier must rebuild exactly the same string from the
same URL, so both go through decompose() and canonicalize() here and nowhere
else.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

from .exceptions import DuplicateParameterError, UndecodableQueryError

QueryParams = Dict[str, str]  # insertion order == parse order


@dataclass(frozen=True)
class UrlParts:
  """A URL split into the pieces that take part in signing."""

  scheme: str
  netloc: str
  host: str
  path: str
  query: QueryParams = field(default_factory=dict)
  fragment: str = ""


def parse_query(query: str) -> QueryParams:
  """
  Parse a query string into an ordered mapping.

  Blank values are kept. A parameter given more than once raises
  DuplicateParameterError. Escapes that are not valid UTF-8 raise
  UndecodableQueryError rather than decoding to U+FFFD, which would let
  different bytes rebuild to the same canonical query.
  """
  try:
    pairs = parse_qsl(query, keep_blank_values=True, errors="strict")
  except UnicodeDecodeError as e:
    raise UndecodableQueryError(f"Query string is not valid UTF-8: {e.reason}") from e

  params: QueryParams = {}
  for key, value in pairs:
    if key in params:
      raise DuplicateParameterError(f'Query parameter "{key}" appears more than once.')
    params[key] = value
  return params


def decompose(url: str) -> UrlParts:
  """Split a URL into scheme, netloc, host, path, query and fragment."""
  split = urlsplit(url)
  return UrlParts(
    scheme=split.scheme,
    netloc=split.netloc,
    host=split.hostname or "",
    path=split.path,
    query=parse_query(split.query),
    fragment=split.fragment,
  )


def build_query(params: QueryParams) -> str:
  """Form-encode params in insertion order."""
  return urlencode(list(params.items()))


def canonicalize(parts: UrlParts, params: Optional[QueryParams] = None) -> str:
  """
  Rebuild scheme://netloc/path?query from parts.

  params replaces parts.query when given. An empty query leaves no trailing
  "?". The fragment is not part of the canonical form.
  """
  query = build_query(parts.query if params is None else params)
  url = f"{parts.scheme}://{parts.netloc}{parts.path}"
  if query:
    url = f"{url}?{query}"
  return url
