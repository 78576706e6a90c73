#!/usr/bin/env python3
"""
urlsign CLI - generate keys and tokens, sign and verify URLs from a terminal.
"""
import argparse
import logging
import os
import sys
from typing import Optional

from rich.console import Console

from urlsign import SigningConfig, UrlSigningError, UrlSigningHelper

console = Console()
err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class UrlSignCLI:
  """Terminal front-end over UrlSigningHelper."""

  def __init__(self, helper: Optional[UrlSigningHelper] = None):
    self.helper = helper or UrlSigningHelper()

  def print_value(self, value: str) -> None:
    # URLs can contain "[...]", which rich would read as markup
    console.print(value, markup=False, highlight=False, emoji=False, soft_wrap=True)

  def cmd_token(self, args: argparse.Namespace) -> int:
    self.print_value(self.helper.generate_token())
    return EXIT_OK

  def cmd_key(self, args: argparse.Namespace) -> int:
    self.print_value(self.helper.generate_key())
    return EXIT_OK

  def cmd_sign(self, args: argparse.Namespace) -> int:
    key = args.key or os.getenv("URLSIGN_KEY")
    if not key:
      err_console.print("[red]No key given. Use --key or set URLSIGN_KEY.[/]")
      return EXIT_USAGE

    if args.days is not None:
      expires = self.helper.get_now_plus_days(args.days)
    elif args.hours is not None:
      expires = self.helper.get_now_plus_hours(args.hours)
    else:
      expires = self.helper.get_now_plus_minutes(args.minutes)

    self.print_value(self.helper.create_signed_url(args.url, expires, key))
    return EXIT_OK

  def cmd_verify(self, args: argparse.Namespace) -> int:
    keys = list(args.key or [])
    if not keys:
      keys = [k.strip() for k in os.getenv("URLSIGN_KEYS", "").split(",") if k.strip()]

    result = self.helper.validate_signed_url(args.url, keys)
    if not result:
      err_console.print("[red]The URL is not valid.[/]")
      return EXIT_INVALID

    self.print_value(result.token)
    return EXIT_OK

  def run(self, args: argparse.Namespace) -> int:
    handlers = {
      "token": self.cmd_token,
      "key": self.cmd_key,
      "sign": self.cmd_sign,
      "verify": self.cmd_verify,
    }
    try:
      return handlers[args.command](args)
    except UrlSigningError as e:
      err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
      return EXIT_USAGE


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="urlsign", description="Sign and verify expiring URLs")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
  parser.add_argument("--max-hours", type=int, default=None, help="Override the maximum active duration")
  parser.add_argument("--algo", default=None, help="HMAC digest: sha1, sha256 or sha512")
  sub = parser.add_subparsers(dest="command", required=True)

  sub.add_parser("token", help="Generate a 16 char token")
  sub.add_parser("key", help="Generate a 32 char signing key")

  sign = sub.add_parser("sign", help="Sign a URL")
  sign.add_argument("url", help="URL with a token query parameter")
  sign.add_argument("--key", help="Signing key (default: $URLSIGN_KEY)")
  window = sign.add_mutually_exclusive_group()
  window.add_argument("--minutes", type=int, default=60, help="Expire after N minutes (default 60)")
  window.add_argument("--hours", type=int, help="Expire after N hours")
  window.add_argument("--days", type=int, help="Expire after N days")

  verify = sub.add_parser("verify", help="Verify a signed URL and print its token")
  verify.add_argument("url", help="Signed URL")
  verify.add_argument(
    "--key",
    action="append",
    help="Candidate key, repeatable (default: comma-separated $URLSIGN_KEYS)"
  )
  return parser


def main(argv: Optional[list[str]] = None) -> int:
  """Main entry point."""
  parser = build_parser()
  args = parser.parse_args(argv)

  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.WARNING,
    format="%(asctime)s %(levelname)s %(name)s %(message)s"
  )

  overrides = {}
  if args.max_hours is not None:
    overrides["max_active_duration_hours"] = args.max_hours
  if args.algo is not None:
    overrides["hash_algorithm"] = args.algo

  try:
    config = SigningConfig(**overrides)
  except ValueError as e:
    err_console.print(f"Invalid configuration: {e}", style="red", markup=False, highlight=False)
    return EXIT_USAGE

  return UrlSignCLI(UrlSigningHelper(config)).run(args)


if __name__ == "__main__":
  sys.exit(main())
