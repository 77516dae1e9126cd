"""
Check that a saved token is accepted by the Kraken API.

Usage:
    python3 scripts/check_token.py [--credentials credentials.toml] [--timeout 30] [--verbose]

Without --credentials the credentials come from TWITCH_CLIENT_ID and
TWITCH_TOKEN. The Kraken root endpoint reports whether the token is valid
and which scopes it grants.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from twitch_client import (  # noqa: E402
    Credentials,
    TwitchAPIError,
    TwitchClient,
    TwitchConfigError,
    TwitchHTTPStatusError,
)
from twitch_client.logging_utils import setup_script_logging  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check a Twitch OAuth token.")
    parser.add_argument("--credentials", metavar="FILE", help="TOML credentials file")
    parser.add_argument("--timeout", type=float, default=30, help="request timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="log each request")
    return parser


def check_token(credentials: Credentials, timeout=30, session=None) -> bool:
    """Ask the Kraken root endpoint about the token. Returns True if it is valid."""
    logger.info("=" * 60)
    logger.info("TWITCH TOKEN CHECK")
    logger.info("=" * 60)
    logger.info("Client ID: %s...", credentials.client_id[:10])

    with TwitchClient.from_credentials(credentials, timeout=timeout, session=session) as client:
        try:
            kraken_root = client.fetch("/")
        except TwitchHTTPStatusError as e:
            logger.error("API returned %s: %s", e.status_code, e.response_body)
            return False
        except TwitchAPIError as e:
            logger.error("Request failed: %s", e)
            return False

    token = (kraken_root or {}).get("token") or {}
    if not token.get("valid"):
        logger.warning("Token is not valid")
        return False

    logger.info("Token is valid for user: %s", token.get("user_name", "N/A"))
    authorization = token.get("authorization") or {}
    logger.info("Scopes: %s", ", ".join(authorization.get("scopes", [])) or "none")
    return True


def main(argv=None, session=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.credentials:
            logger.info("Loading credentials from %s", args.credentials)
            credentials = Credentials.load_from_file(args.credentials)
        else:
            logger.info("Loading credentials from environment variables...")
            credentials = Credentials.from_env()
    except TwitchConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    return 0 if check_token(credentials, timeout=args.timeout, session=session) else 1


if __name__ == "__main__":
    setup_script_logging(verbose="--verbose" in sys.argv)
    sys.exit(main())
