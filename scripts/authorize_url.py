"""
Print an OAuth authorization URL for the application.

Usage:
    python3 scripts/authorize_url.py --redirect-uri http://localhost \
        [--credentials credentials.toml] [--scope user_read --scope chat_login] \
        [--state STATE] [--implicit] [--verbose]

Without --credentials the client ID comes from TWITCH_CLIENT_ID (a .env file
is honoured). Open the printed URL in a browser; Twitch redirects back with a
code (authorization code flow) or a token in the URL fragment (implicit flow).
"""

import argparse
import logging
import secrets
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from twitch_client import (  # noqa: E402
    Credentials,
    Scope,
    TwitchClient,
    TwitchConfigError,
    authorization_code_url,
    implicit_grant_url,
)
from twitch_client.logging_utils import setup_script_logging  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a Twitch OAuth authorization URL.")
    parser.add_argument("--credentials", metavar="FILE", help="TOML credentials file")
    parser.add_argument("--redirect-uri", required=True, help="redirect URI registered for the app")
    parser.add_argument(
        "--scope",
        dest="scopes",
        action="append",
        choices=[s.value for s in Scope],
        metavar="SCOPE",
        help="scope to request, repeatable (default: user_read)",
    )
    parser.add_argument("--state", help="opaque state value (default: random)")
    parser.add_argument("--implicit", action="store_true", help="use the implicit grant flow")
    parser.add_argument("--verbose", action="store_true", help="show debug output")
    return parser


def load_credentials(path):
    if path:
        logger.info("Loading credentials from %s", path)
        return Credentials.load_from_file(path)
    logger.info("Loading credentials from environment variables...")
    return Credentials.from_env()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        credentials = load_credentials(args.credentials)
    except TwitchConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    scopes = args.scopes or [Scope.USER_READ]
    state = args.state or secrets.token_hex(16)

    client = TwitchClient.from_credentials(credentials)
    if args.implicit:
        url = implicit_grant_url(client, args.redirect_uri, scopes, state)
    else:
        url = authorization_code_url(client, args.redirect_uri, scopes, state)

    logger.info("State: %s", state)
    print(url)
    return 0


if __name__ == "__main__":
    setup_script_logging(verbose="--verbose" in sys.argv)
    sys.exit(main())
