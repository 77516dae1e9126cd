"""
Logging setup for scripts using the Twitch client.

Console output tags each record with a colored level and a short logger
name. OAuth tokens are masked before any handler writes a record, so request
lines and error messages can be logged without leaking credentials.
"""

import logging
import os
import re
import sys

LOG_FILE_ENV = "TWITCH_CLIENT_LOG_FILE"
PACKAGE_LOGGER = "twitch_client"

_RESET = "\033[0m"
_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}

# "OAuth <token>" headers, "oauth:<token>" chat passwords, token query params
_TOKEN_PATTERN = re.compile(
    r"(OAuth\s+|oauth:|(?:access_)?token=)([^\s&\"',]+)", re.IGNORECASE
)


def redact_tokens(text: str) -> str:
    """
    Replace OAuth token values in ``text`` with ``***``.

    Examples:
        >>> redact_tokens("Authorization: OAuth cfabdegwdoklmawdzdo98xt2fo512y")
        'Authorization: OAuth ***'
    """
    return _TOKEN_PATTERN.sub(r"\1***", text)


class TokenRedactingFilter(logging.Filter):
    """Mask OAuth tokens in the fully formatted message of each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class ConsoleFormatter(logging.Formatter):
    """
    Formatter for terminal output: ``LEVEL  name: message``.

    Loggers inside the package are shown without the ``twitch_client.``
    prefix (``core.client`` instead of ``twitch_client.core.client``). The
    level tag is colored when ``use_color`` is true, which defaults to
    whether stderr is a TTY.
    """

    def __init__(self, use_color=None, datefmt=None):
        super().__init__("%(message)s", datefmt)
        if use_color is None:
            isatty = getattr(sys.stderr, "isatty", None)
            use_color = bool(isatty and isatty())
        self.use_color = use_color

    @staticmethod
    def short_name(name: str) -> str:
        prefix = PACKAGE_LOGGER + "."
        return name[len(prefix):] if name.startswith(prefix) else name

    def format(self, record):
        message = super().format(record)
        level = f"{record.levelname:<7}"
        if self.use_color and record.levelno in _LEVEL_COLORS:
            level = _LEVEL_COLORS[record.levelno] + level + _RESET
        return f"{level} {self.short_name(record.name)}: {message}"


def setup_script_logging(verbose=False, log_file=None):
    """
    Configure the root logger for a script.

    Args:
        verbose: Also show the client's DEBUG records (one line per request,
                 credentials file access).
        log_file: Optional file receiving the same records without color.
                  The TWITCH_CLIENT_LOG_FILE env var, if set, overrides it.

    Returns:
        The list of handlers installed on the root logger.
    """
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for h in root.handlers[:]:
        root.removeHandler(h)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)

    redacting = TokenRedactingFilter()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter())
    console.addFilter(redacting)
    handlers = [console]

    path = os.environ.get(LOG_FILE_ENV) or log_file
    if path:
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        fh.addFilter(redacting)
        handlers.append(fh)

    for h in handlers:
        root.addHandler(h)
    return handlers
