from dataclasses import dataclass, field
import logging
import os
from typing import Optional

from .errors import TokenNotFound, TokenReadError

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "SLACK_API_KEY"

# Errors which mean "no usable token here" rather than a failure to read one.
_SKIPPED_ERRORS = (
    FileNotFoundError,
    IsADirectoryError,
    NotADirectoryError,
    PermissionError,
    UnicodeDecodeError,
)


@dataclass
class TokenConfig:
    env_var: str = TOKEN_ENV_VAR
    """Environment variable checked before any token file."""

    file_paths: list[str] = field(default_factory=list)
    """Token files, in the order they are tried."""

    @classmethod
    def default(cls) -> "TokenConfig":
        home = os.environ.get("HOME", "")
        return cls(
            env_var=TOKEN_ENV_VAR,
            file_paths=[f"{home}/.slack/api-token", "/etc/slack/api-token"],
        )


def _read_token_file(path: str) -> Optional[str]:
    try:
        with open(path, encoding="utf-8") as fp:
            return fp.read().strip()
    except _SKIPPED_ERRORS as exc:
        logger.debug("Skipping token file %s: %s", path, exc)
        return None
    except OSError as exc:
        raise TokenReadError(path, exc) from exc


def resolve_token(config: Optional[TokenConfig] = None) -> str:
    """
    Find the Slack API token.

    This will read from the env var named by `config.env_var` if it is set
    and not blank, or otherwise the first token file that exists and is not
    blank. Surrounding whitespace is removed from the token.

    :raises TokenNotFound: If no token was found
    :raises TokenReadError: If a token file exists but could not be read
    """
    if config is None:
        config = TokenConfig.default()

    token = os.environ.get(config.env_var, "").strip()
    if token:
        logger.debug("Using token from $%s", config.env_var)
        return token

    for path in config.file_paths:
        token = _read_token_file(path)
        if token:
            logger.debug("Using token from %s", path)
            return token

    raise TokenNotFound()
