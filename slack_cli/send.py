from dataclasses import dataclass
import logging
from typing import Any, Optional

from .colors import resolve_color
from .errors import SlackApiError
from .message import build_message
from .slack import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendConfig:
    channel: str
    """Channel name or ID, eg. "#general" or "C01234567"."""

    message: str
    """Message text using Slack's "mrkdwn" format."""

    token: str
    """Slack API token."""

    color: Optional[str] = None
    """Sidebar color keyword or hex string, as given by the user."""

    title: Optional[str] = None
    """Title shown as a header block above the message."""

    blocks: Optional[list[dict[str, Any]]] = None
    """Block Kit blocks to send in place of ones generated from the message."""


@dataclass
class SendResult:
    ok: bool
    warning: Optional[str] = None


def send_message(client: Transport, config: SendConfig) -> SendResult:
    """
    Post a message to Slack.

    If the message was sent but something about it was not as requested
    (eg. the color was dropped because the message is too long for an
    attachment), the result includes a warning. A warning from this tool
    takes priority over one reported by Slack.

    :raises InvalidColor: If `config.color` is not a valid color. This is
        checked before anything is sent.
    :raises HttpError: If the request to Slack failed
    :raises SlackApiError: If Slack rejected the message
    """
    color = resolve_color(config.color) if config.color is not None else None

    payload, warning = build_message(
        channel=config.channel,
        message=config.message,
        title=config.title,
        color=color,
        raw_blocks=config.blocks,
    )

    logger.debug("Posting message to %s", config.channel)
    response = client.post_message(config.token, payload.to_json())
    if not response.ok:
        raise SlackApiError(response.error or "unknown error")

    if warning is None:
        warning = response.warning

    return SendResult(ok=True, warning=warning)
