import logging
from typing import Optional, Union

from .blocks import (
    Attachment,
    AttachmentPayload,
    Block,
    BlocksPayload,
    HeaderBlock,
    Payload,
    RawBlock,
    SectionBlock,
)
from .chunking import chunk_text

logger = logging.getLogger(__name__)

ATTACHMENT_TEXT_MAX = 4000
"""Largest message, in UTF-8 bytes, that is sent as a colored attachment."""

SECTION_TEXT_MAX = 3000
"""Maximum length of the text in a single section block."""


def build_blocks(message: str, title: Optional[str] = None) -> list[Block]:
    """
    Build the blocks for a message: an optional header followed by sections.

    Long messages are split over several section blocks, since Slack limits
    the length of each section's text.
    """
    blocks: list[Block] = []
    if title is not None:
        blocks.append(HeaderBlock(title))
    for chunk in chunk_text(message, SECTION_TEXT_MAX):
        blocks.append(SectionBlock(chunk))
    return blocks


def build_message(
    channel: str,
    message: str,
    title: Optional[str] = None,
    color: Optional[str] = None,
    raw_blocks: Optional[list[RawBlock]] = None,
) -> tuple[Payload, Optional[str]]:
    """
    Build the `chat.postMessage` payload for a message.

    If `color` is set and the message fits in an attachment, the blocks are
    wrapped in an attachment with that sidebar color. Otherwise the color is
    dropped, with a warning, and the blocks are sent at the top level.

    :param color: Resolved `#rrggbb` color, see `resolve_color`
    :param raw_blocks: Block Kit blocks to send instead of ones generated
        from `message` and `title`
    :return: Tuple of payload and an optional warning for the user
    """
    warning = None
    if color is not None and len(message.encode("utf-8")) > ATTACHMENT_TEXT_MAX:
        warning = f"Message exceeds {ATTACHMENT_TEXT_MAX} chars; sending without color"
        color = None

    blocks: list[Union[Block, RawBlock]]
    if raw_blocks is not None:
        blocks = list(raw_blocks)
    else:
        blocks = list(build_blocks(message, title))

    if color is not None:
        logger.debug("Sending %d blocks in attachment with color %s", len(blocks), color)
        return (
            AttachmentPayload(
                channel=channel, attachments=[Attachment(color=color, blocks=blocks)]
            ),
            warning,
        )

    logger.debug("Sending %d blocks", len(blocks))
    return BlocksPayload(channel=channel, text=message, blocks=blocks), warning
