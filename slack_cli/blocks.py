"""
Block Kit blocks and `chat.postMessage` payloads.

See https://api.slack.com/reference/block-kit/blocks and
https://api.slack.com/methods/chat.postMessage.
"""

from dataclasses import dataclass, field
import json
from typing import Any, Union


@dataclass(frozen=True)
class HeaderBlock:
    text: str
    """Plain text shown in a large bold font above the message."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "header", "text": {"type": "plain_text", "text": self.text}}


@dataclass(frozen=True)
class SectionBlock:
    text: str
    """Message text using Slack's "mrkdwn" format."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "section", "text": {"type": "mrkdwn", "text": self.text}}


Block = Union[HeaderBlock, SectionBlock]

# Blocks supplied by the user as JSON are sent as-is.
RawBlock = dict[str, Any]


def block_to_dict(block: Union[Block, RawBlock]) -> dict[str, Any]:
    if isinstance(block, dict):
        return block
    return block.to_dict()


@dataclass
class BlocksPayload:
    """
    Message with blocks at the top level and no sidebar color.
    """

    channel: str

    text: str
    """
    Plain text version of the message.

    Slack uses this for notifications, so it is sent even though the blocks
    contain the same content.
    """

    blocks: list[Union[Block, RawBlock]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "channel": self.channel,
            "text": self.text,
            "blocks": [block_to_dict(b) for b in self.blocks],
        }

    def to_json(self) -> bytes:
        return _encode(self.to_dict())


@dataclass
class Attachment:
    color: str
    """Sidebar color as a `#rrggbb` hex string."""

    blocks: list[Union[Block, RawBlock]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "blocks": [block_to_dict(b) for b in self.blocks],
        }


@dataclass
class AttachmentPayload:
    """
    Message whose blocks are wrapped in a single colored attachment.

    Slack only draws a colored sidebar for legacy attachments, so this form
    is used whenever a color is requested and the message is small enough.
    """

    channel: str
    attachments: list[Attachment]
    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "channel": self.channel,
            "text": self.text,
            "attachments": [a.to_dict() for a in self.attachments],
        }

    def to_json(self) -> bytes:
        return _encode(self.to_dict())


Payload = Union[BlocksPayload, AttachmentPayload]


def _encode(body: dict[str, Any]) -> bytes:
    return json.dumps(body, ensure_ascii=False).encode("utf-8")
