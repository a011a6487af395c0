from argparse import ArgumentParser
from importlib.metadata import PackageNotFoundError, version
import json
import logging
import sys
from typing import Any, Optional, TextIO

from blessings import Terminal  # type: ignore

from .auth import resolve_token
from .errors import InvalidBlocksJson, NoMessage, SlackCliError, StdinError
from .send import SendConfig, send_message
from .slack import SlackClient

MAX_BLOCKS = 100
"""Maximum number of blocks Slack accepts in one message."""


def read_stdin(stdin: TextIO) -> str:
    try:
        return stdin.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise StdinError(exc) from exc


def read_message(message: Optional[str], stdin: TextIO) -> str:
    """
    Get the message text from the `--message` arg or stdin.

    stdin is only read if input has been piped in. Running without a message
    from an interactive terminal is an error rather than a prompt.
    """
    if message is not None:
        if not message.strip():
            raise NoMessage()
        return message

    if stdin.isatty():
        raise NoMessage()

    text = read_stdin(stdin).strip()
    if not text:
        raise NoMessage()
    return text


def parse_blocks_json(blocks_json: str) -> list[dict[str, Any]]:
    """
    Parse and sanity-check a JSON array of Block Kit blocks.

    Only the overall shape is checked here. Slack validates the blocks
    themselves.
    """
    try:
        value = json.loads(blocks_json)
    except ValueError as exc:
        raise InvalidBlocksJson(str(exc)) from exc

    if not isinstance(value, list):
        raise InvalidBlocksJson("expected a JSON array")
    if not value:
        raise InvalidBlocksJson("blocks array is empty")
    if len(value) > MAX_BLOCKS:
        raise InvalidBlocksJson(f"too many blocks (max {MAX_BLOCKS})")
    if not all(isinstance(block, dict) for block in value):
        raise InvalidBlocksJson("each block must be a JSON object")

    return value


def read_blocks(source: str, stdin: TextIO) -> list[dict[str, Any]]:
    """
    Read blocks from a file, or from stdin if `source` is "-".
    """
    if source == "-":
        if stdin.isatty():
            raise InvalidBlocksJson("no input piped to stdin")
        blocks_json = read_stdin(stdin)
    else:
        try:
            with open(source, encoding="utf-8") as fp:
                blocks_json = fp.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidBlocksJson(f"failed to read file '{source}': {exc}") from exc

    return parse_blocks_json(blocks_json)


def _version() -> str:
    try:
        return version("slack-cli")
    except PackageNotFoundError:
        return "unknown"


def run(argv: Optional[list[str]] = None, stdin: Optional[TextIO] = None) -> Optional[str]:
    """
    Send a message as specified by command-line arguments.

    :return: Warning to show the user, if any
    """
    if stdin is None:
        stdin = sys.stdin

    parser = ArgumentParser(prog="slack-cli", description="Send messages to Slack")
    parser.add_argument(
        "--channel",
        "-c",
        required=True,
        help="""Channel name or ID (eg. "#general" or "C01234567")""",
    )
    parser.add_argument(
        "--message", "-m", help="Message text (reads from stdin if omitted)"
    )
    parser.add_argument(
        "--color",
        help="""Sidebar color, either "#RRGGBB" or one of good, success, warning, danger, error""",
    )
    content = parser.add_mutually_exclusive_group()
    content.add_argument(
        "--title", "-t", help="Title displayed as a header above the message"
    )
    content.add_argument(
        "--blocks",
        nargs="?",
        const="-",
        metavar="FILE",
        help="JSON array of Block Kit blocks to send (reads from stdin if FILE is omitted)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    blocks = None
    if args.blocks is not None:
        blocks = read_blocks(args.blocks, stdin)
        message = args.message or ""
    else:
        message = read_message(args.message, stdin)

    token = resolve_token()

    config = SendConfig(
        channel=args.channel,
        message=message,
        token=token,
        color=args.color,
        title=args.title,
        blocks=blocks,
    )
    result = send_message(SlackClient(), config)
    return result.warning


def main(argv: Optional[list[str]] = None) -> int:
    t = Terminal(stream=sys.stderr)

    try:
        warning = run(argv)
    except SlackCliError as exc:
        print(f"{t.bold_red}Error:{t.normal} {exc}", file=sys.stderr)
        return 1

    if warning:
        print(f"{t.yellow}Warning:{t.normal} {warning}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
