from dataclasses import dataclass
import logging
from typing import Any, Optional, Protocol

import requests

from .errors import HttpError

logger = logging.getLogger(__name__)

SLACK_API_URL = "https://slack.com/api/chat.postMessage"

DEFAULT_TIMEOUT = 30
"""Timeout in seconds for requests to the Slack API."""


@dataclass
class SlackResponse:
    ok: bool
    """Whether Slack accepted the request."""

    error: Optional[str] = None
    """Error code (eg. "channel_not_found") if `ok` is false."""

    warning: Optional[str] = None
    """Non-fatal problem reported by Slack, eg. "missing_charset"."""

    @classmethod
    def from_json(cls, body: Any) -> "SlackResponse":
        """
        Parse the decoded JSON body of a Slack Web API response.

        :raises HttpError: If the body is not a Slack API response
        """
        if not is_api_response(body):
            raise HttpError(f"unexpected response body: {body!r}")
        return cls(ok=body["ok"], error=body.get("error"), warning=body.get("warning"))


def is_api_response(body: Any) -> bool:
    return isinstance(body, dict) and isinstance(body.get("ok"), bool)


class Transport(Protocol):
    def post_message(self, token: str, payload: bytes) -> SlackResponse:
        ...


class SlackClient:
    """
    Client for posting messages to Slack.

    See https://api.slack.com/methods/chat.postMessage.
    """

    def __init__(self, api_url: str = SLACK_API_URL, timeout: float = DEFAULT_TIMEOUT):
        self.api_url = api_url
        self.timeout = timeout

    def post_message(self, token: str, payload: bytes) -> SlackResponse:
        """
        Post a message to a Slack channel.

        :param token: Bot or user token with the `chat:write` scope
        :param payload: JSON-encoded `chat.postMessage` arguments
        :raises HttpError: If the request failed or the response is unusable
        """
        try:
            rsp = requests.post(
                self.api_url,
                data=payload,
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json; charset=utf-8",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise HttpError(exc) from exc
        logger.debug("Slack responded with HTTP %s", rsp.status_code)

        # Error statuses such as 429 may still carry an API response body.
        try:
            body = rsp.json()
        except requests.RequestException:
            body = None

        if not is_api_response(body):
            try:
                rsp.raise_for_status()
            except requests.HTTPError as exc:
                raise HttpError(exc) from exc
        return SlackResponse.from_json(body)
