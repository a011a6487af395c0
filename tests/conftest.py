"""Shared pytest fixtures for slack-cli tests."""

import json

import pytest

from slack_cli.slack import SlackResponse


class FakeSlackClient:
    """Transport which records posted payloads and returns a canned response."""

    def __init__(self, response=None):
        self.response = response or SlackResponse(ok=True)
        self.calls = []

    def post_message(self, token, payload):
        self.calls.append((token, payload))
        return self.response

    @property
    def posted_json(self):
        assert self.calls, "no message was posted"
        return json.loads(self.calls[-1][1].decode("utf-8"))


@pytest.fixture
def fake_client():
    return FakeSlackClient()


@pytest.fixture
def make_client():
    def make(ok=True, error=None, warning=None):
        return FakeSlackClient(SlackResponse(ok=ok, error=error, warning=warning))

    return make
