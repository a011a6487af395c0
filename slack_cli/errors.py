class SlackCliError(Exception):
    """
    Base class for errors which abort a `slack-cli` invocation.

    The string form of each error is the message shown to the user.
    """

    pass


class TokenNotFound(SlackCliError):
    def __str__(self) -> str:
        return (
            "Slack API token not found. Set SLACK_API_KEY env var, "
            "or place token in ~/.slack/api-token or /etc/slack/api-token"
        )


class TokenReadError(SlackCliError):
    """
    Exception raised if a token file exists but could not be read.

    A missing token file is not an error. The resolver moves on to the next
    candidate path instead.
    """

    def __init__(self, path: str, cause: OSError):
        super().__init__(path, cause)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"Failed to read token file {self.path}: {self.cause}"


class StdinError(SlackCliError):
    def __init__(self, cause: Exception):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"Failed to read stdin: {self.cause}"


class HttpError(SlackCliError):
    """
    Exception raised if the request to Slack failed at the transport level.

    This covers connection failures, timeouts, HTTP error statuses and
    response bodies that are not a valid Slack API response.
    """

    def __init__(self, cause: object):
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"HTTP request failed: {self.cause}"


class SlackApiError(SlackCliError):
    """
    Exception raised if the Slack API responded with `"ok": false`.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Slack API error: {self.message}"


class NoMessage(SlackCliError):
    def __str__(self) -> str:
        return "No message provided"


class InvalidColor(SlackCliError):
    def __init__(self, color: str):
        super().__init__(color)
        self.color = color

    def __str__(self) -> str:
        return (
            f"invalid color '{self.color}': expected #RRGGBB or keyword "
            "(good, success, warning, danger, error)"
        )


class InvalidBlocksJson(SlackCliError):
    """
    Exception raised if user-supplied Block Kit JSON is unusable.

    :param reason: Description of the problem, eg. "blocks array is empty"
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"Invalid blocks JSON: {self.reason}"
