"""
Errors raised inside a summarization attempt.

None of these escape ``summarize()``; the client turns them into the
``Error: ...`` string shown on the page.
"""


class SummaryError(Exception):
    """Base exception for summarization failures."""

    pass


class MalformedResponseError(SummaryError):
    """Raised when a success response carries no generated text."""

    def __init__(self, message: str = "API response was valid, but missing generated text content."):
        super().__init__(message)
