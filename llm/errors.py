"""
Failures raised while talking to the chat-completion provider.

They never leave SarvamChatClient.dispatch(): the client converts them into
a failed CompletionResult so a bad turn never ends the farmer's session.
"""

from typing import Optional


class AdvisoryError(Exception):
    """Base class for every advisory-core failure."""


class ConfigurationError(AdvisoryError):
    """Required credential or setting is missing."""


class InvalidConversationError(AdvisoryError):
    """Message list breaks an upstream requirement (first turn must be user)."""


class UpstreamHTTPError(AdvisoryError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Sarvam API error: {status_code} - {body}")


class UpstreamEmptyResponseError(AdvisoryError):
    def __init__(self, message: str = "No response from Sarvam API"):
        super().__init__(message)


class NetworkError(AdvisoryError):
    def __init__(self, message: str, cause: Optional[Exception] = None):
        self.cause = cause
        super().__init__(message)
