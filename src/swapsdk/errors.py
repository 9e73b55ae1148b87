"""Errors raised by the swap client."""

from typing import Optional


class SwapAPIError(Exception):
    """Any failed call to the swap API.

    `code` is only set when the backend supplied one in its error body.
    Network failures and requests that could not be sent carry no code.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"SwapAPIError(message={self.message!r}, code={self.code!r})"
