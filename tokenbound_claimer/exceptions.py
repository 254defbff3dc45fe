"""
Exceptions for the tokenbound claimer.

Every stage of a claim run raises its own subclass of ClaimerError so the
entry point can tell a configuration problem from a network failure.
"""
from typing import Optional


class ClaimerError(Exception):
    """Base exception for claim run failures."""
    pass


class ConfigurationError(ClaimerError):
    """Raised when required settings are missing or malformed."""
    pass


class ChainClientError(ClaimerError):
    """Raised when the chain client cannot be built or reached."""
    pass


class ChainMismatchError(ChainClientError):
    """Raised when the RPC endpoint reports an unexpected chain id."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Chain ID mismatch: expected {expected}, got {actual}")


class AccountResolutionError(ClaimerError):
    """Raised when the token-bound account address cannot be derived."""
    pass


class ClaimDataError(ClaimerError):
    """Raised when claim data cannot be fetched from the claim API."""

    def __init__(self, message: str):
        super().__init__(f"Failed to fetch claim data: {message}")


class ClaimDataHTTPError(ClaimDataError):
    """Raised when the claim API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed with status {status_code}")


class ClaimDataParseError(ClaimDataError):
    """Raised when the claim API body is not valid claim data."""
    pass


class ClaimDataTransportError(ClaimDataError):
    """Raised when the claim API cannot be reached."""
    pass


class EncodingError(ClaimerError):
    """Raised when the claim call cannot be ABI-encoded."""
    pass


class ExecutionPreparationError(ClaimerError):
    """Raised when execution parameters cannot be prepared."""
    pass
