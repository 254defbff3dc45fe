"""
Tokenbound claimer - prepares reward claims for ERC-6551 token-bound accounts.
"""
from .version import __version__
from .claim_api import ClaimApiClient
from .config import ClaimConfig, Settings
from .encoding import CLAIM_ABI, encode_claim_call
from .exceptions import (
    ClaimerError,
    ConfigurationError,
    ChainClientError,
    ChainMismatchError,
    AccountResolutionError,
    ClaimDataError,
    ClaimDataHTTPError,
    ClaimDataParseError,
    ClaimDataTransportError,
    EncodingError,
    ExecutionPreparationError,
)
from .models import ClaimData, ClaimResult, ExecutionParams
from .runner import run_claim
from .tokenbound import TokenboundClient

__all__ = [
    "__version__",
    "ClaimApiClient",
    "ClaimConfig",
    "Settings",
    "CLAIM_ABI",
    "encode_claim_call",
    "ClaimerError",
    "ConfigurationError",
    "ChainClientError",
    "ChainMismatchError",
    "AccountResolutionError",
    "ClaimDataError",
    "ClaimDataHTTPError",
    "ClaimDataParseError",
    "ClaimDataTransportError",
    "EncodingError",
    "ExecutionPreparationError",
    "ClaimData",
    "ClaimResult",
    "ExecutionParams",
    "run_claim",
    "TokenboundClient",
]
