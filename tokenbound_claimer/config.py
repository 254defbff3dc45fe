"""
Configuration for a claim run.

Settings holds the secrets read from the environment, ClaimConfig holds the
on-chain constants of the claim (token, contracts, chains, API endpoint).
"""
import logging
import os
from typing import Mapping, Optional

from eth_account import Account
from eth_utils import is_address, to_checksum_address
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigurationError
from .utils import validate_url

# Chains
ARBITRUM_CHAIN_ID = 42161
ETHEREUM_CHAIN_ID = 1

# Defaults for the ether.fi EigenLayer claim
DEFAULT_TOKEN_CONTRACT = "0xd022977a22f9a681df8f3c51ed9ad144bdc5bb38"
DEFAULT_TOKEN_ID = 539
DEFAULT_CLAIM_CONTRACT = "0x2ec90ef34e312a855becf74762d198d8369eece1"
DEFAULT_CLAIM_API_URL = "https://claim.ether.fi/api/eigenlayer-claim-data"

_TRUE_VALUES = ("1", "true", "yes", "on")


class ClaimConfig(BaseModel):
    """Constants describing which reward is claimed, for which account, where"""
    model_config = ConfigDict(frozen=True, validate_default=True)

    token_contract: str = DEFAULT_TOKEN_CONTRACT
    token_id: int = Field(DEFAULT_TOKEN_ID, ge=0)
    claim_contract: str = DEFAULT_CLAIM_CONTRACT
    source_chain_id: int = Field(ARBITRUM_CHAIN_ID, gt=0)
    destination_chain_id: int = Field(ETHEREUM_CHAIN_ID, gt=0)
    claim_api_url: str = DEFAULT_CLAIM_API_URL
    request_timeout: float = Field(30, gt=0)

    @field_validator("token_contract", "claim_contract")
    @classmethod
    def _checksum(cls, value: str) -> str:
        if not is_address(value):
            raise ValueError(f"invalid address: {value!r}")
        return to_checksum_address(value)

    @field_validator("claim_api_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        return validate_url("claim_api_url", value)


class Settings(BaseModel):
    """Connection and signing secrets"""

    rpc_url: str
    private_key: str = Field(..., repr=False)
    log_level: str = "INFO"
    verify_chain_id: bool = False

    @field_validator("rpc_url")
    @classmethod
    def _check_rpc_url(cls, value: str) -> str:
        # Scheme is left to the web3 provider
        return validate_url("RPC_URL", value, require_https=False)

    @field_validator("private_key")
    @classmethod
    def _check_private_key(cls, value: str) -> str:
        try:
            Account.from_key(value)
        except Exception:
            # Never echo the key back
            raise ValueError("PRIVATE_KEY is not a valid secp256k1 private key") from None
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If RPC_URL or PRIVATE_KEY is missing or invalid
        """
        env = os.environ if environ is None else environ

        for name in ("RPC_URL", "PRIVATE_KEY"):
            if not env.get(name, "").strip():
                raise ConfigurationError(f"Required environment variable {name} is not set")

        try:
            return cls(
                rpc_url=env["RPC_URL"].strip(),
                private_key=env["PRIVATE_KEY"].strip(),
                log_level=env.get("LOG_LEVEL", "INFO"),
                verify_chain_id=env.get("VERIFY_CHAIN_ID", "").strip().lower() in _TRUE_VALUES,
            )
        except ValidationError as e:
            raise ConfigurationError(_describe(e)) from None


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic error without including input values."""
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "settings"
        parts.append(f"{field}: {item['msg']}")
    return "Invalid configuration: " + "; ".join(parts)
