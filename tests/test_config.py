"""
Tests for Settings and ClaimConfig.
"""
import pytest
from eth_utils import is_checksum_address
from pydantic import ValidationError

from tokenbound_claimer.config import (
    ARBITRUM_CHAIN_ID,
    ETHEREUM_CHAIN_ID,
    ClaimConfig,
    Settings,
)
from tokenbound_claimer.exceptions import ConfigurationError
from tests.test_helpers import TEST_RPC_URL, TEST_PRIV_KEY


def test_settings_from_env():
    settings = Settings.from_env({"RPC_URL": TEST_RPC_URL, "PRIVATE_KEY": TEST_PRIV_KEY})

    assert settings.rpc_url == TEST_RPC_URL
    assert settings.private_key == TEST_PRIV_KEY
    assert settings.log_level == "INFO"
    assert settings.verify_chain_id is False


def test_settings_from_os_environ(claim_env):
    claim_env.setenv("LOG_LEVEL", "debug")
    claim_env.setenv("VERIFY_CHAIN_ID", "true")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.verify_chain_id is True


@pytest.mark.parametrize("missing", ["RPC_URL", "PRIVATE_KEY"])
def test_settings_missing_variable(missing):
    env = {"RPC_URL": TEST_RPC_URL, "PRIVATE_KEY": TEST_PRIV_KEY}
    env[missing] = "  "

    with pytest.raises(ConfigurationError, match=f"{missing} is not set"):
        Settings.from_env(env)


def test_settings_invalid_private_key_is_not_echoed():
    bad_key = "0xdeadbeef"

    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env({"RPC_URL": TEST_RPC_URL, "PRIVATE_KEY": bad_key})

    assert "not a valid secp256k1 private key" in str(exc_info.value)
    assert bad_key not in str(exc_info.value)


def test_settings_repr_hides_private_key():
    settings = Settings(rpc_url=TEST_RPC_URL, private_key=TEST_PRIV_KEY)
    assert TEST_PRIV_KEY not in repr(settings)


@pytest.mark.parametrize("rpc_url", [
    "http://10.0.0.5:8545",
    "http://rpc.example.com",
    "ws://node.internal:8546",
])
def test_settings_accepts_any_rpc_scheme(rpc_url):
    settings = Settings.from_env({"RPC_URL": rpc_url, "PRIVATE_KEY": TEST_PRIV_KEY})
    assert settings.rpc_url == rpc_url


def test_settings_rejects_rpc_url_without_host():
    with pytest.raises(ConfigurationError, match="RPC_URL is missing a host"):
        Settings.from_env({"RPC_URL": "not-a-url", "PRIVATE_KEY": TEST_PRIV_KEY})


def test_claim_config_requires_https_api_url():
    with pytest.raises(ValidationError, match="must use https"):
        ClaimConfig(claim_api_url="http://claim.example.com/api")


def test_settings_rejects_unknown_log_level():
    with pytest.raises(ConfigurationError, match="log_level"):
        Settings.from_env({"RPC_URL": TEST_RPC_URL, "PRIVATE_KEY": TEST_PRIV_KEY, "LOG_LEVEL": "chatty"})


def test_claim_config_defaults():
    config = ClaimConfig()

    assert config.token_contract.lower() == "0xd022977a22f9a681df8f3c51ed9ad144bdc5bb38"
    assert config.token_id == 539
    assert config.claim_contract.lower() == "0x2ec90ef34e312a855becf74762d198d8369eece1"
    assert config.source_chain_id == ARBITRUM_CHAIN_ID == 42161
    assert config.destination_chain_id == ETHEREUM_CHAIN_ID == 1
    assert config.claim_api_url == "https://claim.ether.fi/api/eigenlayer-claim-data"


def test_claim_config_checksums_addresses():
    config = ClaimConfig(token_contract="0xd022977a22f9a681df8f3c51ed9ad144bdc5bb38")
    assert is_checksum_address(config.token_contract)
    assert config.token_contract.lower() == "0xd022977a22f9a681df8f3c51ed9ad144bdc5bb38"


@pytest.mark.parametrize("field, value", [
    ("token_contract", "0x1234"),
    ("claim_contract", "nope"),
    ("token_id", -1),
    ("source_chain_id", 0),
    ("destination_chain_id", -5),
    ("claim_api_url", "ftp://claim.example.com"),
    ("request_timeout", 0),
])
def test_claim_config_rejects_invalid_values(field, value):
    with pytest.raises(ValidationError):
        ClaimConfig(**{field: value})


def test_claim_config_is_frozen():
    config = ClaimConfig()
    with pytest.raises(ValidationError):
        config.token_id = 1
