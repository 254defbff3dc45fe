"""
Pytest fixtures for the tokenbound claimer tests.
"""
import pytest
from eth_account import Account
from web3.providers.rpc import HTTPProvider

from tokenbound_claimer.config import ClaimConfig, Settings
from tests.test_helpers import (
    create_test_client,
    create_test_api,
    TEST_RPC_URL,
    TEST_CLAIM_API_URL,
    TEST_PRIV_KEY,
    TEST_CLAIM_BODY,
)

# Chain id answered by the stubbed provider (Arbitrum One)
STUB_CHAIN_ID = "0xa4b1"


@pytest.fixture(autouse=True)
def _patch_http_provider(monkeypatch):
    """
    Stub every Web3 HTTP call so no DNS / network traffic is triggered.
    Works for all tests because it is autouse.
    """
    calls = []

    def _dummy(self, method, params=None, _=None):      # signature match
        calls.append(method)
        if method == "eth_chainId":
            return {"jsonrpc": "2.0", "id": 1, "result": STUB_CHAIN_ID}
        # everything else – return something harmless
        return {"jsonrpc": "2.0", "id": 1, "result": "0x0"}

    monkeypatch.setattr(HTTPProvider, "make_request", _dummy, raising=True)
    return calls


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    """Keep a developer's .env file out of the tests."""
    monkeypatch.setattr("tokenbound_claimer.cli.load_dotenv", lambda *a, **kw: False)


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any claimer variables."""
    for name in ("RPC_URL", "PRIVATE_KEY", "LOG_LEVEL", "VERIFY_CHAIN_ID"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def claim_env(clean_env):
    """Environment with a valid RPC endpoint and key."""
    clean_env.setenv("RPC_URL", TEST_RPC_URL)
    clean_env.setenv("PRIVATE_KEY", TEST_PRIV_KEY)
    return clean_env


@pytest.fixture
def settings():
    return Settings(rpc_url=TEST_RPC_URL, private_key=TEST_PRIV_KEY)


@pytest.fixture
def claim_config():
    return ClaimConfig(claim_api_url=TEST_CLAIM_API_URL)


@pytest.fixture
def client():
    return create_test_client()


@pytest.fixture
def api():
    return create_test_api()


@pytest.fixture
def wallet_address():
    return Account.from_key(TEST_PRIV_KEY).address


@pytest.fixture
def claim_body():
    return dict(TEST_CLAIM_BODY)
