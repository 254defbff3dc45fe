"""
Claim run orchestration.

The run is strictly sequential: chain client, account, claim data, calldata,
execution parameters. Any failure aborts the whole run.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Type

from .claim_api import ClaimApiClient
from .config import ClaimConfig, Settings
from .encoding import encode_claim_call
from .exceptions import (
    AccountResolutionError,
    ChainClientError,
    ClaimerError,
    ClaimDataError,
    EncodingError,
    ExecutionPreparationError,
)
from .models import ClaimResult
from .tokenbound import TokenboundClient

logger = logging.getLogger(__name__)


@contextmanager
def _stage(name: str, error_cls: Type[ClaimerError]) -> Iterator[None]:
    """Re-raise foreign exceptions of a stage as that stage's error."""
    try:
        yield
    except ClaimerError:
        raise
    except Exception as e:
        logger.debug(f"Stage '{name}' failed with {type(e).__name__}")
        if issubclass(error_cls, ClaimDataError):
            raise error_cls(str(e)) from e
        raise error_cls(f"{name} failed: {e}") from e


def run_claim(
    settings: Settings,
    config: Optional[ClaimConfig] = None,
    client: Optional[TokenboundClient] = None,
    api: Optional[ClaimApiClient] = None
) -> ClaimResult:
    """
    Prepare the reward claim for a token-bound account.

    Args:
        settings: RPC endpoint and signing key
        config: Claim constants (defaults to the ether.fi EigenLayer claim)
        client: Pre-built chain client (built from settings if omitted)
        api: Pre-built claim API client (built from config if omitted)

    Returns:
        ClaimResult with the prepared execution parameters; nothing is sent

    Raises:
        ClaimerError: Subclass naming the stage that failed
    """
    config = config or ClaimConfig()

    with _stage("Chain client initialization", ChainClientError):
        if client is None:
            client = TokenboundClient(
                rpc_url=settings.rpc_url,
                chain_id=config.source_chain_id,
                priv_key=settings.private_key
            )
        if settings.verify_chain_id:
            client.assert_chain_id()
    logger.info(f"Initialized with wallet address: {client.address}")

    with _stage("Account resolution", AccountResolutionError):
        account = client.get_account(
            token_contract=config.token_contract,
            token_id=config.token_id
        )
    logger.info(f"TBA Address: {account}")

    logger.info("Fetching claim data...")
    with _stage("Claim data fetch", ClaimDataError):
        if api is None:
            api = ClaimApiClient(base_url=config.claim_api_url, timeout=config.request_timeout)
        claim_data = api.fetch_claim_data(account)
    logger.info(
        f"Claim data received: index={claim_data.index} amount={claim_data.amount} "
        f"proof_len={len(claim_data.proof)}"
    )
    logger.debug(f"Merkle proof: {claim_data.proof}")

    logger.info("Preparing cross-chain transaction...")
    with _stage("Claim encoding", EncodingError):
        claim_call = encode_claim_call(claim_data, account)

    with _stage("Execution preparation", ExecutionPreparationError):
        execution = client.prepare_execution(
            account=account,
            to=config.claim_contract,
            value=0,
            data=claim_call,
            chain_id=config.destination_chain_id
        )
    logger.info(f"Execution params: {execution.model_dump(by_alias=True)}")

    return ClaimResult(
        wallet_address=client.address,
        account=account,
        claim_data=claim_data,
        claim_call=claim_call,
        execution=execution,
    )
