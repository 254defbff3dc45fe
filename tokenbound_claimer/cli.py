"""
Command-line entry point for a claim run.
"""
import logging
import sys
from typing import Optional

import requests
from dotenv import load_dotenv
from web3.exceptions import Web3Exception

from .config import ClaimConfig, Settings
from .runner import run_claim

logger = logging.getLogger("tokenbound_claimer")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _provider_error(error: BaseException) -> Optional[str]:
    """Message of the transport or RPC error a claim error wraps, if any."""
    cause = error.__cause__
    if not isinstance(cause, (requests.RequestException, Web3Exception)):
        return None
    # requests reports undecodable bodies as a RequestException too
    if isinstance(cause, requests.exceptions.InvalidJSONError):
        return None
    # web3 RPC errors keep the node's error object on the exception
    rpc_response = getattr(cause, "rpc_response", None)
    if isinstance(rpc_response, dict) and isinstance(rpc_response.get("error"), dict):
        message = rpc_response["error"].get("message")
        if message:
            return str(message)
    return str(cause) or type(cause).__name__


def main(config: Optional[ClaimConfig] = None) -> int:
    """
    Run one claim preparation.

    Returns:
        Process exit code: 0 on success, 1 on any error
    """
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)

    try:
        settings = Settings.from_env()
        logging.getLogger().setLevel(settings.log_level)
        run_claim(settings, config=config)
    except Exception as e:
        logger.error(f"Error: {e}")
        provider_message = _provider_error(e)
        if provider_message:
            logger.error(f"Provider error: {provider_message}")
        return 1

    return 0
