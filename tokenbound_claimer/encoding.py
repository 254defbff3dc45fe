"""
Calldata for the EigenLayer claim contract.
"""
import logging

from eth_utils import is_address, to_checksum_address

from .exceptions import EncodingError
from .models import ClaimData
from .utils import encode_function_call

logger = logging.getLogger(__name__)

# Claim contract ABI (only the function we need)
CLAIM_ABI = [
    {
        "inputs": [
            {"internalType": "uint256", "name": "index", "type": "uint256"},
            {"internalType": "address", "name": "account", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "bytes32[]", "name": "merkleProof", "type": "bytes32[]"}
        ],
        "name": "claim",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]

CLAIM_FUNCTION = CLAIM_ABI[0]


def encode_claim_call(claim_data: ClaimData, account: str) -> str:
    """
    Encode ``claim(index, account, amount, merkleProof)``.

    Args:
        claim_data: Claim entry for the account
        account: Account receiving the claim

    Returns:
        0x-prefixed calldata

    Raises:
        EncodingError: If the values do not fit the ABI
    """
    try:
        if not is_address(account):
            raise ValueError(f"invalid account address: {account!r}")
        calldata = encode_function_call(
            CLAIM_FUNCTION,
            [claim_data.index, to_checksum_address(account), claim_data.amount, claim_data.proof_bytes()]
        )
    except Exception as e:
        logger.error(f"Claim encoding failed: {e}")
        raise EncodingError(f"Failed to encode claim call: {e}") from e

    logger.debug(f"Encoded claim call ({(len(calldata) - 2) // 2} bytes)")
    return calldata
